from fastapi import FastAPI

from api.mcp import router as mcp_router
from api.schemas import HealthResponse
from calc_mcp.config import get_settings
from calc_mcp.utils.logging import setup_logging


settings = get_settings()
setup_logging(settings.log_level)

app = FastAPI(title="Calculator MCP API", version=settings.server_version)
app.include_router(mcp_router)


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(
        status="ok",
        name=settings.server_name,
        version=settings.server_version,
    )
