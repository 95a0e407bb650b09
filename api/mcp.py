from fastapi import APIRouter, Body
from typing import Dict, Any, List

from api.schemas import CallToolResponse
from calc_mcp.server import CalculatorServer

router = APIRouter(prefix="/mcp", tags=["mcp"])
server = CalculatorServer()


@router.get("/tools")
def list_tools() -> List[Dict[str, Any]]:
    return server.list_tools()


@router.post("/call/{tool_name}", response_model=CallToolResponse)
def call_tool(tool_name: str, arguments: Any = Body(default=None)):
    result = server.call_tool(tool_name, arguments)
    return CallToolResponse.from_result(tool_name, result)
