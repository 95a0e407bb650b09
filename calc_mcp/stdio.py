import logging
import sys
from typing import Any, Dict, List, Optional

import anyio
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from calc_mcp.config import get_settings
from calc_mcp.server import CalculatorServer
from calc_mcp.utils.logging import setup_logging

logger = logging.getLogger(__name__)

calculator = CalculatorServer()
# framing, handshake and sessions are left to the mcp SDK
app = Server(get_settings().server_name, version=get_settings().server_version)


class ToolCallError(Exception):
    """Raised so the SDK answers with ``isError: true``."""


async def handle_list_tools() -> List[Tool]:
    return [Tool(**schema) for schema in calculator.list_tools()]


async def handle_call_tool(
    name: str,
    arguments: Optional[Dict[str, Any]],
) -> List[TextContent]:
    result = calculator.call_tool(name, arguments)
    if result.is_error:
        raise ToolCallError(result.text)
    return [TextContent(type="text", text=result.text)]


app.list_tools()(handle_list_tools)
# the dispatcher reports missing / malformed arguments itself
app.call_tool(validate_input=False)(handle_call_tool)


async def run() -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Calculator MCP server running on stdio")
        await app.run(
            read_stream,
            write_stream,
            app.create_initialization_options(),
        )


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    try:
        anyio.run(run)
    except KeyboardInterrupt:
        logger.info("Calculator MCP server stopped")
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
