from typing import List, Optional

from langchain_core.tools import StructuredTool

from calc_mcp.server import CalculatorServer
from calc_mcp.tools import TOOL_REGISTRY, CalculatorTool


def _as_structured_tool(tool: CalculatorTool, server: CalculatorServer) -> StructuredTool:
    name = tool.name.value

    def run(**arguments: float) -> str:
        return server.call_tool(name, arguments).text

    return StructuredTool.from_function(
        func=run,
        name=name,
        description=tool.description,
        # dict schema: arguments reach the dispatcher unvalidated
        args_schema=tool.schema()["inputSchema"],
    )


def build_tools(server: Optional[CalculatorServer] = None) -> List[StructuredTool]:
    """
    Expose every calculator operation as a LangChain tool,
    so an agent can call the calculator in-process.
    """
    server = server or CalculatorServer()
    return [_as_structured_tool(tool, server) for tool in TOOL_REGISTRY.values()]
