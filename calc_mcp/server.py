import logging
from typing import Any, Dict, List, Mapping, Optional

from calc_mcp.tools import get_tool, list_operations
from core.errors import CalculatorError
from core.results import Failure, InvocationResult

logger = logging.getLogger(__name__)


class CalculatorServer:
    """
    MCP logical server.
    Transport-agnostic: the stdio binding and the HTTP router both sit on top.
    """

    def list_tools(self) -> List[Dict[str, Any]]:
        return [descriptor.schema() for descriptor in list_operations()]

    def call_tool(
        self,
        name: str,
        arguments: Optional[Mapping[str, Any]] = None,
    ) -> InvocationResult:
        logger.debug("call_tool %s %r", name, arguments)
        try:
            return get_tool(name).execute(arguments)
        except CalculatorError as exc:
            logger.info("call_tool %s failed (%s): %s", name, exc.kind.value, exc.message)
            return Failure.from_error(exc)


_SERVER = CalculatorServer()


def invoke(
    name: str,
    arguments: Optional[Mapping[str, Any]] = None,
) -> InvocationResult:
    return _SERVER.call_tool(name, arguments)
