from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict

from core.errors import ErrorKind
from core.results import InvocationResult, Success


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class CallToolResponse(BaseModel):
    # overflowed results serialize as "Infinity" / "-Infinity", not null
    model_config = ConfigDict(ser_json_inf_nan="strings")

    tool: str
    is_error: bool
    content: List[TextContent]
    value: Optional[float] = None
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def from_result(cls, tool: str, result: InvocationResult) -> "CallToolResponse":
        if isinstance(result, Success):
            return cls(
                tool=tool,
                is_error=False,
                content=[TextContent(text=result.text)],
                value=result.value,
            )
        return cls(
            tool=tool,
            is_error=True,
            content=[TextContent(text=result.text)],
            error_kind=result.kind,
        )


class HealthResponse(BaseModel):
    status: str
    name: str
    version: str
