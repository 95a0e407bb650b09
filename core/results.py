from dataclasses import dataclass
from typing import Union

from core.errors import CalculatorError, ErrorKind
from core.operations import OperationName


@dataclass(frozen=True)
class Success:
    operation: OperationName
    value: float
    text: str

    @property
    def is_error(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str

    @property
    def is_error(self) -> bool:
        return True

    @property
    def text(self) -> str:
        return f"Error\n{self.message}"

    @classmethod
    def from_error(cls, error: CalculatorError) -> "Failure":
        return cls(kind=error.kind, message=error.message)


InvocationResult = Union[Success, Failure]
