from enum import Enum


class ErrorKind(Enum):
    UNKNOWN_OPERATION = "unknown_operation"
    MISSING_ARGUMENT = "missing_argument"
    INVALID_ARGUMENT_TYPE = "invalid_argument_type"
    DOMAIN_ERROR = "domain_error"


class CalculatorError(Exception):
    """
    Base error for everything the dispatcher recovers from.
    The kind is set by whoever raises, never inferred from the message.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnknownOperationError(CalculatorError):
    kind = ErrorKind.UNKNOWN_OPERATION

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown operation: {name}")
        self.name = name


class MissingArgumentError(CalculatorError):
    kind = ErrorKind.MISSING_ARGUMENT

    def __init__(self, parameter: str) -> None:
        super().__init__(f"missing required parameter: {parameter}")
        self.parameter = parameter


class InvalidArgumentError(CalculatorError):
    kind = ErrorKind.INVALID_ARGUMENT_TYPE

    def __init__(self) -> None:
        super().__init__("invalid input, expected numeric values")


class DomainError(CalculatorError):
    kind = ErrorKind.DOMAIN_ERROR
