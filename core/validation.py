from collections.abc import Mapping
from typing import Any, Type, TypeVar

from pydantic import ValidationError

from core.errors import InvalidArgumentError, MissingArgumentError
from core.operations import OperationInput

T = TypeVar("T", bound=OperationInput)


def narrow_arguments(input_model: Type[T], arguments: Any) -> T:
    """
    Turn a raw argument mapping from the transport into the typed input
    record of one operation.

    Missing parameters are reported before malformed ones.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise InvalidArgumentError()

    try:
        return input_model.model_validate(dict(arguments))
    except ValidationError as exc:
        errors = exc.errors()

    for error in errors:
        if error["type"] == "missing":
            raise MissingArgumentError(str(error["loc"][0]))

    raise InvalidArgumentError()
