from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Dict, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field


class OperationName(Enum):
    """
    Closed set of operations the calculator can run.
    Declaration order is the listing order.
    """

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    POWER = "power"
    SQRT = "sqrt"
    PERCENTAGE = "percentage"


# --------------------------------------------------
# TYPED INPUTS
# --------------------------------------------------

# ints are widened, bools and strings are rejected, NaN/inf are rejected
Number = Annotated[float, Field(strict=True, allow_inf_nan=False)]


class OperationInput(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class BinaryOperands(OperationInput):
    a: Number = Field(description="First number")
    b: Number = Field(description="Second number")


class DivisionOperands(OperationInput):
    a: Number = Field(description="Dividend (number to be divided)")
    b: Number = Field(description="Divisor (number to divide by)")


class PowerOperands(OperationInput):
    base: Number = Field(description="Base number")
    exponent: Number = Field(description="Power to raise to")


class SqrtOperand(OperationInput):
    number: Number = Field(description="Number to find square root of")


class PercentageOperands(OperationInput):
    number: Number = Field(description="Base number")
    percent: Number = Field(description="Percentage to calculate")


# --------------------------------------------------
# DESCRIPTORS
# --------------------------------------------------

@dataclass(frozen=True)
class ParameterSpec:
    name: str
    description: str
    type: str = "number"
    required: bool = True


@dataclass(frozen=True)
class OperationDescriptor:
    name: OperationName
    description: str
    parameters: Tuple[ParameterSpec, ...]

    @classmethod
    def from_input_model(
        cls,
        *,
        name: OperationName,
        description: str,
        input_model: Type[OperationInput],
    ) -> "OperationDescriptor":
        """
        Build the descriptor from the fields the handler actually reads,
        so the advertised parameters cannot drift from the validated ones.
        """
        return cls(
            name=name,
            description=description,
            parameters=tuple(
                ParameterSpec(
                    name=field_name,
                    description=field.description or "",
                    required=field.is_required(),
                )
                for field_name, field in input_model.model_fields.items()
            ),
        )

    def schema(self) -> Dict[str, Any]:
        return {
            "name": self.name.value,
            "description": self.description,
            "inputSchema": {
                "type": "object",
                "properties": {
                    p.name: {"type": p.type, "description": p.description}
                    for p in self.parameters
                },
                "required": [p.name for p in self.parameters if p.required],
            },
        }
