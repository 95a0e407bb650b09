import math
from typing import Any, Dict, Tuple, Type

from core import arithmetic
from core.errors import UnknownOperationError
from core.operations import (
    BinaryOperands,
    DivisionOperands,
    OperationDescriptor,
    OperationInput,
    OperationName,
    PercentageOperands,
    PowerOperands,
    SqrtOperand,
)
from core.results import Success
from core.validation import narrow_arguments


def format_number(value: float) -> str:
    """Display form of a number. Never used for the returned value."""
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


class CalculatorTool:
    name: OperationName
    title: str
    description: str
    input_model: Type[OperationInput]

    def descriptor(self) -> OperationDescriptor:
        return OperationDescriptor.from_input_model(
            name=self.name,
            description=self.description,
            input_model=self.input_model,
        )

    def schema(self) -> Dict[str, Any]:
        return self.descriptor().schema()

    def compute(self, operands: Any) -> float:
        raise NotImplementedError

    def render(self, operands: Any, result: str) -> str:
        raise NotImplementedError

    def execute(self, arguments: Any) -> Success:
        operands = narrow_arguments(self.input_model, arguments)
        value = self.compute(operands)
        return Success(
            operation=self.name,
            value=value,
            text=f"**{self.title}**\n{self.render(operands, format_number(value))}",
        )


# -------- BINARY --------

class Add(CalculatorTool):
    name = OperationName.ADD
    title = "Addition Result"
    description = "Add two numbers together"
    input_model = BinaryOperands

    def compute(self, operands):
        return arithmetic.add(operands)

    def render(self, operands, result):
        return f"{format_number(operands.a)} + {format_number(operands.b)} = **{result}**"


class Subtract(CalculatorTool):
    name = OperationName.SUBTRACT
    title = "Subtraction Result"
    description = "Subtract second number from first number"
    input_model = BinaryOperands

    def compute(self, operands):
        return arithmetic.subtract(operands)

    def render(self, operands, result):
        return f"{format_number(operands.a)} - {format_number(operands.b)} = **{result}**"


class Multiply(CalculatorTool):
    name = OperationName.MULTIPLY
    title = "Multiplication Result"
    description = "Multiply two numbers together"
    input_model = BinaryOperands

    def compute(self, operands):
        return arithmetic.multiply(operands)

    def render(self, operands, result):
        return f"{format_number(operands.a)} × {format_number(operands.b)} = **{result}**"


class Divide(CalculatorTool):
    name = OperationName.DIVIDE
    title = "Division Result"
    description = "Divide first number by second number"
    input_model = DivisionOperands

    def compute(self, operands):
        return arithmetic.divide(operands)

    def render(self, operands, result):
        return f"{format_number(operands.a)} ÷ {format_number(operands.b)} = **{result}**"


# -------- SCIENTIFIC --------

class Power(CalculatorTool):
    name = OperationName.POWER
    title = "Power Result"
    description = "Raise first number to the power of second number"
    input_model = PowerOperands

    def compute(self, operands):
        return arithmetic.power(operands)

    def render(self, operands, result):
        return f"{format_number(operands.base)}^{format_number(operands.exponent)} = **{result}**"


class SquareRoot(CalculatorTool):
    name = OperationName.SQRT
    title = "Square Root Result"
    description = "Calculate square root of a number"
    input_model = SqrtOperand

    def compute(self, operands):
        return arithmetic.sqrt(operands)

    def render(self, operands, result):
        return f"√{format_number(operands.number)} = **{result}**"


class Percentage(CalculatorTool):
    name = OperationName.PERCENTAGE
    title = "Percentage Result"
    description = "Calculate percentage of a number"
    input_model = PercentageOperands

    def compute(self, operands):
        return arithmetic.percentage(operands)

    def render(self, operands, result):
        return f"{format_number(operands.percent)}% of {format_number(operands.number)} = **{result}**"


# -------- REGISTRY --------

TOOL_REGISTRY: Dict[OperationName, CalculatorTool] = {
    Add.name: Add(),
    Subtract.name: Subtract(),
    Multiply.name: Multiply(),
    Divide.name: Divide(),
    Power.name: Power(),
    SquareRoot.name: SquareRoot(),
    Percentage.name: Percentage(),
}

_unhandled = set(OperationName) - set(TOOL_REGISTRY)
if _unhandled:
    raise RuntimeError(
        f"No tool registered for: {sorted(op.value for op in _unhandled)}"
    )


def get_tool(name: str) -> CalculatorTool:
    try:
        return TOOL_REGISTRY[OperationName(name)]
    except ValueError:
        raise UnknownOperationError(name) from None


def list_operations() -> Tuple[OperationDescriptor, ...]:
    """Catalog of every operation, in declaration order."""
    return tuple(TOOL_REGISTRY[op].descriptor() for op in OperationName)
