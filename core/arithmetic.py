import math

from core.errors import DomainError
from core.operations import (
    BinaryOperands,
    DivisionOperands,
    PercentageOperands,
    PowerOperands,
    SqrtOperand,
)


def add(operands: BinaryOperands) -> float:
    return operands.a + operands.b


def subtract(operands: BinaryOperands) -> float:
    return operands.a - operands.b


def multiply(operands: BinaryOperands) -> float:
    return operands.a * operands.b


def divide(operands: DivisionOperands) -> float:
    if operands.b == 0:
        raise DomainError("division by zero")
    return operands.a / operands.b


def power(operands: PowerOperands) -> float:
    """
    Real exponentiation.
    Results outside the reals, or outside float range, are domain errors
    instead of NaN / complex values.
    """
    base, exponent = operands.base, operands.exponent

    if base == 0 and exponent < 0:
        raise DomainError("division by zero")
    if base < 0 and not exponent.is_integer():
        raise DomainError("result is not a real number")

    try:
        return math.pow(base, exponent)
    except OverflowError:
        raise DomainError("result out of range") from None


def sqrt(operand: SqrtOperand) -> float:
    if operand.number < 0:
        raise DomainError("square root of negative number not supported")
    return math.sqrt(operand.number)


def percentage(operands: PercentageOperands) -> float:
    return operands.number * operands.percent / 100
