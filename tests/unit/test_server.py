import math

import pytest

from calc_mcp.server import CalculatorServer, invoke
from core.errors import ErrorKind
from core.operations import OperationName
from core.results import Failure, Success

FINITE_PAIRS = [
    (0, 0),
    (2, 3),
    (-7.5, 2.25),
    (1e-9, -1e9),
    (0.1, 0.2),
]


@pytest.mark.unit
@pytest.mark.parametrize("a, b", FINITE_PAIRS)
def test_binary_operations_succeed(a, b):
    assert invoke("add", {"a": a, "b": b}).value == a + b
    assert invoke("subtract", {"a": a, "b": b}).value == a - b
    assert invoke("multiply", {"a": a, "b": b}).value == a * b


@pytest.mark.unit
@pytest.mark.parametrize("a, b", [(a, b) for a, b in FINITE_PAIRS if b != 0])
def test_divide_succeeds(a, b):
    result = invoke("divide", {"a": a, "b": b})
    assert isinstance(result, Success)
    assert result.value == a / b


@pytest.mark.unit
@pytest.mark.parametrize("a", [0, 1, -3.5, 1e308])
def test_divide_by_zero_fails(a):
    result = invoke("divide", {"a": a, "b": 0})
    assert isinstance(result, Failure)
    assert result.is_error
    assert result.kind == ErrorKind.DOMAIN_ERROR
    assert "division by zero" in result.message


@pytest.mark.unit
@pytest.mark.parametrize("number", [0, 2, 16, 123.456])
def test_sqrt_succeeds(number):
    result = invoke("sqrt", {"number": number})
    assert not result.is_error
    assert math.isclose(result.value * result.value, number, rel_tol=1e-12)


@pytest.mark.unit
def test_sqrt_negative_fails():
    result = invoke("sqrt", {"number": -4})
    assert result.is_error
    assert result.kind == ErrorKind.DOMAIN_ERROR


@pytest.mark.unit
@pytest.mark.parametrize("number, percent", [(200, 15), (0, 50), (-80, 12.5)])
def test_percentage(number, percent):
    assert invoke("percentage", {"number": number, "percent": percent}).value == number * percent / 100


@pytest.mark.unit
def test_power_two_to_ten():
    result = invoke("power", {"base": 2, "exponent": 10})
    assert result.value == 1024
    assert result.text == "**Power Result**\n2^10 = **1024**"


@pytest.mark.unit
def test_missing_parameter():
    result = invoke("add", {"a": 2})
    assert result.is_error
    assert result.kind == ErrorKind.MISSING_ARGUMENT
    assert "missing required parameter" in result.message


@pytest.mark.unit
def test_invalid_parameter():
    result = invoke("multiply", {"a": "x", "b": 2})
    assert result.is_error
    assert result.kind == ErrorKind.INVALID_ARGUMENT_TYPE
    assert result.message == "invalid input, expected numeric values"


@pytest.mark.unit
def test_unknown_operation():
    result = invoke("unknown_op", {})
    assert result.is_error
    assert result.kind == ErrorKind.UNKNOWN_OPERATION
    assert result.message == "unknown operation: unknown_op"
    assert result.text == "Error\nunknown operation: unknown_op"


@pytest.mark.unit
def test_success_text_names_operation_and_operands():
    result = invoke("add", {"a": 2, "b": 3})
    assert result == Success(
        operation=OperationName.ADD,
        value=5,
        text="**Addition Result**\n2 + 3 = **5**",
    )
    assert invoke("percentage", {"number": 200, "percent": 15}).text == (
        "**Percentage Result**\n15% of 200 = **30**"
    )
    assert invoke("sqrt", {"number": 2}).text == (
        "**Square Root Result**\n√2 = **1.4142135623730951**"
    )


@pytest.mark.unit
def test_display_does_not_round_value():
    result = invoke("divide", {"a": 1, "b": 3})
    assert result.value == 1 / 3


@pytest.mark.unit
def test_same_call_twice_is_identical():
    server = CalculatorServer()
    for name, arguments in [
        ("add", {"a": 1, "b": 2}),
        ("divide", {"a": 1, "b": 0}),
        ("power", {"base": 1.5, "exponent": 2}),
        ("nope", None),
    ]:
        assert server.call_tool(name, arguments) == server.call_tool(name, arguments)


@pytest.mark.unit
def test_list_tools_matches_catalog():
    tools = CalculatorServer().list_tools()
    assert [t["name"] for t in tools] == [op.value for op in OperationName]
    assert all(t["inputSchema"]["type"] == "object" for t in tools)
