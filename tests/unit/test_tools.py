import pytest

from calc_mcp.tools import TOOL_REGISTRY, format_number, get_tool, list_operations
from core.errors import UnknownOperationError
from core.operations import OperationName

EXPECTED_PARAMETERS = {
    "add": ["a", "b"],
    "subtract": ["a", "b"],
    "multiply": ["a", "b"],
    "divide": ["a", "b"],
    "power": ["base", "exponent"],
    "sqrt": ["number"],
    "percentage": ["number", "percent"],
}


@pytest.mark.unit
def test_catalog_lists_seven_operations_in_order():
    names = [d.name.value for d in list_operations()]
    assert names == [
        "add",
        "subtract",
        "multiply",
        "divide",
        "power",
        "sqrt",
        "percentage",
    ]


@pytest.mark.unit
def test_catalog_parameters_match_handlers():
    for descriptor in list_operations():
        params = [p.name for p in descriptor.parameters]
        assert params == EXPECTED_PARAMETERS[descriptor.name.value]
        assert descriptor.description
        for p in descriptor.parameters:
            assert p.required
            assert p.type == "number"
            assert p.description


@pytest.mark.unit
def test_catalog_is_deterministic():
    assert list_operations() == list_operations()


@pytest.mark.unit
def test_registry_covers_every_operation():
    assert set(TOOL_REGISTRY) == set(OperationName)
    for name, tool in TOOL_REGISTRY.items():
        assert tool.name is name


@pytest.mark.unit
def test_schema_shape():
    schema = get_tool("divide").schema()
    assert schema == {
        "name": "divide",
        "description": "Divide first number by second number",
        "inputSchema": {
            "type": "object",
            "properties": {
                "a": {"type": "number", "description": "Dividend (number to be divided)"},
                "b": {"type": "number", "description": "Divisor (number to divide by)"},
            },
            "required": ["a", "b"],
        },
    }


@pytest.mark.unit
def test_get_tool_unknown():
    with pytest.raises(UnknownOperationError, match="unknown operation: modulo"):
        get_tool("modulo")


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, text",
    [
        (5.0, "5"),
        (-0.0, "0"),
        (0.5, "0.5"),
        (1 / 3, "0.3333333333333333"),
        (1e20, "1e+20"),
        (float("inf"), "inf"),
    ],
)
def test_format_number(value, text):
    assert format_number(value) == text
