from ds_lab.registry import get_structure
from ds_lab.web.inputs import (
    build_field_defaults,
    clamp_index,
    error_for_operation,
    field_default,
    format_initial_values,
    numeric_inputs,
    parse_initial_values,
)

ARRAY = get_structure("array")


def test_parse_initial_values():
    assert parse_initial_values("3, 7,, 12") == [3, 7, 12]
    assert parse_initial_values("1.5, abc, 2") == [1.5, 2]
    assert parse_initial_values("   ") == []
    assert parse_initial_values("inf, nan, 4") == [4]


def test_parse_initial_values_keeps_numeric_prefix():
    assert parse_initial_values("12px, 1e3, -.5, 3.") == [12, 1000, -0.5, 3]
    assert parse_initial_values("px12, ., -, e5") == []
    assert parse_initial_values("1e999, 7") == [7]


def test_format_initial_values():
    assert format_initial_values([3, 7.0, 2.5]) == "3, 7, 2.5"


def test_field_defaults():
    assert field_default("index", ARRAY.operation("insert")) == 0
    assert field_default("value", ARRAY.operation("insert")) == 13
    assert field_default("value", ARRAY.operation("search")) == 0
    assert field_default("value", get_structure("stack").operation("push")) == 13
    assert field_default("value", get_structure("queue").operation("enqueue")) == 13
    assert build_field_defaults(ARRAY.operation("insert")) == {"index": "0", "value": "13"}


def test_clamp_index():
    assert clamp_index(5, []) == 0
    assert clamp_index(-2, [1, 2]) == 0
    assert clamp_index(9, [1, 2]) == 2
    assert clamp_index(1, [1, 2]) == 1


def test_error_for_non_numeric_field():
    message = error_for_operation(ARRAY.operation("insert"), [1, 2], {"index": "x", "value": "1"})
    assert message == 'Field "Index" expects a numeric value.'


def test_error_for_index_out_of_range():
    message = error_for_operation(ARRAY.operation("insert"), [1, 2, 3], {"index": "5", "value": "1"})
    assert message == "Index must be between 0 and 3."


def test_error_for_too_many_elements():
    message = error_for_operation(ARRAY.operation("search"), list(range(25)), {"value": "1"})
    assert message == "Limit the structure to 24 elements to keep the visualization readable."


def test_valid_inputs_have_no_error():
    assert error_for_operation(ARRAY.operation("insert"), [1, 2, 3], {"index": "3", "value": "8"}) is None
    assert error_for_operation(get_structure("stack").operation("pop"), [], {}) is None


def test_numeric_inputs():
    assert numeric_inputs(ARRAY.operation("insert"), {"index": "2", "value": "4.5"}) == {"index": 2, "value": 4.5}


def test_field_text_with_trailing_units_reads_its_number():
    operation = ARRAY.operation("insert")
    raw = {"index": "1st", "value": "12px"}
    assert error_for_operation(operation, [1, 2], raw) is None
    assert numeric_inputs(operation, raw) == {"index": 1, "value": 12}
