# inputs.py
"""
Form helpers for the playground: turning raw text into numbers and checking it
against the operation's field schema before anything is simulated.
"""
import math
import re

from ds_lab.registry import MAX_ELEMENTS
from ds_lab.renderer import format_value


# Leading decimal literal of a token, the prefix a browser number field keeps ("12px" -> "12")
NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def _to_number(token):
    """Parse the numeric prefix of one token; returns None when there is no finite number."""
    match = NUMBER_PREFIX.match(str(token).strip())
    if match is None:
        return None
    value = float(match.group())
    if not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value


def parse_initial_values(source):
    """'3, 7,, 12' -> [3, 7, 12]; tokens that are not numbers are dropped."""
    if not source.strip():
        return []
    tokens = [token.strip() for token in source.split(",")]
    parsed = [_to_number(token) for token in tokens if token]
    return [value for value in parsed if value is not None]


def format_initial_values(values):
    return ", ".join(format_value(v) for v in values)


def field_default(field_id, operation):
    if field_id == "value" and any(word in operation.id for word in ("insert", "push", "enqueue")):
        return 13
    return 0


def build_field_defaults(operation):
    return {f.id: str(field_default(f.id, operation)) for f in operation.fields}


def clamp_index(index, values):
    if not values:
        return 0
    return max(0, min(index, len(values)))


def error_for_operation(operation, values, raw_inputs):
    """First field-level message for the form, or None when the inputs can be simulated."""
    for field in operation.fields:
        typed_value = _to_number(raw_inputs.get(field.id, ""))
        if typed_value is None:
            return f'Field "{field.label}" expects a numeric value.'

        if field.id == "index" and clamp_index(typed_value, values) != typed_value:
            return f"Index must be between 0 and {max(len(values), 0)}."

    if len(values) > MAX_ELEMENTS:
        return f"Limit the structure to {MAX_ELEMENTS} elements to keep the visualization readable."

    return None


def numeric_inputs(operation, raw_inputs):
    """Convert already-validated raw field text into the params mapping simulate() expects."""
    return {f.id: _to_number(raw_inputs[f.id]) for f in operation.fields}
