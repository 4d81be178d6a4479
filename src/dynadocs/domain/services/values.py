"""Runtime classification and lenient conversion of document values.

Document payloads are plain JSON-compatible Python values. The helpers here
classify a value by kind and implement the "string that parses as X"
leniency used by the validation engine and by query filter coercion.
"""

import math
import re
from decimal import Decimal
from enum import Enum
from typing import Any

from dynadocs.domain.entities import FieldType

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class ValueKind(str, Enum):
    """Kinds of document values."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    OBJECT = "object"
    LIST = "list"
    OTHER = "other"


def kind_of(value: Any) -> ValueKind:
    """Classify a value.

    ``bool`` is checked before ``int`` since it is an ``int`` subclass.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, (list, tuple)):
        return ValueKind.LIST
    return ValueKind.OTHER


def is_numeric(value: Any) -> bool:
    """True for native integers and floats, never for booleans."""
    return kind_of(value) in (ValueKind.INTEGER, ValueKind.FLOAT)


def to_text(value: Any) -> str:
    """Textual form of a value, as used by the required-field check."""
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return ""
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    return str(value)


def as_integer(value: Any) -> int | None:
    """Return the value as an integer, or None if it is not one.

    Accepts native integers and strings of optionally signed decimal digits.
    Floats are not integers, even when integral.
    """
    kind = kind_of(value)
    if kind is ValueKind.INTEGER:
        return value
    if kind is ValueKind.STRING and INTEGER_PATTERN.fullmatch(value):
        try:
            return int(value)
        except ValueError:
            # Beyond the interpreter's int string conversion limit
            return None
    return None


def as_float(value: Any) -> float | None:
    """Return the value as a float, or None if it does not parse as one.

    Accepts native integers and floats, and strings that parse as a float
    (surrounding whitespace allowed, digit-group underscores not). Integers
    too large for a float become a signed infinity.
    """
    kind = kind_of(value)
    if kind in (ValueKind.INTEGER, ValueKind.FLOAT):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if kind is ValueKind.STRING and "_" not in value:
        try:
            return float(value)
        except ValueError:
            return None
    return None


def as_boolean(value: Any) -> bool | None:
    """Return the value as a boolean, or None.

    Accepts native booleans and the strings "true"/"false" in any case.
    """
    kind = kind_of(value)
    if kind is ValueKind.BOOLEAN:
        return value
    if kind is ValueKind.STRING:
        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    return None


def format_number(value: float) -> str:
    """Render a numeric bound for violation messages.

    Plain decimal notation (``0`` -> ``0.0``) for magnitudes in
    ``[1e-3, 1e7)``, otherwise a shortest-digits mantissa with an exponent
    (``1e7`` -> ``1.0E7``, ``0.00025`` -> ``2.5E-4``).
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    magnitude = abs(value)
    if magnitude == 0 or 1e-3 <= magnitude < 1e7:
        return repr(value)

    sign, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    text = "".join(str(d) for d in digits)
    mantissa = f"{text[0]}.{text[1:] or '0'}"
    return f"{'-' if sign else ''}{mantissa}E{exponent + len(digits) - 1}"


def coerce_filter_value(field_type: FieldType | None, raw: Any) -> Any:
    """Convert a query-string filter value to the field's declared type.

    Values that do not parse are returned unchanged, so they simply match
    nothing stored under a typed field.
    """
    if field_type is FieldType.INTEGER:
        converted = as_integer(raw)
    elif field_type is FieldType.DOUBLE:
        converted = as_float(raw)
    elif field_type is FieldType.BOOLEAN:
        converted = as_boolean(raw)
    else:
        return raw
    return raw if converted is None else converted


def values_equal(stored: Any, expected: Any) -> bool:
    """Equality used by filtered reads.

    Booleans only ever equal booleans; integers and floats compare
    numerically.
    """
    stored_is_bool = kind_of(stored) is ValueKind.BOOLEAN
    expected_is_bool = kind_of(expected) is ValueKind.BOOLEAN
    if stored_is_bool != expected_is_bool:
        return False
    return stored == expected
