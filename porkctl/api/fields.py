"""
JSON field decoding
Porkbun endpoints encode the same field as a string, a number or a boolean
depending on the endpoint. Every raw value is classified once into a
JsonKind and converted from there, so call sites never type-switch.
"""

import math
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional


class JsonKind(Enum):
    """Shapes a decoded JSON value can take"""

    ABSENT = "absent"
    TEXT = "text"
    NUMBER = "number"
    FLAG = "flag"
    OBJECT = "object"
    ARRAY = "array"


def kind_of(value: Any) -> JsonKind:
    """
    Classify a value produced by ``json.loads``.

    Args:
        value: Raw decoded value (or None when the key was missing)

    Returns:
        The matching JsonKind
    """
    # bool is a subclass of int, so it must be tested first
    if isinstance(value, bool):
        return JsonKind.FLAG
    if isinstance(value, str):
        return JsonKind.TEXT
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, list):
        return JsonKind.ARRAY
    return JsonKind.ABSENT


def _format_number(value) -> str:
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return ""
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def as_text(value: Any) -> str:
    """
    Render a scalar as text. Objects, arrays and missing values become "".

    Examples:
        as_text("12.34") -> "12.34"
        as_text(12.5)    -> "12.5"
        as_text(8.0)     -> "8"
        as_text(True)    -> "true"
    """
    kind = kind_of(value)
    if kind is JsonKind.TEXT:
        return value
    if kind is JsonKind.NUMBER:
        return _format_number(value)
    if kind is JsonKind.FLAG:
        return "true" if value else "false"
    if kind in (JsonKind.OBJECT, JsonKind.ARRAY, JsonKind.ABSENT):
        return ""
    raise AssertionError(f"unhandled JSON kind: {kind}")


def as_number(value: Any) -> Optional[float]:
    """Numeric value of a number or numeric string, else None"""
    kind = kind_of(value)
    if kind is JsonKind.NUMBER:
        number = float(value)
    elif kind is JsonKind.TEXT:
        try:
            number = float(value.strip())
        except ValueError:
            return None
    elif kind in (JsonKind.FLAG, JsonKind.OBJECT, JsonKind.ARRAY, JsonKind.ABSENT):
        return None
    else:
        raise AssertionError(f"unhandled JSON kind: {kind}")

    if not math.isfinite(number):
        return None
    return number


def as_flag(value: Any) -> bool:
    """
    Interpret an availability-style flag.

    Booleans are taken as-is, strings are true when they read "yes" or
    "true" (any case). Everything else is false.
    """
    kind = kind_of(value)
    if kind is JsonKind.FLAG:
        return value
    if kind is JsonKind.TEXT:
        return value.lower() in ("yes", "true")
    if kind in (JsonKind.NUMBER, JsonKind.OBJECT, JsonKind.ARRAY, JsonKind.ABSENT):
        return False
    raise AssertionError(f"unhandled JSON kind: {kind}")


def as_object(value: Any) -> Optional[Dict[str, Any]]:
    """The value itself when it is a JSON object, else None"""
    if kind_of(value) is JsonKind.OBJECT:
        return value
    return None


def lookup(data: Any, *path: str) -> Any:
    """
    Walk nested objects along ``path``.

    Returns None as soon as a step is missing or is not an object.
    """
    current = data
    for key in path:
        scope = as_object(current)
        if scope is None:
            return None
        current = scope.get(key)
    return current


def text_or(value: Any, default: str) -> str:
    """as_text(value), or ``default`` when that is blank"""
    text = as_text(value)
    if not text.strip():
        return default
    return text
