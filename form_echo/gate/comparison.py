"""
Coercion-aware ("loose") equality for JSON values.

Responsibilities:
    - Compare a submitted value against the stored credential the way the
      browser-side runtime's `==` operator does, so that a numeric 123456
      matches the string "123456"
    - Convert strings and containers to numbers / primitive strings using
      the same rules as that runtime

Only the value kinds a JSON decoder can produce are supported:
    None, bool, int, float, str, list (or tuple), dict.

Notes:
    - This is intentionally weaker than Python's `==`. It exists to
      reproduce a known, security-poor comparison faithfully; do not reuse
      it for anything that matters.
"""

import math
import re
from decimal import Decimal
from typing import Any

__all__ = ["loose_equals", "to_number", "to_primitive"]

_TRIM = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_RADIX_DIGITS = {
    "0x": (16, re.compile(r"[0-9a-fA-F]+")),
    "0o": (8, re.compile(r"[0-7]+")),
    "0b": (2, re.compile(r"[01]+")),
}
_INFINITIES = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def _kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple, dict)):
        return "object"
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def _as_float(value) -> float:
    try:
        return float(value)
    except OverflowError:
        # ints beyond float range
        return math.inf if value > 0 else -math.inf


def _string_to_number(text: str) -> float:
    text = _TRIM.sub("", text)
    if not text:
        return 0.0
    if text in _INFINITIES:
        return _INFINITIES[text]

    prefix = text[:2].lower()
    if prefix in _RADIX_DIGITS:
        base, digits = _RADIX_DIGITS[prefix]
        if digits.fullmatch(text[2:]):
            return _as_float(int(text[2:], base))
        return math.nan

    if _DECIMAL_LITERAL.fullmatch(text):
        return float(text)
    return math.nan


def _number_to_string(value) -> str:
    if isinstance(value, int) and abs(value) < 10 ** 21:
        return str(value)

    x = _as_float(value)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x == 0:
        return "0"
    if x.is_integer() and abs(x) < 1e21:
        return str(int(x))
    if 1e-6 <= abs(x) < 1e21:
        return format(Decimal(repr(x)), "f")

    mantissa, _, exponent = repr(x).partition("e")
    if not exponent:
        return mantissa
    exp = int(exponent)
    return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"


def _to_string(value: Any) -> str:
    kind = _kind(value)
    if kind == "string":
        return value
    if kind == "boolean":
        return "true" if value else "false"
    if kind == "null":
        return "null"
    if kind == "number":
        return _number_to_string(value)
    return to_primitive(value)


def to_primitive(value: Any) -> Any:
    """
    Convert a container to its primitive string form; other values pass through.

    Lists join their items with "," (None items become empty strings) and
    dicts become "[object Object]".
    """
    if isinstance(value, dict):
        return "[object Object]"
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else _to_string(item) for item in value)
    return value


def to_number(value: Any) -> float:
    """
    Convert a JSON value to a float.

    Strings are trimmed; an empty string is 0; "0x"/"0o"/"0b" prefixes and
    "Infinity" are understood; anything else that is not a plain decimal
    literal is NaN.
    """
    kind = _kind(value)
    if kind == "null":
        return 0.0
    if kind == "boolean":
        return 1.0 if value else 0.0
    if kind == "number":
        return _as_float(value)
    if kind == "string":
        return _string_to_number(value)
    return to_number(to_primitive(value))


def loose_equals(a: Any, b: Any) -> bool:
    """
    Return True if `a` and `b` are equal after type coercion.

    Examples:
        >>> loose_equals(123456, "123456")
        True
        >>> loose_equals(" 42 ", 42)
        True
        >>> loose_equals(True, "1")
        True
        >>> loose_equals(None, "")
        False
        >>> loose_equals(["123456"], "123456")
        True
    """
    kind_a, kind_b = _kind(a), _kind(b)

    if kind_a == kind_b:
        if kind_a == "number":
            return _as_float(a) == _as_float(b)
        if kind_a == "object":
            return a is b
        return a == b

    if kind_a == "null" or kind_b == "null":
        return False

    if kind_a == "number" and kind_b == "string":
        return _as_float(a) == to_number(b)
    if kind_a == "string" and kind_b == "number":
        return to_number(a) == _as_float(b)

    if kind_a == "boolean":
        return loose_equals(to_number(a), b)
    if kind_b == "boolean":
        return loose_equals(a, to_number(b))

    if kind_a == "object":
        return loose_equals(to_primitive(a), b)
    return loose_equals(a, to_primitive(b))
