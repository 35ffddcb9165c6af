"""Text conversion utilities.

Enum-like mappings often come from JSON or JavaScript sources, so values are
rendered as text the way JavaScript's ``String()`` renders them: ``True`` is
``"true"``, ``None`` is ``"null"`` and an integral float has no ``.0``.
"""

import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Tuple

__all__ = [
    "to_display_string",
    "format_number",
]

_EXPONENT_THRESHOLD = 10**21


def _shortest_digits(value: float) -> Tuple[str, int]:
    """Return the shortest round-trip digits and the decimal point position."""
    _, digits, exponent = Decimal(repr(value)).as_tuple()
    digit_list = list(digits)
    while len(digit_list) > 1 and digit_list[-1] == 0:
        digit_list.pop()
        exponent += 1
    return "".join(str(d) for d in digit_list), exponent + len(digit_list)


def format_number(value: float) -> str:
    """Format a number the way JavaScript's Number.prototype.toString() does.

    Args:
        value: Integer or float to format

    Returns:
        "NaN", "Infinity", "-Infinity", plain decimal notation for magnitudes
        in [1e-6, 1e21), exponent notation ("1e+21", "1.5e-7") otherwise
    """
    if isinstance(value, int) and abs(value) < _EXPONENT_THRESHOLD:
        return str(value)
    try:
        value = float(value)
    except OverflowError:
        return "Infinity" if value > 0 else "-Infinity"
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits, point = _shortest_digits(abs(value))
    count = len(digits)

    if count <= point <= 21:
        return sign + digits + "0" * (point - count)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits

    exponent = point - 1
    exponent_text = ("e+" if exponent >= 0 else "e-") + str(abs(exponent))
    mantissa = digits if count == 1 else digits[0] + "." + digits[1:]
    return sign + mantissa + exponent_text


def to_display_string(value: Any) -> str:
    """Convert any value to its JavaScript-style string form.

    Args:
        value: Value to convert

    Returns:
        String representation of the value
    """
    if value is None:
        return "null"
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, (list, tuple)):
        # Array.prototype.join renders null entries as empty strings
        return ",".join("" if item is None else to_display_string(item) for item in value)
    if isinstance(value, Mapping):
        return "[object Object]"
    return str(value)
