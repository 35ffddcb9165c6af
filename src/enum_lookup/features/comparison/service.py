"""Equality engine for enum keys and values.

equal_fn builds the predicate every lookup uses. Both operands go through the
same steps, strictly in this order:

1. normalize (identity when not configured)
2. pick the expected type from the normalized enum-side operand
3. convert (only when ``convert`` is set)
4. lower-case (only when ``ignore_case`` is set and the expected type is string)
5. strict comparison

Reordering the steps changes results: folding case before conversion would,
for example, change how numeric strings match.
"""
import math
import re
from typing import Any, Callable, Optional, Union

from ...constants import ExpectedTypes
from ...models.base import ExpectedType, TypeConverter
from ...models.options import OptionsInput, resolve_options
from ...utils.text import to_display_string
from ..validation.service import is_number

Number = Union[int, float]

_INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INFINITY_PATTERN = re.compile(r"([+-]?)Infinity")
_RADIX_PATTERN = re.compile(r"0([xXoObB])([0-9a-zA-Z]+)")
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}
_MAX_SAFE_INTEGER = 2**53

# Code points removed by JavaScript's String.prototype.trim()
_JS_WHITESPACE = "\t\n\v\f\r \xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"


def _to_double_precision(value: Number) -> Number:
    """Round to what a double can hold; integral values within 2**53 stay int."""
    try:
        rounded = float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    if abs(rounded) <= _MAX_SAFE_INTEGER:
        return int(rounded)
    return rounded


def parse_number(text: str) -> Optional[Number]:
    """Parse text with the grammar of JavaScript's Number().

    Surrounding whitespace (the set JavaScript's trim() removes) is
    ignored. Accepts signed ASCII decimals with an optional exponent,
    signed ``Infinity`` and unsigned ``0x``/``0o``/``0b`` literals.

    Args:
        text: Text to parse

    Returns:
        int for integer literals within double precision, float otherwise,
        None if the text is empty or not a number
    """
    trimmed = text.strip(_JS_WHITESPACE)
    if not trimmed:
        return None

    if _INTEGER_PATTERN.fullmatch(trimmed):
        return _to_double_precision(float(trimmed))
    if _DECIMAL_PATTERN.fullmatch(trimmed):
        return float(trimmed)

    infinity = _INFINITY_PATTERN.fullmatch(trimmed)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf

    radix = _RADIX_PATTERN.fullmatch(trimmed)
    if radix:
        try:
            return _to_double_precision(int(radix.group(2), _RADIX_BASES[radix.group(1).lower()]))
        except ValueError:
            return None

    return None


def to_number(value: Any) -> Optional[Number]:
    """Convert a value to a number.

    Args:
        value: The value to convert

    Returns:
        The number, or None if conversion fails (NaN counts as failure)
    """
    if is_number(value):
        return None if isinstance(value, float) and math.isnan(value) else value
    if isinstance(value, str):
        return parse_number(value)
    return None


def default_converter(value: Any, to_type: ExpectedType) -> Any:
    """Coerce a value toward the expected type.

    Strings are produced with JavaScript String() spelling. Numbers are
    passed through unchanged; anything else is parsed with to_number.

    Args:
        value: The value to convert
        to_type: "string" or "number"

    Returns:
        The converted value, or None if conversion fails
    """
    if to_type == ExpectedTypes.STRING and not isinstance(value, str):
        return to_display_string(value)
    if to_type == ExpectedTypes.NUMBER and not is_number(value):
        return to_number(value)
    return value


def create_converter(to_type: ExpectedType, custom_converter: Optional[TypeConverter] = None) -> Callable[[Any], Any]:
    """Return the conversion step for one comparison.

    Args:
        to_type: "string" or "number"
        custom_converter: Replaces the default converter when given

    Returns:
        Single-argument conversion function
    """
    if custom_converter is not None:
        return custom_converter
    return lambda value: default_converter(value, to_type)


def strict_equal(a: Any, b: Any) -> bool:
    """Compare two operands by value and type.

    Numbers compare by value (so ``1 == 1.0`` but ``True`` never equals
    ``1``), strings by value, everything else by identity.
    """
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    return a is b


def _passthrough(value: Any) -> Any:
    return value


def _lower_case_if_string(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


def equal_fn(options: OptionsInput = None, **overrides: Any) -> Callable[[Any, Any], bool]:
    """Return a function comparing an enum key or value with an input.

    The left-hand operand is always the key or value taken from the enum,
    the right-hand operand the input being tested.

    Args:
        options: EnumOptions, mapping of option names, or None
        **overrides: Individual options (normalize, ignore_case, convert, converter)

    Returns:
        Predicate ``equal(candidate, value) -> bool``

    Example:
        >>> compare = equal_fn(ignore_case=True)
        >>> compare("Red", "red")
        True
        >>> compare(1, "1")
        False
    """
    resolved = resolve_options(options, **overrides)
    normalize = resolved.normalize or _passthrough
    lower_case = _lower_case_if_string if resolved.ignore_case else _passthrough

    def equal(candidate: Any, value: Any) -> bool:
        a = normalize(candidate)
        b = normalize(value)
        expected_type: ExpectedType = ExpectedTypes.STRING if isinstance(a, str) else ExpectedTypes.NUMBER

        if resolved.convert:
            convert = create_converter(expected_type, resolved.converter)
            a = convert(a)
            b = convert(b)

        if expected_type != ExpectedTypes.STRING:
            return strict_equal(a, b)
        return strict_equal(lower_case(a), lower_case(b))

    return equal
