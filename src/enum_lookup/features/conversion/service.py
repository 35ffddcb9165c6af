"""Validation and conversion of untrusted input into enum members.

These are the entry points for data of unknown type (request parameters,
form fields, CLI arguments). None and unmatched input give None, False or an
empty list; only an ambiguous match raises.
"""
from typing import Any, List, Optional

from ...constants import ErrorMessages, LookupOperation
from ...models.base import EnumLike, EnumValue
from ...models.options import EnumOptions, OptionsInput, resolve_options
from ...utils.text import to_display_string
from ..comparison.service import equal_fn
from ..lookup.service import enum_keys_by_value, enum_value_by_value, single_match
from ..validation.service import enum_entries, is_number, validate_enum_like


def _compare_key(key: Any, options: EnumOptions) -> Any:
    """Keys are always strings, so conversion only ever stringifies the input."""
    if options.convert and not isinstance(key, str):
        return to_display_string(key)
    return key


def is_enum_value(enum_obj: EnumLike, value: Any, options: OptionsInput = None, **overrides: Any) -> bool:
    """Check if a value is a valid enum value.

    Args:
        enum_obj: The enum-like object to validate against
        value: The value to check
        options: EnumOptions, mapping of option names, or None
        **overrides: Individual options

    Returns:
        True if any enum value matches

    Example:
        >>> is_enum_value({"A": "x"}, "X", ignore_case=True)
        True
    """
    validate_enum_like(enum_obj)
    if value is None:
        return False
    equal = equal_fn(options, **overrides)
    return any(equal(v, value) for _, v in enum_entries(enum_obj))


def is_enum_key(enum_obj: EnumLike, key: Any, options: OptionsInput = None, **overrides: Any) -> bool:
    """Check if a value is a valid enum key.

    With ``convert`` set the input is stringified first, so ``1`` matches the
    key ``"1"``. Without ``convert`` any non-string input is rejected. Only
    keys are compared, never values.

    Returns:
        True if a key matches
    """
    validate_enum_like(enum_obj)
    if key is None:
        return False
    resolved = resolve_options(options, **overrides)
    compare_key = _compare_key(key, resolved)
    if not isinstance(compare_key, str):
        return False

    equal = equal_fn(resolved)
    return any(equal(k, compare_key) for k, _ in enum_entries(enum_obj))


def to_enum_value(
    enum_obj: EnumLike, value: Any, options: OptionsInput = None, **overrides: Any
) -> Optional[EnumValue]:
    """Convert an input to the matching enum value.

    Args:
        enum_obj: The enum-like object to validate against
        value: The input to convert
        options: EnumOptions, mapping of option names, or None
        **overrides: Individual options

    Returns:
        The matching enum value, or None if not found

    Raises:
        NonUniqueMatchError: If several values match

    Example:
        >>> to_enum_value({"Low": 1, "Medium": 2}, "2", convert=True)
        2
    """
    return enum_value_by_value(enum_obj, value, options, **overrides)


def to_enum_key(enum_obj: EnumLike, key: Any, options: OptionsInput = None, **overrides: Any) -> Optional[str]:
    """Convert an input to the matching enum key.

    Keys are matched first. With ``convert`` set, a number that names no key
    is resolved against the numeric enum values instead, so
    ``to_enum_key(Priority, 2, convert=True)`` gives the key holding ``2``.

    Returns:
        The matching enum key, or None if not found

    Raises:
        NonUniqueMatchError: If several keys match, or several keys hold a
            matching value during value resolution
    """
    validate_enum_like(enum_obj)
    if key is None:
        return None
    resolved = resolve_options(options, **overrides)
    compare_key = _compare_key(key, resolved)
    if not isinstance(compare_key, str):
        return None

    equal = equal_fn(resolved)
    entries = enum_entries(enum_obj)
    found = [k for k, _ in entries if equal(k, compare_key)]
    if not found and resolved.convert and is_number(key):
        by_value = [k for k, v in entries if is_number(v) and equal(v, key)]
        return single_match(by_value, ErrorMessages.KEY_BY_VALUE_NOT_UNIQUE, LookupOperation.KEY_BY_VALUE)
    return single_match(found, ErrorMessages.KEY_BY_KEY_NOT_UNIQUE, LookupOperation.KEY_BY_KEY)


def to_enum_keys(enum_obj: EnumLike, value: Any, options: OptionsInput = None, **overrides: Any) -> List[str]:
    """Convert an input to all enum keys holding a matching value.

    Returns:
        Matching keys in iteration order, or an empty list
    """
    return enum_keys_by_value(enum_obj, value, options, **overrides)
