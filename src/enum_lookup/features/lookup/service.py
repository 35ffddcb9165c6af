"""Key and value lookups over enum-like objects.

Every lookup validates the enum object first and returns the empty result
for a None search term without scanning. Singular lookups raise
NonUniqueMatchError when more than one entry matches; enum_keys_by_value
returns every match instead.
"""
from typing import Any, List, Optional

from ...constants import ErrorMessages, LookupOperation
from ...core.exceptions import NonUniqueMatchError
from ...core.logging import get_logger
from ...models.base import EnumLike, EnumValue
from ...models.options import OptionsInput
from ..comparison.service import equal_fn
from ..validation.service import enum_entries, validate_enum_like


def single_match(matches: List[Any], message: str, operation: str) -> Optional[Any]:
    """Return the only match, None for no match, or raise for several."""
    if not matches:
        return None
    if len(matches) > 1:
        get_logger("lookup").debug("non_unique_match", operation=operation, match_count=len(matches))
        raise NonUniqueMatchError(message, operation, matches)
    return matches[0]


def enum_value_by_value(
    enum_obj: EnumLike,
    value: Optional[EnumValue],
    options: OptionsInput = None,
    **overrides: Any,
) -> Optional[EnumValue]:
    """Find the enum value matching the given value.

    Args:
        enum_obj: The enum-like object to search
        value: The value to find (case-sensitive by default)
        options: EnumOptions, mapping of option names, or None
        **overrides: Individual options

    Returns:
        The matching enum value, or None if not found

    Raises:
        NonUniqueMatchError: If several values match
        InvalidEnumObjectError: If enum_obj is not an object
        InvalidEnumValueError: If enum_obj holds a non string/number value

    Example:
        >>> enum_value_by_value({"Red": "#ff0000"}, "#FF0000", ignore_case=True)
        '#ff0000'
    """
    validate_enum_like(enum_obj)
    if value is None:
        return None
    equal = equal_fn(options, **overrides)
    found = [v for _, v in enum_entries(enum_obj) if equal(v, value)]
    return single_match(found, ErrorMessages.VALUE_BY_VALUE_NOT_UNIQUE, LookupOperation.VALUE_BY_VALUE)


def enum_value_by_key(
    enum_obj: EnumLike,
    key: Optional[str],
    options: OptionsInput = None,
    **overrides: Any,
) -> Optional[EnumValue]:
    """Find an enum value by its key.

    Args:
        enum_obj: The enum-like object to search
        key: The key to find (case-sensitive by default)
        options: EnumOptions, mapping of option names, or None
        **overrides: Individual options

    Returns:
        The value for the matched key, or None if not found

    Raises:
        NonUniqueMatchError: If several keys match
    """
    validate_enum_like(enum_obj)
    if key is None:
        return None
    equal = equal_fn(options, **overrides)
    entries = enum_entries(enum_obj)
    found = [k for k, _ in entries if equal(k, key)]
    found_key = single_match(found, ErrorMessages.VALUE_BY_KEY_NOT_UNIQUE, LookupOperation.VALUE_BY_KEY)
    if found_key is None:
        return None
    return dict(entries)[found_key]


def enum_key_by_key(
    enum_obj: EnumLike,
    key: Optional[str],
    options: OptionsInput = None,
    **overrides: Any,
) -> Optional[str]:
    """Find the enum key matching the given key.

    Useful with ``ignore_case`` to recover the canonical spelling of a key.

    Raises:
        NonUniqueMatchError: If several keys match
    """
    validate_enum_like(enum_obj)
    if key is None:
        return None
    equal = equal_fn(options, **overrides)
    found = [k for k, _ in enum_entries(enum_obj) if equal(k, key)]
    return single_match(found, ErrorMessages.KEY_BY_KEY_NOT_UNIQUE, LookupOperation.KEY_BY_KEY)


def enum_key_by_value(
    enum_obj: EnumLike,
    value: Optional[EnumValue],
    options: OptionsInput = None,
    **overrides: Any,
) -> Optional[str]:
    """Find the unique enum key for a given value.

    Args:
        enum_obj: The enum-like object to search
        value: The value to find (case-sensitive by default)
        options: EnumOptions, mapping of option names, or None
        **overrides: Individual options

    Returns:
        The key holding the matching value, or None if not found

    Raises:
        NonUniqueMatchError: If several keys hold a matching value; use
            enum_keys_by_value when duplicates are expected
    """
    validate_enum_like(enum_obj)
    if value is None:
        return None
    equal = equal_fn(options, **overrides)
    found = [k for k, v in enum_entries(enum_obj) if equal(v, value)]
    return single_match(found, ErrorMessages.KEY_BY_VALUE_NOT_UNIQUE, LookupOperation.KEY_BY_VALUE)


def enum_keys_by_value(
    enum_obj: EnumLike,
    value: Optional[EnumValue],
    options: OptionsInput = None,
    **overrides: Any,
) -> List[str]:
    """Find all enum keys holding a value matching the given value.

    Returns:
        Matching keys in iteration order; empty if none match or value is None
    """
    validate_enum_like(enum_obj)
    if value is None:
        return []
    equal = equal_fn(options, **overrides)
    return [k for k, v in enum_entries(enum_obj) if equal(v, value)]
