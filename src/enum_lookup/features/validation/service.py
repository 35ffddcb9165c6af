"""Structural validation of enum-like objects.

An enum-like object maps string keys to string or number values. Three kinds
of source are read as one:

- any Mapping, in its own iteration order
- an enum.Enum subclass, as ``name -> member.value`` (aliases included)
- a plain object instance, through its own ``__dict__``; class attributes
  are inherited and therefore ignored

Non-string keys are skipped everywhere and never invalidate an object.
"""
import enum
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

from ...core.exceptions import InvalidEnumObjectError, InvalidEnumValueError
from ...core.logging import get_logger

_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex)


def is_number(value: Any) -> bool:
    """Return True for int and float values, excluding bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_enum_value_type(value: Any) -> bool:
    """Return True if value may be stored in an enum-like object."""
    return isinstance(value, str) or is_number(value)


def _own_items(enum_obj: Any) -> Optional[List[Tuple[Any, Any]]]:
    """Return the own (key, value) pairs of an accepted source, or None."""
    if enum_obj is None:
        return None
    if isinstance(enum_obj, type) and issubclass(enum_obj, enum.Enum):
        return [(name, member.value) for name, member in enum_obj.__members__.items()]
    if isinstance(enum_obj, Mapping):
        return list(enum_obj.items())
    if isinstance(enum_obj, _SCALAR_TYPES) or callable(enum_obj):
        return None
    attributes = getattr(enum_obj, "__dict__", None)
    if isinstance(attributes, Mapping):
        return list(attributes.items())
    return None


def enum_entries(enum_obj: Any) -> List[Tuple[str, Any]]:
    """Read the own string-keyed entries of an enum-like object.

    The object is re-read on every call, so entries added or removed
    between calls are always seen. Values are not type-checked here.

    Args:
        enum_obj: Mapping, Enum subclass or plain object

    Returns:
        List of (key, value) pairs in iteration order

    Raises:
        InvalidEnumObjectError: If enum_obj is missing or not an object
    """
    items = _own_items(enum_obj)
    if items is None:
        raise InvalidEnumObjectError()
    return [(key, value) for key, value in items if isinstance(key, str)]


def is_enum_like(enum_obj: Any) -> bool:
    """Check that an object is enum-like.

    Args:
        enum_obj: The object to check

    Returns:
        True if every own string-keyed value is a string or a number
    """
    items = _own_items(enum_obj)
    if items is None:
        return False
    return all(is_enum_value_type(value) for key, value in items if isinstance(key, str))


def validate_enum_like(enum_obj: Any) -> None:
    """Validate that an object is enum-like.

    Args:
        enum_obj: The object to validate

    Raises:
        InvalidEnumObjectError: If enum_obj is missing or not an object
        InvalidEnumValueError: If a value is not a string or number
    """
    items = _own_items(enum_obj)
    if items is None:
        get_logger("validation").debug("enum_validation_failed", reason="not_an_object", type=type(enum_obj).__name__)
        raise InvalidEnumObjectError()

    for key, value in items:
        if not isinstance(key, str):
            continue
        if not is_enum_value_type(value):
            get_logger("validation").debug(
                "enum_validation_failed", reason="invalid_value", key=key, value_type=type(value).__name__
            )
            raise InvalidEnumValueError(key, value)
