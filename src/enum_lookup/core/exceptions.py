"""Exception hierarchy for enum-lookup.

Structural errors subclass TypeError and ambiguity errors subclass ValueError,
so callers that only know the builtin types can still catch them.
"""
from typing import Any, List, Optional

from enum_lookup.constants import ErrorMessages
from enum_lookup.utils.text import to_display_string


class EnumLookupError(Exception):
    """Base class for all errors raised by enum-lookup."""

    pass


class InvalidEnumObjectError(EnumLookupError, TypeError):
    """Raised when the enum object is missing or is not an object."""

    def __init__(self, message: str = ErrorMessages.ENUM_OBJECT_REQUIRED) -> None:
        super().__init__(message)


class InvalidEnumValueError(EnumLookupError, TypeError):
    """Raised when an enum entry holds a value that is not a string or number.

    Attributes:
        key: Key of the offending entry
        value: The offending value
    """

    def __init__(self, key: str, value: Any) -> None:
        self.key = key
        self.value = value
        super().__init__(ErrorMessages.INVALID_ENUM_VALUE.format(value=to_display_string(value)))


class NonUniqueMatchError(EnumLookupError, ValueError):
    """Raised when a singular lookup matches more than one entry.

    Attributes:
        operation: Lookup operation name (see constants.LookupOperation)
        matches: The matching keys or values, in enum iteration order
    """

    def __init__(self, message: str, operation: str, matches: Optional[List[Any]] = None) -> None:
        self.operation = operation
        self.matches = list(matches or [])
        super().__init__(message)


class InvalidOptionsError(EnumLookupError, ValueError):
    """Raised when lookup options cannot be built from the given input."""

    pass
