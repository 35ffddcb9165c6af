"""Lookup, validation and conversion utilities for enum-like mappings.

An enum-like object maps string keys to string or number values: a dict, a
Python Enum class, or a plain object. The functions here resolve keys to
values and back, check membership, and coerce untrusted input into a member
of the closed set.

Usage:
    from enum_lookup import to_enum_value, enum_keys_by_value

    to_enum_value({"Low": 1, "Medium": 2}, "2", convert=True)  # 2
    enum_keys_by_value({"Blue": "#00f", "AlsoBlue": "#00f"}, "#00f")  # ["Blue", "AlsoBlue"]
"""

from enum_lookup.core import (
    EnumLookupError,
    InvalidEnumObjectError,
    InvalidEnumValueError,
    InvalidOptionsError,
    NonUniqueMatchError,
    Settings,
    configure_from_env,
    configure_logging,
    get_logger,
    load_settings,
)
from enum_lookup.features.comparison import (
    default_converter,
    equal_fn,
    parse_number,
    to_number,
)
from enum_lookup.features.conversion import (
    is_enum_key,
    is_enum_value,
    to_enum_key,
    to_enum_keys,
    to_enum_value,
)
from enum_lookup.features.lookup import (
    enum_key_by_key,
    enum_key_by_value,
    enum_keys_by_value,
    enum_value_by_key,
    enum_value_by_value,
)
from enum_lookup.features.validation import (
    enum_entries,
    is_enum_like,
    validate_enum_like,
)
from enum_lookup.models import (
    EnumLike,
    EnumOptions,
    EnumValue,
    TypeConverter,
    resolve_options,
)

__version__ = "1.0.0"

__all__ = [
    # Lookups
    "enum_key_by_key",
    "enum_key_by_value",
    "enum_keys_by_value",
    "enum_value_by_key",
    "enum_value_by_value",
    # Conversion
    "is_enum_key",
    "is_enum_value",
    "to_enum_key",
    "to_enum_keys",
    "to_enum_value",
    # Comparison
    "default_converter",
    "equal_fn",
    "parse_number",
    "to_number",
    # Validation
    "enum_entries",
    "is_enum_like",
    "validate_enum_like",
    # Models
    "EnumLike",
    "EnumOptions",
    "EnumValue",
    "TypeConverter",
    "resolve_options",
    # Exceptions
    "EnumLookupError",
    "InvalidEnumObjectError",
    "InvalidEnumValueError",
    "InvalidOptionsError",
    "NonUniqueMatchError",
    # Logging and config
    "Settings",
    "configure_from_env",
    "configure_logging",
    "get_logger",
    "load_settings",
]
