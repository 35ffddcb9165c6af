"""Key and value lookups over enum-like objects."""

from enum_lookup.features.lookup.service import (
    enum_key_by_key,
    enum_key_by_value,
    enum_keys_by_value,
    enum_value_by_key,
    enum_value_by_value,
)

__all__ = [
    "enum_key_by_key",
    "enum_key_by_value",
    "enum_keys_by_value",
    "enum_value_by_key",
    "enum_value_by_value",
]
