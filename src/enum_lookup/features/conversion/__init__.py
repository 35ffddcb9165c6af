"""Validation and conversion of untrusted input into enum members."""

from enum_lookup.features.conversion.service import (
    is_enum_key,
    is_enum_value,
    to_enum_key,
    to_enum_keys,
    to_enum_value,
)

__all__ = [
    "is_enum_key",
    "is_enum_value",
    "to_enum_key",
    "to_enum_keys",
    "to_enum_value",
]
