"""Structural validation of enum-like objects."""

from enum_lookup.features.validation.service import (
    enum_entries,
    is_enum_like,
    is_enum_value_type,
    is_number,
    validate_enum_like,
)

__all__ = [
    "enum_entries",
    "is_enum_like",
    "is_enum_value_type",
    "is_number",
    "validate_enum_like",
]
