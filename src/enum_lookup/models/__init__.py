"""Data models for enum-lookup."""

from enum_lookup.models.base import (
    EnumLike,
    EnumValue,
    ExpectedType,
    Normalizer,
    TypeConverter,
)
from enum_lookup.models.options import (
    DEFAULT_OPTIONS,
    EnumOptions,
    OptionsInput,
    resolve_options,
)

__all__ = [
    # Types
    "EnumLike",
    "EnumValue",
    "ExpectedType",
    "Normalizer",
    "TypeConverter",
    # Options
    "DEFAULT_OPTIONS",
    "EnumOptions",
    "OptionsInput",
    "resolve_options",
]
