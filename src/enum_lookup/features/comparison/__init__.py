"""Equality engine and default type conversion."""

from enum_lookup.features.comparison.service import (
    create_converter,
    default_converter,
    equal_fn,
    parse_number,
    strict_equal,
    to_number,
)

__all__ = [
    "create_converter",
    "default_converter",
    "equal_fn",
    "parse_number",
    "strict_equal",
    "to_number",
]
