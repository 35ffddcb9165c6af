"""Utilities module for enum-lookup.

This module provides text conversion helpers shared by the validator,
the equality engine and the error messages.
"""

from .text import (
    format_number,
    to_display_string,
)

__all__ = [
    "format_number",
    "to_display_string",
]
