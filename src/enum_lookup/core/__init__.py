"""Core infrastructure for enum-lookup."""

from enum_lookup.core.config import (
    Settings,
    configure_from_env,
    load_settings,
)
from enum_lookup.core.exceptions import (
    EnumLookupError,
    InvalidEnumObjectError,
    InvalidEnumValueError,
    InvalidOptionsError,
    NonUniqueMatchError,
)
from enum_lookup.core.logging import (
    configure_logging,
    get_logger,
)

__all__ = [
    # Exceptions
    "EnumLookupError",
    "InvalidEnumObjectError",
    "InvalidEnumValueError",
    "InvalidOptionsError",
    "NonUniqueMatchError",
    # Logging
    "configure_logging",
    "get_logger",
    # Config
    "Settings",
    "configure_from_env",
    "load_settings",
]
