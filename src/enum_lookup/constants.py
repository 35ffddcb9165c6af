"""Shared constants across the enum-lookup codebase.

This module centralizes error message texts and configuration values
so that the lookup functions and their tests agree on them.
"""


class ErrorMessages:
    """Error message texts raised by the validator and lookup functions."""

    ENUM_OBJECT_REQUIRED = "The enum object is required."
    INVALID_ENUM_VALUE = "Invalid enum value: {value}. Expected string or number."

    # Non-unique match messages, keyed by lookup direction
    VALUE_BY_VALUE_NOT_UNIQUE = "Enum values are not unique. Cannot get value by value."
    VALUE_BY_KEY_NOT_UNIQUE = "Enum keys are not unique. Cannot get value by key."
    KEY_BY_KEY_NOT_UNIQUE = "Enum keys are not unique. Cannot get key by key."
    KEY_BY_VALUE_NOT_UNIQUE = "Enum values are not unique. Cannot get key by value."


class LookupOperation:
    """Names of the singular lookup operations, used in errors and log events."""

    VALUE_BY_VALUE = "value_by_value"
    VALUE_BY_KEY = "value_by_key"
    KEY_BY_KEY = "key_by_key"
    KEY_BY_VALUE = "key_by_value"


class ExpectedTypes:
    """Target types chosen by the equality engine from the enum-side operand."""

    STRING = "string"
    NUMBER = "number"


class LoggingDefaults:
    """Logging configuration defaults."""

    DEFAULT_LEVEL = "WARNING"
    LEVELS = {
        "DEBUG": 10,
        "INFO": 20,
        "WARNING": 30,
        "ERROR": 40,
    }

    # Environment variables, checked in order
    LEVEL_ENV_VARS = ("ENUM_LOOKUP_LOG_LEVEL", "LOG_LEVEL")
    FILE_ENV_VARS = ("ENUM_LOOKUP_LOG_FILE", "LOG_FILE")
