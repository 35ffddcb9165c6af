"""Configuration management for enum-lookup.

Per-call behavior is configured through EnumOptions. The only process-wide
settings are where and how verbosely the library logs.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from enum_lookup.constants import LoggingDefaults
from enum_lookup.core.logging import configure_logging, get_logger


class Settings(BaseModel):
    """Process-wide logging settings."""

    model_config = ConfigDict(frozen=True)

    log_level: str = Field(default=LoggingDefaults.DEFAULT_LEVEL)
    log_file: Optional[str] = Field(default=None)


def _first_env(names: tuple[str, ...], environ: Mapping[str, str]) -> Optional[str]:
    for name in names:
        value = environ.get(name)
        if value:
            return value
    return None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from environment variables.

    Precedence: ENUM_LOOKUP_LOG_LEVEL > LOG_LEVEL > WARNING, and
    ENUM_LOOKUP_LOG_FILE > LOG_FILE > stderr.

    Args:
        environ: Mapping to read instead of os.environ

    Returns:
        Settings instance; an unknown level falls back to the default
    """
    env = os.environ if environ is None else environ

    log_level = (_first_env(LoggingDefaults.LEVEL_ENV_VARS, env) or LoggingDefaults.DEFAULT_LEVEL).upper()
    invalid_level = None
    if log_level not in LoggingDefaults.LEVELS:
        invalid_level = log_level
        log_level = LoggingDefaults.DEFAULT_LEVEL

    settings = Settings(log_level=log_level, log_file=_first_env(LoggingDefaults.FILE_ENV_VARS, env))

    if invalid_level is not None:
        get_logger("config").warning(
            "invalid_log_level_env", value=invalid_level, using_default=LoggingDefaults.DEFAULT_LEVEL
        )

    return settings


def configure_from_env(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Load settings from the environment and apply them to logging.

    Args:
        environ: Mapping to read instead of os.environ

    Returns:
        The applied settings
    """
    settings = load_settings(environ)
    configure_logging(log_level=settings.log_level, log_file=settings.log_file)
    return settings
