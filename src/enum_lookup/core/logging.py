"""Logging configuration for enum-lookup."""
import sys
from typing import IO, Any, List, Optional

import structlog

from enum_lookup.constants import LoggingDefaults

_log_stream: Optional[IO[str]] = None


def configure_logging(log_level: str = LoggingDefaults.DEFAULT_LEVEL, log_file: Optional[str] = None) -> None:
    """Configure structured logging with JSON output.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file path for logging (stderr by default)
    """
    global _log_stream

    numeric_level = LoggingDefaults.LEVELS.get(
        log_level.upper(), LoggingDefaults.LEVELS[LoggingDefaults.DEFAULT_LEVEL]
    )

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    if _log_stream is not None:
        _log_stream.close()
        _log_stream = None
    if log_file is not None:
        _log_stream = open(log_file, "a")

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=_log_stream or sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Get a logger instance with the given name.

    Args:
        name: Logger name (typically module or feature name)

    Returns:
        structlog logger; output follows whatever configuration the host
        application (or configure_logging) installed
    """
    return structlog.get_logger(name)
