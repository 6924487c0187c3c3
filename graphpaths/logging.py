"""Logging utilities for graphpaths.

Provides cached per-module loggers that share one configuration.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Current configuration, applied to every logger created from now on
_level = logging.WARNING
_format = _DEFAULT_FORMAT
_stream: Optional[IO[str]] = None

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def _make_handler() -> logging.Handler:
    # Resolved at call time so a replaced sys.stderr is honoured
    handler = logging.StreamHandler(_stream if _stream is not None else sys.stderr)
    handler.setLevel(_level)
    handler.setFormatter(logging.Formatter(_format))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached to avoid duplicate handlers. The logger name should
    typically be `__name__` from the calling module. New loggers pick up
    whatever :func:`configure_logging` and :func:`set_log_level` last set.

    Args:
        name: Logger name (typically `__name__`). If None, returns the
            package logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from graphpaths.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("relaxing edges")
    """
    if name is None:
        name = "graphpaths"

    logger_name = name if name == "graphpaths" or name.startswith("graphpaths.") else f"graphpaths.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    # Only configure if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        logger.setLevel(_level)
        logger.addHandler(_make_handler())
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def set_log_level(level: int | str) -> None:
    """Set the logging level for all graphpaths loggers.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or string
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').

    Example:
        >>> import logging
        >>> from graphpaths.logging import set_log_level
        >>> set_log_level(logging.DEBUG)
    """
    global _level
    _level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(_level)
        for handler in logger.handlers:
            handler.setLevel(_level)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Configure logging for graphpaths.

    Replaces the handlers of every cached logger and records the settings
    for loggers created later. It should typically be called once at
    application startup.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses default.
        stream: Output stream (default: sys.stderr).
    """
    global _level, _format, _stream
    _level = _coerce_level(level)
    _format = format_string if format_string is not None else _DEFAULT_FORMAT
    _stream = stream

    for logger in _loggers.values():
        logger.setLevel(_level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_make_handler())
