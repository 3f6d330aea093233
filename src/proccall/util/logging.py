"""Logging utilities for proccall."""

from __future__ import annotations

import logging
from typing import Final

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
PACKAGE_LOGGER: Final[str] = "proccall"
_LEVELS: Final[dict[str, int]] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def configure_logging(level: str = "INFO", fmt: str | None = None) -> None:
    """Configure logging for proccall's loggers.

    A console handler is installed only when the root logger has none. The
    level always applies to the ``proccall`` logger namespace (engine,
    lifecycle events and CLI wiring), so a host application's own logging
    setup is left alone.

    Args:
        level: Logging level name (e.g., "INFO", "DEBUG").
        fmt: Optional logging format string. Defaults to a standard structured format.
    """

    numeric_level = normalize_level(level)
    logging.basicConfig(level=numeric_level, format=fmt or DEFAULT_LOG_FORMAT)
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger for the given module or component."""

    return logging.getLogger(name)


def normalize_level(level: str) -> int:
    """Map a level name to its numeric value, falling back to INFO."""

    normalized = level.strip().upper()
    return _LEVELS.get(normalized, logging.INFO)
