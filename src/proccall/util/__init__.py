"""Utility helpers package."""

from proccall.util.logging import configure_logging, get_logger
from proccall.util.observability import EventLogger, LogEvent, create_event_logger

__all__ = [
    "EventLogger",
    "LogEvent",
    "configure_logging",
    "create_event_logger",
    "get_logger",
]
