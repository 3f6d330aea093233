"""Structured event logging for process lifecycle events."""

from __future__ import annotations

import json
import time
from dataclasses import asdict, dataclass, field
from typing import Any

from proccall.util.logging import get_logger, normalize_level


@dataclass(frozen=True)
class LogEvent:
    """Structured log event payload.

    Attributes:
        event_type: Machine-readable event name.
        timestamp: Unix timestamp in seconds.
        payload: Structured data associated with the event.
        context: Optional shared context fields.
    """

    event_type: str
    timestamp: float
    payload: dict[str, Any]
    context: dict[str, Any] = field(default_factory=dict)


class EventLogger:
    """Logger that emits machine-readable JSON events."""

    def __init__(self, logger_name: str, context: dict[str, Any] | None = None) -> None:
        """Initialize the event logger.

        Args:
            logger_name: Logger name used for output.
            context: Optional shared context to attach to every event.
        """

        self._logger = get_logger(logger_name)
        self._context = context or {}

    def log(
        self,
        event_type: str,
        payload: dict[str, Any],
        *,
        level: str = "DEBUG",
        context: dict[str, Any] | None = None,
    ) -> None:
        """Emit a structured log event.

        Serialization is skipped entirely when the level is disabled.

        Args:
            event_type: Machine-readable event name.
            payload: Structured event data.
            level: Logging level string (default: DEBUG).
            context: Optional context overrides for this event.
        """

        numeric_level = normalize_level(level)
        if not self._logger.isEnabledFor(numeric_level):
            return
        event = LogEvent(
            event_type=event_type,
            timestamp=time.time(),
            payload=payload,
            context={**self._context, **(context or {})},
        )
        message = json.dumps(asdict(event), sort_keys=True, default=str)
        self._logger.log(numeric_level, message)


def create_event_logger(context: dict[str, Any] | None = None) -> EventLogger:
    """Create the default process event logger."""

    return EventLogger("proccall.events", context=context)
