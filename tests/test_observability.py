from __future__ import annotations

import json
import logging

from proccall.util.logging import configure_logging, get_logger, normalize_level
from proccall.util.observability import EventLogger


def test_event_logger_emits_json(caplog) -> None:
    logger = EventLogger("test.events", context={"component": "tests"})
    caplog.set_level(logging.DEBUG, logger="test.events")

    logger.log("sample.event", {"value": 42})

    assert caplog.records
    payload = json.loads(caplog.records[-1].message)
    assert payload["event_type"] == "sample.event"
    assert payload["payload"]["value"] == 42
    assert payload["context"] == {"component": "tests"}


def test_event_logger_skips_disabled_levels(caplog) -> None:
    logger = EventLogger("test.quiet")
    caplog.set_level(logging.WARNING, logger="test.quiet")

    logger.log("hidden.event", {"value": 1})
    logger.log("shown.event", {"value": 2}, level="warning")

    messages = [json.loads(record.message)["event_type"] for record in caplog.records]
    assert messages == ["shown.event"]


def test_normalize_level_falls_back_to_info() -> None:
    assert normalize_level(" debug ") == logging.DEBUG
    assert normalize_level("verbose") == logging.INFO
    assert get_logger("proccall.test").name == "proccall.test"


def test_configure_logging_sets_package_level() -> None:
    package_logger = logging.getLogger("proccall")
    previous = package_logger.level
    try:
        configure_logging("warning")
        assert package_logger.level == logging.WARNING
        assert not logging.getLogger("proccall.execution").isEnabledFor(logging.INFO)
    finally:
        package_logger.setLevel(previous)
