from __future__ import annotations

import logging
from datetime import datetime

import pytest

from lib_log_tint.adapters.logging_bridge import SinkLoggingHandler
from lib_log_tint.domain.levels import LogLevel


class CollectingSink:
    def __init__(self, threshold: LogLevel = LogLevel.DEBUG, fail: bool = False) -> None:
        self.threshold = threshold
        self.fail = fail
        self.events = []

    def enabled(self, level: LogLevel) -> bool:
        return level.value >= self.threshold.value

    def handle(self, event) -> None:
        if self.fail:
            raise OSError("sink down")
        self.events.append(event)

    def with_attrs(self, attrs):
        return self

    def with_group(self, name):
        return self


@pytest.fixture
def bridge_logger():
    logger = logging.getLogger("tests.bridge")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    handlers: list[logging.Handler] = []

    def _attach(handler: logging.Handler) -> logging.Logger:
        logger.addHandler(handler)
        handlers.append(handler)
        return logger

    yield _attach
    for handler in handlers:
        logger.removeHandler(handler)
    logger.propagate = True


def test_records_become_events_with_extra_attributes(bridge_logger) -> None:
    sink = CollectingSink()
    logger = bridge_logger(SinkLoggingHandler(sink))

    logger.warning("player %s joined", "Steve", extra={"world": "overworld", "port": 19132})

    (event,) = sink.events
    assert event.level is LogLevel.WARN
    assert event.message == "player Steve joined"
    assert event.attrs == (("world", "overworld"), ("port", 19132))
    assert event.timestamp.tzinfo is not None
    assert abs(event.timestamp.timestamp() - datetime.now().timestamp()) < 60


def test_exception_text_is_attached(bridge_logger) -> None:
    sink = CollectingSink()
    logger = bridge_logger(SinkLoggingHandler(sink))

    try:
        raise ValueError("boom")
    except ValueError:
        logger.exception("failed")

    (event,) = sink.events
    assert event.level is LogLevel.ERROR
    key, value = event.attrs[-1]
    assert key == "exc"
    assert "ValueError: boom" in value


def test_disabled_levels_are_skipped(bridge_logger) -> None:
    sink = CollectingSink(threshold=LogLevel.WARN)
    logger = bridge_logger(SinkLoggingHandler(sink))

    logger.info("quiet")
    logger.error("loud")

    assert [event.message for event in sink.events] == ["loud"]


def test_sink_failures_go_to_handle_error(bridge_logger, monkeypatch: pytest.MonkeyPatch) -> None:
    handler = SinkLoggingHandler(CollectingSink(fail=True))
    reported: list[logging.LogRecord] = []
    monkeypatch.setattr(handler, "handleError", reported.append)
    logger = bridge_logger(handler)

    logger.info("lost")

    assert [record.getMessage() for record in reported] == ["lost"]


def test_nested_emission_is_dropped(bridge_logger) -> None:
    class ChattySink(CollectingSink):
        def handle(self, event) -> None:
            logging.getLogger("tests.bridge").info("from inside the sink")
            super().handle(event)

    sink = ChattySink()
    logger = bridge_logger(SinkLoggingHandler(sink))

    logger.info("outer")

    assert [event.message for event in sink.events] == ["outer"]
