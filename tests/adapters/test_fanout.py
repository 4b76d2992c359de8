from __future__ import annotations

import pytest

from lib_log_tint.adapters.fanout import FanoutHandler
from lib_log_tint.application.ports.sink import SinkPort
from lib_log_tint.domain.levels import LogLevel


class RecordingSink:
    def __init__(self, name: str, *, fail: BaseException | None = None, threshold: LogLevel = LogLevel.DEBUG) -> None:
        self.name = name
        self.fail = fail
        self.threshold = threshold
        self.events: list[str] = []
        self.attrs: tuple = ()
        self.groups: tuple[str, ...] = ()

    def enabled(self, level: LogLevel) -> bool:
        return level.value >= self.threshold.value

    def handle(self, event) -> None:
        self.events.append(event.message)
        if self.fail is not None:
            raise self.fail

    def with_attrs(self, attrs):
        derived = RecordingSink(self.name, fail=self.fail, threshold=self.threshold)
        derived.attrs = self.attrs + tuple(attrs)
        derived.groups = self.groups
        return derived

    def with_group(self, name: str):
        derived = RecordingSink(self.name, fail=self.fail, threshold=self.threshold)
        derived.attrs = self.attrs
        derived.groups = (*self.groups, name)
        return derived


def test_fanout_satisfies_sink_port() -> None:
    assert isinstance(FanoutHandler([]), SinkPort)
    assert isinstance(RecordingSink("a"), SinkPort)


def test_partial_failure_still_reaches_later_sinks(make_event) -> None:
    error = OSError("console gone")
    failing = RecordingSink("a", fail=error)
    healthy = RecordingSink("b")

    with pytest.raises(OSError) as excinfo:
        FanoutHandler([failing, healthy]).handle(make_event("hello"))

    assert excinfo.value is error
    assert failing.events == ["hello"]
    assert healthy.events == ["hello"]


def test_first_registered_error_wins(make_event) -> None:
    first = ValueError("first")
    second = RuntimeError("second")
    fanout = FanoutHandler([RecordingSink("a", fail=first), RecordingSink("b", fail=second)])

    with pytest.raises(ValueError) as excinfo:
        fanout.handle(make_event())

    assert excinfo.value is first


def test_enabled_is_any_and_sinks_filter_independently(make_event) -> None:
    verbose = RecordingSink("verbose", threshold=LogLevel.DEBUG)
    quiet = RecordingSink("quiet", threshold=LogLevel.ERROR)
    fanout = FanoutHandler([verbose, quiet])

    assert fanout.enabled(LogLevel.DEBUG)
    assert not FanoutHandler([quiet]).enabled(LogLevel.INFO)
    assert not FanoutHandler([]).enabled(LogLevel.ERROR)

    fanout.handle(make_event("debug", level=LogLevel.DEBUG))
    fanout.handle(make_event("error", level=LogLevel.ERROR))

    assert verbose.events == ["debug", "error"]
    assert quiet.events == ["error"]


def test_augmentation_returns_new_fanout() -> None:
    sinks = [RecordingSink("a"), RecordingSink("b")]
    fanout = FanoutHandler(sinks)

    with_attrs = fanout.with_attrs([("player", "Steve")])
    grouped = with_attrs.with_group("req")

    assert with_attrs is not fanout
    assert fanout.handlers == tuple(sinks)
    assert all(sink.attrs == () for sink in fanout.handlers)
    assert [sink.attrs for sink in with_attrs.handlers] == [(("player", "Steve"),)] * 2
    assert [sink.groups for sink in grouped.handlers] == [("req",), ("req",)]
