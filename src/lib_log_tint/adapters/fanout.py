"""Fan-out dispatcher presenting several sinks as one.

Purpose
-------
Deliver each event to every registered sink so one failing sink never blocks
the others, while still telling the caller that something went wrong.

Contents
--------
* :class:`FanoutHandler` - :class:`SinkPort` over an ordered tuple of sinks.

System Role
-----------
Installed by the runtime in front of the console and file sinks. Sinks are
attempted serially in registration order on the calling thread, so the
reported error is deterministic: the first-registered failing sink wins.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from lib_log_tint.application.ports.sink import SinkPort
from lib_log_tint.domain.events import LogEvent
from lib_log_tint.domain.levels import LogLevel


class FanoutHandler(SinkPort):
    """Forward events to all sinks and re-raise the first failure afterwards.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> class Recorder:
    ...     def __init__(self):
    ...         self.events = []
    ...     def enabled(self, level):
    ...         return True
    ...     def handle(self, event):
    ...         self.events.append(event.message)
    ...     def with_attrs(self, attrs):
    ...         return self
    ...     def with_group(self, name):
    ...         return self
    >>> first, second = Recorder(), Recorder()
    >>> fanout = FanoutHandler([first, second])
    >>> fanout.handle(LogEvent(datetime(2025, 1, 1, tzinfo=timezone.utc), LogLevel.INFO, "hi"))
    >>> first.events, second.events
    (['hi'], ['hi'])
    """

    __slots__ = ("_handlers",)

    def __init__(self, handlers: Sequence[SinkPort]) -> None:
        self._handlers: tuple[SinkPort, ...] = tuple(handlers)

    @property
    def handlers(self) -> tuple[SinkPort, ...]:
        return self._handlers

    def enabled(self, level: LogLevel) -> bool:
        return any(handler.enabled(level) for handler in self._handlers)

    def handle(self, event: LogEvent) -> None:
        first_error: BaseException | None = None
        for handler in self._handlers:
            if not handler.enabled(event.level):
                continue
            try:
                handler.handle(event)
            except Exception as exc:
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error

    def with_attrs(self, attrs: Iterable[tuple[str, Any]]) -> "FanoutHandler":
        materialised = tuple(attrs)
        return FanoutHandler([handler.with_attrs(materialised) for handler in self._handlers])

    def with_group(self, name: str) -> "FanoutHandler":
        return FanoutHandler([handler.with_group(name) for handler in self._handlers])


__all__ = ["FanoutHandler"]
