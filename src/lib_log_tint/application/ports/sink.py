"""Sink port consumed and produced by the fan-out dispatcher."""

from __future__ import annotations

from typing import Any, Iterable, Protocol, runtime_checkable

from lib_log_tint.domain.events import LogEvent
from lib_log_tint.domain.levels import LogLevel


@runtime_checkable
class SinkPort(Protocol):
    """Structured logging handler capability set.

    ``handle`` raises on delivery failure. ``with_attrs`` and ``with_group``
    return new sinks; the receiver is left untouched.
    """

    def enabled(self, level: LogLevel) -> bool: ...

    def handle(self, event: LogEvent) -> None: ...

    def with_attrs(self, attrs: Iterable[tuple[str, Any]]) -> "SinkPort": ...

    def with_group(self, name: str) -> "SinkPort": ...


__all__ = ["SinkPort"]
