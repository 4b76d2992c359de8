"""Domain event describing one structured log call before it is formatted.

Purpose
-------
Provide the immutable record that travels from loggers through the fan-out
dispatcher into each sink.

Contents
--------
* :class:`LogEvent` dataclass with attribute helpers.
* Utility function ``_ensure_aware`` for timestamp validation.

System Role
-----------
Sits in the domain layer so sinks, the stdlib bridge, and the logger proxy
share one data contract.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Iterable

from .levels import LogLevel


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable log event handed to sinks.

    Attributes
    ----------
    timestamp:
        Time of the event; must be timezone-aware.
    level:
        :class:`LogLevel` severity.
    message:
        Rendered message passed by the caller (may be empty).
    attrs:
        Ordered key/value pairs supplied with the call.
    """

    timestamp: datetime
    level: LogLevel
    message: str
    attrs: tuple[tuple[str, Any], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _ensure_aware(self.timestamp)
        object.__setattr__(self, "attrs", tuple((str(key), value) for key, value in self.attrs))

    def with_attrs(self, attrs: Iterable[tuple[str, Any]]) -> "LogEvent":
        """Return a copy with ``attrs`` appended after the existing pairs."""

        return replace(self, attrs=(*self.attrs, *attrs))


__all__ = ["LogEvent"]
