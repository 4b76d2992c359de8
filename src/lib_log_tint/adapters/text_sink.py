"""Sink writing events as ``key=value`` text lines to a binary stream.

Purpose
-------
Produce the line format the rendering pipeline parses back:
``time=<RFC 3339> level=<LEVEL> msg=<message> key=value ...``.

Contents
--------
* :class:`TextSink` - :class:`SinkPort` implementation with level threshold,
  pre-bound attributes, and group prefixes.
* :func:`format_value` - quoting rules for values and keys.

System Role
-----------
The runtime builds two of these: one writing into the colorizing console
writer and one writing raw bytes into the append-only log file. Both sit
behind the fan-out dispatcher.
"""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from typing import Any, BinaryIO, Iterable

from lib_log_tint.application.ports.sink import SinkPort
from lib_log_tint.domain.events import LogEvent
from lib_log_tint.domain.levels import LogLevel


def _needs_quoting(text: str) -> bool:
    if not text:
        return True
    return any(char in ' ="' or not char.isprintable() for char in text)


def format_value(value: Any) -> str:
    """Render ``value`` as a token-safe string, quoting when required.

    Examples
    --------
    >>> format_value("plain")
    'plain'
    >>> format_value("two words")
    '"two words"'
    >>> format_value('say "hi"')
    '"say \\\\"hi\\\\""'
    >>> format_value("")
    '""'
    """

    text = value if isinstance(value, str) else str(value)
    if _needs_quoting(text):
        return json.dumps(text, ensure_ascii=False)
    return text


def format_timestamp(moment: datetime) -> str:
    """Return an RFC 3339 timestamp with millisecond precision.

    Examples
    --------
    >>> format_timestamp(datetime(2025, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc))
    '2025-01-02T03:04:05.678Z'
    """

    text = moment.isoformat(timespec="milliseconds")
    if text.endswith("+00:00"):
        return text[: -len("+00:00")] + "Z"
    return text


class TextSink(SinkPort):
    """Format events as text lines and write each with a single ``write`` call.

    Sinks derived through :meth:`with_attrs` / :meth:`with_group` share the
    stream and its lock with their parent.
    """

    def __init__(
        self,
        stream: BinaryIO,
        *,
        level: LogLevel = LogLevel.INFO,
        encoding: str = "utf-8",
        _attrs: tuple[tuple[str, Any], ...] = (),
        _prefix: str = "",
        _lock: threading.Lock | None = None,
    ) -> None:
        self._stream = stream
        self._level = level
        self._encoding = encoding
        self._attrs = _attrs
        self._prefix = _prefix
        self._lock = _lock if _lock is not None else threading.Lock()

    @property
    def level(self) -> LogLevel:
        return self._level

    def enabled(self, level: LogLevel) -> bool:
        return level.value >= self._level.value

    def handle(self, event: LogEvent) -> None:
        payload = (self.format_line(event) + "\n").encode(self._encoding, errors="replace")
        with self._lock:
            self._stream.write(payload)
            flush = getattr(self._stream, "flush", None)
            if flush is not None:
                flush()

    def format_line(self, event: LogEvent) -> str:
        """Return the text line for ``event`` without the trailing newline."""

        parts = [
            f"time={format_timestamp(event.timestamp)}",
            f"level={event.level.label}",
            f"msg={format_value(event.message)}",
        ]
        parts.extend(f"{format_value(key)}={format_value(value)}" for key, value in self._attrs)
        parts.extend(f"{format_value(self._prefix + key)}={format_value(value)}" for key, value in event.attrs)
        return " ".join(parts)

    def with_attrs(self, attrs: Iterable[tuple[str, Any]]) -> "TextSink":
        bound = tuple((self._prefix + str(key), value) for key, value in attrs)
        if not bound:
            return self
        return self._derive(attrs=self._attrs + bound, prefix=self._prefix)

    def with_group(self, name: str) -> "TextSink":
        if not name:
            return self
        return self._derive(attrs=self._attrs, prefix=f"{self._prefix}{name}.")

    def _derive(self, *, attrs: tuple[tuple[str, Any], ...], prefix: str) -> "TextSink":
        return TextSink(
            self._stream,
            level=self._level,
            encoding=self._encoding,
            _attrs=attrs,
            _prefix=prefix,
            _lock=self._lock,
        )


__all__ = ["TextSink", "format_timestamp", "format_value"]
