"""Bridge from :mod:`logging` records into a :class:`SinkPort`.

Purpose
-------
Let code that logs through the standard library reach the fan-out sinks
without knowing about them.

Contents
--------
* :class:`SinkLoggingHandler` - :class:`logging.Handler` forwarding to a sink.

System Role
-----------
Installed on the root logger by :func:`lib_log_tint.runtime.setup_default_logging`.
Errors follow stdlib semantics: they are reported through
:meth:`logging.Handler.handleError` and never reach the caller.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Any

from lib_log_tint.application.ports.sink import SinkPort
from lib_log_tint.domain.events import LogEvent
from lib_log_tint.domain.levels import LogLevel

_STANDARD_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime", "taskName"}


class SinkLoggingHandler(logging.Handler):
    """Translate :class:`logging.LogRecord` objects into :class:`LogEvent` objects.

    Attributes passed through ``extra=`` become event attributes in insertion
    order; exception information is appended as an ``exc`` attribute. Records
    emitted while this handler is already emitting on the same thread (for
    example diagnostics logged by a sink) are dropped to avoid recursion.
    """

    def __init__(self, sink: SinkPort, level: int = logging.NOTSET) -> None:
        super().__init__(level=level)
        self._sink = sink
        self._local = threading.local()

    @property
    def sink(self) -> SinkPort:
        return self._sink

    def emit(self, record: logging.LogRecord) -> None:
        if getattr(self._local, "active", False):
            return
        self._local.active = True
        try:
            level = LogLevel.from_python_level(record.levelno)
            if not self._sink.enabled(level):
                return
            self._sink.handle(self.to_event(record, level))
        except Exception:
            self.handleError(record)
        finally:
            self._local.active = False

    def to_event(self, record: logging.LogRecord, level: LogLevel | None = None) -> LogEvent:
        """Return the :class:`LogEvent` equivalent of ``record``."""

        attrs: list[tuple[str, Any]] = [
            (key, value)
            for key, value in vars(record).items()
            if key not in _STANDARD_RECORD_ATTRIBUTES and not key.startswith("_")
        ]
        if record.exc_info:
            attrs.append(("exc", _exception_formatter.formatException(record.exc_info)))
        elif record.exc_text:
            attrs.append(("exc", record.exc_text))
        return LogEvent(
            timestamp=datetime.fromtimestamp(record.created).astimezone(),
            level=level if level is not None else LogLevel.from_python_level(record.levelno),
            message=record.getMessage(),
            attrs=tuple(attrs),
        )


_exception_formatter = logging.Formatter()


__all__ = ["SinkLoggingHandler"]
