"""Adapter implementations for the lib_log_tint ports.

Purpose
-------
Collect the concrete sinks, console writers, and platform helpers so the
runtime composition root can import them from one place.

Contents
--------
* :class:`TextSink`, :class:`FanoutHandler` - event sinks.
* :class:`ColorizingWriter`, :class:`RichConsoleAdapter` - console path.
* :class:`SinkLoggingHandler` - stdlib :mod:`logging` bridge.
* :class:`SystemClock`, :func:`enable_console_ansi` - platform helpers.
"""

from __future__ import annotations

from .clock import SystemClock
from .colorizing_writer import ColorizingWriter, ConsoleWriteError
from .console import RichConsoleAdapter
from .fanout import FanoutHandler
from .logging_bridge import SinkLoggingHandler
from .terminal import enable_console_ansi
from .text_sink import TextSink, format_timestamp, format_value

__all__ = [
    "ColorizingWriter",
    "ConsoleWriteError",
    "FanoutHandler",
    "RichConsoleAdapter",
    "SinkLoggingHandler",
    "SystemClock",
    "TextSink",
    "enable_console_ansi",
    "format_timestamp",
    "format_value",
]
