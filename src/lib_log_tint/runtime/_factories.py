"""Factories and small runtime collaborators used by the composition root."""

from __future__ import annotations

from pathlib import Path
from typing import Any, BinaryIO

from lib_log_tint.adapters import RichConsoleAdapter, SystemClock
from lib_log_tint.application.pipeline import Pipeline
from lib_log_tint.application.ports import ClockPort, ConsolePort, SinkPort
from lib_log_tint.domain import LogEvent, LogLevel

from ._settings import LoggerSettings


class LoggerProxy:
    """Lightweight facade for structured logging calls.

    Each call builds a :class:`LogEvent` and hands it to the bound sink
    (normally the fan-out over console and file). Keyword arguments become
    attributes in call order. Sink failures propagate to the caller.

    Examples
    --------
    >>> class Recorder:
    ...     def __init__(self, attrs=()):
    ...         self.events, self.attrs = [], tuple(attrs)
    ...     def enabled(self, level):
    ...         return level is not LogLevel.DEBUG
    ...     def handle(self, event):
    ...         self.events.append((event.level.label, event.message, self.attrs + event.attrs))
    ...     def with_attrs(self, attrs):
    ...         derived = Recorder(self.attrs + tuple(attrs))
    ...         derived.events = self.events
    ...         return derived
    ...     def with_group(self, name):
    ...         return self
    >>> sink = Recorder()
    >>> proxy = LoggerProxy("app", sink).bind(player="Steve")
    >>> proxy.debug("hidden")
    >>> proxy.info("joined", world="overworld")
    >>> sink.events
    [('INFO', 'joined', (('player', 'Steve'), ('world', 'overworld')))]
    """

    def __init__(self, name: str | None, sink: SinkPort, clock: ClockPort | None = None) -> None:
        self._name = name
        self._sink = sink
        self._clock = clock if clock is not None else SystemClock()

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def sink(self) -> SinkPort:
        return self._sink

    def debug(self, message: str, **attrs: Any) -> None:
        self._log(LogLevel.DEBUG, message, attrs)

    def info(self, message: str, **attrs: Any) -> None:
        self._log(LogLevel.INFO, message, attrs)

    def warning(self, message: str, **attrs: Any) -> None:
        self._log(LogLevel.WARN, message, attrs)

    warn = warning

    def error(self, message: str, **attrs: Any) -> None:
        self._log(LogLevel.ERROR, message, attrs)

    def log(self, level: LogLevel, message: str, **attrs: Any) -> None:
        self._log(level, message, attrs)

    def bind(self, **attrs: Any) -> "LoggerProxy":
        """Return a proxy whose events always carry ``attrs``."""

        return LoggerProxy(self._name, self._sink.with_attrs(tuple(attrs.items())), self._clock)

    def group(self, name: str) -> "LoggerProxy":
        """Return a proxy that prefixes later attribute keys with ``name.``."""

        return LoggerProxy(self._name, self._sink.with_group(name), self._clock)

    def _log(self, level: LogLevel, message: str, attrs: dict[str, Any]) -> None:
        if not self._sink.enabled(level):
            return
        event = LogEvent(timestamp=self._clock.now(), level=level, message=message, attrs=tuple(attrs.items()))
        self._sink.handle(event)


def create_console(settings: LoggerSettings) -> ConsolePort:
    """Return the injected console or a Rich adapter honouring colour overrides."""

    if settings.console is not None:
        return settings.console
    return RichConsoleAdapter(force_color=settings.force_color, no_color=settings.no_color)


def create_pipeline(settings: LoggerSettings) -> Pipeline:
    """Build the colorizing pipeline described by ``settings``."""

    return Pipeline(
        theme=settings.theme,
        profile=settings.profile,
        provider=settings.field_provider,
        transformer=settings.field_transform,
        extras=settings.processors,
        renderer=settings.renderer,
    )


def open_log_file(path: Path) -> BinaryIO:
    """Open ``path`` for binary append, creating parent directories."""

    path.parent.mkdir(parents=True, exist_ok=True)
    return path.open("ab")


__all__ = ["LoggerProxy", "create_console", "create_pipeline", "open_log_file"]
