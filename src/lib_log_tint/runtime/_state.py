"""Runtime state container and access helpers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from threading import RLock
from typing import BinaryIO

from lib_log_tint.adapters import ColorizingWriter, FanoutHandler, SinkLoggingHandler
from lib_log_tint.application.pipeline import PipelineHandle
from lib_log_tint.application.ports import ConsolePort
from lib_log_tint.domain import LogLevel


@dataclass(slots=True)
class LoggingRuntime:
    """Aggregate of live collaborators assembled by the composition root."""

    sink: FanoutHandler
    bridge: SinkLoggingHandler
    writer: ColorizingWriter
    console: ConsolePort
    log_file: BinaryIO
    log_file_path: Path
    archive_dir: Path
    level: LogLevel
    theme: str | None
    previous_root_level: int


_PIPELINE_HANDLE = PipelineHandle()
_STATE: LoggingRuntime | None = None
_STATE_LOCK = RLock()


def pipeline_handle() -> PipelineHandle:
    """Return the process-wide handle every colorizing writer reads from."""

    return _PIPELINE_HANDLE


def set_runtime(runtime: LoggingRuntime) -> None:
    """Install ``runtime`` as the active singleton."""

    with _STATE_LOCK:
        global _STATE
        _STATE = runtime


def clear_runtime() -> LoggingRuntime | None:
    """Remove the active runtime if present and return it."""

    with _STATE_LOCK:
        global _STATE
        previous, _STATE = _STATE, None
        return previous


def current_runtime() -> LoggingRuntime:
    """Return the active runtime or raise when uninitialised."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("lib_log_tint.setup_default_logging() must be called before using the logging API")
        return _STATE


def is_initialised() -> bool:
    """Return ``True`` when :func:`lib_log_tint.setup_default_logging` has been called."""

    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "LoggingRuntime",
    "clear_runtime",
    "current_runtime",
    "is_initialised",
    "pipeline_handle",
    "set_runtime",
]
