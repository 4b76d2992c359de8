"""Runtime façade that wires the colorizing logging backbone.

Purpose
-------
Expose a stable entry point (``setup_default_logging``, ``get``,
``shutdown``, ``colorize_log_line``, ``set_pipeline``) that host applications
use instead of importing the inner layers directly.

Contents
--------
* ``setup_default_logging`` – composition root for console + file fan-out.
* ``get`` – accessor for :class:`LoggerProxy` objects bound to the fan-out.
* ``colorize_log_line`` / ``set_pipeline`` / ``current_pipeline`` – access to
  the process-wide pipeline handle.
* ``shutdown`` – deterministic teardown.
* ``inspect_runtime`` / ``logdemo`` / ``summary_info`` – diagnostics and demo.

System Role
-----------
Forms the outer shell: high-level policy depends only on abstractions;
adapters are hidden behind this interface so host code sees a small,
documented API.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, BinaryIO

from lib_log_tint.application.pipeline import Pipeline, PipelineHandle
from lib_log_tint.application.use_cases.rotate import rotate_and_compress_log
from lib_log_tint.domain import LogLevel

from ._composition import build_runtime, install_runtime, uninstall_runtime
from ._factories import LoggerProxy
from ._settings import LoggerConfig, LoggerSettings, build_logger_settings, coerce_level
from ._state import clear_runtime, current_runtime, is_initialised, pipeline_handle, set_runtime

_SETUP_LOCK = threading.Lock()


def setup_default_logging(config: LoggerConfig | None = None) -> BinaryIO:
    """Configure console + file logging and return the open log file.

    Enables ANSI processing, builds the pipeline from ``config`` (after
    ``LOG_*`` environment overrides), swaps it into the shared handle, creates
    the archive directory, opens the log file for append, and attaches a
    :class:`~lib_log_tint.adapters.SinkLoggingHandler` over the console/file
    fan-out to the root logger.

    Calling it again replaces the previous configuration. The returned file
    belongs to the caller, who closes it after :func:`shutdown`.

    Raises
    ------
    ValueError
        Unknown theme or level names, invalid boolean environment values.
    OSError
        The archive directory or log file cannot be created.
    """

    settings = build_logger_settings(config)
    handle = pipeline_handle()
    with _SETUP_LOCK:
        runtime, pipeline = build_runtime(settings, handle)
        previous = clear_runtime()
        if previous is not None:
            runtime.previous_root_level = previous.previous_root_level
            uninstall_runtime(previous, handle, restore_pipeline=False)
        install_runtime(runtime, pipeline, handle)
        set_runtime(runtime)
    return runtime.log_file


def shutdown() -> None:
    """Detach the bridge and restore the default pipeline.

    The log file returned by :func:`setup_default_logging` stays open; its
    owner closes it. Calling :func:`shutdown` without a runtime is a no-op.
    """

    with _SETUP_LOCK:
        runtime = clear_runtime()
        if runtime is None:
            return
        runtime.writer.flush()
        uninstall_runtime(runtime, pipeline_handle())


def get(name: str | None = None) -> LoggerProxy:
    """Return a :class:`LoggerProxy` emitting through the console/file fan-out.

    A non-empty ``name`` is attached to every event as the ``logger``
    attribute.

    Raises
    ------
    RuntimeError
        When :func:`setup_default_logging` has not been called.
    """

    runtime = current_runtime()
    sink = runtime.sink.with_attrs((("logger", name),)) if name else runtime.sink
    return LoggerProxy(name, sink)


def colorize_log_line(line: str) -> str:
    """Colorize ``line`` with the currently active pipeline.

    Examples
    --------
    >>> from lib_log_tint.domain import strip_ansi
    >>> strip_ansi(colorize_log_line("level=WARN msg=careful player=Steve"))
    'WRN careful Steve'
    """

    return pipeline_handle().colorize(line)


def set_pipeline(pipeline: Pipeline) -> Pipeline:
    """Make ``pipeline`` the active one and return the pipeline it replaced."""

    return pipeline_handle().swap(pipeline)


def current_pipeline() -> Pipeline:
    return pipeline_handle().pipeline


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the active logging runtime."""

    log_file_path: Path
    archive_dir: Path
    level: LogLevel
    theme: str | None
    sink_count: int


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the current runtime state."""

    runtime = current_runtime()
    return RuntimeSnapshot(
        log_file_path=runtime.log_file_path,
        archive_dir=runtime.archive_dir,
        level=runtime.level,
        theme=runtime.theme,
        sink_count=len(runtime.sink.handlers),
    )


_DEMO_SAMPLES: tuple[tuple[LogLevel, str, dict[str, Any]], ...] = (
    (LogLevel.DEBUG, "Loading world", {"world": "overworld", "chunks": 1024}),
    (LogLevel.INFO, "Listener running.", {"addr": "[::]:19132"}),
    (LogLevel.INFO, "Player joined", {"player": "Steve", "world": "overworld"}),
    (LogLevel.WARN, "Tick took longer than expected", {"elapsed": "75ms"}),
    (LogLevel.ERROR, "Chunk save failed", {"err": "disk full", "world": "nether"}),
)


def logdemo(
    *,
    theme: str = "default",
    log_file_path: str | Path = "logdemo.log",
    archive_dir: str | Path = "logs",
    config: LoggerConfig | None = None,
) -> dict[str, Any]:
    """Emit sample log entries through a temporary runtime.

    Sets up logging at ``DEBUG`` with ``theme``, emits one event per sample
    through the fan-out, then shuts down and closes the log file. Returns the
    theme name, emitted messages and log file path.

    Raises
    ------
    RuntimeError
        If the logging runtime is already initialised.
    ValueError
        When ``theme`` is unknown.
    """

    if is_initialised():
        raise RuntimeError("logdemo() requires lib_log_tint to be uninitialised. Call shutdown() first.")

    demo_config = replace(
        config if config is not None else LoggerConfig(),
        log_file_path=log_file_path,
        archive_dir=archive_dir,
        level=LogLevel.DEBUG,
        theme=theme,
    )
    log_file = setup_default_logging(demo_config)
    emitted: list[str] = []
    try:
        snapshot = inspect_runtime()
        demo_logger = get("logdemo")
        for level, message, attrs in _DEMO_SAMPLES:
            demo_logger.log(level, message, **attrs)
            emitted.append(message)
    finally:
        shutdown()
        log_file.close()

    return {
        "theme": snapshot.theme,
        "events": emitted,
        "log_file": snapshot.log_file_path,
    }


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point."""

    from .. import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


__all__ = [
    "LoggerConfig",
    "LoggerProxy",
    "LoggerSettings",
    "PipelineHandle",
    "RuntimeSnapshot",
    "build_logger_settings",
    "coerce_level",
    "colorize_log_line",
    "current_pipeline",
    "get",
    "inspect_runtime",
    "is_initialised",
    "logdemo",
    "pipeline_handle",
    "rotate_and_compress_log",
    "set_pipeline",
    "setup_default_logging",
    "shutdown",
    "summary_info",
]
