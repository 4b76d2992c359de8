"""Runtime composition helpers wiring domain, application, and adapters.

Purpose
-------
Translate :class:`LoggerSettings` into the live :class:`LoggingRuntime`:
console and file :class:`TextSink` objects behind one
:class:`FanoutHandler`, the colorizing writer feeding the console, and the
stdlib bridge that forwards :mod:`logging` records.

Contents
--------
* :func:`build_runtime` - assemble collaborators without touching globals.
* :func:`install_runtime` / :func:`uninstall_runtime` - attach to and detach
  from the root logger and the shared pipeline handle.

System Role
-----------
Anchors the clean-architecture boundary: adapters are chosen here, while
:mod:`lib_log_tint.runtime` exposes only the façade.
"""

from __future__ import annotations

import logging

from lib_log_tint.adapters import ColorizingWriter, FanoutHandler, SinkLoggingHandler, TextSink, enable_console_ansi
from lib_log_tint.application.pipeline import Pipeline, PipelineHandle

from ._factories import create_console, create_pipeline, open_log_file
from ._settings import LoggerSettings
from ._state import LoggingRuntime

logger = logging.getLogger(__name__)


def build_runtime(settings: LoggerSettings, handle: PipelineHandle) -> tuple[LoggingRuntime, Pipeline]:
    """Assemble the logging runtime from resolved settings.

    Returns the runtime plus the pipeline that :func:`install_runtime` should
    swap into ``handle``. Raises :class:`OSError` when the archive directory
    or log file cannot be created; nothing global has changed at that point.
    """

    enable_console_ansi()
    pipeline = create_pipeline(settings)
    settings.archive_dir.mkdir(parents=True, exist_ok=True)
    log_file = open_log_file(settings.log_file_path)

    console = create_console(settings)
    writer = ColorizingWriter(console, handle)
    sink = FanoutHandler(
        [
            TextSink(writer, level=settings.level),
            TextSink(log_file, level=settings.level),
        ]
    )
    bridge = SinkLoggingHandler(sink, level=settings.level.to_python_level())
    root = logging.getLogger()
    runtime = LoggingRuntime(
        sink=sink,
        bridge=bridge,
        writer=writer,
        console=console,
        log_file=log_file,
        log_file_path=settings.log_file_path,
        archive_dir=settings.archive_dir,
        level=settings.level,
        theme=settings.theme_name,
        previous_root_level=root.level,
    )
    return runtime, pipeline


def install_runtime(runtime: LoggingRuntime, pipeline: Pipeline, handle: PipelineHandle) -> None:
    """Swap ``pipeline`` in and attach the bridge to the root logger."""

    logger.debug("logging configured: file=%s level=%s theme=%s", runtime.log_file_path, runtime.level.label, runtime.theme)
    handle.swap(pipeline)
    root = logging.getLogger()
    root.addHandler(runtime.bridge)
    root.setLevel(runtime.level.to_python_level())


def uninstall_runtime(runtime: LoggingRuntime, handle: PipelineHandle, *, restore_pipeline: bool = True) -> None:
    """Detach the bridge, restore the root level and (optionally) the default pipeline."""

    root = logging.getLogger()
    root.removeHandler(runtime.bridge)
    root.setLevel(runtime.previous_root_level)
    runtime.bridge.close()
    if restore_pipeline:
        handle.swap(Pipeline.default())


__all__ = ["build_runtime", "install_runtime", "uninstall_runtime"]
