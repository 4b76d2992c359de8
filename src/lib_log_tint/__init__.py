"""Colorized ``key=value`` log rendering with console/file fan-out and rotation.

Typical use::

    import lib_log_tint

    log_file = lib_log_tint.setup_default_logging(lib_log_tint.LoggerConfig(theme="nord"))
    lib_log_tint.get("server").info("Listener running.", addr="[::]:19132")
    lib_log_tint.shutdown()
    log_file.close()

Standard :mod:`logging` calls reach the same console and file sinks once
:func:`setup_default_logging` has run.
"""

from __future__ import annotations

import logging

from .application import (
    DefaultRenderer,
    FieldStyleFunc,
    FieldTransformFunc,
    LibLogTintError,
    Pipeline,
    PipelineHandle,
    ProcessorFunc,
    RendererFunc,
    RotationError,
    StaticFieldProvider,
    StaticFieldTransformer,
)
from .domain import (
    THEMES,
    LogLevel,
    LogRecord,
    Palette,
    Profile,
    RecordField,
    StyleSpan,
    Theme,
    default_palette,
    default_profile,
    default_theme,
    nord_palette,
    nord_theme,
    parse_text_log_line,
    resolve_theme,
    strip_ansi,
    sunset_palette,
    sunset_theme,
)
from .runtime import (
    LoggerConfig,
    LoggerProxy,
    RuntimeSnapshot,
    colorize_log_line,
    current_pipeline,
    get,
    inspect_runtime,
    is_initialised,
    logdemo,
    rotate_and_compress_log,
    set_pipeline,
    setup_default_logging,
    shutdown,
    summary_info,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "THEMES",
    "DefaultRenderer",
    "FieldStyleFunc",
    "FieldTransformFunc",
    "LibLogTintError",
    "LogLevel",
    "LogRecord",
    "LoggerConfig",
    "LoggerProxy",
    "Palette",
    "Pipeline",
    "PipelineHandle",
    "ProcessorFunc",
    "Profile",
    "RecordField",
    "RendererFunc",
    "RotationError",
    "RuntimeSnapshot",
    "StaticFieldProvider",
    "StaticFieldTransformer",
    "StyleSpan",
    "Theme",
    "colorize_log_line",
    "current_pipeline",
    "default_palette",
    "default_profile",
    "default_theme",
    "get",
    "inspect_runtime",
    "is_initialised",
    "logdemo",
    "nord_palette",
    "nord_theme",
    "parse_text_log_line",
    "resolve_theme",
    "rotate_and_compress_log",
    "set_pipeline",
    "setup_default_logging",
    "shutdown",
    "strip_ansi",
    "sunset_palette",
    "sunset_theme",
]
