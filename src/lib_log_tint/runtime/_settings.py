"""Logger configuration and environment-driven settings resolution.

Purpose
-------
Describe what callers may configure (:class:`LoggerConfig`) and turn it into
the fully resolved :class:`LoggerSettings` the composition root consumes,
applying ``LOG_*`` environment overrides on the way.

Contents
--------
* :class:`LoggerConfig` - caller-facing configuration dataclass.
* :class:`LoggerSettings` - resolved, immutable settings.
* :func:`build_logger_settings` - merge config and environment.
* :func:`coerce_level`, :func:`env_bool` - shared coercion helpers.

System Role
-----------
Environment variables win over arguments so operators can restyle or relocate
logs without code changes. Configuration mistakes surface as ``ValueError``
naming the offending value.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Callable, Sequence

from lib_log_tint.application.ports import ConsolePort, FieldStyleProvider, FieldTransformer, Processor, Renderer
from lib_log_tint.application.use_cases.rotate import DEFAULT_ARCHIVE_DIR, DEFAULT_LOG_FILE
from lib_log_tint.domain import LogLevel, Profile, Theme, default_theme, normalize_profile, resolve_theme

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(slots=True)
class LoggerConfig:
    """Options accepted by :func:`lib_log_tint.setup_default_logging`.

    ``theme`` accepts a :class:`Theme` or a preset name; ``None`` selects the
    default preset. ``profile`` ``None`` selects :func:`default_profile`.
    ``console`` replaces the Rich console (handy for tests and embedding).
    """

    log_file_path: str | os.PathLike[str] = DEFAULT_LOG_FILE
    archive_dir: str | os.PathLike[str] = DEFAULT_ARCHIVE_DIR
    level: LogLevel | str = LogLevel.INFO
    theme: Theme | str | None = None
    profile: Profile | None = None
    field_provider: FieldStyleProvider | None = None
    field_transform: FieldTransformer | None = None
    processors: Sequence[Processor | Callable[..., Any]] = ()
    renderer: Renderer | Callable[..., str] | None = None
    console: ConsolePort | None = None
    force_color: bool = False
    no_color: bool = False


@dataclass(frozen=True, slots=True)
class LoggerSettings:
    """Resolved configuration after defaults and environment overrides."""

    log_file_path: Path
    archive_dir: Path
    level: LogLevel
    theme: Theme
    theme_name: str | None
    profile: Profile
    field_provider: FieldStyleProvider | None = None
    field_transform: FieldTransformer | None = None
    processors: tuple[Processor | Callable[..., Any], ...] = field(default_factory=tuple)
    renderer: Renderer | Callable[..., str] | None = None
    console: ConsolePort | None = None
    force_color: bool = False
    no_color: bool = False


def coerce_level(level: str | LogLevel) -> LogLevel:
    """Normalise level inputs (string or enum) into :class:`LogLevel`.

    Examples
    --------
    >>> coerce_level("warning") is LogLevel.WARN
    True
    >>> coerce_level(LogLevel.ERROR) is LogLevel.ERROR
    True
    """
    if isinstance(level, LogLevel):
        return level
    return LogLevel.from_name(level)


def env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Unset or blank variables yield ``default``; unrecognised values raise.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    >>> env_bool('LOG_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_EXAMPLE_BOOL'] = 'off'
    >>> env_bool('LOG_EXAMPLE_BOOL', default=True)
    False
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL')
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    normalised = value.strip().lower()
    if normalised in _TRUE_VALUES:
        return True
    if normalised in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {value!r}")


def _env_text(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _resolve_theme(theme: Theme | str | None) -> tuple[Theme, str | None]:
    if theme is None:
        return default_theme(), "default"
    if isinstance(theme, Theme):
        return theme, None
    return resolve_theme(theme), theme.strip().lower()


def build_logger_settings(config: LoggerConfig | None = None) -> LoggerSettings:
    """Merge ``config`` with ``LOG_*`` environment overrides.

    Recognised variables: ``LOG_FILE_PATH``, ``LOG_ARCHIVE_DIR``,
    ``LOG_LEVEL``, ``LOG_THEME``, ``LOG_COMPACT``, ``LOG_FORCE_COLOR`` and
    ``LOG_NO_COLOR``.

    Examples
    --------
    >>> import os
    >>> for key in ("LOG_LEVEL", "LOG_THEME", "LOG_FILE_PATH", "LOG_ARCHIVE_DIR", "LOG_COMPACT"):
    ...     _ = os.environ.pop(key, None)
    >>> settings = build_logger_settings(LoggerConfig(level="debug", theme="nord"))
    >>> settings.level is LogLevel.DEBUG, settings.theme_name, settings.log_file_path.name
    (True, 'nord', 'server.log')
    """

    cfg = config if config is not None else LoggerConfig()

    log_file_path = Path(_env_text("LOG_FILE_PATH") or os.fspath(cfg.log_file_path) or DEFAULT_LOG_FILE)
    archive_dir = Path(_env_text("LOG_ARCHIVE_DIR") or os.fspath(cfg.archive_dir) or DEFAULT_ARCHIVE_DIR)
    level = coerce_level(_env_text("LOG_LEVEL") or cfg.level)
    env_theme = _env_text("LOG_THEME")
    theme, theme_name = _resolve_theme(env_theme if env_theme is not None else cfg.theme)

    profile = normalize_profile(cfg.profile)
    compact = env_bool("LOG_COMPACT", profile.compact_mode)
    if compact != profile.compact_mode:
        profile = replace(profile, compact_mode=compact)

    return LoggerSettings(
        log_file_path=log_file_path,
        archive_dir=archive_dir,
        level=level,
        theme=theme,
        theme_name=theme_name,
        profile=profile,
        field_provider=cfg.field_provider,
        field_transform=cfg.field_transform,
        processors=tuple(cfg.processors),
        renderer=cfg.renderer,
        console=cfg.console,
        force_color=env_bool("LOG_FORCE_COLOR", cfg.force_color),
        no_color=env_bool("LOG_NO_COLOR", cfg.no_color),
    )


__all__ = [
    "LoggerConfig",
    "LoggerSettings",
    "build_logger_settings",
    "coerce_level",
    "env_bool",
]
