"""Default renderer turning a processed :class:`LogRecord` into a display line."""

from __future__ import annotations

from typing import Callable

from lib_log_tint.domain.profile import Profile, normalize_profile
from lib_log_tint.domain.records import LogRecord, RecordField
from lib_log_tint.domain.themes import Theme


class RendererFunc:
    """Adapt a plain callable into a :class:`Renderer`."""

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[LogRecord], str]) -> None:
        self._func = func

    def render(self, record: LogRecord) -> str:
        return self._func(record)


class DefaultRenderer:
    """Render time, level badge, message, then fields, joined by single spaces.

    Examples
    --------
    >>> from lib_log_tint.domain.parsing import parse_text_log_line
    >>> from lib_log_tint.domain.style import strip_ansi
    >>> from lib_log_tint.domain.themes import default_theme
    >>> renderer = DefaultRenderer(default_theme(), None)
    >>> strip_ansi(renderer.render(parse_text_log_line('time=12:00 level=WARN msg=hot temp=90')))
    '12:00 WRN hot temp=90'
    """

    __slots__ = ("_theme", "_profile")

    def __init__(self, theme: Theme, profile: Profile | None) -> None:
        self._theme = theme
        self._profile = normalize_profile(profile)

    @property
    def profile(self) -> Profile:
        return self._profile

    def render(self, record: LogRecord) -> str:
        parts: list[str] = []
        if record.time:
            parts.append(self._theme.time_value.dim().wrap(record.time))
        if record.level:
            parts.append(self._level_badge(record.level))
        if record.message:
            parts.append(record.message)
        parts.extend(self._render_field(item) for item in record.fields)
        return " ".join(parts)

    def _render_field(self, item: RecordField) -> str:
        value = item.effective_value
        if item.styled and item.style is not None:
            value = item.style.wrap(value)
        show_key = item.show_key
        if self._profile.compact_mode and self._profile.hide_keys.get(item.key, False):
            show_key = False
        if not show_key:
            return value
        return f"{item.key}={value}"

    def _level_badge(self, level: str) -> str:
        upper = level.upper()
        label = self._profile.level_labels.get(upper, upper)
        if upper == "DEBUG":
            style = self._theme.debug
        elif upper in ("WARN", "WARNING"):
            style = self._theme.warn
        elif upper == "ERROR":
            style = self._theme.error
        else:
            style = self._theme.info
        return style.wrap(label)


__all__ = ["DefaultRenderer", "RendererFunc"]
