"""Theme-aware helpers for ad-hoc console messages outside the log pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .themes import Theme, default_theme, nord_theme, sunset_theme


@dataclass(slots=True, frozen=True)
class Palette:
    """Format banner and status text with the roles of a :class:`Theme`.

    Examples
    --------
    >>> from lib_log_tint.domain.style import strip_ansi
    >>> strip_ansi(default_palette().kv("port", 19132))
    'port=19132'
    """

    theme: Theme

    def success(self, *values: Any) -> str:
        return self.theme.info.bold().sprint(*values)

    def info(self, *values: Any) -> str:
        return self.theme.info.sprint(*values)

    def warn(self, *values: Any) -> str:
        return self.theme.warn.bold().sprint(*values)

    def error(self, *values: Any) -> str:
        return self.theme.error.bold().sprint(*values)

    def debug(self, *values: Any) -> str:
        return self.theme.debug.sprint(*values)

    def muted(self, *values: Any) -> str:
        return self.theme.time_key.sprint(*values)

    def kv(self, key: str, value: Any) -> str:
        """Render ``key=value`` with the message-key and time-value roles."""

        return f"{self.theme.msg_key.wrap(key)}={self.theme.time_value.wrap(str(value))}"


def default_palette() -> Palette:
    return Palette(default_theme())


def nord_palette() -> Palette:
    return Palette(nord_theme())


def sunset_palette() -> Palette:
    return Palette(sunset_theme())


__all__ = ["Palette", "default_palette", "nord_palette", "sunset_palette"]
