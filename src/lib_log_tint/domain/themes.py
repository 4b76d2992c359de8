"""Theme presets mapping semantic log roles to :class:`StyleSpan` values.

Purpose
-------
Keep the colour choices for time stamps, level badges, and notable field keys
in one data table so presets stay declarative.

Contents
--------
* :class:`Theme` - frozen mapping of roles to spans.
* :data:`THEME_STYLE_DEFINITIONS` - preset palettes written as Rich style strings.
* :func:`default_theme`, :func:`nord_theme`, :func:`sunset_theme`,
  :func:`resolve_theme` - preset accessors.

System Role
-----------
Consumed by :class:`lib_log_tint.application.pipeline.Pipeline` at construction
time; a running pipeline never looks a theme up again.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Callable, Mapping

from .style import StyleSpan


@dataclass(slots=True, frozen=True)
class Theme:
    """Styles for every role the renderer and palette helpers know about."""

    time_key: StyleSpan
    time_value: StyleSpan
    msg_key: StyleSpan
    debug: StyleSpan
    info: StyleSpan
    warn: StyleSpan
    error: StyleSpan
    err_key: StyleSpan
    player_key: StyleSpan
    world_key: StyleSpan

    @classmethod
    def from_styles(cls, styles: Mapping[str, str]) -> "Theme":
        """Build a theme from role → Rich style string pairs.

        Raises
        ------
        ValueError
            When a role is missing or unknown.
        """

        roles = {item.name for item in fields(cls)}
        unknown = set(styles) - roles
        if unknown:
            raise ValueError(f"Unknown theme roles: {sorted(unknown)!r}")
        missing = roles - set(styles)
        if missing:
            raise ValueError(f"Missing theme roles: {sorted(missing)!r}")
        return cls(**{role: StyleSpan.parse(definition) for role, definition in styles.items()})

    def with_enabled(self, enabled: bool) -> "Theme":
        """Return a copy whose spans all share the given enabled switch."""

        return Theme(**{item.name: getattr(self, item.name).with_enabled(enabled) for item in fields(self)})


THEME_STYLE_DEFINITIONS: dict[str, dict[str, str]] = {
    "default": {
        "time_key": "bright_black",
        "time_value": "bright_blue",
        "msg_key": "bright_white",
        "debug": "bold black on cyan",
        "info": "bold black on #40E0D0",
        "warn": "bold black on yellow",
        "error": "bold white on red",
        "err_key": "bold white on red",
        "player_key": "bright_cyan",
        "world_key": "magenta",
    },
    "nord": {
        "time_key": "#81A1C1",
        "time_value": "#88C0D0",
        "msg_key": "bold #ECEFF4",
        "debug": "bold black on #88C0D0",
        "info": "bold black on #8FBCBB",
        "warn": "bold black on #EBCB8B",
        "error": "bold #ECEFF4 on #BF616A",
        "err_key": "bold #ECEFF4 on #D08770",
        "player_key": "#B48EAD",
        "world_key": "#5E81AC",
    },
    "sunset": {
        "time_key": "#F8C8DC",
        "time_value": "#F4A261",
        "msg_key": "#FFF1E6",
        "debug": "bold black on #9BF6FF",
        "info": "bold black on #70E0C0",
        "warn": "bold black on #FFD166",
        "error": "bold #FFF1E6 on #FF6B6B",
        "err_key": "bold #FFF1E6 on #FF8FA3",
        "player_key": "#CDB4DB",
        "world_key": "#A0C4FF",
    },
}
"""Built-in palettes keyed by preset name.

``nord`` is the cold, blue-toned preset and ``sunset`` the warm one. Values are
Rich style strings so the table reads like the console themes documented for
Rich users.
"""


def default_theme() -> Theme:
    return Theme.from_styles(THEME_STYLE_DEFINITIONS["default"])


def nord_theme() -> Theme:
    return Theme.from_styles(THEME_STYLE_DEFINITIONS["nord"])


def sunset_theme() -> Theme:
    return Theme.from_styles(THEME_STYLE_DEFINITIONS["sunset"])


THEMES: dict[str, Callable[[], Theme]] = {
    "default": default_theme,
    "nord": nord_theme,
    "sunset": sunset_theme,
}


def resolve_theme(name: str) -> Theme:
    """Return the preset called ``name`` (case-insensitive).

    Examples
    --------
    >>> resolve_theme("Nord") == nord_theme()
    True
    """

    key = name.strip().lower()
    try:
        factory = THEMES[key]
    except KeyError as exc:
        raise ValueError(f"Unknown theme: {name!r}") from exc
    return factory()


__all__ = [
    "THEMES",
    "THEME_STYLE_DEFINITIONS",
    "Theme",
    "default_theme",
    "nord_theme",
    "resolve_theme",
    "sunset_theme",
]
