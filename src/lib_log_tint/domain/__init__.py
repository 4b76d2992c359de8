"""Domain entities and value objects used by the rendering pipeline."""

from __future__ import annotations

from .events import LogEvent
from .levels import LogLevel
from .palette import Palette, default_palette, nord_palette, sunset_palette
from .parsing import parse_text_log_line, tokenize
from .profile import Profile, default_profile, normalize_profile
from .records import LogRecord, RecordField
from .style import StyleSpan, disabled, new, strip_ansi
from .themes import THEMES, Theme, default_theme, nord_theme, resolve_theme, sunset_theme

__all__ = [
    "LogEvent",
    "LogLevel",
    "LogRecord",
    "Palette",
    "Profile",
    "RecordField",
    "StyleSpan",
    "THEMES",
    "Theme",
    "default_palette",
    "default_profile",
    "default_theme",
    "disabled",
    "new",
    "nord_palette",
    "nord_theme",
    "normalize_profile",
    "parse_text_log_line",
    "resolve_theme",
    "strip_ansi",
    "sunset_palette",
    "sunset_theme",
    "tokenize",
]
