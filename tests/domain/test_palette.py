from __future__ import annotations

from lib_log_tint.domain.palette import Palette, default_palette, nord_palette, sunset_palette
from lib_log_tint.domain.style import strip_ansi
from lib_log_tint.domain.themes import nord_theme


def test_palette_helpers_apply_theme_roles() -> None:
    palette = nord_palette()
    theme = nord_theme()

    assert palette == Palette(theme)
    assert palette.info("ready") == theme.info.wrap("ready")
    assert palette.debug("x", 1) == theme.debug.wrap("x 1")
    assert palette.muted("later") == theme.time_key.wrap("later")


def test_palette_output_strips_to_plain_text() -> None:
    for palette in (default_palette(), nord_palette(), sunset_palette()):
        assert strip_ansi(palette.success("done")) == "done"
        assert strip_ansi(palette.warn("careful")) == "careful"
        assert strip_ansi(palette.error("failed", 2)) == "failed 2"
        assert strip_ansi(palette.kv("world", "overworld")) == "world=overworld"
