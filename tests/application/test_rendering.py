from __future__ import annotations

from lib_log_tint.application.rendering import DefaultRenderer, RendererFunc
from lib_log_tint.domain.parsing import parse_text_log_line
from lib_log_tint.domain.profile import Profile, default_profile
from lib_log_tint.domain.style import StyleSpan, strip_ansi
from lib_log_tint.domain.themes import default_theme


def test_render_order_and_compact_hiding() -> None:
    theme = default_theme()
    record = parse_text_log_line('time=12:00 level=INFO msg="Listener running." addr=[::]:19132 player=Steve')

    rendered = DefaultRenderer(theme, None).render(record)

    assert rendered == " ".join(
        [
            theme.time_value.dim().wrap("12:00"),
            theme.info.wrap("INF"),
            '"Listener running."',
            "addr=[::]:19132",
            "Steve",
        ]
    )


def test_level_badge_styles_and_labels() -> None:
    theme = default_theme()
    renderer = DefaultRenderer(theme, None)

    assert renderer.render(parse_text_log_line("level=debug")) == theme.debug.wrap("DBG")
    assert renderer.render(parse_text_log_line("level=WARNING")) == theme.warn.wrap("WARNING")
    assert renderer.render(parse_text_log_line("level=ERROR")) == theme.error.wrap("ERR")
    assert renderer.render(parse_text_log_line("level=TRACE")) == theme.info.wrap("TRACE")


def test_hide_keys_only_apply_in_compact_mode() -> None:
    theme = default_theme().with_enabled(False)
    record_line = "player=Steve port=1"

    compact = DefaultRenderer(theme, Profile(hide_keys={"player": True}, compact_mode=True))
    expanded = DefaultRenderer(theme, Profile(hide_keys={"player": True}, compact_mode=False))

    assert compact.render(parse_text_log_line(record_line)) == "Steve port=1"
    assert expanded.render(parse_text_log_line(record_line)) == "player=Steve port=1"


def test_time_field_rendered_without_key_in_compact_mode() -> None:
    theme = default_theme().with_enabled(False)
    record = parse_text_log_line("time=t1 time=t2")

    compact = DefaultRenderer(theme, Profile(hide_keys={"time": True}, compact_mode=True)).render(record)
    expanded = DefaultRenderer(theme, Profile(hide_keys={"time": True}, compact_mode=False)).render(record)

    assert compact == "t1 t2"
    assert expanded == "t1 time=t2"


def test_show_key_false_is_never_overridden() -> None:
    record = parse_text_log_line("addr=1")
    record.fields[0].show_key = False

    assert DefaultRenderer(default_theme(), Profile(compact_mode=False)).render(record) == "1"


def test_styled_fields_wrap_effective_value() -> None:
    style = StyleSpan().magenta()
    record = parse_text_log_line("world=0")
    record.fields[0].display_value = "overworld"
    record.fields[0].apply_style(style)

    assert DefaultRenderer(default_theme(), default_profile()).render(record) == style.wrap("overworld")


def test_empty_record_renders_empty_string() -> None:
    assert DefaultRenderer(default_theme(), None).render(parse_text_log_line("nonsense")) == ""


def test_renderer_func_adapter() -> None:
    renderer = RendererFunc(lambda record: record.message.upper())
    assert strip_ansi(renderer.render(parse_text_log_line("msg=hi"))) == "HI"
