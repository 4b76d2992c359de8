from __future__ import annotations

import threading

from lib_log_tint.application.pipeline import Pipeline, PipelineHandle
from lib_log_tint.application.processors import (
    ErrorFieldProcessor,
    FieldStyleProcessor,
    FieldTransformProcessor,
    StaticFieldProvider,
    StaticFieldTransformer,
)
from lib_log_tint.domain.profile import Profile
from lib_log_tint.domain.records import LogRecord
from lib_log_tint.domain.style import StyleSpan, strip_ansi
from lib_log_tint.domain.themes import default_theme, nord_theme


def test_processor_order_is_fixed() -> None:
    extra = lambda record: None  # noqa: E731
    pipeline = Pipeline(extras=[extra])

    kinds = [type(processor) for processor in pipeline.processors]
    assert kinds[:3] == [FieldTransformProcessor, FieldStyleProcessor, ErrorFieldProcessor]
    assert len(kinds) == 4


def test_colorize_runs_transform_style_and_render() -> None:
    world_style = StyleSpan().magenta()
    pipeline = Pipeline(
        theme=default_theme(),
        transformer=StaticFieldTransformer({"world": {"0": "overworld"}}),
        provider=StaticFieldProvider({"world": world_style}),
    )

    assert pipeline.colorize("world=0") == world_style.wrap("overworld")


def test_extras_run_after_error_fallback_and_may_override() -> None:
    forced = StyleSpan().green()

    def force_error_style(record: LogRecord) -> None:
        for item in record.fields:
            if item.key == "error":
                item.apply_style(forced)
                item.show_key = False

    pipeline = Pipeline(profile=Profile(hide_keys={}, compact_mode=False), extras=[force_error_style])

    assert pipeline.colorize("error=boom") == forced.wrap("boom")


def test_error_fallback_without_hooks_uses_theme_err_key() -> None:
    theme = nord_theme()
    assert Pipeline(theme=theme).colorize("error=boom") == theme.err_key.wrap("boom")


def test_colorize_is_deterministic() -> None:
    pipeline = Pipeline.default()
    line = 'time=2025-01-01T00:00:00Z level=INFO msg="Player joined" player=Steve world=overworld port=19132'

    assert pipeline.colorize(line) == pipeline.colorize(line)
    assert strip_ansi(pipeline.colorize(line)) == '2025-01-01T00:00:00Z INF "Player joined" Steve overworld port=19132'


def test_custom_renderer_object_or_callable() -> None:
    class Upper:
        def render(self, record: LogRecord) -> str:
            return record.message.upper()

    assert Pipeline(renderer=Upper()).colorize("msg=hi") == "HI"
    assert Pipeline(renderer=lambda record: f"<{record.level}>").colorize("level=INFO") == "<INFO>"


def test_handle_swap_returns_previous_pipeline() -> None:
    first = Pipeline(renderer=lambda record: "first")
    second = Pipeline(renderer=lambda record: "second")
    handle = PipelineHandle(first)

    assert handle.colorize("msg=x") == "first"
    assert handle.swap(second) is first
    assert handle.pipeline is second
    assert handle.colorize("msg=x") == "second"


def test_handle_serves_readers_during_swaps() -> None:
    handle = PipelineHandle(Pipeline(renderer=lambda record: "a"))
    results: list[str] = []
    errors: list[BaseException] = []

    def reader() -> None:
        try:
            for _ in range(200):
                results.append(handle.colorize("msg=x"))
        except BaseException as exc:  # pragma: no cover - surfaced below
            errors.append(exc)

    threads = [threading.Thread(target=reader) for _ in range(4)]
    for thread in threads:
        thread.start()
    for index in range(50):
        handle.swap(Pipeline(renderer=lambda record, name="ab"[index % 2]: name))
    for thread in threads:
        thread.join()

    assert errors == []
    assert len(results) == 800
    assert set(results) <= {"a", "b"}
