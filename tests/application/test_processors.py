from __future__ import annotations

import logging

import pytest

from lib_log_tint.application.processors import (
    ErrorFieldProcessor,
    FieldStyleFunc,
    FieldStyleProcessor,
    FieldTransformFunc,
    FieldTransformProcessor,
    ProcessorFunc,
    StaticFieldProvider,
    StaticFieldTransformer,
    as_processor,
)
from lib_log_tint.domain.parsing import parse_text_log_line
from lib_log_tint.domain.style import StyleSpan

ERR_STYLE = StyleSpan().bold().bg_red()


def test_transform_sets_display_value_only_when_applied() -> None:
    record = parse_text_log_line("dimension=0 dimension=7")
    FieldTransformProcessor(StaticFieldTransformer({"dimension": {"0": "overworld"}})).process(record)

    first, second = record.fields
    assert (first.value, first.display_value, first.effective_value) == ("0", "overworld", "overworld")
    assert (second.value, second.display_value, second.effective_value) == ("7", None, "7")


def test_style_provider_sees_effective_value() -> None:
    seen: list[tuple[str, str]] = []

    def provider(key: str, value: str):
        seen.append((key, value))
        return StyleSpan().green(), key == "dimension"

    record = parse_text_log_line("dimension=0 port=1")
    FieldTransformProcessor(FieldTransformFunc(lambda key, value: ("overworld", key == "dimension"))).process(record)
    FieldStyleProcessor(FieldStyleFunc(provider)).process(record)

    assert seen == [("dimension", "overworld"), ("port", "1")]
    assert record.fields[0].styled is True
    assert record.fields[1].styled is False


def test_missing_hooks_are_no_ops() -> None:
    record = parse_text_log_line("a=1")
    FieldTransformProcessor(None).process(record)
    FieldStyleProcessor(None).process(record)

    assert record.fields[0].display_value is None
    assert record.fields[0].style is None


def test_error_fallback_styles_unstyled_error_fields() -> None:
    record = parse_text_log_line("error=boom err=bad errors=many")
    ErrorFieldProcessor(ERR_STYLE).process(record)

    styles = {item.key: item.style for item in record.fields}
    assert styles == {"error": ERR_STYLE, "err": ERR_STYLE, "errors": None}


def test_error_fallback_keeps_style_from_earlier_stage() -> None:
    hook_style = StyleSpan().yellow()
    record = parse_text_log_line("error=boom")
    FieldStyleProcessor(StaticFieldProvider({"error": hook_style})).process(record)
    ErrorFieldProcessor(ERR_STYLE).process(record)

    assert record.fields[0].style == hook_style


def test_failing_hooks_degrade_field(caplog: pytest.LogCaptureFixture) -> None:
    def broken(key: str, value: str):
        raise KeyError(key)

    record = parse_text_log_line("a=1 b=2")
    with caplog.at_level(logging.DEBUG, logger="lib_log_tint.application.processors"):
        FieldTransformProcessor(FieldTransformFunc(broken)).process(record)
        FieldStyleProcessor(FieldStyleFunc(broken)).process(record)

    assert all(item.display_value is None and not item.styled for item in record.fields)
    assert "field transformer failed" in caplog.text
    assert "field style provider failed" in caplog.text


def test_as_processor_wraps_callables_and_rejects_others() -> None:
    calls: list[str] = []
    processor = as_processor(lambda record: calls.append(record.raw))
    processor.process(parse_text_log_line("a=1"))

    assert isinstance(processor, ProcessorFunc)
    assert calls == ["a=1"]
    existing = ErrorFieldProcessor(ERR_STYLE)
    assert as_processor(existing) is existing
    with pytest.raises(TypeError):
        as_processor(42)
