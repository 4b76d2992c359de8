"""Built-in record processors and hook adapters.

Purpose
-------
Implement the fixed processor stages (transform → style → error fallback) and
the function-backed / lookup-backed variants of the style and transform hooks.

Contents
--------
* :class:`FieldStyleFunc`, :class:`StaticFieldProvider` - style hook variants.
* :class:`FieldTransformFunc`, :class:`StaticFieldTransformer` - transform hook variants.
* :class:`ProcessorFunc` - wrap a callable as a :class:`Processor`.
* :class:`FieldTransformProcessor`, :class:`FieldStyleProcessor`,
  :class:`ErrorFieldProcessor` - the built-in stages.

System Role
-----------
:class:`lib_log_tint.application.pipeline.Pipeline` chains these stages ahead
of caller-supplied extras. Processors never raise: a missing hook is a no-op
and a hook that raises leaves the affected field untouched.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping

from lib_log_tint.domain.records import LogRecord
from lib_log_tint.domain.style import StyleSpan

from .ports.hooks import FieldStyleProvider, FieldTransformer, Processor

logger = logging.getLogger(__name__)

ERROR_FIELD_KEYS = frozenset({"err", "error"})


class FieldStyleFunc:
    """Function-backed :class:`FieldStyleProvider`."""

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[str, str], tuple[StyleSpan | None, bool]]) -> None:
        self._func = func

    def style_field(self, key: str, value: str) -> tuple[StyleSpan | None, bool]:
        return self._func(key, value)


class StaticFieldProvider:
    """Lookup-backed :class:`FieldStyleProvider` keyed by field name.

    Examples
    --------
    >>> provider = StaticFieldProvider({"addr": StyleSpan().cyan()})
    >>> provider.style_field("addr", "[::]:19132")[1]
    True
    >>> provider.style_field("port", "1")
    (None, False)
    """

    __slots__ = ("_styles",)

    def __init__(self, styles: Mapping[str, StyleSpan]) -> None:
        self._styles = dict(styles)

    def style_field(self, key: str, value: str) -> tuple[StyleSpan | None, bool]:
        style = self._styles.get(key)
        return style, style is not None


class FieldTransformFunc:
    """Function-backed :class:`FieldTransformer`."""

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[str, str], tuple[str, bool]]) -> None:
        self._func = func

    def transform_field(self, key: str, value: str) -> tuple[str, bool]:
        return self._func(key, value)


class StaticFieldTransformer:
    """Lookup-backed :class:`FieldTransformer` translating known values per key.

    Examples
    --------
    >>> transformer = StaticFieldTransformer({"dimension": {"0": "overworld"}})
    >>> transformer.transform_field("dimension", "0")
    ('overworld', True)
    >>> transformer.transform_field("dimension", "9")
    ('', False)
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Mapping[str, str]]) -> None:
        self._values = {key: dict(mapping) for key, mapping in values.items()}

    def transform_field(self, key: str, value: str) -> tuple[str, bool]:
        translated = self._values.get(key, {}).get(value)
        if translated is None:
            return "", False
        return translated, True


class ProcessorFunc:
    """Adapt a plain callable into a :class:`Processor`."""

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[LogRecord], None]) -> None:
        self._func = func

    def process(self, record: LogRecord) -> None:
        self._func(record)


class FieldTransformProcessor:
    """Stage 1: set ``display_value`` wherever the transformer applies."""

    __slots__ = ("_transformer",)

    def __init__(self, transformer: FieldTransformer | None) -> None:
        self._transformer = transformer

    def process(self, record: LogRecord) -> None:
        if self._transformer is None:
            return
        for item in record.fields:
            try:
                display_value, applied = self._transformer.transform_field(item.key, item.value)
            except Exception:
                logger.debug("field transformer failed for key %r", item.key, exc_info=True)
                continue
            if applied:
                item.display_value = display_value


class FieldStyleProcessor:
    """Stage 2: style fields the provider recognises."""

    __slots__ = ("_provider",)

    def __init__(self, provider: FieldStyleProvider | None) -> None:
        self._provider = provider

    def process(self, record: LogRecord) -> None:
        if self._provider is None:
            return
        for item in record.fields:
            try:
                style, applied = self._provider.style_field(item.key, item.effective_value)
            except Exception:
                logger.debug("field style provider failed for key %r", item.key, exc_info=True)
                continue
            if applied and style is not None:
                item.apply_style(style)


class ErrorFieldProcessor:
    """Stage 3: give unstyled ``err``/``error`` fields the theme's error-key style."""

    __slots__ = ("_style",)

    def __init__(self, style: StyleSpan) -> None:
        self._style = style

    def process(self, record: LogRecord) -> None:
        for item in record.fields:
            if item.styled:
                continue
            if item.key in ERROR_FIELD_KEYS:
                item.apply_style(self._style)


def as_processor(candidate: object) -> Processor:
    """Return ``candidate`` if it has ``process``; wrap bare callables in :class:`ProcessorFunc`."""

    if hasattr(candidate, "process"):
        return candidate  # type: ignore[return-value]
    if callable(candidate):
        return ProcessorFunc(candidate)
    raise TypeError(f"Processor must define process() or be callable, got {type(candidate).__name__}")


__all__ = [
    "ERROR_FIELD_KEYS",
    "ErrorFieldProcessor",
    "FieldStyleFunc",
    "FieldStyleProcessor",
    "FieldTransformFunc",
    "FieldTransformProcessor",
    "ProcessorFunc",
    "StaticFieldProvider",
    "StaticFieldTransformer",
    "as_processor",
]
