"""Ports for the pluggable stages of the rendering pipeline.

Purpose
-------
Describe the single-method capabilities callers plug into a pipeline: field
style lookup, field value transformation, record processors, and renderers.

Contents
--------
* :class:`FieldStyleProvider` - ``(key, value) -> (style, applied)``.
* :class:`FieldTransformer` - ``(key, value) -> (display_value, applied)``.
* :class:`Processor` - in-place record mutator.
* :class:`Renderer` - record to display string.

System Role
-----------
The application layer depends only on these protocols; function-backed and
lookup-backed variants live in :mod:`lib_log_tint.application.processors`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_tint.domain.records import LogRecord
from lib_log_tint.domain.style import StyleSpan


@runtime_checkable
class FieldStyleProvider(Protocol):
    """Choose a style for a field given its key and effective value."""

    def style_field(self, key: str, value: str) -> tuple[StyleSpan | None, bool]:
        """Return ``(style, True)`` to style the field, ``(None, False)`` otherwise."""


@runtime_checkable
class FieldTransformer(Protocol):
    """Rewrite the displayed value of a field."""

    def transform_field(self, key: str, value: str) -> tuple[str, bool]:
        """Return ``(display_value, True)`` to override the display value."""


@runtime_checkable
class Processor(Protocol):
    """Mutate a record in place."""

    def process(self, record: LogRecord) -> None: ...


@runtime_checkable
class Renderer(Protocol):
    """Turn a fully processed record into its display line."""

    def render(self, record: LogRecord) -> str: ...


__all__ = ["FieldStyleProvider", "FieldTransformer", "Processor", "Renderer"]
