"""Structured decomposition of one raw ``key=value`` log line."""

from __future__ import annotations

from dataclasses import dataclass, field

from .style import StyleSpan


@dataclass(slots=True)
class RecordField:
    """One displayable ``key=value`` pair.

    ``display_value`` overrides ``value`` for rendering only; processors that
    run later still see the raw ``value``.
    """

    key: str
    value: str
    display_value: str | None = None
    show_key: bool = True
    style: StyleSpan | None = None
    styled: bool = False

    @property
    def effective_value(self) -> str:
        """Return the value the renderer and style hooks should see."""

        return self.value if self.display_value is None else self.display_value

    def apply_style(self, style: StyleSpan) -> None:
        """Attach ``style`` and mark the field as styled."""

        self.style = style
        self.styled = True


@dataclass(slots=True)
class LogRecord:
    """Parsed log line owned by a single colorize call.

    Attributes
    ----------
    raw:
        The unmodified input line.
    time, level, message:
        First occurrences of the reserved ``time``, ``level`` and ``msg`` keys.
    fields:
        Remaining pairs in first-seen order; the order drives render order.
    """

    raw: str
    time: str = ""
    level: str = ""
    message: str = ""
    fields: list[RecordField] = field(default_factory=list)

    def find_field(self, key: str) -> RecordField | None:
        """Return the first field named ``key`` or ``None``."""

        for item in self.fields:
            if item.key == key:
                return item
        return None


__all__ = ["LogRecord", "RecordField"]
