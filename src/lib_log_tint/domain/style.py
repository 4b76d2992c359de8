"""Composable terminal text decoration.

Purpose
-------
Wrap strings in ANSI SGR on/off markers without tying the rendering pipeline
to a particular console library.

Contents
--------
* :class:`StyleSpan` - immutable decoration descriptor with chainable builders.
* :func:`new` / :func:`disabled` - enabled and no-op starting points.
* :func:`strip_ansi` - remove SGR sequences from rendered text.

System Role
-----------
Leaf of the domain layer. Themes, field style hooks, and the renderer all pass
:class:`StyleSpan` values around; Rich is only consulted to translate human
style strings (``"bold white on red"``) into SGR codes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Any

from rich.errors import StyleSyntaxError
from rich.style import Style

_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")
_RESET = "\x1b[0m"

_RICH_ATTRIBUTE_CODES: tuple[tuple[str, str], ...] = (
    ("bold", "1"),
    ("dim", "2"),
    ("italic", "3"),
    ("underline", "4"),
    ("reverse", "7"),
    ("strike", "9"),
)
# Rich style attributes translated by :meth:`StyleSpan.parse`, in emission order.


def _parse_hex_color(value: str) -> tuple[int, int, int] | None:
    digits = value.strip().removeprefix("#")
    if len(digits) != 6:
        return None
    try:
        packed = int(digits, 16)
    except ValueError:
        return None
    return packed >> 16, (packed >> 8) & 0xFF, packed & 0xFF


@dataclass(slots=True, frozen=True)
class StyleSpan:
    """Immutable list of SGR codes plus an enabled switch.

    Every builder returns a new span; the receiver is never modified.

    Examples
    --------
    >>> StyleSpan().red().bold().wrap("boom")
    '\\x1b[31;1mboom\\x1b[0m'
    >>> StyleSpan(enabled=False).red().wrap("boom")
    'boom'
    >>> StyleSpan().red().wrap("")
    ''
    """

    codes: tuple[str, ...] = ()
    enabled: bool = True

    @classmethod
    def parse(cls, definition: str, *, enabled: bool = True) -> "StyleSpan":
        """Build a span from a Rich style definition such as ``"bold black on cyan"``.

        Examples
        --------
        >>> StyleSpan.parse("bold black on cyan").codes
        ('1', '30', '46')
        >>> StyleSpan.parse("#40E0D0").codes
        ('38', '2', '64', '224', '208')
        """

        try:
            style = Style.parse(definition)
        except StyleSyntaxError as exc:
            raise ValueError(f"Invalid style definition: {definition!r}") from exc
        codes = [code for attribute, code in _RICH_ATTRIBUTE_CODES if getattr(style, attribute)]
        if style.color is not None:
            codes.extend(style.color.get_ansi_codes(foreground=True))
        if style.bgcolor is not None:
            codes.extend(style.bgcolor.get_ansi_codes(foreground=False))
        return cls(codes=tuple(codes), enabled=enabled)

    def with_enabled(self, enabled: bool) -> "StyleSpan":
        """Return a copy with the enabled switch set to ``enabled``."""

        return replace(self, enabled=enabled)

    def _code(self, code: int | str) -> "StyleSpan":
        return replace(self, codes=(*self.codes, str(code)))

    def bold(self) -> "StyleSpan":
        return self._code(1)

    def dim(self) -> "StyleSpan":
        return self._code(2)

    def italic(self) -> "StyleSpan":
        return self._code(3)

    def underline(self) -> "StyleSpan":
        return self._code(4)

    def inverse(self) -> "StyleSpan":
        return self._code(7)

    def strikethrough(self) -> "StyleSpan":
        return self._code(9)

    def black(self) -> "StyleSpan":
        return self._code(30)

    def red(self) -> "StyleSpan":
        return self._code(31)

    def green(self) -> "StyleSpan":
        return self._code(32)

    def yellow(self) -> "StyleSpan":
        return self._code(33)

    def blue(self) -> "StyleSpan":
        return self._code(34)

    def magenta(self) -> "StyleSpan":
        return self._code(35)

    def cyan(self) -> "StyleSpan":
        return self._code(36)

    def white(self) -> "StyleSpan":
        return self._code(37)

    def gray(self) -> "StyleSpan":
        return self._code(90)

    def bright_black(self) -> "StyleSpan":
        return self._code(90)

    def bright_red(self) -> "StyleSpan":
        return self._code(91)

    def bright_green(self) -> "StyleSpan":
        return self._code(92)

    def bright_yellow(self) -> "StyleSpan":
        return self._code(93)

    def bright_blue(self) -> "StyleSpan":
        return self._code(94)

    def bright_magenta(self) -> "StyleSpan":
        return self._code(95)

    def bright_cyan(self) -> "StyleSpan":
        return self._code(96)

    def bright_white(self) -> "StyleSpan":
        return self._code(97)

    def bg_black(self) -> "StyleSpan":
        return self._code(40)

    def bg_red(self) -> "StyleSpan":
        return self._code(41)

    def bg_green(self) -> "StyleSpan":
        return self._code(42)

    def bg_yellow(self) -> "StyleSpan":
        return self._code(43)

    def bg_blue(self) -> "StyleSpan":
        return self._code(44)

    def bg_magenta(self) -> "StyleSpan":
        return self._code(45)

    def bg_cyan(self) -> "StyleSpan":
        return self._code(46)

    def bg_white(self) -> "StyleSpan":
        return self._code(47)

    def rgb(self, red: int, green: int, blue: int) -> "StyleSpan":
        """Add a 24-bit foreground colour."""

        return self._code(f"38;2;{red};{green};{blue}")

    def bg_rgb(self, red: int, green: int, blue: int) -> "StyleSpan":
        """Add a 24-bit background colour."""

        return self._code(f"48;2;{red};{green};{blue}")

    def hex(self, value: str) -> "StyleSpan":
        """Add a ``#RRGGBB`` foreground colour; invalid input leaves the span unchanged.

        Examples
        --------
        >>> StyleSpan().hex("#zzzzzz") == StyleSpan()
        True
        """

        parsed = _parse_hex_color(value)
        return self if parsed is None else self.rgb(*parsed)

    def bg_hex(self, value: str) -> "StyleSpan":
        """Add a ``#RRGGBB`` background colour; invalid input leaves the span unchanged."""

        parsed = _parse_hex_color(value)
        return self if parsed is None else self.bg_rgb(*parsed)

    def wrap(self, text: str) -> str:
        """Surround ``text`` with the SGR on/off markers of this span."""

        if not self.enabled or not self.codes or not text:
            return text
        return f"\x1b[{';'.join(self.codes)}m{text}{_RESET}"

    def sprint(self, *values: Any) -> str:
        """Join ``values`` like :func:`print` (space separated) and wrap the result."""

        return self.wrap(" ".join(str(value) for value in values))

    def sprintf(self, template: str, *args: Any) -> str:
        """Apply ``%``-style formatting and wrap the result."""

        return self.wrap(template % args if args else template)


def new() -> StyleSpan:
    """Return an enabled span without decorations."""

    return StyleSpan()


def disabled() -> StyleSpan:
    """Return a span whose :meth:`StyleSpan.wrap` is a no-op."""

    return StyleSpan(enabled=False)


def strip_ansi(text: str) -> str:
    """Remove SGR escape sequences from ``text``.

    Examples
    --------
    >>> strip_ansi("\\x1b[31mred\\x1b[0m")
    'red'
    """

    return _ANSI_PATTERN.sub("", text)


__all__ = ["StyleSpan", "disabled", "new", "strip_ansi"]
