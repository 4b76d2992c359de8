"""Rich-powered console adapter implementing :class:`ConsolePort`.

Purpose
-------
Print colorized lines through Rich so terminal detection, ``NO_COLOR`` and
forced colour behave the way Rich users expect.

Contents
--------
* :class:`RichConsoleAdapter` - adapter constructed by the runtime.

System Role
-----------
Primary human-facing destination of the colorizing writer. Incoming lines
already carry SGR sequences; they are decoded with :meth:`rich.text.Text.from_ansi`
so Rich can downgrade or drop them for the detected terminal.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from lib_log_tint.application.ports.console import ConsolePort


class RichConsoleAdapter(ConsolePort):
    """Write ANSI-styled text to a Rich console.

    Examples
    --------
    >>> from io import StringIO
    >>> console = Console(file=StringIO(), record=True, width=120)
    >>> adapter = RichConsoleAdapter(console=console)
    >>> adapter.write("\\x1b[31mboom\\x1b[0m\\n")
    14
    >>> console.export_text()
    'boom\\n'
    """

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
    ) -> None:
        """Configure the adapter with an injected console or colour overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=True if force_color else None, no_color=no_color, highlight=False)
        self._no_color = no_color

    @property
    def console(self) -> Console:
        return self._console

    def write(self, text: str) -> int:
        """Print ``text``; each newline-terminated line becomes one console line."""

        if not text:
            return 0
        body, newline, _ = text.rpartition("\n") if text.endswith("\n") else (text, "", "")
        renderable = Text.from_ansi(body)
        if self._no_color:
            renderable = Text(renderable.plain)
        self._console.print(renderable, end=newline, highlight=False, soft_wrap=True, markup=False)
        return len(text)

    def flush(self) -> None:
        self._console.file.flush()


__all__ = ["RichConsoleAdapter"]
