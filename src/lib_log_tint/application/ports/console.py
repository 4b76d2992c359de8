"""Console port describing the live terminal destination.

Purpose
-------
Define the narrow text-stream contract the colorizing writer needs so Rich,
``sys.stdout``, or an in-memory buffer can all receive colorized lines.

Contents
--------
* :class:`ConsolePort` – runtime-checkable protocol with ``write``/``flush``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsolePort(Protocol):
    """Text destination receiving already colorized lines."""

    def write(self, text: str) -> object:
        """Write ``text`` (one or more newline-terminated lines)."""

    def flush(self) -> None:
        """Flush buffered output, if any."""


__all__ = ["ConsolePort"]
