"""Log level abstraction shared by sinks, the stdlib bridge, and configuration.

Purpose
-------
Offer the four severities understood by the ``key=value`` text format
(``DEBUG``, ``INFO``, ``WARN``, ``ERROR``) while staying numerically
compatible with :mod:`logging`.

Contents
--------
* :class:`LogLevel` enum with conversion helpers.

System Role
-----------
Used by sinks for threshold checks, by the text sink for the ``level=`` value,
and by configuration parsing (``LOG_LEVEL``).
"""

from __future__ import annotations

import logging
from enum import Enum


class LogLevel(Enum):
    """Enumerated logging levels used throughout the system."""

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @property
    def label(self) -> str:
        """Return the uppercase name written into ``level=`` tokens."""

        return self.name

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level."""

        return getattr(logging, self.name)

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Resolve a case-insensitive level name, accepting stdlib spellings.

        Examples
        --------
        >>> LogLevel.from_name("warning") is LogLevel.WARN
        True
        >>> LogLevel.from_name(" critical ") is LogLevel.ERROR
        True
        """

        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Map a stdlib numeric level onto the closest level not above it.

        Examples
        --------
        >>> LogLevel.from_python_level(logging.CRITICAL) is LogLevel.ERROR
        True
        >>> LogLevel.from_python_level(5) is LogLevel.DEBUG
        True
        """

        resolved = cls.DEBUG
        for member in cls:
            if member.value <= level:
                resolved = member
        return resolved


_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "ERROR",
    "FATAL": "ERROR",
    "ERR": "ERROR",
    "DBG": "DEBUG",
}
# Spellings accepted by :meth:`LogLevel.from_name` besides the member names.


__all__ = ["LogLevel"]
