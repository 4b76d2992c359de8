"""Exceptions raised by application use cases."""

from __future__ import annotations

from pathlib import Path


class LibLogTintError(RuntimeError):
    """Base class for errors raised by lib_log_tint."""


class RotationError(LibLogTintError):
    """A log rotation step failed.

    The failing OS error is chained as ``__cause__``. ``step`` names the stage
    that failed (``mkdir``, ``stat``, ``open``, ``copy``, ``close`` or
    ``truncate``); the source file is only ever truncated after every earlier
    stage succeeded.
    """

    def __init__(self, step: str, path: Path) -> None:
        super().__init__(f"log rotation failed during {step}: {path}")
        self.step = step
        self.path = path


__all__ = ["LibLogTintError", "RotationError"]
