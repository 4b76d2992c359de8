"""Clock adapter returning local, timezone-aware timestamps."""

from __future__ import annotations

from datetime import datetime

from lib_log_tint.application.ports.time import ClockPort


class SystemClock(ClockPort):
    """Concrete clock port backed by the host's local time zone."""

    def now(self) -> datetime:
        """Return the current local timestamp with timezone info."""
        return datetime.now().astimezone()


__all__ = ["SystemClock"]
