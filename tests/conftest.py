from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO

import pytest
from rich.console import Console

from lib_log_tint import runtime as tint_runtime
from lib_log_tint.application.pipeline import Pipeline
from lib_log_tint.domain.events import LogEvent
from lib_log_tint.domain.levels import LogLevel

_LOG_ENV_VARS = (
    "LOG_FILE_PATH",
    "LOG_ARCHIVE_DIR",
    "LOG_LEVEL",
    "LOG_THEME",
    "LOG_COMPACT",
    "LOG_FORCE_COLOR",
    "LOG_NO_COLOR",
)


@pytest.fixture
def record_console() -> Console:
    """Rich console recording output into memory, wide enough to avoid wrapping."""

    return Console(file=StringIO(), record=True, width=240, color_system=None, force_terminal=False)


@pytest.fixture(autouse=True)
def _clean_log_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _LOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_runtime():
    yield
    tint_runtime.shutdown()
    tint_runtime.set_pipeline(Pipeline.default())


@pytest.fixture
def make_event():
    def _make(message: str = "hello", level: LogLevel = LogLevel.INFO, **attrs: object) -> LogEvent:
        return LogEvent(
            timestamp=datetime(2025, 9, 23, 12, 0, 1, 250000, tzinfo=timezone.utc),
            level=level,
            message=message,
            attrs=tuple(attrs.items()),
        )

    return _make
