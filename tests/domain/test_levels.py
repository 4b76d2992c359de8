from __future__ import annotations

import logging

import pytest

from lib_log_tint.domain.levels import LogLevel


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", LogLevel.DEBUG),
        ("INFO", LogLevel.INFO),
        ("Warning", LogLevel.WARN),
        ("warn", LogLevel.WARN),
        ("error", LogLevel.ERROR),
        ("CRITICAL", LogLevel.ERROR),
        ("fatal", LogLevel.ERROR),
    ],
)
def test_from_name_accepts_case_insensitive_matches(name: str, expected: LogLevel) -> None:
    assert LogLevel.from_name(name) is expected


def test_from_name_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        LogLevel.from_name("verbose")


@pytest.mark.parametrize(
    "number, expected",
    [
        (logging.NOTSET, LogLevel.DEBUG),
        (logging.DEBUG, LogLevel.DEBUG),
        (logging.INFO, LogLevel.INFO),
        (25, LogLevel.INFO),
        (logging.WARNING, LogLevel.WARN),
        (logging.ERROR, LogLevel.ERROR),
        (logging.CRITICAL, LogLevel.ERROR),
    ],
)
def test_from_python_level_maps_to_closest_level_below(number: int, expected: LogLevel) -> None:
    assert LogLevel.from_python_level(number) is expected


def test_labels_and_python_levels() -> None:
    assert [level.label for level in LogLevel] == ["DEBUG", "INFO", "WARN", "ERROR"]
    assert LogLevel.WARN.to_python_level() == logging.WARNING
