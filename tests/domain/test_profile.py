from __future__ import annotations

from lib_log_tint.domain.profile import Profile, default_profile, normalize_profile


def test_default_profile_hides_reserved_and_domain_keys() -> None:
    profile = default_profile()

    assert profile.compact_mode is True
    assert {key for key, hidden in profile.hide_keys.items() if hidden} == {
        "time",
        "level",
        "msg",
        "err",
        "error",
        "player",
        "world",
    }
    assert dict(profile.level_labels) == {"DEBUG": "DBG", "INFO": "INF", "WARN": "WRN", "ERROR": "ERR"}


def test_normalize_fills_missing_maps_and_keeps_compact_flag() -> None:
    profile = normalize_profile(Profile(hide_keys={"addr": True}, compact_mode=False))

    assert profile.compact_mode is False
    assert dict(profile.hide_keys) == {"addr": True}
    assert profile.level_labels["INFO"] == "INF"


def test_builders_return_updated_copies() -> None:
    base = default_profile()
    changed = base.with_hidden("addr").with_hidden("player", False).with_level_label("warn", "W!")

    assert changed.hide_keys["addr"] is True
    assert changed.hide_keys["player"] is False
    assert changed.level_labels["WARN"] == "W!"
    assert "addr" not in base.hide_keys
