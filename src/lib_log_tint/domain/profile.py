"""Rendering policy: key visibility, level abbreviations, compact mode."""

from __future__ import annotations

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Mapping

_DEFAULT_HIDE_KEYS: Mapping[str, bool] = MappingProxyType(
    {
        "time": True,
        "level": True,
        "msg": True,
        "err": True,
        "error": True,
        "player": True,
        "world": True,
    }
)

_DEFAULT_LEVEL_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "DEBUG": "DBG",
        "INFO": "INF",
        "WARN": "WRN",
        "ERROR": "ERR",
    }
)


@dataclass(slots=True, frozen=True)
class Profile:
    """Display policy consumed by the default renderer.

    ``None`` maps fall back to the defaults when a renderer normalises the
    profile. ``hide_keys`` only applies while ``compact_mode`` is on, and it
    can only suppress keys, never force them visible.
    """

    hide_keys: Mapping[str, bool] | None = None
    level_labels: Mapping[str, str] | None = None
    compact_mode: bool = True

    def with_hidden(self, key: str, hidden: bool = True) -> "Profile":
        """Return a copy whose hide map sets ``key`` to ``hidden``.

        Examples
        --------
        >>> profile = default_profile().with_hidden("name", False)
        >>> profile.hide_keys["name"], profile.hide_keys["time"]
        (False, True)
        """

        current = dict(self.hide_keys if self.hide_keys is not None else _DEFAULT_HIDE_KEYS)
        current[key] = hidden
        return replace(self, hide_keys=MappingProxyType(current))

    def with_level_label(self, level: str, label: str) -> "Profile":
        """Return a copy that abbreviates ``level`` as ``label``."""

        current = dict(self.level_labels if self.level_labels is not None else _DEFAULT_LEVEL_LABELS)
        current[level.upper()] = label
        return replace(self, level_labels=MappingProxyType(current))


def default_profile() -> Profile:
    """Return the compact profile hiding reserved and well-known keys."""

    return Profile(hide_keys=_DEFAULT_HIDE_KEYS, level_labels=_DEFAULT_LEVEL_LABELS, compact_mode=True)


def normalize_profile(profile: Profile | None) -> Profile:
    """Fill unset maps with defaults and freeze caller-supplied ones.

    Examples
    --------
    >>> normalize_profile(Profile(compact_mode=False)).level_labels["WARN"]
    'WRN'
    >>> normalize_profile(None).compact_mode
    True
    """

    if profile is None:
        return default_profile()
    hide_keys = _DEFAULT_HIDE_KEYS if profile.hide_keys is None else MappingProxyType(dict(profile.hide_keys))
    level_labels = _DEFAULT_LEVEL_LABELS if profile.level_labels is None else MappingProxyType(dict(profile.level_labels))
    return Profile(hide_keys=hide_keys, level_labels=level_labels, compact_mode=profile.compact_mode)


__all__ = ["Profile", "default_profile", "normalize_profile"]
