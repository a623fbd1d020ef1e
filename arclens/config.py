"""Configuration helpers for group defaults."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class CoordinationDefaults:
    """Defaults applied when group options leave a field unset."""

    threshold: float = 100.0
    arc_gap: float = 0.01
    animation_duration: float = 1000.0
    snap_distance: float = 50.0


_DEFAULTS = CoordinationDefaults()


def get_defaults() -> CoordinationDefaults:
    return copy.deepcopy(_DEFAULTS)


def set_defaults(defaults: CoordinationDefaults) -> None:
    global _DEFAULTS
    _DEFAULTS = copy.deepcopy(defaults)


__all__ = ["CoordinationDefaults", "get_defaults", "set_defaults"]
