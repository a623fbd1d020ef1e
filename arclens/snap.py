"""Snap groups: interactive lenses whose handles merge when dragged close together.

Every unordered pair of lenses in a group is either ``UNSNAPPED`` or
``SNAPPED``.  A pair snaps when the centers come within
``min(snap_distance, max(r1, r2))`` of each other and the lens being snapped
to is not collapsed (``size > 0``); it unsnaps once the centers are more than
``unsnap_distance`` apart.  Between the two distances the pair keeps its state.
While a pair is snapped, the lens whose location changed pushes its location
onto the partner's handle, so the two move as one.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Sequence, Set

from .config import get_defaults
from .errors import ConfigurationError
from .geometry import dist
from .lens import InteractiveLens
from .reactive import Bool, Point, Reactive, Rule, get_default_reactive
from .registry import SNAP_REGISTRY, MembershipRegistry

logger = logging.getLogger(__name__)


class SnapState(enum.Enum):
    UNSNAPPED = "unsnapped"
    SNAPPED = "snapped"


@dataclass
class SnapGroupOptions:
    """Snap group options.

    ``snap_distance`` falls back to :func:`~arclens.config.get_defaults` and
    ``unsnap_distance`` to ``snap_distance`` (no hysteresis).
    """

    snap_distance: Optional[float] = None
    unsnap_distance: Optional[float] = None
    active: bool = True


Pair = FrozenSet[InteractiveLens]


def _pair(a: InteractiveLens, b: InteractiveLens) -> Pair:
    return frozenset((a, b))


class SnapGroup:
    """Keeps a snap state per lens pair and glues snapped lenses together as they move."""

    def __init__(
        self,
        lenses: Sequence[InteractiveLens],
        *,
        snap_distance: float,
        unsnap_distance: float,
        active: bool,
        reactive: Reactive,
        registry: MembershipRegistry,
    ) -> None:
        self.lenses = tuple(lenses)
        self.snap_distance = snap_distance
        self.unsnap_distance = unsnap_distance
        self.reactive = reactive
        self.active = Bool(active)
        self._registry = registry
        self._states: Dict[Pair, SnapState] = {}
        self._rules: List[Rule] = []
        self.disposed = False

    def _start(self) -> None:
        for lens in self.lenses:
            self._rules.append(
                self.reactive.do(
                    [lens.location, self.active],
                    lambda lens=lens: self._evaluate(lens),
                    name=f"snap.evaluate[{lens.name or id(lens)}]",
                )
            )

    def _snap_radius(self, lens: InteractiveLens, other: InteractiveLens) -> float:
        return min(self.snap_distance, max(lens.radius.value, other.radius.value))

    def _evaluate(self, lens: InteractiveLens) -> None:
        if not self.active.value:
            self._clear(lens)
            return

        for other in self.lenses:
            if other is lens:
                continue
            key = _pair(lens, other)
            distance = dist(lens.location, other.location)
            if self._states.get(key) is SnapState.SNAPPED:
                if distance > self.unsnap_distance:
                    self._states[key] = SnapState.UNSNAPPED
                    logger.debug("Unsnapped %r from %r at distance %.6g", lens, other, distance)
                else:
                    other.handle.copy_from(lens.location)
            elif other.size.value > 0 and distance <= self._snap_radius(lens, other):
                self._states[key] = SnapState.SNAPPED
                logger.debug("Snapped %r onto %r at distance %.6g", other, lens, distance)
                other.handle.copy_from(lens.location)

    def _clear(self, lens: InteractiveLens) -> None:
        for key in [key for key in self._states if lens in key]:
            del self._states[key]

    def state(self, a: InteractiveLens, b: InteractiveLens) -> SnapState:
        return self._states.get(_pair(a, b), SnapState.UNSNAPPED)

    def is_snapped(self, a: InteractiveLens, b: InteractiveLens) -> bool:
        return self.state(a, b) is SnapState.SNAPPED

    def partners(self, lens: InteractiveLens) -> Set[InteractiveLens]:
        """Lenses currently snapped to ``lens``."""

        return {
            other
            for other in self.lenses
            if other is not lens and self.is_snapped(lens, other)
        }

    def dispose(self) -> None:
        if self.disposed:
            return
        for rule in self._rules:
            rule.dispose()
        self._rules.clear()
        self._states.clear()
        self._registry.release(self)
        self.disposed = True
        logger.info("Disposed snap group with %d lens(es)", len(self.lenses))

    def __repr__(self) -> str:
        snapped = sum(1 for state in self._states.values() if state is SnapState.SNAPPED)
        return f"SnapGroup(lenses={len(self.lenses)}, active={self.active.value}, snapped_pairs={snapped})"


def create_snap_group(
    lenses: Sequence[InteractiveLens],
    options: Optional[SnapGroupOptions] = None,
    *,
    reactive: Optional[Reactive] = None,
    registry: Optional[MembershipRegistry] = None,
) -> SnapGroup:
    """Create a snap group over ``lenses``.

    Raises :class:`~arclens.errors.ConfigurationError` when
    ``unsnap_distance < snap_distance`` and
    :class:`~arclens.errors.MembershipError` when any lens already belongs to
    a snap group; in both cases nothing is registered.
    """

    options = options or SnapGroupOptions()
    snap_distance = get_defaults().snap_distance if options.snap_distance is None else options.snap_distance
    unsnap_distance = snap_distance if options.unsnap_distance is None else options.unsnap_distance

    if unsnap_distance < snap_distance:
        raise ConfigurationError(
            f"unsnap_distance ({unsnap_distance}) must be >= snap_distance ({snap_distance})"
        )
    if snap_distance < 0:
        raise ConfigurationError(f"snap_distance must be >= 0 (got {snap_distance})")
    for lens in lenses:
        if not isinstance(getattr(lens, "handle", None), Point):
            raise ConfigurationError(f"{lens!r} has no drag handle; snap groups need interactive lenses")

    registry = registry or SNAP_REGISTRY
    group = SnapGroup(
        lenses,
        snap_distance=snap_distance,
        unsnap_distance=unsnap_distance,
        active=options.active,
        reactive=reactive or get_default_reactive(),
        registry=registry,
    )
    registry.claim(group.lenses, group)
    try:
        group._start()
    except Exception:
        group.dispose()
        raise
    logger.info(
        "Created snap group with %d lens(es) (snap=%s, unsnap=%s)",
        len(group.lenses),
        snap_distance,
        unsnap_distance,
    )
    return group


__all__ = ["SnapGroup", "SnapGroupOptions", "SnapState", "create_snap_group"]
