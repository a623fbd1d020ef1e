"""Proximity groups: lenses that share a full turn of arc with their neighbours."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

from .animate import Animator, ease_out_back, get_default_animator
from .components import are_identical, connected_components
from .config import get_defaults
from .errors import ConfigurationError
from .layouts import ArcAssignment, ArcLayout, get_arc_layout
from .lens import Lens
from .reactive import Bool, Item, Point, Reactive, Rule, get_default_reactive
from .registry import PROXIMITY_REGISTRY, MembershipRegistry

logger = logging.getLogger(__name__)


@dataclass
class ProximityGroupOptions:
    """Proximity group options; ``None`` fields fall back to :func:`~arclens.config.get_defaults`."""

    arc_layout: Union[str, ArcLayout]
    threshold: Optional[float] = None
    arc_gap: Optional[float] = None
    animation_duration: Optional[float] = None
    active: bool = True


class ProximityGroup:
    """Clusters its lenses by distance and lays out each cluster's arcs.

    ``active`` is a :class:`~arclens.reactive.Bool` cell; writing ``False``
    turns every lens into its own cluster, writing ``True`` re-clusters.
    ``components`` holds the partition that was applied last, as lists of lens
    locations.
    """

    def __init__(
        self,
        lenses: Sequence[Lens],
        *,
        layout: ArcLayout,
        threshold: float,
        arc_gap: float,
        animation_duration: float,
        active: bool,
        animator: Animator,
        reactive: Reactive,
        registry: MembershipRegistry,
    ) -> None:
        self.lenses = tuple(lenses)
        self.layout = layout
        self.threshold = threshold
        self.arc_gap = arc_gap
        self.animation_duration = animation_duration
        self.animator = animator
        self.reactive = reactive
        self.active = Bool(active)
        self.components = Item([])
        self._registry = registry
        self._locations: List[Point] = [lens.location for lens in self.lenses]
        self._by_location: Dict[Point, Lens] = {lens.location: lens for lens in self.lenses}
        self._rules: List[Rule] = []
        self.disposed = False

    def _start(self) -> None:
        self._rules.append(
            self.reactive.do(self._locations, self._on_locations, name="proximity.locations")
        )
        self._rules.append(self.reactive.do([self.active], self._on_active, name="proximity.active"))
        self._rules.append(
            self.reactive.do([self.components], self._apply_layout, name="proximity.layout")
        )

    def _on_locations(self) -> None:
        if not self.active.value:
            return
        partition = connected_components(self._locations, self.threshold)
        if not are_identical(partition, self.components.value):
            logger.debug("Partition changed: %d cluster(s)", len(partition))
            self.components.value = partition

    def _on_active(self) -> None:
        if self.active.value:
            self.components.value = connected_components(self._locations, self.threshold)
        else:
            self.components.value = [[location] for location in self._locations]

    def _apply_layout(self) -> None:
        for component in self.components.value:
            members = [self._by_location[location] for location in component]
            for assignment in self.layout(members, self.arc_gap):
                self._assign(assignment)

    def _assign(self, assignment: ArcAssignment) -> None:
        lens = assignment.lens
        if self.animation_duration > 0:
            self.animator.eased(
                lens.radial_span, assignment.radial_span, self.animation_duration, easing=ease_out_back
            )
            self.animator.eased(
                lens.anchor_angle, assignment.anchor_angle, self.animation_duration, easing=ease_out_back
            )
        else:
            lens.radial_span.value = assignment.radial_span
            lens.anchor_angle.value = assignment.anchor_angle

    def clusters(self) -> List[List[Lens]]:
        """Return the applied partition as lists of lenses."""

        return [[self._by_location[location] for location in component] for component in self.components.value]

    def dispose(self) -> None:
        """Stop reacting to the lenses and release them for other proximity groups."""

        if self.disposed:
            return
        for rule in self._rules:
            rule.dispose()
        self._rules.clear()
        self._registry.release(self)
        self.disposed = True
        logger.info("Disposed proximity group with %d lens(es)", len(self.lenses))

    def __repr__(self) -> str:
        return f"ProximityGroup(lenses={len(self.lenses)}, active={self.active.value})"


def create_proximity_group(
    lenses: Sequence[Lens],
    options: ProximityGroupOptions,
    *,
    animator: Optional[Animator] = None,
    reactive: Optional[Reactive] = None,
    registry: Optional[MembershipRegistry] = None,
) -> ProximityGroup:
    """Create a proximity group over ``lenses``.

    Raises :class:`~arclens.errors.ConfigurationError` for invalid options and
    :class:`~arclens.errors.MembershipError` when any lens already belongs to a
    proximity group; in both cases nothing is registered.
    """

    defaults = get_defaults()
    layout = get_arc_layout(options.arc_layout)
    threshold = defaults.threshold if options.threshold is None else options.threshold
    arc_gap = defaults.arc_gap if options.arc_gap is None else options.arc_gap
    duration = defaults.animation_duration if options.animation_duration is None else options.animation_duration

    if threshold < 0:
        raise ConfigurationError(f"threshold must be >= 0 (got {threshold})")
    if not 0.0 <= arc_gap < 1.0:
        raise ConfigurationError(f"arc_gap must be in [0, 1) (got {arc_gap})")
    if duration < 0:
        raise ConfigurationError(f"animation_duration must be >= 0 (got {duration})")
    if len({id(lens.location) for lens in lenses}) != len(lenses):
        raise ConfigurationError("lenses of a proximity group must not share a location point")

    registry = registry or PROXIMITY_REGISTRY
    group = ProximityGroup(
        lenses,
        layout=layout,
        threshold=threshold,
        arc_gap=arc_gap,
        animation_duration=duration,
        active=options.active,
        animator=animator or get_default_animator(),
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
        "Created proximity group with %d lens(es) (threshold=%s, arc_gap=%s, duration=%s)",
        len(group.lenses),
        threshold,
        arc_gap,
        duration,
    )
    return group


__all__ = ["ProximityGroup", "ProximityGroupOptions", "create_proximity_group"]
