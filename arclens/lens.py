"""Lens records and the small behaviours attached to individual lenses."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .animate import Animator, get_default_animator
from .errors import ConfigurationError
from .reactive import Bool, Point, Reactive, Real, Rule, attach_point, get_default_reactive

logger = logging.getLogger(__name__)

DEFAULT_RADIUS = 100.0
DEFAULT_RADIAL_SPAN = math.pi
# arc starts at the top
DEFAULT_ANCHOR_ANGLE = -math.pi / 2


@dataclass(eq=False)
class Lens:
    """A circular anchor with an active arc.

    Angles are in radians, measured clockwise from 3 o'clock; ``anchor_angle``
    is where the arc starts.  ``size`` is 1 for an expanded lens and 0 for a
    collapsed one.
    """

    location: Point = field(default_factory=Point)
    radius: Real = field(default_factory=lambda: Real(DEFAULT_RADIUS))
    radial_span: Real = field(default_factory=lambda: Real(DEFAULT_RADIAL_SPAN))
    anchor_angle: Real = field(default_factory=lambda: Real(DEFAULT_ANCHOR_ANGLE))
    size: Real = field(default_factory=lambda: Real(1.0))
    name: Optional[str] = None

    def __repr__(self) -> str:
        label = self.name if self.name is not None else hex(id(self))
        return f"{type(self).__name__}({label} at {self.location.x:.6g}, {self.location.y:.6g})"


@dataclass(eq=False, repr=False)
class InteractiveLens(Lens):
    """A lens whose location follows a drag ``handle``."""

    handle: Point = field(default_factory=Point)
    attachment: Optional[Rule] = None

    def detach(self) -> None:
        if self.attachment is not None:
            self.attachment.dispose()
            self.attachment = None


def create_lens(
    location: Optional[Iterable[float]] = None,
    *,
    radius: float = DEFAULT_RADIUS,
    radial_span: float = DEFAULT_RADIAL_SPAN,
    anchor_angle: float = DEFAULT_ANCHOR_ANGLE,
    size: float = 1.0,
    name: Optional[str] = None,
) -> Lens:
    if radius < 0:
        raise ConfigurationError(f"lens radius must be >= 0 (got {radius})")
    return Lens(
        location=Point.of(location),
        radius=Real(radius),
        radial_span=Real(radial_span),
        anchor_angle=Real(anchor_angle),
        size=Real(size),
        name=name,
    )


def create_interactive_lens(
    location: Optional[Iterable[float]] = None,
    *,
    radius: float = DEFAULT_RADIUS,
    radial_span: float = DEFAULT_RADIAL_SPAN,
    anchor_angle: float = DEFAULT_ANCHOR_ANGLE,
    size: float = 1.0,
    name: Optional[str] = None,
    reactive: Optional[Reactive] = None,
) -> InteractiveLens:
    """Create a lens plus a drag handle; moving the handle moves the lens."""

    if radius < 0:
        raise ConfigurationError(f"lens radius must be >= 0 (got {radius})")
    start = Point.of(location)
    lens = InteractiveLens(
        location=Point(start.x, start.y),
        radius=Real(radius),
        radial_span=Real(radial_span),
        anchor_angle=Real(anchor_angle),
        size=Real(size),
        name=name,
        handle=Point(start.x, start.y),
    )
    lens.attachment = attach_point(lens.location, lens.handle, reactive or get_default_reactive())
    return lens


@dataclass(frozen=True)
class Box:
    x: float
    y: float
    width: float
    height: float

    def contains(self, point: Point) -> bool:
        return self.x <= point.x <= self.x + self.width and self.y <= point.y <= self.y + self.height


@dataclass(eq=False)
class DropBox:
    box: Box
    lens: Lens
    collapsed: Bool
    rules: List[Rule] = field(default_factory=list)

    def dispose(self) -> None:
        for rule in self.rules:
            rule.dispose()
        self.rules.clear()


def create_drop_box(
    box: Box,
    lens: Lens,
    *,
    animation_duration: float = 0.0,
    animator: Optional[Animator] = None,
    reactive: Optional[Reactive] = None,
) -> DropBox:
    """Collapse ``lens`` (size 0) while its center is inside ``box``; expand it again outside."""

    reactive = reactive or get_default_reactive()
    drop = DropBox(box, lens, Bool(False))

    def _track_location() -> None:
        drop.collapsed.value = box.contains(lens.location)

    def _apply_size() -> None:
        target = 0.0 if drop.collapsed.value else 1.0
        if animation_duration > 0:
            (animator or get_default_animator()).eased(lens.size, target, animation_duration)
        else:
            lens.size.value = target

    drop.rules.append(reactive.do([lens.location], _track_location, name="drop_box.track"))
    drop.rules.append(reactive.do([drop.collapsed], _apply_size, name="drop_box.size"))
    return drop


__all__ = [
    "Box",
    "DEFAULT_ANCHOR_ANGLE",
    "DEFAULT_RADIAL_SPAN",
    "DEFAULT_RADIUS",
    "DropBox",
    "InteractiveLens",
    "Lens",
    "create_drop_box",
    "create_interactive_lens",
    "create_lens",
]
