"""Arc layout policies.

A policy receives the lenses of one cluster plus a gap fraction and returns one
:class:`ArcAssignment` per lens, in input order.  All built-in policies walk an
angular cursor from 0 clockwise-negative around the circle, give each lens its
span, then skip an equal share of the gap budget, so that spans plus gaps sweep
exactly one full turn.  A lone lens always gets a half circle opening upward.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Union

import numpy as np

from .errors import ConfigurationError
from .lens import Lens
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)

FULL_TURN = 2.0 * math.pi
SOLO_SPAN = math.pi
SOLO_ANCHOR = -math.pi / 2


@dataclass(frozen=True)
class ArcAssignment:
    lens: Lens
    radial_span: float
    anchor_angle: float


ArcLayout = Callable[[Sequence[Lens], float], List[ArcAssignment]]


def _solo(lens: Lens) -> List[ArcAssignment]:
    return [ArcAssignment(lens, SOLO_SPAN, SOLO_ANCHOR)]


def _walk(component: Sequence[Lens], spans: Sequence[float], gap_total: float) -> List[ArcAssignment]:
    gap_per_lens = gap_total / len(component)
    cursor = 0.0
    assignments: List[ArcAssignment] = []
    for lens, span in zip(component, spans):
        assignments.append(ArcAssignment(lens, float(span), 0.0 - cursor))
        cursor += span + gap_per_lens
    return assignments


def equal(component: Sequence[Lens], gap_fraction: float) -> List[ArcAssignment]:
    """Divide the usable arc evenly among the lenses."""

    if not component:
        return []
    if len(component) == 1:
        return _solo(component[0])
    gap_total = FULL_TURN * gap_fraction
    span = (FULL_TURN - gap_total) / len(component)
    return _walk(component, [span] * len(component), gap_total)


def weighted(component: Sequence[Lens], gap_fraction: float) -> List[ArcAssignment]:
    """Divide the usable arc proportionally to each lens's current radius."""

    if not component:
        return []
    if len(component) == 1:
        return _solo(component[0])
    radii = np.array([max(lens.radius.value, 0.0) for lens in component], dtype=float)
    total = float(radii.sum())
    if total <= 0.0:
        return equal(component, gap_fraction)
    gap_total = FULL_TURN * gap_fraction
    spans = (FULL_TURN - gap_total) * radii / total
    return _walk(component, spans.tolist(), gap_total)


def preserve(component: Sequence[Lens], gap_fraction: float) -> List[ArcAssignment]:
    """Keep each lens's current span and only rotate the arcs so they do not overlap.

    When the spans do not fit into the usable arc they are scaled down by a
    common factor.
    """

    if not component:
        return []
    if len(component) == 1:
        return _solo(component[0])
    gap_total = FULL_TURN * gap_fraction
    usable = FULL_TURN - gap_total
    spans = np.array([max(lens.radial_span.value, 0.0) for lens in component], dtype=float)
    total = float(spans.sum())
    if total > usable:
        spans *= usable / total
    return _walk(component, spans.tolist(), gap_total)


apply_debug_logging(globals(), logger=logger)


ARC_LAYOUTS: Dict[str, ArcLayout] = {
    "equal": equal,
    "weighted": weighted,
    "preserve": preserve,
}


def get_arc_layout(layout: Union[str, ArcLayout]) -> ArcLayout:
    """Resolve a policy name; callables are returned unchanged."""

    if callable(layout):
        return layout
    try:
        return ARC_LAYOUTS[layout]
    except KeyError as exc:
        known = ", ".join(sorted(ARC_LAYOUTS))
        raise ConfigurationError(f"unknown arc layout {layout!r} (known: {known})") from exc


__all__ = [
    "ARC_LAYOUTS",
    "ArcAssignment",
    "ArcLayout",
    "FULL_TURN",
    "SOLO_ANCHOR",
    "SOLO_SPAN",
    "equal",
    "get_arc_layout",
    "preserve",
    "weighted",
]
