"""A proximity group and a snap group sharing one set of interactive lenses."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .animate import Animator
from .lens import InteractiveLens
from .proximity import ProximityGroup, ProximityGroupOptions, create_proximity_group
from .reactive import Reactive
from .snap import SnapGroup, SnapGroupOptions, create_snap_group

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class LensGroup:
    lenses: tuple
    proximity_group: ProximityGroup
    snap_group: SnapGroup

    def dispose(self) -> None:
        self.snap_group.dispose()
        self.proximity_group.dispose()


def create_lens_group(
    lenses: Sequence[InteractiveLens],
    proximity_options: ProximityGroupOptions,
    snap_options: Optional[SnapGroupOptions] = None,
    *,
    animator: Optional[Animator] = None,
    reactive: Optional[Reactive] = None,
) -> LensGroup:
    """Create both groups over ``lenses``; if the snap group fails the proximity group is disposed."""

    proximity_group = create_proximity_group(
        lenses, proximity_options, animator=animator, reactive=reactive
    )
    try:
        snap_group = create_snap_group(lenses, snap_options, reactive=reactive)
    except Exception:
        proximity_group.dispose()
        raise
    logger.info("Created lens group with %d lens(es)", len(lenses))
    return LensGroup(tuple(lenses), proximity_group, snap_group)


__all__ = ["LensGroup", "create_lens_group"]
