"""Connected components of points under a distance threshold."""

from __future__ import annotations

import logging
from typing import List, Sequence

from .errors import ConfigurationError
from .geometry import pairwise_distances
from .logging_utils import apply_debug_logging
from .reactive import Point

logger = logging.getLogger(__name__)

Component = List[Point]


def connected_components(points: Sequence[Point], max_distance: float) -> List[Component]:
    """Partition ``points`` into clusters linked by chains of hops ``<= max_distance``.

    Membership is transitive: a point joins a cluster when it is within range of
    any point already absorbed, not only of the seed.  Seeds are taken from the
    end of the remaining points and the remaining points are scanned back to
    front, so clusters and their members come out roughly in reverse input
    order.  Callers comparing two results with :func:`are_identical` therefore
    need a stable input order.
    """

    if max_distance < 0:
        raise ConfigurationError(f"max_distance must be >= 0 (got {max_distance})")

    distances = pairwise_distances(points)
    remaining = list(range(len(points)))
    result: List[Component] = []

    while remaining:
        stack = [remaining.pop()]
        i = 0
        while i < len(stack):
            row = distances[stack[i]]
            for j in range(len(remaining) - 1, -1, -1):
                if row[remaining[j]] <= max_distance:
                    stack.append(remaining.pop(j))
            i += 1
        result.append([points[idx] for idx in stack])

    return result


def are_identical(first: Sequence[Sequence[Point]], second: Sequence[Sequence[Point]]) -> bool:
    """Order-sensitive identity comparison of two partitions."""

    if len(first) != len(second):
        return False
    for c1, c2 in zip(first, second):
        if len(c1) != len(c2):
            return False
        if any(a is not b for a, b in zip(c1, c2)):
            return False
    return True


apply_debug_logging(globals(), logger=logger)


__all__ = ["Component", "are_identical", "connected_components"]
