from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from scipy.spatial.distance import cdist

from .reactive import Point


def dist(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""

    return math.hypot(a.x - b.x, a.y - b.y)


def coords_array(points: Sequence[Point]) -> np.ndarray:
    """Return an ``(n, 2)`` float array of the point coordinates."""

    if not points:
        return np.zeros((0, 2), dtype=float)
    return np.array([(p.x, p.y) for p in points], dtype=float)


def pairwise_distances(points: Sequence[Point]) -> np.ndarray:
    """Return the symmetric ``(n, n)`` Euclidean distance matrix of ``points``."""

    coords = coords_array(points)
    if coords.shape[0] == 0:
        return np.zeros((0, 0), dtype=float)
    return cdist(coords, coords)


__all__ = ["coords_array", "dist", "pairwise_distances"]
