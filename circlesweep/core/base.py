"""Pieces shared by both triangulation strategies.

Bounding-box computation, the trivial-input short-circuit and the
circumcircle diagnostics recorded when a Delaunay pass finishes.
"""
from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

from .constants import MIN_POINTS
from .diagnostics import DiagnosticsBuffer
from .primitives import Point

__all__ = ['bounding_box', 'has_enough_points', 'finish_delaunay']


def bounding_box(points: Sequence[Point]) -> Tuple[Point, Point]:
    """Return (min, max) corners of the axis-aligned box enclosing all points.

    An empty input yields the inverted box ((inf, inf), (-inf, -inf)).
    """
    if len(points) == 0:
        return Point(math.inf, math.inf), Point(-math.inf, -math.inf)
    arr = np.asarray(points, dtype=np.float64)
    lo = arr.min(axis=0)
    hi = arr.max(axis=0)
    return Point(float(lo[0]), float(lo[1])), Point(float(hi[0]), float(hi[1]))


def has_enough_points(points: Sequence[Point]) -> bool:
    """Fewer than three points cannot span a triangle; the result is simply empty."""
    return len(points) >= MIN_POINTS


def finish_delaunay(triangles: list, diagnostics: DiagnosticsBuffer) -> list:
    """Record the circumcircle of every result triangle and hand the list back."""
    diagnostics.add_circumcircles(triangles)
    return triangles
