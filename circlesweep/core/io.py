"""Input coercion and numpy export of results.

Canonical array shapes:
    points:    (N, 2) float64
    triangles: (M, 3, 2) float64 (corner coordinates, not indices)
    edges:     (K, 2, 2) float64
"""
from __future__ import annotations
import numpy as np
from typing import Iterable, Sequence, Tuple

from .primitives import Edge, Point


def as_points(points) -> Tuple[Point, ...]:
    """Coerce a sequence of (x, y) pairs or an (N, 2) array into a tuple of Points.

    Parameters
    ----------
    points : array_like
        Anything ``np.asarray`` turns into a float array of shape (N, 2).
        An empty sequence is accepted.

    Returns
    -------
    tuple of Point

    Raises
    ------
    ValueError
        If the input cannot be read as (N, 2) floats or holds nan/inf.
    """
    if isinstance(points, tuple) and all(isinstance(p, Point) for p in points):
        return points
    try:
        arr = np.asarray(points, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"points must be a sequence of (x, y) pairs: {exc}") from exc
    if arr.size == 0:
        return ()
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"points must have shape (N, 2), got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError("points must be finite")
    return tuple(Point(float(x), float(y)) for x, y in arr)


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    """(N, 2) float64 array of point coordinates."""
    if len(points) == 0:
        return np.zeros((0, 2), dtype=np.float64)
    return np.asarray(points, dtype=np.float64).reshape(-1, 2)


def triangles_to_array(triangles: Iterable) -> np.ndarray:
    """(M, 3, 2) float64 array of triangle corners in stored order."""
    data = [tuple(tri) for tri in triangles]
    if not data:
        return np.zeros((0, 3, 2), dtype=np.float64)
    return np.asarray(data, dtype=np.float64).reshape(-1, 3, 2)


def edges_to_array(edges: Iterable[Edge]) -> np.ndarray:
    """(K, 2, 2) float64 array of edge endpoints as (start, end)."""
    data = [(e.start, e.end) for e in edges]
    if not data:
        return np.zeros((0, 2, 2), dtype=np.float64)
    return np.asarray(data, dtype=np.float64).reshape(-1, 2, 2)


__all__ = ['as_points', 'points_to_array', 'triangles_to_array', 'edges_to_array']
