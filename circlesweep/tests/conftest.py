"""Shared point-set fixtures."""
from collections import Counter

import numpy as np
import pytest

from circlesweep import Point


def _ring_points(seed, n_interior, n_ring=16, radius=100.0, center=(200.0, 200.0)):
    """Points on a circle plus random points well inside it.

    The near-circular hull keeps hull triangles small compared to the
    Bowyer-Watson super-triangle, so both strategies agree on these sets.
    """
    rng = np.random.default_rng(seed)
    cx, cy = center
    angles = np.linspace(0.0, 2 * np.pi, n_ring, endpoint=False) + 0.1
    ring = [Point(float(cx + radius * np.cos(a)), float(cy + radius * np.sin(a))) for a in angles]
    r = 0.8 * radius * np.sqrt(rng.random(n_interior))
    theta = rng.random(n_interior) * 2 * np.pi
    inner = [Point(float(cx + ri * np.cos(ti)), float(cy + ri * np.sin(ti))) for ri, ti in zip(r, theta)]
    return ring + inner


def _uniform_points(seed, n, width=800.0, height=600.0, margin=100.0):
    rng = np.random.default_rng(seed)
    xs = rng.uniform(margin, width - margin, n)
    ys = rng.uniform(margin, height - margin, n)
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def _triangle_set(triangles):
    return Counter(frozenset(tri) for tri in triangles)


@pytest.fixture
def ring_points():
    return _ring_points


@pytest.fixture
def uniform_points():
    return _uniform_points


@pytest.fixture
def triangle_set():
    return _triangle_set


@pytest.fixture
def square():
    return [Point(0.0, 0.0), Point(10.0, 0.0), Point(10.0, 10.0), Point(0.0, 10.0)]


@pytest.fixture
def triangle_with_centroid():
    return [Point(0.0, 0.0), Point(6.0, 0.0), Point(3.0, 5.0), Point(3.0, 5.0 / 3.0)]


def _assert_delaunay(triangles, points, rtol=1e-9):
    """No input point lies strictly inside any triangle's circumcircle."""
    pts = np.asarray(points, dtype=np.float64)
    for tri in triangles:
        cx, cy = tri.circumcenter
        r2 = tri.circumradius2
        d2 = (pts[:, 0] - cx) ** 2 + (pts[:, 1] - cy) ** 2
        inside = d2 < r2 * (1.0 - rtol)
        assert not inside.any(), f"{tri} has {int(inside.sum())} points inside its circumcircle"


@pytest.fixture
def assert_delaunay():
    return _assert_delaunay
