"""Geometric predicates and the Triangle primitive.

All functions accept any 2-sequence for a point (``Point``, tuple, numpy row)
and work in plain float arithmetic; there is no epsilon tolerance anywhere.

Winding convention
------------------
``orientation`` is twice the signed area: negative for clockwise, positive
for counter-clockwise (y-up), zero for collinear. The sweep-circle mesh holds
triangles with *negative* orientation only, which is counter-clockwise on a
y-down screen, and ``in_circumcircle`` is only correct for that winding. Callers are
trusted to pass correctly wound triangles; the predicate does not re-orient.
"""
from __future__ import annotations

import math

from .primitives import Edge, Point

__all__ = [
    'distance2', 'orientation', 'is_clockwise', 'is_counter_clockwise', 'is_collinear',
    'in_circumcircle', 'circumcenter', 'circumradius2', 'pseudo_angle', 'centroid',
    'midpoint', 'circumcircle_contains', 'Triangle',
]


def distance2(a, b) -> float:
    """Squared euclidean distance between two points."""
    ax, ay = a
    bx, by = b
    dx = ax - bx
    dy = ay - by
    return dx * dx + dy * dy


def orientation(a, b, c) -> float:
    """Twice the signed area of triangle (a, b, c).

    < 0 clockwise, > 0 counter-clockwise, == 0 collinear.
    """
    ax, ay = a
    bx, by = b
    cx, cy = c
    return (bx - ax) * (cy - by) - (cx - bx) * (by - ay)


def is_clockwise(a, b, c) -> bool:
    return orientation(a, b, c) < 0


def is_counter_clockwise(a, b, c) -> bool:
    return orientation(a, b, c) > 0


def is_collinear(a, b, c) -> bool:
    return orientation(a, b, c) == 0


def in_circumcircle(a, b, c, p) -> bool:
    """True if p lies strictly inside the circumcircle of (a, b, c).

    Evaluates the 3x3 in-circle determinant on coordinates shifted by p.
    Requires (a, b, c) with negative orientation; for the opposite winding the
    answer is inverted.
    """
    px, py = p
    ax = a[0] - px
    ay = a[1] - py
    bx = b[0] - px
    by = b[1] - py
    cx = c[0] - px
    cy = c[1] - py

    ap = ax * ax + ay * ay
    bp = bx * bx + by * by
    cp = cx * cx + cy * cy

    return (ax * (by * cp - bp * cy) -
            ay * (bx * cp - bp * cx) +
            ap * (bx * cy - by * cx)) < 0


def circumcenter(a, b, c) -> Point:
    """Center of the circle through a, b and c.

    The common denominator is 2 * orientation(a, b, c). Collinear input has no
    circumcenter: an exactly zero denominator yields ``Point(nan, nan)`` and a
    nearly zero one yields huge or infinite coordinates.
    """
    ax, ay = a
    bx, by = b
    cx, cy = c

    ah = ax * ax + ay * ay
    bh = bx * bx + by * by
    ch = cx * cx + cy * cy

    dab1 = ax - bx
    dab2 = ay - by
    dbc1 = bx - cx
    dbc2 = by - cy
    dca1 = cx - ax
    dca2 = cy - ay

    denom = ax * dbc2 + bx * dca2 + cx * dab2
    if denom == 0:
        return Point(math.nan, math.nan)
    d = 0.5 / denom

    x = (ah * dbc2 + bh * dca2 + ch * dab2) * d
    y = -(ah * dbc1 + bh * dca1 + ch * dab1) * d
    return Point(x, y)


def circumradius2(a, b, c) -> float:
    """Squared circumradius of (a, b, c); nan or inf for collinear input."""
    return distance2(circumcenter(a, b, c), a)


def pseudo_angle(center, p) -> float:
    """Trig-free angle proxy in [0, 2], monotonic with the true angle on each half plane.

    Only meaningful for ordering and bucketing. A point equal to ``center``
    maps to 0.
    """
    dx = p[0] - center[0]
    dy = p[1] - center[1]
    span = abs(dx) + abs(dy)
    if span == 0:
        return 0.0
    return 1 - dx / span


def centroid(a, b, c) -> Point:
    return Point((a[0] + b[0] + c[0]) / 3, (a[1] + b[1] + c[1]) / 3)


def midpoint(a, b) -> Point:
    return Point((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def circumcircle_contains(triangle: 'Triangle', p) -> bool:
    """Inclusive circumcircle test using the triangle's cached circumcenter.

    Independent of winding; points on the circle count as inside.
    """
    cc = triangle.circumcenter
    return distance2(cc, p) <= distance2(cc, triangle.a)


class Triangle:
    """Ordered triangle (a, b, c) with its circumcenter computed once.

    Triangles compare by identity so a working set can hold them without
    hashing coordinates.
    """
    __slots__ = ('a', 'b', 'c', 'circumcenter')

    def __init__(self, a: Point, b: Point, c: Point):
        self.a = a
        self.b = b
        self.c = c
        self.circumcenter = circumcenter(a, b, c)

    @property
    def vertices(self):
        return self.a, self.b, self.c

    @property
    def circumradius2(self) -> float:
        return distance2(self.circumcenter, self.a)

    def edge_a(self):
        return Edge(self.a, self.b)

    def edge_b(self):
        return Edge(self.b, self.c)

    def edge_c(self):
        return Edge(self.c, self.a)

    def edges(self):
        return self.edge_a(), self.edge_b(), self.edge_c()

    def has_vertex(self, p) -> bool:
        return self.a == p or self.b == p or self.c == p

    def __iter__(self):
        yield self.a
        yield self.b
        yield self.c

    def __repr__(self) -> str:
        return f"Triangle({{{self.a}}}, {{{self.b}}}, {{{self.c}}})"
