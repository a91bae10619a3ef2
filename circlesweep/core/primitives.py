"""Value types shared by both triangulation strategies.

Points are plain immutable pairs; everything that needs geometry (the
Triangle with its cached circumcenter) lives in :mod:`circlesweep.core.geometry`.
"""
from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Tuple

__all__ = [
    'Point', 'PolarPoint', 'Edge',
    'DiagGeometryType', 'DiagColor', 'DiagnosticGeometry',
]


class Point(NamedTuple):
    """Immutable cartesian point; equality is exact float equality."""
    x: float
    y: float

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


class PolarPoint(NamedTuple):
    """A point annotated with its squared distance and pseudo-angle around the sweep origin."""
    point: Point
    radius2: float
    angle: float

    def __str__(self) -> str:
        return (f"[radius2 {self.radius2:.1f}, angle {self.angle:.4f} "
                f"({self.point.x:.3f}, {self.point.y:.3f})]")


class Edge:
    """Undirected segment between two points.

    ``Edge(a, b) == Edge(b, a)`` and both hash identically: the hash is taken
    from the endpoints in canonical (x, then y) order. ``start`` and ``end``
    keep the order the edge was built with.
    """
    __slots__ = ('start', 'end')

    def __init__(self, start: Point, end: Point):
        self.start = start
        self.end = end

    def _key(self) -> Tuple[Point, Point]:
        a, b = self.start, self.end
        if a.x > b.x or (a.x == b.x and a.y > b.y):
            a, b = b, a
        return a, b

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return ((self.start == other.start and self.end == other.end) or
                (self.start == other.end and self.end == other.start))

    def __hash__(self) -> int:
        return hash(self._key())

    def __iter__(self):
        yield self.start
        yield self.end

    def __repr__(self) -> str:
        return f"Edge(({self.start})-({self.end}))"


class DiagGeometryType(Enum):
    VERTEX = 'vertex'
    LINE = 'line'
    CIRCLE = 'circle'


class DiagColor(Enum):
    RED = 'red'
    YELLOW = 'yellow'


class DiagnosticGeometry(NamedTuple):
    """Debug-only shape: a tagged, colored, ordered point sequence.

    Circles are stored as ``(center, Point(radius, 0))``.
    """
    kind: DiagGeometryType
    color: DiagColor
    vertices: Tuple[Point, ...]
