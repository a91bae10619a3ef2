"""Diagnostic shape accumulation.

Triangulators push debug geometry (bounding boxes, seed triangles, sweep
origin, circumcircles) into a DiagnosticsBuffer while they run. The buffer is
a pure side output: nothing in the package reads it back.
"""
from __future__ import annotations

import math
from typing import List, Optional

from .primitives import DiagColor, DiagGeometryType, DiagnosticGeometry, Point

__all__ = ['DiagnosticsBuffer']


class DiagnosticsBuffer:
    """Collects DiagnosticGeometry when enabled; every add is a no-op otherwise."""

    def __init__(self, enabled: bool = False):
        self.enabled = bool(enabled)
        self._shapes: List[DiagnosticGeometry] = []

    @property
    def shapes(self) -> Optional[List[DiagnosticGeometry]]:
        """Recorded shapes, or None for a disabled buffer."""
        return self._shapes if self.enabled else None

    def __len__(self) -> int:
        return len(self._shapes)

    def add(self, kind: DiagGeometryType, color: DiagColor, *vertices: Point) -> None:
        if not self.enabled:
            return
        self._shapes.append(DiagnosticGeometry(kind, color, tuple(Point(*v) for v in vertices)))

    def add_vertex(self, p: Point, color: DiagColor = DiagColor.RED) -> None:
        self.add(DiagGeometryType.VERTEX, color, p)

    def add_line(self, *vertices: Point, color: DiagColor = DiagColor.RED) -> None:
        self.add(DiagGeometryType.LINE, color, *vertices)

    def add_circle(self, center: Point, radius: float, color: DiagColor = DiagColor.YELLOW) -> None:
        self.add(DiagGeometryType.CIRCLE, color, center, Point(radius, 0.0))

    def add_bounding_box(self, lo: Point, hi: Point, color: DiagColor = DiagColor.RED) -> None:
        """Closed polyline around the box spanned by lo and hi."""
        self.add_line(lo, Point(lo.x, hi.y), hi, Point(hi.x, lo.y), lo, color=color)

    def add_circumcircles(self, triangles) -> None:
        if not self.enabled:
            return
        for tri in triangles:
            self.add_circle(tri.circumcenter, math.sqrt(tri.circumradius2))

    def clear(self) -> None:
        """Drop every recorded shape."""
        self._shapes.clear()
