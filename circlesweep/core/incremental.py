"""Naive incremental Delaunay triangulation (Bowyer-Watson) and its Voronoi dual.

Every point is inserted in input order into a working set that starts as one
oversized super-triangle. Triangles whose circumcircle contains the new point
form a cavity; the cavity boundary is found by toggling edges in and out of a
set (an edge shared by two conflicting triangles cancels) and is re-fanned to
the new point. A linear scan per insertion gives O(n^2) overall.

References: https://en.wikipedia.org/wiki/Bowyer%E2%80%93Watson_algorithm
"""
from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Tuple

from .base import bounding_box, finish_delaunay, has_enough_points
from .constants import SUPER_TRIANGLE_SCALE
from .diagnostics import DiagnosticsBuffer
from .geometry import Triangle, circumcircle_contains
from .logging_utils import get_logger
from .primitives import Edge, Point

__all__ = ['IncrementalTriangulator', 'super_triangle', 'voronoi_from_triangles']

logger = get_logger('circlesweep.incremental')


def super_triangle(points: Sequence[Point], scale: float = SUPER_TRIANGLE_SCALE,
                   diagnostics: Optional[DiagnosticsBuffer] = None) -> Triangle:
    """Triangle far larger than the bounding box of ``points``.

    Its corners sit ``scale`` box-sizes away from the box center so every
    input point is strictly inside and hull triangles are not cut off.
    """
    lo, hi = bounding_box(points)
    if diagnostics is not None:
        diagnostics.add_bounding_box(lo, hi)

    d_max = max(hi.x - lo.x, hi.y - lo.y)
    x_mid = (hi.x + lo.x) / 2
    y_mid = (hi.y + lo.y) / 2
    return Triangle(
        Point(x_mid - scale * d_max, y_mid - d_max),
        Point(x_mid, y_mid + scale * d_max),
        Point(x_mid + scale * d_max, y_mid - d_max),
    )


def voronoi_from_triangles(triangles: Sequence[Triangle]) -> Tuple[List[Point], List[Edge]]:
    """Voronoi vertices and bounded edges dual to a Delaunay triangle list.

    Vertices are the circumcenters, index-aligned with ``triangles``. Each
    Delaunay edge shared by exactly two triangles yields one Voronoi edge
    between their circumcenters, unless both circumcenters coincide
    (cocircular quadrilateral). Hull edges belong to a single triangle and
    are left without a ray.
    """
    vertices: List[Point] = []
    edges: List[Edge] = []
    if not triangles:
        return vertices, edges

    by_edge: Dict[Edge, List[Triangle]] = defaultdict(list)
    for tri in triangles:
        for edge in tri.edges():
            by_edge[edge].append(tri)
        vertices.append(tri.circumcenter)

    for tris in by_edge.values():
        if len(tris) != 2:
            continue
        c1 = tris[0].circumcenter
        c2 = tris[1].circumcenter
        if c1 == c2:
            continue
        edges.append(Edge(c1, c2))
    return vertices, edges


class IncrementalTriangulator:
    """Bowyer-Watson triangulation of one point set.

    The caller is expected to have removed exact duplicate points.
    """

    def __init__(self, points: Sequence[Point], diagnostics: Optional[DiagnosticsBuffer] = None,
                 super_triangle_scale: float = SUPER_TRIANGLE_SCALE):
        self.points = points
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticsBuffer(False)
        self.super_triangle_scale = super_triangle_scale
        self.triangles: Optional[List[Triangle]] = None

    def triangulate(self) -> List[Triangle]:
        if not has_enough_points(self.points):
            self.triangles = finish_delaunay([], self.diagnostics)
            return self.triangles

        st = super_triangle(self.points, self.super_triangle_scale, self.diagnostics)
        # dict as an insertion-ordered set keeps the pass deterministic
        working: Dict[Triangle, None] = {st: None}

        for p in self.points:
            conflicting = [tri for tri in working if circumcircle_contains(tri, p)]

            boundary: Dict[Edge, None] = {}
            for tri in conflicting:
                for edge in tri.edges():
                    if edge in boundary:
                        del boundary[edge]
                    else:
                        boundary[edge] = None

            for tri in conflicting:
                del working[tri]
            for edge in boundary:
                working[Triangle(edge.start, edge.end, p)] = None

        delaunay = [tri for tri in working
                    if not (st.has_vertex(tri.a) or st.has_vertex(tri.b) or st.has_vertex(tri.c))]
        logger.debug("bowyer-watson: %d points -> %d triangles (%d touched the super-triangle)",
                     len(self.points), len(delaunay), len(working) - len(delaunay))
        self.triangles = finish_delaunay(delaunay, self.diagnostics)
        return self.triangles

    def voronoi(self) -> Tuple[List[Point], List[Edge], List[Edge]]:
        """Return (vertices, bounded edges, rays); rays are always empty for this strategy."""
        vertices, edges = voronoi_from_triangles(self.triangles or [])
        return vertices, edges, []
