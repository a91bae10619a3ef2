"""Sweep-circle Delaunay triangulation and its clipped Voronoi dual.

Points are swept in order of increasing distance from an origin inside a
seed triangle. The front of the sweep is the convex hull of the points seen so
far; each new point lies outside it, so it is attached to the hull edges it
can see and the resulting triangles are legalized by edge flips. An angular
hash over hull nodes finds a visible edge in expected O(1), giving
O(n log n) expected time overall (dominated by the sort).

References
----------
Biniaz, A., Dastghaibyfard, G. "A faster circle-sweep Delaunay triangulation
algorithm", Advances in Engineering Software 43 (2012).
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from .base import bounding_box, finish_delaunay, has_enough_points
from .config import ViewportConfig
from .constants import EMPTY
from .diagnostics import DiagnosticsBuffer
from .errors import HullConsistencyError, InvalidStateError
from .geometry import (Triangle, centroid, circumradius2, distance2, in_circumcircle,
                       midpoint, orientation, pseudo_angle)
from .hull import Hull, HullHash
from .logging_utils import get_logger
from .mesh import HalfEdgeMesh
from .primitives import Edge, Point, PolarPoint
from .stats import PassStats

__all__ = ['SweepCircleTriangulator', 'select_seeds', 'clip_ray']

logger = get_logger('circlesweep.sweep')


def select_seeds(points: Sequence[Point]) -> Optional[Tuple[int, int, int]]:
    """Pick the seed triangle (i0, i1, i2) or None when every candidate is degenerate.

    i0 is nearest to the bounding-box center, i1 nearest to i0 without
    coinciding with it and i2 gives the smallest circumcircle with them. Ties
    keep the lower index. The returned triple has negative orientation.
    """
    lo, hi = bounding_box(points)
    center = Point((lo.x + hi.x) / 2, (lo.y + hi.y) / 2)

    i0 = EMPTY
    best = np.inf
    for i, p in enumerate(points):
        d = distance2(p, center)
        if d < best:
            i0, best = i, d
    if i0 == EMPTY:
        return None
    p0 = points[i0]

    i1 = EMPTY
    best = np.inf
    for i, p in enumerate(points):
        if i == i0:
            continue
        d = distance2(p, p0)
        if 0 < d < best:
            i1, best = i, d
    if i1 == EMPTY:
        return None
    p1 = points[i1]

    # nan and inf radii (collinear or coincident candidates) never compare smaller
    i2 = EMPTY
    best = np.inf
    for i, p in enumerate(points):
        if i == i0 or i == i1:
            continue
        r = circumradius2(p0, p1, p)
        if r < best:
            i2, best = i, r
    if i2 == EMPTY:
        return None

    if orientation(p0, p1, points[i2]) > 0:
        i1, i2 = i2, i1
    return i0, i1, i2


def clip_ray(p1: Point, p2: Point, c: Point, viewport: ViewportConfig) -> Edge:
    """Unbounded Voronoi edge of hull edge (p1, p2) starting at circumcenter ``c``.

    The direction points away from the hull, through the midpoint of
    (p1, p2), and is stretched until its dominant component reaches the
    viewport border (x = 0 or width, y = 0 or height).
    """
    m = midpoint(p1, p2)
    dx = m.x - c.x
    dy = m.y - c.y
    if dx == 0 and dy == 0:
        # circumcenter on the hull edge: take the outward normal of a clockwise hull
        dx = -(p2.y - p1.y)
        dy = p2.x - p1.x
    elif orientation(p1, p2, c) > 0:
        dx = -dx
        dy = -dy

    dx_abs = abs(dx)
    dy_abs = abs(dy)
    if dx_abs > dy_abs:
        dx = -1.0 if dx < 0 else 1.0
        dy /= dx_abs
        length = c.x if dx < 0 else viewport.width - c.x
    else:
        dx /= dy_abs
        dy = -1.0 if dy < 0 else 1.0
        length = c.y if dy < 0 else viewport.height - c.y
    return Edge(c, Point(c.x + dx * length, c.y + dy * length))


class SweepCircleTriangulator:
    """Sweep-circle triangulation of one point set.

    After :meth:`triangulate` the half-edge ``mesh`` and the final ``hull``
    stay available for the Voronoi dual and for inspection.
    """

    def __init__(self, points: Sequence[Point], diagnostics: Optional[DiagnosticsBuffer] = None,
                 stats: Optional[PassStats] = None):
        self.points = points
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticsBuffer(False)
        self.stats = stats if stats is not None else PassStats()
        self.mesh: Optional[HalfEdgeMesh] = None
        self.hull: Optional[Hull] = None
        self.hash: Optional[HullHash] = None
        self.origin: Optional[Point] = None
        self.triangles: Optional[List[Triangle]] = None
        self._stack: List[int] = []

    # ------------------------------------------------------------------
    # Delaunay
    # ------------------------------------------------------------------
    def triangulate(self) -> List[Triangle]:
        points = self.points
        n = len(points)
        if not has_enough_points(points):
            self.triangles = finish_delaunay([], self.diagnostics)
            return self.triangles

        seeds = select_seeds(points)
        if seeds is None:
            logger.debug("sweep: no non-degenerate seed triangle among %d points", n)
            self.triangles = finish_delaunay([], self.diagnostics)
            return self.triangles
        i0, i1, i2 = seeds
        s0, s1, s2 = points[i0], points[i1], points[i2]
        self.origin = origin = centroid(s0, s1, s2)
        self._record_seed(s0, s1, s2)
        logger.debug("sweep: seeds %d, %d, %d, origin (%g, %g)", i0, i1, i2, origin.x, origin.y)

        # polar coordinates around the origin, ascending radius; equal radii
        # fall back to (x, y) so exact duplicates end up adjacent
        arr = np.asarray(points, dtype=np.float64)
        r2 = (arr[:, 0] - origin.x) ** 2 + (arr[:, 1] - origin.y) ** 2
        order = np.lexsort((arr[:, 1], arr[:, 0], r2))
        polar = [PolarPoint(p, distance2(origin, p), pseudo_angle(origin, p)) for p in points]

        self.mesh = mesh = HalfEdgeMesh(2 * n - 5)
        self.hull = hull = Hull()
        self.hash = hhash = HullHash(n, origin, hull)

        e = hull.insert(polar[i0], i0, t=0)
        hhash.add(e)
        e = hull.insert(polar[i1], i1, after=e, t=1)
        hhash.add(e)
        e = hull.insert(polar[i2], i2, after=e, t=2)
        hhash.add(e)
        mesh.add_triangle(i0, i1, i2, EMPTY, EMPTY, EMPTY)

        self._stack = []
        self.stats.flips = 0
        skipped = 0
        prev: Optional[Point] = None
        for idx in order:
            idx = int(idx)
            p = points[idx]
            if p == s0 or p == s1 or p == s2 or p == prev:
                skipped += 1
                continue
            self._insert(idx, polar[idx])
            prev = p

        self.stats.skipped_points = skipped
        self.stats.hull_size = len(hull)
        self.stats.triangles = mesh.triangle_count
        logger.debug("sweep: %d points -> %d triangles, %d flips, %d skipped, hull of %d",
                     n, mesh.triangle_count, self.stats.flips, skipped, len(hull))

        delaunay = [Triangle(points[a], points[b], points[c]) for a, b, c in mesh.iter_triangles()]
        self.triangles = finish_delaunay(delaunay, self.diagnostics)
        return self.triangles

    def _record_seed(self, s0: Point, s1: Point, s2: Point) -> None:
        diag = self.diagnostics
        if not diag.enabled:
            return
        seed = Triangle(s0, s1, s2)
        for edge in seed.edges():
            diag.add_line(edge.start, edge.end)
        diag.add_bounding_box(*bounding_box(self.points))
        diag.add_vertex(self.origin)

    def _insert(self, idx: int, pp: PolarPoint) -> None:
        hull = self.hull
        mesh = self.mesh
        points = self.points
        p = pp.point
        nxt = hull.next
        prv = hull.prev
        ht = hull.t

        start = self.hash.find_live(pp)

        # first hull edge (e, e.next) visible from p
        e = start
        while orientation(p, points[hull.ids[e]], points[hull.ids[nxt[e]]]) <= 0:
            e = nxt[e]
            if e == start:
                raise HullConsistencyError(
                    f"no visible hull edge for point {p}; hull and mesh disagree")
        walk_back = e == start

        t = mesh.add_triangle(hull.ids[e], idx, hull.ids[nxt[e]], EMPTY, EMPTY, ht[e])
        hull.set_t(e, t)
        new = hull.insert(pp, idx, after=e)
        hull.set_t(new, self._legalize(t + 2))

        # absorb hull nodes that became interior, walking forward
        q = nxt[new]
        while orientation(p, points[hull.ids[q]], points[hull.ids[nxt[q]]]) > 0:
            t = mesh.add_triangle(hull.ids[q], idx, hull.ids[nxt[q]], ht[prv[q]], EMPTY, ht[q])
            hull.set_t(prv[q], self._legalize(t + 2))
            hull.remove(q)
            q = nxt[q]

        # and backward when the visible range may wrap past the hashed node
        if walk_back:
            q = prv[new]
            while orientation(p, points[hull.ids[prv[q]]], points[hull.ids[q]]) > 0:
                t = mesh.add_triangle(hull.ids[prv[q]], idx, hull.ids[q], EMPTY, ht[q], ht[prv[q]])
                self._legalize(t + 2)
                hull.set_t(prv[q], t)
                hull.remove(q)
                q = prv[q]

        hull.start = prv[new]
        self.hash.add(new)
        self.hash.add(prv[new])

    def _legalize(self, a: int) -> int:
        """Flip illegal edges starting at slot ``a``; return the final slot of a's right edge.

        Works on an explicit stack: after a flip the same slot is checked
        again and the exposed edge of the neighbour is pushed.
        """
        tri = self.mesh.triangles
        he = self.mesh.halfedges
        link = self.mesh.link
        points = self.points
        stack = self._stack
        ar = a

        while True:
            b = int(he[a])
            a0 = a - a % 3
            ar = a0 + (a + 2) % 3

            if b == EMPTY:
                if not stack:
                    break
                a = stack.pop()
                continue

            al = a0 + (a + 1) % 3
            b0 = b - b % 3
            bl = b0 + (b + 2) % 3

            p0 = int(tri[ar])
            pr = int(tri[a])
            pl = int(tri[al])
            p1 = int(tri[bl])

            if in_circumcircle(points[p0], points[pr], points[pl], points[p1]):
                tri[a] = p1
                tri[b] = p0

                hbl = int(he[bl])
                if hbl == EMPTY:
                    # the flipped edge was a hull edge; move its hull reference along
                    self._retarget_hull(bl, a)

                link(a, hbl)
                link(b, int(he[ar]))
                link(ar, bl)
                self.stats.flips += 1

                stack.append(b0 + (b + 1) % 3)
            else:
                if not stack:
                    break
                a = stack.pop()

        return ar

    def _retarget_hull(self, old: int, new: int) -> None:
        h = self.hull.node_at(old)
        if h != EMPTY:
            self.hull.set_t(h, new)

    # ------------------------------------------------------------------
    # Voronoi
    # ------------------------------------------------------------------
    def voronoi(self, viewport: ViewportConfig) -> Tuple[List[Point], List[Edge], List[Edge]]:
        """Return (vertices, bounded edges, rays clipped to ``viewport``)."""
        if self.triangles is None:
            raise InvalidStateError("Delaunay triangulation needs to be calculated first.")

        vertices = [tri.circumcenter for tri in self.triangles]
        edges: List[Edge] = []
        rays: List[Edge] = []
        if not vertices:
            return vertices, edges, rays

        he = self.mesh.halfedges
        for i in range(self.mesh.size):
            j = int(he[i])
            if j < i:
                continue
            c1 = vertices[i // 3]
            c2 = vertices[j // 3]
            if c1 == c2:
                continue
            edges.append(Edge(c1, c2))

        hull = self.hull
        for h in hull.nodes():
            p1 = hull.point(h)
            p2 = hull.point(hull.next[h])
            c = vertices[hull.t[h] // 3]
            rays.append(clip_ray(p1, p2, c, viewport))

        logger.debug("sweep voronoi: %d vertices, %d edges, %d rays",
                     len(vertices), len(edges), len(rays))
        return vertices, edges, rays
