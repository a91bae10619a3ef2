"""One Delaunay/Voronoi computation over a fixed point set.

A VoronoiSession binds an immutable point tuple to one of the strategies in
:class:`~circlesweep.core.config.Strategy`. ``compute_delaunay`` must run
before ``compute_voronoi``; results are exposed as plain attributes.

Example
-------
    from circlesweep import VoronoiSession
    s = VoronoiSession([(0, 0), (10, 0), (10, 10), (0, 10)])
    s.compute_delaunay()
    s.compute_voronoi(100, 100)
    s.voronoi_rays
"""
from __future__ import annotations

import time
from typing import List, Optional, Union

from .config import SessionConfig, Strategy, ViewportConfig
from .diagnostics import DiagnosticsBuffer
from .errors import InvalidStateError
from .geometry import Triangle
from .incremental import IncrementalTriangulator
from .io import as_points
from .logging_utils import get_logger
from .primitives import Edge, Point
from .stats import PassStats, format_stats
from .sweep_circle import SweepCircleTriangulator

__all__ = ['VoronoiSession', 'delaunay', 'voronoi']


class VoronoiSession:
    """Delaunay triangulation and Voronoi dual of one point set.

    Parameters
    ----------
    points : array_like
        (x, y) pairs or an (N, 2) array.
    strategy : Strategy or str, optional
        'sweep_circle' (default) or 'incremental'. Overrides ``config.strategy``.
    build_diagnostics : bool, optional
        Record debug geometry into ``diagnostics``. Overrides the config flag.
    config : SessionConfig, optional
        Remaining settings.
    """

    def __init__(self, points, strategy: Union[Strategy, str, None] = None,
                 build_diagnostics: Optional[bool] = None,
                 config: Optional[SessionConfig] = None):
        cfg = config if config is not None else SessionConfig()
        self.config = cfg
        self.strategy = Strategy.parse(strategy) if strategy is not None else cfg.strategy
        enabled = cfg.build_diagnostics if build_diagnostics is None else bool(build_diagnostics)
        self.logger = get_logger('circlesweep.session', cfg.log_level)

        self.points = as_points(points)
        self._diag = DiagnosticsBuffer(enabled)
        self.stats = PassStats(points=len(self.points))

        if self.strategy is Strategy.INCREMENTAL:
            self._impl = IncrementalTriangulator(self.points, self._diag,
                                                 super_triangle_scale=cfg.super_triangle_scale)
        else:
            self._impl = SweepCircleTriangulator(self.points, self._diag, self.stats)

        self.delaunay: Optional[List[Triangle]] = None
        self.voronoi_points: Optional[List[Point]] = None
        self.voronoi_edges: Optional[List[Edge]] = None
        self.voronoi_rays: Optional[List[Edge]] = None

    @property
    def diagnostics(self):
        """Recorded DiagnosticGeometry list, or None when diagnostics are off."""
        return self._diag.shapes

    def compute_delaunay(self) -> List[Triangle]:
        """Triangulate the session points and store the result in ``delaunay``.

        Diagnostics recorded by an earlier pass are discarded first.
        """
        self._diag.clear()
        t0 = time.perf_counter()
        triangles = self._impl.triangulate()
        self.stats.time_delaunay = time.perf_counter() - t0
        self.stats.triangles = len(triangles)
        self.delaunay = triangles
        self.logger.debug("%s delaunay: %d points -> %d triangles in %.3f ms",
                          self.strategy.value, len(self.points), len(triangles),
                          self.stats.time_delaunay * 1000.0)
        return triangles

    def compute_voronoi(self, viewport_width: Optional[float] = None,
                        viewport_height: Optional[float] = None) -> List[Edge]:
        """Build the Voronoi dual of ``delaunay``; returns the bounded edges.

        The viewport is required for the sweep-circle strategy, whose
        unbounded edges are clipped to [0, width] x [0, height] and stored in
        ``voronoi_rays``. The incremental strategy ignores it.

        Raises
        ------
        InvalidStateError
            If ``compute_delaunay`` has not run.
        ValueError
            If the sweep-circle strategy gets a missing or non-positive viewport.
        """
        if self.delaunay is None:
            raise InvalidStateError("Delaunay triangulation needs to be calculated first.")

        t0 = time.perf_counter()
        if self.strategy is Strategy.INCREMENTAL:
            vertices, edges, rays = self._impl.voronoi()
        else:
            viewport = ViewportConfig(viewport_width, viewport_height)
            vertices, edges, rays = self._impl.voronoi(viewport)
        self.stats.time_voronoi = time.perf_counter() - t0

        self.voronoi_points = vertices
        self.voronoi_edges = edges
        self.voronoi_rays = rays
        self.stats.voronoi_edges = len(edges)
        self.stats.voronoi_rays = len(rays)
        self.logger.debug("%s voronoi: %d vertices, %d edges, %d rays",
                          self.strategy.value, len(vertices), len(edges), len(rays))
        return edges

    def summary(self) -> str:
        return format_stats(self.stats)

    def __repr__(self) -> str:
        state = 'empty' if self.delaunay is None else f'{len(self.delaunay)} triangles'
        return f"VoronoiSession({len(self.points)} points, {self.strategy.value}, {state})"


def delaunay(points, strategy: Union[Strategy, str] = Strategy.SWEEP_CIRCLE) -> List[Triangle]:
    """Delaunay triangles of ``points`` in one call."""
    return VoronoiSession(points, strategy=strategy).compute_delaunay()


def voronoi(points, viewport_width: Optional[float] = None, viewport_height: Optional[float] = None,
            strategy: Union[Strategy, str] = Strategy.SWEEP_CIRCLE) -> VoronoiSession:
    """Run both passes and return the finished session (vertices, edges and rays as attributes)."""
    session = VoronoiSession(points, strategy=strategy)
    session.compute_delaunay()
    session.compute_voronoi(viewport_width, viewport_height)
    return session
