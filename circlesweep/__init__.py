"""Public package API for circlesweep.

Delaunay triangulation of planar point sets with two interchangeable
strategies (incremental Bowyer-Watson and sweep-circle) plus the dual Voronoi
diagram. This facade re-exports the stable names from the internal
``circlesweep.core`` package.

Example
-------
    from circlesweep import VoronoiSession
    session = VoronoiSession(points, strategy='sweep_circle')
    session.compute_delaunay()
    session.compute_voronoi(800, 600)

The deeper modules (``circlesweep.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version
    __version__ = _pkg_version("circlesweep")  # populated when installed
except Exception:  # pragma: no cover - source checkout without metadata
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core.config import SessionConfig, Strategy, ViewportConfig
from .core.constants import EMPTY, HASH_SLACK, MIN_POINTS, SUPER_TRIANGLE_SCALE
from .core.diagnostics import DiagnosticsBuffer
from .core.errors import CircleSweepError, HullConsistencyError, InvalidStateError
from .core.geometry import (Triangle, centroid, circumcenter, circumcircle_contains,
                            circumradius2, distance2, in_circumcircle, is_clockwise,
                            is_collinear, is_counter_clockwise, midpoint, orientation,
                            pseudo_angle)
from .core.incremental import IncrementalTriangulator
from .core.io import as_points, edges_to_array, points_to_array, triangles_to_array
from .core.logging_utils import configure_logging, get_logger
from .core.primitives import (DiagColor, DiagGeometryType, DiagnosticGeometry, Edge, Point,
                              PolarPoint)
from .core.session import VoronoiSession, delaunay, voronoi
from .core.stats import PassStats, format_stats
from .core.sweep_circle import SweepCircleTriangulator

__all__ = [
    '__version__',
    # primitives
    'Point', 'Edge', 'PolarPoint', 'Triangle',
    'DiagGeometryType', 'DiagColor', 'DiagnosticGeometry', 'DiagnosticsBuffer',
    # geometry
    'distance2', 'orientation', 'is_clockwise', 'is_counter_clockwise', 'is_collinear',
    'in_circumcircle', 'circumcenter', 'circumradius2', 'pseudo_angle', 'centroid',
    'midpoint', 'circumcircle_contains',
    # triangulation
    'IncrementalTriangulator', 'SweepCircleTriangulator',
    'VoronoiSession', 'delaunay', 'voronoi',
    # configuration, errors, stats
    'Strategy', 'SessionConfig', 'ViewportConfig',
    'CircleSweepError', 'InvalidStateError', 'HullConsistencyError',
    'PassStats', 'format_stats',
    # io and logging
    'as_points', 'points_to_array', 'triangles_to_array', 'edges_to_array',
    'get_logger', 'configure_logging',
    # constants
    'EMPTY', 'HASH_SLACK', 'MIN_POINTS', 'SUPER_TRIANGLE_SCALE',
]
