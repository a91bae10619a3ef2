"""Exception hierarchy for circlesweep."""
from __future__ import annotations


class CircleSweepError(Exception):
    """Base class for all errors raised by circlesweep."""


class InvalidStateError(CircleSweepError, RuntimeError):
    """A session operation was requested out of order (e.g. Voronoi before Delaunay)."""


class HullConsistencyError(CircleSweepError, RuntimeError):
    """The sweep-circle hull no longer matches the mesh.

    Raised when no visible hull edge can be found for a new point. This only
    happens when earlier floating-point error or malformed input broke the
    geometric invariants; the pass is aborted instead of looping forever or
    returning a corrupted mesh.
    """


__all__ = ['CircleSweepError', 'InvalidStateError', 'HullConsistencyError']
