"""Central sentinels and numeric constants.

Kept in one place so the triangulators and their tests reference the same
values instead of scattering literals.
"""
from __future__ import annotations

# Half-edge mesh / hull sentinels
EMPTY: int = -1                     # no opposite half-edge, no hull slot

# Incremental (Bowyer-Watson) super-triangle
SUPER_TRIANGLE_SCALE: float = 20.0  # multiple of the larger bounding-box side

# Sweep-circle hull hash
HASH_SLACK: int = 2                 # extra slots past floor(sqrt(n)); bucket keys reach hash_size

# Minimum number of points for a non-empty triangulation
MIN_POINTS: int = 3

__all__ = [
    'EMPTY',
    'SUPER_TRIANGLE_SCALE',
    'HASH_SLACK',
    'MIN_POINTS',
]
