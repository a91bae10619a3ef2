"""Per-pass statistics and a small presentation helper.

A session owns one PassStats; the triangulators fill the counters they know
about and the session adds timings.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any

@dataclass
class PassStats:
    points: int = 0
    triangles: int = 0
    # Sweep-circle only (stay 0 for the incremental strategy)
    skipped_points: int = 0
    flips: int = 0
    hull_size: int = 0
    # Voronoi dual
    voronoi_edges: int = 0
    voronoi_rays: int = 0
    # Timing (seconds)
    time_delaunay: float = 0.0
    time_voronoi: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'points': self.points,
            'triangles': self.triangles,
            'skipped_points': self.skipped_points,
            'flips': self.flips,
            'hull_size': self.hull_size,
            'voronoi_edges': self.voronoi_edges,
            'voronoi_rays': self.voronoi_rays,
            'flips_per_point': (self.flips / self.points) if self.points else 0.0,
            'time_delaunay': self.time_delaunay,
            'time_voronoi': self.time_voronoi,
            'time_total': self.time_delaunay + self.time_voronoi,
        }

    def reset(self) -> None:
        for name, value in PassStats().__dict__.items():
            setattr(self, name, value)


def format_stats(stats) -> str:
    """Return a human readable two-column table of a PassStats (or its dict)."""
    d = stats.to_dict() if isinstance(stats, PassStats) else dict(stats)
    if not d:
        return "<no stats>"
    width = max(len(k) for k in d)
    lines = []
    for key, value in d.items():
        if key.startswith('time_'):
            text = f"{value * 1000.0:.3f} ms"
        elif isinstance(value, float):
            text = f"{value:.3f}"
        else:
            text = str(value)
        lines.append(f"{key.ljust(width)}  {text}")
    return "\n".join(lines)

__all__ = ["PassStats", "format_stats"]
