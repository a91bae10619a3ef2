"""Configuration objects for circlesweep sessions."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .constants import SUPER_TRIANGLE_SCALE


class Strategy(str, Enum):
    """Closed set of triangulation strategies a session can run."""
    INCREMENTAL = 'incremental'
    SWEEP_CIRCLE = 'sweep_circle'

    @classmethod
    def parse(cls, value: Union['Strategy', str]) -> 'Strategy':
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace('-', '_')
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Unknown triangulation strategy {value!r}; expected one of "
                         f"{[m.value for m in cls]}")


@dataclass
class SessionConfig:
    """Per-session settings.

    Attributes
    ----------
    strategy : Strategy or str
        Triangulation algorithm; normalised to a Strategy member.
    build_diagnostics : bool
        Record DiagnosticGeometry shapes while computing.
    super_triangle_scale : float
        Size of the Bowyer-Watson super-triangle relative to the larger side
        of the input bounding box.
    log_level : str or int, optional
        Level applied to the session logger; None inherits from 'circlesweep'.
    """
    strategy: Union[Strategy, str] = Strategy.SWEEP_CIRCLE
    build_diagnostics: bool = False
    super_triangle_scale: float = SUPER_TRIANGLE_SCALE
    log_level: Optional[Union[str, int]] = None

    def __post_init__(self):
        self.strategy = Strategy.parse(self.strategy)
        if not self.super_triangle_scale > 1.0:
            raise ValueError(f"super_triangle_scale must be > 1, got {self.super_triangle_scale}")


@dataclass(frozen=True)
class ViewportConfig:
    """Rectangle [0, width] x [0, height] that unbounded Voronoi edges are clipped to."""
    width: float
    height: float

    def __post_init__(self):
        for label, value in (('width', self.width), ('height', self.height)):
            if value is None or not float(value) > 0.0:
                raise ValueError(f"viewport {label} must be a positive number, got {value!r}")


__all__ = ['Strategy', 'SessionConfig', 'ViewportConfig']
