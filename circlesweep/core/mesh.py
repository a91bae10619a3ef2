"""Flat half-edge triangle mesh.

Triangle ``t`` occupies slots ``3t, 3t+1, 3t+2``. ``triangles[e]`` is the
point index where directed half-edge ``e`` starts, and ``halfedges[e]`` is the
twin slot in the neighbouring triangle or EMPTY on the hull. Storage is
preallocated as int64 numpy arrays; ``size`` counts used slots.
"""
from __future__ import annotations

from typing import Iterator, Tuple

import numpy as np

from .constants import EMPTY

__all__ = ['HalfEdgeMesh']


class HalfEdgeMesh:
    def __init__(self, max_triangles: int):
        capacity = 3 * max(int(max_triangles), 1)
        self.triangles = np.full(capacity, EMPTY, dtype=np.int64)
        self.halfedges = np.full(capacity, EMPTY, dtype=np.int64)
        self.size = 0

    @property
    def triangle_count(self) -> int:
        return self.size // 3

    def add_triangle(self, i0: int, i1: int, i2: int, a: int, b: int, c: int) -> int:
        """Append triangle (i0, i1, i2) linked to opposite slots a, b, c; return its first slot."""
        t = self.size
        if t + 3 > self.triangles.shape[0]:
            raise IndexError(f"half-edge mesh capacity of {self.triangles.shape[0] // 3} triangles exceeded")
        self.triangles[t] = i0
        self.triangles[t + 1] = i1
        self.triangles[t + 2] = i2
        self.link(t, a)
        self.link(t + 1, b)
        self.link(t + 2, c)
        self.size += 3
        return t

    def link(self, a: int, b: int) -> None:
        self.halfedges[a] = b
        if b != EMPTY:
            self.halfedges[b] = a

    def opposite(self, e: int) -> int:
        return int(self.halfedges[e])

    def triangle_vertices(self) -> np.ndarray:
        """(M, 3) view of point indices for the used part of the mesh."""
        return self.triangles[:self.size].reshape(-1, 3)

    def iter_triangles(self) -> Iterator[Tuple[int, int, int]]:
        tri = self.triangles
        for t in range(0, self.size, 3):
            yield int(tri[t]), int(tri[t + 1]), int(tri[t + 2])

    def check_symmetry(self) -> bool:
        """True if every linked half-edge points back at its twin and stays in range."""
        he = self.halfedges[:self.size]
        linked = np.nonzero(he != EMPTY)[0]
        if linked.size == 0:
            return True
        twins = he[linked]
        if np.any(twins >= self.size) or np.any(twins == linked):
            return False
        return bool(np.all(he[twins] == linked))
