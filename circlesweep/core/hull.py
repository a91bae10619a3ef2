"""Convex hull bookkeeping for the sweep-circle triangulator.

The hull is a circular doubly linked list stored as an arena: every node is
an integer handle into parallel lists, so ``prev``/``next`` are plain indices
and removing a node only flips its tombstone. Handles are never reused within
a pass; a removed node keeps its last ``prev``/``next`` so a walk that just
removed it can step on.

``HullHash`` buckets hull nodes by the pseudo-angle of their point around the
sweep origin and answers "which live hull node is angularly close to p".
"""
from __future__ import annotations

import math
from typing import Dict, Iterator, List, Optional

from .constants import EMPTY, HASH_SLACK
from .errors import HullConsistencyError
from .primitives import Point, PolarPoint

__all__ = ['Hull', 'HullHash']


class Hull:
    """Arena-indexed circular hull.

    Attributes
    ----------
    points : list[PolarPoint]
        Point of each node.
    ids : list[int]
        Index of the node's point in the input sequence.
    prev, next : list[int]
        Neighbour handles.
    t : list[int]
        Mesh slot of the hull-facing half-edge (node -> next) or EMPTY.
        Read-only for callers; write through :meth:`set_t` so the
        slot-to-node index stays current.
    removed : list[bool]
        Tombstones.
    start : int
        Some live node, EMPTY for an empty hull.
    """

    def __init__(self):
        self.points: List[PolarPoint] = []
        self.ids: List[int] = []
        self.prev: List[int] = []
        self.next: List[int] = []
        self.t: List[int] = []
        self.removed: List[bool] = []
        self.start = EMPTY
        self._live = 0
        self._slot_node: Dict[int, int] = {}

    def __len__(self) -> int:
        return self._live

    def insert(self, point: PolarPoint, index: int, after: Optional[int] = None, t: int = EMPTY) -> int:
        """Create a node for ``point`` and link it after ``after``; return its handle.

        With ``after=None`` the node must be the first one and forms a
        one-element cycle.
        """
        h = len(self.ids)
        self.points.append(point)
        self.ids.append(index)
        self.t.append(EMPTY)
        self.removed.append(False)
        self.set_t(h, t)
        if after is None:
            if self.start != EMPTY:
                raise ValueError("hull already has nodes; pass the node to insert after")
            self.prev.append(h)
            self.next.append(h)
            self.start = h
        else:
            nxt = self.next[after]
            self.prev.append(after)
            self.next.append(nxt)
            self.prev[nxt] = h
            self.next[after] = h
        self._live += 1
        return h

    def remove(self, h: int) -> int:
        """Unlink ``h`` and tombstone it; return its predecessor."""
        p = self.prev[h]
        n = self.next[h]
        self.next[p] = n
        self.prev[n] = p
        self.removed[h] = True
        self._live -= 1
        if self._slot_node.get(self.t[h]) == h:
            del self._slot_node[self.t[h]]
        if self.start == h:
            self.start = p
        return p

    def set_t(self, h: int, slot: int) -> None:
        """Point node ``h`` at mesh slot ``slot`` (EMPTY clears it)."""
        old = self.t[h]
        if self._slot_node.get(old) == h:
            del self._slot_node[old]
        self.t[h] = slot
        if slot != EMPTY:
            self._slot_node[slot] = h

    def node_at(self, slot: int) -> int:
        """Live node whose hull-facing half-edge is ``slot``, or EMPTY."""
        return self._slot_node.get(slot, EMPTY)

    def point(self, h: int) -> Point:
        return self.points[h].point

    def nodes(self) -> Iterator[int]:
        """Live handles in hull order, beginning at ``start``."""
        if self.start == EMPTY:
            return
        h = self.start
        while True:
            yield h
            h = self.next[h]
            if h == self.start:
                break


class HullHash:
    """Angular bucket table over hull nodes.

    ``size`` is floor(sqrt(n)); keys fall in [0, size] and the table carries
    HASH_SLACK extra slots so every key has a home.
    """

    def __init__(self, n: int, origin: Point, hull: Hull):
        self.size = max(int(math.sqrt(n)), 1)
        self.slots = [EMPTY] * (self.size + HASH_SLACK)
        self.origin = origin
        self.hull = hull

    def key(self, pp: PolarPoint) -> int:
        dy = pp.point.y - self.origin.y
        angle = -pp.angle if dy < 0 else pp.angle
        return int((2 + angle) / 4 * self.size)

    def add(self, h: int) -> None:
        self.slots[self.key(self.hull.points[h])] = h

    def find_live(self, pp: PolarPoint) -> int:
        """Probe circularly from the key of ``pp`` for a live hull node."""
        n_slots = len(self.slots)
        start = self.key(pp)
        removed = self.hull.removed
        for j in range(n_slots):
            h = self.slots[(start + j) % n_slots]
            if h != EMPTY and not removed[h]:
                return h
        raise HullConsistencyError(f"no live hull node in the edge hash for point {pp.point}")
