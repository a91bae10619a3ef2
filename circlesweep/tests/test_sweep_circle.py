"""Tests for the sweep-circle triangulator, its hull and half-edge mesh."""
from collections import Counter

import numpy as np
import pytest

from circlesweep import (EMPTY, DiagGeometryType, DiagnosticsBuffer, HullConsistencyError,
                         IncrementalTriangulator, PassStats, Point, PolarPoint,
                         SweepCircleTriangulator, Triangle, circumcircle_contains, orientation)
from circlesweep.core.hull import Hull, HullHash
from circlesweep.core.incremental import super_triangle
from circlesweep.core.mesh import HalfEdgeMesh
from circlesweep.core.sweep_circle import select_seeds


def _triangulate(points, **kwargs):
    tri = SweepCircleTriangulator(points, **kwargs)
    return tri, tri.triangulate()


class TestSeeds:
    def test_square(self, square):
        assert select_seeds(square) == (0, 2, 1)

    def test_seed_triangle_is_clockwise(self, uniform_points):
        pts = uniform_points(3, 50)
        i0, i1, i2 = select_seeds(pts)
        assert orientation(pts[i0], pts[i1], pts[i2]) < 0

    def test_collinear_has_no_seed(self):
        assert select_seeds([Point(0, 0), Point(1, 0), Point(3, 0)]) is None


@pytest.mark.parametrize("pts", [
    [],
    [Point(1, 1)],
    [Point(1, 1), Point(2, 2)],
    [Point(0, 0), Point(1, 0), Point(2, 0), Point(5, 0)],
    [Point(0, 0), Point(2, 2), Point(1, 1), Point(3, 3)],
    [Point(4, 4), Point(4, 4), Point(4, 4)],
])
def test_trivial_inputs_give_empty_result(pts):
    _, triangles = _triangulate(pts)
    assert triangles == []


def test_single_triangle():
    pts = [Point(0, 0), Point(1, 0), Point(0, 1)]
    tri, triangles = _triangulate(pts)
    assert len(triangles) == 1
    assert set(triangles[0]) == set(pts)
    assert len(tri.hull) == 3


def test_square(square):
    tri, triangles = _triangulate(square)
    assert len(triangles) == 2
    assert all(t.circumcenter == Point(5.0, 5.0) for t in triangles)
    assert len(tri.hull) == 4


@pytest.mark.parametrize("seed,n", [(0, 20), (1, 100), (2, 400)])
def test_delaunay_property_and_mesh(seed, n, uniform_points, assert_delaunay):
    pts = uniform_points(seed, n)
    tri, triangles = _triangulate(pts)
    assert_delaunay(triangles, pts)
    assert tri.mesh.check_symmetry()
    assert len(triangles) == tri.mesh.triangle_count == 2 * n - 2 - len(tri.hull)
    for t in triangles:
        assert orientation(*t) < 0


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_matches_scipy(seed, uniform_points, triangle_set):
    spatial = pytest.importorskip("scipy.spatial")
    pts = uniform_points(100 + seed, 500)
    _, triangles = _triangulate(pts)
    ref = spatial.Delaunay(np.asarray(pts))
    expected = [[pts[i] for i in simplex] for simplex in ref.simplices]
    assert triangle_set(triangles) == triangle_set(expected)


def test_hull_matches_scipy_convex_hull(uniform_points):
    spatial = pytest.importorskip("scipy.spatial")
    pts = uniform_points(42, 300)
    tri, _ = _triangulate(pts)
    hull_ids = {tri.hull.ids[h] for h in tri.hull.nodes()}
    assert hull_ids == set(int(i) for i in spatial.ConvexHull(np.asarray(pts)).vertices)
    # clockwise: every consecutive hull triple turns right
    nodes = list(tri.hull.nodes())
    for k, h in enumerate(nodes):
        a = tri.hull.point(h)
        b = tri.hull.point(nodes[(k + 1) % len(nodes)])
        c = tri.hull.point(nodes[(k + 2) % len(nodes)])
        assert orientation(a, b, c) < 0


def test_hull_references_face_the_hull(uniform_points):
    pts = uniform_points(9, 150)
    tri, _ = _triangulate(pts)
    mesh, hull = tri.mesh, tri.hull
    for h in hull.nodes():
        slot = hull.t[h]
        assert mesh.halfedges[slot] == EMPTY
        assert mesh.triangles[slot] == hull.ids[h]
        assert mesh.triangles[slot - slot % 3 + (slot + 1) % 3] == hull.ids[hull.next[h]]
        assert hull.node_at(slot) == h


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_matches_incremental(seed, ring_points, triangle_set):
    pts = ring_points(seed, 250)
    _, sweep = _triangulate(pts)
    incremental = IncrementalTriangulator(pts).triangulate()
    assert triangle_set(sweep) == triangle_set(incremental)


@pytest.mark.parametrize("seed", range(6))
def test_incremental_misses_only_super_triangle_slivers(seed, uniform_points, triangle_set):
    # a finite super-triangle sits inside the huge circumcircles of thin hull
    # triangles, so Bowyer-Watson loses exactly those
    pts = uniform_points(seed, 200)
    _, sweep = _triangulate(pts)
    incremental = triangle_set(IncrementalTriangulator(pts).triangulate())
    st = super_triangle(pts)

    def reaches_super_triangle(verts):
        tri = Triangle(*verts)
        return any(circumcircle_contains(tri, v) for v in (st.a, st.b, st.c))

    expected = Counter({verts: k for verts, k in triangle_set(sweep).items()
                        if not reaches_super_triangle(verts)})
    assert incremental == expected


def test_legalization_does_not_walk_hull(monkeypatch, uniform_points, assert_delaunay):
    def walk(self):
        raise AssertionError("hull traversed during triangulation")

    pts = uniform_points(3, 300)
    monkeypatch.setattr(Hull, "nodes", walk)
    tri, triangles = _triangulate(pts)
    assert tri.stats.flips > 0
    monkeypatch.undo()
    assert_delaunay(triangles, pts)
    for h in tri.hull.nodes():
        assert tri.mesh.halfedges[tri.hull.t[h]] == EMPTY


def test_duplicates_are_skipped(uniform_points, triangle_set):
    pts = uniform_points(21, 80)
    with_dups = pts + pts[:10] + [pts[5]]
    stats = PassStats()
    _, triangles = _triangulate(with_dups, stats=stats)
    _, reference = _triangulate(pts)
    assert triangle_set(triangles) == triangle_set(reference)
    # three seed vertices and all copies are skipped
    assert stats.skipped_points == 3 + 11


def test_stats(uniform_points):
    stats = PassStats()
    tri, triangles = _triangulate(uniform_points(4, 200), stats=stats)
    assert stats.triangles == len(triangles)
    assert stats.hull_size == len(tri.hull)
    assert stats.skipped_points == 3
    assert stats.flips > 0


def test_diagnostics(square):
    diag = DiagnosticsBuffer(True)
    _, triangles = _triangulate(square, diagnostics=diag)
    kinds = [s.kind for s in diag.shapes]
    assert kinds == ([DiagGeometryType.LINE] * 4 + [DiagGeometryType.VERTEX] +
                     [DiagGeometryType.CIRCLE] * len(triangles))
    assert all(len(s.vertices) == 2 for s in diag.shapes[:3])
    assert len(diag.shapes[3].vertices) == 5
    assert diag.shapes[4].vertices == (Point(20.0 / 3.0, 10.0 / 3.0),)


class TestHull:
    @staticmethod
    def _pp(x, y):
        return PolarPoint(Point(x, y), 0.0, 0.0)

    def test_insert_and_remove(self):
        hull = Hull()
        a = hull.insert(self._pp(0, 0), 0)
        b = hull.insert(self._pp(1, 0), 1, after=a)
        c = hull.insert(self._pp(1, 1), 2, after=b)
        d = hull.insert(self._pp(0, 1), 3, after=a)
        assert list(hull.nodes()) == [a, d, b, c]
        assert len(hull) == 4
        assert hull.remove(d) == a
        assert hull.removed[d]
        assert hull.next[d] == b  # removed node keeps its links
        assert list(hull.nodes()) == [a, b, c]

    def test_removing_start_moves_it(self):
        hull = Hull()
        a = hull.insert(self._pp(0, 0), 0)
        b = hull.insert(self._pp(1, 0), 1, after=a)
        hull.remove(a)
        assert hull.start == b
        assert list(hull.nodes()) == [b]

    def test_second_root_insert_is_rejected(self):
        hull = Hull()
        hull.insert(self._pp(0, 0), 0)
        with pytest.raises(ValueError):
            hull.insert(self._pp(1, 0), 1)

    def test_slot_index_follows_t(self):
        hull = Hull()
        a = hull.insert(self._pp(0, 0), 0, t=4)
        b = hull.insert(self._pp(1, 0), 1, after=a, t=7)
        assert (hull.node_at(4), hull.node_at(7), hull.node_at(5)) == (a, b, EMPTY)
        hull.set_t(a, 9)
        assert hull.t[a] == 9
        assert hull.node_at(4) == EMPTY and hull.node_at(9) == a
        hull.remove(b)
        assert hull.node_at(7) == EMPTY

    def test_hash_keys_cover_table(self):
        hull = Hull()
        hh = HullHash(100, Point(0, 0), hull)
        assert hh.size == 10
        assert len(hh.slots) == 12
        keys = [hh.key(PolarPoint(Point(x, y), 1.0, a))
                for (x, y, a) in [(1, 0, 0.0), (0, 1, 1.0), (-1, 0, 2.0), (0, -1, 1.0), (1, -1e-9, 0.0)]]
        assert keys == [5, 7, 10, 2, 5]
        assert all(0 <= k < len(hh.slots) for k in keys)

    def test_hash_skips_removed_nodes(self):
        hull = Hull()
        a = hull.insert(PolarPoint(Point(1, 0), 1.0, 0.0), 0)
        b = hull.insert(PolarPoint(Point(-1, 0), 1.0, 2.0), 1, after=a)
        hh = HullHash(100, Point(0, 0), hull)
        hh.add(a)
        hh.add(b)
        hull.remove(a)
        assert hh.find_live(PolarPoint(Point(1, 0), 1.0, 0.0)) == b

    def test_hash_without_live_node_raises(self):
        hull = Hull()
        hull.insert(PolarPoint(Point(1, 0), 1.0, 0.0), 0)
        hh = HullHash(9, Point(0, 0), hull)
        with pytest.raises(HullConsistencyError):
            hh.find_live(PolarPoint(Point(0, 1), 1.0, 1.0))
        with pytest.raises(RuntimeError):
            hh.find_live(PolarPoint(Point(0, 1), 1.0, 1.0))


class TestHalfEdgeMesh:
    def test_add_and_link(self):
        mesh = HalfEdgeMesh(2)
        t0 = mesh.add_triangle(0, 1, 2, EMPTY, EMPTY, EMPTY)
        t1 = mesh.add_triangle(2, 1, 3, t0 + 1, EMPTY, EMPTY)
        assert (t0, t1) == (0, 3)
        assert mesh.opposite(1) == 3 and mesh.opposite(3) == 1
        assert mesh.triangle_count == 2
        assert list(mesh.iter_triangles()) == [(0, 1, 2), (2, 1, 3)]
        assert mesh.triangle_vertices().shape == (2, 3)
        assert mesh.check_symmetry()

    def test_broken_link_is_detected(self):
        mesh = HalfEdgeMesh(2)
        mesh.add_triangle(0, 1, 2, EMPTY, EMPTY, EMPTY)
        mesh.add_triangle(2, 1, 3, 1, EMPTY, EMPTY)
        mesh.halfedges[1] = 4
        assert not mesh.check_symmetry()

    def test_capacity(self):
        mesh = HalfEdgeMesh(1)
        mesh.add_triangle(0, 1, 2, EMPTY, EMPTY, EMPTY)
        with pytest.raises(IndexError):
            mesh.add_triangle(0, 2, 3, EMPTY, EMPTY, EMPTY)
