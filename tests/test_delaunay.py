"""Lifting reduction: lower faces of the lifted hull are the Delaunay triangles."""

import itertools
import random

import pytest

from cgdt.delaunay import DelaunayTri, lift_points
from cgdt.errors import ErrorKind, HullError
from cgdt.predicates import normz


def _coord_tris(dt):
    return {frozenset(dt.points[i] for i in t) for t in dt.triangles()}


def _area2(a, b, c):
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def _incircle(a, b, c, d):
    """> 0 iff d is strictly inside the circle through ccw a, b, c."""
    rows = []
    for p in (a, b, c):
        dx, dy = p[0] - d[0], p[1] - d[1]
        rows.append((dx, dy, dx * dx + dy * dy))
    (a1, a2, a3), (b1, b2, b3), (c1, c2, c3) = rows
    return (a1 * (b2 * c3 - b3 * c2)
            - a2 * (b1 * c3 - b3 * c1)
            + a3 * (b1 * c2 - b2 * c1))


def _hull_area2(pts):
    """Doubled area of the 2-D convex hull (monotone chain)."""
    pts = sorted(set(pts))

    def half(seq):
        out = []
        for p in seq:
            while len(out) >= 2 and _area2(out[-2], out[-1], p) <= 0:
                out.pop()
            out.append(p)
        return out

    ring = half(pts)[:-1] + half(reversed(pts))[:-1]
    return sum(_area2(ring[0], ring[i], ring[i + 1]) for i in range(1, len(ring) - 1))


# =============================================================================
# Scenarios
# =============================================================================

def test_fan_around_interior_point(fan_points):
    dt = DelaunayTri(fan_points)
    assert {frozenset(t) for t in dt.triangles()} == {
        frozenset((0, 1, 3)), frozenset((1, 2, 3)), frozenset((0, 2, 3)),
    }
    assert dt.nlower == 3


def test_fan_is_order_independent(fan_points):
    expected = _coord_tris(DelaunayTri(fan_points))
    for perm in itertools.permutations(fan_points):
        assert _coord_tris(DelaunayTri(perm)) == expected


def test_lower_faces_are_clockwise_in_projection(fan_points):
    dt = DelaunayTri(fan_points)
    m = dt.hull.mesh
    lower = [fid for fid in m.faces.ids() if m.faces[fid].lower]
    assert len(lower) == 3
    assert all(normz(*m.face_points(fid)) < 0 for fid in lower)
    upper = [fid for fid in m.faces.ids() if not m.faces[fid].lower]
    assert [set(m.vnums(fid)) for fid in upper] == [{0, 1, 2}]


@pytest.mark.parametrize("points", [
    [(0, 0), (1, 1), (2, 2)],
    [(0, 0), (1, 1), (2, 2), (-5, -5), (7, 7)],
    [(3, 3), (3, 3), (3, 3)],
])
def test_collinear_input(points):
    with pytest.raises(HullError, match="collinear") as exc:
        DelaunayTri(points)
    assert exc.value.kind is ErrorKind.ALL_POINTS_COLLINEAR


def test_cocircular_input_is_coplanar_after_lifting():
    with pytest.raises(HullError) as exc:
        DelaunayTri([(0, 0), (1, 0), (0, 1), (1, 1)])
    assert exc.value.kind is ErrorKind.ALL_POINTS_COPLANAR


def test_three_points_cannot_form_a_solid():
    with pytest.raises(HullError) as exc:
        DelaunayTri([(0, 0), (10, 0), (0, 10)])
    assert exc.value.kind is ErrorKind.ALL_POINTS_COPLANAR


@pytest.mark.parametrize("bad", [(2_000_000, 0), (0, -2_000_000), (800, 800)])
def test_coordinate_out_of_range(fan_points, bad):
    with pytest.raises(HullError, match="safe bound") as exc:
        DelaunayTri(fan_points + [bad])
    assert exc.value.kind is ErrorKind.COORDINATE_OUT_OF_RANGE


def test_bound_is_inclusive():
    lifted = lift_points([(1000, 0), (0, 1000), (0, 0)])
    assert lifted[0].z == 1_000_000


def test_too_few_points():
    with pytest.raises(HullError) as exc:
        DelaunayTri([(0, 0), (1, 0)])
    assert exc.value.kind is ErrorKind.TOO_FEW_POINTS


# =============================================================================
# Delaunay validity on random point sets
# =============================================================================

@pytest.mark.parametrize("seed", [1, 2, 3])
def test_random_points_give_valid_delaunay(seed):
    rng = random.Random(seed)
    grid = [(x, y) for x in range(-50, 51) for y in range(-50, 51)]
    pts = rng.sample(grid, 60)
    dt = DelaunayTri(pts, check=True)
    tris = dt.triangles()

    # every input point is a Delaunay vertex
    assert {i for t in tris for i in t} == set(range(len(pts)))

    # triangles tile the convex hull: areas add up, edges are shared at most twice
    ccw = []
    for a, b, c in tris:
        pa, pb, pc = pts[a], pts[b], pts[c]
        if _area2(pa, pb, pc) < 0:
            pb, pc = pc, pb
        assert _area2(pa, pb, pc) > 0
        ccw.append((pa, pb, pc))
    assert sum(_area2(*t) for t in ccw) == _hull_area2(pts)

    directed = [(t[i], t[(i + 1) % 3]) for t in ccw for i in range(3)]
    assert len(directed) == len(set(directed))

    # empty circumcircle
    for a, b, c in ccw:
        for d in pts:
            assert _incircle(a, b, c, d) <= 0

    V, E, F = dt.hull.counts()
    assert V - E + F == 2
