"""Mesh arena: intrusive rings over stable indices."""

import pytest

from cgdt.geom import Pt
from cgdt.mesh import Edge, Mesh, Ring


def _ring(n):
    ring = Ring()
    for _ in range(n):
        ring.add(Edge())
    return ring


def test_add_to_empty_ring_makes_sole_member():
    ring = _ring(1)
    assert ring.head == 0
    assert ring[0].prev == ring[0].next == 0
    assert len(ring) == 1


def test_add_appends_before_head():
    ring = _ring(3)
    assert ring.ids() == [0, 1, 2]
    assert ring[2].next == 0
    assert ring[0].prev == 2


def test_delete_interior_member():
    ring = _ring(3)
    ring.delete(1)
    assert ring.ids() == [0, 2]
    assert not ring[1].alive
    assert ring[0].next == 2 and ring[2].prev == 0
    assert len(ring) == 2


def test_delete_head_moves_head_forward():
    ring = _ring(3)
    ring.delete(0)
    assert ring.head == 1
    assert ring.ids() == [1, 2]


def test_delete_last_member_empties_ring():
    ring = _ring(1)
    ring.delete(0)
    assert ring.head is None
    assert ring.ids() == []
    assert len(ring) == 0


def test_delete_twice_raises():
    ring = _ring(2)
    ring.delete(1)
    with pytest.raises(ValueError):
        ring.delete(1)


def test_head_can_be_reassigned():
    ring = _ring(3)
    ring.head = 2
    assert ring.ids() == [2, 0, 1]


def test_indices_stay_stable_after_delete():
    ring = _ring(3)
    ring.delete(1)
    nid = ring.add(Edge())
    assert nid == 3
    assert ring.ids() == [0, 2, 3]
    assert len(ring.nodes) == 4


def test_mesh_null_records():
    mesh = Mesh()
    vid = mesh.make_null_vertex(Pt(1, 2, 5), 0)
    eid = mesh.make_null_edge()
    fid = mesh.make_null_face()
    v, e, f = mesh.vertices[vid], mesh.edges[eid], mesh.faces[fid]
    assert (v.duplicate, v.onhull, v.mark) == (None, False, False)
    assert e.adjface == [None, None] and e.newface is None and not e.delete
    assert not f.visible and not f.lower


def test_dump_lists_all_rings():
    mesh = Mesh()
    mesh.make_null_vertex(Pt(1, 2, 5), 0)
    lines = mesh.dump()
    assert "Vertex List" in lines and "Edge List" in lines and "Face List" in lines
    assert any("vnum    0" in ln for ln in lines)
