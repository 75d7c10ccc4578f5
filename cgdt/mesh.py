# cgdt/mesh.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Generic, Iterator, List, Optional, TypeVar

from .geom import Pt

@dataclass
class Vertex:
    """
    Вершина (точка входу).
    vnum: стабільний номер у порядку вводу.
    duplicate: ребро (id) до поточної нової точки, вже створене під час цієї вставки, або None.
    onhull: вершина інцидентна хоча б одному живому ребру (виставляє clean_vertices).
    mark: вершину вже оброблено (вставлено).
    """
    v: Pt
    vnum: int
    duplicate: Optional[int] = None
    onhull: bool = False
    mark: bool = False
    alive: bool = True
    prev: int = -1
    next: int = -1


@dataclass
class Edge:
    """
    Ребро. endpts: дві вершини, adjface: рівно дві суміжні грані.
    newface: конусна грань, збудована над ребром у поточній вставці.
    delete: ребро всередині видимої області, знищується при cleanup.
    """
    endpts: List[int] = field(default_factory=lambda: [-1, -1])
    adjface: List[Optional[int]] = field(default_factory=lambda: [None, None])
    newface: Optional[int] = None
    delete: bool = False
    alive: bool = True
    prev: int = -1
    next: int = -1


@dataclass
class Face:
    """
    Трикутна грань: vertex у ccw-порядку (якщо дивитися ззовні),
    edge[i] з'єднує vertex[i] та vertex[(i+1)%3].
    visible: грань видима з точки, що вставляється.
    lower: грань належить нижній оболонці (ставить лише lower_faces).
    """
    vertex: List[int] = field(default_factory=lambda: [-1, -1, -1])
    edge: List[int] = field(default_factory=lambda: [-1, -1, -1])
    visible: bool = False
    lower: bool = False
    alive: bool = True
    prev: int = -1
    next: int = -1


N = TypeVar("N", Vertex, Edge, Face)


class Ring(Generic[N]):
    """
    Кільцевий двозв'язний список поверх масиву вузлів.
    Вузол адресується стабільним індексом; видалений вузол лишається у nodes
    з alive=False (індекси не ущільнюємо). head можна переставити на будь-який
    живий вузол, не переміщуючи вузли.
    """

    def __init__(self) -> None:
        self.nodes: List[N] = []
        self.head: Optional[int] = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, nid: int) -> N:
        return self.nodes[nid]

    def add(self, node: N) -> int:
        """Додати вузол перед head (тобто в кінець кільця)."""
        nid = len(self.nodes)
        self.nodes.append(node)
        if self.head is None:
            node.prev = node.next = nid
            self.head = nid
        else:
            h = self.nodes[self.head]
            node.next = self.head
            node.prev = h.prev
            self.nodes[h.prev].next = nid
            h.prev = nid
        self._count += 1
        return nid

    def delete(self, nid: int) -> None:
        node = self.nodes[nid]
        if not node.alive:
            raise ValueError(f"node {nid} already deleted")
        if node.next == nid:
            self.head = None
        elif nid == self.head:
            self.head = node.next
        self.nodes[node.prev].next = node.next
        self.nodes[node.next].prev = node.prev
        node.alive = False
        node.prev = node.next = -1
        self._count -= 1

    def ids(self) -> List[int]:
        """Знімок живих індексів у порядку кільця, починаючи з head."""
        out: List[int] = []
        if self.head is None:
            return out
        cur = self.head
        while True:
            out.append(cur)
            cur = self.nodes[cur].next
            if cur == self.head:
                break
        return out

    def __iter__(self) -> Iterator[N]:
        for nid in self.ids():
            yield self.nodes[nid]


class Mesh:
    """
    Три кільця (вершини, ребра, грані) однієї побудови.
    Структурні зміни поза цим класом робить лише ConvexHull3D.
    """

    def __init__(self) -> None:
        self.vertices: Ring[Vertex] = Ring()
        self.edges: Ring[Edge] = Ring()
        self.faces: Ring[Face] = Ring()

    def make_null_vertex(self, p: Pt, vnum: int) -> int:
        return self.vertices.add(Vertex(p, vnum))

    def make_null_edge(self) -> int:
        return self.edges.add(Edge())

    def make_null_face(self) -> int:
        return self.faces.add(Face())

    def face_points(self, fid: int) -> List[Pt]:
        vs = self.vertices.nodes
        return [vs[i].v for i in self.faces[fid].vertex]

    def vnums(self, fid: int) -> tuple[int, int, int]:
        vs = self.vertices.nodes
        a, b, c = self.faces[fid].vertex
        return (vs[a].vnum, vs[b].vnum, vs[c].vnum)

    # ---------- діагностика ----------
    def dump(self) -> List[str]:
        """Повний вміст трьох кілець (для DEBUG-логу)."""
        vs = self.vertices.nodes
        lines = [f"Head vertex {self.vertices.head}:", "Vertex List"]
        for vid in self.vertices.ids():
            v = vs[vid]
            lines.append(
                f"  id {vid:4d}  vnum {v.vnum:4d}  ({v.v.x:6d}, {v.v.y:6d}, {v.v.z:6d})"
                f"  active:{int(v.onhull)}  dup:{v.duplicate}  mark:{int(v.mark)}"
            )
        lines.append("Edge List")
        for eid in self.edges.ids():
            e = self.edges[eid]
            lines.append(
                f"  id {eid:4d}  adj: {e.adjface[0]} {e.adjface[1]}"
                f"  endpts: {vs[e.endpts[0]].vnum} {vs[e.endpts[1]].vnum}  del:{int(e.delete)}"
            )
        lines.append("Face List")
        for fid in self.faces.ids():
            f = self.faces[fid]
            a, b, c = self.vnums(fid)
            lines.append(
                f"  id {fid:4d}  edges: {f.edge[0]} {f.edge[1]} {f.edge[2]}"
                f"  vert: {a} {b} {c}  vis: {int(f.visible)}"
            )
        return lines
