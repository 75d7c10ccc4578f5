from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .checks import check_euler, consistency, convexity, run_checks, topology
from .errors import ErrorKind, HullError
from .geom import Pt, SAFE, in_safe_range
from .mesh import Mesh
from .predicates import collinear, volume_sign

logger = logging.getLogger(__name__)


class ConvexHull3D:
    """
    Інкрементальна 3D опукла оболонка (класичний O(n²) алгоритм з явним cleanup).

    Вхід: список Pt з цілими координатами (мінімум 3, не всі колінеарні, не всі копланарні).
    Точки вставляються по одній у порядку кільця вершин; після кожної вставки
    cleanup прибирає застарілу топологію.
    Вихід: self.mesh: три кільця; faces() повертає живі грані як трійки vnum.

    check=True: після кожної вставки запускати перевірки інваріантів (checks.run_checks).
    build=False: лише завантажити вершини; далі double_triangle() / insert() вручну.
    """

    def __init__(self, points: Iterable[Pt], check: bool = False, build: bool = True):
        self.mesh = Mesh()
        self.check = check
        self.read_vertices(points)
        if build:
            self.double_triangle()
            self.construct_hull()

    # ---------------- Завантаження ----------------
    def read_vertices(self, points: Iterable[Pt]) -> int:
        """Зв'язати точки в кільце вершин; vnum: порядковий номер у вводі."""
        vnum = 0
        for p in points:
            if not in_safe_range(p):
                raise HullError(
                    ErrorKind.COORDINATE_OUT_OF_RANGE,
                    f"Vertex {vnum} ({p.x}, {p.y}, {p.z}): coordinate exceeds safe bound {SAFE}",
                )
            self.mesh.make_null_vertex(p, vnum)
            vnum += 1
        if vnum < 3:
            raise HullError(ErrorKind.TOO_FEW_POINTS, f"Need at least 3 points, got {vnum}")
        return vnum

    # ---------------- Стартова конфігурація ----------------
    def make_face(self, v0: int, v1: int, v2: int, fold: Optional[int] = None) -> int:
        """
        Грань (v0,v1,v2) у ccw-порядку. Без fold створюються три нові ребра;
        з fold: беруться ребра fold (грань-близнюк з оберненим порядком вершин).
        """
        m = self.mesh
        if fold is None:
            e0, e1, e2 = m.make_null_edge(), m.make_null_edge(), m.make_null_edge()
            for eid, (a, b) in ((e0, (v0, v1)), (e1, (v1, v2)), (e2, (v2, v0))):
                m.edges[eid].endpts = [a, b]
        else:
            # fold = (v2,v1,v0): його edge[1]=(v1,v0), edge[0]=(v2,v1), edge[2]=(v0,v2)
            fe = m.faces[fold].edge
            e0, e1, e2 = fe[1], fe[0], fe[2]

        fid = m.make_null_face()
        f = m.faces[fid]
        f.edge = [e0, e1, e2]
        f.vertex = [v0, v1, v2]

        slot = 0 if fold is None else 1
        for eid in (e0, e1, e2):
            m.edges[eid].adjface[slot] = fid
        return fid

    def double_triangle(self) -> None:
        """
        Подвійний трикутник: три неколінеарні вершини, дві грані з протилежним
        порядком вершин (плаский «двогранник»). Далі шукаємо вершину,
        некопланарну з першою гранню, і робимо її головою кільця, щоб вона
        вставилась першою.
        """
        m = self.mesh
        V = m.vertices
        head = V.head
        assert head is not None

        # 1) три неколінеарні вершини
        v0 = head
        found = None
        while found is None:
            v1 = V[v0].next
            v2 = V[v1].next
            while v2 != v0:
                if not collinear(V[v0].v, V[v1].v, V[v2].v):
                    found = (v1, v2)
                    break
                v2 = V[v2].next
            if found is None:
                v0 = V[v0].next
                if v0 == head:
                    raise HullError(ErrorKind.ALL_POINTS_COLLINEAR, "DoubleTriangle: all points are collinear")
        v1, v2 = found

        for vid in (v0, v1, v2):
            V[vid].mark = True

        # 2) дві грані-близнюки
        f0 = self.make_face(v0, v1, v2)
        self.make_face(v2, v1, v0, fold=f0)

        # 3) четверта, некопланарна вершина
        v3 = V[v2].next
        while self.volume_sign(f0, v3) == 0:
            v3 = V[v3].next
            if v3 == v2:
                raise HullError(ErrorKind.ALL_POINTS_COPLANAR, "DoubleTriangle: all points are coplanar")

        V.head = v3
        logger.debug(
            "DoubleTriangle: base %s, head repositioned at vertex %d",
            (V[v0].vnum, V[v1].vnum, V[v2].vnum), V[v3].vnum,
        )
        if logger.isEnabledFor(logging.DEBUG):
            for line in m.dump():
                logger.debug(line)

    # ---------------- Основний цикл ----------------
    def construct_hull(self) -> None:
        """Вставити всі ще не оброблені вершини по одній, у порядку кільця."""
        V = self.mesh.vertices
        for vid in V.ids():
            v = V[vid]
            if not v.alive or v.mark:
                continue
            self.insert(vid)
        V_, E_, F_ = self.counts()
        logger.info("Hull constructed: V=%d E=%d F=%d", V_, E_, F_)

    def insert(self, vid: int) -> bool:
        """Позначити вершину обробленою, додати її та прибрати. True: оболонка змінилась."""
        v = self.mesh.vertices[vid]
        if v.mark:
            raise ValueError(f"vertex {v.vnum} already processed")
        v.mark = True
        changed = self.add_one(vid)
        self.clean_up()
        logger.debug("Inserted vertex %d: hull %s", v.vnum, "changed" if changed else "unchanged")
        if self.check:
            run_checks(self, verbose=True)
        if logger.isEnabledFor(logging.DEBUG):
            for line in self.mesh.dump():
                logger.debug(line)
        return changed

    def add_one(self, p: int) -> bool:
        """
        Додати вершину p:
          1) позначити грані, видимі з p (volume_sign < 0);
             якщо таких немає: p всередині, onhull=False, нічого не змінюємо;
          2) ребро з двома видимими гранями: на видалення;
             ребро з однією видимою гранню (горизонт): нова конусна грань над ним.
        """
        m = self.mesh
        vis = 0
        for fid in m.faces.ids():
            if self.volume_sign(fid, p) < 0:
                m.faces[fid].visible = True
                vis += 1

        if not vis:
            m.vertices[p].onhull = False
            logger.debug("AddOne: vertex %d is inside the hull", m.vertices[p].vnum)
            return False

        logger.debug("AddOne: vertex %d sees %d faces", m.vertices[p].vnum, vis)
        for eid in m.edges.ids():
            e = m.edges[eid]
            a0, a1 = (m.faces[f].visible for f in e.adjface)
            if a0 and a1:
                e.delete = True
            elif a0 or a1:
                e.newface = self.make_cone_face(eid, p)
        return True

    def volume_sign(self, fid: int, vid: int) -> int:
        a, b, c = self.mesh.face_points(fid)
        return volume_sign(a, b, c, self.mesh.vertices[vid].v)

    def make_cone_face(self, eid: int, p: int) -> int:
        """
        Нова грань над ребром eid до точки p. Ребра від кінців eid до p
        не дублюються: якщо вже створені в цій вставці: беремо з vertex.duplicate.
        """
        m = self.mesh
        e = m.edges[eid]
        new_edge: List[int] = []
        for i in range(2):
            v = m.vertices[e.endpts[i]]
            d = v.duplicate
            if d is None:
                d = m.make_null_edge()
                m.edges[d].endpts = [e.endpts[i], p]
                v.duplicate = d
            new_edge.append(d)

        fid = m.make_null_face()
        m.faces[fid].edge = [eid, new_edge[0], new_edge[1]]
        self.make_ccw(fid, eid, p)

        # у кожного нового ребра рівно один вільний слот отримує цю грань
        for ne in new_edge:
            adj = m.edges[ne].adjface
            if adj[0] is None:
                adj[0] = fid
            elif adj[1] is None:
                adj[1] = fid
        return fid

    def make_ccw(self, fid: int, eid: int, p: int) -> None:
        """
        Впорядкувати вершини нової грані так само, як у видимій грані біля eid
        (ребро проходиться в тому ж напрямку); третя вершина: завжди p.
        """
        m = self.mesh
        f = m.faces[fid]
        e = m.edges[eid]
        fv = m.faces[e.adjface[0]] if m.faces[e.adjface[0]].visible else m.faces[e.adjface[1]]

        i = fv.vertex.index(e.endpts[0])
        if fv.vertex[(i + 1) % 3] != e.endpts[1]:
            f.vertex = [e.endpts[1], e.endpts[0], p]
        else:
            f.vertex = [e.endpts[0], e.endpts[1], p]
            # edge[1] побудоване на endpts[0], edge[2]: на endpts[1]; для (a,b,p) потрібно навпаки
            f.edge[1], f.edge[2] = f.edge[2], f.edge[1]

    # ---------------- Cleanup ----------------
    def clean_up(self) -> None:
        """Порядок важливий: ребра, грані, вершини."""
        self.clean_edges()
        self.clean_faces()
        self.clean_vertices()

    def clean_edges(self) -> None:
        m = self.mesh
        # нові грані стають на місце видимих
        for eid in m.edges.ids():
            e = m.edges[eid]
            if e.newface is not None:
                if m.faces[e.adjface[0]].visible:
                    e.adjface[0] = e.newface
                else:
                    e.adjface[1] = e.newface
                e.newface = None

        for eid in m.edges.ids():
            if m.edges[eid].delete:
                m.edges.delete(eid)

    def clean_faces(self) -> None:
        m = self.mesh
        for fid in m.faces.ids():
            if m.faces[fid].visible:
                m.faces.delete(fid)

    def clean_vertices(self) -> None:
        m = self.mesh
        V = m.vertices
        for e in m.edges:
            V[e.endpts[0]].onhull = True
            V[e.endpts[1]].onhull = True

        for vid in V.ids():
            v = V[vid]
            if v.mark and not v.onhull:
                V.delete(vid)

        for v in V:
            v.duplicate = None
            v.onhull = False

    # ---------------- Публічний API ----------------
    def counts(self) -> Tuple[int, int, int]:
        """(V, E, F): V: оброблені вершини, що лишились у кільці."""
        V = sum(1 for v in self.mesh.vertices if v.mark)
        return V, len(self.mesh.edges), len(self.mesh.faces)

    def faces(self) -> List[Tuple[int, int, int]]:
        """Живі грані як трійки vnum (ccw ззовні)."""
        return [self.mesh.vnums(fid) for fid in self.mesh.faces.ids()]

    def validate(self) -> dict:
        """
        Перевірка інваріантів: порожні списки = все ок.
        """
        V, E, F = self.counts()
        return {
            "vertices": V,
            "edges": E,
            "faces": F,
            "euler": check_euler(V, E, F),
            "bad_topology": topology(self),
            "bad_consistency": consistency(self),
            "bad_convexity": convexity(self),
        }

    def to_off(self) -> str:
        """Експорт оболонки у формат OFF (вершини у порядку vnum)."""
        m = self.mesh
        used = sorted({vid for fid in m.faces.ids() for vid in m.faces[fid].vertex},
                      key=lambda vid: m.vertices[vid].vnum)
        remap: Dict[int, int] = {old: new for new, old in enumerate(used)}
        lines = ["OFF", f"{len(used)} {len(m.faces)} 0"]
        for vid in used:
            p = m.vertices[vid].v
            lines.append(f"{p.x} {p.y} {p.z}")
        for f in m.faces:
            a, b, c = (remap[i] for i in f.vertex)
            lines.append(f"3 {a} {b} {c}")
        return "\n".join(lines)
