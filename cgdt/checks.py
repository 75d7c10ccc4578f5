"""
Перевірки інваріантів оболонки.

Порушення не фатальні: це ознака дефекту в коді, а не поганого вводу.
Вони логуються як WARNING і повертаються списками (порожній список = все ок).
"""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING, List, Tuple

from .predicates import volume_sign

if TYPE_CHECKING:
    from .hull import ConvexHull3D

logger = logging.getLogger(__name__)


def check_euler(V: int, E: int, F: int) -> List[str]:
    """V - E + F = 2, а для трикутних граней ще F = 2V - 4 та 2E = 3F."""
    bad: List[str] = []
    if V - E + F != 2:
        bad.append("Checks: V - E + F <> 2")
    if F != 2 * V - 4:
        bad.append(f"Checks: F={F} <> 2 * V - 4={2 * V - 4}; V={V}")
    if 2 * E != 3 * F:
        bad.append(f"Checks: 2E={2 * E} <> 3F={3 * F}; E={E}, F={F}")
    for line in bad:
        logger.warning(line)
    return bad


def euler_lines(V: int, E: int, F: int, verbose: bool = True) -> List[str]:
    """
    Рядки звіту. Порушення повертаються завжди, позитивні рядки лише при verbose.
    """
    bad = check_euler(V, E, F)
    if not verbose:
        return bad
    lines = [f"Checks: V, E, F = {V} {E} {F}:"]
    lines.append(next((b for b in bad if "V - E + F" in b), "V - E + F = 2"))
    lines.append(next((b for b in bad if "2 * V - 4" in b), "F = 2 * V - 4"))
    lines.append(next((b for b in bad if "3F=" in b), "2 * E = 3 * F"))
    return lines


def _directed(face_vertex: List[int], a: int, b: int) -> bool:
    """Чи проходить грань ребро у напрямку a -> b."""
    i = face_vertex.index(a)
    return face_vertex[(i + 1) % 3] == b


def consistency(hull: ConvexHull3D) -> List[int]:
    """
    Дві суміжні грані кожного ребра мають проходити його кінці
    у протилежному порядку (узгоджена орієнтація многовиду).
    Повертає id поганих ребер.
    """
    m = hull.mesh
    bad: List[int] = []
    for eid in m.edges.ids():
        e = m.edges[eid]
        a, b = e.endpts
        if None in e.adjface:
            bad.append(eid)
            continue
        f0, f1 = (m.faces[f] for f in e.adjface)
        if not ({a, b} <= set(f0.vertex) and {a, b} <= set(f1.vertex)):
            bad.append(eid)
            continue
        if _directed(f0.vertex, a, b) == _directed(f1.vertex, a, b):
            bad.append(eid)
    if bad:
        logger.warning("Checks: edges are NOT consistent: %s", bad)
    return bad


def convexity(hull: ConvexHull3D) -> List[Tuple[int, int]]:
    """
    Жодна вершина оболонки не лежить строго зовні жодної грані
    (volume_sign < 0: порушення). Повертає пари (face_id, vnum).
    """
    m = hull.mesh
    hull_pts = [(v.vnum, v.v) for v in m.vertices if v.mark]
    bad: List[Tuple[int, int]] = []
    for fid in m.faces.ids():
        a, b, c = m.face_points(fid)
        for vnum, p in hull_pts:
            if volume_sign(a, b, c, p) < 0:
                bad.append((fid, vnum))
    if bad:
        logger.warning("Checks: NOT convex: %d face/vertex pairs, first %s", len(bad), bad[0])
    return bad


def topology(hull: ConvexHull3D) -> List[Tuple[str, int, str]]:
    """
    Грань: 3 різні живі вершини, 3 різні живі ребра, edge[i] = (vertex[i], vertex[i+1]).
    Ребро: 2 різні живі суміжні грані, кожна містить обидва кінці.
    Повертає [(kind, id, reason), ...].
    """
    m = hull.mesh
    V, E, F = m.vertices, m.edges, m.faces
    bad: List[Tuple[str, int, str]] = []

    for fid in F.ids():
        f = F[fid]
        if len(set(f.vertex)) != 3:
            bad.append(("face", fid, "repeated_vertex"))
            continue
        if len(set(f.edge)) != 3:
            bad.append(("face", fid, "repeated_edge"))
            continue
        if not all(V[v].alive for v in f.vertex):
            bad.append(("face", fid, "dead_vertex"))
            continue
        if not all(E[e].alive for e in f.edge):
            bad.append(("face", fid, "dead_edge"))
            continue
        for i in range(3):
            ends = set(E[f.edge[i]].endpts)
            if ends != {f.vertex[i], f.vertex[(i + 1) % 3]}:
                bad.append(("face", fid, f"edge_{i}_mismatch"))
                break

    for eid in E.ids():
        e = E[eid]
        f0, f1 = e.adjface
        if f0 is None or f1 is None:
            bad.append(("edge", eid, "missing_face"))
            continue
        if f0 == f1:
            bad.append(("edge", eid, "same_face_twice"))
            continue
        if not (F[f0].alive and F[f1].alive):
            bad.append(("edge", eid, "dead_face"))
            continue
        for fid in (f0, f1):
            if eid not in F[fid].edge or not set(e.endpts) <= set(F[fid].vertex):
                bad.append(("edge", eid, f"not_in_face_{fid}"))
                break

    if bad:
        logger.warning("Checks: broken topology: %s", bad[:5])
    return bad


def run_checks(hull: ConvexHull3D, verbose: bool = False) -> List[str]:
    """Усі перевірки разом; повертає рядки звіту."""
    lines: List[str] = []
    lines.append("Checks: edges consistent." if not consistency(hull)
                 else "Checks: edges are NOT consistent.")
    conv = convexity(hull)
    if conv:
        lines.append("Checks: NOT convex.")
    elif verbose:
        lines.append("Checks: convex.")
    if topology(hull):
        lines.append("Checks: topology broken.")
    V, E, F = hull.counts()
    lines.extend(euler_lines(V, E, F, verbose))
    for line in lines:
        logger.debug(line)
    return lines
