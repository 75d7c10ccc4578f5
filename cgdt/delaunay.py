"""
Тріангуляція Делоне на площині через підйом на параболоїд z = x² + y².

Проєкції нижніх граней опуклої оболонки піднятих точок на площину xy
і є тріангуляцією Делоне вихідних точок.
"""
from __future__ import annotations
import logging
from typing import Iterable, List, Sequence, Tuple

from .errors import ErrorKind, HullError
from .geom import Pt, SAFE, in_safe_range, lift
from .hull import ConvexHull3D
from .predicates import collinear2d, normz

logger = logging.getLogger(__name__)


def lift_points(points: Iterable[Tuple[int, int]]) -> List[Pt]:
    """
    (x, y) -> (x, y, x² + y²) з перевіркою меж SAFE (захищає float-предикат)
    і мінімальної кількості точок.
    """
    out: List[Pt] = []
    for vnum, (x, y) in enumerate(points):
        p = lift(int(x), int(y))
        if not in_safe_range(p):
            raise HullError(
                ErrorKind.COORDINATE_OUT_OF_RANGE,
                f"Vertex {vnum} ({p.x}, {p.y}): coordinate exceeds safe bound {SAFE} (z={p.z})",
            )
        out.append(p)
    if len(out) < 3:
        raise HullError(ErrorKind.TOO_FEW_POINTS, f"Need at least 3 points, got {len(out)}")
    return out


def _all_collinear2d(pts: Sequence[Pt]) -> bool:
    a = pts[0]
    b = next((p for p in pts if (p.x, p.y) != (a.x, a.y)), None)
    if b is None:
        return True
    return all(collinear2d(a, b, c) for c in pts)


def lower_faces(hull: ConvexHull3D) -> int:
    """
    Позначити нижні грані: z-компонента нормалі < 0.
    Повертає кількість нижніх граней.
    """
    m = hull.mesh
    flower = 0
    for fid in m.faces.ids():
        f = m.faces[fid]
        z = normz(*m.face_points(fid))
        f.lower = z < 0
        if f.lower:
            flower += 1
            logger.debug("z=%d; lower face indices: %d, %d, %d", z, *m.vnums(fid))
    logger.info("A total of %d lower faces identified.", flower)
    return flower


class DelaunayTri:
    """
    Делоне для цілих точок (x, y): підйом, 3D оболонка, нижні грані.

    self.points: вхідні (x, y) у порядку вводу (індекс = vnum),
    self.hull  : повна опукла оболонка піднятих точок (lower уже виставлено),
    triangles(): нижні грані як трійки vnum у порядку вершин грані.
    """

    def __init__(self, points: Iterable[Tuple[int, int]], check: bool = False):
        self.points: List[Tuple[int, int]] = [(int(x), int(y)) for x, y in points]
        lifted = lift_points(self.points)
        if _all_collinear2d(lifted):
            raise HullError(ErrorKind.ALL_POINTS_COLLINEAR, "All points are collinear")
        self.hull = ConvexHull3D(lifted, check=check)
        self.nlower = lower_faces(self.hull)

    def triangles(self) -> List[Tuple[int, int, int]]:
        m = self.hull.mesh
        return [m.vnums(fid) for fid in m.faces.ids() if m.faces[fid].lower]
