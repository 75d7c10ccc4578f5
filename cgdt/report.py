from __future__ import annotations
from os import PathLike
from typing import TYPE_CHECKING, List, Union

from matplotlib.figure import Figure
from matplotlib.patches import Polygon

from .checks import euler_lines
from .predicates import normz

if TYPE_CHECKING:
    from .delaunay import DelaunayTri


def diagnostics(dt: DelaunayTri, verbose: bool = True) -> List[str]:
    """
    Текстовий журнал побудови: нижні грані, список усіх граней (vnum),
    кількість ребер і перевірка формули Ейлера.
    """
    m = dt.hull.mesh
    lines: List[str] = []

    for fid in m.faces.ids():
        if m.faces[fid].lower:
            a, b, c = m.vnums(fid)
            lines.append(f"z={normz(*m.face_points(fid))}; lower face indices: {a}, {b}, {c}")
    lines.append(f"A total of {dt.nlower} lower faces identified.")

    lines.append("List of all faces")
    lines.append("v0 v1 v2 (vertex indices)")
    for fid in m.faces.ids():
        a, b, c = m.vnums(fid)
        lines.append(f"{a} {b} {c}")

    V, E, F = dt.hull.counts()
    lines.append(f"Edges: E = {E}")
    lines.extend(euler_lines(V, E, F, verbose))
    return lines


def write_svg(path: Union[str, PathLike], dt: DelaunayTri,
              width: int = 800, height: int = 600) -> int:
    """
    SVG з нижніми гранями (по полігону на трикутник, вершини в порядку грані).
    Повертає кількість намальованих трикутників.
    """
    fig = Figure(figsize=(width / 100, height / 100), dpi=100)
    ax = fig.add_axes([0.05, 0.05, 0.9, 0.9])

    tris = dt.triangles()
    for tri in tris:
        xy = [dt.points[i] for i in tri]
        ax.add_patch(Polygon(xy, closed=True, fill=False, linewidth=0.6))

    # межі за всіма вершинами
    xs = [p[0] for p in dt.points]
    ys = [p[1] for p in dt.points]
    ax.plot(xs, ys, "o", markersize=2)
    pad_x = (max(xs) - min(xs)) * 0.02 or 1
    pad_y = (max(ys) - min(ys)) * 0.02 or 1
    ax.set_xlim(min(xs) - pad_x, max(xs) + pad_x)
    ax.set_ylim(min(ys) - pad_y, max(ys) + pad_y)
    ax.set_aspect("equal")
    ax.axis("off")

    fig.savefig(path, format="svg")
    return len(tris)
