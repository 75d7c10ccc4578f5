from __future__ import annotations
import logging
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, List, Optional, Tuple, Union

from .delaunay import DelaunayTri
from .errors import ErrorKind, HullError
from .fileio import parse_points, read_points
from .report import diagnostics, write_svg

logger = logging.getLogger(__name__)

Tri = Tuple[int, int, int]


@dataclass
class BuildResult:
    """
    Результат build(): або тріангуляція з журналом, або вид помилки.
    triangles: нижні грані як трійки індексів у points (порядок вводу).
    """
    points: List[Tuple[int, int]] = field(default_factory=list)
    triangles: List[Tri] = field(default_factory=list)
    log: List[str] = field(default_factory=list)
    error: Optional[ErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


def build(
    source: Union[str, PathLike, Iterable[str]],
    check: bool = False,
    svg_path: Union[str, PathLike, None] = None,
) -> BuildResult:
    """
    Повний пайплайн:
      - читає точки "x<TAB>y" (шлях до файлу або ітерабельне рядків);
      - піднімає їх на параболоїд і будує 3D оболонку;
      - виділяє нижні грані (тріангуляція Делоне);
      - за потреби пише SVG.

    Фатальні умови не піднімаються, а повертаються в BuildResult.error.
    """
    if isinstance(source, (str, PathLike)):
        points = read_points(source)
    else:
        points = parse_points(source)

    try:
        dt = DelaunayTri(points, check=check)
    except HullError as e:
        logger.error("Build failed: %s", e)
        return BuildResult(points=points, error=e.kind, message=str(e))

    result = BuildResult(points=dt.points, triangles=dt.triangles(), log=diagnostics(dt))
    if svg_path is not None:
        write_svg(svg_path, dt)
    logger.info("Build finished: %d points, %d triangles", len(dt.points), len(result.triangles))
    return result


def triangulate(
    points: Iterable[Tuple[int, int]],
    backend: str = "internal",
    check: bool = False,
) -> Tuple[List[Tuple[int, int]], List[Tri]]:
    """
    Делоне для цілих точок (x, y).

    backend="internal": наша оболонка піднятих точок (HullError при виродженнях);
    backend="scipy"   : scipy.spatial.Delaunay (для порівняння).

    Повертає:
      pts      : список точок у порядку вводу;
      triangles: трикутники (індекси у pts).
    """
    pts = [(int(x), int(y)) for x, y in points]

    if backend.lower() == "internal":
        dt = DelaunayTri(pts, check=check)
        return dt.points, dt.triangles()

    if backend.lower() == "scipy":
        try:
            import numpy as np
            from scipy.spatial import Delaunay
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy' requires SciPy; install scipy or use backend='internal'"
            ) from e

        arr = np.array(pts, dtype=float)
        dela = Delaunay(arr)
        triangles = [tuple(int(i) for i in simplex) for simplex in dela.simplices]
        return pts, triangles

    raise ValueError(f"Unknown backend: {backend}")
