"""
cgdt: інкрементальна 3D опукла оболонка на цілих координатах
і тріангуляція Делоне на площині через підйом на параболоїд.
"""

__version__ = "0.1.0"

from cgdt.geom import Pt, SAFE, lift
from cgdt.errors import ErrorKind, HullError
from cgdt.predicates import volume_sign, collinear, normz
from cgdt.hull import ConvexHull3D
from cgdt.delaunay import DelaunayTri, lower_faces
from cgdt.pipeline import BuildResult, build, triangulate

__all__ = [
    "Pt", "SAFE", "lift",
    "ErrorKind", "HullError",
    "volume_sign", "collinear", "normz",
    "ConvexHull3D", "DelaunayTri", "lower_faces",
    "BuildResult", "build", "triangulate", "__version__",
]
