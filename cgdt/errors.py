from __future__ import annotations
from enum import Enum


class ErrorKind(Enum):
    """Фатальні умови побудови (часткового результату немає)."""
    TOO_FEW_POINTS = "too few points"
    ALL_POINTS_COLLINEAR = "all points collinear"
    ALL_POINTS_COPLANAR = "all points coplanar"
    COORDINATE_OUT_OF_RANGE = "coordinate exceeds safe bound"


class HullError(ValueError):
    def __init__(self, kind: ErrorKind, message: str = ""):
        self.kind = kind
        super().__init__(message or kind.value)
