from __future__ import annotations
from dataclasses import dataclass

SAFE = 1_000_000  # межа безпечних координат для volume_sign у float


@dataclass(frozen=True)
class Pt:
    x: int
    y: int
    z: int
    def __iter__(self):
        yield self.x; yield self.y; yield self.z

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y, a.z - b.z)

def dot(a: Pt, b: Pt) -> int:
    return a.x*b.x + a.y*b.y + a.z*b.z

def cross(a: Pt, b: Pt) -> Pt:
    return Pt(a.y*b.z - a.z*b.y,
              a.z*b.x - a.x*b.z,
              a.x*b.y - a.y*b.x)

def lift(x: int, y: int) -> Pt:
    """Підйом на параболоїд: (x, y) -> (x, y, x² + y²)."""
    return Pt(x, y, x*x + y*y)

def in_safe_range(p: Pt, bound: int = SAFE) -> bool:
    return abs(p.x) <= bound and abs(p.y) <= bound and abs(p.z) <= bound
