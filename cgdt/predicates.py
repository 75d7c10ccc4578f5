# cgdt/predicates.py
from __future__ import annotations
from .geom import Pt, sub, cross, dot

def orient3d(a: Pt, b: Pt, c: Pt, d: Pt) -> int:
    ab = sub(b, a)
    ac = sub(c, a)
    ad = sub(d, a)
    return dot(cross(ab, ac), ad)

def volume_exact(a: Pt, b: Pt, c: Pt, d: Pt) -> int:
    """
    Точний (цілий) об'єм тетраедра (a,b,c,d) у конвенції оболонки:
    від'ємний, якщо d лежить із зовнішнього боку грані (a,b,c),
    тобто з того боку, куди дивиться ccw-нормаль (правило правої руки).
    """
    return -orient3d(a, b, c, d)

def volumed(a: Pt, b: Pt, c: Pt, d: Pt) -> float:
    """Той самий об'єм, але у float (форма з меншою кількістю множень)."""
    bxdx = float(b.x - d.x)
    bydy = float(b.y - d.y)
    bzdz = float(b.z - d.z)
    cxdx = float(c.x - d.x)
    cydy = float(c.y - d.y)
    czdz = float(c.z - d.z)
    return ((a.z - d.z) * (bxdx*cydy - bydy*cxdx)
            + (a.y - d.y) * (bzdz*cxdx - bxdx*czdz)
            + (a.x - d.x) * (bydy*czdz - bzdz*cydy))

def volume_sign(a: Pt, b: Pt, c: Pt, d: Pt) -> int:
    """
    Знак об'єму: -1: d зовні грані (грань видима з d), +1: всередині,
    0: d копланарна з гранню. Для цілих координат об'єм цілий,
    тому float округлюємо через поріг 0.5.
    """
    vol = volumed(a, b, c, d)
    if vol > 0.5:
        return 1
    if vol < -0.5:
        return -1
    return 0

def collinear(a: Pt, b: Pt, c: Pt) -> bool:
    """Точно: усі компоненти (b-a) x (c-a) нульові."""
    n = cross(sub(b, a), sub(c, a))
    return n.x == 0 and n.y == 0 and n.z == 0

def collinear2d(a: Pt, b: Pt, c: Pt) -> bool:
    """Колінеарність проєкцій на площину xy (z ігноруємо)."""
    return (b.x - a.x)*(c.y - a.y) - (b.y - a.y)*(c.x - a.x) == 0

def normz(a: Pt, b: Pt, c: Pt) -> int:
    """Знак z-компоненти нормалі трикутника (a,b,c), спроєктованого на xy."""
    z = (b.x - a.x)*(c.y - a.y) - (b.y - a.y)*(c.x - a.x)
    if z > 0:
        return 1
    if z < 0:
        return -1
    return 0
