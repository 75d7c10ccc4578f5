from __future__ import annotations
from os import PathLike
from typing import Iterable, List, Tuple, Union


def parse_points(lines: Iterable[str]) -> List[Tuple[int, int]]:
    """
    Точки з рядків формату "x<TAB>y" (цілі числа), кількість наперед не задається.
    Порожні рядки пропускаємо.
    """
    points: List[Tuple[int, int]] = []
    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        parts = line.split("\t")
        if len(parts) != 2:
            raise ValueError(f"Line {lineno}: expected 'x<TAB>y', got {line!r}")
        try:
            x, y = int(parts[0]), int(parts[1])
        except ValueError:
            raise ValueError(f"Line {lineno}: cannot parse integers from {line!r}") from None
        points.append((x, y))
    return points


def read_points(path: Union[str, PathLike]) -> List[Tuple[int, int]]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_points(f)
