"""
Pytest configuration: puts the repository root on sys.path so `cgdt`
imports without installation, and provides shared point sets.
"""

import sys
from pathlib import Path

import pytest

repo_root = Path(__file__).resolve().parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from cgdt.geom import Pt  # noqa: E402


@pytest.fixture
def tetra_points():
    return [Pt(0, 0, 0), Pt(10, 0, 0), Pt(0, 10, 0), Pt(0, 0, 10)]


@pytest.fixture
def cube_points():
    corners = [Pt(x, y, z) for z in (0, 10) for y in (0, 10) for x in (0, 10)]
    # corners first, then two interior points
    return corners + [Pt(5, 5, 5), Pt(2, 3, 4)]


@pytest.fixture
def fan_points():
    return [(0, 0), (10, 0), (0, 10), (3, 3)]
