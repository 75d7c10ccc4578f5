"""Geometric predicates: sign conventions and exactness."""

import random

from cgdt.geom import Pt, lift
from cgdt.predicates import (
    collinear, collinear2d, normz, orient3d, volume_exact, volume_sign, volumed,
)

A, B, C = Pt(0, 0, 0), Pt(1, 0, 0), Pt(0, 1, 0)  # ccw seen from +z


def test_volume_sign_outside_is_negative():
    assert volume_sign(A, B, C, Pt(0, 0, 1)) == -1


def test_volume_sign_inside_is_positive():
    assert volume_sign(A, B, C, Pt(0, 0, -1)) == 1


def test_volume_sign_coplanar_is_zero():
    assert volume_sign(A, B, C, Pt(5, 5, 0)) == 0
    assert volume_sign(A, B, C, Pt(-7, 3, 0)) == 0


def test_volume_exact_is_negated_orient3d():
    d = Pt(2, 3, 5)
    assert volume_exact(A, B, C, d) == -orient3d(A, B, C, d) == -5


def test_float_volume_matches_exact_for_lifted_points():
    rng = random.Random(11)
    for _ in range(300):
        a, b, c, d = (lift(rng.randint(-700, 700), rng.randint(-700, 700)) for _ in range(4))
        exact = volume_exact(a, b, c, d)
        assert volumed(a, b, c, d) == exact
        assert volume_sign(a, b, c, d) == (exact > 0) - (exact < 0)


def test_collinear_exact():
    assert collinear(Pt(0, 0, 0), Pt(1, 1, 1), Pt(2, 2, 2))
    assert collinear(Pt(3, 4, 5), Pt(3, 4, 5), Pt(9, 1, 0))  # duplicate
    assert not collinear(A, B, C)


def test_lifted_collinear_points_are_not_collinear_in_3d():
    a, b, c = lift(0, 0), lift(1, 1), lift(2, 2)
    assert collinear2d(a, b, c)
    assert not collinear(a, b, c)


def test_normz_sign():
    assert normz(A, B, C) == 1
    assert normz(A, C, B) == -1
    assert normz(Pt(0, 0, 0), Pt(1, 1, 7), Pt(2, 2, 3)) == 0
