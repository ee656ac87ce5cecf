import math

import pytest

from verletsim.vmath import add, magnitude, minus


@pytest.mark.parametrize("x", [0.0, 2.5, -7.0, 1e6])
def test_magnitude_of_axis_vector_is_abs(x):
    assert magnitude((x, 0.0)) == pytest.approx(abs(x))
    assert magnitude((0.0, x)) == pytest.approx(abs(x))


def test_magnitude_matches_pythagoras_triple():
    assert magnitude((3.0, 4.0)) == pytest.approx(5.0)


def test_add_then_minus_round_trips():
    a = (1.25, -3.5)
    b = (10.0, 0.75)
    assert minus(add(a, b), b) == pytest.approx(a)


def test_minus_of_self_is_zero():
    v = (math.pi, -math.e)
    assert minus(v, v) == (0.0, 0.0)


def test_add_is_commutative():
    a = (2.0, 9.0)
    b = (-4.0, 0.5)
    assert add(a, b) == add(b, a)