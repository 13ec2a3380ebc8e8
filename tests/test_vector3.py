import math

import pytest

from lunarlander.vector3 import Vector3


def test_components_and_indexing():
    v = Vector3(1, 2, 3)
    assert (v[0], v[1], v[2]) == (1.0, 2.0, 3.0)
    assert tuple(v) == (v.x, v.y, v.z)


def test_index_out_of_range():
    with pytest.raises(IndexError):
        Vector3(1, 2, 3)[3]


def test_add_sub_round_trip():
    a = Vector3(1.5, -2.0, 4.0)
    b = Vector3(0.25, 3.0, -1.0)
    assert (a + b) - b == a


def test_negation_sums_to_zero():
    a = Vector3(1.5, -2.0, 4.0)
    assert a + (-a) == Vector3()


def test_scalar_mul_div_round_trip():
    a = Vector3(3.0, -6.0, 9.0)
    assert (a * 3.0) / 3.0 == a
    assert 2.0 * a == a * 2.0


def test_dot_with_self_is_length_squared():
    a = Vector3(3.0, 4.0, 12.0)
    assert a.dot(a) == pytest.approx(a.length() ** 2)
    assert a @ a == a.dot(a)


def test_normalized_has_unit_length():
    a = Vector3(2.0, -7.0, 1.0)
    n = a.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.cross(a).length() == pytest.approx(0.0, abs=1e-9)


def test_normalized_zero_vector_unchanged():
    assert Vector3().normalized() == Vector3()


def test_cross_unit_axes():
    assert Vector3(1, 0, 0).cross(Vector3(0, 1, 0)) == Vector3(0, 0, 1)


def test_cross_is_orthogonal_and_anticommutative():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0, abs=1e-9)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-9)
    assert b.cross(a) == -c


def test_componentwise_comparisons():
    low = Vector3(0, 0, 0)
    high = Vector3(1, 1, 1)
    assert low < high
    assert not (high < low)
    assert not (low < Vector3(1, 0, 1))
    assert low <= Vector3(1, 0, 1)


def test_length_matches_math_hypot():
    a = Vector3(1.0, 2.0, 2.0)
    assert a.length() == pytest.approx(math.hypot(1.0, 2.0, 2.0))