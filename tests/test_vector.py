import dataclasses

import pytest

from spheretrace.vector import BACK, DOWN, FORWARD, LEFT, ONE, RIGHT, UP, ZERO, Vec3

A = Vec3(1.5, -2.0, 3.0)
B = Vec3(0.25, 4.0, -1.0)


def test_add_then_sub_restores():
    assert (A + B) - B == A


def test_scalar_multiplication_both_sides():
    assert A * 2 == 2 * A
    assert A * 2 == A + A


def test_componentwise_multiplication_identities():
    assert A * ONE == A
    assert A * ZERO == ZERO


def test_division_inverts_multiplication():
    divisor = Vec3(2.0, 4.0, 0.5)
    assert (A * 4) / 4 == A
    assert (A * divisor) / divisor == A


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError) as excinfo:
        A / 0
    assert excinfo.type is ZeroDivisionError
    assert A == Vec3(1.5, -2.0, 3.0)


def test_negation():
    assert -A + A == ZERO
    assert -(-A) == A
    assert -RIGHT == LEFT
    assert -UP == DOWN
    assert -FORWARD == BACK


def test_abs_is_componentwise():
    assert abs(Vec3(-1.0, 2.0, -3.0)) == Vec3(1.0, 2.0, 3.0)


def test_iteration_yields_components():
    assert tuple(Vec3(1.0, 2.0, 3.0)) == (1.0, 2.0, 3.0)


def test_dot():
    assert A.dot(A) == A.length_squared()
    assert RIGHT.dot(UP) == 0.0


def test_cross():
    assert RIGHT.cross(UP) == FORWARD
    c = A.cross(B)
    assert c.dot(A) == pytest.approx(0.0, abs=1e-12)
    assert c.dot(B) == pytest.approx(0.0, abs=1e-12)
    assert B.cross(A) == -c


def test_length():
    assert Vec3(3.0, 4.0, 0.0).length() == 5.0


def test_normalized():
    assert A.normalized().length() == pytest.approx(1.0)
    assert ZERO.normalized() == ZERO


def test_distance():
    assert A.distance(B) == (A - B).length()
    assert A.distance_squared(B) == (A - B).length_squared()
    assert A.distance(A) == 0.0


def test_lerp_endpoints():
    assert A.lerp(B, 0.0) == A
    assert A.lerp(B, 1.0).is_close(B, 1e-12)


def test_is_close():
    near = Vec3(1.0, 1.0, 1.05)
    assert ONE.is_close(near, 0.1)
    assert not ONE.is_close(near, 0.01)


def test_is_zero():
    assert Vec3(1e-4, 0.0, 0.0).is_zero(1e-3)
    assert not ONE.is_zero(1e-3)


def test_minimum_maximum_invariants():
    lo = A.minimum(B)
    hi = A.maximum(B)
    for low, high, a, b in zip(lo, hi, A, B):
        assert low <= a and low <= b
        assert high >= a and high >= b
    assert lo + hi == A + B


def test_clamp():
    assert Vec3(-5.0, 0.5, 5.0).clamp(ZERO, ONE) == Vec3(0.0, 0.5, 1.0)


def test_reflect():
    assert Vec3(1.0, -1.0, 0.0).reflect(UP) == Vec3(1.0, 1.0, 0.0)
    assert A.reflect(UP).reflect(UP) == A


def test_project():
    assert A.project(ZERO) == ZERO
    assert Vec3(3.0, 4.0, 5.0).project(RIGHT) == Vec3(3.0, 0.0, 0.0)


def test_frozen():
    v = Vec3(1.0, 2.0, 3.0)
    with pytest.raises(dataclasses.FrozenInstanceError) as excinfo:
        v.x = 10.0
    assert excinfo.type is dataclasses.FrozenInstanceError
    assert v.x == 1.0
    assert v == Vec3(1.0, 2.0, 3.0)