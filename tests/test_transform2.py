import math

import pytest

from gamecore.matrix3 import Matrix3x3
from gamecore.transform2 import Transform2
from gamecore.vector import Vector2


def test_default_is_identity():
    assert Transform2() == Matrix3x3.identity()


def test_translation_only():
    t = Transform2(Vector2(3.0, -2.0), 0.0)
    assert t.local_to_world(Vector2(1.0, 1.0)) == Vector2(4.0, -1.0)
    assert (t.m13, t.m23) == (3.0, -2.0)


def test_round_trip():
    t = Transform2(Vector2(1.5, 2.5), 0.8)
    v = Vector2(-3.0, 4.0)
    there_and_back = t.world_to_local(t.local_to_world(v))
    back_and_there = t.local_to_world(t.world_to_local(v))
    assert list(there_and_back) == pytest.approx([-3.0, 4.0], abs=1e-9)
    assert list(back_and_there) == pytest.approx([-3.0, 4.0], abs=1e-9)


def test_matmul_matches_local_to_world():
    t = Transform2(Vector2(0.5, 0.25), 1.1)
    v = Vector2(2.0, -1.0)
    assert t @ v == t.local_to_world(v)
    assert v @ t == t.local_to_world(v)


def test_rotation_quarter_turn():
    t = Transform2(Vector2(), math.pi / 2)
    rotated = t.local_to_world(Vector2.right())
    assert list(rotated) == pytest.approx([0.0, 1.0], abs=1e-9)


def test_rigid_transform_preserves_distance():
    t = Transform2(Vector2(7.0, -3.0), 2.3)
    a, b = Vector2(1.0, 2.0), Vector2(-4.0, 0.5)
    d = (t.local_to_world(a) - t.local_to_world(b)).magnitude()
    assert math.isclose(d, (a - b).magnitude())


def test_setters_return_self_and_keep_unit_determinant():
    t = Transform2()
    assert t.set_rotation(0.6) is t
    assert t.set_translation(Vector2(1.0, 2.0)) is t
    assert math.isclose(t.determinant(), 1.0)
    assert t.m33 == 1.0
    assert (t.m31, t.m32) == (0.0, 0.0)


def test_matrix_product_still_works():
    t = Transform2(Vector2(1.0, 1.0), 0.0)
    product = t @ Matrix3x3.identity()
    assert product == t