import math

import pytest

from gamecore.matrix3 import Matrix3x3
from gamecore.quaternion import Quaternion
from gamecore.transform3 import Transform3
from gamecore.vector import Vector3

SAMPLES = [
    Vector3(1.0, 0.0, 0.0),
    Vector3(0.0, 2.0, 0.0),
    Vector3(-1.5, 0.5, 3.0),
]
IDENTITY3 = [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]


def test_default_is_identity():
    t = Transform3()
    assert list(t) == list(Transform3.identity())


def test_translation_round_trip_and_bottom_row():
    t = Transform3(Vector3(1.0, -2.0, 3.0))
    assert t.translation() == Vector3(1.0, -2.0, 3.0)
    assert (t.m41, t.m42, t.m43, t.m44) == (0.0, 0.0, 0.0, 1.0)


def test_rotation_matches_quaternion():
    q = Quaternion.from_axis_angle(Vector3(1.0, 2.0, 3.0), 0.7)
    t = Transform3(rotation=q)
    for v in SAMPLES:
        assert list(t.rotate_vector(v)) == pytest.approx(list(q.rotate(v)), abs=1e-9)


def test_rotation_about_axis_matches_quaternion():
    axis = Vector3(-0.3, 1.0, 0.4)
    t = Transform3().set_rotation_about_axis(axis, 1.1)
    q = Quaternion.from_axis_angle(axis, 1.1)
    for v in SAMPLES:
        assert list(t.rotate_vector(v)) == pytest.approx(list(q.rotate(v)), abs=1e-9)


def test_global_to_local_inverts_local_to_global():
    q = Quaternion.from_axis_angle(Vector3(0.0, 1.0, 1.0), -0.9)
    t = Transform3(Vector3(1.0, -2.0, 3.0), q)
    for v in SAMPLES:
        back = t.global_to_local(t.local_to_global(v))
        assert list(back) == pytest.approx([v.x, v.y, v.z], abs=1e-9)


def test_local_to_global_translates_origin():
    q = Quaternion.about_z(0.4)
    t = Transform3(Vector3(4.0, 5.0, 6.0), q)
    assert list(t.local_to_global(Vector3())) == pytest.approx([4.0, 5.0, 6.0], abs=1e-9)


def test_rotation_is_orthonormal():
    t = Transform3(rotation=Quaternion.from_euler_angles(0.3, 0.2, -0.5))
    r = t.rotation()
    assert list(r @ r.transposed()) == pytest.approx(IDENTITY3, abs=1e-9)
    assert r.determinant() == pytest.approx(1.0)


def test_orthogonal_axis_rows():
    t = Transform3().set_rotation_with_orthogonal_axis(
        Vector3.right(), Vector3.up(), Vector3.backward()
    )
    assert t.rotation() == Matrix3x3.identity()


def test_rotate_tensor_preserves_identity_and_trace():
    t = Transform3(rotation=Quaternion.about_y(0.8))
    rotated_identity = t.rotate_tensor(Matrix3x3.identity())
    assert list(rotated_identity) == pytest.approx(IDENTITY3, abs=1e-9)
    tensor = Matrix3x3()
    tensor.set_diagonal(1.0, 2.0, 3.0)
    rotated = t.rotate_tensor(tensor)
    assert rotated.m11 + rotated.m22 + rotated.m33 == pytest.approx(6.0)
    assert list(rotated) == pytest.approx(list(rotated.transposed()), abs=1e-9)


def test_perspective_equals_symmetric_frustum():
    fov, aspect, near, far = 1.0, 1.5, 0.1, 50.0
    top = near * math.tan(fov * 0.5)
    p = Transform3().set_perspective(fov, aspect, near, far)
    f = Transform3().set_frustum(-aspect * top, aspect * top, -top, top, near, far)
    assert list(p) == pytest.approx(list(f), abs=1e-9)
    assert p.m43 == -1.0
    assert p.m44 == 0.0


def test_frustum_maps_near_corner_to_near():
    left, right, bottom, top, near, far = -2.0, 3.0, -1.0, 4.0, 0.5, 10.0
    f = Transform3().set_frustum(left, right, bottom, top, near, far)
    projected = f.project_perspective(Vector3(right, top, -near))
    assert projected.x == pytest.approx(near)
    assert projected.y == pytest.approx(near)


def test_orthographic_box_maps_bounds_to_unit():
    t = Transform3().set_orthographic_box(-2.0, 3.0, -1.0, 4.0, 0.5, 10.0)
    low = t.project_orthographic(Vector3(-2.0, -1.0, 0.0))
    high = t.project_orthographic(Vector3(3.0, 4.0, 0.0))
    assert (low.x, low.y) == pytest.approx((-1.0, -1.0))
    assert (high.x, high.y) == pytest.approx((1.0, 1.0))


def test_orthographic_from_fov_matches_box():
    fov, aspect, near, far = 0.9, 2.0, 1.0, 20.0
    top = math.tan(fov * 0.5) * near
    a = Transform3().set_orthographic(fov, aspect, near, far)
    b = Transform3().set_orthographic_box(-aspect * top, aspect * top, -top, top, near, far)
    assert list(a) == pytest.approx(list(b), abs=1e-9)


def test_look_at_maps_eye_to_origin_and_center_ahead():
    eye = Vector3(1.0, 2.0, 5.0)
    center = Vector3(0.0, 0.0, 0.0)
    t = Transform3().set_look_at(eye, center, Vector3.up())
    assert list(t.local_to_global(eye)) == pytest.approx([0.0, 0.0, 0.0], abs=1e-9)
    mapped = t.local_to_global(center)
    assert mapped.x == pytest.approx(0.0, abs=1e-9)
    assert mapped.y == pytest.approx(0.0, abs=1e-9)
    assert mapped.z == pytest.approx(-(center - eye).magnitude())
    r = t.rotation()
    assert list(r @ r.transposed()) == pytest.approx(IDENTITY3, abs=1e-9)