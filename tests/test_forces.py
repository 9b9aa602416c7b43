import pytest

from gamecore.forces import (
    Body,
    ForceGenerator,
    GlobalForceGenerator,
    Gravity,
    ParticleSpring,
    Spring,
)
from gamecore.vector import Vector3


def components(vector):
    return (vector.x, vector.y, vector.z)


def test_default_gravity_points_down():
    assert components(Gravity().gravity) == pytest.approx((0.0, -9.81, 0.0))


def test_gravity_force_gives_its_acceleration():
    body = Body(inverse_mass=0.25)
    gravity = Gravity(Vector3(1.0, -2.0, 3.0))
    gravity.apply_force(body)
    acceleration = body.force * body.inverse_mass
    assert components(acceleration) == pytest.approx((1.0, -2.0, 3.0))


def test_gravity_accumulates_over_calls():
    body = Body(inverse_mass=1.0)
    gravity = Gravity(Vector3(0.0, -1.0, 0.0))
    gravity.apply_force(body)
    gravity.apply_force(body)
    assert components(body.force) == pytest.approx((0.0, -2.0, 0.0))


def test_gravity_leaves_infinite_mass_alone():
    body = Body(inverse_mass=0.0)
    Gravity().apply_force(body)
    assert components(body.force) == pytest.approx((0.0, 0.0, 0.0))


def test_clear_forces_resets_accumulator():
    body = Body()
    body.apply_force_at_center(Vector3(1.0, 2.0, 3.0))
    body.clear_forces()
    assert components(body.force) == pytest.approx((0.0, 0.0, 0.0))


def test_abstract_bases_cannot_be_built():
    with pytest.raises(TypeError):
        Spring()
    with pytest.raises(TypeError):
        ForceGenerator()
    with pytest.raises(TypeError):
        GlobalForceGenerator()


def make_spring(rest_length=0.0, stiffness=1.0, damping=1.0, p1=(0, 0, 0), p2=(3, 4, 0), v1=(0, 0, 0), v2=(0, 0, 0)):
    first = Body(position=Vector3(*p1), linear_velocity=Vector3(*v1))
    second = Body(position=Vector3(*p2), linear_velocity=Vector3(*v2))
    return ParticleSpring(rest_length, stiffness, damping, first, second), first, second


def test_spring_defaults_from_source():
    spring, _, _ = make_spring()
    assert spring.rest_length == 0.0
    assert spring.stiffness == 1.0
    assert spring.damping == 1.0


def test_negative_rest_length_is_clamped():
    spring, _, _ = make_spring(rest_length=-2.0)
    assert spring.rest_length == 0.0
    spring.rest_length = -1.0
    assert spring.rest_length == 0.0
    spring.rest_length = 2.5
    assert spring.rest_length == 2.5


def test_current_length():
    spring, _, _ = make_spring()
    assert spring.current_length() == pytest.approx(5.0)


def test_spring_at_rest_length_applies_no_force():
    spring, first, second = make_spring(rest_length=5.0)
    spring.apply_force()
    assert components(first.force) == pytest.approx((0.0, 0.0, 0.0))
    assert components(second.force) == pytest.approx((0.0, 0.0, 0.0))


def test_stretched_spring_pulls_anchors_together():
    spring, first, second = make_spring(rest_length=1.0, stiffness=2.0, damping=0.0)
    spring.apply_force()
    offset = second.position - first.position
    assert first.force.dot(offset) > 0
    assert second.force.dot(offset) < 0
    assert first.force.magnitude() == pytest.approx(8.0)


def test_spring_forces_are_equal_and_opposite():
    spring, first, second = make_spring(rest_length=2.0, stiffness=3.0, damping=0.5, v2=(1, -1, 2))
    spring.apply_force()
    total = first.force + second.force
    assert components(total) == pytest.approx((0.0, 0.0, 0.0))


def test_compressed_spring_pushes_anchors_apart():
    spring, first, second = make_spring(rest_length=10.0, damping=0.0)
    spring.apply_force()
    offset = second.position - first.position
    assert second.force.dot(offset) > 0


def test_damping_opposes_separation():
    spring, first, second = make_spring(rest_length=5.0, stiffness=1.0, damping=1.0, v2=(3, 4, 0))
    spring.apply_force()
    relative_velocity = second.linear_velocity - first.linear_velocity
    assert second.force.dot(relative_velocity) < 0
    assert first.force.dot(relative_velocity) > 0


def test_coincident_anchors_get_no_force():
    spring, first, second = make_spring(rest_length=1.0, p2=(0, 0, 0))
    spring.apply_force()
    assert spring.current_length() == 0.0
    assert components(first.force) == pytest.approx((0.0, 0.0, 0.0))
    assert components(second.force) == pytest.approx((0.0, 0.0, 0.0))