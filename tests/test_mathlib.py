import math

import pytest

from gamecore.mathlib import (
    deg,
    frac,
    hexant,
    is_prime,
    limit,
    mod,
    quadrant,
    rad,
    sign,
    triant,
)


def test_rad_of_180_is_pi():
    assert rad(180) == pytest.approx(math.pi)


@pytest.mark.parametrize("value", [-720.0, -45.0, 0.0, 12.5, 360.0])
def test_deg_rad_round_trip(value):
    assert deg(rad(value)) == pytest.approx(value)


@pytest.mark.parametrize("func", [triant, quadrant, hexant])
def test_origin_is_sector_zero(func):
    assert func(0.0, 0.0) == 0


def test_triant_sectors():
    assert triant(math.cos(rad(120)), math.sin(rad(120))) == 1
    assert triant(1.0, 0.0) == 2
    assert triant(math.cos(rad(-120)), math.sin(rad(-120))) == 3


@pytest.mark.parametrize(
    "point", [(1.0, 0.0), (2.0, 3.0), (0.0, 5.0), (-1.0, -1.0), (0.5, -4.0)]
)
def test_quadrant_rotation_advances(point):
    x, y = point
    assert quadrant(-y, x) == quadrant(x, y) % 4 + 1


def test_quadrant_first():
    assert quadrant(1.0, 1.0) == 1


def test_quadrant_nan_raises():
    with pytest.raises(ValueError):
        quadrant(math.nan, math.nan)


@pytest.mark.parametrize("angle", [30.0, 90.0, 150.0, -30.0, -90.0])
def test_hexant_rotation_by_60_moves_one_sector(angle):
    x, y = math.cos(rad(angle)), math.sin(rad(angle))
    nx, ny = math.cos(rad(angle + 60)), math.sin(rad(angle + 60))
    current = hexant(x, y)
    following = hexant(nx, ny)
    assert following == (current - 2) % 6 + 1


def test_hexant_values_cover_all_sectors():
    seen = {hexant(math.cos(rad(a)), math.sin(rad(a))) for a in range(-150, 180, 60)}
    assert seen == {1, 2, 3, 4, 5, 6}


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 97])
def test_primes(n):
    assert is_prime(n) is True


@pytest.mark.parametrize("n", [0, 1, 4, 9, 15, 25, 49, 100])
def test_non_primes(n):
    assert is_prime(n) is False


@pytest.mark.parametrize("a,b", [(7.0, 3.0), (2.5, 1.0), (0.0, 4.0), (10.0, 5.0)])
def test_mod_non_negative_matches_fmod(a, b):
    assert mod(a, b) == pytest.approx(math.fmod(a, b))


@pytest.mark.parametrize("a,b", [(-1.0, 3.0), (-4.0, 3.0), (-0.25, 1.0)])
def test_mod_negative_is_floor_remainder(a, b):
    assert mod(a, b) == pytest.approx(a % b)


def test_mod_negative_exact_multiple_gives_divisor():
    assert mod(-3.0, 3.0) == pytest.approx(3.0)


def test_sign():
    assert sign(0) == 1
    assert sign(2.5) == 1
    assert sign(-0.1) == -1


def test_frac_keeps_sign():
    assert frac(2.5) == pytest.approx(0.5)
    assert frac(-2.5) == pytest.approx(-0.5)


def test_limit():
    assert limit(5, 0, 10) == 5
    assert limit(-1, 0, 10) == 0
    assert limit(11, 0, 10) == 10