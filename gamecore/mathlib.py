"""Scalar helpers: angle conversion, sector lookup, remainders, limits and primes."""

from __future__ import annotations

import math

PI = math.pi
TWO_PI = 2.0 * math.pi
HALF_PI = 0.5 * math.pi
PI_DIV_180 = math.pi / 180.0
DIV_180_PI = 180.0 / math.pi

RAD60 = math.pi / 3.0
RAD120 = 2.0 * math.pi / 3.0
RAD180 = math.pi

FLOAT_EPS = 1.1929093e-7
DOUBLE_EPS = 2.220446049250313e-16


def rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * PI_DIV_180


def deg(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * DIV_180_PI


def triant(x: float, y: float) -> int:
    """Return which of three 120-degree sectors holds (x, y); 0 at the origin."""
    if x == 0.0 and y == 0.0:
        return 0
    alpha = math.atan2(y, x)
    if RAD60 < alpha <= RAD180:
        return 1
    if -RAD60 < alpha <= RAD60:
        return 2
    if -RAD180 < alpha <= -RAD60:
        return 3
    return 1


def quadrant(x: float, y: float) -> int:
    """Return the quadrant (1 to 4) holding (x, y); 0 at the origin."""
    if x == 0.0 and y == 0.0:
        return 0
    if x > 0 and y >= 0:
        return 1
    if x <= 0 and y > 0:
        return 2
    if x < 0 and y <= 0:
        return 3
    if x >= 0 and y < 0:
        return 4
    raise ValueError(f"no quadrant for ({x}, {y})")


def hexant(x: float, y: float) -> int:
    """Return which of six 60-degree sectors holds (x, y); 0 at the origin."""
    if x == 0.0 and y == 0.0:
        return 0
    alpha = math.atan2(y, x)
    if RAD120 < alpha <= RAD180:
        return 1
    if RAD60 < alpha <= RAD120:
        return 2
    if 0.0 < alpha <= RAD60:
        return 3
    if -RAD60 < alpha <= 0.0:
        return 4
    if -RAD120 < alpha <= -RAD60:
        return 5
    if -RAD180 < alpha <= -RAD120:
        return 6
    return 1


def is_prime(n: int) -> bool:
    """Trial-division primality check, odd divisors up to the square root."""
    if (n % 2 == 0 and n != 2) or n == 1:
        return False
    bound = math.isqrt(n) if n > 0 else 0
    return not any(n % i == 0 for i in range(3, bound + 1, 2))


def mod(a: float, b: float) -> float:
    """Remainder of a by b that is non-negative for negative a.

    For exact negative multiples of b the result is b rather than 0.
    """
    if a >= 0:
        return a - int(a / b) * b
    return (1 - int(a / b)) * b + a


def sign(a: float) -> int:
    """Return 1 for non-negative values and -1 otherwise (NaN included)."""
    non_negative = a >= 0
    if non_negative:
        return 1
    return -1


def frac(a: float) -> float:
    """Fractional part of a, keeping its sign."""
    return a - int(a)


def limit(n: float, lower: float, upper: float) -> float:
    """Clamp n to the range [lower, upper]; lower wins if the bounds cross."""
    capped = upper if n > upper else n
    return lower if capped < lower else capped