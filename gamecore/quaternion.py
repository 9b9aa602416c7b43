"""Quaternions for 3D rotations, with axis-angle and Euler-angle views."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

from .vector import Vector3


@dataclass(frozen=True)
class AxisAngle:
    """A rotation given as an axis and an angle in radians."""

    axis: Vector3
    angle: float


@dataclass(frozen=True)
class EulerAngles:
    """A rotation given as yaw, pitch and roll in radians."""

    yaw: float
    pitch: float
    roll: float


@dataclass(frozen=True)
class Quaternion:
    """An immutable quaternion w + xi + yj + zk; the default is the identity.

    ``*`` multiplies by a quaternion or a scalar, or rotates a ``Vector3``.
    """

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.w
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"{{{self.w:g}, ({self.x:g}, {self.y:g}, {self.z:g})}}"

    # arithmetic

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.w + other.w, self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.w - other.w, self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Quaternion | Vector3 | float) -> Quaternion | Vector3:
        if isinstance(other, Quaternion):
            w, x, y, z = self
            return Quaternion(
                w * other.w - x * other.x - y * other.y - z * other.z,
                w * other.x + x * other.w + y * other.z - z * other.y,
                w * other.y - x * other.z + y * other.w + z * other.x,
                w * other.z + x * other.y - y * other.x + z * other.w,
            )
        if isinstance(other, Vector3):
            return self.rotate(other)
        if isinstance(other, Real):
            return Quaternion(self.w * other, self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: Vector3 | float) -> Quaternion | Vector3:
        if isinstance(other, Vector3):
            return self.rotate(other)
        if isinstance(other, Real):
            return Quaternion(self.w * other, self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, num: float) -> Quaternion:
        if not isinstance(num, Real):
            return NotImplemented
        return Quaternion(self.w / num, self.x / num, self.y / num, self.z / num)

    # manipulations

    def normalised(self) -> Quaternion:
        """Unit quaternion; a zero or already unit quaternion is returned as is."""
        n = self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z
        if n == 0.0 or n == 1.0:
            return self
        return self / math.sqrt(n)

    def conjugated(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def rotate(self, vector: Vector3) -> Vector3:
        """Rotate a vector by this quaternion: q v q*."""
        result = (self * Quaternion(0.0, vector.x, vector.y, vector.z)) * self.conjugated()
        return Vector3(result.x, result.y, result.z)

    # constructors

    @classmethod
    def from_axis_angle(cls, axis: Vector3, radians: float) -> Quaternion:
        half = 0.5 * radians
        s = math.sin(half)
        v = axis.normalised()
        return cls(math.cos(half), v.x * s, v.y * s, v.z * s)

    @classmethod
    def from_euler_angles(cls, yaw: float, pitch: float, roll: float) -> Quaternion:
        y, p, r = 0.5 * yaw, 0.5 * pitch, 0.5 * roll
        siny, sinp, sinr = math.sin(y), math.sin(p), math.sin(r)
        cosy, cosp, cosr = math.cos(y), math.cos(p), math.cos(r)
        return cls(
            cosy * cosp * cosr + siny * sinp * sinr,
            cosy * sinp * cosr + siny * cosp * sinr,
            siny * cosp * cosr - cosy * sinp * sinr,
            cosy * cosp * sinr - siny * sinp * cosr,
        )

    @classmethod
    def _between(cls, source: Vector3, target: Vector3) -> Quaternion:
        f = source.normalised()
        t = target.normalised()
        n = t.cross(f)
        w = 0.5 * t.dot(f)
        s = math.sin(math.acos(w))
        return cls(w, n.x * s, n.y * s, n.z * s)

    @classmethod
    def from_orientation(cls, orientation: Vector3) -> Quaternion:
        """Rotation relating the forward direction to the given orientation."""
        return cls._between(Vector3.forward(), orientation)

    @classmethod
    def from_to(cls, source: Vector3, target: Vector3) -> Quaternion:
        """Rotation relating one orientation to another."""
        return cls._between(source, target)

    @classmethod
    def about_x(cls, radians: float) -> Quaternion:
        half = 0.5 * radians
        return cls(math.cos(half), math.sin(half), 0.0, 0.0)

    @classmethod
    def about_y(cls, radians: float) -> Quaternion:
        half = 0.5 * radians
        return cls(math.cos(half), 0.0, math.sin(half), 0.0)

    @classmethod
    def about_z(cls, radians: float) -> Quaternion:
        half = 0.5 * radians
        return cls(math.cos(half), 0.0, 0.0, math.sin(half))

    # views

    def orientation(self) -> Vector3:
        """The forward direction rotated by this quaternion."""
        return self.rotate(Vector3.forward())

    def axis_angle(self) -> AxisAngle:
        return AxisAngle(Vector3(self.x, self.y, self.z), math.acos(self.w) * 2.0)

    def euler_angles(self) -> EulerAngles:
        w, x, y, z = self
        return EulerAngles(
            yaw=math.atan2(2.0 * (w * x + y * z), 1.0 - 2.0 * (z * z + x * x)),
            pitch=math.asin(2.0 * (w * z - y * x)),
            roll=math.atan2(2.0 * (w * y + z * x), 1.0 - 2.0 * (y * y + z * z)),
        )

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def zero(cls) -> Quaternion:
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def parse(cls, text: str) -> Quaternion:
        """Read w, x, y, z as whitespace-separated numbers and normalise."""
        tokens = text.split()
        if len(tokens) < 4:
            raise ValueError(f"expected 4 numbers, got {len(tokens)}")
        return cls(*(float(token) for token in tokens[:4])).normalised()