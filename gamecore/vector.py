"""Two- and three-dimensional vectors of reals."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


def _parse_reals(text: str, count: int) -> list[float]:
    tokens = text.split()
    if len(tokens) < count:
        raise ValueError(f"expected {count} numbers, got {len(tokens)}")
    return [float(token) for token in tokens[:count]]


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, num: float) -> Vector2:
        return Vector2(self.x * num, self.y * num)

    def __rmul__(self, num: float) -> Vector2:
        return Vector2(num * self.x, num * self.y)

    def __truediv__(self, num: float) -> Vector2:
        return Vector2(self.x / num, self.y / num)

    def __str__(self) -> str:
        return f"{{{self.x:g}, {self.y:g}}}"

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        """The z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def magnitude(self) -> float:
        return math.sqrt(self.squared_magnitude())

    def squared_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    def inverse_magnitude(self) -> float:
        """1 / magnitude, or 0 for the zero vector."""
        squared = self.squared_magnitude()
        if squared == 0.0:
            return 0.0
        return 1.0 / math.sqrt(squared)

    def normalised(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        return self * self.inverse_magnitude()

    @classmethod
    def parse(cls, text: str) -> Vector2:
        """Read two whitespace-separated numbers."""
        return cls(*_parse_reals(text, 2))

    @classmethod
    def up(cls) -> Vector2:
        return cls(0.0, 1.0)

    @classmethod
    def right(cls) -> Vector2:
        return cls(1.0, 0.0)

    @classmethod
    def one(cls) -> Vector2:
        return cls(1.0, 1.0)

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, num: float) -> Vector3:
        return Vector3(self.x * num, self.y * num, self.z * num)

    def __rmul__(self, num: float) -> Vector3:
        return Vector3(num * self.x, num * self.y, num * self.z)

    def __truediv__(self, num: float) -> Vector3:
        return Vector3(self.x / num, self.y / num, self.z / num)

    def __str__(self) -> str:
        return f"{{{self.x:g}, {self.y:g}, {self.z:g}}}"

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        return math.sqrt(self.squared_magnitude())

    def squared_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def inverse_magnitude(self) -> float:
        """1 / magnitude, or 0 for the zero vector."""
        squared = self.squared_magnitude()
        if squared == 0.0:
            return 0.0
        return 1.0 / math.sqrt(squared)

    def normalised(self) -> Vector3:
        """Unit vector in the same direction; the zero vector stays zero."""
        return self * self.inverse_magnitude()

    @classmethod
    def parse(cls, text: str) -> Vector3:
        """Read three whitespace-separated numbers."""
        return cls(*_parse_reals(text, 3))

    @classmethod
    def axis_x(cls) -> Vector3:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def axis_y(cls) -> Vector3:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def axis_z(cls) -> Vector3:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def up(cls) -> Vector3:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def down(cls) -> Vector3:
        return cls(0.0, -1.0, 0.0)

    @classmethod
    def left(cls) -> Vector3:
        return cls(-1.0, 0.0, 0.0)

    @classmethod
    def right(cls) -> Vector3:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def forward(cls) -> Vector3:
        return cls(0.0, 0.0, -1.0)

    @classmethod
    def backward(cls) -> Vector3:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def one(cls) -> Vector3:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)