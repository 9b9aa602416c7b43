"""Rigid 2D transforms held as homogeneous 3x3 matrices."""

from __future__ import annotations

import math

from .matrix3 import Matrix3x3
from .vector import Vector2


class Transform2(Matrix3x3):
    """A rotation followed by a translation in the plane.

    ``transform @ vector`` and ``vector @ transform`` both map a local
    ``Vector2`` to world coordinates.
    """

    __slots__ = ()

    def __init__(self, translation: Vector2 | None = None, radians: float = 0.0) -> None:
        super().__init__()
        self.set_rotation(radians)
        self.set_translation(translation if translation is not None else Vector2())
        self.m31 = 0.0
        self.m32 = 0.0
        self.m33 = 1.0

    def __matmul__(self, other):
        if isinstance(other, Vector2):
            return self.local_to_world(other)
        return super().__matmul__(other)

    def __rmatmul__(self, other):
        if isinstance(other, Vector2):
            return self.local_to_world(other)
        return super().__rmatmul__(other)

    def world_to_local(self, vector: Vector2) -> Vector2:
        """Map a world point back into local coordinates (rigid transforms)."""
        m11, m12, m13 = self.m11, self.m12, self.m13
        m21, m22, m23 = self.m21, self.m22, self.m23
        return Vector2(
            m22 * vector.x - m12 * vector.y + m12 * m23 - m13 * m22,
            -m21 * vector.x + m11 * vector.y + m13 * m21 - m11 * m23,
        )

    def local_to_world(self, vector: Vector2) -> Vector2:
        return Vector2(
            self.m11 * vector.x + self.m12 * vector.y + self.m13,
            self.m21 * vector.x + self.m22 * vector.y + self.m23,
        )

    def set_rotation(self, radians: float) -> Transform2:
        self.m11 = math.cos(radians)
        self.m12 = -math.sin(radians)
        self.m21 = -self.m12
        self.m22 = self.m11
        return self

    def set_translation(self, translation: Vector2) -> Transform2:
        self.m13 = translation.x
        self.m23 = translation.y
        return self