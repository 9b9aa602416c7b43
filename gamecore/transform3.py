"""Rigid 3D transforms and projection matrices held as 4x4 matrices."""

from __future__ import annotations

import math

from .matrix3 import Matrix3x3
from .matrix4 import Matrix4x4
from .quaternion import Quaternion
from .vector import Vector3


class Transform3(Matrix4x4):
    """A rotation and a translation in space, or a projection.

    With no arguments it starts as the identity.
    """

    __slots__ = ()

    def __init__(
        self,
        translation: Vector3 | None = None,
        rotation: Quaternion | None = None,
    ) -> None:
        super().__init__()
        self.set_rotation(rotation if rotation is not None else Quaternion.identity())
        self.set_translation(translation if translation is not None else Vector3())
        self.m41 = 0.0
        self.m42 = 0.0
        self.m43 = 0.0
        self.m44 = 1.0

    # mapping points and tensors

    def global_to_local(self, vector: Vector3) -> Vector3:
        """Map a global point into local coordinates (rigid transforms)."""
        m11, m12, m13, m14 = self.m11, self.m12, self.m13, self.m14
        m21, m22, m23, m24 = self.m21, self.m22, self.m23, self.m24
        m31, m32, m33, m34 = self.m31, self.m32, self.m33, self.m34
        vx, vy, vz = vector

        x = (
            vx * (-m23 * m32 + m22 * m33)
            + vy * (m13 * m32 - m12 * m33)
            + vz * (-m13 * m22 + m12 * m23)
            + (m14 * m23 * m32 - m13 * m24 * m32 - m14 * m22 * m33
               + m12 * m24 * m33 + m13 * m22 * m34 - m12 * m23 * m34)
        )
        y = (
            vx * (m23 * m31 - m21 * m33)
            + vy * (-m13 * m31 + m11 * m33)
            + vz * (m13 * m21 - m11 * m23)
            + (m13 * m24 * m31 - m14 * m23 * m31 + m14 * m21 * m33
               - m11 * m24 * m33 - m13 * m21 * m34 + m11 * m23 * m34)
        )
        z = (
            vx * (-m22 * m31 + m21 * m32)
            + vy * (m12 * m31 - m11 * m32)
            + vz * (-m12 * m21 + m11 * m22)
            + (m14 * m22 * m31 - m12 * m24 * m31 - m14 * m21 * m32
               + m11 * m24 * m32 + m12 * m21 * m34 - m11 * m22 * m34)
        )
        return Vector3(x, y, z)

    def local_to_global(self, vector: Vector3) -> Vector3:
        vx, vy, vz = vector
        return Vector3(
            vx * self.m11 + vy * self.m12 + vz * self.m13 + self.m14,
            vx * self.m21 + vy * self.m22 + vz * self.m23 + self.m24,
            vx * self.m31 + vy * self.m32 + vz * self.m33 + self.m34,
        )

    def rotate_vector(self, vector: Vector3) -> Vector3:
        """Apply only the rotation part to a vector."""
        return self.rotation() @ vector

    def rotate_tensor(self, tensor: Matrix3x3) -> Matrix3x3:
        """Rotate a tensor into global coordinates: R T R^T."""
        r = self.rotation()
        return r @ tensor @ r.transposed()

    def project_perspective(self, vector: Vector3) -> Vector3:
        vx, vy, vz = vector
        return Vector3(
            self.m11 * vx + self.m13 * vz,
            self.m22 * vy + self.m23 * vz,
            self.m33 * vz + self.m34,
        )

    def project_orthographic(self, vector: Vector3) -> Vector3:
        vx, vy, vz = vector
        return Vector3(
            self.m11 * vx + self.m14,
            self.m22 * vy + self.m24,
            self.m33 * vz + self.m34,
        )

    # setters

    def set_rotation(self, rotation: Quaternion) -> Transform3:
        """Set the rotation part from a unit quaternion."""
        w, x, y, z = rotation
        sqx, sqy, sqz = x * x, y * y, z * z

        self.m11 = 1.0 - 2.0 * (sqy + sqz)
        self.m22 = 1.0 - 2.0 * (sqx + sqz)
        self.m33 = 1.0 - 2.0 * (sqx + sqy)

        self.m21 = 2.0 * (x * y + z * w)
        self.m12 = 2.0 * (x * y - z * w)

        self.m31 = 2.0 * (x * z - y * w)
        self.m13 = 2.0 * (x * z + y * w)

        self.m32 = 2.0 * (y * z + x * w)
        self.m23 = 2.0 * (y * z - x * w)
        return self

    def set_rotation_about_axis(self, axis: Vector3, radians: float) -> Transform3:
        n = axis.normalised()
        c = math.cos(radians)
        s = math.sin(radians)
        t = 1.0 - c

        self.m11 = t * n.x * n.x + c
        self.m12 = t * n.x * n.y - n.z * s
        self.m13 = t * n.x * n.z + n.y * s

        self.m21 = t * n.x * n.y + n.z * s
        self.m22 = t * n.y * n.y + c
        self.m23 = t * n.y * n.z - n.x * s

        self.m31 = t * n.x * n.z - n.y * s
        self.m32 = t * n.y * n.z + n.x * s
        self.m33 = t * n.z * n.z + c
        return self

    def set_rotation_with_orthogonal_axis(
        self, right: Vector3, up: Vector3, forward: Vector3
    ) -> Transform3:
        """Use the three axes as the rows of the rotation part."""
        self.m11, self.m12, self.m13 = right
        self.m21, self.m22, self.m23 = up
        self.m31, self.m32, self.m33 = forward
        return self

    def set_translation(self, translation: Vector3) -> Transform3:
        self.m14, self.m24, self.m34 = translation
        return self

    def _set_rows(self, *values: float) -> Transform3:
        for index, value in enumerate(values):
            self[divmod(index, 4)] = value
        return self

    def set_perspective(self, fov: float, aspect: float, near: float, far: float) -> Transform3:
        """Perspective projection from a vertical field of view."""
        f = 1.0 / math.tan(fov * 0.5)
        depth = near - far
        return self._set_rows(
            f / aspect, 0.0, 0.0, 0.0,
            0.0, f, 0.0, 0.0,
            0.0, 0.0, (near + far) / depth, (2.0 * near * far) / depth,
            0.0, 0.0, -1.0, 0.0,
        )

    def set_frustum(
        self, left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> Transform3:
        """Perspective projection from the near-plane bounds."""
        width = right - left
        height = top - bottom
        depth = near - far
        near2 = 2.0 * near
        return self._set_rows(
            near2 / width, 0.0, (right + left) / width, 0.0,
            0.0, near2 / height, (top + bottom) / height, 0.0,
            0.0, 0.0, (near + far) / depth, (near2 * far) / depth,
            0.0, 0.0, -1.0, 0.0,
        )

    def set_orthographic(self, fov: float, aspect: float, near: float, far: float) -> Transform3:
        """Orthographic projection sized to the near plane of a field of view."""
        top = math.tan(fov * 0.5) * near
        bottom = -top
        return self.set_orthographic_box(aspect * bottom, aspect * top, bottom, top, near, far)

    def set_orthographic_box(
        self, left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> Transform3:
        width = right - left
        height = top - bottom
        depth = near - far
        return self._set_rows(
            2.0 / width, 0.0, 0.0, -(right + left) / width,
            0.0, 2.0 / height, 0.0, -(top + bottom) / height,
            0.0, 0.0, 2.0 / depth, -(near + far) / depth,
            0.0, 0.0, 0.0, 1.0,
        )

    def set_look_at(self, eye: Vector3, center: Vector3, up: Vector3) -> Transform3:
        """View transform looking from eye towards center."""
        f = (center - eye).normalised()
        s = f.cross(up).normalised()
        u = s.cross(f)
        return self._set_rows(
            s.x, s.y, s.z, -s.dot(eye),
            u.x, u.y, u.z, -u.dot(eye),
            -f.x, -f.y, -f.z, f.dot(eye),
            0.0, 0.0, 0.0, 1.0,
        )

    # views

    def rotation(self) -> Matrix3x3:
        return Matrix3x3(
            self.m11, self.m12, self.m13,
            self.m21, self.m22, self.m23,
            self.m31, self.m32, self.m33,
        )

    def translation(self) -> Vector3:
        return Vector3(self.m14, self.m24, self.m34)