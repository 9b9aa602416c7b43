"""A mutable 4x4 matrix of reals, stored row by row."""

from __future__ import annotations

from numbers import Real
from typing import Iterable, Iterator

_N = 4
_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def _element(row: int, col: int) -> property:
    index = row * _N + col

    def getter(self: Matrix4x4) -> float:
        return self._m[index]

    def setter(self: Matrix4x4, value: float) -> None:
        self._m[index] = float(value)

    return property(getter, setter, doc=f"Entry at row {row + 1}, column {col + 1}.")


def _rows(values: list[float]) -> list[list[float]]:
    return [values[start:start + _N] for start in range(0, _N * _N, _N)]


def _multiply(left: list[float], right: list[float]) -> list[float]:
    columns = list(zip(*_rows(right)))
    return [
        sum(a * b for a, b in zip(row, column))
        for row in _rows(left)
        for column in columns
    ]


class Matrix4x4:
    """A 4x4 matrix; with no arguments it starts as the identity.

    Build it from sixteen numbers given row by row, either as separate
    arguments or as one iterable. Use ``@`` for matrix products and
    ``*`` or ``/`` for scalars.
    """

    __slots__ = ("_m",)

    def __init__(self, *args: float | Iterable[float]) -> None:
        if not args:
            values: Iterable = _IDENTITY
        elif len(args) == 1:
            values = args[0]
        else:
            values = args
        entries = [float(value) for value in values]
        if len(entries) != _N * _N:
            raise ValueError(f"a 4x4 matrix needs 16 entries, got {len(entries)}")
        self._m = entries

    @classmethod
    def _from_values(cls, values: Iterable[float]) -> Matrix4x4:
        matrix = cls.__new__(cls)
        matrix._m = [float(value) for value in values]
        return matrix

    m11 = _element(0, 0)
    m12 = _element(0, 1)
    m13 = _element(0, 2)
    m14 = _element(0, 3)
    m21 = _element(1, 0)
    m22 = _element(1, 1)
    m23 = _element(1, 2)
    m24 = _element(1, 3)
    m31 = _element(2, 0)
    m32 = _element(2, 1)
    m33 = _element(2, 2)
    m34 = _element(2, 3)
    m41 = _element(3, 0)
    m42 = _element(3, 1)
    m43 = _element(3, 2)
    m44 = _element(3, 3)

    def _index(self, key: tuple[int, int]) -> int:
        row, col = key
        if not (0 <= row < _N and 0 <= col < _N):
            raise IndexError(f"matrix index {key} out of range")
        return row * _N + col

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self._m[self._index(key)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self._m[self._index(key)] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(list(self._m))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return self._m == other._m

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix4x4({', '.join(repr(value) for value in self._m)})"

    def __str__(self) -> str:
        return "".join(
            "{" + ", ".join(f"{value:g}" for value in row) + "}\n"
            for row in _rows(self._m)
        )

    # matrix arithmetic

    def __add__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4._from_values(a + b for a, b in zip(self._m, other._m))

    def __sub__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4._from_values(a - b for a, b in zip(self._m, other._m))

    def __iadd__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        self._m = [a + b for a, b in zip(self._m, other._m)]
        return self

    def __isub__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        self._m = [a - b for a, b in zip(self._m, other._m)]
        return self

    def __matmul__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4._from_values(_multiply(self._m, other._m))

    def __imatmul__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        self._m = _multiply(self._m, other._m)
        return self

    # scalar arithmetic

    def __mul__(self, num: float) -> Matrix4x4:
        if not isinstance(num, Real):
            return NotImplemented
        return Matrix4x4._from_values(value * num for value in self._m)

    def __rmul__(self, num: float) -> Matrix4x4:
        if not isinstance(num, Real):
            return NotImplemented
        return Matrix4x4._from_values(num * value for value in self._m)

    def __truediv__(self, num: float) -> Matrix4x4:
        if not isinstance(num, Real):
            return NotImplemented
        return Matrix4x4._from_values(value / num for value in self._m)

    def __imul__(self, num: float) -> Matrix4x4:
        if not isinstance(num, Real):
            return NotImplemented
        self._m = [value * num for value in self._m]
        return self

    def __itruediv__(self, num: float) -> Matrix4x4:
        if not isinstance(num, Real):
            return NotImplemented
        self._m = [value / num for value in self._m]
        return self

    # manipulations

    def determinant(self) -> float:
        (m11, m12, m13, m14,
         m21, m22, m23, m24,
         m31, m32, m33, m34,
         m41, m42, m43, m44) = self._m
        return (
            m14 * m23 * m32 * m41 - m13 * m24 * m32 * m41 - m14 * m22 * m33 * m41 + m12 * m24 * m33 * m41
            + m13 * m22 * m34 * m41 - m12 * m23 * m34 * m41 - m14 * m23 * m31 * m42 + m13 * m24 * m31 * m42
            + m14 * m21 * m33 * m42 - m11 * m24 * m33 * m42 - m13 * m21 * m34 * m42 + m11 * m23 * m34 * m42
            + m14 * m22 * m31 * m43 - m12 * m24 * m31 * m43 - m14 * m21 * m32 * m43 + m11 * m24 * m32 * m43
            + m12 * m21 * m34 * m43 - m11 * m22 * m34 * m43 - m13 * m22 * m31 * m44 + m12 * m23 * m31 * m44
            + m13 * m21 * m32 * m44 - m11 * m23 * m32 * m44 - m12 * m21 * m33 * m44 + m11 * m22 * m33 * m44
        )

    def _inverse_values(self) -> list[float] | None:
        det = self.determinant()
        if det == 0.0:
            return None
        inv = 1.0 / det
        (m11, m12, m13, m14,
         m21, m22, m23, m24,
         m31, m32, m33, m34,
         m41, m42, m43, m44) = self._m
        adjugate = [
            m23 * m34 * m42 - m24 * m33 * m42 + m24 * m32 * m43 - m22 * m34 * m43 - m23 * m32 * m44 + m22 * m33 * m44,
            m14 * m33 * m42 - m13 * m34 * m42 - m14 * m32 * m43 + m12 * m34 * m43 + m13 * m32 * m44 - m12 * m33 * m44,
            m13 * m24 * m42 - m14 * m23 * m42 + m14 * m22 * m43 - m12 * m24 * m43 - m13 * m22 * m44 + m12 * m23 * m44,
            m14 * m23 * m32 - m13 * m24 * m32 - m14 * m22 * m33 + m12 * m24 * m33 + m13 * m22 * m34 - m12 * m23 * m34,
            m24 * m33 * m41 - m23 * m34 * m41 - m24 * m31 * m43 + m21 * m34 * m43 + m23 * m31 * m44 - m21 * m33 * m44,
            m13 * m34 * m41 - m14 * m33 * m41 + m14 * m31 * m43 - m11 * m34 * m43 - m13 * m31 * m44 + m11 * m33 * m44,
            m14 * m23 * m41 - m13 * m24 * m41 - m14 * m21 * m43 + m11 * m24 * m43 + m13 * m21 * m44 - m11 * m23 * m44,
            m13 * m24 * m31 - m14 * m23 * m31 + m14 * m21 * m33 - m11 * m24 * m33 - m13 * m21 * m34 + m11 * m23 * m34,
            m22 * m34 * m41 - m24 * m32 * m41 + m24 * m31 * m42 - m21 * m34 * m42 - m22 * m31 * m44 + m21 * m32 * m44,
            m14 * m32 * m41 - m12 * m34 * m41 - m14 * m31 * m42 + m11 * m34 * m42 + m12 * m31 * m44 - m11 * m32 * m44,
            m12 * m24 * m41 - m14 * m22 * m41 + m14 * m21 * m42 - m11 * m24 * m42 - m12 * m21 * m44 + m11 * m22 * m44,
            m14 * m22 * m31 - m12 * m24 * m31 - m14 * m21 * m32 + m11 * m24 * m32 + m12 * m21 * m34 - m11 * m22 * m34,
            m23 * m32 * m41 - m22 * m33 * m41 - m23 * m31 * m42 + m21 * m33 * m42 + m22 * m31 * m43 - m21 * m32 * m43,
            m12 * m33 * m41 - m13 * m32 * m41 + m13 * m31 * m42 - m11 * m33 * m42 - m12 * m31 * m43 + m11 * m32 * m43,
            m13 * m22 * m41 - m12 * m23 * m41 - m13 * m21 * m42 + m11 * m23 * m42 + m12 * m21 * m43 - m11 * m22 * m43,
            m12 * m23 * m31 - m13 * m22 * m31 + m13 * m21 * m32 - m11 * m23 * m32 - m12 * m21 * m33 + m11 * m22 * m33,
        ]
        return [value * inv for value in adjugate]

    def inversed(self) -> Matrix4x4:
        """A new inverse matrix; the identity if this matrix is singular."""
        values = self._inverse_values()
        if values is None:
            return Matrix4x4.identity()
        return Matrix4x4._from_values(values)

    def transposed(self) -> Matrix4x4:
        return Matrix4x4._from_values(
            value for column in zip(*_rows(self._m)) for value in column
        )

    def inverse(self) -> Matrix4x4:
        """Invert in place and return self.

        A singular matrix is left unchanged and a fresh identity is returned.
        """
        values = self._inverse_values()
        if values is None:
            return Matrix4x4.identity()
        self._m = values
        return self

    def transpose(self) -> Matrix4x4:
        """Transpose in place and return self."""
        self._m = [value for column in zip(*_rows(self._m)) for value in column]
        return self

    @classmethod
    def identity(cls) -> Matrix4x4:
        return cls._from_values(_IDENTITY)

    @classmethod
    def zero(cls) -> Matrix4x4:
        return cls._from_values([0.0] * (_N * _N))

    @classmethod
    def parse(cls, text: str) -> Matrix4x4:
        """Read sixteen whitespace-separated numbers, row by row."""
        tokens = text.split()
        if len(tokens) < _N * _N:
            raise ValueError(f"expected 16 numbers, got {len(tokens)}")
        return cls._from_values(float(token) for token in tokens[:_N * _N])