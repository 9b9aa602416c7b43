"""A mutable 3x3 matrix of reals, stored row by row."""

from __future__ import annotations

from numbers import Real
from typing import Iterable, Iterator

from .vector import Vector3

_N = 3
_IDENTITY = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)


def _element(row: int, col: int) -> property:
    index = row * _N + col

    def getter(self: Matrix3x3) -> float:
        return self._m[index]

    def setter(self: Matrix3x3, value: float) -> None:
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


class Matrix3x3:
    """A 3x3 matrix; with no arguments it starts as the identity.

    Build it from nine numbers given row by row, either as separate
    arguments or as one iterable. Use ``@`` for matrix and vector
    products and ``*`` or ``/`` for scalars.
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
            raise ValueError(f"a 3x3 matrix needs 9 entries, got {len(entries)}")
        self._m = entries

    @classmethod
    def _from_values(cls, values: Iterable[float]) -> Matrix3x3:
        matrix = cls.__new__(cls)
        matrix._m = [float(value) for value in values]
        return matrix

    m11 = _element(0, 0)
    m12 = _element(0, 1)
    m13 = _element(0, 2)
    m21 = _element(1, 0)
    m22 = _element(1, 1)
    m23 = _element(1, 2)
    m31 = _element(2, 0)
    m32 = _element(2, 1)
    m33 = _element(2, 2)

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
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return self._m == other._m

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix3x3({', '.join(repr(value) for value in self._m)})"

    def __str__(self) -> str:
        rows = ", ".join(
            "{" + ", ".join(f"{value:g}" for value in row) + "}" for row in _rows(self._m)
        )
        return "{" + rows + "} "

    # matrix arithmetic

    def __add__(self, other: Matrix3x3) -> Matrix3x3:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return Matrix3x3._from_values(a + b for a, b in zip(self._m, other._m))

    def __sub__(self, other: Matrix3x3) -> Matrix3x3:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return Matrix3x3._from_values(a - b for a, b in zip(self._m, other._m))

    def __iadd__(self, other: Matrix3x3) -> Matrix3x3:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        self._m = [a + b for a, b in zip(self._m, other._m)]
        return self

    def __isub__(self, other: Matrix3x3) -> Matrix3x3:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        self._m = [a - b for a, b in zip(self._m, other._m)]
        return self

    def __matmul__(self, other: Matrix3x3 | Vector3) -> Matrix3x3 | Vector3:
        if isinstance(other, Matrix3x3):
            return Matrix3x3._from_values(_multiply(self._m, other._m))
        if isinstance(other, Vector3):
            return Vector3(*(
                row[0] * other.x + row[1] * other.y + row[2] * other.z
                for row in _rows(self._m)
            ))
        return NotImplemented

    def __rmatmul__(self, other: Vector3) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(*(
                col[0] * other.x + col[1] * other.y + col[2] * other.z
                for col in zip(*_rows(self._m))
            ))
        return NotImplemented

    def __imatmul__(self, other: Matrix3x3) -> Matrix3x3:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        self._m = _multiply(self._m, other._m)
        return self

    # scalar arithmetic

    def __mul__(self, num: float) -> Matrix3x3:
        if not isinstance(num, Real):
            return NotImplemented
        return Matrix3x3._from_values(value * num for value in self._m)

    def __rmul__(self, num: float) -> Matrix3x3:
        if not isinstance(num, Real):
            return NotImplemented
        return Matrix3x3._from_values(num * value for value in self._m)

    def __truediv__(self, num: float) -> Matrix3x3:
        if not isinstance(num, Real):
            return NotImplemented
        return Matrix3x3._from_values(value / num for value in self._m)

    def __imul__(self, num: float) -> Matrix3x3:
        if not isinstance(num, Real):
            return NotImplemented
        self._m = [value * num for value in self._m]
        return self

    def __itruediv__(self, num: float) -> Matrix3x3:
        if not isinstance(num, Real):
            return NotImplemented
        self._m = [value / num for value in self._m]
        return self

    # manipulations

    def determinant(self) -> float:
        m11, m12, m13, m21, m22, m23, m31, m32, m33 = self._m
        return (
            m11 * m22 * m33
            + m21 * m32 * m13
            + m31 * m12 * m23
            - m13 * m22 * m31
            - m12 * m21 * m33
            - m11 * m23 * m32
        )

    def _inverse_values(self) -> list[float] | None:
        det = self.determinant()
        if det == 0.0:
            return None
        inv = 1.0 / det
        m11, m12, m13, m21, m22, m23, m31, m32, m33 = self._m
        return [
            (m22 * m33 - m23 * m32) * inv,
            (m13 * m32 - m12 * m33) * inv,
            (m12 * m23 - m13 * m22) * inv,
            (m23 * m31 - m21 * m33) * inv,
            (m11 * m33 - m13 * m31) * inv,
            (m13 * m21 - m11 * m23) * inv,
            (m21 * m32 - m22 * m31) * inv,
            (m12 * m31 - m11 * m32) * inv,
            (m11 * m22 - m12 * m21) * inv,
        ]

    def inversed(self) -> Matrix3x3:
        """A new inverse matrix; the identity if this matrix is singular."""
        values = self._inverse_values()
        if values is None:
            return Matrix3x3.identity()
        return Matrix3x3._from_values(values)

    def transposed(self) -> Matrix3x3:
        return Matrix3x3._from_values(
            value for column in zip(*_rows(self._m)) for value in column
        )

    def inverse(self) -> Matrix3x3:
        """Invert in place and return self.

        A singular matrix is left unchanged and a fresh identity is returned.
        """
        values = self._inverse_values()
        if values is None:
            return Matrix3x3.identity()
        self._m = values
        return self

    def transpose(self) -> Matrix3x3:
        """Transpose in place and return self."""
        self._m = [value for column in zip(*_rows(self._m)) for value in column]
        return self

    def set_diagonal(self, m11: float, m22: float, m33: float) -> None:
        """Make this a diagonal matrix with the given entries."""
        self._m = [
            float(m11), 0.0, 0.0,
            0.0, float(m22), 0.0,
            0.0, 0.0, float(m33),
        ]

    @classmethod
    def identity(cls) -> Matrix3x3:
        return cls._from_values(_IDENTITY)

    @classmethod
    def zero(cls) -> Matrix3x3:
        return cls._from_values([0.0] * (_N * _N))

    @classmethod
    def parse(cls, text: str) -> Matrix3x3:
        """Read nine whitespace-separated numbers, row by row."""
        tokens = text.split()
        if len(tokens) < _N * _N:
            raise ValueError(f"expected 9 numbers, got {len(tokens)}")
        return cls._from_values(float(token) for token in tokens[:_N * _N])