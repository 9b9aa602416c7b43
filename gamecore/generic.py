"""Vectors and matrices of any size over any numeric type."""

from __future__ import annotations

import math
from numbers import Number
from typing import Iterable, Iterator, Sequence


def _fmt(value) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


def _fmt_short(value) -> str:
    return f"{value:.2g}" if isinstance(value, float) else str(value)


class Vector:
    """An immutable vector of numbers; ordering compares magnitudes."""

    __slots__ = ("_v",)

    def __init__(self, values: Iterable) -> None:
        self._v = tuple(values)
        if not self._v:
            raise ValueError("a vector needs at least one entry")

    def _check(self, other: Vector) -> None:
        if len(other) != len(self):
            raise ValueError(f"vector sizes differ: {len(self)} and {len(other)}")

    def __len__(self) -> int:
        return len(self._v)

    def __iter__(self) -> Iterator:
        return iter(self._v)

    def __getitem__(self, index: int):
        return self._v[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._v == other._v

    def __hash__(self) -> int:
        return hash(self._v)

    def __lt__(self, other: Vector) -> bool:
        return self.mag2() < other.mag2()

    def __le__(self, other: Vector) -> bool:
        return self.mag2() <= other.mag2()

    def __gt__(self, other: Vector) -> bool:
        return self.mag2() > other.mag2()

    def __ge__(self, other: Vector) -> bool:
        return self.mag2() >= other.mag2()

    def __repr__(self) -> str:
        return f"Vector({list(self._v)!r})"

    def __str__(self) -> str:
        return "{" + ", ".join(_fmt(value) for value in self._v) + "}"

    def __neg__(self) -> Vector:
        return Vector(-value for value in self._v)

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check(other)
        return Vector(a + b for a, b in zip(self._v, other._v))

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check(other)
        return Vector(a - b for a, b in zip(self._v, other._v))

    def __mul__(self, num) -> Vector:
        if not isinstance(num, Number):
            return NotImplemented
        return Vector(value * num for value in self._v)

    def __rmul__(self, num) -> Vector:
        if not isinstance(num, Number):
            return NotImplemented
        return Vector(num * value for value in self._v)

    def __truediv__(self, num) -> Vector:
        if not isinstance(num, Number):
            return NotImplemented
        return Vector(value / num for value in self._v)

    def dot(self, other: Vector):
        self._check(other)
        return sum(a * b for a, b in zip(self._v, other._v))

    def mag(self) -> float:
        return math.sqrt(self.mag2())

    def mag2(self):
        return sum(value * value for value in self._v)

    def invmag(self) -> float:
        """1 / magnitude; infinite for the zero vector."""
        squared = self.mag2()
        if squared == 0:
            return math.inf
        return 1.0 / math.sqrt(squared)

    @classmethod
    def zeros(cls, size: int) -> Vector:
        return cls([0] * size)

    @classmethod
    def ones(cls, size: int) -> Vector:
        return cls([1] * size)

    def format_detailed(self) -> str:
        """One bracketed entry per line in scientific notation."""
        return "".join(f"[{value:9.3e}]\n" for value in self._v)


def _determinant(rows: Sequence[Sequence]):
    size = len(rows)
    if size == 1:
        return rows[0][0]
    if size == 2:
        (a, b), (c, d) = rows
        return a * d - b * c
    if size == 3:
        (a, b, c), (d, e, f), (g, h, i) = rows
        return a * e * i + b * f * g + c * d * h - c * e * g - b * d * i - a * f * h
    return sum(
        (-1) ** col * value * _determinant([row[:col] + row[col + 1:] for row in rows[1:]])
        for col, value in enumerate(rows[0])
    )


class Matrix:
    """An immutable rows x cols matrix built from entries given row by row.

    Missing entries are zero. ``@`` multiplies by matrices and vectors.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: int, cols: int, values: Iterable = ()) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"invalid matrix shape {rows}x{cols}")
        flat = list(values)
        if len(flat) > rows * cols:
            raise ValueError(f"{len(flat)} entries do not fit a {rows}x{cols} matrix")
        flat.extend([0] * (rows * cols - len(flat)))
        self._rows = tuple(tuple(flat[start:start + cols]) for start in range(0, rows * cols, cols))

    @classmethod
    def from_vector(cls, rows: int, cols: int, vector: Iterable) -> Matrix:
        """Put the vector's entries in the first row; everything else is zero."""
        entries = list(vector)[:cols]
        entries.extend([0] * (cols - len(entries)))
        return cls(rows, cols, entries)

    @property
    def shape(self) -> tuple[int, int]:
        return len(self._rows), len(self._rows[0])

    @property
    def rows(self) -> tuple[tuple, ...]:
        return self._rows

    def __getitem__(self, key: tuple[int, int]):
        row, col = key
        return self._rows[row][col]

    def __iter__(self) -> Iterator[tuple]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"Matrix({rows}, {cols}, {[v for row in self._rows for v in row]!r})"

    def __str__(self) -> str:
        return "{" + ", ".join(
            "{" + ",".join(_fmt(value) for value in row) + "}" for row in self._rows
        ) + "}"

    def _map(self, func) -> Matrix:
        rows, cols = self.shape
        return Matrix(rows, cols, (func(value) for row in self._rows for value in row))

    def _zip(self, other: Matrix, func) -> Matrix:
        if other.shape != self.shape:
            raise ValueError(f"matrix shapes differ: {self.shape} and {other.shape}")
        rows, cols = self.shape
        return Matrix(rows, cols, (
            func(a, b) for row_a, row_b in zip(self._rows, other._rows) for a, b in zip(row_a, row_b)
        ))

    def __mul__(self, num) -> Matrix:
        if not isinstance(num, Number):
            return NotImplemented
        return self._map(lambda value: value * num)

    def __rmul__(self, num) -> Matrix:
        if not isinstance(num, Number):
            return NotImplemented
        return self._map(lambda value: num * value)

    def __truediv__(self, num) -> Matrix:
        if not isinstance(num, Number):
            return NotImplemented
        return self._map(lambda value: value / num)

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._zip(other, lambda a, b: a + b)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._zip(other, lambda a, b: a - b)

    def __matmul__(self, other: Matrix | Vector) -> Matrix | Vector:
        rows, cols = self.shape
        if isinstance(other, Matrix):
            other_rows, other_cols = other.shape
            if other_rows != cols:
                raise ValueError(f"cannot multiply {self.shape} by {other.shape}")
            columns = list(zip(*other._rows))
            return Matrix(rows, other_cols, (
                sum(a * b for a, b in zip(row, column)) for row in self._rows for column in columns
            ))
        if isinstance(other, Vector):
            if len(other) != cols:
                raise ValueError(f"cannot multiply {self.shape} by a vector of size {len(other)}")
            return Vector(sum(a * b for a, b in zip(row, other)) for row in self._rows)
        return NotImplemented

    def __rmatmul__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        rows, _ = self.shape
        if len(other) != rows:
            raise ValueError(f"cannot multiply a vector of size {len(other)} by {self.shape}")
        return Vector(sum(a * b for a, b in zip(column, other)) for column in zip(*self._rows))

    def det(self):
        """Determinant of a square matrix."""
        rows, cols = self.shape
        if rows != cols:
            raise ValueError(f"determinant of a non-square {rows}x{cols} matrix")
        return _determinant(self._rows)

    def transpose(self) -> Matrix:
        rows, cols = self.shape
        return Matrix(cols, rows, (value for column in zip(*self._rows) for value in column))

    @classmethod
    def identity(cls, rows: int, cols: int) -> Matrix:
        return cls(rows, cols, (
            1 if r == c else 0 for r in range(rows) for c in range(cols)
        ))

    @classmethod
    def ones(cls, rows: int, cols: int) -> Matrix:
        return cls(rows, cols, [1] * (rows * cols))

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        return cls(rows, cols)

    def format_detailed(self, width: int = 9) -> str:
        """Shape, determinant (square matrices only) and aligned rows."""
        rows, cols = self.shape
        header = f"{rows}x{cols}"
        if rows == cols:
            header += f", Det: {_fmt_short(self.det())}"
        lines = [header, ""]
        lines.extend(
            "[" + ", ".join(f"{_fmt_short(value):>{width}}" for value in row) + "]"
            for row in self._rows
        )
        return "\n".join(lines) + "\n\n"