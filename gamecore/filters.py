"""Odd-sized convolution filters applied to row-major grids of reals."""

from __future__ import annotations

from typing import Iterable


class Filter:
    """A convolution kernel with an odd number of rows and columns.

    The weights are kept row by row in the flat list ``matrix``.
    """

    def __init__(self, rows: int, cols: int, matrix: Iterable[float] | None = None) -> None:
        if rows < 1 or cols < 1 or rows % 2 == 0 or cols % 2 == 0:
            raise ValueError(f"filter dimensions must be odd and positive, got {rows}x{cols}")
        entries = [0.0] * (rows * cols) if matrix is None else [float(v) for v in matrix]
        if len(entries) != rows * cols:
            raise ValueError(f"a {rows}x{cols} filter needs {rows * cols} weights, got {len(entries)}")
        self._rows = rows
        self._cols = cols
        # The row reach follows the column count and vice versa; both agree
        # for square kernels.
        self._row_reach = (cols - 1) // 2
        self._col_reach = (rows - 1) // 2
        self.matrix = entries

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = key
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"filter index {key} out of range")
        return self.matrix[row * self._cols + col]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Filter):
            return NotImplemented
        return (self._rows, self._cols, self.matrix) == (other._rows, other._cols, other.matrix)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Filter({self._rows}, {self._cols}, {self.matrix!r})"

    def __str__(self) -> str:
        rows = (
            self.matrix[start:start + self._cols]
            for start in range(0, self._rows * self._cols, self._cols)
        )
        return "".join("{" + ", ".join(f"{value:g}" for value in row) + "}\n" for row in rows)

    def normalize(self) -> Filter:
        """Scale the weights so their absolute values sum to one; returns self."""
        total = sum(abs(value) for value in self.matrix)
        if total not in (0.0, 1.0):
            factor = 1.0 / total
            self.matrix = [value * factor for value in self.matrix]
        return self

    def _taps(self) -> list[tuple[int, int, float]]:
        return [
            (row - self._row_reach, col - self._col_reach, weight)
            for (row, col), weight in (
                (divmod(index, self._cols), weight) for index, weight in enumerate(self.matrix)
            )
        ]

    def apply(
        self,
        data: Iterable[float],
        rows: int,
        cols: int,
        offset: int = 0,
        stride: int = 1,
    ) -> list[float]:
        """Filter a rows x cols grid and return the result as a new list.

        Only the columns ``offset, offset + stride, ...`` are filtered, and
        only those columns are sampled, so interleaved channels can be
        handled one at a time. Each result is divided by the sum of the
        weights that fell inside the grid, unless that sum is zero.
        """
        values = [float(v) for v in data]
        if len(values) != rows * cols:
            raise ValueError(f"expected {rows * cols} values for a {rows}x{cols} grid, got {len(values)}")
        if stride < 1:
            raise ValueError(f"stride must be positive, got {stride}")
        if not 0 <= offset < stride:
            raise ValueError(f"offset must lie in [0, {stride}), got {offset}")
        if cols % stride != 0:
            raise ValueError(f"{cols} columns do not divide into stride {stride}")

        taps = self._taps()
        result = list(values)
        for row in range(rows):
            for col in range(offset, cols, stride):
                total = 0.0
                norm = 0.0
                for d_row, d_col, weight in taps:
                    source_row = row + d_row
                    source_col = col + d_col * stride
                    if 0 <= source_row < rows and 0 <= source_col < cols:
                        total += values[source_row * cols + source_col] * weight
                        norm += weight
                if norm != 0:
                    total /= norm
                result[row * cols + col] = total
        return result

    @classmethod
    def gaussian(cls, neighbours: int) -> Filter:
        """A square kernel reaching ``neighbours`` cells each way, weights doubling towards the centre."""
        if neighbours < 0:
            raise ValueError(f"neighbours must not be negative, got {neighbours}")
        upper: list[list[float]] = []
        value = 1.0
        for _ in range(neighbours + 1):
            line: list[float] = []
            for _ in range(neighbours):
                if line:
                    value = line[-1] * 2.0
                elif upper:
                    value = upper[-1][0] * 2.0
                else:
                    value = 1.0
                line.append(value)
            upper.append(line + [value * 2.0] + line[::-1])
        grid = upper + upper[-2::-1]
        size = 2 * neighbours + 1
        return cls(size, size, (weight for line in grid for weight in line))

    @classmethod
    def _square(cls, *weights: float) -> Filter:
        size = {9: 3, 25: 5, 49: 7, 81: 9}[len(weights)]
        return cls(size, size, weights)

    @classmethod
    def sobel(cls) -> Filter:
        return cls._square(-1, -2, -1,
                           0, 1, 0,
                           1, 2, 1)

    @classmethod
    def lowpass(cls) -> Filter:
        return cls._square(1, 1, 1,
                           1, 1, 1,
                           1, 1, 1)

    @classmethod
    def gaussian1(cls) -> Filter:
        return cls._square(1, 2, 1,
                           2, 4, 2,
                           1, 2, 1)

    @classmethod
    def gaussian2(cls) -> Filter:
        return cls._square(1, 2, 4, 2, 1,
                           2, 4, 8, 4, 2,
                           4, 8, 16, 8, 4,
                           2, 4, 8, 4, 2,
                           1, 2, 4, 2, 1)

    @classmethod
    def gaussian3(cls) -> Filter:
        return cls._square(1, 2, 4, 8, 4, 2, 1,
                           2, 4, 8, 16, 8, 4, 2,
                           4, 8, 16, 32, 16, 8, 4,
                           8, 16, 32, 64, 32, 16, 8,
                           4, 8, 16, 32, 16, 8, 4,
                           2, 4, 8, 16, 8, 4, 2,
                           1, 2, 4, 8, 4, 2, 1)

    @classmethod
    def gaussian4(cls) -> Filter:
        return cls._square(1, 2, 4, 8, 16, 8, 4, 2, 1,
                           2, 4, 8, 16, 32, 16, 8, 4, 2,
                           4, 8, 16, 32, 64, 32, 16, 8, 4,
                           8, 16, 32, 64, 128, 64, 32, 16, 8,
                           16, 32, 64, 128, 256, 128, 64, 32, 16,
                           8, 16, 32, 64, 128, 64, 32, 16, 8,
                           4, 8, 16, 32, 64, 32, 16, 8, 4,
                           2, 4, 8, 16, 32, 16, 8, 4, 2,
                           1, 2, 4, 8, 16, 8, 4, 2, 1)

    @classmethod
    def sharpening(cls) -> Filter:
        return cls._square(0, -1, 0,
                           -1, 5, -1,
                           0, -1, 0)

    @classmethod
    def vertical_sharpening(cls) -> Filter:
        return cls._square(-1, 2, -1,
                           -1, 3, -1,
                           -1, 2, -1)

    @classmethod
    def horizontal_sharpening(cls) -> Filter:
        return cls._square(-1, -1, -1,
                           2, 3, 2,
                           -1, -1, -1)

    @classmethod
    def edge_detection_upper_left(cls) -> Filter:
        return cls._square(1, 0, 0,
                           0, 0, 0,
                           0, 0, -1)

    @classmethod
    def edge_detection_lower_right(cls) -> Filter:
        return cls._square(-1, 0, 0,
                           0, 0, 0,
                           0, 0, 1)

    @classmethod
    def parse(cls, text: str) -> Filter:
        """Read the row count, the column count and then the weights row by row."""
        tokens = text.split()
        if len(tokens) < 2:
            raise ValueError("expected the filter's rows and columns")
        rows, cols = int(tokens[0]), int(tokens[1])
        weights = tokens[2:]
        if rows < 0 or cols < 0 or len(weights) < rows * cols:
            raise ValueError(f"expected {rows * cols} weights, got {len(weights)}")
        return cls(rows, cols, (float(token) for token in weights[:rows * cols]))