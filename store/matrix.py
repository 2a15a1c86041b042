"""Dense coefficient grid with bounds-checked access."""

from __future__ import annotations

import operator
from typing import Sequence

import numpy as np

from errors import OutOfRangeError


class MatrixStore:
    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("matrix dimensions must be positive")
        self._cells = np.zeros((rows, cols), dtype=float)

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        return self._cells.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def values(self) -> np.ndarray:
        return self._cells.copy()

    def get(self, row: int, col: int) -> float:
        r, c = self._check(row, col)
        return float(self._cells[r, c])

    def set(self, row: int, col: int, value: float) -> None:
        r, c = self._check(row, col)
        value = float(value)
        if not np.isfinite(value):
            raise ValueError(f"cell ({r}, {c}) must be finite, got {value!r}")
        self._cells[r, c] = value

    def load(self, values: Sequence[Sequence[float]] | np.ndarray) -> None:
        arr = np.asarray(values, dtype=float)
        if arr.shape != self._cells.shape:
            raise ValueError(
                f"expected a {self.rows}x{self.cols} grid, got shape {arr.shape}"
            )
        if not np.all(np.isfinite(arr)):
            raise ValueError("grid values must be finite")
        self._cells[...] = arr

    def commit(self, values: np.ndarray) -> None:
        """Replace the grid with an already validated array of the same shape."""
        self._cells[...] = values

    def _check(self, row: int, col: int) -> tuple[int, int]:
        r = operator.index(row)
        c = operator.index(col)
        if not 0 <= r < self.rows:
            raise OutOfRangeError(f"row {r} outside 0..{self.rows - 1}")
        if not 0 <= c < self.cols:
            raise OutOfRangeError(f"column {c} outside 0..{self.cols - 1}")
        return r, c
