"""Pivot procedures for the Simplex and Tucker tableau forms."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from errors import NonFiniteResultError
from ledger import VariableLedger
from store.matrix import MatrixStore


class Form(str, Enum):
    SIMPLEX = "simplex"
    TUCKER = "tucker"

    @classmethod
    def parse(cls, value: "Form | str") -> "Form":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"unknown tableau form: {value!r}") from None


PivotFn = Callable[[np.ndarray, int, int], bool]


def simplex_pivot(cells: np.ndarray, row: int, col: int) -> bool:
    """Gauss-Jordan pivot: scale the pivot row, then clear the pivot column.

    Returns ``False`` without touching ``cells`` when the pivot is zero.
    """
    pivot_value = cells[row, col]
    if pivot_value == 0:
        return False
    cells[row, :] /= pivot_value
    for r in range(cells.shape[0]):
        if r == row:
            continue
        multiplier = cells[r, col]
        cells[r, :] -= multiplier * cells[row, :]
    return True


def tucker_pivot(cells: np.ndarray, row: int, col: int) -> bool:
    """Tucker pivot. Applying it twice at the same cell restores the grid.

    With pivot ``p``, pivot-column entry ``r`` and pivot-row entry ``q``::

        p -> 1/p    q -> q/p    r -> -r/p    s -> s - r*q/p
    """
    p = cells[row, col]
    if p == 0:
        return False
    pivot_row = cells[row, :].copy()
    pivot_col = cells[:, col].copy()

    cells -= np.outer(pivot_col, pivot_row) / p
    cells[:, col] = -pivot_col / p
    cells[row, :] = pivot_row / p
    cells[row, col] = 1.0 / p
    return True


PIVOTS: Dict[Form, PivotFn] = {
    Form.SIMPLEX: simplex_pivot,
    Form.TUCKER: tucker_pivot,
}


def select_pivot(form: Form | str) -> PivotFn:
    return PIVOTS[Form.parse(form)]


@dataclass(frozen=True, eq=False)
class PivotRecord:
    """One applied pivot together with what is needed to take it back."""

    row: int
    col: int
    before: np.ndarray = field(repr=False)
    slots: Optional[Tuple[int, int]] = None

    @property
    def coordinate(self) -> Tuple[int, int]:
        return self.row, self.col


class PivotAlgebra:
    """Binds one tableau form to the grid and ledger it transforms."""

    def __init__(self, form: Form | str, store: MatrixStore, ledger: VariableLedger) -> None:
        self.form = Form.parse(form)
        self._pivot = select_pivot(self.form)
        self._store = store
        self._ledger = ledger

    def apply(self, row: int, col: int) -> Optional[PivotRecord]:
        """Pivot at ``(row, col)``; ``None`` means the cell was zero."""
        self._store.get(row, col)
        before = self._store.values
        cells = before.copy()
        with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
            if not self._pivot(cells, row, col):
                return None
        if not np.all(np.isfinite(cells)):
            raise NonFiniteResultError(
                f"pivot at ({row}, {col}) on {before[row, col]!r} overflows the grid"
            )
        slots = self._label_slots(row, col)
        self._store.commit(cells)
        if slots is not None:
            self._ledger.swap(*slots)
        before.setflags(write=False)
        return PivotRecord(row=row, col=col, before=before, slots=slots)

    def replay(self, record: PivotRecord) -> None:
        self.apply(record.row, record.col)

    def revert(self, record: PivotRecord) -> None:
        self._store.commit(record.before)
        if record.slots is not None:
            self._ledger.swap(*record.slots)

    def _label_slots(self, row: int, col: int) -> Optional[Tuple[int, int]]:
        if self.form is Form.TUCKER:
            return self._ledger.column_position(col), self._ledger.row_position(row)
        # Simplex columns never move; the row region holds the basic
        # variable of each constraint row instead.
        entering = self._ledger.home_label(col)
        current = self._ledger.position_of(entering)
        target = self._ledger.row_position(row)
        if current == target:
            return None
        return current, target
