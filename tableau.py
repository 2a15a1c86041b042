"""Hand-guided pivoting on Simplex and Tucker tableaus."""

from __future__ import annotations

import numbers
import operator
import threading
from typing import Optional, Sequence, Tuple

import numpy as np

from algebra.pivots import Form, PivotAlgebra
from errors import OutOfRangeError, UnsupportedOperationError, ZeroPivotError
from history import PivotHistory
from ledger import VariableLedger
from render import NumberFormat, RenderedTableau, render_grid
from store.matrix import MatrixStore

__all__ = ["Form", "Tableau"]


class Tableau:
    """A linear-programming maximization problem laid out for manual pivoting.

    The last row is the objective row and the last column holds the answers.
    A Simplex tableau has a column per decision and slack variable; a Tucker
    tableau keeps the slack variables beside the rows instead.
    """

    def __init__(
        self,
        num_constraints: int,
        num_variables: int,
        form: Form | str = Form.SIMPLEX,
    ) -> None:
        for name, value in (("num_constraints", num_constraints), ("num_variables", num_variables)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        self._form = Form.parse(form)
        self._num_constraints = int(num_constraints)
        self._num_variables = int(num_variables)

        rows = self._num_constraints + 1
        if self._form is Form.SIMPLEX:
            cols = self._num_variables + self._num_constraints + 1
        else:
            cols = self._num_variables + 1

        self._store = MatrixStore(rows, cols)
        self._ledger = VariableLedger(self._num_variables, self._num_constraints)
        self._algebra = PivotAlgebra(self._form, self._store, self._ledger)
        self._history = PivotHistory(self._algebra)
        self._lock = threading.RLock()

    @classmethod
    def from_cells(
        cls,
        cells: Sequence[Sequence[float]] | np.ndarray,
        form: Form | str = Form.SIMPLEX,
    ) -> "Tableau":
        """Build a tableau whose dimensions are read off ``cells``."""
        arr = np.asarray(cells, dtype=float)
        if arr.ndim != 2:
            raise ValueError("tableau cells must form a 2-D grid")
        form = Form.parse(form)
        num_constraints = arr.shape[0] - 1
        if form is Form.SIMPLEX:
            num_variables = arr.shape[1] - arr.shape[0]
        else:
            num_variables = arr.shape[1] - 1
        tableau = cls(num_constraints, num_variables, form)
        tableau.load(arr)
        return tableau

    @property
    def form(self) -> Form:
        return self._form

    @property
    def num_constraints(self) -> int:
        return self._num_constraints

    @property
    def num_variables(self) -> int:
        return self._num_variables

    @property
    def num_rows(self) -> int:
        return self._store.rows

    @property
    def num_cols(self) -> int:
        return self._store.cols

    @property
    def cells(self) -> np.ndarray:
        return self._store.values

    @property
    def labels(self) -> Tuple[str, ...]:
        return self._ledger.labels

    @property
    def history(self) -> Tuple[Tuple[int, int], ...]:
        return self._history.coordinates

    @property
    def cursor(self) -> int:
        return self._history.cursor

    @property
    def redo_budget(self) -> int:
        return self._history.redo_budget

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    @property
    def objective_value(self) -> float:
        return self._store.get(self.num_rows - 1, self.num_cols - 1)

    def get(self, row: int, col: int) -> float:
        return self._store.get(row, col)

    def set(self, row: int, col: int, value: float) -> None:
        """Edit one cell. Pivot history recorded so far is discarded."""
        with self._lock:
            self._store.set(row, col, value)
            self._history.clear()

    def load(self, values: Sequence[Sequence[float]] | np.ndarray) -> None:
        """Replace every cell and start over with a fresh ledger and history."""
        with self._lock:
            self._store.load(values)
            self._ledger.reset()
            self._history.clear()

    def pivot(self, row: int, col: int, *, strict: bool = False) -> bool:
        """Pivot on ``(row, col)`` and record it.

        Returns ``False`` when the cell is zero, in which case nothing changes;
        pass ``strict=True`` to get a :class:`ZeroPivotError` instead.
        """
        with self._lock:
            value = self._store.get(row, col)
            row, col = operator.index(row), operator.index(col)
            if row == self.num_rows - 1:
                raise OutOfRangeError(f"row {row} is the objective row and cannot hold a pivot")
            if col == self.num_cols - 1:
                raise OutOfRangeError(f"column {col} is the answer column and cannot hold a pivot")
            if value == 0:
                if strict:
                    raise ZeroPivotError(f"cell ({row}, {col}) is zero")
                return False
            record = self._algebra.apply(row, col)
            if record is None:
                return False
            self._history.record(record)
            return True

    def undo(self) -> bool:
        with self._lock:
            return self._history.undo()

    def redo(self) -> bool:
        with self._lock:
            return self._history.redo()

    def is_maximized(self, tol: float = 0.0) -> bool:
        """Simplex wants every objective coefficient >= 0, Tucker wants <= 0."""
        with self._lock:
            objective = self._store.values[-1, :-1]
        if self._form is Form.SIMPLEX:
            return bool(np.all(objective >= -tol))
        return bool(np.all(objective <= tol))

    def is_feasible(self) -> bool:
        raise UnsupportedOperationError("feasibility testing is not available yet")

    def convert(self) -> "Tableau":
        target = Form.TUCKER if self._form is Form.SIMPLEX else Form.SIMPLEX
        raise UnsupportedOperationError(
            f"conversion from {self._form.value} to {target.value} form is not available yet"
        )

    def variable_at(self, pos: int) -> str:
        pos = operator.index(pos)
        if not 0 <= pos < len(self._ledger):
            raise OutOfRangeError(f"variable position {pos} outside 0..{len(self._ledger) - 1}")
        if self._form is Form.TUCKER:
            return self._ledger.label_at(pos)
        # Simplex labels stay put; slacks are numbered from the first slack column.
        offset = self.num_cols - self.num_rows - 1
        if pos > offset:
            return f"t{pos - offset}"
        return f"x{pos + 1}"

    def render(
        self,
        fmt: NumberFormat = "decimal",
        *,
        precision: int = 6,
        max_denominator: int = 1000,
    ) -> RenderedTableau:
        with self._lock:
            grid = render_grid(
                self._store.values,
                fmt,
                precision=precision,
                max_denominator=max_denominator,
            )
            row_labels: Optional[Tuple[str, ...]] = None
            if self._form is Form.TUCKER:
                columns = tuple(self.variable_at(c) for c in range(self._num_variables))
                row_labels = tuple(
                    self.variable_at(self._num_variables + r) for r in range(self._num_constraints)
                )
            else:
                columns = tuple(self.variable_at(c) for c in range(self.num_cols - 1))
        return RenderedTableau(grid=grid, column_labels=columns, row_labels=row_labels)

    def __repr__(self) -> str:
        return (
            f"Tableau(form={self._form.value!r}, rows={self.num_rows}, "
            f"cols={self.num_cols}, cursor={self.cursor})"
        )

    def __str__(self) -> str:
        return self.render().to_text()
