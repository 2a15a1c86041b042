from __future__ import annotations

import operator
from typing import Iterator, List

from errors import OutOfRangeError


class VariableLedger:
    """Tracks which variable label heads each column and each constraint row.

    Flat positions ``0..num_variables-1`` address the column region and the
    positions after them address the row region, one slot per constraint.
    """

    def __init__(self, num_variables: int, num_constraints: int) -> None:
        if num_variables <= 0 or num_constraints <= 0:
            raise ValueError("ledger needs at least one variable and one constraint")
        self._column_labels: List[str] = [f"x{i + 1}" for i in range(num_variables)]
        # Slack labels are numbered by slot index, so with two variables the
        # first slack reads "t3".
        self._row_labels: List[str] = [
            f"t{slot + 1}"
            for slot in range(num_variables, num_variables + num_constraints)
        ]
        self._home = self.labels

    @property
    def column_labels(self) -> tuple[str, ...]:
        return tuple(self._column_labels)

    @property
    def row_labels(self) -> tuple[str, ...]:
        return tuple(self._row_labels)

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(self._column_labels) + tuple(self._row_labels)

    def __len__(self) -> int:
        return len(self._column_labels) + len(self._row_labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)

    def label_at(self, pos: int) -> str:
        region, idx = self._locate(pos)
        return region[idx]

    def home_label(self, pos: int) -> str:
        """Label that occupied ``pos`` when the ledger was created."""
        pos = operator.index(pos)
        if not 0 <= pos < len(self._home):
            raise OutOfRangeError(f"ledger position {pos} outside 0..{len(self) - 1}")
        return self._home[pos]

    def reset(self) -> None:
        width = len(self._column_labels)
        self._column_labels = list(self._home[:width])
        self._row_labels = list(self._home[width:])

    def row_position(self, row: int) -> int:
        row = operator.index(row)
        if not 0 <= row < len(self._row_labels):
            raise OutOfRangeError(f"constraint row {row} has no ledger slot")
        return len(self._column_labels) + row

    def column_position(self, column: int) -> int:
        column = operator.index(column)
        if not 0 <= column < len(self._column_labels):
            raise OutOfRangeError(f"column {column} has no ledger slot")
        return column

    def position_of(self, label: str) -> int:
        for pos, current in enumerate(self.labels):
            if current == label:
                return pos
        raise KeyError(label)

    def swap(self, pos_a: int, pos_b: int) -> None:
        region_a, idx_a = self._locate(pos_a)
        region_b, idx_b = self._locate(pos_b)
        region_a[idx_a], region_b[idx_b] = region_b[idx_b], region_a[idx_a]

    def swap_header(self, column: int, row: int) -> tuple[int, int]:
        """Exchange the label over ``column`` with the label beside ``row``."""
        pair = (self.column_position(column), self.row_position(row))
        self.swap(*pair)
        return pair

    def _locate(self, pos: int) -> tuple[List[str], int]:
        pos = operator.index(pos)
        width = len(self._column_labels)
        if 0 <= pos < width:
            return self._column_labels, pos
        if width <= pos < len(self):
            return self._row_labels, pos - width
        raise OutOfRangeError(f"ledger position {pos} outside 0..{len(self) - 1}")
