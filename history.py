"""Linear undo/redo log of applied pivots."""

from __future__ import annotations

from typing import List, Protocol, Tuple

from algebra.pivots import PivotRecord


class Replayer(Protocol):
    def replay(self, record: PivotRecord) -> None:
        ...

    def revert(self, record: PivotRecord) -> None:
        ...


class PivotHistory:
    """Entries before ``cursor`` are applied; up to ``redo_budget`` entries
    after it can be replayed. A new pivot discards that future."""

    def __init__(self, algebra: Replayer) -> None:
        self._algebra = algebra
        self._entries: List[PivotRecord] = []
        self._cursor = 0
        self._redo_budget = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def redo_budget(self) -> int:
        return self._redo_budget

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._redo_budget > 0

    @property
    def coordinates(self) -> Tuple[Tuple[int, int], ...]:
        return tuple(entry.coordinate for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, entry: PivotRecord) -> None:
        del self._entries[self._cursor :]
        self._entries.append(entry)
        self._cursor += 1
        self._redo_budget = 0

    def undo(self) -> bool:
        if self._cursor == 0:
            return False
        self._cursor -= 1
        self._algebra.revert(self._entries[self._cursor])
        self._redo_budget += 1
        return True

    def redo(self) -> bool:
        if self._redo_budget == 0:
            return False
        self._algebra.replay(self._entries[self._cursor])
        self._cursor += 1
        self._redo_budget -= 1
        return True

    def clear(self) -> None:
        self._entries.clear()
        self._cursor = 0
        self._redo_budget = 0
