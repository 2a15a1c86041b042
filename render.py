"""Text rendering of tableau grids."""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from typing import List, Literal, Optional, Sequence

import numpy as np

NumberFormat = Literal["decimal", "fraction"]


def format_number(
    value: float,
    fmt: NumberFormat = "decimal",
    *,
    precision: int = 6,
    max_denominator: int = 1000,
) -> str:
    if fmt not in ("decimal", "fraction"):
        raise ValueError(f"unsupported number format: {fmt}")
    value = float(value)
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    if fmt == "fraction":
        frac = Fraction(value).limit_denominator(max_denominator)
        # Values with no close small-denominator fraction stay decimal.
        if abs(float(frac) - value) <= 1e-9 * max(1.0, abs(value)):
            if frac.denominator == 1:
                return str(frac.numerator)
            return f"{frac.numerator}/{frac.denominator}"
    return f"{value:.{precision}g}"


def render_grid(
    cells: np.ndarray,
    fmt: NumberFormat = "decimal",
    *,
    precision: int = 6,
    max_denominator: int = 1000,
) -> List[List[str]]:
    arr = np.asarray(cells, dtype=float)
    return [
        [
            format_number(v, fmt, precision=precision, max_denominator=max_denominator)
            for v in row
        ]
        for row in arr
    ]


@dataclass(frozen=True)
class RenderedTableau:
    """Display-ready grid. The last column is the answer column and the last
    row is the objective row."""

    grid: List[List[str]]
    column_labels: Sequence[str] = field(default_factory=tuple)
    row_labels: Optional[Sequence[str]] = None

    def to_text(self) -> str:
        if not self.grid:
            return ""
        n_cols = len(self.grid[0])
        headers = list(self.column_labels) + [""] * (n_cols - len(self.column_labels))
        widths = [
            max(len(headers[c]), *(len(row[c]) for row in self.grid))
            for c in range(n_cols)
        ]
        side = 0
        if self.row_labels is not None:
            side = max((len(label) for label in self.row_labels), default=0)

        def line(cells: Sequence[str], prefix: str = "") -> str:
            body = " ".join(cell.rjust(widths[c]) for c, cell in enumerate(cells[:-1]))
            last = cells[-1].rjust(widths[-1])
            lead = f"{prefix.rjust(side)} " if self.row_labels is not None else ""
            return f"{lead}{body} | {last}".rstrip()

        lines = []
        if any(headers):
            lines.append(line(headers))
        for r, row in enumerate(self.grid[:-1]):
            prefix = ""
            if self.row_labels is not None and r < len(self.row_labels):
                prefix = self.row_labels[r]
            lines.append(line(row, prefix))
        lines.append("-" * len(line(self.grid[-1])))
        lines.append(line(self.grid[-1]))
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.to_text()
