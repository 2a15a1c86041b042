"""Pivot algebra for the two tableau forms."""

from .pivots import Form, PivotAlgebra, PivotRecord, select_pivot, simplex_pivot, tucker_pivot

__all__ = [
    "Form",
    "PivotAlgebra",
    "PivotRecord",
    "select_pivot",
    "simplex_pivot",
    "tucker_pivot",
]
