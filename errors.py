"""Error taxonomy shared by the tableau engine."""

from __future__ import annotations


class TableauError(RuntimeError):
    """Base class for recoverable tableau failures."""


class OutOfRangeError(TableauError, IndexError):
    """Raised when a row, column or ledger position lies outside the tableau."""


class ZeroPivotError(TableauError):
    """Raised for a pivot on an exact zero, only when the caller asks for it."""


class NonFiniteResultError(TableauError, ArithmeticError):
    """Raised when a pivot would leave NaN or infinite values in the grid."""


class UnsupportedOperationError(TableauError, NotImplementedError):
    """Raised by operations that are declared but not available yet."""
