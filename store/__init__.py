"""Storage for the tableau coefficient grid."""

from .matrix import MatrixStore

__all__ = ["MatrixStore"]
