"""JSON-lines export of pivot sessions."""

from .writer import read_history, write_history

__all__ = ["read_history", "write_history"]
