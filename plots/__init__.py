"""Session plots."""

from .metrics import generate_plots

__all__ = ["generate_plots"]
