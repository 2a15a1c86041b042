"""Scripted pivot sessions."""

from .session import StepRecord, build_tableau, run_session

__all__ = ["StepRecord", "build_tableau", "run_session"]
