"""Replays a scripted sequence of pivots, undos and redos."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from config import Action, SessionConfig
from tableau import Tableau


@dataclass
class StepRecord:
    step: int
    action: str
    row: Optional[int]
    col: Optional[int]
    applied: bool
    maximized: bool
    objective: float
    cursor: int
    cells: np.ndarray

    def to_dict(self) -> dict[str, Any]:
        return {
            "step": self.step,
            "action": self.action,
            "row": self.row,
            "col": self.col,
            "applied": self.applied,
            "maximized": self.maximized,
            "objective": self.objective,
            "cursor": self.cursor,
            "cells": self.cells.tolist(),
        }


def build_tableau(cfg: SessionConfig) -> Tableau:
    tableau = Tableau(cfg.tableau.constraints, cfg.tableau.variables, cfg.tableau.form)
    if cfg.tableau.cells is not None:
        tableau.load(cfg.tableau.cells)
    return tableau


def run_session(cfg: SessionConfig, tableau: Tableau | None = None) -> list[StepRecord]:
    if tableau is None:
        tableau = build_tableau(cfg)
    history = [_snapshot(tableau, 0, "start", None, True, cfg.run.tol)]
    for step, action in enumerate(cfg.run.actions, start=1):
        applied = _apply(tableau, action)
        history.append(_snapshot(tableau, step, action.kind, action, applied, cfg.run.tol))
    return history


def _apply(tableau: Tableau, action: Action) -> bool:
    if action.kind == "pivot":
        return tableau.pivot(action.row, action.col)
    if action.kind == "undo":
        return tableau.undo()
    if action.kind == "redo":
        return tableau.redo()
    raise ValueError(f"unsupported action: {action.kind}")


def _snapshot(
    tableau: Tableau,
    step: int,
    name: str,
    action: Optional[Action],
    applied: bool,
    tol: float,
) -> StepRecord:
    return StepRecord(
        step=step,
        action=name,
        row=action.row if action is not None else None,
        col=action.col if action is not None else None,
        applied=applied,
        maximized=tableau.is_maximized(tol),
        objective=tableau.objective_value,
        cursor=tableau.cursor,
        cells=tableau.cells,
    )
