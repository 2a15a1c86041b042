"""Configuration loading for scripted pivot sessions."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Literal, Optional, Tuple

import numpy as np
import yaml

from algebra.pivots import Form


@dataclass
class TableauConfig:
    form: Form
    constraints: int
    variables: int
    cells: Optional[np.ndarray] = None


@dataclass
class RenderConfig:
    format: Literal["decimal", "fraction"] = "decimal"
    precision: int = 6
    max_denominator: int = 1000


@dataclass(frozen=True)
class Action:
    kind: Literal["pivot", "undo", "redo"]
    row: Optional[int] = None
    col: Optional[int] = None

    @property
    def coordinate(self) -> Optional[Tuple[int, int]]:
        if self.row is None or self.col is None:
            return None
        return self.row, self.col


@dataclass
class RunConfig:
    actions: List[Action] = field(default_factory=list)
    tol: float = 0.0


@dataclass
class SessionConfig:
    tableau: TableauConfig
    render: RenderConfig
    run: RunConfig
    base_path: Path


def _load_array(path: Path) -> np.ndarray:
    if not path.exists():
        raise FileNotFoundError(path)
    if path.suffix == ".npy":
        return np.load(path)
    if path.suffix in {".csv", ".txt"}:
        return np.loadtxt(path, delimiter=",", ndmin=2)
    raise ValueError(f"unsupported matrix file type: {path}")


def expected_shape(form: Form, constraints: int, variables: int) -> Tuple[int, int]:
    rows = constraints + 1
    if form is Form.SIMPLEX:
        return rows, variables + constraints + 1
    return rows, variables + 1


def parse_action(spec: Any) -> Action:
    if isinstance(spec, str):
        name = spec.strip().lower()
        if name in {"undo", "redo"}:
            return Action(kind=name)
        parts = name.split()
        if len(parts) == 3 and parts[0] == "pivot":
            return Action(kind="pivot", row=int(parts[1]), col=int(parts[2]))
        raise ValueError(f"unknown action: {spec!r}")
    if isinstance(spec, dict) and set(spec) == {"pivot"}:
        coord = spec["pivot"]
        if not isinstance(coord, (list, tuple)) or len(coord) != 2:
            raise ValueError(f"pivot action needs [row, col], got {coord!r}")
        return Action(kind="pivot", row=int(coord[0]), col=int(coord[1]))
    raise ValueError(f"unknown action: {spec!r}")


def load_config(path: str | Path) -> SessionConfig:
    cfg_path = Path(path).expanduser().resolve()
    with cfg_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}

    base = cfg_path.parent

    tableau_raw = raw.get("tableau") or {}
    render_raw = raw.get("render") or {}
    run_raw = raw.get("run") or {}

    form = Form.parse(tableau_raw.get("form", "simplex"))
    constraints = int(tableau_raw["constraints"])
    variables = int(tableau_raw["variables"])

    cells: Optional[np.ndarray] = None
    if "cells_path" in tableau_raw:
        cells = _load_array(base / tableau_raw["cells_path"])
    elif tableau_raw.get("cells") is not None:
        cells = np.asarray(tableau_raw["cells"], dtype=float)
    if cells is not None:
        cells = np.asarray(cells, dtype=float)
        shape = expected_shape(form, constraints, variables)
        if cells.shape != shape:
            raise ValueError(
                f"{form.value} tableau with {constraints} constraints and "
                f"{variables} variables needs a {shape[0]}x{shape[1]} grid, got {cells.shape}"
            )

    tableau = TableauConfig(
        form=form,
        constraints=constraints,
        variables=variables,
        cells=cells,
    )

    render = RenderConfig(
        format=str(render_raw.get("format", "decimal")),
        precision=int(render_raw.get("precision", 6)),
        max_denominator=int(render_raw.get("max_denominator", 1000)),
    )
    if render.format not in {"decimal", "fraction"}:
        raise ValueError(f"unsupported render format: {render.format}")

    run = RunConfig(
        actions=[parse_action(spec) for spec in run_raw.get("actions") or []],
        tol=float(run_raw.get("tol", 0.0)),
    )

    return SessionConfig(tableau=tableau, render=render, run=run, base_path=base)
