"""Plotting utilities for pivot sessions."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from runner.session import StepRecord


def generate_plots(history: Iterable[StepRecord], out_dir: str | Path) -> list[Path]:
    records = list(history)
    if not records:
        return []
    out_path = Path(out_dir)
    out_path.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    steps = np.array([rec.step for rec in records], dtype=float)
    objective = np.array([rec.objective for rec in records], dtype=float)
    objective_rows = np.array([rec.cells[-1, :-1] for rec in records], dtype=float)

    plt.figure(figsize=(6, 4))
    plt.plot(steps, objective, marker="o", label="objective value")
    for rec in records:
        if rec.maximized:
            plt.axvline(rec.step, color="tab:green", alpha=0.2)
    plt.xlabel("step")
    plt.ylabel("objective value")
    plt.legend()
    plt.tight_layout()
    target = out_path / "objective.png"
    plt.savefig(target, dpi=150)
    plt.close()
    written.append(target)

    if objective_rows.size:
        plt.figure(figsize=(6, 4))
        for j in range(objective_rows.shape[1]):
            plt.plot(steps, objective_rows[:, j], label=f"col {j}")
        plt.axhline(0.0, color="black", linewidth=0.8)
        plt.xlabel("step")
        plt.ylabel("objective row entry")
        plt.legend(fontsize="small")
        plt.tight_layout()
        target = out_path / "objective_row.png"
        plt.savefig(target, dpi=150)
        plt.close()
        written.append(target)

    return written
