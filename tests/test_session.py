from pathlib import Path
import math
import sys

import numpy as np
import pytest
import yaml

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from algebra.pivots import Form
from cli import main
from config import Action, load_config, parse_action
from plots.metrics import generate_plots
from render import format_number
from runner.session import build_tableau, run_session
from telemetry.writer import read_history, write_history

WORKED_CELLS = [
    [2.0, 1.0, 1.0, 1.0, 0.0, 0.0, 14.0],
    [4.0, 2.0, 3.0, 0.0, 1.0, 0.0, 28.0],
    [2.0, 5.0, 5.0, 0.0, 0.0, 1.0, 30.0],
    [-1.0, -2.0, 1.0, 0.0, 0.0, 0.0, 0.0],
]


def _write_session(tmp_path: Path, **overrides) -> Path:
    payload = {
        "tableau": {
            "form": "simplex",
            "constraints": 3,
            "variables": 3,
            "cells": WORKED_CELLS,
        },
        "render": {"format": "fraction"},
        "run": {
            "tol": 1e-12,
            "actions": [
                {"pivot": [2, 1]},
                {"pivot": [0, 0]},
                "undo",
                "redo",
                "redo",
            ],
        },
    }
    for key, value in overrides.items():
        payload[key] = value
    path = tmp_path / "session.yaml"
    path.write_text(yaml.safe_dump(payload), encoding="utf-8")
    return path


def test_load_config_parses_sections(tmp_path):
    cfg = load_config(_write_session(tmp_path))
    assert cfg.tableau.form is Form.SIMPLEX
    assert cfg.tableau.cells.shape == (4, 7)
    assert cfg.render.format == "fraction"
    assert cfg.run.tol == pytest.approx(1e-12)
    assert cfg.run.actions[0] == Action(kind="pivot", row=2, col=1)
    assert [a.kind for a in cfg.run.actions] == ["pivot", "pivot", "undo", "redo", "redo"]
    assert cfg.base_path == tmp_path.resolve()


def test_load_config_reads_cells_from_csv(tmp_path):
    np.savetxt(tmp_path / "grid.csv", np.array([[1.0, 1.0, 4.0], [1.0, 2.0, 0.0]]), delimiter=",")
    path = _write_session(
        tmp_path,
        tableau={"form": "tucker", "constraints": 1, "variables": 2, "cells_path": "grid.csv"},
    )
    cfg = load_config(path)
    assert cfg.tableau.form is Form.TUCKER
    np.testing.assert_array_equal(cfg.tableau.cells, [[1.0, 1.0, 4.0], [1.0, 2.0, 0.0]])


def test_load_config_rejects_wrong_shape(tmp_path):
    path = _write_session(
        tmp_path,
        tableau={"form": "tucker", "constraints": 3, "variables": 3, "cells": WORKED_CELLS},
    )
    with pytest.raises(ValueError):
        load_config(path)


def test_parse_action_variants():
    assert parse_action("undo") == Action(kind="undo")
    assert parse_action("pivot 1 2") == Action(kind="pivot", row=1, col=2)
    assert parse_action({"pivot": [0, 3]}).coordinate == (0, 3)
    with pytest.raises(ValueError):
        parse_action("jump")
    with pytest.raises(ValueError):
        parse_action({"pivot": [1]})


def test_run_session_records_every_step(tmp_path):
    cfg = load_config(_write_session(tmp_path))
    tableau = build_tableau(cfg)
    history = run_session(cfg, tableau)

    assert [rec.action for rec in history] == ["start", "pivot", "pivot", "undo", "redo", "redo"]
    assert [rec.applied for rec in history] == [True, True, True, True, True, False]
    assert [rec.cursor for rec in history] == [0, 1, 2, 1, 2, 2]
    assert history[-1].maximized
    assert history[-1].objective == pytest.approx(13.0)
    assert not history[0].maximized
    np.testing.assert_array_equal(history[-1].cells, tableau.cells)


def test_history_round_trips_through_json_lines(tmp_path):
    cfg = load_config(_write_session(tmp_path))
    history = run_session(cfg)
    target = tmp_path / "out" / "history.jsonl"
    assert write_history(target, (rec.to_dict() for rec in history)) == len(history)

    rows = read_history(target)
    assert len(rows) == len(history)
    assert rows[1]["row"] == 2 and rows[1]["col"] == 1
    assert rows[-1]["applied"] is False
    assert len(rows[0]["cells"]) == 4


def test_generate_plots_writes_images(tmp_path):
    cfg = load_config(_write_session(tmp_path))
    written = generate_plots(run_session(cfg), tmp_path / "plots")
    assert {path.name for path in written} == {"objective.png", "objective_row.png"}
    assert all(path.stat().st_size > 0 for path in written)
    assert generate_plots([], tmp_path / "empty") == []


def test_cli_prints_tableau_and_writes_outputs(tmp_path, capsys):
    path = _write_session(tmp_path)
    out_dir = tmp_path / "out"
    assert main(["--config", str(path), "--out", str(out_dir)]) == 0

    printed = capsys.readouterr().out
    assert "maximized after 2 pivot(s)" in printed
    assert "not maximized" not in printed
    assert "| 13" in printed
    assert "5/8" in printed
    assert (out_dir / "history.jsonl").exists()
    assert (out_dir / "plots" / "objective.png").exists()


def test_cli_reports_tableau_errors(tmp_path, capsys):
    path = _write_session(tmp_path, run={"actions": [{"pivot": [3, 0]}]})
    assert main(["--config", str(path), "--format", "decimal"]) == 1
    assert "objective row" in capsys.readouterr().err


@pytest.mark.parametrize(
    "value, fmt, expected",
    [
        (0.0, "decimal", "0"),
        (-0.0, "fraction", "0"),
        (3.0, "decimal", "3"),
        (-12.0, "fraction", "-12"),
        (0.5, "decimal", "0.5"),
        (0.5, "fraction", "1/2"),
        (-0.2, "fraction", "-1/5"),
        (1.0 / 3.0, "fraction", "1/3"),
        (math.pi, "fraction", "3.14159"),
    ],
)
def test_format_number(value, fmt, expected):
    assert format_number(value, fmt) == expected


def test_format_number_precision_and_validation():
    assert format_number(1.0 / 3.0, precision=3) == "0.333"
    with pytest.raises(ValueError):
        format_number(1.5, "roman")
