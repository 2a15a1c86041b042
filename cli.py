"""Command-line interface for scripted pivot sessions."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from config import load_config
from errors import TableauError
from plots.metrics import generate_plots
from runner.session import build_tableau, run_session
from telemetry.writer import write_history


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pivot a Simplex or Tucker tableau by hand")
    parser.add_argument(
        "--config",
        required=True,
        help="Path to YAML session file.",
    )
    parser.add_argument(
        "--out",
        default=None,
        help="Output directory for history and plots.",
    )
    parser.add_argument(
        "--format",
        choices=["decimal", "fraction"],
        default=None,
        help="Override the number format used to print the tableau.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    cfg = load_config(args.config)
    if args.format is not None:
        cfg.render.format = args.format

    tableau = build_tableau(cfg)
    try:
        history = run_session(cfg, tableau)
    except TableauError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    rendered = tableau.render(
        cfg.render.format,
        precision=cfg.render.precision,
        max_denominator=cfg.render.max_denominator,
    )
    print(rendered.to_text(), end="")
    status = "maximized" if tableau.is_maximized(cfg.run.tol) else "not maximized"
    print(f"{status} after {tableau.cursor} pivot(s)")

    if args.out is not None:
        out_dir = Path(args.out)
        write_history(out_dir / "history.jsonl", (record.to_dict() for record in history))
        generate_plots(history, out_dir / "plots")
    return 0


if __name__ == "__main__":
    sys.exit(main())
