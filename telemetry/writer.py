"""Telemetry writer producing JSON lines."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Mapping


def write_history(path: str | Path, records: Iterable[Mapping[str, object]]) -> int:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with target.open("w", encoding="utf-8") as handle:
        for record in records:
            handle.write(json.dumps(record, default=_json_fallback))
            handle.write("\n")
            count += 1
    return count


def read_history(path: str | Path) -> list[dict]:
    with Path(path).open("r", encoding="utf-8") as handle:
        return [json.loads(line) for line in handle if line.strip()]


def _json_fallback(obj):
    if hasattr(obj, "tolist"):
        return obj.tolist()
    if hasattr(obj, "value"):
        return obj.value
    raise TypeError(f"object of type {type(obj)!r} is not JSON serializable")
