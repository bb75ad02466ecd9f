"""Append-only JSONL record of generated puzzles, one file per UTC day."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from sudoku_generator import GeneratedPuzzle

__all__ = ["append_event", "iter_events", "log_path", "make_record"]

EVENT_NAME = "puzzle.generated"


def log_path(base_dir: str | Path, when: Optional[datetime] = None) -> Path:
    """File that holds the records of the day ``when`` (default: today, UTC)."""

    stamp = (when or datetime.now(timezone.utc)).strftime("%Y%m%d")
    return Path(base_dir) / f"generation-{stamp}.jsonl"


def make_record(result: GeneratedPuzzle, *, elapsed_ms: int, solved: Optional[bool] = None) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "event": EVENT_NAME,
        "ts": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
        "difficulty": result.difficulty.value,
        "seed": result.seed,
        "clues": result.clues,
        "target_clues": result.target_clues,
        "exhausted": result.exhausted,
        "fill_attempts": result.fill_attempts,
        "time_ms": elapsed_ms,
        "puzzle": result.puzzle.to_string(),
    }
    if solved is not None:
        record["solved"] = solved
    return record


def append_event(
    base_dir: str | Path,
    result: GeneratedPuzzle,
    *,
    elapsed_ms: int,
    solved: Optional[bool] = None,
) -> Path:
    """Append the record for ``result`` under ``base_dir`` and return the file."""

    path = log_path(base_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    line = json.dumps(make_record(result, elapsed_ms=elapsed_ms, solved=solved), sort_keys=True)
    with path.open("a", encoding="utf-8") as handle:
        handle.write(line + "\n")
    return path


def iter_events(base_dir: str | Path) -> Iterator[Dict[str, Any]]:
    """Yield every record under ``base_dir``, oldest day first."""

    for path in sorted(Path(base_dir).glob("generation-*.jsonl")):
        with path.open("r", encoding="utf-8") as handle:
            for line in handle:
                if line.strip():
                    yield json.loads(line)
