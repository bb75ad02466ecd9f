"""JSON export bundle for a generated puzzle and its solution."""

from __future__ import annotations

import hashlib
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Tuple

import jsonschema

from sudoku_generator import GeneratedPuzzle, clue_range
from sudoku_grid import Grid
from sudoku_solver import count_solutions

from .errors import BundleValidationError
from .validator import is_solved

BUNDLE_TYPE = "SudokuBundle"
SCHEMA_VERSION = "1.0"

BUNDLE_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": BUNDLE_TYPE,
    "type": "object",
    "required": [
        "type",
        "schema_version",
        "difficulty",
        "clues",
        "target_clues",
        "puzzle",
        "solution",
        "digest",
        "created_at",
    ],
    "properties": {
        "type": {"const": BUNDLE_TYPE},
        "schema_version": {"const": SCHEMA_VERSION},
        "difficulty": {"enum": ["easy", "medium", "hard"]},
        "seed": {"type": ["integer", "null"]},
        "clues": {"type": "integer", "minimum": 0, "maximum": 81},
        "target_clues": {"type": "integer", "minimum": 0, "maximum": 81},
        "puzzle": {"type": "string", "pattern": "^[0-9]{81}$"},
        "solution": {"type": "string", "pattern": "^[1-9]{81}$"},
        "digest": {"type": "string", "pattern": "^sha256-[0-9a-f]{64}$"},
        "created_at": {"type": "string", "format": "date-time"},
    },
    "additionalProperties": False,
}


def puzzle_digest(puzzle: str, solution: str) -> str:
    digest = hashlib.sha256(f"{puzzle}|{solution}".encode("utf-8")).hexdigest()
    return f"sha256-{digest}"


def make_bundle(result: GeneratedPuzzle) -> Dict[str, Any]:
    """Serialise a generation result into a bundle dictionary."""

    puzzle = result.puzzle.to_string()
    solution = result.solution.to_string()
    return {
        "type": BUNDLE_TYPE,
        "schema_version": SCHEMA_VERSION,
        "difficulty": result.difficulty.value,
        "seed": result.seed,
        "clues": result.clues,
        "target_clues": result.target_clues,
        "puzzle": puzzle,
        "solution": solution,
        "digest": puzzle_digest(puzzle, solution),
        "created_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
    }


def _invariant(condition: bool, detail: str) -> None:
    if not condition:
        raise BundleValidationError("invariant-violation", detail)


def validate_bundle(bundle: Any) -> Tuple[Grid, Grid]:
    """Validate ``bundle`` against the schema and its grid invariants.

    Returns the decoded ``(puzzle, solution)`` grids.
    """
    if not isinstance(bundle, dict):
        raise BundleValidationError("invalid-bundle", "bundle must be an object")

    validator_cls = jsonschema.validators.validator_for(BUNDLE_SCHEMA)
    try:
        validator_cls(BUNDLE_SCHEMA).validate(bundle)
    except jsonschema.ValidationError as exc:
        raise BundleValidationError("schema-violation", exc.message) from exc

    puzzle = Grid.from_string(bundle["puzzle"])
    solution = Grid.from_string(bundle["solution"])

    _invariant(is_solved(solution), "solution is not a valid completed grid")
    _invariant(
        all(v == 0 or v == solution[r, c] for r, c, v in puzzle.cells()),
        "puzzle clues disagree with the solution",
    )
    _invariant(puzzle.clue_count() == bundle["clues"], "clues does not match the puzzle")
    _invariant(
        bundle["digest"] == puzzle_digest(bundle["puzzle"], bundle["solution"]),
        "digest mismatch",
    )
    lo, _ = clue_range(bundle["difficulty"])
    # carving never goes below the range; it may stop above it
    _invariant(bundle["clues"] >= lo, f"{bundle['clues']} clues is below the {bundle['difficulty']} minimum of {lo}")
    _invariant(count_solutions(puzzle, 2) == 1, "puzzle is not uniquely solvable")
    return puzzle, solution


def write_bundle(bundle: Dict[str, Any], path: str | Path) -> Path:
    validate_bundle(bundle)
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(bundle, ensure_ascii=False, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return out


def load_bundle(path: str | Path) -> Tuple[Dict[str, Any], Grid, Grid]:
    bundle = json.loads(Path(path).read_text(encoding="utf-8"))
    puzzle, solution = validate_bundle(bundle)
    return bundle, puzzle, solution


__all__ = [
    "BUNDLE_SCHEMA",
    "BUNDLE_TYPE",
    "SCHEMA_VERSION",
    "load_bundle",
    "make_bundle",
    "puzzle_digest",
    "validate_bundle",
    "write_bundle",
]
