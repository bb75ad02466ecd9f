from __future__ import annotations

import json

import pytest

import project_config
from contracts.bundle import load_bundle, make_bundle, puzzle_digest, validate_bundle, write_bundle
from contracts.errors import BundleValidationError
from sudoku_generator import generate


@pytest.fixture(scope="module")
def result():
    return generate("easy", seed=314)


def test_bundle_validates(result):
    bundle = make_bundle(result)
    puzzle, solution = validate_bundle(bundle)
    assert puzzle == result.puzzle
    assert solution == result.solution
    assert bundle["difficulty"] == "easy"
    assert bundle["seed"] == 314
    assert bundle["digest"].startswith("sha256-")


def test_missing_field_is_a_schema_violation(result):
    bundle = make_bundle(result)
    del bundle["solution"]
    with pytest.raises(BundleValidationError) as excinfo:
        validate_bundle(bundle)
    assert excinfo.value.code == "schema-violation"


def test_clue_that_disagrees_with_solution_is_rejected(result):
    bundle = make_bundle(result)
    idx = next(i for i, ch in enumerate(bundle["puzzle"]) if ch != "0")
    wrong = str(int(bundle["puzzle"][idx]) % 9 + 1)
    bundle["puzzle"] = bundle["puzzle"][:idx] + wrong + bundle["puzzle"][idx + 1:]
    with pytest.raises(BundleValidationError) as excinfo:
        validate_bundle(bundle)
    assert excinfo.value.code == "invariant-violation"


def test_non_mapping_bundle_is_rejected():
    with pytest.raises(BundleValidationError):
        validate_bundle(["not", "a", "bundle"])


def test_write_and_load(tmp_path, result):
    path = write_bundle(make_bundle(result), tmp_path / "out" / "puzzle.json")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["type"] == "SudokuBundle"
    bundle, puzzle, _ = load_bundle(path)
    assert bundle["clues"] == puzzle.clue_count() == result.clues


SOLVED = (
    "123456789"
    "456789123"
    "789123456"
    "214365897"
    "365897214"
    "897214365"
    "531642978"
    "642978531"
    "978531642"
)


def _raw_bundle(puzzle: str, difficulty: str) -> dict:
    return {
        "type": "SudokuBundle",
        "schema_version": "1.0",
        "difficulty": difficulty,
        "seed": None,
        "clues": sum(1 for ch in puzzle if ch != "0"),
        "target_clues": 24,
        "puzzle": puzzle,
        "solution": SOLVED,
        "digest": puzzle_digest(puzzle, SOLVED),
        "created_at": "2026-01-01T00:00:00+00:00",
    }


def test_ambiguous_puzzle_is_rejected():
    # 1/2 in rows 0 and 3, columns 0 and 1 can be swapped
    cells = list(SOLVED)
    for idx in (0, 1, 27, 28):
        cells[idx] = "0"
    bundle = _raw_bundle("".join(cells), "hard")
    assert bundle["clues"] == 77
    with pytest.raises(BundleValidationError) as excinfo:
        validate_bundle(bundle)
    assert excinfo.value.code == "invariant-violation"
    assert "uniquely" in excinfo.value.detail


def test_single_hole_puzzle_is_accepted():
    bundle = _raw_bundle("0" + SOLVED[1:], "hard")
    puzzle, _ = validate_bundle(bundle)
    assert puzzle.clue_count() == 80


def test_clues_below_difficulty_minimum_are_rejected(result, tmp_path, monkeypatch):
    config_path = tmp_path / "config.toml"
    config_path.write_text("[generator.clues]\neasy = [60, 65]\n", encoding="utf-8")
    monkeypatch.setenv("SUDOKU_CONFIG", str(config_path))
    project_config.reload()
    try:
        with pytest.raises(BundleValidationError) as excinfo:
            validate_bundle(make_bundle(result))
        assert "minimum of 60" in excinfo.value.detail
    finally:
        monkeypatch.delenv("SUDOKU_CONFIG")
        project_config.reload()
