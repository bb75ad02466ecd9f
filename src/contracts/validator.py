"""Structural checks for Sudoku grids."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Iterable, List

from .errors import InvalidGridError, ValidationIssue, ValidationReport, make_error, make_warning

if TYPE_CHECKING:  # pragma: no cover
    from sudoku_grid import Grid

# No 9x9 puzzle with fewer givens has a unique solution.
MIN_UNIQUE_CLUES = 17


def _duplicates(values: Iterable[int]) -> List[int]:
    counts = Counter(v for v in values if v)
    return sorted(d for d, n in counts.items() if n > 1)


def _unit_issues(grid: "Grid") -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for r in range(9):
        for d in _duplicates(grid.row(r)):
            issues.append(make_error("row.duplicate", f"digit {d} repeats in row {r}", f"$.rows[{r}]"))
    for c in range(9):
        for d in _duplicates(grid.column(c)):
            issues.append(make_error("col.duplicate", f"digit {d} repeats in column {c}", f"$.cols[{c}]"))
    for b in range(9):
        br, bc = (b // 3) * 3, (b % 3) * 3
        for d in _duplicates(grid.box(br, bc)):
            issues.append(make_error("box.duplicate", f"digit {d} repeats in box {b}", f"$.boxes[{b}]"))
    return issues


def check_grid(grid: "Grid", *, require_full: bool = False) -> ValidationReport:
    """Check row / column / box uniqueness of every placed digit.

    ``require_full`` additionally reports empty cells as errors, which turns the
    check into "is this a finished solution".
    """
    errors = _unit_issues(grid)
    warnings: List[ValidationIssue] = []

    clues = grid.clue_count()
    if require_full and clues < 81:
        errors.append(make_error("grid.incomplete", f"{81 - clues} empty cell(s) remain", "$.cells"))
    elif 0 < clues < MIN_UNIQUE_CLUES:
        warnings.append(
            make_warning("grid.few_clues", f"{clues} clues cannot pin down a unique solution", "$.cells")
        )

    return ValidationReport(ok=not errors, errors=errors, warnings=warnings)


def is_solved(grid: "Grid") -> bool:
    """``True`` when every row, column and box holds 1..9 exactly once."""
    return check_grid(grid, require_full=True).ok


def assert_valid(grid: "Grid", *, require_full: bool = False) -> ValidationReport:
    """Like :func:`check_grid` but raises :class:`InvalidGridError` on errors."""
    report = check_grid(grid, require_full=require_full)
    if not report.ok:
        raise InvalidGridError(report)
    return report


__all__ = ["MIN_UNIQUE_CLUES", "assert_valid", "check_grid", "is_solved"]
