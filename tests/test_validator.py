from __future__ import annotations

import pytest

from contracts import InvalidGridError, assert_valid, check_grid, is_solved
from sudoku_grid import Grid

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


def test_solved_grid_passes():
    report = check_grid(Grid.from_string(SOLVED), require_full=True)
    assert report.ok
    assert report.errors == []
    assert is_solved(Grid.from_string(SOLVED))


def test_partial_grid_is_valid_but_not_solved():
    grid = Grid.from_string(SOLVED)
    grid[0, 0] = 0
    assert check_grid(grid).ok
    report = check_grid(grid, require_full=True)
    assert [issue.code for issue in report.errors] == ["grid.incomplete"]
    assert not is_solved(grid)


def test_duplicates_are_reported_per_unit():
    grid = Grid.empty()
    grid[0, 0] = 5
    grid[0, 8] = 5
    grid[8, 0] = 5
    report = check_grid(grid)
    codes = {(issue.code, issue.path) for issue in report.errors}
    assert ("row.duplicate", "$.rows[0]") in codes
    assert ("col.duplicate", "$.cols[0]") in codes
    assert not report.ok


def test_box_duplicate():
    grid = Grid.empty()
    grid[3, 3] = 2
    grid[5, 5] = 2
    report = check_grid(grid)
    assert [(i.code, i.path) for i in report.errors] == [("box.duplicate", "$.boxes[4]")]


def test_sparse_grid_warns():
    grid = Grid.empty()
    grid[0, 0] = 1
    report = check_grid(grid)
    assert report.ok
    assert [w.code for w in report.warnings] == ["grid.few_clues"]


def test_assert_valid_raises_with_report():
    grid = Grid.empty()
    grid[1, 1] = 3
    grid[1, 7] = 3
    with pytest.raises(InvalidGridError) as excinfo:
        assert_valid(grid)
    assert excinfo.value.report.errors[0].code == "row.duplicate"
