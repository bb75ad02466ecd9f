from __future__ import annotations

import pytest

from printer import SEPARATOR, format_grid
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


def test_format_grid_frame():
    grid = Grid.from_string(SOLVED)
    grid[0, 1] = 0
    lines = format_grid(grid).splitlines()
    assert len(lines) == 13
    assert lines[0] == lines[4] == lines[8] == lines[12] == SEPARATOR == "+-------+-------+-------+"
    assert lines[1] == "| 1 . 3 | 4 5 6 | 7 8 9 |"
    assert lines[11] == "| 9 7 8 | 5 3 1 | 6 4 2 |"
    assert all(len(line) == len(SEPARATOR) for line in lines)


def test_empty_grid_renders_dots():
    lines = format_grid(Grid.empty()).splitlines()
    assert lines[5] == "| . . . | . . . | . . . |"


def test_export_pdf(tmp_path):
    pytest.importorskip("matplotlib")
    from printer.pdf import export_pdf

    solution = Grid.from_string(SOLVED)
    puzzle = solution.copy()
    puzzle[4, 4] = 0
    path = export_pdf(tmp_path / "pack.pdf", puzzle, solution, title="Test")
    assert path.read_bytes().startswith(b"%PDF")
