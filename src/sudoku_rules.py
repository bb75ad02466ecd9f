"""Placement rules for classic 9x9 Sudoku."""

from __future__ import annotations

from sudoku_grid import UNASSIGNED, Grid


def used_in_row(grid: Grid, row: int, digit: int) -> bool:
    return digit in grid.row(row)


def used_in_col(grid: Grid, col: int, digit: int) -> bool:
    return digit in grid.column(col)


def used_in_box(grid: Grid, row: int, col: int, digit: int) -> bool:
    """``row``/``col`` may be any cell of the box."""
    return digit in grid.box(row, col)


def is_safe(grid: Grid, row: int, col: int, digit: int) -> bool:
    """Return ``True`` when ``digit`` may go into the empty cell ``(row, col)``.

    The digit must be absent from the row, the column and the 3x3 box, and the
    cell itself must still be empty. Callers pass row/col in 0..8 and digit in
    1..9; nothing is mutated.
    """
    return (
        not used_in_row(grid, row, digit)
        and not used_in_col(grid, col, digit)
        and not used_in_box(grid, row, col, digit)
        and grid[row, col] == UNASSIGNED
    )


__all__ = ["is_safe", "used_in_box", "used_in_col", "used_in_row"]
