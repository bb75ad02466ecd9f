# sudoku_solver.py
# Randomized depth-first backtracking: single-completion solver and the bounded
# solution counter used to test puzzle uniqueness.

from __future__ import annotations

import logging
import random
from typing import Optional

from sudoku_grid import UNASSIGNED, Grid, find_unassigned, shuffled_digits
from sudoku_rules import is_safe

_LOGGER = logging.getLogger(__name__)

DEFAULT_SOLUTION_LIMIT = 2


def _resolve_rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


# ---------- Solver ----------

def _backtrack(grid: Grid, rng: random.Random) -> bool:
    cell = find_unassigned(grid)
    if cell is None:
        return True
    row, col = cell
    for digit in shuffled_digits(rng):
        if is_safe(grid, row, col, digit):
            grid[row, col] = digit
            if _backtrack(grid, rng):
                return True
            grid[row, col] = UNASSIGNED
    return False


def solve(grid: Grid, rng: Optional[random.Random] = None) -> bool:
    """Complete ``grid`` in place.

    Returns ``False`` when no completion exists; the grid is then left exactly
    as it was passed in. Digit order is shuffled at every node, so repeated
    calls on the same partial grid may produce different completions.
    """
    return _backtrack(grid, _resolve_rng(rng))


def fill_grid(grid: Grid, rng: random.Random) -> bool:
    """Fill an (empty) grid into a full valid solution with randomized digits."""
    return _backtrack(grid, rng)


def solve_copy(grid: Grid, rng: Optional[random.Random] = None) -> Optional[Grid]:
    """Solve a private copy of ``grid`` and return it, or ``None`` if unsolvable."""
    work = grid.copy()
    if solve(work, rng):
        return work
    _LOGGER.debug("no completion exists for %s", grid.to_string())
    return None


# ---------- Solution counter (count up to limit) ----------

def count_solutions(
    grid: Grid,
    limit: int = DEFAULT_SOLUTION_LIMIT,
    rng: Optional[random.Random] = None,
) -> int:
    """Count completions of ``grid``, stopping once ``limit`` is reached.

    With the default ``limit=2`` the result reads as: 0 unsolvable, 1 unique,
    2 ambiguous. The search runs on a private copy; the caller's grid is
    never touched.
    """
    if limit < 1:
        raise ValueError("limit must be a positive integer")
    rnd = _resolve_rng(rng)
    g = grid.copy()
    count = 0

    def dfs() -> None:
        nonlocal count
        if count >= limit:
            return
        cell = find_unassigned(g)
        if cell is None:
            count += 1
            return
        row, col = cell
        for digit in shuffled_digits(rnd):
            if is_safe(g, row, col, digit):
                g[row, col] = digit
                dfs()
                g[row, col] = UNASSIGNED
                if count >= limit:
                    return

    dfs()
    return count


def has_unique_solution(grid: Grid) -> bool:
    return count_solutions(grid, DEFAULT_SOLUTION_LIMIT) == 1


__all__ = [
    "DEFAULT_SOLUTION_LIMIT",
    "count_solutions",
    "fill_grid",
    "has_unique_solution",
    "solve",
    "solve_copy",
]
