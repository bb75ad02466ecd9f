# sudoku_generator.py
# Build a full solution with randomized backtracking, then carve clues one cell
# at a time, rolling back any removal that breaks solution uniqueness.

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from contracts.errors import GenerationFailedError
from project_config import get_config
from sudoku_grid import CELLS, N, UNASSIGNED, Grid, shuffled
from sudoku_solver import count_solutions, fill_grid

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_FILL_ATTEMPTS = 3


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


DEFAULT_CLUE_RANGES: Dict[Difficulty, Tuple[int, int]] = {
    Difficulty.EASY: (45, 50),
    Difficulty.MEDIUM: (34, 39),
    Difficulty.HARD: (24, 29),
}
FALLBACK_DIFFICULTY = Difficulty.MEDIUM


@dataclass(frozen=True)
class GeneratedPuzzle:
    """A carved puzzle together with the solution it was carved from."""

    difficulty: Difficulty
    puzzle: Grid
    solution: Grid
    target_clues: int
    fill_attempts: int
    exhausted: bool
    seed: Optional[int] = None

    @property
    def clues(self) -> int:
        return self.puzzle.clue_count()


# ---------- Config ----------

def _generator_config() -> Dict[str, Any]:
    section = get_config().get("generator", {})
    return section if isinstance(section, dict) else {}


def _max_fill_attempts() -> int:
    value = _generator_config().get("max_fill_attempts", DEFAULT_MAX_FILL_ATTEMPTS)
    try:
        return max(1, int(value))
    except (TypeError, ValueError):
        _LOGGER.warning("ignoring invalid generator.max_fill_attempts=%r", value)
        return DEFAULT_MAX_FILL_ATTEMPTS


def _configured_range(level: Difficulty) -> Tuple[int, int]:
    default = DEFAULT_CLUE_RANGES[level]
    clues_cfg = _generator_config().get("clues", {})
    if not isinstance(clues_cfg, dict) or level.value not in clues_cfg:
        return default
    raw = clues_cfg[level.value]
    try:
        lo, hi = (int(v) for v in raw)
    except (TypeError, ValueError):
        _LOGGER.warning("ignoring invalid clue range for %s: %r", level.value, raw)
        return default
    if not 0 <= lo <= hi <= CELLS:
        _LOGGER.warning("ignoring out-of-bounds clue range for %s: %r", level.value, raw)
        return default
    return lo, hi


# ---------- Difficulty ----------

def parse_difficulty(token: str | Difficulty) -> Difficulty:
    """Map a token to a :class:`Difficulty`; unknown tokens become medium.

    Matching is case-sensitive, so ``"Hard"`` falls back to medium as well.
    """
    if isinstance(token, Difficulty):
        return token
    for level in Difficulty:
        if token == level.value:
            return level
    _LOGGER.debug("unknown difficulty %r, using %s", token, FALLBACK_DIFFICULTY.value)
    return FALLBACK_DIFFICULTY


def clue_range(token: str | Difficulty) -> Tuple[int, int]:
    """Inclusive ``(min, max)`` clue count for a difficulty token."""
    return _configured_range(parse_difficulty(token))


# ---------- Full solution ----------

def generate_full_solution(rng: random.Random) -> Tuple[Grid, int]:
    """Fill an empty grid, retrying from scratch up to the configured cap.

    Returns the solution and the number of attempts it took.
    """
    attempts = _max_fill_attempts()
    for attempt in range(1, attempts + 1):
        grid = Grid.empty()
        if fill_grid(grid, rng):
            return grid, attempt
        _LOGGER.warning("fill attempt %d/%d failed, retrying from an empty grid", attempt, attempts)
    raise GenerationFailedError(attempts)


# ---------- Carving ----------

def carve_unique(grid: Grid, to_remove: int, rng: random.Random) -> int:
    """Clear up to ``to_remove`` cells of ``grid`` in place, keeping one solution.

    Positions are visited in a random order; each removal is kept only when the
    grid still has exactly one completion. Returns how many cells were cleared,
    which is below ``to_remove`` when the visiting order ran out first.
    """
    removed = 0
    for pos in shuffled(range(CELLS), rng):
        if removed >= to_remove:
            break
        r, c = divmod(pos, N)
        backup = grid[r, c]
        if backup == UNASSIGNED:
            continue
        grid[r, c] = UNASSIGNED
        if count_solutions(grid, 2, rng) == 1:
            removed += 1
        else:
            grid[r, c] = backup
    return removed


# ---------- Top-level generation ----------

def generate(
    difficulty: str | Difficulty = Difficulty.MEDIUM,
    rng: Optional[random.Random] = None,
    *,
    seed: Optional[int] = None,
) -> GeneratedPuzzle:
    """Generate a uniquely solvable puzzle for ``difficulty``.

    Pass either an ``rng`` or a ``seed``; with neither, a fresh unseeded
    generator is used.
    """
    if rng is None:
        rng = random.Random(seed)
    level = parse_difficulty(difficulty)

    solution, attempts = generate_full_solution(rng)

    lo, hi = _configured_range(level)
    clues = rng.randint(lo, hi)
    to_remove = CELLS - clues

    puzzle = solution.copy()
    removed = carve_unique(puzzle, to_remove, rng)
    exhausted = removed < to_remove
    if exhausted:
        _LOGGER.info(
            "carving stopped early: removed %d of %d cells (%s, %d clues kept)",
            removed, to_remove, level.value, CELLS - removed,
        )
    _LOGGER.debug("generated %s puzzle with %d clues (target %d)", level.value, CELLS - removed, clues)

    return GeneratedPuzzle(
        difficulty=level,
        puzzle=puzzle,
        solution=solution,
        target_clues=clues,
        fill_attempts=attempts,
        exhausted=exhausted,
        seed=seed,
    )


def generate_puzzle(
    difficulty: str | Difficulty = Difficulty.MEDIUM,
    rng: Optional[random.Random] = None,
) -> Grid:
    """Return only the carved puzzle grid."""
    return generate(difficulty, rng).puzzle


__all__ = [
    "DEFAULT_CLUE_RANGES",
    "Difficulty",
    "FALLBACK_DIFFICULTY",
    "GeneratedPuzzle",
    "carve_unique",
    "clue_range",
    "generate",
    "generate_full_solution",
    "generate_puzzle",
    "parse_difficulty",
]
