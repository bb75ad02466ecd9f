# sudoku_grid.py
# Fixed 9x9 cell container plus the structural helpers the search relies on:
# row-major empty-cell lookup and Fisher-Yates shuffles driven by an explicit rng.

from __future__ import annotations

import random
from typing import Iterator, List, Optional, Sequence, Tuple, TypeVar

from contracts.errors import GridFormatError

N = 9
BOX = 3
CELLS = N * N
UNASSIGNED = 0
DIGITS = tuple(range(1, N + 1))

T = TypeVar("T")


def _check_coords(row: int, col: int) -> None:
    if not (0 <= row < N and 0 <= col < N):
        raise IndexError(f"cell ({row}, {col}) is outside the 9x9 board")


def box_origin(row: int, col: int) -> Tuple[int, int]:
    """Top-left cell of the 3x3 box containing ``(row, col)``."""
    return row - row % BOX, col - col % BOX


class Grid:
    """A 9x9 Sudoku board stored as a flat row-major list of 81 ints.

    ``0`` marks an empty cell, ``1..9`` a placed digit. Cells are addressed as
    ``grid[row, col]``; coordinates and values are bounds-checked.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Optional[Sequence[int]] = None) -> None:
        if cells is None:
            self._cells: List[int] = [UNASSIGNED] * CELLS
            return
        if len(cells) != CELLS:
            raise GridFormatError(f"expected {CELLS} cells, got {len(cells)}")
        values = [int(v) for v in cells]
        for idx, v in enumerate(values):
            if not 0 <= v <= N:
                raise GridFormatError(f"cell {idx} holds {v}; values must be in 0..9")
        self._cells = values

    # ---------- constructors ----------

    @classmethod
    def empty(cls) -> "Grid":
        return cls()

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        if len(rows) != N or any(len(r) != N for r in rows):
            raise GridFormatError("rows must describe a 9x9 board")
        return cls([v for r in rows for v in r])

    @classmethod
    def from_string(cls, text: str) -> "Grid":
        """Parse 81 glyphs; ``0`` or ``.`` mark empty cells, whitespace is ignored."""
        s = "".join(text.split())
        if len(s) != CELLS:
            raise GridFormatError(f"expected {CELLS} glyphs, got {len(s)}")
        cells = []
        for k, ch in enumerate(s):
            if ch == ".":
                cells.append(UNASSIGNED)
            elif ch in "0123456789":
                cells.append(int(ch))
            else:
                raise GridFormatError(f"unexpected glyph {ch!r} at position {k}")
        return cls(cells)

    # ---------- cell access ----------

    def __getitem__(self, pos: Tuple[int, int]) -> int:
        row, col = pos
        _check_coords(row, col)
        return self._cells[row * N + col]

    def __setitem__(self, pos: Tuple[int, int], value: int) -> None:
        row, col = pos
        _check_coords(row, col)
        if not 0 <= value <= N:
            raise ValueError(f"digit {value} is outside 0..9")
        self._cells[row * N + col] = value

    def row(self, row: int) -> List[int]:
        _check_coords(row, 0)
        return self._cells[row * N:(row + 1) * N]

    def column(self, col: int) -> List[int]:
        _check_coords(0, col)
        return self._cells[col::N]

    def box(self, row: int, col: int) -> List[int]:
        _check_coords(row, col)
        br, bc = box_origin(row, col)
        return [self._cells[r * N + c] for r in range(br, br + BOX) for c in range(bc, bc + BOX)]

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        """Yield ``(row, col, value)`` in row-major order."""
        for idx, v in enumerate(self._cells):
            yield idx // N, idx % N, v

    # ---------- queries ----------

    def clue_count(self) -> int:
        return sum(1 for v in self._cells if v != UNASSIGNED)

    def is_full(self) -> bool:
        return UNASSIGNED not in self._cells

    def first_empty(self) -> Optional[Tuple[int, int]]:
        try:
            idx = self._cells.index(UNASSIGNED)
        except ValueError:
            return None
        return divmod(idx, N)

    def copy(self) -> "Grid":
        clone = Grid.__new__(Grid)
        clone._cells = self._cells[:]
        return clone

    def to_rows(self) -> List[List[int]]:
        return [self._cells[r * N:(r + 1) * N] for r in range(N)]

    def to_string(self) -> str:
        return "".join(str(v) for v in self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self.to_string()!r})"


# ---------- search helpers ----------

def find_unassigned(grid: Grid) -> Optional[Tuple[int, int]]:
    """First empty cell in row-major order, or ``None`` when the grid is full."""
    return grid.first_empty()


def shuffled(values: Sequence[T], rng: random.Random) -> List[T]:
    """Fisher-Yates: walk i from the end down to 1 and swap with j in [0, i]."""
    out: List[T] = list(values)
    for i in range(len(out) - 1, 0, -1):
        j = rng.randint(0, i)
        out[i], out[j] = out[j], out[i]
    return out


def shuffled_digits(rng: random.Random) -> List[int]:
    """A fresh uniformly random ordering of the digits 1..9."""
    return shuffled(DIGITS, rng)


__all__ = [
    "BOX",
    "CELLS",
    "DIGITS",
    "Grid",
    "N",
    "UNASSIGNED",
    "box_origin",
    "find_unassigned",
    "shuffled",
    "shuffled_digits",
]
