"""Fixed-width ASCII rendering of a 9x9 grid."""

from __future__ import annotations

from typing import List

from sudoku_grid import Grid

SEPARATOR = "+-------+-------+-------+"


def format_grid(grid: Grid) -> str:
    """Render ``grid`` inside a 3x3 box frame, ``.`` for empty cells."""
    lines: List[str] = [SEPARATOR]
    parts: List[str] = []
    for r, c, v in grid.cells():
        if c == 0:
            parts = ["|"]
        parts.append(str(v) if v else ".")
        if c % 3 == 2:
            parts.append("|")
        if c == 8:
            lines.append(" ".join(parts))
            if r % 3 == 2:
                lines.append(SEPARATOR)
    return "\n".join(lines)


__all__ = ["SEPARATOR", "format_grid"]
