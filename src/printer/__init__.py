"""Renderers for Sudoku grids: boxed ASCII text and a matplotlib PDF page."""

from __future__ import annotations

from .text import SEPARATOR, format_grid

__all__ = ["SEPARATOR", "format_grid"]
