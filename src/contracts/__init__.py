"""Error types and grid checks shared by the engine and its front ends."""

from __future__ import annotations

from .errors import (
    BundleValidationError,
    GenerationFailedError,
    GridFormatError,
    InvalidGridError,
    SudokuError,
    ValidationIssue,
    ValidationReport,
)
from .validator import assert_valid, check_grid, is_solved

__all__ = [
    "BundleValidationError",
    "GenerationFailedError",
    "GridFormatError",
    "InvalidGridError",
    "SudokuError",
    "ValidationIssue",
    "ValidationReport",
    "assert_valid",
    "check_grid",
    "is_solved",
]
