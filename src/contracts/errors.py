"""Shared error types for the Sudoku engine and its collaborators."""

from __future__ import annotations


from dataclasses import dataclass, field
from typing import List, Optional

SEVERITY_ERROR = "ERROR"
SEVERITY_WARN = "WARN"


class SudokuError(RuntimeError):
    """Base class for every error raised on purpose by this project."""


class GridFormatError(SudokuError, ValueError):
    """Raised when a textual or nested grid cannot be decoded."""


class GenerationFailedError(SudokuError):
    """Raised when no complete solution could be built within the retry cap."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"could not fill an empty grid after {attempts} attempt(s)")


class BundleValidationError(SudokuError):
    """Exception raised when an export bundle fails validation."""

    def __init__(self, code: str, detail: Optional[str] = None) -> None:
        self.code = code
        self.detail = detail
        message = code if detail is None else f"{code}:{detail}"
        super().__init__(message)


class InvalidGridError(SudokuError):
    """Raised by :func:`contracts.validator.assert_valid` for conflicting grids."""

    def __init__(self, report: "ValidationReport") -> None:
        self.report = report
        first = report.errors[0] if report.errors else None
        message = "grid is invalid" if first is None else f"{first.code} at {first.path}: {first.msg}"
        super().__init__(message)


@dataclass(frozen=True)
class ValidationIssue:
    """Single finding produced by a grid rule check."""

    code: str
    msg: str
    path: str
    severity: str


@dataclass(frozen=True)
class ValidationReport:
    """Aggregate result of checking one grid."""

    ok: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)


def make_error(code: str, msg: str, path: str) -> ValidationIssue:
    """Construct an error-level :class:`ValidationIssue`."""

    return ValidationIssue(code=code, msg=msg, path=path, severity=SEVERITY_ERROR)


def make_warning(code: str, msg: str, path: str) -> ValidationIssue:
    """Construct a warning-level :class:`ValidationIssue`."""

    return ValidationIssue(code=code, msg=msg, path=path, severity=SEVERITY_WARN)


__all__ = [
    "SEVERITY_ERROR",
    "SEVERITY_WARN",
    "BundleValidationError",
    "GenerationFailedError",
    "GridFormatError",
    "InvalidGridError",
    "SudokuError",
    "ValidationIssue",
    "ValidationReport",
    "make_error",
    "make_warning",
]
