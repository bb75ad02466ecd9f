#!/usr/bin/env python3
"""Interactive Sudoku generator and solver."""

from __future__ import annotations

import argparse
import logging
import random
import re
import sys
import time
from typing import List, Optional

import event_log
from contracts.bundle import make_bundle, write_bundle
from contracts.errors import SudokuError
from printer.text import format_grid
from project_config import get_section
from sudoku_generator import generate
from sudoku_solver import solve_copy

_LOGGER = logging.getLogger("sudoku_cli")

BANNER = "=== Sudoku Generator & Solver (Python / Backtracking) ==="
SOLVE_CHOICE = 1
_LEADING_INT = re.compile(r"[+-]?[0-9]+")


def _configure_logging(level_name: Optional[str]) -> None:
    name = level_name or str(get_section("logging.level", "WARNING"))
    level = getattr(logging, name.upper(), None)
    if not isinstance(level, int):
        raise SystemExit(f"Unknown log level: {name}")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _event_log_dir(cli_value: Optional[str]) -> Optional[str]:
    if cli_value:
        return cli_value
    configured = get_section("logging.event_log_dir", "")
    return str(configured) if configured else None


def _read_token(prompt: str) -> str:
    """First whitespace-separated token, skipping blank lines.

    Raises :class:`EOFError` when input ends before a token arrives.
    """
    line = input(prompt)
    while True:
        tokens = line.split()
        if tokens:
            return tokens[0]
        line = input()


def _read_difficulty() -> Optional[str]:
    try:
        return _read_token("Choose difficulty [easy | medium | hard]: ")
    except EOFError:
        return None


def _read_choice() -> int:
    print("\nOptions:")
    print("  1) Solve and show solution")
    print("  2) Exit")
    try:
        token = _read_token("Enter choice: ")
    except EOFError:
        return 0
    # only the leading integer counts: "1 extra" and "1st" both mean 1
    match = _LEADING_INT.match(token)
    return int(match.group()) if match else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a uniquely solvable Sudoku and optionally solve it.")
    parser.add_argument(
        "--difficulty",
        default=None,
        help="easy, medium or hard; anything else means medium. Prompted for when omitted.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible puzzle.")
    parser.add_argument("--solve", action="store_true", help="Show the solution without the menu.")
    parser.add_argument("--json", dest="json_path", default=None, help="Write the puzzle bundle to this JSON file.")
    parser.add_argument("--pdf", dest="pdf_path", default=None, help="Write puzzle and solution pages to this PDF.")
    parser.add_argument("--event-log", default=None, help="Directory for JSONL generation events.")
    parser.add_argument("--log-level", default=None, help="Logging level (default from config).")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    log_dir = _event_log_dir(args.event_log)

    print(BANNER)
    difficulty = args.difficulty
    if difficulty is None:
        difficulty = _read_difficulty()
        if difficulty is None:
            print("Input error.", file=sys.stderr)
            return 1

    rng = random.Random(args.seed)
    started = time.monotonic()
    try:
        result = generate(difficulty, rng, seed=args.seed)
    except SudokuError as exc:
        print(f"Generation failed: {exc}", file=sys.stderr)
        return 1
    elapsed_ms = int((time.monotonic() - started) * 1000)

    print(f"\nGenerated {difficulty} puzzle:")
    print(format_grid(result.puzzle))

    if args.json_path:
        path = write_bundle(make_bundle(result), args.json_path)
        _LOGGER.info("bundle written to %s", path)
    if args.pdf_path:
        from printer.pdf import export_pdf

        path = export_pdf(args.pdf_path, result.puzzle, result.solution, title=f"Sudoku ({result.difficulty.value})")
        _LOGGER.info("pdf written to %s", path)

    choice = SOLVE_CHOICE if args.solve else _read_choice()
    solved: Optional[bool] = None
    if choice == SOLVE_CHOICE:
        work = solve_copy(result.puzzle, rng)
        solved = work is not None
        if work is not None:
            print("\nSolution:")
            print(format_grid(work))
        else:
            print("No solution found (unexpected for generated puzzles).")
    else:
        print("Goodbye!")

    if log_dir:
        event_log.append_event(log_dir, result, elapsed_ms=elapsed_ms, solved=solved)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
