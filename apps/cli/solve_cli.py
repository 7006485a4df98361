"""Solve a Sudoku puzzle stored in a text file, print it, and write the solution next to the input."""

# solve_cli.py
# Usage:
#   python -m apps.cli.solve_cli puzzles/easy.txt
#   python -m apps.cli.solve_cli puzzles/easy.txt --json --no-write
#   python -m apps.cli.solve_cli puzzles/easy.txt --config solver.yaml
#
# The input file may use 'X' or '.' for blanks and any layout; non-digit
# characters are ignored. The solution goes to <name>.sln.txt.
#
# Exit status: 0 solved, 1 no solution, 2 invalid input, unreadable file or bad config.

from __future__ import annotations

import argparse
import json
import sys

import yaml

from solver.config import load_config
from solver.errors import ConstructionError
from solver.log_utils import log
from solver.puzzle_io import read_puzzle, solution_path, write_solution
from solver.sudoku import Sudoku
from types_sudoku import SolveOutcome

EXIT_SOLVED = 0
EXIT_NO_SOLUTION = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve a 9x9 Sudoku puzzle file.")
    ap.add_argument("puzzle", help="path to the puzzle text file")
    ap.add_argument("--config", type=str, default=None, help="YAML config file")
    ap.add_argument("--no-write", dest="write_solution", action="store_false", default=None,
                    help="do not write the .sln.txt file")
    ap.add_argument("--json", action="store_true", help="print a JSON payload instead of grids")
    ap.add_argument("--quiet", action="store_true", default=None, help="suppress progress logs")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_config(args.config, write_solution=args.write_solution, quiet=args.quiet)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Cannot load config: {e}", file=sys.stderr)
        return EXIT_INVALID
    quiet = bool(cfg.quiet)

    try:
        text = read_puzzle(args.puzzle, cfg.blank_markers)
        puzzle = Sudoku(text)
    except OSError as e:
        print(f"Cannot read puzzle file: {e}", file=sys.stderr)
        return EXIT_INVALID
    except ConstructionError as e:
        print(f"Invalid puzzle ({e.kind}): {e}", file=sys.stderr)
        return EXIT_INVALID

    given = puzzle.render(formatted=True, blank_char=cfg.blank_char)
    log(f"[load] {args.puzzle}", quiet=quiet)
    outcome = puzzle.solve()
    log(f"[solve] outcome={outcome.value} stats={puzzle.stats}", quiet=quiet)

    out_path = None
    if outcome is SolveOutcome.SOLVED and cfg.write_solution:
        out_path = write_solution(solution_path(args.puzzle, cfg.solution_suffix), puzzle, cfg.blank_char)
        log(f"[write] {out_path}", quiet=quiet)

    if args.json:
        payload = {
            "input": args.puzzle,
            "puzzle": text,
            "status": outcome.value,
            "solution": puzzle.render(formatted=False) if outcome is SolveOutcome.SOLVED else None,
            "stats": puzzle.stats,
            "output": str(out_path) if out_path else None,
        }
        print(json.dumps(payload, indent=2))
    else:
        print("Input:\n" + given)
        if outcome is SolveOutcome.SOLVED:
            print("Solution:\n" + puzzle.render(formatted=True, blank_char=cfg.blank_char))
            if out_path:
                print(f"Wrote to file: {out_path}")
        else:
            print("No solution")

    return EXIT_SOLVED if outcome is SolveOutcome.SOLVED else EXIT_NO_SOLUTION


if __name__ == "__main__":
    sys.exit(main())
