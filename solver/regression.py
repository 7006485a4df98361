"""Line-oriented regression harness: each line of a tests file is `input;expected`.

`expected` is one of:
  INVALID_INPUT  construction must be rejected
  NO_SOLUTION    solve must report no solution
  (empty)        any solution is accepted
  81 digits      the compact rendering of the solution must match exactly
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from types_sudoku import SolveOutcome

from .errors import ConstructionError
from .sudoku import Sudoku

INVALID_INPUT = "INVALID_INPUT"
NO_SOLUTION = "NO_SOLUTION"


@dataclass
class RegressionCase:
    line: int
    puzzle: str
    expected: str


def parse_case_line(text: str, line: int) -> RegressionCase:
    if ";" not in text:
        raise ValueError(f"line {line}: missing ';' separator")
    puzzle, expected = text.split(";", 1)
    return RegressionCase(line=line, puzzle=puzzle.strip(), expected=expected.strip())


def load_cases(path: str | Path) -> list[RegressionCase]:
    cases = []
    with open(path, encoding="utf-8") as f:
        for i, raw in enumerate(f, start=1):
            if not raw.strip():
                continue
            cases.append(parse_case_line(raw.rstrip("\r\n"), i))
    return cases


def run_case(case: RegressionCase) -> dict:
    actual = None
    try:
        puzzle = Sudoku(case.puzzle)
    except ConstructionError as e:
        return {
            "line": case.line,
            "passed": case.expected == INVALID_INPUT,
            "expected": case.expected,
            "actual": f"{INVALID_INPUT} ({e.kind})",
        }
    if case.expected == INVALID_INPUT:
        passed = False
        actual = "constructed"
    else:
        outcome = puzzle.solve()
        if outcome is SolveOutcome.SOLVED:
            actual = puzzle.render(formatted=False)
        else:
            actual = NO_SOLUTION
        if case.expected == NO_SOLUTION:
            passed = outcome is SolveOutcome.NO_SOLUTION
        elif case.expected == "":
            passed = outcome is SolveOutcome.SOLVED
        else:
            passed = actual == case.expected
    return {"line": case.line, "passed": passed, "expected": case.expected, "actual": actual}


def run_file(path: str | Path) -> dict:
    results = [run_case(c) for c in load_cases(path)]
    return {
        "passed": sum(1 for r in results if r["passed"]),
        "total": len(results),
        "results": results,
    }
