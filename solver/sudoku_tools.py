from __future__ import annotations

from typing import Any

from types_sudoku import Grid, SolveOutcome

"""Tool-friendly wrappers around the solver: sanity checks, candidates and a one-shot solve returning plain dicts (used by the API and the CLIs)."""


# sudoku_tools.py
from .errors import ConstructionError
from .solver_core import SIZE, compute_candidates, find_conflicts, rc_to_key
from .sudoku import Sudoku


def sanity_check(original: Grid, current: Grid) -> dict:
    issues = []
    for r in range(SIZE):
        for c in range(SIZE):
            if original[r][c] != 0 and current[r][c] not in (0, original[r][c]):
                issues.append({"type": "given_overwritten", "cell": rc_to_key(r, c),
                               "given": original[r][c], "found": current[r][c]})
    issues.extend(find_conflicts(current))
    return {"ok": len(issues) == 0, "issues": issues}


def compute_candidates_tool(current: Grid) -> dict:
    """Compute candidate digits for each empty cell in the current grid. Returns a dict like {'candidates': {'r1c2': [1, 2, 5], ...}}."""
    return {"candidates": compute_candidates(current)}


def _build(puzzle: str | Grid) -> Sudoku:
    if isinstance(puzzle, str):
        return Sudoku(puzzle)
    return Sudoku.from_grid(puzzle)


def solve_tool(puzzle: str | Grid) -> dict[str, Any]:
    """Solve a puzzle given as an 81-char string or a 9x9 grid.

    Never raises for bad puzzles: construction errors come back as
    status 'invalid_input' with the error kind and message.
    """
    try:
        sudoku = _build(puzzle)
    except ConstructionError as e:
        return {"status": "invalid_input", "error": {"kind": e.kind, "message": str(e)},
                "solution": None, "rendered": None, "stats": None}
    outcome = sudoku.solve()
    solved = outcome is SolveOutcome.SOLVED
    return {
        "status": outcome.value,
        "error": None,
        "solution": sudoku.grid if solved else None,
        "rendered": sudoku.render(formatted=False) if solved else None,
        "stats": dict(sudoku.stats),
    }
