# types_sudoku.py
from __future__ import annotations

from enum import Enum
from typing import TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = blank)."""

Cell = tuple[int, int]
"""A (row, col) coordinate, both 0-based."""

Group = list[Cell]
"""The 9 ordered coordinates of one row, column or box."""


class SolveOutcome(str, Enum):
    """Result of a solve attempt. Construction errors are raised, never returned."""

    SOLVED = "solved"
    NO_SOLUTION = "no_solution"


class SolveStats(TypedDict):
    """Counters collected during one solve, reported by the CLI and the tool API."""

    rounds: int  # elimination + deduction rounds run by the orchestrator
    eliminated: int  # digits committed by candidate elimination
    deduced: int  # digits committed by placement deduction
    search_nodes: int  # tentative assignments tried by backtracking
    backtracks: int  # cells reverted to blank by backtracking
