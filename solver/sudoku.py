"""Sudoku solver engine: validated construction, two propagation passes run to a fixed point, and a backtracking search that finishes the remaining blanks."""

# sudoku.py
# Solving strategy:
#   1) candidate elimination: a blank cell with a single candidate gets it
#   2) placement deduction: a digit with a single legal cell in a row/column/box goes there
#   3) repeat 1-2 until a round commits nothing, then
#   4) chronological backtracking over the remaining blanks (row-major, digits ascending)
# Propagation commits are permanent; only the search reverts cells.

from __future__ import annotations

from types_sudoku import Grid, SolveOutcome, SolveStats

from .errors import ConstructionError, InvalidCharacter, InvalidLength, RuleViolation
from .solver_core import (
    DIGITS,
    SIZE,
    all_groups,
    candidate_set,
    clone_grid,
    count_blanks,
    empty_grid,
    group_contains,
    is_legal,
)

CELLS = SIZE * SIZE
UNSOLVABLE = -1
BLANK_CHAR = "X"


def _new_stats() -> SolveStats:
    return {"rounds": 0, "eliminated": 0, "deduced": 0, "search_nodes": 0, "backtracks": 0}


class Sudoku:
    """A 9x9 puzzle that solves itself in place.

    Construction reads an 81-character digit string ('0' = blank) in row-major
    order and raises InvalidLength, InvalidCharacter or RuleViolation on bad
    input; no instance exists unless the whole string was accepted.
    """

    def __init__(self, text: str):
        if len(text) != CELLS:
            raise InvalidLength(len(text))
        grid = empty_grid()
        for pos, ch in enumerate(text):
            if ch not in "0123456789":
                raise InvalidCharacter(pos, ch)
            digit = int(ch)
            if digit == 0:
                continue
            r, c = divmod(pos, SIZE)
            if not is_legal(grid, digit, r, c):
                raise RuleViolation(pos, digit)
            grid[r][c] = digit
        self._grid = grid
        self.stats = _new_stats()

    @classmethod
    def from_grid(cls, grid: Grid) -> Sudoku:
        """Build from 9 rows of 9 ints; goes through the same validation as the text form."""
        if not isinstance(grid, (list, tuple)) or not all(isinstance(row, (list, tuple)) for row in grid):
            raise ConstructionError("Grid must be a list of 9 rows, each a list of 9 ints")
        if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
            raise InvalidLength(sum(len(row) for row in grid))
        chars = []
        for pos, v in enumerate(v for row in grid for v in row):
            # bool is an int subclass; True must not pass as 1
            if type(v) is not int or not 0 <= v <= 9:
                raise InvalidCharacter(pos, repr(v))
            chars.append(str(v))
        return cls("".join(chars))

    @property
    def grid(self) -> Grid:
        return clone_grid(self._grid)

    def __getitem__(self, rc: tuple[int, int]) -> int:
        r, c = rc
        return self._grid[r][c]

    def is_complete(self) -> bool:
        return count_blanks(self._grid) == 0

    def is_legal(self, digit: int, row: int, col: int) -> bool:
        return is_legal(self._grid, digit, row, col)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, formatted: bool = True, blank_char: str = BLANK_CHAR) -> str:
        """Compact: 81 digits with '0' for blanks. Formatted: `blank_char` for blanks and a newline after each row."""
        lines = []
        for row in self._grid:
            if formatted:
                lines.append("".join(blank_char if v == 0 else str(v) for v in row) + "\n")
            else:
                lines.append("".join(str(v) for v in row))
        return "".join(lines)

    def __str__(self) -> str:
        return self.render(True)

    def __repr__(self) -> str:
        return f"Sudoku({self.render(False)!r})"

    # ------------------------------------------------------------------
    # Propagation passes
    # ------------------------------------------------------------------

    def eliminate_candidates(self) -> int:
        """Commit every blank cell whose candidate set is a single digit.

        Sweeps the grid row-major until 81 consecutive cells pass without a
        commit. Returns the number of digits committed, or -1 if some blank
        cell has no candidate at all.
        """
        grid = self._grid
        since_commit = 0
        committed = 0
        while True:
            for r in range(SIZE):
                for c in range(SIZE):
                    if since_commit == CELLS:
                        return committed
                    if grid[r][c] == 0:
                        cands = candidate_set(grid, r, c)
                        if not cands:
                            return UNSOLVABLE
                        if len(cands) == 1:
                            (grid[r][c],) = cands
                            since_commit = 0
                            committed += 1
                    since_commit += 1

    def _deduce_in_group(self, group) -> int:
        grid = self._grid
        committed = 0
        for digit in DIGITS:
            if group_contains(grid, group, digit):
                continue
            legal = 0
            spot = None
            for r, c in group:
                if legal == 2:
                    break
                if grid[r][c] == 0 and is_legal(grid, digit, r, c):
                    legal += 1
                    spot = (r, c)
            if legal == 0:
                return UNSOLVABLE
            if legal == 1:
                r, c = spot
                grid[r][c] = digit
                committed += 1
        return committed

    def deduce_placements(self) -> int:
        """For each row, column and box, place every missing digit that has exactly one legal cell.

        Sweeps the 27 groups until a full cycle of groups passes without a
        commit. Returns the number of digits committed, or -1 if some digit
        has no legal cell in a group that lacks it.
        """
        groups = all_groups()
        since_commit = 0
        committed = 0
        while True:
            for group in groups:
                if since_commit == len(groups):
                    return committed
                n = self._deduce_in_group(group)
                if n == UNSOLVABLE:
                    return UNSOLVABLE
                if n > 0:
                    since_commit = 0
                since_commit += 1
                committed += n

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def _search_from(self, r: int, c: int) -> bool:
        if r == SIZE:
            return True
        if c == SIZE:
            return self._search_from(r + 1, 0)
        grid = self._grid
        if grid[r][c] != 0:
            return self._search_from(r, c + 1)
        for digit in DIGITS:
            if not is_legal(grid, digit, r, c):
                continue
            grid[r][c] = digit
            self.stats["search_nodes"] += 1
            if self._search_from(r, c + 1):
                return True
        grid[r][c] = 0
        self.stats["backtracks"] += 1
        return False

    def search(self) -> bool:
        """Fill the remaining blanks by row-major backtracking, trying digits 1..9 in order.

        Cells filled before the search starts are never changed. Returns False
        (with all blanks restored) if no completion exists.
        """
        return self._search_from(0, 0)

    # ------------------------------------------------------------------
    # Orchestrator
    # ------------------------------------------------------------------

    def solve(self) -> SolveOutcome:
        """Solve in place. The grid is left fully filled on SOLVED."""
        while True:
            self.stats["rounds"] += 1
            eliminated = self.eliminate_candidates()
            if eliminated == UNSOLVABLE:
                return SolveOutcome.NO_SOLUTION
            self.stats["eliminated"] += eliminated
            deduced = self.deduce_placements()
            if deduced == UNSOLVABLE:
                return SolveOutcome.NO_SOLUTION
            self.stats["deduced"] += deduced
            if eliminated + deduced == 0:
                break
        return SolveOutcome.SOLVED if self.search() else SolveOutcome.NO_SOLUTION


def solve_text(text: str) -> tuple[SolveOutcome, str | None]:
    """Solve an 81-character puzzle string; returns the outcome and the compact solution (None if unsolved)."""
    puzzle = Sudoku(text)
    outcome = puzzle.solve()
    if outcome is SolveOutcome.SOLVED:
        return outcome, puzzle.render(False)
    return outcome, None
