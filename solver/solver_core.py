"""Core Sudoku utilities used by the solving passes: index math, peers, group iterators and the validity oracle."""

# solver_core.py
# Grid is 9x9 list of lists of ints (0..9). 0 = blank.
# Coordinates are 0-based (row, col); human labels ("r1c1") are 1-based.

from __future__ import annotations

from functools import lru_cache

from types_sudoku import Cell, Grid, Group

SIZE = 9
BOX = 3
DIGITS = range(1, SIZE + 1)


def rc_to_key(r: int, c: int) -> str:
    return f"r{r + 1}c{c + 1}"


def key_to_rc(key: str) -> Cell:
    r = int(key.split("c")[0][1:])
    c = int(key.split("c")[1])
    return (r - 1, c - 1)


def empty_grid() -> Grid:
    return [[0] * SIZE for _ in range(SIZE)]


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def box_origin(r: int, c: int) -> Cell:
    return (r - r % BOX, c - c % BOX)


def which_box(r: int, c: int) -> int:
    """0-based box index in row-major box order."""
    return BOX * (r // BOX) + (c // BOX)


def row_cells(r: int) -> Group:
    return [(r, c) for c in range(SIZE)]


def col_cells(c: int) -> Group:
    return [(r, c) for r in range(SIZE)]


def box_cells(b: int) -> Group:
    r0 = BOX * (b // BOX)
    c0 = BOX * (b % BOX)
    return [(r0 + i, c0 + j) for i in range(BOX) for j in range(BOX)]


@lru_cache(maxsize=None)
def _groups() -> tuple[tuple[Cell, ...], ...]:
    rows = [tuple(row_cells(r)) for r in range(SIZE)]
    cols = [tuple(col_cells(c)) for c in range(SIZE)]
    boxes = [tuple(box_cells(b)) for b in range(SIZE)]
    return tuple(rows + cols + boxes)


def all_groups() -> list[Group]:
    """The 27 groups: 9 rows, then 9 columns, then 9 boxes.

    The underlying tuples are built once and shared; callers get fresh lists.
    """
    return [list(g) for g in _groups()]


@lru_cache(maxsize=None)
def peers(r: int, c: int) -> frozenset[Cell]:
    """Return the set of peer coordinates for a given cell (same row, column, and 3x3 box)."""
    ps = set(row_cells(r)) | set(col_cells(c)) | set(box_cells(which_box(r, c)))
    ps.discard((r, c))
    return frozenset(ps)


def is_legal(grid: Grid, digit: int, r: int, c: int) -> bool:
    """True if `digit` does not already appear in another cell of the row, column or box of (r, c).

    The cell's own current value is never counted as a conflict.
    """
    for i in range(SIZE):
        if i != c and grid[r][i] == digit:
            return False
        if i != r and grid[i][c] == digit:
            return False
    r0, c0 = box_origin(r, c)
    for i in range(r0, r0 + BOX):
        for j in range(c0, c0 + BOX):
            if (i, j) != (r, c) and grid[i][j] == digit:
                return False
    return True


def candidate_set(grid: Grid, r: int, c: int) -> set[int]:
    used = {grid[i][j] for i, j in peers(r, c)}
    return set(DIGITS) - used


def group_contains(grid: Grid, group: Group, digit: int) -> bool:
    return any(grid[r][c] == digit for r, c in group)


def compute_candidates(grid: Grid) -> dict[str, list[int]]:
    cand = {}
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r][c] == 0:
                cand[rc_to_key(r, c)] = sorted(candidate_set(grid, r, c))
    return cand


def _unit_label(index: int) -> str:
    kind = "rcb"[index // SIZE]
    return f"{kind}{index % SIZE + 1}"


def find_conflicts(grid: Grid) -> list[dict]:
    """Report every row/column/box holding the same nonzero digit more than once."""
    issues = []
    for index, group in enumerate(_groups()):
        seen: dict[int, list[str]] = {}
        for r, c in group:
            v = grid[r][c]
            if v:
                seen.setdefault(v, []).append(rc_to_key(r, c))
        dups = sorted(d for d, cells in seen.items() if len(cells) > 1)
        if dups:
            cells = [k for d in dups for k in seen[d]]
            issues.append({"type": "duplicate", "unit": _unit_label(index), "digits": dups, "cells": cells})
    return issues


def count_blanks(grid: Grid) -> int:
    return sum(row.count(0) for row in grid)
