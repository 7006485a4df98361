"""Read puzzles from free-form text files and write solutions next to them."""

# puzzle_io.py
# Puzzle files may be laid out any way the author likes: blank markers ('X' or
# '.' by default) become '0', digits are kept, everything else is ignored.
# The filtered string is validated by Sudoku(), not here.

from __future__ import annotations

from pathlib import Path

from .sudoku import Sudoku

DEFAULT_BLANK_MARKERS = "X."
DEFAULT_SOLUTION_SUFFIX = ".sln.txt"


def parse_puzzle_text(raw: str, blank_markers: str = DEFAULT_BLANK_MARKERS) -> str:
    out = []
    for ch in raw:
        if ch in blank_markers:
            out.append("0")
        elif ch in "0123456789":
            out.append(ch)
    return "".join(out)


def read_puzzle(path: str | Path, blank_markers: str = DEFAULT_BLANK_MARKERS) -> str:
    # Undecodable bytes become U+FFFD, which the filter drops like any other non-digit
    with open(path, encoding="utf-8", errors="replace") as f:
        return parse_puzzle_text(f.read(), blank_markers)


def solution_path(path: str | Path, suffix: str = DEFAULT_SOLUTION_SUFFIX) -> Path:
    """puzzles/easy.txt -> puzzles/easy.sln.txt (only the last extension is replaced)."""
    p = Path(path)
    return p.with_name(p.stem + suffix) if p.suffix else p.with_name(p.name + suffix)


def write_solution(path: str | Path, puzzle: Sudoku, blank_char: str = "X") -> Path:
    out = Path(path)
    out.write_text(puzzle.render(formatted=True, blank_char=blank_char), encoding="utf-8")
    return out
