# tests/test_puzzle_io.py
from pathlib import Path

from conftest import EULER_01, EULER_01_SOLUTION
from solver.puzzle_io import parse_puzzle_text, read_puzzle, solution_path, write_solution
from solver.sudoku import Sudoku


def test_parse_filters_free_form_text():
    raw = "\n".join(EULER_01[i:i + 9].replace("0", "X") for i in range(0, 81, 9))
    assert parse_puzzle_text(raw) == EULER_01
    assert parse_puzzle_text("..3 | .2. | 6..") == "003020600"
    assert parse_puzzle_text("a1b2c-3") == "123"
    assert parse_puzzle_text("__1", blank_markers="_") == "001"


def test_read_and_write_solution(tmp_path):
    src = tmp_path / "euler.txt"
    src.write_text("\n".join(EULER_01[i:i + 9].replace("0", ".") for i in range(0, 81, 9)), encoding="utf-8")
    text = read_puzzle(src)
    puzzle = Sudoku(text)
    puzzle.solve()
    out = write_solution(solution_path(src), puzzle)
    assert out == tmp_path / "euler.sln.txt"
    assert out.read_text(encoding="utf-8").replace("\n", "") == EULER_01_SOLUTION


def test_solution_path_replaces_last_extension_only():
    assert solution_path("a/b.c.txt") == Path("a/b.c.sln.txt")
    assert solution_path("puzzle") == Path("puzzle.sln.txt")
    assert solution_path("p.txt", ".out") == Path("p.out")


def test_read_puzzle_drops_undecodable_bytes(tmp_path):
    src = tmp_path / "latin.txt"
    src.write_bytes(b"\xe9" + EULER_01[:40].encode("ascii") + b"\xff" + EULER_01[40:].encode("ascii"))
    assert read_puzzle(src) == EULER_01
