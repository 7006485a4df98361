# tests/test_regression.py
import pytest

from conftest import EULER_01
from solver.regression import INVALID_INPUT, NO_SOLUTION, load_cases, parse_case_line, run_case, run_file


def test_parse_case_line():
    case = parse_case_line(f"{EULER_01};", 3)
    assert case.line == 3 and case.puzzle == EULER_01 and case.expected == ""
    with pytest.raises(ValueError):
        parse_case_line(EULER_01, 1)


def test_bundled_regression_file_passes(regression_file):
    summary = run_file(regression_file)
    assert summary["total"] == len(load_cases(regression_file)) == 6
    assert summary["passed"] == summary["total"], [r for r in summary["results"] if not r["passed"]]


def test_mismatches_fail():
    wrong = parse_case_line(f"{EULER_01};" + "1" * 81, 1)
    result = run_case(wrong)
    assert not result["passed"]
    assert result["actual"] != result["expected"]
    assert not run_case(parse_case_line(f"{EULER_01};{INVALID_INPUT}", 2))["passed"]
    assert not run_case(parse_case_line(f"{EULER_01};{NO_SOLUTION}", 3))["passed"]
    bad = run_case(parse_case_line("12;", 4))
    assert not bad["passed"] and bad["actual"].startswith(INVALID_INPUT)


def test_blank_lines_are_skipped(tmp_path):
    f = tmp_path / "tests.txt"
    f.write_text(f"\n{EULER_01};\n\n", encoding="utf-8")
    cases = load_cases(f)
    assert [c.line for c in cases] == [2]
