"""Run the line-oriented regression file (input;expected per line) and print a pass/fail report."""

# regression_cli.py
# Usage:
#   python -m apps.cli.regression_cli               # reads ./tests.txt
#   python -m apps.cli.regression_cli tests/data/regression.txt --json

from __future__ import annotations

import argparse
import json
import sys

from solver.log_utils import log
from solver.regression import run_file


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Run Sudoku regression cases.")
    ap.add_argument("tests", nargs="?", default="tests.txt")
    ap.add_argument("--json", action="store_true", help="print the summary as JSON")
    ap.add_argument("--quiet", action="store_true")
    args = ap.parse_args(argv)

    log(f"[load] {args.tests}", quiet=args.quiet)
    try:
        summary = run_file(args.tests)
    except (OSError, ValueError) as e:
        print(f"Cannot run regression file: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(summary, indent=2))
    else:
        for r in summary["results"]:
            print(f"Test {r['line']}: {'Pass' if r['passed'] else 'Fail'}")
            if not r["passed"] and r["expected"] != "":
                print(f"  Expected: {r['expected']}")
                if r["actual"] is not None:
                    print(f"  Actual: {r['actual']}")
        print(f"Total: {summary['passed']} / {summary['total']}")
    return 0 if summary["passed"] == summary["total"] else 1


if __name__ == "__main__":
    sys.exit(main())
