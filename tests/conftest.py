# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

DATA = Path(__file__).resolve().parent / "data"

# Project Euler grid 01
EULER_01 = "003020600900305001001806400008102900700000008006708200002609500800203009005010300"
EULER_01_SOLUTION = "483921657967345821251876493548132976729564138136798245372689514814253769695417382"

# Wikipedia example puzzle
WIKI = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
WIKI_SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"

# One solved band: singles find nothing, the search has to fill rows 4..9
BAND = WIKI_SOLUTION[:27] + "0" * 54

BLANK = "0" * 81

# r1c9 has no candidate: row 1 holds 2..8 and column 9 holds 1 and 9
DEAD_CELL = "023456780" + "0" * 27 + "000000001" + "000000009" + "0" * 27


@pytest.fixture
def regression_file():
    return DATA / "regression.txt"

# Row 1 lacks 1..5; box 1 already holds 3, 4 and 5, so r1c1..r1c3 share only {1, 2}
THREE_CELLS_TWO_DIGITS = "000006789" + "340000000" + "500000000" + "0" * 54
