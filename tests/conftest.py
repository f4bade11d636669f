# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so the top-level modules can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

EASY_PUZZLE = (
    "53--7----"
    "6--195---"
    "-98----6-"
    "8---6---3"
    "4--8-3--1"
    "7---2---6"
    "-6----28-"
    "---419--5"
    "----8--79"
)

EASY_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


@pytest.fixture
def puzzles_dir() -> Path:
    return ROOT / "puzzles"


@pytest.fixture
def easy_rows():
    return [[0 if ch == "-" else int(ch) for ch in EASY_PUZZLE[r * 9:(r + 1) * 9]] for r in range(9)]
