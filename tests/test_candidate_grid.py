# tests/test_candidate_grid.py
import numpy as np
import pytest

from candidate_grid import CandidateGrid, Cell, GridFormatError
from grid_io import parse_grid
from conftest import EASY_SOLUTION


def test_cell_is_a_value_type():
    assert Cell(2, 7) == Cell(2, 7)
    assert hash(Cell(2, 7)) == hash(Cell(2, 7))
    assert Cell(2, 7) != Cell(7, 2)
    assert Cell(2, 7).index == 25
    assert Cell(4, 8).box_origin == (3, 6)
    with pytest.raises(ValueError):
        Cell(9, 0)
    with pytest.raises(ValueError):
        Cell(0, -1)


def test_blank_grid_has_every_candidate():
    grid = CandidateGrid()
    assert len(list(grid.cells())) == 81
    assert all(grid[cell] == frozenset(range(1, 10)) for cell in grid.cells())
    assert not grid.is_solved()
    assert grid.value_at((0, 0)) is None


def test_from_rows_givens_are_singletons(easy_rows):
    grid = CandidateGrid.from_rows(easy_rows)
    assert grid[(0, 0)] == {5}
    assert grid.is_determined(Cell(0, 1))
    assert grid[(0, 2)] == frozenset(range(1, 10))
    assert int((grid.counts() == 1).sum()) == 30
    np.testing.assert_array_equal(grid.to_array(), np.array(easy_rows))


@pytest.mark.parametrize("rows", [
    [[0] * 9] * 8,
    [[0] * 8] * 9,
    [[0] * 8 + [10]] + [[0] * 9] * 8,
    [[-1] + [0] * 8] + [[0] * 9] * 8,
    [[1.5] + [0] * 8] + [[0] * 9] * 8,
    [["a"] * 9] * 9,
])
def test_from_rows_rejects_bad_boards(rows):
    with pytest.raises(GridFormatError):
        CandidateGrid.from_rows(rows)


def test_copy_is_independent():
    grid = CandidateGrid()
    clone = grid.copy()
    clone.assign(Cell(4, 4), 7)
    assert clone[(4, 4)] == {7}
    assert grid[(4, 4)] == frozenset(range(1, 10))
    assert grid != clone


def test_constructor_checks_shape():
    with pytest.raises(ValueError):
        CandidateGrid(np.ones((9, 9), dtype=bool))


def test_assign_rejects_non_digits():
    with pytest.raises(ValueError):
        CandidateGrid().assign(Cell(0, 0), 0)


def test_unit_conflict_detection():
    grid = CandidateGrid()
    grid.assign(Cell(0, 0), 3)
    grid.assign(Cell(8, 8), 3)
    assert not grid.has_unit_conflict()
    grid.assign(Cell(1, 1), 3)  # mismo bloque que (0,0)
    assert grid.has_unit_conflict()


def test_valid_solution_check():
    solved = parse_grid(EASY_SOLUTION)
    assert solved.is_solved()
    assert solved.is_valid_solution()

    broken = solved.copy()
    broken.assign(Cell(0, 0), 3)  # 3 ya está en la fila 0
    assert broken.is_solved()
    assert not broken.is_valid_solution()
    assert not CandidateGrid().is_valid_solution()


def test_from_rows_accepts_integral_floats(easy_rows):
    grid = CandidateGrid.from_rows(np.array(easy_rows, dtype=float))
    assert grid == CandidateGrid.from_rows(easy_rows)
