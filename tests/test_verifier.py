from sixdoku.puzzle.common import CheckResult
from sixdoku.puzzle.puzzle_types import Cell, PuzzleGrid
from sixdoku.puzzle.verifier import PuzzleVerifier

from conftest import KNOWN_SOLUTION, wrong_value


def _blank_grid():
    return PuzzleGrid([[Cell(r, c) for c in range(6)] for r in range(6)])


def test_check_cell_results(known_solution):
    verifier = PuzzleVerifier(known_solution)
    cell = Cell(2, 4)
    assert verifier.check_cell(cell) == CheckResult.INCOMPLETE
    cell.toggle_mark(6)
    assert verifier.check_cell(cell) == CheckResult.INCOMPLETE
    cell.fill(KNOWN_SOLUTION[2][4])
    assert verifier.check_cell(cell) == CheckResult.CORRECT
    cell.fill(wrong_value(KNOWN_SOLUTION[2][4]))
    assert verifier.check_cell(cell) == CheckResult.INCORRECT
    assert verifier.check_cell(Cell(0, 0, KNOWN_SOLUTION[0][0])) == CheckResult.CORRECT


def test_every_other_legal_value_is_incorrect(known_solution):
    verifier = PuzzleVerifier(known_solution)
    for value in range(1, 7):
        cell = Cell(3, 1)
        cell.fill(value)
        expected = CheckResult.CORRECT if value == KNOWN_SOLUTION[3][1] else CheckResult.INCORRECT
        assert verifier.check_cell(cell) == expected


def test_is_complete(known_solution):
    verifier = PuzzleVerifier(known_solution)
    grid = _blank_grid()
    assert not verifier.is_complete(grid)
    for cell in grid:
        cell.fill(KNOWN_SOLUTION[cell.row][cell.col])
    assert verifier.is_complete(grid)
    assert verifier.incorrect_positions(grid) == []

    grid.cell(4, 2).fill(wrong_value(KNOWN_SOLUTION[4][2]))
    assert not verifier.is_complete(grid)
    assert verifier.incorrect_positions(grid) == [(4, 2)]


def test_check_grid_covers_all_positions(known_solution):
    results = PuzzleVerifier(known_solution).check_grid(_blank_grid())
    assert len(results) == 36
    assert set(results.values()) == {CheckResult.INCOMPLETE}
