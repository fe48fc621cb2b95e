import random

import pytest

from sixdoku.puzzle.carver import PuzzleCarver
from sixdoku.puzzle.common import CellState, DEFAULT_GIVEN_COUNT


@pytest.mark.parametrize("given_count", [0, 1, 10, 16, 35, 36])
def test_exact_given_count(known_solution, given_count):
    grid = PuzzleCarver(given_count, rng=random.Random(given_count)).carve(known_solution)
    assert grid.count(CellState.GIVEN) == given_count
    assert grid.count(CellState.BLANK) == 36 - given_count


def test_givens_match_solution_and_blanks_are_empty(known_solution):
    grid = PuzzleCarver(12, rng=random.Random(3)).carve(known_solution)
    for cell in grid:
        if cell.given:
            assert cell.value == known_solution.value_at(cell.row, cell.col)
        else:
            assert cell.value is None
            assert cell.marks == frozenset()


def test_selection_varies_with_seed(known_solution):
    picks = {frozenset(PuzzleCarver(10, rng=random.Random(s)).choose_givens()) for s in range(6)}
    assert len(picks) > 1


def test_default_given_count():
    assert PuzzleCarver().given_count == DEFAULT_GIVEN_COUNT == 16


@pytest.mark.parametrize("bad", [-1, 37, 2.5, True, "10"])
def test_invalid_given_count(bad):
    with pytest.raises(ValueError):
        PuzzleCarver(bad)
