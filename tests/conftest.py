# tests/conftest.py
import random

import pytest

from sixdoku.core.game_state import PuzzleSession
from sixdoku.puzzle.carver import PuzzleCarver
from sixdoku.puzzle.puzzle_types import SolutionGrid

KNOWN_SOLUTION = [
    [1, 2, 3, 4, 5, 6],
    [4, 5, 6, 1, 2, 3],
    [2, 3, 1, 5, 6, 4],
    [5, 6, 4, 2, 3, 1],
    [3, 1, 2, 6, 4, 5],
    [6, 4, 5, 3, 1, 2],
]


def wrong_value(correct):
    """Any digit other than the correct one."""
    return correct % 6 + 1


@pytest.fixture
def known_solution():
    return SolutionGrid(KNOWN_SOLUTION)


@pytest.fixture
def known_session(known_solution):
    grid = PuzzleCarver(10, rng=random.Random(7)).carve(known_solution)
    return PuzzleSession(known_solution, grid)


@pytest.fixture
def session():
    return PuzzleSession.create(given_count=10, seed=2024)
