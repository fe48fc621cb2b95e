from typing import Optional, Set
import logging
import random

from .common import GRID_SIZE, CELL_COUNT, DEFAULT_GIVEN_COUNT
from .constraints import Position
from .puzzle_types import Cell, PuzzleGrid, SolutionGrid

logger = logging.getLogger(__name__)


def validate_given_count(given_count: int) -> int:
    if isinstance(given_count, bool) or not isinstance(given_count, int):
        raise ValueError(f"given_count must be an integer, got {given_count!r}")
    if not 0 <= given_count <= CELL_COUNT:
        raise ValueError(f"given_count must be between 0 and {CELL_COUNT}, got {given_count}")
    return given_count


class PuzzleCarver:
    """Picks which solved cells stay visible as givens.

    The positions are a uniform random sample without replacement. No attempt
    is made to keep the remaining puzzle uniquely solvable; player entries are
    always judged against the stored solution.
    """

    def __init__(self, given_count: int = DEFAULT_GIVEN_COUNT, rng: Optional[random.Random] = None):
        self.given_count = validate_given_count(given_count)
        self.rng = rng if rng is not None else random.Random()

    def choose_givens(self) -> Set[Position]:
        positions = [(r, c) for r in range(GRID_SIZE) for c in range(GRID_SIZE)]
        return set(self.rng.sample(positions, self.given_count))

    def carve(self, solution: SolutionGrid) -> PuzzleGrid:
        givens = self.choose_givens()
        cells = [[Cell(r, c, solution.value_at(r, c) if (r, c) in givens else None)
                  for c in range(GRID_SIZE)]
                 for r in range(GRID_SIZE)]
        logger.info(f"Carved puzzle: {len(givens)} givens, {CELL_COUNT - len(givens)} blanks.")
        return PuzzleGrid(cells)
