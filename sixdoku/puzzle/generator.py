from typing import Optional
import logging
import random

from .common import GRID_SIZE, NoSolutionError, is_digit
from .constraints import ValueGrid, empty_grid, is_valid_move, legal_values, is_solved_grid
from .puzzle_types import SolutionGrid

logger = logging.getLogger(__name__)


class GridGenerator:
    """Builds fully solved grids by randomized backtracking.

    Positions are scanned row-major. At each empty position the legal digits
    are shuffled with the generator's own ``random.Random`` before being
    tried, so two generators with different seeds give different grids while
    the same seed always gives the same grid.
    """

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both.")
        self.rng = rng if rng is not None else random.Random(seed)
        self.placements = 0 # Search statistics for the last run
        self.backtracks = 0

    def generate(self) -> SolutionGrid:
        """Fills an empty grid. Always succeeds for the 6x6 rule set."""
        logger.debug("Generating a new solution grid...")
        try:
            solution = self.complete(empty_grid())
        except NoSolutionError:
            # An empty board is always completable, so reaching this is a bug in the search
            logger.error("Backtracking search failed on an empty grid.")
            raise
        logger.info(f"Generated solution grid ({self.placements} placements, {self.backtracks} backtracks).")
        return solution

    def complete(self, partial: ValueGrid) -> SolutionGrid:
        """Fills the empty cells of ``partial`` (left untouched) into a full solution.

        Raises:
            NoSolutionError: the pre-filled values break a rule, or no completion exists.
        """
        grid = self._validated_copy(partial)
        self.placements = 0
        self.backtracks = 0
        if not self._fill(grid, 0):
            logger.warning(f"No completion exists for the given grid ({self.backtracks} backtracks).")
            raise NoSolutionError("The pre-filled grid cannot be completed.")
        # Sanity check before freezing; SolutionGrid re-validates too
        if not is_solved_grid(grid):
            raise NoSolutionError("Search finished with an invalid grid.")
        return SolutionGrid(grid)

    def _validated_copy(self, partial: ValueGrid) -> ValueGrid:
        if len(partial) != GRID_SIZE or any(len(row) != GRID_SIZE for row in partial):
            raise ValueError(f"Expected a {GRID_SIZE}x{GRID_SIZE} grid.")
        grid = [list(row) for row in partial]
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                value = grid[r][c]
                if value is None:
                    continue
                if not is_digit(value):
                    raise NoSolutionError(f"Pre-filled value {value!r} at ({r}, {c}) is not a digit 1..{GRID_SIZE}.")
                if not is_valid_move(grid, r, c, value):
                    raise NoSolutionError(f"Pre-filled value {value} at ({r}, {c}) repeats in its row, column or block.")
        return grid

    def _fill(self, grid: ValueGrid, index: int) -> bool:
        # Skip to the next empty position in row-major order
        while index < GRID_SIZE * GRID_SIZE and grid[index // GRID_SIZE][index % GRID_SIZE] is not None:
            index += 1
        if index == GRID_SIZE * GRID_SIZE:
            return True

        row, col = divmod(index, GRID_SIZE)
        candidates = legal_values(grid, row, col)
        self.rng.shuffle(candidates)
        for value in candidates:
            grid[row][col] = value
            self.placements += 1
            if self._fill(grid, index + 1):
                return True
        # Exhausted: the cell must be empty again before reporting failure upward
        grid[row][col] = None
        self.backtracks += 1
        return False


def generate_solution(seed: Optional[int] = None) -> SolutionGrid:
    """Convenience wrapper: one grid from a fresh generator."""
    return GridGenerator(seed=seed).generate()
