from typing import Dict, List
import logging

from .common import CheckResult, CellState
from .constraints import Position
from .puzzle_types import Cell, PuzzleGrid, SolutionGrid

logger = logging.getLogger(__name__)


class PuzzleVerifier:
    """Judges player entries by direct comparison with the stored solution.

    Nothing here re-derives the row/column/block rules: a filled cell is
    correct exactly when it equals the solution at that position. The player
    learns whether an entry is right, never why.
    """

    def __init__(self, solution: SolutionGrid):
        self.solution = solution

    def check_cell(self, cell: Cell) -> CheckResult:
        if cell.state == CellState.GIVEN:
            return CheckResult.CORRECT
        if cell.value is None: # BLANK or only MARKED
            return CheckResult.INCOMPLETE
        if cell.value == self.solution.value_at(cell.row, cell.col):
            return CheckResult.CORRECT
        return CheckResult.INCORRECT

    def is_correct_move(self, row: int, col: int, value: int) -> bool:
        return self.solution.value_at(row, col) == value

    def check_grid(self, grid: PuzzleGrid) -> Dict[Position, CheckResult]:
        return {(cell.row, cell.col): self.check_cell(cell) for cell in grid}

    def incorrect_positions(self, grid: PuzzleGrid) -> List[Position]:
        return sorted(pos for pos, result in self.check_grid(grid).items()
                      if result == CheckResult.INCORRECT)

    def is_complete(self, grid: PuzzleGrid) -> bool:
        """True iff all 36 cells are given or filled with the solution value."""
        for cell in grid:
            if self.check_cell(cell) != CheckResult.CORRECT:
                return False
        logger.debug("Completion check passed.")
        return True
