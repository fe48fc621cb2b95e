from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple, Union
import logging
import random

from ..puzzle.common import (GRID_SIZE, DEFAULT_GIVEN_COUNT, InputMode, CellState, CheckResult,
                             GameStatus, GivenCellError, InvalidDigitError, in_bounds)
from ..puzzle.puzzle_types import PuzzleGrid, SolutionGrid
from ..puzzle.generator import GridGenerator
from ..puzzle.carver import PuzzleCarver, validate_given_count
from ..puzzle.verifier import PuzzleVerifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellView:
    """Read-only snapshot of one cell for rendering."""
    row: int
    col: int
    value: Optional[int]
    marks: FrozenSet[int]
    state: CellState
    result: Optional[CheckResult] # Only set for player-filled cells
    selected: bool

    @property
    def given(self) -> bool:
        return self.state == CellState.GIVEN


class PuzzleSession:
    """One active puzzle: the hidden solution, the play board, cursor and input mode.

    Player actions (select, enter_digit, clear_selected, ...) never raise for
    bad input. A rejected action is logged, leaves every cell and the cursor
    unchanged, and returns False.
    """

    def __init__(self, solution: SolutionGrid, grid: PuzzleGrid, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random.Random()
        self._install(solution, grid)

    @classmethod
    def create(cls, given_count: int = DEFAULT_GIVEN_COUNT, seed: Optional[int] = None,
               rng: Optional[random.Random] = None) -> "PuzzleSession":
        """Generates a solution, carves it and wraps both in a new session."""
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both.")
        validate_given_count(given_count)
        rng = rng if rng is not None else random.Random(seed)
        solution, grid = cls._build(given_count, rng)
        return cls(solution, grid, rng=rng)

    @staticmethod
    def _build(given_count: int, rng: random.Random) -> Tuple[SolutionGrid, PuzzleGrid]:
        # Generator and carver share one random source so a seed fixes the whole puzzle
        solution = GridGenerator(rng=rng).generate()
        grid = PuzzleCarver(given_count, rng=rng).carve(solution)
        return solution, grid

    def _install(self, solution: SolutionGrid, grid: PuzzleGrid) -> None:
        for cell in grid.given_cells():
            if cell.value != solution.value_at(cell.row, cell.col):
                raise ValueError(f"Given at ({cell.row}, {cell.col}) does not match the solution.")
        self._solution = solution
        self._grid = grid
        self._verifier = PuzzleVerifier(solution)
        self._cursor: Tuple[int, int] = (0, 0)
        self._mode = InputMode.NORMAL
        self.mistakes = 0
        self._status = self._compute_status()

    def new_puzzle(self, given_count: Optional[int] = None, seed: Optional[int] = None) -> None:
        """Replaces solution and board together. Keeps the current given count by default."""
        if given_count is None:
            given_count = self.given_count
        validate_given_count(given_count)
        if seed is not None:
            self._rng = random.Random(seed)
        solution, grid = self._build(given_count, self._rng)
        self._install(solution, grid)
        logger.info(f"Started new puzzle with {given_count} givens.")

    def restart(self) -> None:
        """Clears every player entry, keeping the same solution and givens."""
        self._grid.reset()
        self._cursor = (0, 0)
        self._mode = InputMode.NORMAL
        self.mistakes = 0
        self._status = self._compute_status()
        logger.info("Puzzle restarted.")

    # --- Read-only state ---

    @property
    def solution(self) -> SolutionGrid:
        return self._solution

    @property
    def grid(self) -> PuzzleGrid:
        return self._grid

    @property
    def cursor(self) -> Tuple[int, int]:
        return self._cursor

    @property
    def mode(self) -> InputMode:
        return self._mode

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def given_count(self) -> int:
        return len(self._grid.given_cells())

    # --- Cursor and mode ---

    def select(self, row: int, col: int) -> bool:
        if not in_bounds(row, col):
            logger.warning(f"Rejected selection of out-of-range cell ({row}, {col}).")
            return False
        self._cursor = (row, col)
        return True

    def move_cursor(self, d_row: int, d_col: int) -> Tuple[int, int]:
        """Moves the cursor relative to its position, stopping at the board edges."""
        row = min(max(self._cursor[0] + d_row, 0), GRID_SIZE - 1)
        col = min(max(self._cursor[1] + d_col, 0), GRID_SIZE - 1)
        self._cursor = (row, col)
        return self._cursor

    def set_mode(self, mode: Union[InputMode, str]) -> None:
        if isinstance(mode, str):
            try:
                mode = InputMode[mode.upper()]
            except KeyError:
                raise ValueError(f"Unknown input mode: {mode!r}") from None
        if not isinstance(mode, InputMode):
            raise ValueError(f"Unknown input mode: {mode!r}")
        self._mode = mode
        logger.debug(f"Input mode set to {mode.name}")

    def toggle_mode(self) -> InputMode:
        self.set_mode(InputMode.PENCIL if self._mode == InputMode.NORMAL else InputMode.NORMAL)
        return self._mode

    # --- Player edits ---

    def enter_digit(self, value: int) -> bool:
        """Applies a digit to the selected cell under the current mode."""
        row, col = self._cursor
        cell = self._grid.cell(row, col)
        try:
            if self._mode == InputMode.NORMAL:
                cell.fill(value)
                if not self._verifier.is_correct_move(row, col, value):
                    self.mistakes += 1
                    logger.debug(f"Incorrect entry {value} at ({row}, {col}); mistakes: {self.mistakes}")
            else:
                cell.toggle_mark(value)
        except (GivenCellError, InvalidDigitError) as e:
            logger.warning(f"Rejected digit entry: {e}")
            return False
        self._refresh_status()
        return True

    def clear_selected(self) -> bool:
        try:
            self._grid.cell(*self._cursor).clear()
        except GivenCellError as e:
            logger.warning(f"Rejected clear: {e}")
            return False
        self._refresh_status()
        return True

    # --- Validation ---

    def check(self, row: int, col: int) -> CheckResult:
        """Reports whether the cell at (row, col) is correct, incorrect or still empty.

        Unlike the player actions, this is a query, so a position off the
        board raises InvalidCoordinateError instead of returning a rejection.
        Callers such as the UI clamp positions through select/move_cursor first.
        """
        return self._verifier.check_cell(self._grid.cell(row, col))

    def check_complete(self) -> bool:
        return self._verifier.is_complete(self._grid)

    def _compute_status(self) -> GameStatus:
        return GameStatus.WON if self.check_complete() else GameStatus.PLAYING

    def _refresh_status(self) -> None:
        previous = self._status
        self._status = self._compute_status()
        if self._status == GameStatus.WON and previous != GameStatus.WON:
            logger.info(f"Puzzle solved with {self.mistakes} mistake(s).")

    # --- Rendering ---

    def cell_view(self, row: int, col: int) -> CellView:
        cell = self._grid.cell(row, col)
        state = cell.state
        return CellView(
            row=row,
            col=col,
            value=cell.value,
            marks=cell.marks,
            state=state,
            result=self._verifier.check_cell(cell) if state == CellState.FILLED else None,
            selected=(row, col) == self._cursor,
        )

    def board_view(self) -> List[List[CellView]]:
        return [[self.cell_view(r, c) for c in range(GRID_SIZE)] for r in range(GRID_SIZE)]


def new_puzzle(given_count: int = DEFAULT_GIVEN_COUNT, seed: Optional[int] = None,
               rng: Optional[random.Random] = None) -> PuzzleSession:
    return PuzzleSession.create(given_count, seed=seed, rng=rng)
