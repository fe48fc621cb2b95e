from typing import List, Optional, Set, FrozenSet, Tuple, Iterator, Sequence
import logging

from .common import (GRID_SIZE, CellState, GivenCellError,
                     require_digit, require_in_bounds)
from .constraints import ValueGrid, is_solved_grid

logger = logging.getLogger(__name__)


class SolutionGrid:
    """A fully solved board. Immutable once built."""
    def __init__(self, rows: Sequence[Sequence[int]]):
        frozen = tuple(tuple(row) for row in rows)
        if not is_solved_grid([list(row) for row in frozen]):
            raise ValueError("SolutionGrid requires a full grid that satisfies every row, column and block rule.")
        self._rows: Tuple[Tuple[int, ...], ...] = frozen

    @property
    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        return self._rows

    def value_at(self, row: int, col: int) -> int:
        require_in_bounds(row, col)
        return self._rows[row][col]

    def as_lists(self) -> List[List[int]]:
        return [list(row) for row in self._rows]

    def __eq__(self, other):
        if not isinstance(other, SolutionGrid):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __repr__(self):
        return f"SolutionGrid({self.as_lists()!r})"


class Cell:
    """One square of the play board.

    A given cell is frozen at creation. Every other cell is BLANK, FILLED or
    MARKED; the entered value and the pencil marks are stored separately, and
    a present value always takes precedence when reporting the state.
    """
    def __init__(self, row: int, col: int, given_value: Optional[int] = None):
        require_in_bounds(row, col)
        if given_value is not None:
            require_digit(given_value)
        self.row = row
        self.col = col
        self._given = given_value is not None
        self._value: Optional[int] = given_value
        self._marks: Set[int] = set()

    @property
    def given(self) -> bool:
        return self._given

    @property
    def value(self) -> Optional[int]:
        return self._value

    @property
    def marks(self) -> FrozenSet[int]:
        return frozenset(self._marks)

    @property
    def state(self) -> CellState:
        if self._given:
            return CellState.GIVEN
        if self._value is not None:
            return CellState.FILLED
        if self._marks:
            return CellState.MARKED
        return CellState.BLANK

    @property
    def editable(self) -> bool:
        return not self._given

    def _require_editable(self) -> None:
        if self._given:
            raise GivenCellError(self.row, self.col)

    def fill(self, value: int) -> None:
        """Normal-mode entry: set the value and drop the pencil marks."""
        self._require_editable()
        require_digit(value)
        self._value = value
        self._marks.clear()
        logger.debug(f"Cell ({self.row}, {self.col}) filled with {value}")

    def toggle_mark(self, value: int) -> None:
        """Pencil-mode entry: flip one candidate. The entered value is left alone."""
        self._require_editable()
        require_digit(value)
        if value in self._marks:
            self._marks.remove(value)
        else:
            self._marks.add(value)
        logger.debug(f"Cell ({self.row}, {self.col}) marks now {sorted(self._marks)}")

    def clear(self) -> None:
        self._require_editable()
        self._value = None
        self._marks.clear()

    def __repr__(self):
        return f"Cell(row={self.row}, col={self.col}, state={self.state.name}, value={self._value}, marks={sorted(self._marks)})"


class PuzzleGrid:
    """The 6x6 board of Cells the player edits."""
    def __init__(self, cells: Sequence[Sequence[Cell]]):
        if len(cells) != GRID_SIZE or any(len(row) != GRID_SIZE for row in cells):
            raise ValueError(f"PuzzleGrid needs exactly {GRID_SIZE}x{GRID_SIZE} cells.")
        for r, row in enumerate(cells):
            for c, cell in enumerate(row):
                if (cell.row, cell.col) != (r, c):
                    raise ValueError(f"Cell at index ({r}, {c}) reports position ({cell.row}, {cell.col}).")
        self._cells: List[List[Cell]] = [list(row) for row in cells]

    def cell(self, row: int, col: int) -> Cell:
        require_in_bounds(row, col)
        return self._cells[row][col]

    def __iter__(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    def given_cells(self) -> List[Cell]:
        return [cell for cell in self if cell.given]

    def count(self, state: CellState) -> int:
        return sum(1 for cell in self if cell.state == state)

    def as_values(self) -> ValueGrid:
        return [[cell.value for cell in row] for row in self._cells]

    def reset(self) -> None:
        """Clear every editable cell back to BLANK."""
        for cell in self:
            if cell.editable:
                cell.clear()

    def __str__(self):
        return "\n".join(" ".join(str(v) if v is not None else "." for v in row)
                         for row in self.as_values())
