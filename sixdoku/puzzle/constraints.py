"""Row, column and block rules of the 6x6 board.

Every function here is pure: it reads a grid of ``Optional[int]`` values
(``None`` meaning empty) and never mutates it.
"""
from typing import Dict, FrozenSet, List, Optional, Set, Tuple
import logging

from .common import GRID_SIZE, BLOCK_ROWS, BLOCK_COLS, DIGITS, is_digit, require_in_bounds

logger = logging.getLogger(__name__)

ValueGrid = List[List[Optional[int]]]
Position = Tuple[int, int]


def empty_grid() -> ValueGrid:
    return [[None] * GRID_SIZE for _ in range(GRID_SIZE)]

def block_index(row: int, col: int) -> int:
    """Blocks are numbered 0..5 left-to-right, top-to-bottom."""
    blocks_per_band = GRID_SIZE // BLOCK_COLS
    return (row // BLOCK_ROWS) * blocks_per_band + (col // BLOCK_COLS)

def block_origin(row: int, col: int) -> Position:
    return (row // BLOCK_ROWS) * BLOCK_ROWS, (col // BLOCK_COLS) * BLOCK_COLS

def row_positions(row: int) -> List[Position]:
    return [(row, c) for c in range(GRID_SIZE)]

def col_positions(col: int) -> List[Position]:
    return [(r, col) for r in range(GRID_SIZE)]

def block_positions(row: int, col: int) -> List[Position]:
    start_row, start_col = block_origin(row, col)
    return [(r, c)
            for r in range(start_row, start_row + BLOCK_ROWS)
            for c in range(start_col, start_col + BLOCK_COLS)]

def _compute_peers(row: int, col: int) -> FrozenSet[Position]:
    related = set(row_positions(row)) | set(col_positions(col)) | set(block_positions(row, col))
    related.discard((row, col))
    return frozenset(related)

# 12 peers per position: 5 in the row, 5 in the column, 2 more in the block
_PEERS: Dict[Position, FrozenSet[Position]] = {
    (r, c): _compute_peers(r, c) for r in range(GRID_SIZE) for c in range(GRID_SIZE)
}

def peers(row: int, col: int) -> FrozenSet[Position]:
    """All positions sharing a row, column or block with (row, col), excluding itself."""
    require_in_bounds(row, col)
    return _PEERS[(row, col)]


def is_valid_move(grid: ValueGrid, row: int, col: int, value: int) -> bool:
    """True if placing ``value`` at (row, col) repeats no value in its row, column or block.

    The cell's own current content is ignored, so this can also re-check a
    value that is already placed.
    """
    for r, c in peers(row, col):
        if grid[r][c] == value:
            return False
    return True

def legal_values(grid: ValueGrid, row: int, col: int) -> List[int]:
    """Digits that can go in (row, col) given current row/column/block occupancy, ascending."""
    used = {grid[r][c] for r, c in peers(row, col)}
    return [d for d in DIGITS if d not in used]


def is_full(grid: ValueGrid) -> bool:
    return all(v is not None for row in grid for v in row)

def find_conflicts(grid: ValueGrid) -> Set[Position]:
    """Positions whose value collides with a peer."""
    conflicts = set()
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            value = grid[r][c]
            if value is not None and not is_valid_move(grid, r, c, value):
                conflicts.add((r, c))
    return conflicts

def is_solved_grid(grid: ValueGrid) -> bool:
    """Full, in-range, and every row, column and block holds each digit once."""
    if len(grid) != GRID_SIZE or any(len(row) != GRID_SIZE for row in grid):
        logger.debug("Grid has the wrong shape.")
        return False
    if not is_full(grid):
        return False
    if not all(is_digit(v) for row in grid for v in row):
        return False
    return not find_conflicts(grid)
