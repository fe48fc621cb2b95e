import pytest

from sixdoku.puzzle.common import InvalidCoordinateError
from sixdoku.puzzle.constraints import (block_index, block_positions, empty_grid, find_conflicts,
                                        is_full, is_solved_grid, is_valid_move, legal_values, peers)

from conftest import KNOWN_SOLUTION


def test_block_index_layout():
    # Two rows by three columns per block, numbered across then down
    assert block_index(0, 0) == 0
    assert block_index(1, 2) == 0
    assert block_index(0, 3) == 1
    assert block_index(2, 0) == 2
    assert block_index(3, 5) == 3
    assert block_index(5, 5) == 5
    assert sorted(block_positions(3, 4)) == [(2, 3), (2, 4), (2, 5), (3, 3), (3, 4), (3, 5)]


def test_peers_count_and_exclusion():
    for r in range(6):
        for c in range(6):
            related = peers(r, c)
            assert len(related) == 12
            assert (r, c) not in related


def test_is_valid_move_checks_row_col_block():
    grid = empty_grid()
    grid[0][5] = 3 # same row as (0, 0)
    grid[4][0] = 4 # same column
    grid[1][1] = 5 # same block
    assert not is_valid_move(grid, 0, 0, 3)
    assert not is_valid_move(grid, 0, 0, 4)
    assert not is_valid_move(grid, 0, 0, 5)
    assert is_valid_move(grid, 0, 0, 1)
    # (3, 3) shares no row, column or block with any of them
    assert is_valid_move(grid, 3, 3, 3)


def test_is_valid_move_ignores_own_value():
    grid = [row[:] for row in KNOWN_SOLUTION]
    assert is_valid_move(grid, 2, 2, grid[2][2])


def test_legal_values_prunes_occupied_digits():
    grid = empty_grid()
    grid[0][3], grid[0][4], grid[0][5] = 1, 2, 3
    grid[2][0], grid[4][0] = 4, 5
    assert legal_values(grid, 0, 0) == [6]
    grid[1][1] = 6
    assert legal_values(grid, 0, 0) == []
    assert legal_values(empty_grid(), 3, 3) == [1, 2, 3, 4, 5, 6]


def test_out_of_range_position_rejected():
    with pytest.raises(InvalidCoordinateError):
        legal_values(empty_grid(), 6, 0)
    with pytest.raises(InvalidCoordinateError):
        is_valid_move(empty_grid(), 0, -1, 1)


def test_is_solved_grid():
    assert is_solved_grid([row[:] for row in KNOWN_SOLUTION])

    partial = [row[:] for row in KNOWN_SOLUTION]
    partial[5][5] = None
    assert not is_full(partial)
    assert not is_solved_grid(partial)

    # Swapping two cells in a row keeps the row valid but breaks the columns
    swapped = [row[:] for row in KNOWN_SOLUTION]
    swapped[0][0], swapped[0][1] = swapped[0][1], swapped[0][0]
    assert not is_solved_grid(swapped)
    assert find_conflicts(swapped) >= {(0, 0), (0, 1)}

    assert not is_solved_grid(KNOWN_SOLUTION[:5])


def test_is_solved_grid_rejects_bool_cells():
    grid = [row[:] for row in KNOWN_SOLUTION]
    assert grid[4][1] == 1
    grid[4][1] = True
    assert not is_solved_grid(grid)
