import random

import pytest

from sixdoku.puzzle.common import NoSolutionError
from sixdoku.puzzle.constraints import block_positions, empty_grid, is_solved_grid
from sixdoku.puzzle.generator import GridGenerator, generate_solution
from sixdoku.puzzle.puzzle_types import SolutionGrid

from conftest import KNOWN_SOLUTION


@pytest.mark.parametrize("seed", [0, 1, 7, 42, 1234, 99999])
def test_generated_grid_satisfies_every_rule(seed):
    solution = GridGenerator(seed=seed).generate()
    rows = solution.as_lists()
    assert is_solved_grid(rows)
    for r in range(6):
        assert sorted(rows[r]) == [1, 2, 3, 4, 5, 6]
    for c in range(6):
        assert sorted(rows[r][c] for r in range(6)) == [1, 2, 3, 4, 5, 6]
    for br in range(0, 6, 2):
        for bc in range(0, 6, 3):
            assert sorted(rows[r][c] for r, c in block_positions(br, bc)) == [1, 2, 3, 4, 5, 6]


def test_same_seed_same_grid():
    assert GridGenerator(seed=5).generate() == GridGenerator(seed=5).generate()
    assert generate_solution(seed=11) == GridGenerator(rng=random.Random(11)).generate()


def test_different_seeds_vary():
    grids = {generate_solution(seed=s) for s in range(8)}
    # Not a strict guarantee per seed pair, but eight identical grids would mean no randomization
    assert len(grids) > 1


def test_rng_and_seed_are_exclusive():
    with pytest.raises(ValueError):
        GridGenerator(rng=random.Random(1), seed=1)


def test_complete_keeps_prefilled_values():
    partial = [row[:] for row in KNOWN_SOLUTION]
    for r, c in [(0, 0), (1, 4), (2, 2), (3, 3), (4, 1), (5, 5), (5, 0)]:
        partial[r][c] = None
    solution = GridGenerator(seed=3).complete(partial)
    for r in range(6):
        for c in range(6):
            if partial[r][c] is not None:
                assert solution.value_at(r, c) == partial[r][c]
    # Input grid is not mutated
    assert partial[0][0] is None


def test_complete_dead_end_raises_no_solution():
    grid = empty_grid()
    grid[0][3], grid[0][4], grid[0][5] = 1, 2, 3
    grid[2][0], grid[4][0] = 4, 5
    grid[1][1] = 6
    generator = GridGenerator(seed=0)
    with pytest.raises(NoSolutionError):
        generator.complete(grid)
    assert generator.backtracks >= 1


def test_complete_rejects_contradictory_prefill():
    grid = empty_grid()
    grid[0][0] = 1
    grid[0][4] = 1
    with pytest.raises(NoSolutionError):
        GridGenerator(seed=0).complete(grid)


@pytest.mark.parametrize("bad", [7, 0, True, 2.0])
def test_complete_rejects_out_of_range_prefill(bad):
    grid = empty_grid()
    grid[2][2] = bad
    with pytest.raises(NoSolutionError):
        GridGenerator(seed=0).complete(grid)


def test_complete_rejects_wrong_shape():
    with pytest.raises(ValueError):
        GridGenerator(seed=0).complete([[None] * 6] * 5)


def test_solution_grid_is_immutable_and_validated():
    solution = SolutionGrid(KNOWN_SOLUTION)
    with pytest.raises(TypeError):
        solution.rows[0][0] = 9
    broken = [row[:] for row in KNOWN_SOLUTION]
    broken[0][0] = broken[0][1]
    with pytest.raises(ValueError):
        SolutionGrid(broken)
