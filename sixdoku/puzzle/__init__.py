from .common import (GRID_SIZE, DIGITS, DEFAULT_GIVEN_COUNT, InputMode, CellState, CheckResult,
                     GameStatus, SixdokuError, InvalidCoordinateError, InvalidDigitError,
                     GivenCellError, NoSolutionError)
from .puzzle_types import Cell, PuzzleGrid, SolutionGrid
from .generator import GridGenerator
from .carver import PuzzleCarver
from .verifier import PuzzleVerifier
