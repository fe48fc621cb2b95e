from enum import Enum, auto

# --- Board geometry ---
GRID_SIZE = 6
BLOCK_ROWS = 2 # Blocks are 2 rows tall...
BLOCK_COLS = 3 # ...and 3 columns wide
CELL_COUNT = GRID_SIZE * GRID_SIZE
DIGITS = tuple(range(1, GRID_SIZE + 1))

DEFAULT_GIVEN_COUNT = 16 # 20 of the 36 cells start blank


class InputMode(Enum):
    NORMAL = auto()
    PENCIL = auto()

class CellState(Enum):
    GIVEN = auto()
    BLANK = auto()
    FILLED = auto()
    MARKED = auto()

class CheckResult(Enum):
    CORRECT = auto()
    INCORRECT = auto()
    INCOMPLETE = auto()

class GameStatus(Enum):
    PLAYING = auto()
    WON = auto()


# --- Errors ---
class SixdokuError(Exception):
    """Base class for all engine errors."""

class InvalidCoordinateError(SixdokuError, ValueError):
    def __init__(self, row, col):
        super().__init__(f"Coordinate ({row}, {col}) is outside the {GRID_SIZE}x{GRID_SIZE} board.")
        self.row = row
        self.col = col

class InvalidDigitError(SixdokuError, ValueError):
    def __init__(self, value):
        super().__init__(f"Digit {value!r} is not in 1..{GRID_SIZE}.")
        self.value = value

class GivenCellError(SixdokuError):
    def __init__(self, row, col):
        super().__init__(f"Cell ({row}, {col}) is a given and cannot be edited.")
        self.row = row
        self.col = col

class NoSolutionError(SixdokuError):
    """The partially filled grid cannot be completed."""


def _is_int(value) -> bool:
    # bool is an int subclass; True must not pass as 1
    return isinstance(value, int) and not isinstance(value, bool)

def is_digit(value) -> bool:
    return _is_int(value) and value in DIGITS

def in_bounds(row: int, col: int) -> bool:
    return _is_int(row) and _is_int(col) and 0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE

def require_in_bounds(row: int, col: int) -> None:
    if not in_bounds(row, col):
        raise InvalidCoordinateError(row, col)

def require_digit(value: int) -> None:
    if not is_digit(value):
        raise InvalidDigitError(value)
