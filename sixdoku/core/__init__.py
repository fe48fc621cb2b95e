from .config import GameConfig
from .game_state import PuzzleSession, CellView, new_puzzle
