from PyQt6.QtWidgets import QGridLayout, QLabel, QFrame, QWidget
from PyQt6.QtGui import QFont
from PyQt6.QtCore import Qt, pyqtSignal
from typing import Tuple
import logging

from ..core.game_state import CellView
from ..puzzle.common import GRID_SIZE, BLOCK_ROWS, BLOCK_COLS, CellState, CheckResult

logger = logging.getLogger(__name__)

CELL_SIZE = 64

# --- Cell styles ---
BASE_STYLE = "border: 1px solid #7a8aa0; background-color: {bg}; color: {fg};"
GIVEN_COLORS = ("#e4e8ef", "#1b1f27")
BLANK_COLORS = ("#ffffff", "#1b1f27")
CORRECT_COLORS = ("#ffffff", "#1f5fbf")
INCORRECT_COLORS = ("#fbe3e3", "#c62828")
MARKED_COLORS = ("#ffffff", "#6b7380")
SELECTED_BG = "#fff3b0"


class CellLabel(QLabel):
    """A clickable square of the board."""
    clicked = pyqtSignal(int, int)

    def __init__(self, row: int, col: int, parent=None):
        super().__init__(parent)
        self.row = row
        self.col = col
        self.setFixedSize(CELL_SIZE, CELL_SIZE)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setFrameShape(QFrame.Shape.NoFrame)

    def mousePressEvent(self, event):
        self.clicked.emit(self.row, self.col)
        super().mousePressEvent(event)


def create_board_layout(parent_layout, main_window):
    """Builds the 6x6 cell grid, with gaps between the 2x3 blocks.
       Stores the cell widgets on main_window.cell_labels keyed by (row, col).
    """
    logger.debug("Creating board layout...")
    board_widget = QWidget()
    grid = QGridLayout(board_widget)
    grid.setSpacing(0)
    main_window.cell_labels = {}

    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            label = CellLabel(r, c, board_widget)
            label.clicked.connect(main_window._select_cell)
            # Spacer rows/columns between blocks give the thicker block lines
            grid.addWidget(label, r + r // BLOCK_ROWS, c + c // BLOCK_COLS)
            main_window.cell_labels[(r, c)] = label
    for band in range(1, GRID_SIZE // BLOCK_ROWS):
        grid.setRowMinimumHeight(band * (BLOCK_ROWS + 1) - 1, 4)
    for stack in range(1, GRID_SIZE // BLOCK_COLS):
        grid.setColumnMinimumWidth(stack * (BLOCK_COLS + 1) - 1, 4)

    parent_layout.addWidget(board_widget, alignment=Qt.AlignmentFlag.AlignCenter)
    logger.debug("Board layout created.")


def _colors_for(view: CellView) -> Tuple[str, str]:
    if view.state == CellState.GIVEN:
        return GIVEN_COLORS
    if view.state == CellState.FILLED:
        return INCORRECT_COLORS if view.result == CheckResult.INCORRECT else CORRECT_COLORS
    if view.state == CellState.MARKED:
        return MARKED_COLORS
    return BLANK_COLORS

def _marks_text(marks) -> str:
    # Three per line, blank where a digit is not marked
    slots = [str(d) if d in marks else " " for d in range(1, GRID_SIZE + 1)]
    return "\n".join(" ".join(slots[i:i + 3]) for i in range(0, GRID_SIZE, 3))

def render_cell(label: CellLabel, view: CellView):
    bg, fg = _colors_for(view)
    if view.selected:
        bg = SELECTED_BG
    label.setStyleSheet(BASE_STYLE.format(bg=bg, fg=fg))

    if view.state in (CellState.GIVEN, CellState.FILLED):
        weight = QFont.Weight.Bold if view.given else QFont.Weight.Normal
        label.setFont(QFont("Arial", 22, weight))
        label.setText(str(view.value))
    elif view.state == CellState.MARKED:
        label.setFont(QFont("Courier New", 9))
        label.setText(_marks_text(view.marks))
    else:
        label.setText("")

def render_board(main_window):
    """Redraws every cell from the session's board view."""
    for row in main_window.session.board_view():
        for view in row:
            label = main_window.cell_labels.get((view.row, view.col))
            if label is not None:
                render_cell(label, view)
