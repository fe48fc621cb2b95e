import sys
from typing import Optional
import logging

from PyQt6.QtWidgets import QApplication, QMainWindow, QWidget, QVBoxLayout, QLabel, QMessageBox
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont

from ..core.config import GameConfig
from ..core.game_state import PuzzleSession
from ..puzzle.common import InputMode, GameStatus
from .board_display import create_board_layout, render_board
from .info_bar import populate_info_bar_layout, update_info_bar
from .control_bar import populate_control_bar_layout

logger = logging.getLogger(__name__)

# Qt key code -> (d_row, d_col)
ARROW_KEYS = {
    Qt.Key.Key_Up.value: (-1, 0),
    Qt.Key.Key_Down.value: (1, 0),
    Qt.Key.Key_Left.value: (0, -1),
    Qt.Key.Key_Right.value: (0, 1),
}
DIGIT_KEYS = {getattr(Qt.Key, f"Key_{d}").value: d for d in range(1, 7)}
CLEAR_KEYS = (Qt.Key.Key_Backspace.value, Qt.Key.Key_Delete.value)


class SixdokuWindow(QMainWindow):
    """Main window: renders the session and forwards player input to it."""
    def __init__(self, config: Optional[GameConfig] = None):
        super().__init__()
        logger.info("Initializing main application window...")
        self.config = config or GameConfig()
        self.session = PuzzleSession.create(self.config.given_count, seed=self.config.seed)

        self.setWindowTitle("Sixdoku")
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)

        populate_info_bar_layout(main_layout, self)
        create_board_layout(main_layout, self)
        populate_control_bar_layout(main_layout, self)
        self._create_help_label(main_layout)

        self._refresh()
        logger.info("Main window initialization complete.")

    def _create_help_label(self, parent_layout):
        help_label = QLabel("Arrows: move | 1-6: enter | Backspace: clear | P: pencil | Ctrl+N: new")
        help_label.setFont(QFont("Arial", 10))
        help_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        parent_layout.addWidget(help_label)

    def _refresh(self):
        render_board(self)
        update_info_bar(self)
        self.pencil_button.setChecked(self.session.mode == InputMode.PENCIL)

    # --- Actions ---

    def _select_cell(self, row: int, col: int):
        if self.session.select(row, col):
            self._refresh()

    def _toggle_mode(self):
        self.session.toggle_mode()
        self._refresh()

    def _enter_digit(self, value: int):
        was_won = self.session.status == GameStatus.WON
        if self.session.enter_digit(value):
            self._refresh()
            if self.session.status == GameStatus.WON and not was_won:
                QMessageBox.information(self, "Solved", f"Puzzle solved with {self.session.mistakes} mistake(s)!")

    def _clear_selected(self):
        if self.session.clear_selected():
            self._refresh()

    def _start_new_puzzle(self):
        if self.session.status != GameStatus.WON:
            reply = QMessageBox.question(self, "New Puzzle", "Abandon the current puzzle?",
                                         QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
                                         QMessageBox.StandardButton.No)
            if reply != QMessageBox.StandardButton.Yes:
                return
        self.session.new_puzzle()
        self._refresh()

    def _restart_puzzle(self):
        self.session.restart()
        self._refresh()

    def keyPressEvent(self, event):
        key = event.key()
        if key in ARROW_KEYS:
            self.session.move_cursor(*ARROW_KEYS[key])
            self._refresh()
        elif key in DIGIT_KEYS:
            self._enter_digit(DIGIT_KEYS[key])
        elif key in CLEAR_KEYS:
            self._clear_selected()
        elif key == Qt.Key.Key_P.value:
            self._toggle_mode()
        else:
            super().keyPressEvent(event)


def main(config: Optional[GameConfig] = None):
    """Initializes and runs the PyQt application."""
    config = config or GameConfig.from_env()
    config.configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Sixdoku")
    logger.info("Application starting...")

    window = SixdokuWindow(config)
    window.show()

    logger.info("Entering application event loop.")
    exit_code = app.exec()
    logger.info(f"Application exiting with code {exit_code}.")
    return exit_code
