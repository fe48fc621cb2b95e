from PyQt6.QtWidgets import QHBoxLayout, QPushButton
from PyQt6.QtGui import QIcon
from PyQt6.QtCore import Qt
import logging

logger = logging.getLogger(__name__)

def populate_control_bar_layout(parent_layout, main_window):
    """Creates the control bar buttons and connects them to main_window methods."""
    logger.debug("Populating control bar layout...")
    control_layout = QHBoxLayout()

    main_window.new_button = QPushButton(" New Puzzle")
    main_window.new_button.setIcon(QIcon.fromTheme("document-new"))
    main_window.new_button.setToolTip("Start a new puzzle (Ctrl+N)")
    main_window.new_button.setShortcut("Ctrl+N")
    main_window.new_button.clicked.connect(main_window._start_new_puzzle)
    control_layout.addWidget(main_window.new_button)

    main_window.pencil_button = QPushButton(" Pencil")
    main_window.pencil_button.setCheckable(True)
    main_window.pencil_button.setToolTip("Toggle pencil marks (P)")
    main_window.pencil_button.clicked.connect(main_window._toggle_mode)
    control_layout.addWidget(main_window.pencil_button)

    main_window.restart_button = QPushButton(" Restart")
    main_window.restart_button.setIcon(QIcon.fromTheme("edit-undo"))
    main_window.restart_button.setToolTip("Clear all your entries (Ctrl+R)")
    main_window.restart_button.setShortcut("Ctrl+R")
    main_window.restart_button.clicked.connect(main_window._restart_puzzle)
    control_layout.addWidget(main_window.restart_button)

    # Keep keyboard focus on the board so digits and arrows reach the window
    for button in (main_window.new_button, main_window.pencil_button, main_window.restart_button):
        button.setFocusPolicy(Qt.FocusPolicy.NoFocus)

    parent_layout.addLayout(control_layout)
    logger.debug("Control bar layout populated.")
