from PyQt6.QtWidgets import QHBoxLayout, QLabel
from PyQt6.QtGui import QFont
import logging

from ..puzzle.common import GameStatus

logger = logging.getLogger(__name__)

def populate_info_bar_layout(parent_layout, main_window):
    """Creates the mode / mistakes / status labels and stores them on main_window."""
    logger.debug("Populating info bar layout...")
    info_bar_layout = QHBoxLayout()

    main_window.mode_label = QLabel("Mode: NORMAL")
    main_window.mode_label.setFont(QFont("Arial", 12))
    info_bar_layout.addWidget(main_window.mode_label)

    info_bar_layout.addStretch(1)

    main_window.mistakes_label = QLabel("Mistakes: 0")
    main_window.mistakes_label.setFont(QFont("Arial", 12))
    info_bar_layout.addWidget(main_window.mistakes_label)

    info_bar_layout.addStretch(1)

    main_window.status_label = QLabel("")
    main_window.status_label.setFont(QFont("Arial", 12, QFont.Weight.Bold))
    info_bar_layout.addWidget(main_window.status_label)

    parent_layout.addLayout(info_bar_layout)
    logger.debug("Info bar layout populated.")

def update_info_bar(main_window):
    session = main_window.session
    main_window.mode_label.setText(f"Mode: {session.mode.name} (P)")
    main_window.mistakes_label.setText(f"Mistakes: {session.mistakes}")
    if session.status == GameStatus.WON:
        main_window.status_label.setText("Solved!")
        main_window.status_label.setStyleSheet("color: green;")
    else:
        main_window.status_label.setText(f"Givens: {session.given_count}")
        main_window.status_label.setStyleSheet("")
