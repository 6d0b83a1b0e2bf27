"""Module: shell_window.py

Author: Michael Economou
Date: 2026-10-07

ShellWindow - top-level window hosting the screen stack, the snackbar
messenger and the loading overlay.
"""

from __future__ import annotations

from PyQt5.QtWidgets import QMainWindow, QStackedWidget, QWidget

from dashshell.config import WINDOW_TITLE
from dashshell.ui.adapters.qt_messenger import QtMessenger
from dashshell.ui.widgets.loading_overlay import LoadingOverlay


class ShellWindow(QMainWindow):
    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(420, 760)

        self.stack = QStackedWidget(self)
        self.setCentralWidget(self.stack)

        self.messenger = QtMessenger(self.stack)
        self.loading_overlay = LoadingOverlay(self.stack)
