"""Module: snackbar.py

Author: Michael Economou
Date: 2026-10-06

SnackBar - single-line notification bar with a close action.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QSizePolicy, QWidget

from dashshell.config import SNACKBAR_FONT_SIZE, SNACKBAR_MIN_HEIGHT

if TYPE_CHECKING:
    from dashshell.models.notification import Notification


class SnackBar(QFrame):
    """Coloured message bar showing one notification.

    Signals:
        action_triggered: The close action was clicked
    """

    action_triggered = pyqtSignal()

    def __init__(self, notification: Notification, parent: QWidget | None = None):
        super().__init__(parent)
        self.notification = notification
        self.setObjectName("SnackBar")
        self.setMinimumHeight(SNACKBAR_MIN_HEIGHT)
        self.setSizePolicy(QSizePolicy.Preferred, QSizePolicy.Fixed)
        self.setStyleSheet(
            f"#SnackBar {{ background-color: {notification.background_color};"
            " border-radius: 4px; }"
            f"QLabel {{ color: {notification.text_color}; }}"
            f"QPushButton {{ color: {notification.text_color}; background: transparent;"
            " border: none; font-weight: bold; padding: 4px 8px; }"
        )

        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 6, 8, 6)

        font = QFont()
        font.setPointSize(SNACKBAR_FONT_SIZE)

        self.label = QLabel(notification.message, self)
        self.label.setWordWrap(True)
        self.label.setFont(font)
        layout.addWidget(self.label, 1)

        self.action_button = QPushButton(notification.action_label, self)
        self.action_button.setFont(font)
        self.action_button.setFlat(True)
        self.action_button.clicked.connect(self._on_action)
        layout.addWidget(self.action_button)

    @property
    def message(self) -> str:
        return self.label.text()

    def _on_action(self) -> None:
        self.action_triggered.emit()
        if self.notification.on_action is not None:
            self.notification.on_action()
