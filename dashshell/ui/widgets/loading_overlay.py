"""Module: loading_overlay.py

Author: Michael Economou
Date: 2026-10-06

Translucent busy indicator covering its parent while the session loads.
"""

from __future__ import annotations

from PyQt5.QtCore import QEvent, QObject, Qt
from PyQt5.QtWidgets import QLabel, QProgressBar, QVBoxLayout, QWidget

from dashshell.config import LOADING_OVERLAY_BACKGROUND, LOADING_OVERLAY_TEXT


class LoadingOverlay(QWidget):
    """Overlay bound to a loading_changed(bool) signal."""

    def __init__(self, parent: QWidget):
        super().__init__(parent)
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setStyleSheet(f"background-color: {LOADING_OVERLAY_BACKGROUND};")

        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignCenter)

        self._label = QLabel(LOADING_OVERLAY_TEXT, self)
        self._label.setStyleSheet("color: white; background: transparent;")
        self._label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self._label)

        # Range 0..0 renders an indeterminate bar
        self._progress = QProgressBar(self)
        self._progress.setRange(0, 0)
        self._progress.setTextVisible(False)
        self._progress.setFixedWidth(160)
        layout.addWidget(self._progress, 0, Qt.AlignCenter)

        parent.installEventFilter(self)
        self.hide()

    def set_loading(self, loading: bool) -> None:
        if loading:
            self.setGeometry(self.parentWidget().rect())
            self.show()
            self.raise_()
        else:
            self.hide()

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if obj is self.parentWidget() and event.type() == QEvent.Resize:
            self.setGeometry(self.parentWidget().rect())
        return super().eventFilter(obj, event)
