"""Module: qt_messenger.py

Author: Michael Economou
Date: 2026-10-06

QtMessenger - MessageSurfacePort implementation hosting a single SnackBar
anchored to the bottom of a parent window.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt5.QtCore import QEvent, QObject, QTimer, pyqtSignal
from PyQt5.QtWidgets import QWidget

from dashshell.config import SNACKBAR_MARGIN, SNACKBAR_MAX_WIDTH
from dashshell.ui.widgets.snackbar import SnackBar
from dashshell.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from dashshell.models.notification import Notification

logger = get_cached_logger(__name__)


class QtMessenger(QObject):
    """Shows at most one SnackBar on its host widget.

    Signals:
        shown(str): A message became visible
        dismissed(str): The user or the timer closed the message
    """

    shown = pyqtSignal(str)
    dismissed = pyqtSignal(str)

    def __init__(self, host: QWidget):
        super().__init__(host)
        self._host = host
        self._current: SnackBar | None = None
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self.hide_current)
        host.installEventFilter(self)

    @property
    def current(self) -> SnackBar | None:
        return self._current

    def visible_count(self) -> int:
        """Number of snackbars currently shown on the host."""
        return sum(1 for bar in self._host.findChildren(SnackBar) if not bar.isHidden())

    # =====================================
    # MessageSurfacePort
    # =====================================

    def show(self, notification: Notification) -> None:
        if self._current is not None:
            self.remove_current()

        bar = SnackBar(notification, self._host)
        self._current = bar
        self._place(bar)
        bar.show()
        bar.raise_()

        self._timer.start(notification.duration_ms)
        logger.debug(
            "[QtMessenger] %s: %s",
            notification.type.value,
            notification.message,
            extra={"dev_only": True},
        )
        self.shown.emit(notification.message)

    def remove_current(self) -> None:
        bar = self._take_current()
        if bar is not None:
            bar.hide()
            bar.deleteLater()

    def hide_current(self) -> None:
        bar = self._take_current()
        if bar is not None:
            message = bar.message
            bar.hide()
            bar.deleteLater()
            self.dismissed.emit(message)

    # =====================================
    # Internals
    # =====================================

    def _take_current(self) -> SnackBar | None:
        self._timer.stop()
        bar, self._current = self._current, None
        return bar

    def _place(self, bar: SnackBar) -> None:
        width = min(self._host.width() - 2 * SNACKBAR_MARGIN, SNACKBAR_MAX_WIDTH)
        width = max(width, 0)
        bar.setFixedWidth(width)
        bar.adjustSize()
        x = (self._host.width() - width) // 2
        y = self._host.height() - bar.height() - SNACKBAR_MARGIN
        bar.move(x, max(y, 0))

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if obj is self._host and event.type() == QEvent.Resize and self._current is not None:
            self._place(self._current)
        return super().eventFilter(obj, event)
