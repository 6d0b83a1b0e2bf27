"""Module: qt_router.py

Author: Michael Economou
Date: 2026-10-06

QtRouter - RouterPort implementation over a QStackedWidget.

Paths are resolved through a RouteTable; each match builds a new screen
from its factory with (context, params). Every pushed screen gets a
concurrent.futures.Future that resolves with the value passed to pop().
"""

from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from PyQt5.QtCore import QEasingCurve, QObject, QPoint, QPropertyAnimation, pyqtSignal
from PyQt5.QtWidgets import QGraphicsOpacityEffect, QStackedWidget, QWidget

from dashshell.config import DEFAULT_TRANSITION_DURATION_MS
from dashshell.models.navigation import TransitionType
from dashshell.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from dashshell.app.services.routes import RouteTable
    from dashshell.app.state.session_context import SessionContext

logger = get_cached_logger(__name__)


def _clear_effect(widget: QWidget) -> None:
    try:
        widget.setGraphicsEffect(None)
    except RuntimeError:
        # Screen already deleted by a later navigation
        pass


@dataclass
class _StackEntry:
    path: str
    screen: QWidget
    result: Future


class QtRouter(QObject):
    """Screen stack with fade and slide transitions."""

    screen_pushed = pyqtSignal(str)  # path
    screen_popped = pyqtSignal(str)  # path

    def __init__(self, stack: QStackedWidget, routes: RouteTable, parent: QObject | None = None):
        super().__init__(parent)
        self._stack = stack
        self._routes = routes
        self._context: SessionContext | None = None
        self._entries: list[_StackEntry] = []
        self._animation: QPropertyAnimation | None = None
        self._animated: QWidget | None = None

    def bind_context(self, context: SessionContext) -> None:
        """Context handed to screen factories."""
        self._context = context

    @property
    def routes(self) -> RouteTable:
        return self._routes

    def depth(self) -> int:
        return len(self._entries)

    def paths(self) -> list[str]:
        return [entry.path for entry in self._entries]

    def top_screen(self) -> QWidget | None:
        return self._entries[-1].screen if self._entries else None

    # =====================================
    # RouterPort
    # =====================================

    def navigate_to(
        self,
        screen: Any,
        path: str,
        *,
        transition: TransitionType | None = None,
        transition_duration: int | None = None,
        replace: bool = False,
        clear_stack: bool = False,
    ) -> Future | None:
        _ = screen
        match = self._routes.match(path)
        if match is None:
            logger.warning("[QtRouter] No route for path: %s", path)
            return None

        new_screen = match.factory(self._context, match.params)

        if clear_stack:
            while self._entries:
                self._remove_entry(self._entries.pop())
        elif replace and self._entries:
            self._remove_entry(self._entries.pop())

        entry = _StackEntry(path=path, screen=new_screen, result=Future())
        self._entries.append(entry)
        self._stack.addWidget(new_screen)
        self._stack.setCurrentWidget(new_screen)
        if self._context is not None:
            self._context.navigator.register_screen(new_screen)
        self._animate(new_screen, transition, transition_duration)

        logger.info("[QtRouter] -> %s (depth %d)", path, len(self._entries))
        self.screen_pushed.emit(path)
        return entry.result

    def pop(self, screen: Any, result: Any = None) -> None:
        _ = screen
        if len(self._entries) < 2:
            logger.debug("[QtRouter] Nothing to pop", extra={"dev_only": True})
            return

        self._stop_animation()
        entry = self._entries.pop()
        self._remove_entry(entry, result)
        previous = self._entries[-1].screen
        self._stack.setCurrentWidget(previous)
        if self._context is not None:
            self._context.navigator.register_screen(previous)

        logger.info("[QtRouter] <- %s (depth %d)", entry.path, len(self._entries))
        self.screen_popped.emit(entry.path)

    # =====================================
    # Internals
    # =====================================

    def _remove_entry(self, entry: _StackEntry, result: Any = None) -> None:
        if self._context is not None:
            self._context.navigator.unregister_screen(entry.screen)
        self._stack.removeWidget(entry.screen)
        entry.screen.deleteLater()
        if not entry.result.done():
            entry.result.set_result(result)

    def _animate(
        self, widget: QWidget, transition: TransitionType | None, duration: int | None
    ) -> None:
        self._stop_animation()

        if transition in (None, TransitionType.NATIVE, TransitionType.NONE):
            return

        duration = DEFAULT_TRANSITION_DURATION_MS if duration is None else duration

        if transition is TransitionType.FADE_IN:
            effect = QGraphicsOpacityEffect(widget)
            widget.setGraphicsEffect(effect)
            animation = QPropertyAnimation(effect, b"opacity", self)
            animation.setStartValue(0.0)
            animation.setEndValue(1.0)
            animation.finished.connect(lambda: _clear_effect(widget))
        else:
            animation = QPropertyAnimation(widget, b"pos", self)
            animation.setStartValue(QPoint(self._stack.width(), 0))
            animation.setEndValue(QPoint(0, 0))

        animation.setDuration(duration)
        animation.setEasingCurve(QEasingCurve.OutCubic)
        animation.start()
        self._animation = animation
        self._animated = widget

    def _stop_animation(self) -> None:
        """Stop a running transition and restore its screen to its final state."""
        if self._animation is None:
            return
        # stop() does not emit finished
        self._animation.stop()
        self._animation = None
        widget, self._animated = self._animated, None
        if widget is not None:
            _clear_effect(widget)
            try:
                widget.move(0, 0)
            except RuntimeError:
                pass
