"""Module: qt_session_context.py - Qt wrapper for SessionContext.

Author: Michael Economou
Date: 2026-10-06

QtSessionContext relays SessionContext state changes as Qt signals so
widgets can react to them without polling.

For the Qt-free version, see app/state/session_context.py
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt5.QtCore import QObject, pyqtSignal

from dashshell.app.state.session_context import NAVIGATION, SESSION_ERROR, USER_LOADED
from dashshell.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from dashshell.app.state.session_context import SessionContext
    from dashshell.models.navigation import NavigationRequest

logger = get_cached_logger(__name__)


class QtSessionContext(QObject):
    """Qt-aware wrapper for SessionContext.

    Signals:
        loading_changed(bool): Busy flag toggled
        user_loaded(bool): Authentication resolved (authenticated or not)
        session_error(str): Session client reported an error
        navigation_requested(str): A path was handed to the router
    """

    loading_changed = pyqtSignal(bool)
    user_loaded = pyqtSignal(bool)
    session_error = pyqtSignal(str)
    navigation_requested = pyqtSignal(str)

    def __init__(self, context: SessionContext, parent: QObject | None = None):
        super().__init__(parent)
        self._context = context

        self._unsubscribe_loading = context.loading_state.subscribe(self.loading_changed.emit)
        context.add_listener(USER_LOADED, self.user_loaded.emit)
        context.add_listener(SESSION_ERROR, self.session_error.emit)
        context.add_listener(NAVIGATION, self._on_navigation)

        logger.debug("QtSessionContext initialized (Qt wrapper)", extra={"dev_only": True})

    @property
    def context(self) -> SessionContext:
        return self._context

    def _on_navigation(self, request: NavigationRequest) -> None:
        self.navigation_requested.emit(request.path)

    def disconnect_context(self) -> None:
        """Stop relaying loading changes (used on shutdown)."""
        self._unsubscribe_loading()
