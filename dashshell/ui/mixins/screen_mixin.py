"""Module: screen_mixin.py

Author: Michael Economou
Date: 2026-10-06

ScreenMixin - gives screens direct access to the injected SessionContext.

Screens receive the context in their constructor and call set_context().
The mixin then forwards navigation, notification and loading helpers, and
registers the screen with the Navigator on mount/unmount.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Future
from typing import TYPE_CHECKING, Any

from dashshell.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from dashshell.app.ports.session import SessionClient
    from dashshell.app.state.session_context import SessionContext


class ScreenMixin:
    """Context helpers for screens."""

    _context: SessionContext | None = None

    def set_context(self, context: SessionContext) -> None:
        self._context = context

    @property
    def context(self) -> SessionContext:
        if self._context is None:
            raise RuntimeError(f"{type(self).__name__} has no session context")
        return self._context

    @property
    def log(self) -> logging.Logger:
        return get_cached_logger(type(self).__module__)

    @property
    def session_client(self) -> SessionClient | None:
        return self.context.client

    @property
    def is_physical_device(self) -> bool:
        return self.context.is_physical_device()

    # =====================================
    # Lifecycle
    # =====================================

    def mount_screen(self) -> None:
        """Register as the active screen."""
        if self._context is not None:
            self._context.navigator.register_screen(self)

    def unmount_screen(self) -> None:
        if self._context is not None:
            self._context.navigator.unregister_screen(self)

    def subscribe_loading(self, listener: Callable[[bool], None]) -> Callable[[], None]:
        """Follow the shared busy flag; returns the unsubscribe callable."""
        return self.context.loading_state.subscribe(listener)

    # =====================================
    # Navigation
    # =====================================

    def navigate_to(
        self, path: str, replace: bool = False, clear_stack: bool = False
    ) -> Future | None:
        return self.context.navigate_to(path, replace=replace, clear_stack=clear_stack)

    def pop(self, result: Any = None) -> None:
        self.context.pop(result)

    # =====================================
    # Notifications
    # =====================================

    def hide_notification(self) -> None:
        self.context.hide_notification()

    def show_error_notification(self, message: str, duration_ms: int | None = None) -> None:
        self.context.show_error_notification(message, duration_ms)

    def show_info_notification(self, message: str, duration_ms: int | None = None) -> None:
        self.context.show_info_notification(message, duration_ms)

    def show_warn_notification(self, message: str, duration_ms: int | None = None) -> None:
        self.context.show_warn_notification(message, duration_ms)

    def show_success_notification(self, message: str, duration_ms: int | None = None) -> None:
        self.context.show_success_notification(message, duration_ms)
