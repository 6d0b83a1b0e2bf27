"""Module: notifications.py

Author: Michael Economou
Date: 2026-10-04

Notification service - styles user-facing messages and keeps at most one of
them on the attached message surface.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dashshell.config import (
    NOTIFICATION_CLOSE_LABEL,
    NOTIFICATION_COLORS,
    NOTIFICATION_DEFAULT_DURATION_MS,
    NOTIFICATION_TEXT_COLOR,
)
from dashshell.models.notification import Notification, NotificationType
from dashshell.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from dashshell.app.ports.notifications import MessageSurfacePort

logger = get_cached_logger(__name__)


class NotificationService:
    """Single-slot notification dispatcher.

    Every show call removes the current message before showing the new one,
    so the surface never stacks messages.
    """

    def __init__(self, surface: MessageSurfacePort | None = None):
        self._surface = surface

    @property
    def surface(self) -> MessageSurfacePort | None:
        return self._surface

    def attach_surface(self, surface: MessageSurfacePort | None) -> None:
        self._surface = surface

    def build(
        self, message: str, notification_type: NotificationType, duration_ms: int | None = None
    ) -> Notification:
        """Create a styled notification for the given severity."""
        return Notification(
            message=message,
            type=notification_type,
            duration_ms=NOTIFICATION_DEFAULT_DURATION_MS if duration_ms is None else duration_ms,
            background_color=NOTIFICATION_COLORS[notification_type.value],
            text_color=NOTIFICATION_TEXT_COLOR,
            action_label=NOTIFICATION_CLOSE_LABEL,
            on_action=self.dismiss,
        )

    def show_notification(
        self, message: str, notification_type: NotificationType, duration_ms: int | None = None
    ) -> Notification | None:
        """Replace the current message with a new one.

        Returns:
            The notification handed to the surface, or None without a surface.
        """
        if self._surface is None:
            logger.warning(
                "[NotificationService] No message surface, dropping %s: %s",
                notification_type.value,
                message,
            )
            return None

        notification = self.build(message, notification_type, duration_ms)
        self._surface.remove_current()
        self._surface.show(notification)
        return notification

    def show_info(self, message: str, duration_ms: int | None = None) -> Notification | None:
        return self.show_notification(message, NotificationType.INFO, duration_ms)

    def show_warn(self, message: str, duration_ms: int | None = None) -> Notification | None:
        return self.show_notification(message, NotificationType.WARN, duration_ms)

    def show_success(self, message: str, duration_ms: int | None = None) -> Notification | None:
        return self.show_notification(message, NotificationType.SUCCESS, duration_ms)

    def show_error(self, message: str, duration_ms: int | None = None) -> Notification | None:
        return self.show_notification(message, NotificationType.ERROR, duration_ms)

    def hide(self) -> None:
        """Remove the current message without replacement."""
        if self._surface is not None:
            self._surface.remove_current()

    def dismiss(self) -> None:
        """Close action of a notification."""
        if self._surface is not None:
            self._surface.hide_current()
