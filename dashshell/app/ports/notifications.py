"""Message surface port.

Author: Michael Economou
Date: 2026-10-03
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from dashshell.models.notification import Notification


@runtime_checkable
class MessageSurfacePort(Protocol):
    """Single-slot surface showing one notification at a time."""

    def show(self, notification: Notification) -> None:
        """Show a notification. The caller removes the previous one first."""
        ...

    def remove_current(self) -> None:
        """Remove the visible notification immediately, without animation."""
        ...

    def hide_current(self) -> None:
        """Dismiss the visible notification (user action)."""
        ...
