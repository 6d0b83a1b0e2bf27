"""Module: notification.py

Author: Michael Economou
Date: 2026-10-03

Notification severities and the message record handed to the message surface.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class NotificationType(Enum):
    """Severity of a user-facing notification."""

    INFO = "info"
    WARN = "warn"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class Notification:
    """A styled message ready to be shown by a message surface."""

    message: str
    type: NotificationType
    duration_ms: int
    background_color: str
    text_color: str
    action_label: str
    on_action: Callable[[], None] | None = None
