"""Data models for the dashshell application.

Author: Michael Economou
Date: 2026-10-03
"""

from dashshell.models.device_info import DeviceInfo
from dashshell.models.navigation import NavigationRequest, RouteMatch, TransitionType
from dashshell.models.notification import Notification, NotificationType
from dashshell.models.session_events import (
    LoadFinishedEvent,
    LoadStartedEvent,
    SessionErrorEvent,
    SessionEvent,
    UserLoadedEvent,
)
from dashshell.models.user import AuthUser, HomeDashboardInfo, User

__all__ = [
    "AuthUser",
    "DeviceInfo",
    "HomeDashboardInfo",
    "LoadFinishedEvent",
    "LoadStartedEvent",
    "NavigationRequest",
    "Notification",
    "NotificationType",
    "RouteMatch",
    "SessionErrorEvent",
    "SessionEvent",
    "TransitionType",
    "User",
    "UserLoadedEvent",
]
