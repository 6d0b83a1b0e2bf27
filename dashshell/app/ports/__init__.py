"""Ports - protocols implemented by external collaborators and Qt adapters.

Author: Michael Economou
Date: 2026-10-03
"""

from dashshell.app.ports.navigation import (
    MainNavigationPort,
    RouterPort,
    ScreenPort,
    supports_main_navigation,
)
from dashshell.app.ports.notifications import MessageSurfacePort
from dashshell.app.ports.session import (
    ComputeFunc,
    DashboardService,
    SessionClient,
    SessionClientFactory,
    TokenStorage,
    UserService,
)

__all__ = [
    "ComputeFunc",
    "DashboardService",
    "MainNavigationPort",
    "MessageSurfacePort",
    "RouterPort",
    "ScreenPort",
    "SessionClient",
    "SessionClientFactory",
    "TokenStorage",
    "UserService",
    "supports_main_navigation",
]
