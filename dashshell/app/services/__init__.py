"""Application services.

Author: Michael Economou
Date: 2026-10-04
"""

from dashshell.app.services.device_info import DeviceInfoProbe
from dashshell.app.services.main_shell import is_main_shell_destination, strip_query
from dashshell.app.services.navigator import Navigator
from dashshell.app.services.notifications import NotificationService
from dashshell.app.services.routes import RouteTable
from dashshell.app.services.token_storage import InMemoryTokenStorage

__all__ = [
    "DeviceInfoProbe",
    "InMemoryTokenStorage",
    "Navigator",
    "NotificationService",
    "RouteTable",
    "is_main_shell_destination",
    "strip_query",
]
