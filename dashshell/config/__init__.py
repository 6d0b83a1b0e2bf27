"""Module: dashshell.config

Author: Michael Economou
Date: 2026-10-02

Configuration package for the dashshell application.

This package organizes configuration into logical modules:
- app: Application info, release flag, logging, session settings
- ui: Notification palette, snackbar geometry, transition timing
- navigation: Well-known paths and main shell destinations

All settings are re-exported from this module:
    from dashshell.config import API_ENDPOINT, NOTIFICATION_COLORS
"""

from dashshell.config.app import *  # noqa: F401, F403
from dashshell.config.navigation import *  # noqa: F401, F403
from dashshell.config.ui import *  # noqa: F401, F403
