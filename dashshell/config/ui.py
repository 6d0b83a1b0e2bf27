"""Module: dashshell.config.ui

Author: Michael Economou
Date: 2026-10-02

UI configuration: notification palette, snackbar geometry, transitions.
"""

# =====================================
# NOTIFICATIONS
# =====================================

NOTIFICATION_COLORS = {
    "info": "#323232",
    "warn": "#dc6d1b",
    "success": "#008000",
    "error": "#800000",
}

NOTIFICATION_TEXT_COLOR = "#ffffff"

# One day: messages stay until dismissed unless the caller passes a duration
NOTIFICATION_DEFAULT_DURATION_MS = 24 * 60 * 60 * 1000

NOTIFICATION_CLOSE_LABEL = "Close"

# =====================================
# SNACKBAR
# =====================================

SNACKBAR_MARGIN = 12
SNACKBAR_MIN_HEIGHT = 48
SNACKBAR_MAX_WIDTH = 640
SNACKBAR_FONT_SIZE = 10  # pt

# =====================================
# NAVIGATION TRANSITIONS
# =====================================

ROUTE_TRANSITION_DURATION_MS = 750
DEFAULT_TRANSITION_DURATION_MS = 250

# =====================================
# LOADING OVERLAY
# =====================================

LOADING_OVERLAY_BACKGROUND = "rgba(0, 0, 0, 80)"
LOADING_OVERLAY_TEXT = "Loading..."
