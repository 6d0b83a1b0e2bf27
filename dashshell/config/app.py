"""Module: dashshell.config.app

Author: Michael Economou
Date: 2026-10-02

Application-level configuration: app info, release flag, logging settings,
session client settings.
"""

import os

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "dashshell"
APP_VERSION = "1.0"
APP_AUTHOR = "Michael Economou"

WINDOW_TITLE = "Dashboards"

# Release builds: re-initialization is logged instead of raised,
# and only warnings and above reach the log outputs.
RELEASE_MODE = os.environ.get("DASHSHELL_RELEASE", "0").lower() in ("1", "true", "yes")

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_LEVEL = "INFO"

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"

# File logging
LOG_TO_FILE = True
LOG_FILE_LEVEL = "INFO"
LOG_FILE_MAX_BYTES = 10_000_000  # 10MB per file
LOG_FILE_BACKUP_COUNT = 5

# Debug file logging
LOG_DEBUG_FILE_ENABLED = False
LOG_DEBUG_FILE_MAX_BYTES = 20_000_000
LOG_DEBUG_FILE_BACKUP_COUNT = 3

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False

# =====================================
# SESSION
# =====================================

API_ENDPOINT = os.environ.get("DASHSHELL_API_ENDPOINT", "http://localhost:8080")

# False: overlapping loads share one flag, first finish clears it.
# True: the flag stays set until every started load has finished.
LOADING_REFCOUNTED = False

# "log_and_degrade" or "surface"
ERROR_POLICY = "log_and_degrade"

# Interval at which the shell drives its asyncio loop between Qt events
ASYNC_PUMP_INTERVAL_MS = 10
