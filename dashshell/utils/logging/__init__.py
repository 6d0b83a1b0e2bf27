"""Logging utilities.

Author: Michael Economou
Date: 2026-10-02
"""

from dashshell.utils.logging.logger_factory import get_cached_logger
from dashshell.utils.logging.logger_setup import ConfigureLogger

__all__ = ["ConfigureLogger", "get_cached_logger"]
