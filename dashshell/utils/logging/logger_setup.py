"""
Module: logger_setup.py

Author: Michael Economou
Date: 2026-10-02

Provides the ConfigureLogger class for application-wide logging.
Logs INFO and higher to the console, the configured file level to
<app>_<timestamp>.log and, optionally, DEBUG and higher to a debug file.
Release builds only let warnings and above through.
"""

import contextlib
import logging
import os
import sys
from datetime import datetime

from dashshell import config
from dashshell.utils.logging.logger_file_helper import add_file_handler
from dashshell.utils.logging.logger_helper import DevOnlyFilter, ReleaseModeFilter


class ConfigureLogger:
    """
    Configures application-wide logging on the root logger.
    """

    def __init__(
        self,
        log_name: str = config.APP_NAME,
        log_dir: str = "logs",
        logger: logging.Logger | None = None,
    ):
        """
        Initializes and configures the root logger.

        Args:
            log_name (str): Base name for the log files.
            log_dir (str): Directory to store log files.
            logger (Logger): Logger to configure instead of the root logger.
        """
        self.logger = logger if logger is not None else logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # Accept everything; handlers filter levels
        self.handlers: list[logging.Handler] = []

        if self.logger.handlers:
            return

        release_filter = ReleaseModeFilter()

        if config.LOG_TO_CONSOLE:
            self._setup_console_handler(
                getattr(logging, config.LOG_CONSOLE_LEVEL, logging.INFO), release_filter
            )

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        if config.LOG_TO_FILE:
            self.handlers.append(
                add_file_handler(
                    self.logger,
                    os.path.join(log_dir, f"{log_name}_{timestamp}.log"),
                    level=getattr(logging, config.LOG_FILE_LEVEL, logging.INFO),
                    max_bytes=config.LOG_FILE_MAX_BYTES,
                    backup_count=config.LOG_FILE_BACKUP_COUNT,
                    filters=[release_filter],
                )
            )

        if config.LOG_DEBUG_FILE_ENABLED and not config.RELEASE_MODE:
            self.handlers.append(
                add_file_handler(
                    self.logger,
                    os.path.join(log_dir, f"{log_name}_debug_{timestamp}.log"),
                    level=logging.DEBUG,
                    max_bytes=config.LOG_DEBUG_FILE_MAX_BYTES,
                    backup_count=config.LOG_DEBUG_FILE_BACKUP_COUNT,
                )
            )

    def _setup_console_handler(self, level: int, release_filter: logging.Filter):
        """Sets up console handler with UTF-8-safe formatting and DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stdout)

        with contextlib.suppress(Exception):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.addFilter(release_filter)

        formatter = logging.Formatter("[%(levelname)s] %(message)s")
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)
        self.handlers.append(console_handler)
