"""
Module: logger_helper.py

Author: Michael Economou
Date: 2026-10-02

Utility functions for retrieving named loggers and safely logging Unicode
messages to the console across platforms.
Functions:
get_logger(name): Returns a patched logger with UTF-8-safe logging methods.
safe_text(text): Replaces problematic Unicode characters with ASCII equivalents.
safe_log(logger_func, message): Logs a message safely, falling back to ASCII if needed.
Filters:
DevOnlyFilter hides dev-only records from the console.
ReleaseModeFilter passes only warnings and above in release builds.
"""

import logging
import re
from functools import partial

from dashshell import config


def safe_text(text: str) -> str:
    """
    Replaces unsupported Unicode characters with ASCII-safe alternatives.

    Args:
        text (str): The original text containing Unicode symbols.

    Returns:
        str: A version of the text with replacements for problematic characters.
    """
    replacements = {
        "→": "->",
        "—": "--",
        "–": "-",
        "…": "...",
    }
    pattern = re.compile("|".join(map(re.escape, replacements.keys())))
    return pattern.sub(lambda m: replacements[m.group(0)], text)


def safe_log(logger_func, message: str, *args, **kwargs):
    """
    Logs a message using the given logger function (e.g. logger.info),
    falling back to ASCII-safe output if UnicodeEncodeError occurs.
    """
    try:
        if not isinstance(message, str):
            message = repr(message)
        logger_func(message, *args, **kwargs)
    except UnicodeEncodeError:
        logger_func(safe_text(str(message)), *args, **kwargs)


def patch_logger_safe_methods(logger: logging.Logger):
    """Replaces logger's logging methods with safe_log-wrapped versions."""
    for method_name in ["debug", "info", "warning", "error", "critical", "exception"]:
        orig_func = getattr(logger, method_name)
        setattr(logger, method_name, partial(safe_log, orig_func))


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Returns a logger with the given name, delegating to the root logger for output.
    Patches logging methods to avoid UnicodeEncodeError.
    """
    logger = logging.getLogger(name or __name__)
    logger.setLevel(logging.DEBUG)

    # Root logger owns all handlers (console + files)
    logger.propagate = True
    if logger.hasHandlers():
        logger.handlers.clear()

    if not getattr(logger, "_patched_for_safe_log", False):
        patch_logger_safe_methods(logger)
        logger._patched_for_safe_log = True

    return logger


class DevOnlyFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if config.SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)


class ReleaseModeFilter(logging.Filter):
    """Drops records below WARNING when running a release build."""

    def __init__(self, release_mode: bool | None = None):
        super().__init__()
        self._release_mode = release_mode

    @property
    def release_mode(self) -> bool:
        if self._release_mode is None:
            return config.RELEASE_MODE
        return self._release_mode

    def filter(self, record: logging.LogRecord) -> bool:
        if self.release_mode:
            return record.levelno >= logging.WARNING
        return True
