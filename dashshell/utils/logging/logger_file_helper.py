"""
Module: logger_file_helper.py

Author: Michael Economou
Date: 2026-10-02

Attaches rotating file handlers to a logger.
"""

import logging
import os
from logging.handlers import RotatingFileHandler


def add_file_handler(
    logger: logging.Logger,
    log_path: str,
    level: int = logging.INFO,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
    filters: list[logging.Filter] | None = None,
) -> RotatingFileHandler:
    """
    Attaches a rotating file handler to a logger.

    Args:
        logger (logging.Logger): The logger to attach the handler to.
        log_path (str): Path to the log file.
        level (int): Logging level for this file handler (e.g., logging.ERROR).
        max_bytes (int): Maximum file size before rotating.
        backup_count (int): Number of backup files to keep.
        filters (list, optional): Extra filters for the handler.

    Returns:
        RotatingFileHandler: The attached handler.
    """
    log_dir = os.path.dirname(log_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )
    file_handler.setFormatter(formatter)

    for log_filter in filters or []:
        file_handler.addFilter(log_filter)

    logger.addHandler(file_handler)
    return file_handler
