"""Module: main_shell.py

Author: Michael Economou
Date: 2026-10-04

Classification of main shell destinations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dashshell.config import CUSTOMER_ADMIN_AUTHORITIES, CUSTOMERS_PATH, MAIN_SHELL_PATHS

if TYPE_CHECKING:
    from dashshell.models.user import AuthUser


def strip_query(path: str) -> str:
    """Return the path without its query string or fragment."""
    return path.split("?", 1)[0].split("#", 1)[0]


def main_shell_paths(auth_user: AuthUser | None = None) -> tuple[str, ...]:
    """Top-level destinations of the main shell for the given user."""
    paths = tuple(MAIN_SHELL_PATHS)
    if auth_user is not None and auth_user.authority in CUSTOMER_ADMIN_AUTHORITIES:
        paths += (CUSTOMERS_PATH,)
    return paths


def is_main_shell_destination(path: str, auth_user: AuthUser | None = None) -> bool:
    """Check whether a path is one of the main shell's own pages."""
    return strip_query(path) in main_shell_paths(auth_user)
