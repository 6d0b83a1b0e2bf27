"""Boot layer - wires the application shell.

Author: Michael Economou
Date: 2026-10-07
"""

from dashshell.boot.app_factory import AppShell, create_shell, default_routes

__all__ = ["AppShell", "create_shell", "default_routes"]
