"""Module: user.py

Author: Michael Economou
Date: 2026-10-03

User records returned by the session client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class AuthUser:
    """Principal decoded from the session token."""

    user_id: str | None = None
    authority: str = ""
    is_public: bool = False
    customer_id: str | None = None
    tenant_id: str | None = None
    scopes: list[str] = field(default_factory=list)


@dataclass
class User:
    """User profile with its free-form additional info."""

    id: str
    email: str = ""
    first_name: str | None = None
    last_name: str | None = None
    authority: str = ""
    additional_info: dict[str, Any] | None = None

    @property
    def default_dashboard_id(self) -> str | None:
        if not self.additional_info:
            return None
        return self.additional_info.get("defaultDashboardId")

    @property
    def default_dashboard_fullscreen(self) -> bool:
        if not self.additional_info:
            return False
        return self.additional_info.get("defaultDashboardFullscreen") is True


@dataclass
class HomeDashboardInfo:
    """Reference to the dashboard configured as the user's home."""

    dashboard_id: str | None = None
    hide_dashboard_toolbar: bool = True
