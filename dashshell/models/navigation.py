"""Module: navigation.py

Author: Michael Economou
Date: 2026-10-03

Navigation request and route match records.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TransitionType(Enum):
    """Screen transition effects supported by the router."""

    NATIVE = "native"
    NONE = "none"
    FADE_IN = "fade_in"
    IN_FROM_RIGHT = "in_from_right"


@dataclass(frozen=True)
class NavigationRequest:
    """Resolved parameters of a single navigation."""

    path: str
    replace: bool = False
    clear_stack: bool = False
    transition: TransitionType | None = None
    transition_duration_ms: int | None = None


@dataclass
class RouteMatch:
    """Result of matching a path against the route table."""

    pattern: str
    factory: Callable[..., Any]
    params: dict[str, str] = field(default_factory=dict)
