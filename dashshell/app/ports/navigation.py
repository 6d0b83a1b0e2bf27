"""Navigation ports.

Protocols for the router, the screens it manages and the optional
main-navigation capability of the shell screen.

Author: Michael Economou
Date: 2026-10-03
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from concurrent.futures import Future

    from dashshell.models.navigation import TransitionType


class ScreenPort(Protocol):
    """Any screen that can be registered as the active screen."""


@runtime_checkable
class MainNavigationPort(Protocol):
    """Screen that can switch between its own pages in place."""

    def can_navigate(self, path: str) -> bool:
        ...

    def navigate_to_path(self, path: str) -> None:
        ...


@runtime_checkable
class RouterPort(Protocol):
    """Resolves paths to screens and manages the screen stack."""

    def navigate_to(
        self,
        screen: Any,
        path: str,
        *,
        transition: TransitionType | None = None,
        transition_duration: int | None = None,
        replace: bool = False,
        clear_stack: bool = False,
    ) -> Future | None:
        ...

    def pop(self, screen: Any, result: Any = None) -> None:
        ...


def supports_main_navigation(screen: Any) -> bool:
    """Check whether a screen provides in-place main navigation."""
    return screen is not None and isinstance(screen, MainNavigationPort)
