"""Module: navigator.py

Author: Michael Economou
Date: 2026-10-04

Navigator - owner of the mounted screen stack.

Screens register themselves when they are shown and unregister when they
are hidden or destroyed. The most recently registered screen that is still
alive is the current screen; navigation and notifications target it.
Screens are held through weak references so a destroyed screen is never
current.
"""

from __future__ import annotations

import weakref
from typing import Any

from dashshell.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class Navigator:
    """Tracks mounted screens in mount order."""

    def __init__(self):
        self._screens: list[weakref.ref] = []

    def register_screen(self, screen: Any) -> None:
        """Mark a screen as mounted and make it current."""
        self._discard(screen)
        self._screens.append(weakref.ref(screen))
        logger.debug(
            "[Navigator] Screen mounted: %s", type(screen).__name__, extra={"dev_only": True}
        )

    def unregister_screen(self, screen: Any) -> None:
        """Forget a screen. The current screen changes only if it was current."""
        if self._discard(screen):
            logger.debug(
                "[Navigator] Screen unmounted: %s",
                type(screen).__name__,
                extra={"dev_only": True},
            )

    @property
    def current_screen(self) -> Any | None:
        while self._screens:
            screen = self._screens[-1]()
            if screen is not None:
                return screen
            self._screens.pop()
        return None

    def has_screen(self) -> bool:
        return self.current_screen is not None

    def mounted_count(self) -> int:
        return sum(1 for ref in self._screens if ref() is not None)

    def clear(self) -> None:
        self._screens.clear()

    def _discard(self, screen: Any) -> bool:
        before = len(self._screens)
        self._screens = [ref for ref in self._screens if ref() is not None and ref() is not screen]
        return len(self._screens) != before
