"""Module: loading_state.py

Author: Michael Economou
Date: 2026-10-03

Observable loading flag shared by all screens.

In the default mode overlapping loads collapse to a single flag: the first
finish clears it even if another load is still running. Counted mode keeps
the flag set until every started load has finished.
"""

from __future__ import annotations

from collections.abc import Callable

from dashshell.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

LoadingListener = Callable[[bool], None]


class LoadingState:
    """Boolean busy flag with change listeners."""

    def __init__(self, refcounted: bool = False):
        self._refcounted = refcounted
        self._pending = 0
        self._value = False
        self._listeners: list[LoadingListener] = []

    @property
    def value(self) -> bool:
        return self._value

    @property
    def refcounted(self) -> bool:
        return self._refcounted

    @property
    def pending(self) -> int:
        """Number of loads still running (counted mode only)."""
        return self._pending

    def subscribe(self, listener: LoadingListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start(self) -> None:
        if self._refcounted:
            self._pending += 1
        self._set(True)

    def finish(self) -> None:
        if self._refcounted:
            self._pending = max(0, self._pending - 1)
            if self._pending:
                logger.debug("[LoadingState] %d load(s) still pending", self._pending)
                return
        self._set(False)

    def reset(self) -> None:
        self._pending = 0
        self._set(False)

    def _set(self, value: bool) -> None:
        if value == self._value:
            return
        self._value = value
        for listener in list(self._listeners):
            listener(value)
