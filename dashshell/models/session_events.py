"""Module: session_events.py

Author: Michael Economou
Date: 2026-10-03

Typed events emitted by the session client.

The session client reports its lifecycle through four callbacks. Each
callback is wrapped into one of these events and dispatched by
SessionContext.handle_event().
"""

from __future__ import annotations

from dataclasses import dataclass


class SessionEvent:
    """Base class for session client events."""


@dataclass(frozen=True)
class UserLoadedEvent(SessionEvent):
    """Authentication state resolved (login, refresh or logout)."""


@dataclass(frozen=True)
class SessionErrorEvent(SessionEvent):
    """The session client reported an asynchronous error."""

    error: BaseException


@dataclass(frozen=True)
class LoadStartedEvent(SessionEvent):
    """A client request started."""


@dataclass(frozen=True)
class LoadFinishedEvent(SessionEvent):
    """A client request finished."""
