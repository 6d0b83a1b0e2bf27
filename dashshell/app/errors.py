"""Module: errors.py

Author: Michael Economou
Date: 2026-10-03

Exception hierarchy and explicit result type for the session context.

init() and on_user_loaded() never raise into the host event loop; they
return a ContextResult and leave the reaction to the configured
ErrorPolicy.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DashShellError(Exception):
    """Base class for dashshell errors."""


class ContextInitError(DashShellError):
    """Device probe or session client initialization failed."""


class ProfileFetchError(DashShellError):
    """User profile or home dashboard could not be fetched after login."""


class ContextAlreadyInitializedError(DashShellError, RuntimeError):
    """SessionContext.init() was called a second time."""


class ErrorPolicy(Enum):
    """What to do with a failure after it has been logged."""

    LOG_AND_DEGRADE = "log_and_degrade"
    SURFACE = "surface"

    @classmethod
    def from_config(cls, value: str | ErrorPolicy) -> ErrorPolicy:
        if isinstance(value, ErrorPolicy):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.LOG_AND_DEGRADE


@dataclass(frozen=True)
class ContextResult:
    """Outcome of a context lifecycle operation."""

    ok: bool
    error: DashShellError | None = None

    @classmethod
    def success(cls) -> ContextResult:
        return cls(ok=True)

    @classmethod
    def failure(cls, error: DashShellError) -> ContextResult:
        return cls(ok=False, error=error)

    def __bool__(self) -> bool:
        return self.ok
