"""Session client ports.

Protocols for the external device API client and its token storage.
The client itself lives outside this project; the shell only talks to it
through these interfaces.

Author: Michael Economou
Date: 2026-10-03
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from dashshell.models.user import AuthUser, HomeDashboardInfo, User

ComputeFunc = Callable[[Callable[[Any], Any], Any], Awaitable[Any]]


@runtime_checkable
class TokenStorage(Protocol):
    """Key/value storage for session tokens."""

    def get_item(self, key: str) -> str | None:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def delete_item(self, key: str) -> None:
        ...


class UserService(Protocol):
    async def get_user(self, user_id: str) -> User:
        """Fetch the full user profile."""
        ...


class DashboardService(Protocol):
    async def get_home_dashboard_info(self) -> HomeDashboardInfo | None:
        """Fetch the home dashboard reference of the current user."""
        ...


@runtime_checkable
class SessionClient(Protocol):
    """Authenticated API client managing tokens and REST calls."""

    async def init(self) -> None:
        """Restore a stored session and report the result via on_user_loaded."""
        ...

    def is_authenticated(self) -> bool:
        ...

    def get_auth_user(self) -> AuthUser | None:
        ...

    def logout(self) -> Any:
        ...

    def get_user_service(self) -> UserService:
        ...

    def get_dashboard_service(self) -> DashboardService:
        ...


class SessionClientFactory(Protocol):
    """Builds a session client wired to the context callbacks."""

    def __call__(
        self,
        endpoint: str,
        storage: TokenStorage,
        on_user_loaded: Callable[[], Awaitable[Any]],
        on_error: Callable[[BaseException], None],
        on_load_started: Callable[[], None],
        on_load_finished: Callable[[], None],
        compute_func: ComputeFunc,
    ) -> SessionClient:
        ...
