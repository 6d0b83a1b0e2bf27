"""Module: session_context.py - Qt-free session and navigation state.

Author: Michael Economou
Date: 2026-10-05

SessionContext owns the authenticated session of the shell:
- Session client lifecycle (init, user loaded, errors, load progress)
- Derived session state (authenticated, user profile, home dashboard)
- Redirect after authentication resolves
- Notifications through the attached message surface
- Navigation requests through the router port

It is created once by the boot layer and injected into screens; there is no
module-level instance. For the Qt-aware wrapper with signals see
ui/adapters/qt_session_context.py.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import AsyncIterator, Callable
from typing import TYPE_CHECKING, Any

from dashshell import config
from dashshell.app.errors import (
    ContextAlreadyInitializedError,
    ContextInitError,
    ContextResult,
    DashShellError,
    ErrorPolicy,
    ProfileFetchError,
)
from dashshell.app.ports.navigation import supports_main_navigation
from dashshell.app.services.device_info import DeviceInfoProbe
from dashshell.app.services.main_shell import is_main_shell_destination
from dashshell.app.services.navigator import Navigator
from dashshell.app.services.notifications import NotificationService
from dashshell.app.services.token_storage import InMemoryTokenStorage
from dashshell.app.state.loading_state import LoadingState
from dashshell.models.navigation import NavigationRequest, TransitionType
from dashshell.models.notification import NotificationType
from dashshell.models.session_events import (
    LoadFinishedEvent,
    LoadStartedEvent,
    SessionErrorEvent,
    SessionEvent,
    UserLoadedEvent,
)
from dashshell.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from concurrent.futures import Future

    from dashshell.app.ports.navigation import RouterPort
    from dashshell.app.ports.session import SessionClient, SessionClientFactory, TokenStorage
    from dashshell.models.device_info import DeviceInfo
    from dashshell.models.user import AuthUser, HomeDashboardInfo, User

logger = get_cached_logger(__name__)

# Listener kinds accepted by add_listener()
USER_LOADED = "user_loaded"
SESSION_ERROR = "session_error"
NAVIGATION = "navigation"


def error_message(error: BaseException) -> str:
    """User-facing text of a session client error."""
    message = getattr(error, "message", None)
    return str(message) if message else str(error) or type(error).__name__


class SessionContext:
    """Session state, redirect rules, notifications and navigation."""

    def __init__(
        self,
        router: RouterPort,
        client_factory: SessionClientFactory,
        *,
        storage: TokenStorage | None = None,
        navigator: Navigator | None = None,
        notifications: NotificationService | None = None,
        device_probe: DeviceInfoProbe | None = None,
        endpoint: str | None = None,
        release_mode: bool | None = None,
        loading_refcounted: bool | None = None,
        error_policy: ErrorPolicy | str | None = None,
    ):
        self._router = router
        self._client_factory = client_factory
        self._storage = storage if storage is not None else InMemoryTokenStorage()
        self._navigator = navigator if navigator is not None else Navigator()
        self._notifications = notifications if notifications is not None else NotificationService()
        self._device_probe = device_probe if device_probe is not None else DeviceInfoProbe()
        self._endpoint = endpoint or config.API_ENDPOINT
        self._release_mode = config.RELEASE_MODE if release_mode is None else release_mode
        self._loading = LoadingState(
            config.LOADING_REFCOUNTED if loading_refcounted is None else loading_refcounted
        )
        self._error_policy = ErrorPolicy.from_config(
            config.ERROR_POLICY if error_policy is None else error_policy
        )
        self._listeners: dict[str, list[Callable[..., None]]] = {
            USER_LOADED: [],
            SESSION_ERROR: [],
            NAVIGATION: [],
        }

        self._initialized = False
        self.client: SessionClient | None = None
        self.device_info: DeviceInfo | None = None

        self.user_loaded = False
        self.authenticated = False
        self.user_details: User | None = None
        self.home_dashboard_info: HomeDashboardInfo | None = None

        logger.debug("[SessionContext] Created for %s", self._endpoint, extra={"dev_only": True})

    # =====================================
    # Properties
    # =====================================

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def router(self) -> RouterPort:
        return self._router

    @property
    def navigator(self) -> Navigator:
        return self._navigator

    @property
    def notifications(self) -> NotificationService:
        return self._notifications

    @property
    def loading_state(self) -> LoadingState:
        return self._loading

    @property
    def loading(self) -> bool:
        return self._loading.value

    @property
    def error_policy(self) -> ErrorPolicy:
        return self._error_policy

    @property
    def current_screen(self) -> Any | None:
        return self._navigator.current_screen

    def add_listener(self, kind: str, listener: Callable[..., None]) -> None:
        """Subscribe to user_loaded(authenticated), session_error(message) or
        navigation(NavigationRequest)."""
        if kind not in self._listeners:
            raise ValueError(f"Unknown listener kind: {kind}")
        self._listeners[kind].append(listener)

    def _notify(self, kind: str, *args: Any) -> None:
        for listener in list(self._listeners[kind]):
            listener(*args)

    # =====================================
    # Lifecycle
    # =====================================

    async def init(self) -> ContextResult:
        """One-time setup: session client, device probe, client init.

        Raises:
            ContextAlreadyInitializedError: On a second call outside release builds
        """
        if self._initialized:
            error = ContextAlreadyInitializedError("SessionContext already initialized!")
            if not self._release_mode:
                raise error
            logger.warning("[SessionContext] init() called twice, ignoring")
            return ContextResult.failure(error)
        self._initialized = True

        self.client = self._client_factory(
            self._endpoint,
            self._storage,
            self.on_user_loaded,
            self.on_error,
            self.on_load_started,
            self.on_load_finished,
            self.compute,
        )
        try:
            self.device_info = self._device_probe.probe()
            await self.client.init()
        except Exception as e:
            logger.error("[SessionContext] Failed to init session context: %s", e, exc_info=True)
            error = ContextInitError(f"Failed to init session context: {e}")
            error.__cause__ = e
            self._apply_error_policy(error)
            return ContextResult.failure(error)

        logger.info("[SessionContext] Initialized", extra={"dev_only": True})
        return ContextResult.success()

    @staticmethod
    async def compute(func: Callable[[Any], Any], message: Any) -> Any:
        """Run a CPU-bound callable off the event loop thread."""
        return await asyncio.to_thread(func, message)

    # =====================================
    # Session events
    # =====================================

    async def handle_event(self, event: SessionEvent) -> ContextResult:
        """Dispatch a typed session event."""
        if isinstance(event, UserLoadedEvent):
            return await self.on_user_loaded()
        if isinstance(event, SessionErrorEvent):
            self.on_error(event.error)
        elif isinstance(event, LoadStartedEvent):
            self.on_load_started()
        elif isinstance(event, LoadFinishedEvent):
            self.on_load_finished()
        else:
            logger.warning("[SessionContext] Unknown session event: %r", event)
        return ContextResult.success()

    async def consume_events(self, events: AsyncIterator[SessionEvent]) -> None:
        """Handle every event of an async event stream until it ends."""
        async for event in events:
            await self.handle_event(event)

    def on_error(self, error: BaseException) -> None:
        message = error_message(error)
        logger.error("[SessionContext] Session error: %s", message, exc_info=error)
        self._notify(SESSION_ERROR, message)
        self.show_error_notification(message)

    def on_load_started(self) -> None:
        logger.debug("[SessionContext] On load started.")
        self._loading.start()

    def on_load_finished(self) -> None:
        logger.debug("[SessionContext] On load finished.")
        self._loading.finish()

    async def on_user_loaded(self) -> ContextResult:
        """Refresh session state after login, token refresh or logout."""
        result = ContextResult.success()
        try:
            authenticated = self._client_authenticated()
            logger.debug("[SessionContext] onUserLoaded: authenticated=%s", authenticated)
            self.user_loaded = True
            self.authenticated = authenticated

            if authenticated:
                auth_user = self.client.get_auth_user()
                logger.debug("[SessionContext] authUser: %s", auth_user)
                if auth_user is not None and auth_user.user_id is not None:
                    try:
                        self.user_details = await self.client.get_user_service().get_user(
                            auth_user.user_id
                        )
                        self.home_dashboard_info = (
                            await self.client.get_dashboard_service().get_home_dashboard_info()
                        )
                    except Exception as e:
                        logger.warning(
                            "[SessionContext] Failed to load user profile, logging out: %s", e
                        )
                        error = ProfileFetchError(f"Failed to load user profile: {e}")
                        error.__cause__ = e
                        result = ContextResult.failure(error)
                        self._clear_profile()
                        await self._logout()
                        self.authenticated = self._client_authenticated()
            else:
                self._clear_profile()

            self._notify(USER_LOADED, self.authenticated)
            self.update_route_state()
        except Exception as e:
            logger.error("[SessionContext] Error: %s", e, exc_info=True)
            error = DashShellError(f"User load failed: {e}")
            error.__cause__ = e
            self._apply_error_policy(error)
            return ContextResult.failure(error)

        return result

    def _client_authenticated(self) -> bool:
        return self.client is not None and self.client.is_authenticated()

    def _auth_user(self) -> AuthUser | None:
        if not self._client_authenticated():
            return None
        return self.client.get_auth_user()

    def _clear_profile(self) -> None:
        self.user_details = None
        self.home_dashboard_info = None

    async def _logout(self) -> None:
        outcome = self.client.logout()
        if inspect.isawaitable(outcome):
            await outcome

    def _apply_error_policy(self, error: DashShellError) -> None:
        if self._error_policy is ErrorPolicy.SURFACE:
            self.show_error_notification(str(error))

    # =====================================
    # Redirect rules
    # =====================================

    def update_route_state(self) -> None:
        """Show the screen matching the current session state."""
        if self.current_screen is None:
            return

        duration = config.ROUTE_TRANSITION_DURATION_MS
        if self._client_authenticated():
            dashboard_id = self._default_dashboard_id()
            if dashboard_id is not None:
                fullscreen = "true" if self._user_force_fullscreen() else "false"
                self.navigate_to(
                    config.DASHBOARD_PATH_TEMPLATE.format(
                        dashboard_id=dashboard_id, fullscreen=fullscreen
                    ),
                    replace=True,
                    transition=TransitionType.FADE_IN,
                    transition_duration=duration,
                )
            else:
                self.navigate_to(
                    config.HOME_PATH,
                    replace=True,
                    transition=TransitionType.FADE_IN,
                    transition_duration=duration,
                )
        else:
            self.navigate_to(
                config.LOGIN_PATH,
                replace=True,
                clear_stack=True,
                transition=TransitionType.FADE_IN,
                transition_duration=duration,
            )

    def _default_dashboard_id(self) -> str | None:
        if self.user_details is None:
            return None
        return self.user_details.default_dashboard_id

    def _user_force_fullscreen(self) -> bool:
        auth_user = self._auth_user()
        if auth_user is not None and auth_user.is_public:
            return True
        return self.user_details is not None and self.user_details.default_dashboard_fullscreen

    def is_physical_device(self) -> bool:
        return self.device_info is not None and self.device_info.is_physical_device

    # =====================================
    # Notifications
    # =====================================

    def show_notification(
        self, message: str, notification_type: NotificationType, duration_ms: int | None = None
    ) -> None:
        self._notifications.show_notification(message, notification_type, duration_ms)

    def show_info_notification(self, message: str, duration_ms: int | None = None) -> None:
        self.show_notification(message, NotificationType.INFO, duration_ms)

    def show_warn_notification(self, message: str, duration_ms: int | None = None) -> None:
        self.show_notification(message, NotificationType.WARN, duration_ms)

    def show_success_notification(self, message: str, duration_ms: int | None = None) -> None:
        self.show_notification(message, NotificationType.SUCCESS, duration_ms)

    def show_error_notification(self, message: str, duration_ms: int | None = None) -> None:
        self.show_notification(message, NotificationType.ERROR, duration_ms)

    def hide_notification(self) -> None:
        self._notifications.hide()

    # =====================================
    # Navigation
    # =====================================

    def navigate_to(
        self,
        path: str,
        replace: bool = False,
        clear_stack: bool = False,
        transition: TransitionType | None = None,
        transition_duration: int | None = None,
    ) -> Future | None:
        """Navigate the active screen to a path.

        Returns:
            The router's result future, or None when nothing was pushed.
        """
        screen = self.current_screen
        if screen is None:
            return None

        self.hide_notification()

        if supports_main_navigation(screen) and screen.can_navigate(path) and not replace:
            logger.debug("[SessionContext] In-shell navigation to %s", path)
            screen.navigate_to_path(path)
            return None

        if is_main_shell_destination(path, self._auth_user()):
            replace = True
            clear_stack = True

        if transition is None:
            transition = TransitionType.FADE_IN if replace else TransitionType.IN_FROM_RIGHT

        request = NavigationRequest(
            path=path,
            replace=replace,
            clear_stack=clear_stack,
            transition=transition,
            transition_duration_ms=transition_duration,
        )
        logger.debug("[SessionContext] Navigate: %s", request)
        self._notify(NAVIGATION, request)

        return self._router.navigate_to(
            screen,
            path,
            transition=transition,
            transition_duration=transition_duration,
            replace=replace,
            clear_stack=clear_stack,
        )

    def pop(self, result: Any = None) -> None:
        screen = self.current_screen
        if screen is not None:
            self._router.pop(screen, result)
