"""Application factory - creates a fully wired application shell.

create_shell() builds the window, router, message surface and
SessionContext, and connects the Qt wrapper signals to the widgets. The
session client is supplied by the caller through its factory.

Author: Michael Economou
Date: 2026-10-07
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import TYPE_CHECKING, Any

from PyQt5.QtCore import QTimer

from dashshell.app.errors import ContextResult
from dashshell.app.services.navigator import Navigator
from dashshell.app.services.notifications import NotificationService
from dashshell.app.services.routes import RouteTable
from dashshell.app.state.session_context import SessionContext
from dashshell.config import ASYNC_PUMP_INTERVAL_MS
from dashshell.ui.adapters.qt_router import QtRouter
from dashshell.ui.adapters.qt_session_context import QtSessionContext
from dashshell.ui.shell_window import ShellWindow
from dashshell.ui.widgets.screens import SplashScreen
from dashshell.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from dashshell.app.ports.session import SessionClientFactory, TokenStorage

logger = get_cached_logger(__name__)

SPLASH_PATH = "/"


def default_routes() -> RouteTable:
    """Route table with the splash screen; callers add their own screens."""
    routes = RouteTable()
    routes.define(SPLASH_PATH, SplashScreen)
    return routes


class AppShell:
    """Container for the wired shell components.

    The shell owns an asyncio loop for the session client. A QTimer on the
    window drives it between Qt events, so callbacks, tasks and
    to_thread results scheduled after startup run on the GUI thread.
    """

    def __init__(
        self,
        window: ShellWindow,
        router: QtRouter,
        context: SessionContext,
        qt_context: QtSessionContext,
    ):
        self.window = window
        self.router = router
        self.context = context
        self.qt_context = qt_context
        self._loop = asyncio.new_event_loop()
        asyncio.set_event_loop(self._loop)

        self._pump = QTimer(window)
        self._pump.setInterval(ASYNC_PUMP_INTERVAL_MS)
        self._pump.timeout.connect(self._pump_loop)

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    def is_pumping(self) -> bool:
        return self._pump.isActive()

    def run_coroutine(self, coroutine: Coroutine[Any, Any, Any]) -> Any:
        """Run a coroutine to completion on the shell's event loop."""
        return self._loop.run_until_complete(coroutine)

    def _pump_loop(self) -> None:
        # Nested run from a coroutine that processed Qt events
        if self._loop.is_running() or self._loop.is_closed():
            return
        self._loop.call_soon(self._loop.stop)
        self._loop.run_forever()

    def start(self) -> ContextResult:
        """Show the splash screen, initialize the session and keep the loop running."""
        self.router.navigate_to(None, SPLASH_PATH, replace=True, clear_stack=True)
        self.window.show()
        result = self.run_coroutine(self.context.init())
        self._pump.start()
        return result

    def shutdown(self) -> None:
        self._pump.stop()
        self.qt_context.disconnect_context()
        if not self._loop.is_closed():
            pending = asyncio.all_tasks(self._loop)
            for task in pending:
                task.cancel()
            if pending:
                self._loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))
            self._loop.close()
            asyncio.set_event_loop(None)
        logger.info("[boot] Shell shut down")


def create_shell(
    client_factory: SessionClientFactory,
    routes: RouteTable | None = None,
    storage: TokenStorage | None = None,
) -> AppShell:
    """Create the shell window and its SessionContext.

    Args:
        client_factory: Builds the session client from the context callbacks
        routes: Route table; must define "/" when given
        storage: Token storage backend

    Returns:
        AppShell with all components wired
    """
    routes = routes if routes is not None else default_routes()
    window = ShellWindow()
    router = QtRouter(window.stack, routes, parent=window)

    context = SessionContext(
        router,
        client_factory,
        storage=storage,
        navigator=Navigator(),
        notifications=NotificationService(window.messenger),
    )
    router.bind_context(context)

    qt_context = QtSessionContext(context, parent=window)
    qt_context.loading_changed.connect(window.loading_overlay.set_loading)

    logger.info("[boot] Shell created with %d route(s)", len(routes.patterns()))
    return AppShell(window, router, context, qt_context)
