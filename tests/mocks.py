"""
Module: mocks.py

Author: Michael Economou
Date: 2026-10-08

Collaborator doubles for testing: session client, router, message surface
and screens.
"""

from dashshell.models.user import AuthUser, HomeDashboardInfo


class FakeUserService:
    def __init__(self, client):
        self._client = client

    async def get_user(self, user_id):
        self._client.calls.append(("get_user", user_id))
        if self._client.user_error is not None:
            raise self._client.user_error
        return self._client.user


class FakeDashboardService:
    def __init__(self, client):
        self._client = client

    async def get_home_dashboard_info(self):
        self._client.calls.append(("get_home_dashboard_info",))
        if self._client.dashboard_error is not None:
            raise self._client.dashboard_error
        return self._client.home_dashboard


class FakeSessionClient:
    """In-memory session client recording the calls made by the context."""

    def __init__(self, endpoint, storage, on_user_loaded, on_error, on_load_started,
                 on_load_finished, compute_func):
        self.endpoint = endpoint
        self.storage = storage
        self.on_user_loaded = on_user_loaded
        self.on_error = on_error
        self.on_load_started = on_load_started
        self.on_load_finished = on_load_finished
        self.compute_func = compute_func

        self.authenticated = False
        self.auth_user = None
        self.user = None
        self.home_dashboard = None
        self.user_error = None
        self.dashboard_error = None
        self.init_error = None
        self.calls = []

    async def init(self):
        self.calls.append(("init",))
        if self.init_error is not None:
            raise self.init_error

    def is_authenticated(self):
        return self.authenticated

    def get_auth_user(self):
        return self.auth_user

    def logout(self):
        self.calls.append(("logout",))
        self.authenticated = False
        self.auth_user = None

    def get_user_service(self):
        return FakeUserService(self)

    def get_dashboard_service(self):
        return FakeDashboardService(self)

    def sign_in(self, user, auth_user=None, home_dashboard=None):
        self.authenticated = True
        self.auth_user = auth_user or AuthUser(user_id=user.id, authority="TENANT_ADMIN")
        self.user = user
        self.home_dashboard = home_dashboard or HomeDashboardInfo(dashboard_id=None)


class RecordingRouter:
    """RouterPort double recording navigation calls."""

    def __init__(self):
        self.navigations = []
        self.pops = []

    def navigate_to(self, screen, path, *, transition=None, transition_duration=None,
                    replace=False, clear_stack=False):
        self.navigations.append(
            {
                "screen": screen,
                "path": path,
                "transition": transition,
                "transition_duration": transition_duration,
                "replace": replace,
                "clear_stack": clear_stack,
            }
        )
        return None

    def pop(self, screen, result=None):
        self.pops.append((screen, result))

    @property
    def last(self):
        return self.navigations[-1] if self.navigations else None


class RecordingSurface:
    """MessageSurfacePort double keeping a list of visible notifications."""

    def __init__(self):
        self.visible = []
        self.history = []
        self.dismissed = []

    def show(self, notification):
        self.visible.append(notification)
        self.history.append(notification)

    def remove_current(self):
        self.visible.clear()

    def hide_current(self):
        if self.visible:
            self.dismissed.append(self.visible.pop())


class FakeScreen:
    """Plain screen without main navigation capability."""


class FakeMainShell:
    """Screen exposing in-place navigation for a set of paths."""

    def __init__(self, paths=("/home", "/alarms")):
        self.paths = set(paths)
        self.switched_to = []

    def can_navigate(self, path):
        return path.split("?")[0] in self.paths

    def navigate_to_path(self, path):
        self.switched_to.append(path)


