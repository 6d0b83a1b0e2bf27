"""
Module: conftest.py

Author: Michael Economou
Date: 2026-10-08

Global pytest configuration and fixtures for the dashshell test suite.
Includes CI-friendly handling of GUI tests and fixtures wiring a
SessionContext to the collaborator doubles in tests/mocks.py.
"""

import os
import sys

# Add project root to sys.path so 'dashshell' and 'tests' can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Qt widgets are created without a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402

from dashshell.app.services.device_info import DeviceInfoProbe  # noqa: E402
from dashshell.app.services.navigator import Navigator  # noqa: E402
from dashshell.app.services.notifications import NotificationService  # noqa: E402
from dashshell.app.state.session_context import SessionContext  # noqa: E402
from dashshell.models.device_info import DeviceInfo  # noqa: E402
from dashshell.models.user import User  # noqa: E402
from tests.mocks import (  # noqa: E402
    FakeScreen,
    FakeSessionClient,
    RecordingRouter,
    RecordingSurface,
)


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")
    config.addinivalue_line("markers", "local_only: mark test as local environment only")


def pytest_collection_modifyitems(session, config, items):
    """Skip GUI and local-only tests on CI."""
    _ = session
    _ = config

    if "CI" in os.environ or "GITHUB_ACTIONS" in os.environ:
        skip_gui = pytest.mark.skip(reason="GUI tests don't work on CI")
        skip_local = pytest.mark.skip(reason="Local-only tests skipped on CI")
        for item in items:
            if "gui" in item.keywords:
                item.add_marker(skip_gui)
            if "local_only" in item.keywords:
                item.add_marker(skip_local)


@pytest.fixture
def clients():
    """Session clients created by the factory, in creation order."""
    return []


@pytest.fixture
def client_factory(clients):
    def factory(*args):
        client = FakeSessionClient(*args)
        clients.append(client)
        return client

    return factory


@pytest.fixture
def router():
    return RecordingRouter()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def device_probe():
    probe = Mock(spec=DeviceInfoProbe)
    probe.probe.return_value = DeviceInfo(platform="linux", is_physical_device=True)
    return probe


@pytest.fixture
def make_context(router, client_factory, surface, device_probe):
    """Factory building a SessionContext wired to the doubles."""

    def make(**overrides):
        options = {
            "navigator": Navigator(),
            "notifications": NotificationService(surface),
            "device_probe": device_probe,
            "endpoint": "http://test.local",
            "release_mode": False,
            "loading_refcounted": False,
            "error_policy": "log_and_degrade",
        }
        options.update(overrides)
        return SessionContext(router, client_factory, **options)

    return make


@pytest.fixture
def context(make_context):
    return make_context()


@pytest.fixture
def screen(context):
    """A mounted plain screen."""
    fake = FakeScreen()
    context.navigator.register_screen(fake)
    return fake


@pytest.fixture
def sample_user():
    return User(id="user-1", email="tenant@example.com", authority="TENANT_ADMIN",
                additional_info={})
