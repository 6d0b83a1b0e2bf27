"""
Tests for QtSessionContext signal relays.

Author: Michael Economou
Date: 2026-10-09
"""

import asyncio

import pytest

from dashshell.ui.adapters.qt_session_context import QtSessionContext

pytestmark = pytest.mark.gui


@pytest.fixture
def qt_context(qapp, context):
    _ = qapp
    return QtSessionContext(context)


class TestSignals:
    def test_loading_changed(self, qtbot, qt_context, context):
        with qtbot.waitSignal(qt_context.loading_changed, timeout=1000) as blocker:
            context.on_load_started()
        assert blocker.args == [True]

        with qtbot.waitSignal(qt_context.loading_changed, timeout=1000) as blocker:
            context.on_load_finished()
        assert blocker.args == [False]

    def test_user_loaded(self, qtbot, qt_context, context, clients, sample_user):
        asyncio.run(context.init())
        clients[0].sign_in(sample_user)

        with qtbot.waitSignal(qt_context.user_loaded, timeout=1000) as blocker:
            asyncio.run(context.on_user_loaded())

        assert blocker.args == [True]

    def test_session_error(self, qtbot, qt_context, context):
        with qtbot.waitSignal(qt_context.session_error, timeout=1000) as blocker:
            context.on_error(RuntimeError("refresh failed"))
        assert blocker.args == ["refresh failed"]

    def test_navigation_requested(self, qtbot, qt_context, context, screen):
        with qtbot.waitSignal(qt_context.navigation_requested, timeout=1000) as blocker:
            context.navigate_to("/devices/1")
        assert blocker.args == ["/devices/1"]

    def test_disconnect_stops_loading_relay(self, qtbot, qt_context, context):
        qt_context.disconnect_context()
        with qtbot.assertNotEmitted(qt_context.loading_changed):
            context.on_load_started()
