"""
Tests for Navigator.

Author: Michael Economou
Date: 2026-10-08
"""

import gc

from dashshell.app.services.navigator import Navigator
from tests.mocks import FakeScreen


class TestNavigator:
    def test_empty(self):
        navigator = Navigator()
        assert navigator.current_screen is None
        assert not navigator.has_screen()

    def test_latest_registered_is_current(self):
        navigator = Navigator()
        first, second = FakeScreen(), FakeScreen()
        navigator.register_screen(first)
        navigator.register_screen(second)
        assert navigator.current_screen is second
        assert navigator.mounted_count() == 2

    def test_unregister_current_falls_back(self):
        navigator = Navigator()
        first, second = FakeScreen(), FakeScreen()
        navigator.register_screen(first)
        navigator.register_screen(second)

        navigator.unregister_screen(second)

        assert navigator.current_screen is first

    def test_unregister_other_keeps_current(self):
        navigator = Navigator()
        first, second = FakeScreen(), FakeScreen()
        navigator.register_screen(first)
        navigator.register_screen(second)

        navigator.unregister_screen(first)

        assert navigator.current_screen is second
        assert navigator.mounted_count() == 1

    def test_reregister_moves_to_top(self):
        navigator = Navigator()
        first, second = FakeScreen(), FakeScreen()
        navigator.register_screen(first)
        navigator.register_screen(second)
        navigator.register_screen(first)

        assert navigator.current_screen is first
        assert navigator.mounted_count() == 2

    def test_destroyed_screen_is_never_current(self):
        navigator = Navigator()
        first = FakeScreen()
        navigator.register_screen(first)
        second = FakeScreen()
        navigator.register_screen(second)

        del second
        gc.collect()

        assert navigator.current_screen is first

    def test_clear(self):
        navigator = Navigator()
        screen = FakeScreen()
        navigator.register_screen(screen)
        navigator.clear()
        assert navigator.current_screen is None
