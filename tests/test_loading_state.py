"""
Tests for LoadingState.

Author: Michael Economou
Date: 2026-10-08
"""

from dashshell.app.state.loading_state import LoadingState


class TestSingleFlag:
    def test_initially_idle(self):
        assert LoadingState().value is False

    def test_listeners_notified_on_change_only(self):
        state = LoadingState()
        seen = []
        state.subscribe(seen.append)

        state.start()
        state.start()
        state.finish()
        state.finish()

        assert seen == [True, False]

    def test_first_finish_clears_flag(self):
        state = LoadingState()
        state.start()
        state.start()
        state.finish()
        assert state.value is False
        assert state.pending == 0

    def test_unsubscribe(self):
        state = LoadingState()
        seen = []
        unsubscribe = state.subscribe(seen.append)
        unsubscribe()
        unsubscribe()

        state.start()

        assert seen == []


class TestRefcounted:
    def test_flag_held_until_last_finish(self):
        state = LoadingState(refcounted=True)
        state.start()
        state.start()

        state.finish()
        assert state.value is True
        assert state.pending == 1

        state.finish()
        assert state.value is False

    def test_unbalanced_finish_does_not_go_negative(self):
        state = LoadingState(refcounted=True)
        state.finish()
        state.start()
        assert state.pending == 1
        state.finish()
        assert state.value is False

    def test_reset(self):
        state = LoadingState(refcounted=True)
        state.start()
        state.start()
        state.reset()
        assert state.value is False
        assert state.pending == 0
