"""
Tests for the command-line entry point.

Author: Michael Economou
Date: 2026-10-09
"""

import pytest

from dashshell import __main__ as entry
from dashshell.__main__ import CLIENT_FACTORY_ENV, load_client_factory, main
from dashshell.app.errors import ContextInitError, ContextResult
from dashshell.app.services.token_storage import InMemoryTokenStorage
from dashshell.boot import app_factory

FACTORY_SPEC = "dashshell.app.services.token_storage:InMemoryTokenStorage"


class FakeApplication:
    def __init__(self, argv):
        self.argv = argv

    def exec_(self):
        return 0


class FakeShell:
    def __init__(self, result=None, start_error=None):
        self.result = result if result is not None else ContextResult.success()
        self.start_error = start_error
        self.started = False
        self.shut_down = False

    def start(self):
        self.started = True
        if self.start_error is not None:
            raise self.start_error
        return self.result

    def shutdown(self):
        self.shut_down = True


@pytest.fixture
def created():
    """Shells handed out by the patched create_shell."""
    return []


@pytest.fixture
def patched_main(monkeypatch, created):
    monkeypatch.setattr(entry, "ConfigureLogger", lambda **kwargs: None)
    monkeypatch.setattr(entry, "QApplication", FakeApplication)

    def install(shell):
        def create_shell(client_factory):
            created.append((client_factory, shell))
            return shell

        monkeypatch.setattr(app_factory, "create_shell", create_shell)
        return shell

    return install


class TestLoadClientFactory:
    def test_resolves_attribute(self):
        assert load_client_factory(FACTORY_SPEC) is InMemoryTokenStorage

    @pytest.mark.parametrize("spec", ["dashshell", "dashshell:", ":factory"])
    def test_rejects_malformed(self, spec):
        with pytest.raises(ValueError):
            load_client_factory(spec)

    def test_missing_attribute(self):
        with pytest.raises(AttributeError):
            load_client_factory("dashshell.app.services.token_storage:missing")


class TestMain:
    def test_without_client_factory(self, monkeypatch, patched_main, created):
        monkeypatch.delenv(CLIENT_FACTORY_ENV, raising=False)
        patched_main(FakeShell())

        assert main() == 2
        assert created == []

    def test_unloadable_client_factory(self, monkeypatch, patched_main, created):
        monkeypatch.setenv(CLIENT_FACTORY_ENV, "dashshell.app.services.token_storage:missing")
        patched_main(FakeShell())

        assert main() == 2
        assert created == []

    def test_runs_shell_and_shuts_down(self, monkeypatch, patched_main, created):
        monkeypatch.setenv(CLIENT_FACTORY_ENV, FACTORY_SPEC)
        shell = patched_main(FakeShell())

        assert main() == 0
        assert created == [(InMemoryTokenStorage, shell)]
        assert shell.started
        assert shell.shut_down

    def test_failed_init_still_enters_loop(self, monkeypatch, patched_main):
        monkeypatch.setenv(CLIENT_FACTORY_ENV, FACTORY_SPEC)
        failure = ContextResult.failure(ContextInitError("offline"))
        shell = patched_main(FakeShell(result=failure))

        assert main() == 0
        assert shell.shut_down

    def test_shutdown_after_fatal_error(self, monkeypatch, patched_main):
        monkeypatch.setenv(CLIENT_FACTORY_ENV, FACTORY_SPEC)
        shell = patched_main(FakeShell(start_error=RuntimeError("boom")))

        assert main() == 1
        assert shell.shut_down
