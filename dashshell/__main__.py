"""
Module: __main__.py

Author: Michael Economou
Date: 2026-10-09

Entry point for the dashshell application shell.

The session client is not part of this package. Point
DASHSHELL_CLIENT_FACTORY at a "module:attribute" callable that builds one
from the SessionContext callbacks, then run `python -m dashshell`.
"""

import importlib
import os
import platform
import sys

from PyQt5.QtWidgets import QApplication

from dashshell.config import APP_NAME, APP_VERSION, RELEASE_MODE
from dashshell.utils.logging.logger_setup import ConfigureLogger

CLIENT_FACTORY_ENV = "DASHSHELL_CLIENT_FACTORY"


def load_client_factory(spec: str):
    """Resolve a "module:attribute" string to the client factory callable."""
    module_name, sep, attribute = spec.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(f"Expected 'module:attribute', got {spec!r}")
    module = importlib.import_module(module_name)
    return getattr(module, attribute)


def main() -> int:
    """
    Initializes logging, creates the Qt application and the shell window,
    starts the session and enters the Qt main loop.
    """
    ConfigureLogger(log_name=APP_NAME)

    from dashshell.boot.app_factory import create_shell
    from dashshell.utils.logging.logger_factory import get_cached_logger

    logger = get_cached_logger(__name__)
    logger.info("%s %s (release=%s)", APP_NAME, APP_VERSION, RELEASE_MODE)
    logger.info("Platform: %s %s", platform.system(), platform.release())

    factory_spec = os.environ.get(CLIENT_FACTORY_ENV)
    if not factory_spec:
        logger.error("%s is not set; nothing to run", CLIENT_FACTORY_ENV)
        return 2

    try:
        client_factory = load_client_factory(factory_spec)
    except (ImportError, AttributeError, ValueError) as e:
        logger.error("Could not load client factory %r: %s", factory_spec, e)
        return 2

    app = QApplication(sys.argv)
    shell = create_shell(client_factory)

    try:
        result = shell.start()
        if not result:
            logger.warning("Session initialization failed: %s", result.error)

        exit_code = app.exec_()
        logger.info("Application shutting down with exit code: %d", exit_code)
        return exit_code
    except Exception as e:
        logger.critical("Fatal error in main: %s", e, exc_info=True)
        return 1
    finally:
        shell.shutdown()


if __name__ == "__main__":
    sys.exit(main())
