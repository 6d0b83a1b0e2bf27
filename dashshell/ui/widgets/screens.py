"""Module: screens.py

Author: Michael Economou
Date: 2026-10-06

Base screen classes:
- BaseScreen: QWidget with ScreenMixin, mounted while shown
- SplashScreen: initial screen shown while the session initializes
- MainShellScreen: tabbed shell hosting the top-level destinations and
  switching between them in place
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QHideEvent, QShowEvent
from PyQt5.QtWidgets import QLabel, QStackedWidget, QTabBar, QVBoxLayout, QWidget

from dashshell.app.services.main_shell import strip_query
from dashshell.config import APP_NAME
from dashshell.ui.mixins.screen_mixin import ScreenMixin

if TYPE_CHECKING:
    from dashshell.app.state.session_context import SessionContext


class BaseScreen(QWidget, ScreenMixin):
    """Screen registered with the Navigator while it is shown."""

    def __init__(self, context: SessionContext | None = None, parent: QWidget | None = None):
        super().__init__(parent)
        if context is not None:
            self.set_context(context)

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        if not event.spontaneous():
            self.mount_screen()

    def hideEvent(self, event: QHideEvent) -> None:
        super().hideEvent(event)
        if not event.spontaneous():
            self.unmount_screen()


class SplashScreen(BaseScreen):
    def __init__(self, context: SessionContext | None = None, params: dict | None = None):
        super().__init__(context)
        _ = params
        layout = QVBoxLayout(self)
        label = QLabel(APP_NAME, self)
        label.setAlignment(Qt.AlignCenter)
        layout.addWidget(label)


PageFactory = Callable[["SessionContext | None"], QWidget]


class MainShellScreen(BaseScreen):
    """Shell with one tab per top-level destination.

    Implements the main navigation capability: paths owned by the shell are
    switched in place instead of pushing a new screen.
    """

    def __init__(
        self,
        context: SessionContext | None = None,
        params: dict | None = None,
        *,
        pages: dict[str, tuple[str, PageFactory]] | None = None,
    ):
        super().__init__(context)
        _ = params
        self._paths: list[str] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self._pages = QStackedWidget(self)
        self._tabs = QTabBar(self)
        self._tabs.setShape(QTabBar.RoundedSouth)
        layout.addWidget(self._pages, 1)
        layout.addWidget(self._tabs)

        for path, (title, factory) in (pages or {}).items():
            self.add_page(path, title, factory(context))

        self._tabs.currentChanged.connect(self._pages.setCurrentIndex)

    def add_page(self, path: str, title: str, page: QWidget) -> None:
        self._paths.append(path)
        self._pages.addWidget(page)
        self._tabs.addTab(title)

    @property
    def current_path(self) -> str | None:
        index = self._tabs.currentIndex()
        return self._paths[index] if 0 <= index < len(self._paths) else None

    def can_navigate(self, path: str) -> bool:
        return strip_query(path) in self._paths

    def navigate_to_path(self, path: str) -> None:
        index = self._paths.index(strip_query(path))
        self._tabs.setCurrentIndex(index)
        self._pages.setCurrentIndex(index)
