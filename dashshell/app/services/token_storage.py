"""Module: token_storage.py

Author: Michael Economou
Date: 2026-10-04

In-memory token storage for development builds and tests.
"""


class InMemoryTokenStorage:
    """TokenStorage keeping values for the lifetime of the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def delete_item(self, key: str) -> None:
        self._items.pop(key, None)
