"""Module: routes.py

Author: Michael Economou
Date: 2026-10-04

Route table mapping path patterns to screen factories.

Patterns are slash separated; a segment starting with ':' captures a
parameter:

    table.define("/dashboard/:id", DashboardScreen)
    table.match("/dashboard/42?fullscreen=true").params
    # {"id": "42", "fullscreen": "true"}
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from urllib.parse import parse_qsl, unquote

from dashshell.models.navigation import RouteMatch
from dashshell.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def _segments(path: str) -> list[str]:
    return [segment for segment in path.strip("/").split("/") if segment]


class RouteTable:
    """Ordered collection of path patterns."""

    def __init__(self):
        self._routes: list[tuple[str, list[str], Callable[..., Any]]] = []

    def define(self, pattern: str, factory: Callable[..., Any]) -> None:
        """Register a screen factory for a path pattern.

        Raises:
            ValueError: If the pattern is already defined
        """
        if any(existing == pattern for existing, _, _ in self._routes):
            raise ValueError(f"Route already defined: {pattern}")
        self._routes.append((pattern, _segments(pattern), factory))
        logger.debug("[RouteTable] Defined %s", pattern, extra={"dev_only": True})

    def patterns(self) -> list[str]:
        return [pattern for pattern, _, _ in self._routes]

    def match(self, path: str) -> RouteMatch | None:
        """Resolve a path, merging path and query parameters."""
        route_path, _, query = path.partition("?")
        route_path = route_path.split("#", 1)[0]
        query = query.split("#", 1)[0]
        segments = _segments(route_path)

        for pattern, pattern_segments, factory in self._routes:
            if len(pattern_segments) != len(segments):
                continue
            params: dict[str, str] = {}
            for expected, actual in zip(pattern_segments, segments):
                if expected.startswith(":"):
                    params[expected[1:]] = unquote(actual)
                elif expected != actual:
                    break
            else:
                params.update(dict(parse_qsl(query, keep_blank_values=True)))
                return RouteMatch(pattern=pattern, factory=factory, params=params)

        return None
