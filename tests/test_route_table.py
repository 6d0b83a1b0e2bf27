"""
Tests for RouteTable and main shell classification.

Author: Michael Economou
Date: 2026-10-08
"""

import pytest

from dashshell.app.services.main_shell import (
    is_main_shell_destination,
    main_shell_paths,
    strip_query,
)
from dashshell.app.services.routes import RouteTable
from dashshell.models.user import AuthUser


def home_factory(context, params):
    return ("home", params)


def dashboard_factory(context, params):
    return ("dashboard", params)


@pytest.fixture
def routes():
    table = RouteTable()
    table.define("/home", home_factory)
    table.define("/dashboard/:id", dashboard_factory)
    table.define("/", home_factory)
    return table


class TestMatch:
    def test_static_route(self, routes):
        match = routes.match("/home")
        assert match.pattern == "/home"
        assert match.factory is home_factory
        assert match.params == {}

    def test_path_and_query_parameters(self, routes):
        match = routes.match("/dashboard/42?fullscreen=true")
        assert match.pattern == "/dashboard/:id"
        assert match.params == {"id": "42", "fullscreen": "true"}

    def test_last_query_value_wins(self, routes):
        match = routes.match("/dashboard/1?mode=a&mode=b")
        assert match.params["mode"] == "b"

    def test_encoded_segment(self, routes):
        assert routes.match("/dashboard/a%20b").params["id"] == "a b"

    def test_root(self, routes):
        assert routes.match("/").pattern == "/"

    def test_trailing_slash(self, routes):
        assert routes.match("/home/").pattern == "/home"

    @pytest.mark.parametrize("path", ["/login", "/dashboard", "/dashboard/1/extra"])
    def test_unknown(self, routes, path):
        assert routes.match(path) is None

    def test_duplicate_pattern_rejected(self, routes):
        with pytest.raises(ValueError):
            routes.define("/home", home_factory)

    def test_patterns_in_definition_order(self, routes):
        assert routes.patterns() == ["/home", "/dashboard/:id", "/"]


class TestMainShell:
    def test_strip_query(self):
        assert strip_query("/home?x=1#top") == "/home"

    @pytest.mark.parametrize("path", ["/home", "/alarms", "/devices", "/more", "/more?x=1"])
    def test_main_shell_paths(self, path):
        assert is_main_shell_destination(path)

    @pytest.mark.parametrize("path", ["/login", "/dashboard/1", "/devices/1", "/customers"])
    def test_other_paths(self, path):
        assert not is_main_shell_destination(path)

    def test_customers_for_tenant_admin(self):
        admin = AuthUser(user_id="u", authority="TENANT_ADMIN")
        assert is_main_shell_destination("/customers", admin)
        assert "/customers" in main_shell_paths(admin)

    def test_customers_hidden_for_customer_user(self):
        user = AuthUser(user_id="u", authority="CUSTOMER_USER")
        assert not is_main_shell_destination("/customers", user)
