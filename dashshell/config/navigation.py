"""Module: dashshell.config.navigation

Author: Michael Economou
Date: 2026-10-02

Well-known navigation paths.
"""

HOME_PATH = "/home"
LOGIN_PATH = "/login"
DASHBOARD_PATH_TEMPLATE = "/dashboard/{dashboard_id}?fullscreen={fullscreen}"

# Top-level destinations hosted by the main shell. Navigating to one of
# these always replaces the whole stack.
MAIN_SHELL_PATHS = ("/home", "/alarms", "/devices", "/more")

# Shown in the main shell only for users with these authorities
CUSTOMERS_PATH = "/customers"
CUSTOMER_ADMIN_AUTHORITIES = ("TENANT_ADMIN",)
