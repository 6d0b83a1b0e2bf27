"""dashshell - application shell for the dashboard client.

Author: Michael Economou
Date: 2026-10-02
"""

from dashshell.config import APP_VERSION

__version__ = APP_VERSION
