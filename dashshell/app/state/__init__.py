"""Application state.

Author: Michael Economou
Date: 2026-10-03
"""

from dashshell.app.state.loading_state import LoadingState
from dashshell.app.state.session_context import SessionContext

__all__ = ["LoadingState", "SessionContext"]
