"""Admin console: client-side state for the dashboard and user screens.

Talks to the back office over HTTP through :class:`AdminAPI` and keeps a
local :class:`QueryCache` of server views it can update optimistically.
"""

from .admin_api import AdminAPI, AdminAPIError
from .filter_bar import UserFilterBar
from .notifications import Notifier
from .overview import DashboardOverview
from .query_cache import CacheSnapshot, QueryCache, make_query_key
from .session import AdminConsole
from .user_management import UserManagement

__all__ = [
    "AdminAPI",
    "AdminConsole",
    "AdminAPIError",
    "CacheSnapshot",
    "DashboardOverview",
    "Notifier",
    "QueryCache",
    "UserFilterBar",
    "UserManagement",
    "make_query_key",
]
