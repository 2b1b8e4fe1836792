"""Console session: one API client, cache and notifier shared by both tabs."""

from typing import Optional

import httpx

from ..config import BackofficeConfig, get_config
from ..utils.logging import get_logger
from .admin_api import AdminAPI
from .notifications import Notifier
from .overview import DashboardOverview
from .query_cache import QueryCache
from .user_management import UserManagement

logger = get_logger("console.session")


class AdminConsole:
    """Wires the overview and user-management tabs to a single back office."""

    def __init__(
        self,
        config: Optional[BackofficeConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or get_config()
        self.api = AdminAPI(
            self.config.api_base_url,
            timeout=self.config.api_timeout_seconds,
            transport=transport,
        )
        self.cache = QueryCache()
        self.notifier = Notifier()
        self.overview = DashboardOverview(self.api, cache=self.cache, notifier=self.notifier)
        self.users = UserManagement(
            self.api,
            notifier=self.notifier,
            debounce_ms=self.config.filter_debounce_ms,
        )

    async def __aenter__(self) -> "AdminConsole":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def login(self, email: str, password: str) -> None:
        await self.api.login(email, password)
        logger.info("console_logged_in", base_url=self.config.api_base_url)

    async def close(self) -> None:
        self.users.close()
        await self.api.aclose()
