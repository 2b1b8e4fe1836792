"""Admin API client: async HTTP access to the back office admin endpoints."""

from typing import Any, Optional

import httpx

from ..users.filters import UserFilters, to_query_params
from ..utils.logging import get_logger

logger = get_logger("console.admin_api")


class AdminAPIError(Exception):
    """A failed admin API call. ``str(exc)`` is the server's raw message."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict):
        for field in ("detail", "message"):
            if isinstance(body.get(field), str):
                return body[field]
    return f"HTTP {response.status_code}"


class AdminAPI:
    """Thin wrapper over the ``/api/v1/admin`` endpoints.

    Args:
        base_url: Server root, e.g. ``http://127.0.0.1:8000``.
        token: Bearer token of an admin user.
        timeout: Per-request timeout in seconds.
        transport: Optional httpx transport (ASGI app or mock in tests).
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/") + "/api/v1",
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "AdminAPI":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def set_token(self, token: str) -> None:
        self._client.headers["Authorization"] = f"Bearer {token}"

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("admin_api_transport_error", method=method, path=path, error=str(exc))
            raise AdminAPIError(str(exc) or exc.__class__.__name__) from exc

        if response.is_error:
            message = _error_message(response)
            logger.warning(
                "admin_api_request_failed",
                method=method,
                path=path,
                status=response.status_code,
                error=message,
            )
            raise AdminAPIError(message, response.status_code)
        return response.json()

    # --- Auth ---

    async def login(self, email: str, password: str) -> str:
        body = await self._request("POST", "/auth/login", json={"email": email, "password": password})
        token = body["access_token"]
        self.set_token(token)
        return token

    # --- Dashboard ---

    async def get_overview(self, params: dict) -> dict:
        """KPIs, trend, action items, health and saved preferences for a window."""
        body = await self._request("GET", "/admin/dashboard/overview", params=params)
        return body["data"]

    async def update_dashboard_preferences(self, preferences: Optional[list[dict]]) -> dict:
        """Persist a layout, or reset it when ``preferences`` is None."""
        return await self._request(
            "PATCH", "/admin/dashboard-preferences", json={"preferences": preferences},
        )

    # --- Users ---

    async def list_users(self, filters: UserFilters) -> dict:
        return await self._request("GET", "/admin/users", params=to_query_params(filters))

    async def get_user_detail(self, user_id: int) -> dict:
        return await self._request("GET", f"/admin/users/{user_id}")

    async def get_unique_user_countries(self) -> list[str]:
        return await self._request("GET", "/admin/users/unique-countries")
