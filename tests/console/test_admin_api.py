"""Tests for the AdminAPI HTTP client using httpx.MockTransport."""

import json

import httpx
import pytest

from backoffice.console.admin_api import AdminAPI, AdminAPIError
from backoffice.users.filters import UserFilters


def _client(handler, token="tok"):
    return AdminAPI("http://test", token=token, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_get_overview_unwraps_data():
    seen = {}

    def handler(request: httpx.Request):
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(200, json={"success": True, "data": {"kpis": {}}})

    async with _client(handler) as api:
        data = await api.get_overview({"timeframe": "7d"})

    assert data == {"kpis": {}}
    assert seen == {
        "path": "/api/v1/admin/dashboard/overview",
        "params": {"timeframe": "7d"},
        "auth": "Bearer tok",
    }


@pytest.mark.asyncio
async def test_reset_sends_null_preferences():
    seen = {}

    def handler(request: httpx.Request):
        seen["method"] = request.method
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"success": True})

    async with _client(handler) as api:
        await api.update_dashboard_preferences(None)

    assert seen == {"method": "PATCH", "body": {"preferences": None}}


@pytest.mark.asyncio
async def test_error_detail_becomes_message():
    def handler(request):
        return httpx.Response(400, json={"error": True, "detail": "Invalid preference format."})

    async with _client(handler) as api:
        with pytest.raises(AdminAPIError) as exc_info:
            await api.update_dashboard_preferences([{"key": "x"}])

    assert str(exc_info.value) == "Invalid preference format."
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_non_json_error_uses_body_text():
    def handler(request):
        return httpx.Response(502, text="Bad Gateway")

    async with _client(handler) as api:
        with pytest.raises(AdminAPIError, match="Bad Gateway"):
            await api.get_unique_user_countries()


@pytest.mark.asyncio
async def test_transport_failure_wrapped():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(handler) as api:
        with pytest.raises(AdminAPIError, match="connection refused") as exc_info:
            await api.get_user_detail(1)

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_list_users_sends_flat_camel_case_params():
    seen = {}

    def handler(request: httpx.Request):
        seen.update(dict(request.url.params))
        return httpx.Response(200, json={"users": [], "total": 0})

    filters = UserFilters(role="coach", min_trust=10, page=2)
    async with _client(handler) as api:
        await api.list_users(filters)

    assert seen["role"] == "coach"
    assert seen["minTrust"] == "10"
    assert seen["page"] == "2"
    assert seen["sortField"] == "createdAt"
    assert "search" not in seen
    assert "minSessions" not in seen


@pytest.mark.asyncio
async def test_login_stores_token():
    def handler(request: httpx.Request):
        if request.url.path.endswith("/auth/login"):
            return httpx.Response(200, json={"access_token": "fresh", "token_type": "bearer", "role": "admin"})
        return httpx.Response(200, json=request.headers.get("Authorization"))

    async with _client(handler, token=None) as api:
        assert await api.login("admin@example.com", "pw") == "fresh"
        assert await api.get_unique_user_countries() == "Bearer fresh"
