"""End-to-end: console state objects driving the real app over ASGI."""

import pytest
import pytest_asyncio
from httpx import ASGITransport

from backoffice.config import BackofficeConfig
from backoffice.console.admin_api import AdminAPI
from backoffice.console.overview import DashboardOverview
from backoffice.console.session import AdminConsole
from backoffice.console.user_management import UserManagement
from backoffice.dashboard.registry import (
    ACTION_CENTER_QUEUE,
    ADMIN_KPI_GRID,
    FINANCIAL_TREND_CHART,
    SYSTEM_HEALTH_PANEL,
)
from backoffice.users.filters import UserFilters

pytestmark = pytest.mark.asyncio(loop_scope="session")

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin-password"
COACH_EMAIL = "coach@example.com"
COACH_PASSWORD = "coach-password"

DEFAULT_ORDER = [ADMIN_KPI_GRID, FINANCIAL_TREND_CHART, ACTION_CENTER_QUEUE, SYSTEM_HEALTH_PANEL]


@pytest_asyncio.fixture(loop_scope="session")
async def admin_api(test_app):
    api = AdminAPI("http://test", transport=ASGITransport(app=test_app))
    await api.login(ADMIN_EMAIL, ADMIN_PASSWORD)
    await api.update_dashboard_preferences(None)
    yield api
    await api.update_dashboard_preferences(None)
    await api.aclose()


def _keys(layout):
    return [c.key for c in layout]


async def test_reorder_persists_and_reset_restores(admin_api):
    overview = DashboardOverview(admin_api)
    await overview.load()
    assert _keys(overview.config) == DEFAULT_ORDER

    assert await overview.drag_end(ACTION_CENTER_QUEUE, FINANCIAL_TREND_CHART) is True
    assert overview.notifier.last.message == "Layout saved."

    # Fresh console instance sees the saved order
    reloaded = DashboardOverview(admin_api)
    await reloaded.load()
    assert _keys(reloaded.config) == [
        ADMIN_KPI_GRID, ACTION_CENTER_QUEUE, FINANCIAL_TREND_CHART, SYSTEM_HEALTH_PANEL,
    ]

    assert await reloaded.reset() is True
    assert reloaded.notifier.last.message == "Dashboard reset successfully."
    await reloaded.load()
    assert _keys(reloaded.config) == DEFAULT_ORDER
    assert reloaded.data["dashboardPreferences"] is None


async def test_rejected_save_rolls_back(admin_api, test_app):
    overview = DashboardOverview(admin_api)
    await overview.load()
    before = overview.data

    async with AdminAPI("http://test", transport=ASGITransport(app=test_app)) as coach_api:
        coach_token = await coach_api.login(COACH_EMAIL, COACH_PASSWORD)
    admin_api.set_token(coach_token)
    try:
        assert await overview.drag_end(SYSTEM_HEALTH_PANEL, FINANCIAL_TREND_CHART) is False
    finally:
        await admin_api.login(ADMIN_EMAIL, ADMIN_PASSWORD)

    assert overview.notifier.last.level == "error"
    assert overview.notifier.last.message.startswith("Error saving layout:")
    assert overview.cache.get(overview.query_key) == before
    assert _keys(overview.config) == DEFAULT_ORDER


async def test_user_management_loads_and_clears_selection(admin_api):
    users = UserManagement(admin_api)
    users.apply_filters(UserFilters(search="coach@example.com"))
    listed = await users.load_users()
    assert [u["email"] for u in listed] == [COACH_EMAIL]

    users.select_user(listed[0]["id"])
    detail = await users.load_selected_detail()
    assert detail["countryCode"] == "DE"
    assert users.selected_user == detail

    # Paging keeps the selection, filtering drops it
    users.set_page(1)
    assert users.selected_user_id == listed[0]["id"]
    await users.on_filters_change(users.filters.update(search="", role="admin"))
    assert users.selected_user_id is None
    assert users.total >= 1

    assert "DE" in await users.load_countries()


async def test_console_session_shares_cache_and_notifier(test_app):
    config = BackofficeConfig(api_base_url="http://test", filter_debounce_ms=50)
    async with AdminConsole(config, transport=ASGITransport(app=test_app)) as console:
        await console.login(ADMIN_EMAIL, ADMIN_PASSWORD)
        assert console.overview.cache is console.cache
        assert console.users.notifier is console.notifier

        assert console.users.debounce_ms == 50
        bar = console.users.make_filter_bar()
        bar.set_field("role", "coach")
        assert bar.pending
        await bar.flush()
        assert console.users.filters.role == "coach"
        assert all(u["role"] == "coach" for u in console.users.users)

        await console.overview.load()
        assert console.overview.data is not None
