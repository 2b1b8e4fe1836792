"""Integration tests: dashboard overview and layout preference endpoints."""

from datetime import datetime
from unittest.mock import patch

import pytest

import backoffice.dependencies as dep_mod
from backoffice.api.routes.dashboard import build_overview
from backoffice.models.payment import Payment

pytestmark = pytest.mark.asyncio(loop_scope="session")

OVERVIEW = "/api/v1/admin/dashboard/overview"
PREFERENCES = "/api/v1/admin/dashboard-preferences"


async def _reset_prefs(client, headers):
    resp = await client.patch(PREFERENCES, json={"preferences": None}, headers=headers)
    assert resp.status_code == 200


# -----------------------------------------------------------------------
# Auth and error shape
# -----------------------------------------------------------------------

async def test_overview_requires_auth(client):
    resp = await client.get(OVERVIEW)
    assert resp.status_code == 401
    body = resp.json()
    assert body["error"] is True
    assert body["detail"] == "Not authenticated"
    assert body["request_id"] == resp.headers["X-Request-ID"]


async def test_overview_forbidden_for_coach(client, coach_headers):
    resp = await client.get(OVERVIEW, headers=coach_headers)
    assert resp.status_code == 403


async def test_request_id_is_echoed(client):
    resp = await client.get("/", headers={"X-Request-ID": "abc-123"})
    assert resp.headers["X-Request-ID"] == "abc-123"


async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["database"] == "connected"


# -----------------------------------------------------------------------
# Overview payload
# -----------------------------------------------------------------------

async def test_overview_shape(client, admin_headers):
    await _reset_prefs(client, admin_headers)
    resp = await client.get(OVERVIEW, params={"timeframe": "7d"}, headers=admin_headers)
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert set(data) == {"kpis", "financialTrend", "actionCenterItems", "systemHealth", "dashboardPreferences"}
    assert data["dashboardPreferences"] is None


async def test_overview_kpis_and_trend(client, admin_headers, session_factory_shared):
    day = datetime(2026, 1, 5, 12, 0)
    async with session_factory_shared() as session:
        session.add_all([
            Payment(type="charge", status="completed", amount_total=100.0, platform_fee=20.0,
                    vat_amount=5.0, processing_fee=3.0, created_at=day),
            Payment(type="program_purchase", status="succeeded", amount_total=50.0, platform_fee=10.0,
                    processing_fee=1.0, created_at=day),
            Payment(type="charge", status="pending", amount_total=999.0, created_at=day),
            Payment(type="payout", status="completed", amount_total=60.0, created_at=day),
            Payment(type="refund", status="completed", amount_total=15.0, created_at=day),
            Payment(type="charge", status="disputed", amount_total=30.0, created_at=day),
        ])
        await session.commit()
    dep_mod.get_overview_cache().clear()

    resp = await client.get(
        OVERVIEW,
        params={"startDate": "2026-01-01T00:00:00", "endDate": "2026-01-31T23:59:59"},
        headers=admin_headers,
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    kpis = data["kpis"]
    assert kpis["grossMerchandiseVolume"] == 150.0
    assert kpis["successfulTransactions"] == 2
    assert kpis["averageTransactionValue"] == 75.0
    assert kpis["grossPlatformRevenue"] == 30.0
    assert kpis["netPlatformRevenue"] == 26.0
    assert kpis["platformVatLiability"] == 5.0
    assert kpis["accruedCoachEarnings"] == 120.0
    assert kpis["totalCoachPayouts"] == 60.0
    assert kpis["totalCustomerRefunds"] == 15.0
    assert kpis["openPaymentDisputes"] == 1

    assert data["financialTrend"] == [{
        "date": "2026-01-05",
        "gtv": 150.0,
        "grossPlatformRevenue": 30.0,
        "paymentProcessingFees": 4.0,
        "accruedCoachEarnings": 120.0,
        "netPlatformRevenue": 26.0,
    }]


async def test_overview_rejects_inverted_range(client, admin_headers):
    resp = await client.get(
        OVERVIEW,
        params={"startDate": "2026-02-01T00:00:00", "endDate": "2026-01-01T00:00:00"},
        headers=admin_headers,
    )
    assert resp.status_code == 400


# -----------------------------------------------------------------------
# Preferences
# -----------------------------------------------------------------------

async def test_save_splits_and_merges_kpi_settings(client, admin_headers):
    prefs = [
        {"key": "systemHealthPanel", "enabled": True, "size": "Wide"},
        {"key": "adminKpiGrid", "enabled": True, "settings": {"kpis": ["newUserSignups"]}},
    ]
    resp = await client.patch(PREFERENCES, json={"preferences": prefs}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["data"] == [
        {"key": "systemHealthPanel", "enabled": True, "size": "Wide"},
        {"key": "adminKpiGrid", "enabled": True},
    ]

    resp = await client.get(OVERVIEW, params={"timeframe": "today"}, headers=admin_headers)
    assert resp.json()["data"]["dashboardPreferences"] == prefs


async def test_saved_layout_invalidates_cached_overview(client, admin_headers):
    await _reset_prefs(client, admin_headers)
    first = await client.get(OVERVIEW, params={"timeframe": "30d"}, headers=admin_headers)
    assert first.json()["data"]["dashboardPreferences"] is None

    prefs = [{"key": "financialTrendChart", "enabled": False}]
    await client.patch(PREFERENCES, json={"preferences": prefs}, headers=admin_headers)

    second = await client.get(OVERVIEW, params={"timeframe": "30d"}, headers=admin_headers)
    assert second.json()["data"]["dashboardPreferences"] == prefs


async def test_rolling_timeframe_is_served_from_cache(client, admin_headers):
    await _reset_prefs(client, admin_headers)
    with patch("backoffice.api.routes.dashboard.build_overview", wraps=build_overview) as computed:
        first = await client.get(OVERVIEW, params={"timeframe": "7d"}, headers=admin_headers)
        second = await client.get(OVERVIEW, params={"timeframe": "7d"}, headers=admin_headers)

    assert first.status_code == second.status_code == 200
    assert computed.call_count == 1
    assert second.json()["data"] == first.json()["data"]


async def test_rolling_timeframe_cache_dropped_on_save(client, admin_headers):
    await _reset_prefs(client, admin_headers)
    with patch("backoffice.api.routes.dashboard.build_overview", wraps=build_overview) as computed:
        await client.get(OVERVIEW, params={"timeframe": "90d"}, headers=admin_headers)
        await client.get(OVERVIEW, params={"timeframe": "90d"}, headers=admin_headers)
        assert computed.call_count == 1

        prefs = [{"key": "actionCenterQueue", "enabled": False}]
        await client.patch(PREFERENCES, json={"preferences": prefs}, headers=admin_headers)
        resp = await client.get(OVERVIEW, params={"timeframe": "90d"}, headers=admin_headers)

    assert computed.call_count == 2
    assert resp.json()["data"]["dashboardPreferences"] == prefs


@pytest.mark.parametrize("reset_value", [None, []])
async def test_reset_clears_preferences(client, admin_headers, reset_value):
    await client.patch(
        PREFERENCES,
        json={"preferences": [{"key": "adminKpiGrid", "enabled": False, "settings": {"kpis": ["x"]}}]},
        headers=admin_headers,
    )
    resp = await client.patch(PREFERENCES, json={"preferences": reset_value}, headers=admin_headers)
    assert resp.status_code == 200

    resp = await client.get(OVERVIEW, params={"timeframe": "all"}, headers=admin_headers)
    assert resp.json()["data"]["dashboardPreferences"] is None


@pytest.mark.parametrize("body", [{"preferences": "grid"}, {"preferences": {"key": "a"}}, {}])
async def test_invalid_preferences_rejected(client, admin_headers, body):
    resp = await client.patch(PREFERENCES, json=body, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["detail"] == 'Invalid preference format. "preferences" must be an array.'


async def test_entry_without_key_rejected(client, admin_headers):
    resp = await client.patch(PREFERENCES, json={"preferences": [{"enabled": True}]}, headers=admin_headers)
    assert resp.status_code == 400
