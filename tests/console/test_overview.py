"""Tests for DashboardOverview: optimistic reorder/save/reset and rollback."""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from backoffice.console.admin_api import AdminAPI, AdminAPIError
from backoffice.console.notifications import Notifier
from backoffice.console.overview import DashboardOverview
from backoffice.dashboard.layout import expand_preferences, reset_layout
from backoffice.dashboard.registry import WidgetSize

DEFAULT_KEYS = ["adminKpiGrid", "financialTrendChart", "actionCenterQueue", "systemHealthPanel"]


def _make_overview(payload):
    api = AsyncMock(spec=AdminAPI)
    api.get_overview = AsyncMock(return_value=payload)
    api.update_dashboard_preferences = AsyncMock(return_value={"success": True})
    return DashboardOverview(api, notifier=Notifier()), api


class TestLoad:
    @pytest.mark.asyncio
    async def test_load_populates_cache_and_layout(self, overview_payload):
        overview, api = _make_overview(overview_payload())
        await overview.load()
        api.get_overview.assert_awaited_once_with({"timeframe": "7d"})
        assert overview.data["kpis"]["newUserSignups"] == 7
        assert [c.key for c in overview.config] == DEFAULT_KEYS

    @pytest.mark.asyncio
    async def test_load_failure_notifies(self):
        overview, api = _make_overview(None)
        api.get_overview.side_effect = AdminAPIError("Server Error", 500)
        assert await overview.load() is None
        assert overview.notifier.messages("error") == ["Error loading dashboard: Server Error"]

    @pytest.mark.asyncio
    async def test_second_load_served_from_cache(self, overview_payload):
        overview, api = _make_overview(overview_payload())
        await overview.load()
        await overview.load()
        assert api.get_overview.await_count == 1

    def test_custom_range_replaces_timeframe(self):
        overview, _ = _make_overview(None)
        overview.apply_custom_range(datetime(2026, 1, 1), datetime(2026, 1, 31, 23, 59))
        assert overview.query_params() == {
            "startDate": "2026-01-01T00:00:00",
            "endDate": "2026-01-31T23:59:00",
        }
        overview.set_timeframe("90d")
        assert overview.query_params() == {"timeframe": "90d"}

    def test_invalid_custom_range_rejected(self):
        overview, _ = _make_overview(None)
        with pytest.raises(ValueError):
            overview.apply_custom_range(datetime(2026, 2, 1), datetime(2026, 1, 1))


class TestDragEnd:
    @pytest.mark.asyncio
    async def test_reorder_saves_new_order(self, overview_payload):
        overview, api = _make_overview(overview_payload())
        await overview.load()

        saved = await overview.drag_end("systemHealthPanel", "financialTrendChart")

        assert saved is True
        sent = api.update_dashboard_preferences.await_args.args[0]
        expected = ["adminKpiGrid", "systemHealthPanel", "financialTrendChart", "actionCenterQueue"]
        assert [e["key"] for e in sent] == expected
        assert [c.key for c in overview.config] == expected
        assert overview.notifier.last.message == "Layout saved."
        assert overview.cache.is_stale(overview.query_key)

    @pytest.mark.asyncio
    async def test_cache_written_before_network_call(self, overview_payload):
        overview, api = _make_overview(overview_payload())
        await overview.load()

        async def _check(preferences):
            assert overview.data["dashboardPreferences"] == preferences
            return {"success": True}

        api.update_dashboard_preferences.side_effect = _check
        assert await overview.drag_end("actionCenterQueue", "adminKpiGrid")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("over", [None, "systemHealthPanel"])
    async def test_drop_without_move_is_noop(self, overview_payload, over):
        overview, api = _make_overview(overview_payload())
        await overview.load()
        assert await overview.drag_end("systemHealthPanel", over) is False
        api.update_dashboard_preferences.assert_not_called()

    @pytest.mark.asyncio
    async def test_failure_rolls_back_cache_and_layout(self, overview_payload):
        payload = overview_payload()
        overview, api = _make_overview(payload)
        await overview.load()
        api.update_dashboard_preferences.side_effect = AdminAPIError("Database unavailable", 500)

        saved = await overview.drag_end("systemHealthPanel", "adminKpiGrid")

        assert saved is False
        assert overview.data is payload
        assert [c.key for c in overview.config] == DEFAULT_KEYS
        assert overview.notifier.last.level == "error"
        assert overview.notifier.last.message == "Error saving layout: Database unavailable"
        assert overview.cache.is_stale(overview.query_key)

    @pytest.mark.asyncio
    async def test_failure_restores_saved_preferences(self, overview_payload):
        saved_prefs = [
            {"key": "systemHealthPanel", "enabled": True, "size": "Wide"},
            {"key": "adminKpiGrid", "enabled": True},
        ]
        overview, api = _make_overview(overview_payload(saved_prefs))
        await overview.load()
        api.update_dashboard_preferences.side_effect = AdminAPIError("nope")

        await overview.drag_end("adminKpiGrid", "systemHealthPanel")

        config = overview.config
        assert [c.key for c in config][:2] == ["systemHealthPanel", "adminKpiGrid"]
        assert config[0].size == WidgetSize.WIDE


class TestReset:
    @pytest.mark.asyncio
    async def test_reset_sends_null_and_expands_defaults(self, overview_payload):
        overview, api = _make_overview(overview_payload([{"key": "systemHealthPanel", "enabled": False}]))
        await overview.load()

        assert await overview.reset() is True

        api.update_dashboard_preferences.assert_awaited_once_with(None)
        assert overview.data["dashboardPreferences"] == expand_preferences(None)
        assert overview.config == reset_layout()
        assert overview.notifier.last.message == "Dashboard reset successfully."

    @pytest.mark.asyncio
    async def test_reset_twice_gives_same_layout(self, overview_payload):
        overview, _ = _make_overview(overview_payload())
        await overview.load()
        await overview.reset()
        first = list(overview.config)
        await overview.reset()
        assert overview.config == first

    @pytest.mark.asyncio
    async def test_reset_failure_restores_snapshot(self, overview_payload):
        prefs = [{"key": "systemHealthPanel", "enabled": False}]
        overview, api = _make_overview(overview_payload(prefs))
        await overview.load()
        api.update_dashboard_preferences.side_effect = AdminAPIError("Server Error", 500)

        await overview.reset()

        assert overview.data["dashboardPreferences"] == prefs
        assert overview.config[0].key == "systemHealthPanel"
        assert overview.config[0].enabled is False


class TestCustomizationSheet:
    @pytest.mark.asyncio
    async def test_close_without_changes_does_not_save(self, overview_payload):
        overview, api = _make_overview(overview_payload())
        await overview.load()
        overview.open_sheet()
        assert await overview.close_sheet() is False
        api.update_dashboard_preferences.assert_not_called()

    @pytest.mark.asyncio
    async def test_close_after_toggle_saves_working_copy(self, overview_payload):
        overview, api = _make_overview(overview_payload())
        await overview.load()
        overview.open_sheet()
        overview.toggle_widget("actionCenterQueue")
        overview.resize_widget("systemHealthPanel", WidgetSize.WIDE)

        assert await overview.close_sheet() is True

        sent = {e["key"]: e for e in api.update_dashboard_preferences.await_args.args[0]}
        assert sent["actionCenterQueue"]["enabled"] is False
        assert sent["systemHealthPanel"]["size"] == "Wide"
        assert overview.sheet_open is False

    @pytest.mark.asyncio
    async def test_local_edits_survive_repeated_reads(self, overview_payload):
        overview, _ = _make_overview(overview_payload())
        await overview.load()
        overview.toggle_widget("financialTrendChart", enabled=False)
        assert overview.config[1].enabled is False
        assert overview.config[1].enabled is False


class TestRenderPlan:
    @pytest.mark.asyncio
    async def test_pinned_first_and_disabled_skipped(self, overview_payload):
        prefs = [
            {"key": "financialTrendChart", "enabled": True},
            {"key": "adminKpiGrid", "enabled": True},
            {"key": "actionCenterQueue", "enabled": False},
        ]
        overview, _ = _make_overview(overview_payload(prefs))
        await overview.load()

        plan = overview.render_plan()

        assert [w.key for w in plan] == ["adminKpiGrid", "financialTrendChart", "systemHealthPanel"]
        assert plan[0].pinned and plan[0].span == 4
        assert plan[0].data == {"grossMerchandiseVolume": 1200.0, "newUserSignups": 7}
        assert plan[1].span == 2
        assert plan[2].span == 1
