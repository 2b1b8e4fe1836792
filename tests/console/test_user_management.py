"""Tests for UserManagement: filter-driven selection reset and loading."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from backoffice.console.admin_api import AdminAPI, AdminAPIError
from backoffice.console.user_management import UserManagement
from backoffice.users.filters import UserFilters


def _make_tab(**kwargs):
    api = AsyncMock(spec=AdminAPI)
    api.list_users = AsyncMock(return_value={"users": [{"id": 1}], "total": 1, "page": 1, "limit": 20, "totalPages": 1})
    api.get_user_detail = AsyncMock(return_value={"id": 42, "email": "a@example.com"})
    api.get_unique_user_countries = AsyncMock(return_value=["CH", "DE"])
    return UserManagement(api, **kwargs), api


class TestSelectionReset:
    def test_role_change_clears_selection(self):
        tab, _ = _make_tab()
        tab.select_user(42)
        tab.apply_filters(tab.filters.update(role="coach"))
        assert tab.selected_user_id is None

    def test_page_change_keeps_selection(self):
        tab, _ = _make_tab()
        tab.select_user(42)
        tab.set_page(3)
        assert tab.selected_user_id == 42
        assert tab.filters.page == 3

    def test_sort_and_page_size_keep_selection(self):
        tab, _ = _make_tab()
        tab.select_user(42)
        tab.set_sort("email", "asc")
        tab.set_page_size(50)
        assert tab.selected_user_id == 42

    def test_identical_filters_keep_selection(self):
        tab, _ = _make_tab()
        tab.select_user(42)
        tab.apply_filters(UserFilters())
        assert tab.selected_user_id == 42

    @pytest.mark.asyncio
    async def test_filter_bar_edit_clears_selection_and_reloads(self):
        tab, api = _make_tab(debounce_ms=20)
        tab.select_user(42)
        bar = tab.make_filter_bar()

        bar.set_field("status", "suspended")
        await asyncio.sleep(0.08)
        await bar.wait()

        assert tab.filters.status == "suspended"
        assert tab.selected_user_id is None
        api.list_users.assert_awaited_once_with(tab.filters)

    @pytest.mark.asyncio
    async def test_parent_paging_syncs_into_idle_filter_bar(self):
        tab, _ = _make_tab()
        bar = tab.make_filter_bar()
        tab.set_page(5)
        assert bar.local.page == 5
        bar.close()


class TestLoading:
    @pytest.mark.asyncio
    async def test_load_users(self):
        tab, _ = _make_tab()
        users = await tab.load_users()
        assert users == [{"id": 1}]
        assert tab.total == 1 and tab.total_pages == 1

    @pytest.mark.asyncio
    async def test_load_users_failure_notifies(self):
        tab, api = _make_tab()
        api.list_users.side_effect = AdminAPIError("timeout")
        await tab.load_users()
        assert tab.notifier.messages("error") == ["Error loading users: timeout"]

    @pytest.mark.asyncio
    async def test_detail_loaded_for_selection(self):
        tab, api = _make_tab()
        assert await tab.load_selected_detail() is None
        tab.select_user(42)
        await tab.load_selected_detail()
        api.get_user_detail.assert_awaited_once_with(42)
        assert tab.selected_user["email"] == "a@example.com"

    @pytest.mark.asyncio
    async def test_stale_detail_not_applied(self):
        tab, api = _make_tab()
        tab.select_user(42)

        async def _slow(user_id):
            tab.select_user(7)
            return {"id": user_id}

        api.get_user_detail.side_effect = _slow
        await tab.load_selected_detail()
        assert tab.selected_user is None

    @pytest.mark.asyncio
    async def test_countries(self):
        tab, _ = _make_tab()
        assert await tab.load_countries() == ["CH", "DE"]
