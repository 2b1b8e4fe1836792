"""Tests for UserFilterBar: debounce, page reset, reset bypass, close."""

import asyncio
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from backoffice.console.filter_bar import UserFilterBar
from backoffice.users.filters import UserFilters

DEBOUNCE_MS = 20
WAIT = 0.08


class TestDebouncedPropagation:
    @pytest.mark.asyncio
    async def test_burst_of_edits_propagates_once_with_last_value(self):
        on_change = MagicMock()
        bar = UserFilterBar(UserFilters(), on_change, debounce_ms=DEBOUNCE_MS)

        for term in ("a", "an", "ann", "anna"):
            bar.set_field("search", term)
        on_change.assert_not_called()

        await asyncio.sleep(WAIT)

        on_change.assert_called_once()
        assert on_change.call_args.args[0].search == "anna"

    @pytest.mark.asyncio
    async def test_edits_in_separate_windows_propagate_separately(self):
        on_change = MagicMock()
        bar = UserFilterBar(UserFilters(), on_change, debounce_ms=DEBOUNCE_MS)
        bar.set_field("role", "coach")
        await asyncio.sleep(WAIT)
        bar.set_field("role", "client")
        await asyncio.sleep(WAIT)
        assert [c.args[0].role for c in on_change.call_args_list] == ["coach", "client"]

    @pytest.mark.asyncio
    async def test_async_callback_is_awaited(self):
        on_change = AsyncMock()
        bar = UserFilterBar(UserFilters(), on_change, debounce_ms=DEBOUNCE_MS)
        bar.set_field("country_code", "DE")
        await asyncio.sleep(WAIT)
        await bar.wait()
        on_change.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_cancels_pending_propagation(self):
        on_change = MagicMock()
        bar = UserFilterBar(UserFilters(), on_change, debounce_ms=DEBOUNCE_MS)
        bar.set_field("search", "x")
        bar.close()
        await asyncio.sleep(WAIT)
        on_change.assert_not_called()
        assert not bar.pending

    @pytest.mark.asyncio
    async def test_flush_delivers_immediately(self):
        on_change = MagicMock()
        bar = UserFilterBar(UserFilters(), on_change, debounce_ms=10_000)
        bar.set_field("search", "now")
        await bar.flush()
        assert on_change.call_args.args[0].search == "now"


class TestFieldEdits:
    @pytest.mark.asyncio
    async def test_any_edit_resets_page(self):
        bar = UserFilterBar(UserFilters(page=4), MagicMock(), debounce_ms=DEBOUNCE_MS)
        bar.set_field("role", "coach")
        assert bar.local.page == 1
        bar.close()

    @pytest.mark.asyncio
    async def test_all_option_clears_field(self):
        bar = UserFilterBar(UserFilters(role="coach"), MagicMock(), debounce_ms=DEBOUNCE_MS)
        bar.set_field("role", "all")
        assert bar.local.role == ""
        bar.close()

    @pytest.mark.asyncio
    async def test_range_and_dates_set_pairs(self):
        bar = UserFilterBar(UserFilters(), MagicMock(), debounce_ms=DEBOUNCE_MS)
        bar.set_range("trust", 20, 80)
        bar.set_date_range("signup", datetime(2026, 1, 1), datetime(2026, 2, 1))
        assert (bar.local.min_trust, bar.local.max_trust) == (20, 80)
        assert bar.local.end_date == datetime(2026, 2, 1)
        assert bar.active_filter_count == 2
        bar.close()

    def test_paging_fields_are_not_editable(self):
        bar = UserFilterBar(UserFilters(), MagicMock(), debounce_ms=DEBOUNCE_MS)
        with pytest.raises(ValueError):
            bar.set_field("page", 3)


class TestReset:
    @pytest.mark.asyncio
    async def test_reset_bypasses_debounce(self):
        on_change = MagicMock()
        bar = UserFilterBar(UserFilters(role="coach"), on_change, debounce_ms=DEBOUNCE_MS)
        bar.set_field("search", "pending edit")

        await bar.reset()

        on_change.assert_called_once_with(UserFilters())
        assert bar.local == UserFilters()
        assert bar.active_filter_count == 0
        await asyncio.sleep(WAIT)
        on_change.assert_called_once()
