"""Tests for the overview response cache key."""

from datetime import datetime

from backoffice.api.routes.dashboard import overview_cache_key


class TestOverviewCacheKey:
    def test_rolling_timeframe_keys_by_name(self):
        assert overview_cache_key(1, "7d", None, None) == "overview:1:7d"
        assert overview_cache_key(1, "7d", None, None) == overview_cache_key(1, "7d", None, None)

    def test_half_open_range_falls_back_to_timeframe(self):
        assert overview_cache_key(1, "30d", datetime(2026, 1, 1), None) == "overview:1:30d"

    def test_explicit_range_keys_by_bounds(self):
        key = overview_cache_key(1, "7d", datetime(2026, 1, 1), datetime(2026, 1, 31))
        assert key == "overview:1:2026-01-01T00:00:00:2026-01-31T00:00:00"

    def test_users_do_not_share_entries(self):
        assert overview_cache_key(12, "7d", None, None) != overview_cache_key(1, "7d", None, None)
        assert not overview_cache_key(12, "7d", None, None).startswith("overview:1:")
