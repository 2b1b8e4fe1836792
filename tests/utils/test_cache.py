"""Tests for the TTL cache used by the overview and health endpoints."""

import asyncio
from unittest.mock import patch

import pytest

from backoffice.utils.cache import TTLCache


class TestTTLCache:
    def test_set_and_get(self):
        cache = TTLCache(default_ttl=10)
        cache.set("a", 1)
        assert cache.get("a") == 1
        assert cache.get("missing") is None

    def test_entry_expires(self):
        cache = TTLCache(default_ttl=5)
        with patch("backoffice.utils.cache.time.monotonic", return_value=100.0):
            cache.set("a", 1)
        with patch("backoffice.utils.cache.time.monotonic", return_value=106.0):
            assert cache.get("a") is None

    def test_invalidate_prefix_only_touches_matching_keys(self):
        cache = TTLCache()
        cache.set("overview:1:a:b", 1)
        cache.set("overview:1:c:d", 2)
        cache.set("overview:12:a:b", 3)
        assert cache.invalidate_prefix("overview:1:") == 2
        assert cache.get("overview:12:a:b") == 3

    def test_full_cache_evicts_oldest(self):
        cache = TTLCache(default_ttl=60, max_entries=2)
        with patch("backoffice.utils.cache.time.monotonic", side_effect=[1.0, 1.0, 2.0, 2.0, 3.0, 3.0]):
            cache.set("first", 1)
            cache.set("second", 2)
            cache.set("third", 3)
        assert "first" not in cache._store
        assert set(cache._store) == {"second", "third"}

    @pytest.mark.asyncio
    async def test_get_or_compute_runs_once_for_concurrent_callers(self):
        cache = TTLCache()
        calls = 0

        async def compute():
            nonlocal calls
            calls += 1
            await asyncio.sleep(0.01)
            return {"value": calls}

        results = await asyncio.gather(*(cache.get_or_compute("k", compute) for _ in range(5)))
        assert calls == 1
        assert all(r == {"value": 1} for r in results)
