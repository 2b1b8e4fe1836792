"""Tests for QueryCache: keys, optimistic writes, snapshot/rollback, fetch."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from backoffice.console.query_cache import QueryCache, make_query_key


def test_query_key_ignores_param_order():
    assert make_query_key("q", {"a": 1, "b": 2}) == make_query_key("q", {"b": 2, "a": 1})
    assert make_query_key("q", {"a": 1}) != make_query_key("q", {"a": 2})


def test_updater_returning_none_leaves_entry():
    cache = QueryCache()
    key = make_query_key("q")
    cache.set(key, {"v": 1})
    cache.set(key, lambda old: None)
    assert cache.get(key) == {"v": 1}


def test_updater_on_missing_entry_does_not_create():
    cache = QueryCache()
    key = make_query_key("q")
    cache.set(key, lambda old: None if old is None else {**old, "x": 1})
    assert not cache.has(key)


def test_rollback_restores_previous_value():
    cache = QueryCache()
    key = make_query_key("q")
    original = {"v": 1}
    cache.set(key, original)
    snapshot = cache.snapshot(key)
    cache.set(key, {"v": 2})
    cache.rollback(snapshot)
    assert cache.get(key) is original


def test_rollback_of_absent_entry_removes_it():
    cache = QueryCache()
    key = make_query_key("q")
    snapshot = cache.snapshot(key)
    cache.set(key, {"v": 2})
    cache.rollback(snapshot)
    assert not cache.has(key)
    assert snapshot.data is None


def test_invalidate_marks_only_named_query_stale():
    cache = QueryCache()
    a = make_query_key("a", {"p": 1})
    b = make_query_key("b")
    cache.set(a, 1)
    cache.set(b, 2)
    assert cache.invalidate("a") == 1
    assert cache.is_stale(a)
    assert not cache.is_stale(b)
    # Stale entries keep serving their value until refetched
    assert cache.get(a) == 1


@pytest.mark.asyncio
async def test_fetch_uses_fresh_entry():
    cache = QueryCache()
    key = make_query_key("q")
    cache.set(key, "cached")
    fetcher = AsyncMock(return_value="server")
    assert await cache.fetch(key, fetcher) == "cached"
    fetcher.assert_not_called()


@pytest.mark.asyncio
async def test_fetch_refetches_stale_entry():
    cache = QueryCache()
    key = make_query_key("q")
    cache.set(key, "cached")
    cache.invalidate("q")
    assert await cache.fetch(key, AsyncMock(return_value="server")) == "server"
    assert not cache.is_stale(key)


@pytest.mark.asyncio
async def test_concurrent_fetches_share_one_request():
    cache = QueryCache()
    key = make_query_key("q")
    calls = 0

    async def fetcher():
        nonlocal calls
        calls += 1
        await asyncio.sleep(0.01)
        return "server"

    results = await asyncio.gather(cache.fetch(key, fetcher), cache.fetch(key, fetcher))
    assert results == ["server", "server"]
    assert calls == 1


@pytest.mark.asyncio
async def test_fetch_error_propagates_and_keeps_entry():
    cache = QueryCache()
    key = make_query_key("q")
    cache.set(key, "cached")
    cache.invalidate("q")
    with pytest.raises(RuntimeError):
        await cache.fetch(key, AsyncMock(side_effect=RuntimeError("down")))
    assert cache.get(key) == "cached"


@pytest.mark.asyncio
async def test_cancelled_fetch_cannot_overwrite_optimistic_write():
    cache = QueryCache()
    key = make_query_key("q")
    started = asyncio.Event()
    release = asyncio.Event()

    async def slow_fetch():
        started.set()
        await release.wait()
        return "server"

    loader = asyncio.create_task(cache.fetch(key, slow_fetch))
    await started.wait()

    await cache.cancel(key)
    cache.set(key, "optimistic")
    release.set()

    await loader
    assert cache.get(key) == "optimistic"


@pytest.mark.asyncio
async def test_cancel_without_inflight_is_noop():
    cache = QueryCache()
    await cache.cancel(make_query_key("q"))
