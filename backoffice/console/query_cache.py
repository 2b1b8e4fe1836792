"""Query cache: client-side store of the last known server view per query.

Entries are keyed by ``(query_name, params)``. The cache is mutated both by
fetch results and by optimistic writes; rollback to a captured snapshot is
the only consistency safeguard ("last writer wins").
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Hashable

from ..utils.logging import get_logger

logger = get_logger("console.query_cache")

QueryKey = tuple[str, Hashable]

_MISSING = object()


def make_query_key(name: str, params: dict | None = None) -> QueryKey:
    """Build a hashable cache key from a query name and its parameters."""
    if not params:
        return (name, ())
    return (name, tuple(sorted((k, _freeze(v)) for k, v in params.items())))


def _freeze(value: Any) -> Hashable:
    if isinstance(value, dict):
        return tuple(sorted((k, _freeze(v)) for k, v in value.items()))
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


@dataclass(frozen=True)
class CacheSnapshot:
    """Value of one cache entry captured before an optimistic write."""

    key: QueryKey
    value: Any = _MISSING

    @property
    def present(self) -> bool:
        return self.value is not _MISSING

    @property
    def data(self) -> Any:
        return self.value if self.present else None


@dataclass
class _Entry:
    value: Any
    stale: bool = False


class QueryCache:
    """Key → value store with in-flight fetch tracking and snapshot/rollback."""

    def __init__(self):
        self._store: dict[QueryKey, _Entry] = {}
        self._inflight: dict[QueryKey, asyncio.Task] = {}

    def get(self, key: QueryKey) -> Any | None:
        entry = self._store.get(key)
        return entry.value if entry is not None else None

    def has(self, key: QueryKey) -> bool:
        return key in self._store

    def is_stale(self, key: QueryKey) -> bool:
        entry = self._store.get(key)
        return entry is None or entry.stale

    def set(self, key: QueryKey, value_or_updater: Any) -> Any | None:
        """Write an entry.

        ``value_or_updater`` may be a callable receiving the current value
        (or None); if it returns None the entry is left untouched.
        """
        if callable(value_or_updater):
            new_value = value_or_updater(self.get(key))
            if new_value is None:
                return self.get(key)
        else:
            new_value = value_or_updater
        self._store[key] = _Entry(new_value)
        return new_value

    def remove(self, key: QueryKey) -> None:
        self._store.pop(key, None)

    def snapshot(self, key: QueryKey) -> CacheSnapshot:
        entry = self._store.get(key)
        if entry is None:
            return CacheSnapshot(key)
        return CacheSnapshot(key, entry.value)

    def rollback(self, snapshot: CacheSnapshot) -> None:
        """Restore an entry to the captured snapshot value (or absence)."""
        if snapshot.present:
            self._store[snapshot.key] = _Entry(snapshot.value)
        else:
            self._store.pop(snapshot.key, None)
        logger.debug("query_cache_rolled_back", query=snapshot.key[0])

    def invalidate(self, name: str) -> int:
        """Mark every entry of the named query stale; the next fetch reloads it."""
        count = 0
        for key, entry in self._store.items():
            if key[0] == name:
                entry.stale = True
                count += 1
        return count

    async def cancel(self, key: QueryKey) -> None:
        """Cancel an in-flight fetch so it cannot overwrite a pending write."""
        task = self._inflight.pop(key, None)
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.debug("query_fetch_cancelled", query=key[0])

    async def fetch(
        self,
        key: QueryKey,
        fetcher: Callable[[], Awaitable[Any]],
        force: bool = False,
    ) -> Any:
        """Return the cached value, fetching it when missing, stale, or forced.

        Concurrent fetches for the same key share one request.
        """
        if not force and not self.is_stale(key):
            return self.get(key)

        task = self._inflight.get(key)
        if task is None or task.done():
            task = asyncio.ensure_future(fetcher())
            self._inflight[key] = task

        try:
            value = await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if task.cancelled() and not (current and current.cancelling()):
                # Fetch was cancelled by cancel(), not the caller: keep the
                # value an optimistic writer put in place.
                return self.get(key)
            raise
        finally:
            if self._inflight.get(key) is task:
                del self._inflight[key]

        self._store[key] = _Entry(value)
        return value
