"""User-list filter bar: local form state with debounced propagation."""

import inspect
from datetime import datetime
from typing import Any, Callable, Optional

from ..users.filters import ALL_OPTION, FILTERING_FIELDS, UserFilters, active_filter_count
from ..utils.logging import get_logger
from .debounce import Debouncer

logger = get_logger("console.filter_bar")

DATE_RANGES = {
    "signup": ("start_date", "end_date"),
    "lastLogin": ("last_login_start_date", "last_login_end_date"),
}

NUMERIC_RANGES = {
    "trust": ("min_trust", "max_trust"),
    "completeness": ("min_profile_completeness", "max_profile_completeness"),
    "sessions": ("min_sessions", "max_sessions"),
    "enrollments": ("min_enrollments", "max_enrollments"),
}


class UserFilterBar:
    """Editable copy of the filters.

    Every edit resets ``page`` to 1 and (re)starts the debounce timer; when
    it expires the whole filter object is handed to ``on_change``. Reset is
    propagated immediately.
    """

    def __init__(
        self,
        filters: UserFilters,
        on_change: Callable[[UserFilters], Any],
        debounce_ms: int = 500,
        defaults: Optional[UserFilters] = None,
    ):
        self.local = filters
        self.defaults = defaults if defaults is not None else UserFilters()
        self._on_change = on_change
        self._debouncer = Debouncer(on_change, debounce_ms)

    @property
    def active_filter_count(self) -> int:
        return active_filter_count(self.local)

    @property
    def pending(self) -> bool:
        return self._debouncer.pending

    def _apply(self, **changes: Any) -> None:
        self.local = self.local.update(page=1, **changes)
        self._debouncer.schedule(self.local)

    def set_field(self, name: str, value: Any) -> None:
        if name not in FILTERING_FIELDS:
            raise ValueError(f"Not a filter field: {name}")
        if value == ALL_OPTION:
            value = ""
        self._apply(**{name: value})

    def set_date_range(self, kind: str, start: Optional[datetime], end: Optional[datetime]) -> None:
        start_field, end_field = DATE_RANGES[kind]
        self._apply(**{start_field: start, end_field: end})

    def set_range(self, kind: str, low: Optional[int], high: Optional[int]) -> None:
        low_field, high_field = NUMERIC_RANGES[kind]
        self._apply(**{low_field: low, high_field: high})

    def sync(self, filters: UserFilters) -> None:
        """Adopt filters changed by the parent (paging, sorting) unless an edit is pending."""
        if not self._debouncer.pending:
            self.local = filters

    async def reset(self) -> None:
        self._debouncer.cancel()
        self.local = self.defaults
        logger.debug("user_filters_reset")
        result = self._on_change(self.local)
        if inspect.isawaitable(result):
            await result

    async def flush(self) -> None:
        await self._debouncer.flush()

    async def wait(self) -> None:
        await self._debouncer.wait()

    def close(self) -> None:
        """Drop any pending propagation (the bar is going away)."""
        self._debouncer.cancel()
