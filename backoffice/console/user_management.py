"""User management tab: filter state, listing, and the selected user."""

from typing import Optional

from ..users.filters import UserFilters, filters_changed
from ..utils.logging import get_logger
from .admin_api import AdminAPI
from .filter_bar import UserFilterBar
from .notifications import Notifier

logger = get_logger("console.user_management")


class UserManagement:
    """Owns the authoritative filter object and the selected user.

    Any change to a filtering field clears the selection, since the
    selected user may no longer be in the result set. Paging and sorting
    keep it.
    """

    def __init__(
        self,
        api: AdminAPI,
        notifier: Optional[Notifier] = None,
        filters: Optional[UserFilters] = None,
        debounce_ms: int = 500,
    ):
        self.api = api
        self.notifier = notifier if notifier is not None else Notifier()
        self.defaults = filters if filters is not None else UserFilters()
        self.filters = self.defaults
        self.debounce_ms = debounce_ms
        self.selected_user_id: Optional[int] = None
        self.selected_user: Optional[dict] = None

        self.users: list[dict] = []
        self.total = 0
        self.total_pages = 0
        self.countries: list[str] = []
        self._filter_bar: Optional[UserFilterBar] = None

    # --- Filters ---

    def apply_filters(self, filters: UserFilters) -> None:
        previous, self.filters = self.filters, filters
        if filters_changed(previous, filters) and self.selected_user_id is not None:
            logger.debug("user_selection_cleared", user_id=self.selected_user_id)
            self.clear_selection()
        if self._filter_bar is not None:
            self._filter_bar.sync(filters)

    async def on_filters_change(self, filters: UserFilters) -> None:
        """Filter bar callback: adopt the filters and reload the page."""
        self.apply_filters(filters)
        await self.load_users()

    def set_page(self, page: int) -> None:
        self.apply_filters(self.filters.update(page=page))

    def set_page_size(self, limit: int) -> None:
        self.apply_filters(self.filters.update(limit=limit, page=1))

    def set_sort(self, field: str, order: str = "desc") -> None:
        self.apply_filters(self.filters.update(sort_field=field, sort_order=order))

    def close(self) -> None:
        if self._filter_bar is not None:
            self._filter_bar.close()

    def make_filter_bar(self) -> UserFilterBar:
        if self._filter_bar is not None:
            self._filter_bar.close()
        self._filter_bar = UserFilterBar(
            self.filters,
            self.on_filters_change,
            debounce_ms=self.debounce_ms,
            defaults=self.defaults,
        )
        return self._filter_bar

    # --- Selection ---

    def select_user(self, user_id: Optional[int]) -> None:
        self.selected_user_id = user_id
        self.selected_user = None

    def clear_selection(self) -> None:
        self.select_user(None)

    # --- Loading ---

    async def load_users(self) -> list[dict]:
        try:
            body = await self.api.list_users(self.filters)
        except Exception as e:
            self.notifier.error(f"Error loading users: {e}")
            return self.users
        self.users = body.get("users", [])
        self.total = body.get("total", 0)
        self.total_pages = body.get("totalPages", 0)
        return self.users

    async def load_selected_detail(self) -> Optional[dict]:
        user_id = self.selected_user_id
        if user_id is None:
            return None
        try:
            detail = await self.api.get_user_detail(user_id)
        except Exception as e:
            self.notifier.error(f"Error loading user details: {e}")
            return None
        # Selection may have moved on while the request was in flight
        if self.selected_user_id == user_id:
            self.selected_user = detail
        return detail

    async def load_countries(self) -> list[str]:
        try:
            self.countries = await self.api.get_unique_user_countries()
        except Exception as e:
            self.notifier.error(f"Error loading countries: {e}")
        return self.countries
