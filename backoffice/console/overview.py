"""Dashboard overview tab: KPI data plus the admin's customizable widget grid.

Layout edits are applied optimistically to the query cache and rolled back
to a snapshot when the server rejects them. Concurrent saves are not
sequenced; whichever response lands last wins.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Optional

from ..dashboard.layout import (
    LayoutReconciler,
    WidgetConfig,
    expand_preferences,
    layout_to_wire,
    move_widget,
    reconcile_layout,
)
from ..dashboard.registry import (
    ADMIN_WIDGET_REGISTRY,
    DEFAULT_ADMIN_LAYOUT,
    GRID_SPANS,
    WidgetRegistry,
    WidgetSize,
)
from ..utils.logging import get_logger
from .admin_api import AdminAPI
from .notifications import Notifier
from .query_cache import QueryCache, QueryKey, make_query_key

logger = get_logger("console.overview")

OVERVIEW_QUERY = "adminOverview"
TIMEFRAMES = ("today", "7d", "30d", "90d", "all")


@dataclass(frozen=True)
class RenderedWidget:
    key: str
    title: str
    size: WidgetSize
    span: int
    pinned: bool
    data: Any = None
    settings: Optional[dict] = None


class DashboardOverview:
    """State of the overview tab.

    Holds the selected time window, the working copy of the widget layout
    and the customization panel, and drives reorder / save / reset against
    the admin API.
    """

    def __init__(
        self,
        api: AdminAPI,
        cache: Optional[QueryCache] = None,
        notifier: Optional[Notifier] = None,
        registry: WidgetRegistry = ADMIN_WIDGET_REGISTRY,
        default_layout: list[dict] = DEFAULT_ADMIN_LAYOUT,
    ):
        self.api = api
        self.cache = cache if cache is not None else QueryCache()
        self.notifier = notifier if notifier is not None else Notifier()
        self.registry = registry
        self.default_layout = list(default_layout)
        self.timeframe = "7d"
        self.custom_range: Optional[tuple[datetime, datetime]] = None
        self.sheet_open = False

        self._reconciler = LayoutReconciler(registry, self.default_layout)
        self._local_config: list[WidgetConfig] = []
        self._synced_from: Optional[list[WidgetConfig]] = None
        self._config_on_open: list[WidgetConfig] = []

    # --- Time window ---

    def set_timeframe(self, timeframe: str) -> None:
        if timeframe not in TIMEFRAMES:
            raise ValueError(f"Unknown timeframe: {timeframe}")
        self.timeframe = timeframe
        self.custom_range = None

    def apply_custom_range(self, start: datetime, end: datetime) -> None:
        if end < start:
            raise ValueError("end must not be before start")
        self.custom_range = (start, end)

    def query_params(self) -> dict:
        if self.custom_range is not None:
            start, end = self.custom_range
            return {"startDate": start.isoformat(), "endDate": end.isoformat()}
        return {"timeframe": self.timeframe}

    @property
    def query_key(self) -> QueryKey:
        return make_query_key(OVERVIEW_QUERY, self.query_params())

    # --- Server data ---

    async def load(self, force: bool = False) -> Optional[dict]:
        """Fetch the overview for the current window (cached unless stale)."""
        params = self.query_params()
        try:
            return await self.cache.fetch(
                self.query_key, lambda: self.api.get_overview(params), force=force,
            )
        except Exception as e:
            self.notifier.error(f"Error loading dashboard: {e}")
            return None

    @property
    def data(self) -> Optional[dict]:
        return self.cache.get(self.query_key)

    @property
    def server_config(self) -> list[WidgetConfig]:
        """Effective layout of the cached server payload (identity-stable)."""
        return self._reconciler(self.data)

    # --- Working copy ---

    @property
    def config(self) -> list[WidgetConfig]:
        """Local layout; replaced whenever a new server layout arrives."""
        server = self.server_config
        if server is not self._synced_from:
            self._local_config = list(server)
            self._synced_from = server
        return self._local_config

    def _set_local(self, layout: list[WidgetConfig]) -> None:
        self._synced_from = self.server_config
        self._local_config = layout

    def toggle_widget(self, key: str, enabled: Optional[bool] = None) -> None:
        self._set_local([
            replace(c, enabled=(not c.enabled if enabled is None else enabled)) if c.key == key else c
            for c in self.config
        ])

    def resize_widget(self, key: str, size: WidgetSize) -> None:
        size = WidgetSize(size)
        self._set_local([replace(c, size=size) if c.key == key else c for c in self.config])

    def set_widget_settings(self, key: str, settings: Optional[dict]) -> None:
        self._set_local([replace(c, settings=settings or None) if c.key == key else c for c in self.config])

    def render_plan(self) -> list[RenderedWidget]:
        """Enabled widgets in layout order, pinned ones first."""
        payload = self.data or {}
        pinned: list[RenderedWidget] = []
        grid: list[RenderedWidget] = []
        for config in self.config:
            if not config.enabled:
                continue
            definition = self.registry.get(config.key)
            if definition is None:
                logger.warning("unknown_widget_skipped", key=config.key)
                continue
            size = config.size or definition.default_size
            widget = RenderedWidget(
                key=config.key,
                title=definition.title,
                size=size,
                span=GRID_SPANS[size],
                pinned=definition.pinned,
                data=payload.get(definition.data_field) if definition.data_field else None,
                settings=config.settings,
            )
            (pinned if definition.pinned else grid).append(widget)
        return pinned + grid

    # --- Customization panel ---

    def open_sheet(self) -> None:
        self.sheet_open = True
        self._config_on_open = list(self.config)

    async def close_sheet(self) -> bool:
        """Close the panel, saving the working copy if it changed since opening."""
        self.sheet_open = False
        current = self.config
        if current == self._config_on_open:
            return False
        return await self._mutate(layout_to_wire(current))

    # --- Mutations ---

    async def drag_end(self, active_key: str, over_key: Optional[str]) -> bool:
        """Reorder on drop; saves unless the new order matches the server's."""
        current = self.config
        moved = move_widget(current, active_key, over_key)
        if moved is current:
            return False
        self._set_local(moved)
        if moved == self.server_config:
            return False
        return await self._mutate(layout_to_wire(moved))

    async def save(self) -> bool:
        return await self._mutate(layout_to_wire(self.config))

    async def reset(self) -> bool:
        return await self._mutate(None)

    async def _mutate(self, preferences: Optional[list[dict]]) -> bool:
        key = self.query_key
        await self.cache.cancel(key)
        snapshot = self.cache.snapshot(key)

        optimistic = expand_preferences(preferences, self.registry, self.default_layout)
        self.cache.set(
            key,
            lambda old: None if old is None else {**old, "dashboardPreferences": optimistic},
        )
        if preferences is None:
            self._set_local(self._reconciler.reset())

        try:
            await self.api.update_dashboard_preferences(preferences)
        except Exception as e:
            self.cache.rollback(snapshot)
            previous = (snapshot.data or {}).get("dashboardPreferences")
            self._set_local(reconcile_layout(previous, self.registry, self.default_layout))
            logger.warning("dashboard_layout_rolled_back", error=str(e), reset=preferences is None)
            self.notifier.error(f"Error saving layout: {e}")
            return False
        else:
            self.notifier.success("Dashboard reset successfully." if preferences is None else "Layout saved.")
            self.sheet_open = False
            return True
        finally:
            self.cache.invalidate(OVERVIEW_QUERY)
