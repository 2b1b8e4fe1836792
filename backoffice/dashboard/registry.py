"""Widget registry: the set of dashboard widgets an admin layout may contain.

Each widget is identified by a stable string key and carries a default size
and the overview payload field it renders. Registry iteration follows
insertion order; reconciliation relies on it when appending widgets that a
saved layout does not mention yet.
"""

from collections import OrderedDict
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class WidgetSize(str, Enum):
    NARROW = "Narrow"
    WIDE = "Wide"
    FULL = "Full"


# Grid columns spanned on the widest breakpoint (4-column grid)
GRID_SPANS = {
    WidgetSize.NARROW: 1,
    WidgetSize.WIDE: 2,
    WidgetSize.FULL: 4,
}


@dataclass(frozen=True)
class WidgetDefinition:
    key: str
    title: str
    default_size: WidgetSize
    # Overview payload field handed to the widget, None for static widgets
    data_field: Optional[str] = None
    # Rendered above the grid instead of inside the sortable area
    pinned: bool = False


class WidgetRegistry:
    """Ordered key → WidgetDefinition mapping."""

    def __init__(self, definitions: list[WidgetDefinition] | None = None):
        self._definitions: "OrderedDict[str, WidgetDefinition]" = OrderedDict()
        for definition in definitions or []:
            self.register(definition)

    def register(self, definition: WidgetDefinition) -> None:
        if definition.key in self._definitions:
            raise ValueError(f"Widget already registered: {definition.key}")
        self._definitions[definition.key] = definition

    def get(self, key: str) -> Optional[WidgetDefinition]:
        return self._definitions.get(key)

    def keys(self) -> list[str]:
        return list(self._definitions)

    def __contains__(self, key: object) -> bool:
        return key in self._definitions

    def __iter__(self) -> Iterator[WidgetDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)


ADMIN_KPI_GRID = "adminKpiGrid"
FINANCIAL_TREND_CHART = "financialTrendChart"
ACTION_CENTER_QUEUE = "actionCenterQueue"
SYSTEM_HEALTH_PANEL = "systemHealthPanel"

ADMIN_WIDGET_REGISTRY = WidgetRegistry([
    WidgetDefinition(ADMIN_KPI_GRID, "Key Metrics", WidgetSize.FULL, data_field="kpis", pinned=True),
    WidgetDefinition(FINANCIAL_TREND_CHART, "Financial Trend", WidgetSize.WIDE, data_field="financialTrend"),
    WidgetDefinition(ACTION_CENTER_QUEUE, "Action Center", WidgetSize.NARROW, data_field="actionCenterItems"),
    WidgetDefinition(SYSTEM_HEALTH_PANEL, "System Health", WidgetSize.NARROW, data_field="systemHealth"),
])

# Layout used when an admin has never saved preferences, and after a reset
DEFAULT_ADMIN_LAYOUT: list[dict] = [
    {"key": ADMIN_KPI_GRID, "enabled": True},
    {"key": FINANCIAL_TREND_CHART, "enabled": True},
    {"key": ACTION_CENTER_QUEUE, "enabled": True},
    {"key": SYSTEM_HEALTH_PANEL, "enabled": True},
]

# KPI tiles shown by the KPI grid unless the admin picked a subset
DEFAULT_ADMIN_KPIS: list[str] = [
    "grossMerchandiseVolume",
    "netPlatformRevenue",
    "newUserSignups",
    "pendingCoachApplications",
    "openPaymentDisputes",
    "totalCoachPayouts",
]
