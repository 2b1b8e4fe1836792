"""Admin dashboard widget registry and layout reconciliation."""

from .layout import (
    LayoutReconciler,
    WidgetConfig,
    expand_preferences,
    layout_to_wire,
    move_widget,
    reconcile_layout,
    reset_layout,
)
from .registry import (
    ADMIN_WIDGET_REGISTRY,
    DEFAULT_ADMIN_LAYOUT,
    WidgetDefinition,
    WidgetRegistry,
    WidgetSize,
)

__all__ = [
    "ADMIN_WIDGET_REGISTRY",
    "DEFAULT_ADMIN_LAYOUT",
    "LayoutReconciler",
    "WidgetConfig",
    "WidgetDefinition",
    "WidgetRegistry",
    "WidgetSize",
    "expand_preferences",
    "layout_to_wire",
    "move_widget",
    "reconcile_layout",
    "reset_layout",
]
