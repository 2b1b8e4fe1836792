"""Dashboard layout reconciliation.

The effective layout is never stored: it is derived from the saved
preferences and the widget registry every time either changes.

    effective = saved (or default) + registry widgets missing from it,
                sizes defaulted from the registry,
                widgets unknown to the registry dropped.
"""

from dataclasses import dataclass, replace
from typing import Any, Iterable, Optional, Union

from .registry import (
    ADMIN_WIDGET_REGISTRY,
    DEFAULT_ADMIN_LAYOUT,
    WidgetRegistry,
    WidgetSize,
)

_UNSET = object()


@dataclass(frozen=True)
class WidgetConfig:
    key: str
    enabled: bool = True
    size: Optional[WidgetSize] = None
    settings: Optional[dict] = None

    @classmethod
    def from_dict(cls, data: dict) -> "WidgetConfig":
        """Build from the wire shape; an unrecognised size counts as unset."""
        raw_size = data.get("size")
        try:
            size = WidgetSize(raw_size) if raw_size else None
        except ValueError:
            size = None
        return cls(
            key=str(data["key"]),
            enabled=bool(data.get("enabled", True)),
            size=size,
            settings=data.get("settings") or None,
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"key": self.key, "enabled": self.enabled}
        if self.size is not None:
            out["size"] = self.size.value
        if self.settings:
            out["settings"] = self.settings
        return out


LayoutInput = Iterable[Union[WidgetConfig, dict]]


def _coerce(entry: Union[WidgetConfig, dict]) -> WidgetConfig:
    return entry if isinstance(entry, WidgetConfig) else WidgetConfig.from_dict(entry)


def reconcile_layout(
    preferences: Optional[LayoutInput],
    registry: WidgetRegistry = ADMIN_WIDGET_REGISTRY,
    default_layout: LayoutInput = DEFAULT_ADMIN_LAYOUT,
) -> list[WidgetConfig]:
    """Derive the effective layout from saved preferences and the registry.

    Missing registry widgets are appended enabled, in registry order.
    A key listed twice in the preferences keeps its first position.
    """
    saved = [_coerce(e) for e in (preferences if preferences else default_layout)]

    present = {c.key for c in saved}
    missing = [WidgetConfig(key=k) for k in registry.keys() if k not in present]

    effective: list[WidgetConfig] = []
    seen: set[str] = set()
    for config in saved + missing:
        definition = registry.get(config.key)
        if definition is None:
            continue
        if config.key in seen:
            continue
        seen.add(config.key)
        if config.size is None:
            config = replace(config, size=definition.default_size)
        effective.append(config)
    return effective


def reset_layout(
    registry: WidgetRegistry = ADMIN_WIDGET_REGISTRY,
    default_layout: LayoutInput = DEFAULT_ADMIN_LAYOUT,
) -> list[WidgetConfig]:
    """The layout a reset produces: default enablement, registry default sizes."""
    result = []
    for entry in default_layout:
        config = _coerce(entry)
        definition = registry.get(config.key)
        if definition is None:
            continue
        result.append(replace(config, size=definition.default_size, settings=None))
    return result


def expand_preferences(
    preferences: Optional[list],
    registry: WidgetRegistry = ADMIN_WIDGET_REGISTRY,
    default_layout: LayoutInput = DEFAULT_ADMIN_LAYOUT,
) -> list[dict]:
    """Expand a preference payload into wire dicts; None (reset) means defaults."""
    if preferences is None:
        return layout_to_wire(reset_layout(registry, default_layout))
    return [_coerce(e).to_dict() for e in preferences]


def layout_to_wire(layout: Iterable[WidgetConfig]) -> list[dict]:
    return [c.to_dict() for c in layout]


def move_widget(layout: list[WidgetConfig], active_key: str, over_key: Optional[str]) -> list[WidgetConfig]:
    """Move ``active_key`` to the position of ``over_key``.

    Returns the input list itself when the drop is a no-op (no target,
    dropped onto itself, or an unknown key).
    """
    if over_key is None or active_key == over_key:
        return layout
    keys = [c.key for c in layout]
    if active_key not in keys or over_key not in keys:
        return layout
    old_index = keys.index(active_key)
    new_index = keys.index(over_key)
    moved = list(layout)
    moved.insert(new_index, moved.pop(old_index))
    return moved


class LayoutReconciler:
    """Memoizes reconcile_layout on the identity of the overview payload.

    Repeated reads for the same payload object return the same list, so
    equality checks made by callers (drag-and-drop, dirty tracking) stay
    stable until new server data arrives.
    """

    def __init__(
        self,
        registry: WidgetRegistry = ADMIN_WIDGET_REGISTRY,
        default_layout: LayoutInput = DEFAULT_ADMIN_LAYOUT,
    ):
        self.registry = registry
        self.default_layout = list(default_layout)
        self._source: Any = _UNSET
        self._result: list[WidgetConfig] = []

    def __call__(self, overview: Optional[dict]) -> list[WidgetConfig]:
        if overview is self._source:
            return self._result
        preferences = (overview or {}).get("dashboardPreferences")
        self._result = reconcile_layout(preferences, self.registry, self.default_layout)
        self._source = overview
        return self._result

    def reset(self) -> list[WidgetConfig]:
        return reset_layout(self.registry, self.default_layout)
