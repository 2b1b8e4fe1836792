"""Tests for layout reconciliation, reset expansion and reordering."""

import pytest

from backoffice.dashboard.layout import (
    LayoutReconciler,
    WidgetConfig,
    expand_preferences,
    layout_to_wire,
    move_widget,
    reconcile_layout,
    reset_layout,
)
from backoffice.dashboard.registry import (
    ADMIN_WIDGET_REGISTRY,
    DEFAULT_ADMIN_LAYOUT,
    WidgetDefinition,
    WidgetRegistry,
    WidgetSize,
)


def _registry(*specs):
    return WidgetRegistry([WidgetDefinition(key, key.title(), size) for key, size in specs])


AB_REGISTRY = _registry(("A", WidgetSize.WIDE), ("B", WidgetSize.NARROW))


class TestReconcileLayout:
    def test_missing_keys_appended_with_default_size(self):
        result = reconcile_layout(
            [{"key": "A", "enabled": True, "size": "Full"}], AB_REGISTRY, default_layout=[],
        )
        assert result == [
            WidgetConfig("A", True, WidgetSize.FULL),
            WidgetConfig("B", True, WidgetSize.NARROW),
        ]

    def test_every_registry_key_appears_exactly_once(self):
        prefs = [
            {"key": "systemHealthPanel", "enabled": False},
            {"key": "systemHealthPanel", "enabled": True},
            {"key": "adminKpiGrid", "enabled": True},
        ]
        keys = [c.key for c in reconcile_layout(prefs)]
        assert sorted(keys) == sorted(ADMIN_WIDGET_REGISTRY.keys())
        assert len(keys) == len(set(keys))

    def test_duplicate_key_keeps_first_entry(self):
        prefs = [{"key": "B", "enabled": False}, {"key": "B", "enabled": True}]
        result = reconcile_layout(prefs, AB_REGISTRY, default_layout=[])
        assert result[0] == WidgetConfig("B", False, WidgetSize.NARROW)

    def test_unknown_keys_dropped(self):
        prefs = [{"key": "legacyWidget", "enabled": True}, {"key": "A", "enabled": True}]
        result = reconcile_layout(prefs, AB_REGISTRY, default_layout=[])
        assert [c.key for c in result] == ["A", "B"]

    def test_missing_keys_follow_registry_order(self):
        registry = _registry(("A", WidgetSize.WIDE), ("B", WidgetSize.NARROW), ("C", WidgetSize.FULL))
        result = reconcile_layout([{"key": "B", "enabled": True}], registry, default_layout=[])
        assert [c.key for c in result] == ["B", "A", "C"]

    @pytest.mark.parametrize("prefs", [None, []])
    def test_absent_preferences_use_default_layout(self, prefs):
        result = reconcile_layout(prefs)
        assert [c.key for c in result] == [e["key"] for e in DEFAULT_ADMIN_LAYOUT]
        assert all(c.size is not None for c in result)

    def test_invalid_size_falls_back_to_default(self):
        result = reconcile_layout([{"key": "A", "size": "Huge"}], AB_REGISTRY, default_layout=[])
        assert result[0].size == WidgetSize.WIDE

    def test_settings_preserved(self):
        prefs = [{"key": "adminKpiGrid", "enabled": True, "settings": {"kpis": ["newUserSignups"]}}]
        result = reconcile_layout(prefs)
        assert result[0].settings == {"kpis": ["newUserSignups"]}


class TestResetLayout:
    def test_reset_uses_registry_default_sizes(self):
        result = reset_layout()
        for config in result:
            assert config.size == ADMIN_WIDGET_REGISTRY.get(config.key).default_size
            assert config.settings is None

    def test_reset_is_idempotent(self):
        first = reset_layout()
        assert reconcile_layout(layout_to_wire(first)) == first

    def test_expand_none_means_reset(self):
        assert expand_preferences(None) == layout_to_wire(reset_layout())

    def test_expand_passes_through_list(self):
        prefs = [{"key": "A", "enabled": False, "size": "Wide"}]
        assert expand_preferences(prefs, AB_REGISTRY, []) == prefs


class TestMoveWidget:
    def setup_method(self):
        self.layout = [WidgetConfig("A"), WidgetConfig("B"), WidgetConfig("C")]

    def test_move_forward(self):
        assert [c.key for c in move_widget(self.layout, "A", "C")] == ["B", "C", "A"]

    def test_move_backward(self):
        assert [c.key for c in move_widget(self.layout, "C", "A")] == ["C", "A", "B"]

    @pytest.mark.parametrize("over", [None, "A", "missing"])
    def test_noop_returns_same_list(self, over):
        assert move_widget(self.layout, "A", over) is self.layout

    def test_input_not_mutated(self):
        move_widget(self.layout, "A", "B")
        assert [c.key for c in self.layout] == ["A", "B", "C"]


class TestLayoutReconciler:
    def test_memoized_on_payload_identity(self):
        reconciler = LayoutReconciler()
        payload = {"dashboardPreferences": [{"key": "adminKpiGrid", "enabled": True}]}
        assert reconciler(payload) is reconciler(payload)

    def test_new_payload_recomputes(self):
        reconciler = LayoutReconciler()
        payload = {"dashboardPreferences": None}
        first = reconciler(payload)
        second = reconciler(dict(payload))
        assert first == second
        assert first is not second

    def test_none_payload_yields_defaults(self):
        assert [c.key for c in LayoutReconciler()(None)] == ADMIN_WIDGET_REGISTRY.keys()
