"""Tests for the widget registry."""

import pytest

from backoffice.dashboard.registry import (
    ADMIN_KPI_GRID,
    ADMIN_WIDGET_REGISTRY,
    GRID_SPANS,
    WidgetDefinition,
    WidgetRegistry,
    WidgetSize,
)


def test_registry_preserves_insertion_order():
    assert ADMIN_WIDGET_REGISTRY.keys() == [
        "adminKpiGrid", "financialTrendChart", "actionCenterQueue", "systemHealthPanel",
    ]


def test_duplicate_registration_rejected():
    registry = WidgetRegistry([WidgetDefinition("A", "A", WidgetSize.NARROW)])
    with pytest.raises(ValueError):
        registry.register(WidgetDefinition("A", "Again", WidgetSize.WIDE))


def test_unknown_key_lookup_returns_none():
    assert ADMIN_WIDGET_REGISTRY.get("nope") is None
    assert "nope" not in ADMIN_WIDGET_REGISTRY


def test_kpi_grid_is_pinned_full_width():
    definition = ADMIN_WIDGET_REGISTRY.get(ADMIN_KPI_GRID)
    assert definition.pinned
    assert GRID_SPANS[definition.default_size] == 4


def test_size_values_match_wire_format():
    assert [s.value for s in WidgetSize] == ["Narrow", "Wide", "Full"]
