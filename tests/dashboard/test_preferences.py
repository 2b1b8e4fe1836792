"""Tests for splitting and merging the KPI grid's tile selection."""

import pytest

from backoffice.dashboard.preferences import (
    PreferenceFormatError,
    is_reset,
    merge_kpi_settings,
    split_kpi_settings,
    validate_preferences,
)


def test_split_moves_kpis_out_of_layout():
    prefs = [
        {"key": "adminKpiGrid", "enabled": True, "settings": {"kpis": ["gmv", "signups"]}},
        {"key": "systemHealthPanel", "enabled": False},
    ]
    stored, kpis = split_kpi_settings(prefs)
    assert kpis == ["gmv", "signups"]
    assert stored[0] == {"key": "adminKpiGrid", "enabled": True}
    assert stored[1] == prefs[1]
    # Input untouched
    assert prefs[0]["settings"] == {"kpis": ["gmv", "signups"]}


def test_split_keeps_other_settings():
    stored, kpis = split_kpi_settings([
        {"key": "adminKpiGrid", "settings": {"kpis": ["gmv"], "compact": True}},
    ])
    assert kpis == ["gmv"]
    assert stored[0]["settings"] == {"compact": True}


def test_split_without_kpis_returns_none():
    _, kpis = split_kpi_settings([{"key": "adminKpiGrid", "enabled": True}])
    assert kpis is None


def test_merge_reattaches_kpis():
    merged = merge_kpi_settings([{"key": "adminKpiGrid", "enabled": True}], ["gmv"])
    assert merged == [{"key": "adminKpiGrid", "enabled": True, "settings": {"kpis": ["gmv"]}}]


def test_merge_without_preferences_is_passthrough():
    assert merge_kpi_settings(None, ["gmv"]) is None


@pytest.mark.parametrize("value,expected", [(None, True), ([], True), ([{"key": "a"}], False), ("x", False)])
def test_is_reset(value, expected):
    assert is_reset(value) is expected


@pytest.mark.parametrize("value", ["layout", {"key": "a"}, [{"enabled": True}], [["a"]]])
def test_validate_rejects_malformed(value):
    with pytest.raises(PreferenceFormatError):
        validate_preferences(value)
