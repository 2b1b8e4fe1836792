"""Tests for overview time-window resolution."""

from datetime import datetime, timedelta, timezone

from backoffice.dashboard.aggregation import build_action_center, resolve_window

NOW = datetime(2026, 3, 15, 14, 30, 0)
MIDNIGHT = datetime(2026, 3, 15)


def test_today_spans_whole_day():
    start, end = resolve_window("today", now=NOW)
    assert start == MIDNIGHT
    assert end == datetime(2026, 3, 15, 23, 59, 59, 999000)


def test_seven_days_starts_six_days_back():
    start, end = resolve_window("7d", now=NOW)
    assert start == MIDNIGHT - timedelta(days=6)
    assert end == NOW


def test_ninety_days_starts_eighty_nine_days_back():
    start, _ = resolve_window("90d", now=NOW)
    assert start == MIDNIGHT - timedelta(days=89)


def test_unknown_timeframe_defaults_to_thirty_days():
    start, _ = resolve_window("bogus", now=NOW)
    assert start == MIDNIGHT - timedelta(days=29)


def test_all_means_no_window():
    assert resolve_window("all", now=NOW) == (None, None)


def test_explicit_range_wins_and_is_normalized_to_utc():
    start = datetime(2026, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=1)))
    end = datetime(2026, 1, 31, 23, 0, tzinfo=timezone.utc)
    assert resolve_window("all", start, end) == (
        datetime(2026, 1, 1, 0, 0),
        datetime(2026, 1, 31, 23, 0),
    )


def test_half_open_range_falls_back_to_timeframe():
    start, _ = resolve_window("7d", start_date=datetime(2020, 1, 1), now=NOW)
    assert start == MIDNIGHT - timedelta(days=6)


def test_action_center_titles():
    items = build_action_center({"pendingCoachApplications": 3, "openPaymentDisputes": 0})
    assert [i["title"] for i in items] == ["Pending Applications: 3", "Open Disputes: 0"]
