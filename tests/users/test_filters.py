"""Tests for UserFilters: subsets, change detection, active count, query params."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from backoffice.users.filters import (
    FILTERING_FIELDS,
    PAGING_FIELDS,
    UserFilters,
    active_filter_count,
    filters_changed,
    to_query_params,
)


def test_subsets_are_disjoint_and_complete():
    assert not FILTERING_FIELDS & PAGING_FIELDS
    assert FILTERING_FIELDS | PAGING_FIELDS == set(UserFilters.model_fields)


def test_defaults():
    f = UserFilters()
    assert (f.page, f.limit, f.sort_field, f.sort_order) == (1, 20, "createdAt", "desc")
    assert (f.min_trust, f.max_trust) == (0, 100)
    assert f.min_sessions is None


def test_accepts_camel_case_input():
    f = UserFilters.model_validate({"countryCode": "CH", "minTrust": "30", "sortOrder": "asc"})
    assert (f.country_code, f.min_trust, f.sort_order) == ("CH", 30, "asc")


def test_update_validates():
    with pytest.raises(ValidationError):
        UserFilters().update(max_trust=150)


class TestFiltersChanged:
    def test_no_previous_means_no_change(self):
        assert filters_changed(None, UserFilters(role="coach")) is False

    @pytest.mark.parametrize("changes", [
        {"page": 2}, {"limit": 50}, {"sort_field": "email"}, {"sort_order": "asc"},
    ])
    def test_paging_changes_ignored(self, changes):
        prev = UserFilters()
        assert filters_changed(prev, prev.update(**changes)) is False

    @pytest.mark.parametrize("changes", [
        {"role": "coach"}, {"search": "x"}, {"min_trust": 5},
        {"start_date": datetime(2026, 1, 1)}, {"has_dispute": "true"},
    ])
    def test_filtering_changes_detected(self, changes):
        prev = UserFilters()
        assert filters_changed(prev, prev.update(**changes)) is True


class TestActiveFilterCount:
    def test_defaults_count_zero(self):
        assert active_filter_count(UserFilters()) == 0

    def test_paired_inputs_count_once(self):
        f = UserFilters(
            min_trust=10, max_trust=90,
            start_date=datetime(2026, 1, 1), end_date=datetime(2026, 2, 1),
            min_sessions=1, max_sessions=5,
        )
        assert active_filter_count(f) == 3

    def test_half_set_ranges_count(self):
        assert active_filter_count(UserFilters(max_profile_completeness=50)) == 1
        assert active_filter_count(UserFilters(last_login_end_date=datetime(2026, 1, 1))) == 1

    def test_paging_not_counted(self):
        assert active_filter_count(UserFilters(page=9, sort_order="asc")) == 0


def test_query_params_omit_empty_and_format_dates():
    params = to_query_params(UserFilters(role="coach", start_date=datetime(2026, 1, 2, 3, 4)))
    assert params["role"] == "coach"
    assert params["startDate"] == "2026-01-02T03:04:00"
    assert "search" not in params
    assert "endDate" not in params
    assert params["minTrust"] == 0
    assert params["page"] == 1
