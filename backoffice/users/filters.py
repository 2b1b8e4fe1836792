"""User-list filter state shared by the listing endpoint and the admin console.

The filter record splits into two disjoint subsets:

* paging/sort fields (``page``, ``limit``, ``sortField``, ``sortOrder``)
* filtering fields (everything else)

Only a change to the filtering subset alters the result set a selected user
was picked from, so only that subset invalidates a selection.
"""

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PAGING_FIELDS = frozenset({"page", "limit", "sort_field", "sort_order"})

# Select inputs offer an "all" option that means "no constraint"
ALL_OPTION = "all"


class UserFilters(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    search: str = ""
    role: str = ""
    status: str = ""
    country_code: str = ""
    preferred_language: str = ""
    is_email_verified: Literal["", "true", "false"] = ""
    has_dispute: Literal["", "true", "false"] = ""
    stripe_status: Literal["", "connected", "not_connected"] = ""

    min_trust: int = Field(0, ge=0, le=100)
    max_trust: int = Field(100, ge=0, le=100)
    min_profile_completeness: int = Field(0, ge=0, le=100)
    max_profile_completeness: int = Field(100, ge=0, le=100)
    min_blocked_by_count: Optional[int] = Field(None, ge=0)
    min_sessions: Optional[int] = Field(None, ge=0)
    max_sessions: Optional[int] = Field(None, ge=0)
    min_enrollments: Optional[int] = Field(None, ge=0)
    max_enrollments: Optional[int] = Field(None, ge=0)

    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    last_login_start_date: Optional[datetime] = None
    last_login_end_date: Optional[datetime] = None

    page: int = Field(1, ge=1)
    limit: int = Field(20, ge=1)
    sort_field: str = "createdAt"
    sort_order: Literal["asc", "desc"] = "desc"

    def update(self, **changes: Any) -> "UserFilters":
        """Return a validated copy with ``changes`` applied (snake_case names)."""
        data = self.model_dump()
        data.update(changes)
        return UserFilters.model_validate(data)


FILTERING_FIELDS = frozenset(UserFilters.model_fields) - PAGING_FIELDS


def filtering_subset(filters: UserFilters) -> dict[str, Any]:
    return {name: getattr(filters, name) for name in sorted(FILTERING_FIELDS)}


def paging_subset(filters: UserFilters) -> dict[str, Any]:
    return {name: getattr(filters, name) for name in sorted(PAGING_FIELDS)}


def filters_changed(previous: Optional[UserFilters], current: UserFilters) -> bool:
    """True when the filtering fields differ; paging/sort changes never count."""
    if previous is None:
        return False
    return filtering_subset(previous) != filtering_subset(current)


def active_filter_count(filters: UserFilters) -> int:
    """Number of filter groups narrowing the result set.

    Paired inputs (date ranges, sliders, min/max boxes) count once.
    """
    groups = [
        filters.search,
        filters.role,
        filters.status,
        filters.is_email_verified,
        filters.country_code,
        filters.start_date or filters.end_date,
        filters.min_trust > 0 or filters.max_trust < 100,
        filters.stripe_status,
        filters.preferred_language,
        filters.last_login_start_date or filters.last_login_end_date,
        filters.min_profile_completeness > 0 or filters.max_profile_completeness < 100,
        filters.min_sessions or filters.max_sessions,
        filters.min_enrollments or filters.max_enrollments,
        filters.has_dispute,
    ]
    return sum(1 for group in groups if group)


def to_query_params(filters: UserFilters) -> dict[str, Any]:
    """Flatten to the listing endpoint's query string: camelCase, ISO dates,
    empty values omitted."""
    params: dict[str, Any] = {}
    for name, value in filters.model_dump(by_alias=True).items():
        if value is None or value == "":
            continue
        if isinstance(value, datetime):
            value = value.isoformat()
        params[name] = value
    return params
