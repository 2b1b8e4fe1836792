"""Tests for the user listing query against an in-memory database."""

from datetime import datetime

import pytest

from backoffice.models.user import User
from backoffice.users.filters import UserFilters
from backoffice.users.query import build_count_query, build_user_query


def _user(email, **kwargs):
    kwargs.setdefault("password_hash", "x")
    return User(email=email, **kwargs)


@pytest.fixture
def users():
    return [
        _user("anna@example.com", first_name="Anna", last_name="Meier", role="client",
              country_code="CH", trust_score=90, created_at=datetime(2026, 1, 10)),
        _user("ben@example.com", first_name="Ben", last_name="Okafor", role="coach",
              coach_status="pending", country_code="DE", trust_score=40,
              created_at=datetime(2026, 2, 10)),
        _user("carla@example.com", first_name="Carla", last_name="Anders", role="coach",
              coach_status="active", stripe_account_status="active", trust_score=75,
              session_count=12, created_at=datetime(2026, 3, 10)),
        _user("dora_x@example.com", first_name="Dora", last_name="Stein", role="client",
              is_active=False, has_active_dispute=True, created_at=datetime(2026, 4, 10)),
    ]


async def _emails(session, filters):
    rows = (await session.execute(build_user_query(filters))).scalars().all()
    return [u.email for u in rows]


@pytest.mark.asyncio
async def test_search_matches_names_and_email_case_insensitively(db_session, users):
    db_session.add_all(users)
    await db_session.commit()

    assert await _emails(db_session, UserFilters(search="ANDERS")) == ["carla@example.com"]
    assert sorted(await _emails(db_session, UserFilters(search="an"))) == [
        "anna@example.com", "carla@example.com",
    ]


@pytest.mark.asyncio
async def test_like_wildcards_are_literal(db_session, users):
    db_session.add_all(users)
    await db_session.commit()
    assert await _emails(db_session, UserFilters(search="_x")) == ["dora_x@example.com"]
    assert await _emails(db_session, UserFilters(search="%")) == []


@pytest.mark.asyncio
async def test_status_filters(db_session, users):
    db_session.add_all(users)
    await db_session.commit()

    assert await _emails(db_session, UserFilters(status="suspended")) == ["dora_x@example.com"]
    assert await _emails(db_session, UserFilters(status="pending")) == ["ben@example.com"]
    # Pending coaches are neither active nor suspended
    assert sorted(await _emails(db_session, UserFilters(status="active"))) == [
        "anna@example.com", "carla@example.com",
    ]


@pytest.mark.asyncio
async def test_stripe_status_applies_to_coaches(db_session, users):
    db_session.add_all(users)
    await db_session.commit()
    assert await _emails(db_session, UserFilters(stripe_status="connected")) == ["carla@example.com"]
    assert await _emails(db_session, UserFilters(stripe_status="not_connected")) == ["ben@example.com"]


@pytest.mark.asyncio
async def test_ranges_and_counts(db_session, users):
    db_session.add_all(users)
    await db_session.commit()
    assert sorted(await _emails(db_session, UserFilters(min_trust=50, max_trust=80))) == ["carla@example.com"]
    assert await _emails(db_session, UserFilters(min_sessions=10)) == ["carla@example.com"]
    assert await _emails(db_session, UserFilters(has_dispute="true")) == ["dora_x@example.com"]


@pytest.mark.asyncio
async def test_signup_range_needs_both_ends(db_session, users):
    db_session.add_all(users)
    await db_session.commit()
    both = UserFilters(start_date=datetime(2026, 2, 1), end_date=datetime(2026, 3, 31))
    assert sorted(await _emails(db_session, both)) == ["ben@example.com", "carla@example.com"]
    assert len(await _emails(db_session, UserFilters(start_date=datetime(2026, 2, 1)))) == 4


@pytest.mark.asyncio
async def test_sorting_paging_and_count(db_session, users):
    db_session.add_all(users)
    await db_session.commit()

    page = UserFilters(sort_field="email", sort_order="asc", limit=2, page=2)
    assert await _emails(db_session, page) == ["carla@example.com", "dora_x@example.com"]
    assert await db_session.scalar(build_count_query(page)) == 4

    newest_first = await _emails(db_session, UserFilters())
    assert newest_first[0] == "dora_x@example.com"

    unknown = await _emails(db_session, UserFilters(sort_field="password_hash"))
    assert unknown == newest_first
