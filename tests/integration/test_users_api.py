"""Integration tests: admin user listing, detail and country lookup."""

from datetime import datetime

import pytest
import pytest_asyncio
from sqlalchemy import select

from backoffice.models.user import User
from backoffice.utils.security import hash_password

pytestmark = pytest.mark.asyncio(loop_scope="session")

USERS = "/api/v1/admin/users"


@pytest.fixture(scope="module")
def listing_users():
    return [
        dict(email="zz-amelie@example.com", first_name="Amelie", role="client", country_code="FR",
             trust_score=80, created_at=datetime(2025, 3, 1)),
        dict(email="zz-kenji@example.com", first_name="Kenji", role="coach", coach_status="active",
             country_code="JP", trust_score=40, created_at=datetime(2025, 4, 1)),
        dict(email="zz-lena@example.com", first_name="Lena", role="client", country_code="",
             trust_score=95, created_at=datetime(2025, 5, 1)),
    ]


@pytest_asyncio.fixture(loop_scope="session")
async def seeded_users(session_factory_shared, listing_users):
    async with session_factory_shared() as session:
        existing = await session.scalar(select(User.id).where(User.email == listing_users[0]["email"]))
        if existing is None:
            session.add_all([User(password_hash=hash_password("pw"), **data) for data in listing_users])
            await session.commit()
    return listing_users


async def test_list_requires_admin(client, coach_headers):
    resp = await client.get(USERS, headers=coach_headers)
    assert resp.status_code == 403


async def test_list_shape_and_search(client, admin_headers, seeded_users):
    resp = await client.get(USERS, params={"search": "zz-", "sortField": "email", "sortOrder": "asc"},
                            headers=admin_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 3
    assert body["page"] == 1
    assert body["limit"] == 20
    assert body["totalPages"] == 1
    assert [u["email"] for u in body["users"]] == [u["email"] for u in seeded_users]


async def test_list_filters_by_role_and_trust(client, admin_headers, seeded_users):
    resp = await client.get(USERS, params={"search": "zz-", "role": "client", "minTrust": 90},
                            headers=admin_headers)
    emails = [u["email"] for u in resp.json()["users"]]
    assert emails == ["zz-lena@example.com"]


async def test_list_paginates(client, admin_headers, seeded_users):
    resp = await client.get(
        USERS,
        params={"search": "zz-", "limit": 2, "page": 2, "sortField": "createdAt", "sortOrder": "asc"},
        headers=admin_headers,
    )
    body = resp.json()
    assert body["totalPages"] == 2
    assert [u["email"] for u in body["users"]] == ["zz-lena@example.com"]


async def test_limit_is_clamped(client, admin_headers):
    resp = await client.get(USERS, params={"limit": 5000}, headers=admin_headers)
    assert resp.json()["limit"] == 200


async def test_invalid_sort_order_is_422(client, admin_headers):
    resp = await client.get(USERS, params={"sortOrder": "sideways"}, headers=admin_headers)
    assert resp.status_code == 422
    assert resp.json()["errors"]


async def test_unique_countries(client, admin_headers, seeded_users):
    resp = await client.get(f"{USERS}/unique-countries", headers=admin_headers)
    assert resp.status_code == 200
    countries = resp.json()
    assert {"DE", "FR", "JP"} <= set(countries)
    assert "" not in countries
    assert countries == sorted(countries)


async def test_user_detail(client, admin_headers, seeded_users):
    listing = await client.get(USERS, params={"search": "zz-kenji"}, headers=admin_headers)
    user_id = listing.json()["users"][0]["id"]

    resp = await client.get(f"{USERS}/{user_id}", headers=admin_headers)
    assert resp.status_code == 200
    detail = resp.json()
    assert detail["email"] == "zz-kenji@example.com"
    assert detail["coachStatus"] == "active"
    assert "profileCompleteness" in detail


async def test_user_detail_not_found(client, admin_headers):
    resp = await client.get(f"{USERS}/999999", headers=admin_headers)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "User not found"
