"""Integration tests: translation coverage overview and per-language edits."""

import pytest
import pytest_asyncio
from sqlalchemy import select

from backoffice.models.skill import Skill

pytestmark = pytest.mark.asyncio(loop_scope="session")

OVERVIEW = "/api/v1/admin/translation-overview"


@pytest_asyncio.fixture(loop_scope="session")
async def skill_ids(session_factory_shared):
    names = ["Negotiation", "Public Speaking", "Time Management"]
    async with session_factory_shared() as session:
        existing = (await session.execute(select(Skill).where(Skill.name.in_(names)))).scalars().all()
        if not existing:
            existing = [Skill(name=name, category="Business") for name in names]
            session.add_all(existing)
            await session.commit()
        return [skill.id for skill in existing]


async def test_overview_requires_admin(client, coach_headers):
    resp = await client.get(OVERVIEW, headers=coach_headers)
    assert resp.status_code == 403


async def test_source_language_is_complete(client, admin_headers, skill_ids):
    resp = await client.get(OVERVIEW, headers=admin_headers)
    assert resp.status_code == 200
    skills = resp.json()["skills"]
    assert set(skills) == {"en", "de", "fr", "es"}
    assert skills["en"]["percentage"] == 100
    assert skills["en"]["translated"] == skills["en"]["total"]


async def test_update_creates_then_merges(client, admin_headers, skill_ids):
    item = skill_ids[0]
    resp = await client.put(
        f"/api/v1/admin/translations/skills/{item}",
        json={"language": "de", "translation": "  Verhandlung  "},
        headers=admin_headers,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["key"] == f"skills_{item}"
    assert body["listType"] == "skills"
    assert body["translations"]["de"] == "Verhandlung"

    resp = await client.put(
        f"/api/v1/admin/translations/skills/{item}",
        json={"language": "fr", "translation": "Négociation"},
        headers=admin_headers,
    )
    assert resp.json()["translations"] == {"de": "Verhandlung", "fr": "Négociation"}

    overview = (await client.get(OVERVIEW, headers=admin_headers)).json()["skills"]
    assert overview["de"]["translated"] >= 1
    assert overview["de"]["total"] == overview["en"]["total"]


async def test_blank_translation_does_not_count(client, admin_headers, skill_ids):
    item = skill_ids[1]
    resp = await client.put(
        f"/api/v1/admin/translations/skills/{item}",
        json={"language": "es", "translation": "   "},
        headers=admin_headers,
    )
    assert resp.json()["translations"]["es"] == ""

    overview = (await client.get(OVERVIEW, headers=admin_headers)).json()["skills"]
    assert overview["es"]["translated"] == 0


async def test_unknown_list_type_is_404(client, admin_headers):
    resp = await client.put(
        "/api/v1/admin/translations/colors/1",
        json={"language": "de", "translation": "Rot"},
        headers=admin_headers,
    )
    assert resp.status_code == 404


async def test_unsupported_language_is_400(client, admin_headers, skill_ids):
    resp = await client.put(
        f"/api/v1/admin/translations/skills/{skill_ids[0]}",
        json={"language": "xx", "translation": "?"},
        headers=admin_headers,
    )
    assert resp.status_code == 400
