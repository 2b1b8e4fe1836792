"""Tests for skill and translation seeding."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError
from sqlalchemy import func, select

from backoffice.models.skill import Skill
from backoffice.models.translation import Translation
from backoffice.seeding.data import SKILLS_BY_LETTER, TOP_SKILLS, skills_for
from backoffice.seeding.seeder import SkillSeed, seed_skills, seed_translations

ITEMS = [
    {"name": "Active Listening", "category": "Communication",
     "translations": {"de": "Aktives Zuhören", "fr": "Écoute active"}},
    {"name": "Budgeting", "category": "Finance", "translations": {"de": "Budgetierung"}},
]


async def _count(session, model):
    return await session.scalar(select(func.count(model.id)))


@pytest.mark.asyncio
async def test_first_run_creates_skills_and_translations(db_session):
    result = await seed_skills(db_session, ITEMS)

    assert (result.created, result.synchronized) == (2, 0)
    skill = (await db_session.execute(select(Skill).where(Skill.name == "Budgeting"))).scalar_one()
    doc = (await db_session.execute(
        select(Translation).where(Translation.key == f"skills_{skill.id}")
    )).scalar_one()
    assert doc.list_type == "skills"
    assert doc.translations == {"de": "Budgetierung"}


@pytest.mark.asyncio
async def test_second_run_is_idempotent(db_session):
    await seed_skills(db_session, ITEMS)
    result = await seed_skills(db_session, ITEMS)

    assert (result.created, result.synchronized) == (0, 0)
    assert await _count(db_session, Skill) == 2
    assert await _count(db_session, Translation) == 2


@pytest.mark.asyncio
async def test_category_and_translation_changes_synchronize(db_session):
    await seed_skills(db_session, ITEMS)
    changed = [
        {**ITEMS[0], "category": "Interpersonal"},
        {**ITEMS[1], "translations": {"de": "Budgetplanung"}},
    ]
    result = await seed_skills(db_session, changed)

    assert (result.created, result.synchronized) == (0, 2)
    skill = (await db_session.execute(select(Skill).where(Skill.name == "Active Listening"))).scalar_one()
    assert skill.category == "Interpersonal"


@pytest.mark.asyncio
async def test_invalid_record_aborts_after_committed_records(db_session):
    items = [ITEMS[0], {"name": "", "category": "Broken"}, ITEMS[1]]
    with pytest.raises(ValidationError):
        await seed_skills(db_session, items)
    names = (await db_session.execute(select(Skill.name))).scalars().all()
    assert names == ["Active Listening"]


@pytest.mark.asyncio
async def test_seed_translations_upserts_by_key(db_session):
    items = [{"key": "specialties_1", "listType": "specialties", "translations": {"de": "Karriere"}}]
    assert await seed_translations(db_session, items) == 1

    items[0]["translations"] = {"de": "Karriereentwicklung", "fr": "Carrière"}
    await seed_translations(db_session, items)

    docs = (await db_session.execute(select(Translation))).scalars().all()
    assert len(docs) == 1
    assert docs[0].translations == {"de": "Karriereentwicklung", "fr": "Carrière"}


@pytest.mark.asyncio
async def test_invalid_skill_is_logged_with_its_name(db_session):
    items = [ITEMS[0], {"name": "Broken Skill", "category": ""}]
    with patch("backoffice.seeding.seeder.logger") as mock_logger:
        with pytest.raises(ValidationError):
            await seed_skills(db_session, items)

    mock_logger.error.assert_called_once()
    args, kwargs = mock_logger.error.call_args
    assert args == ("skill_seed_failed",)
    assert kwargs["name"] == "Broken Skill"


@pytest.mark.asyncio
async def test_invalid_translation_is_logged_with_its_key(db_session):
    items = [{"key": "specialties_9", "translations": {"de": "Ohne Listentyp"}}]
    with patch("backoffice.seeding.seeder.logger") as mock_logger:
        with pytest.raises(ValidationError):
            await seed_translations(db_session, items)

    args, kwargs = mock_logger.error.call_args
    assert args == ("translation_seed_failed",)
    assert kwargs["key"] == "specialties_9"
    assert await _count(db_session, Translation) == 0


@pytest.mark.asyncio
async def test_repeated_name_takes_the_later_entry(db_session):
    items = [
        {"name": "Authenticity", "category": "Personal Development & Mindset", "translations": {"de": "Echtheit"}},
        {"name": "Authenticity", "category": "Leadership & Management", "translations": {"de": "Authentizität"}},
    ]
    result = await seed_skills(db_session, items)

    assert (result.created, result.synchronized) == (1, 1)
    skill = (await db_session.execute(select(Skill).where(Skill.name == "Authenticity"))).scalar_one()
    assert skill.category == "Leadership & Management"


class TestSkillData:
    def test_every_letter_has_data(self):
        assert sorted(SKILLS_BY_LETTER) == list("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
        assert all(len(items) >= 50 for items in SKILLS_BY_LETTER.values())
        assert len(TOP_SKILLS) >= 100

    @pytest.mark.parametrize("letter", list("ABCDEFGHIJKLMNOPQRSTUVWXYZ"))
    def test_records_validate(self, letter):
        for item in SKILLS_BY_LETTER[letter]:
            seed = SkillSeed.model_validate(item)
            assert set(seed.translations) == {"de", "fr", "es"}

    def test_top_skills_validate(self):
        for item in TOP_SKILLS:
            SkillSeed.model_validate(item)

    def test_skills_for_letters(self):
        assert skills_for("d") == SKILLS_BY_LETTER["D"]
        assert skills_for("zA") == SKILLS_BY_LETTER["A"] + SKILLS_BY_LETTER["Z"]
        assert len(skills_for(None)) == sum(len(v) for v in SKILLS_BY_LETTER.values())

    def test_unknown_letter_raises(self):
        with pytest.raises(KeyError):
            skills_for("7")

    def test_escaped_quotes_survive(self):
        names = {item["name"] for item in skills_for("NKY")}
        assert '"No" - The Art of Saying It' in names
        assert 'Knowing Your "Why"' in names
