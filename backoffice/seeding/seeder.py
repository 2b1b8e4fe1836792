"""Idempotent taxonomy seeding: skills and their translations.

Each record is looked up by its natural key and created or synchronized,
then committed on its own. A failing record aborts the run; records
before it stay committed.
"""

from dataclasses import dataclass
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.skill import Skill
from ..models.translation import Translation
from ..utils.logging import get_logger

logger = get_logger("seeding.seeder")


class SkillSeed(BaseModel):
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    translations: dict[str, str] = Field(default_factory=dict)


class TranslationSeed(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    key: str = Field(..., min_length=1)
    list_type: str = Field(..., alias="listType")
    translations: dict[str, str] = Field(default_factory=dict)



def _field(raw, name: str):
    """Identifier of a raw record, for failure logs."""
    if isinstance(raw, BaseModel):
        return getattr(raw, name, None)
    return raw.get(name) if isinstance(raw, dict) else None


@dataclass
class SeedResult:
    created: int = 0
    synchronized: int = 0


async def upsert_translation(
    session: AsyncSession, key: str, list_type: str, translations: dict[str, str],
) -> str:
    """Create or replace one translation record. Returns created/updated/unchanged."""
    result = await session.execute(select(Translation).where(Translation.key == key))
    doc = result.scalar_one_or_none()
    if doc is None:
        session.add(Translation(key=key, list_type=list_type, translations=dict(translations)))
        return "created"
    if doc.list_type == list_type and doc.translations == translations:
        return "unchanged"
    doc.list_type = list_type
    doc.translations = dict(translations)
    return "updated"


async def seed_skills(session: AsyncSession, items: Iterable[dict | SkillSeed]) -> SeedResult:
    """Create missing skills, sync categories, and upsert ``skills_<id>`` translations."""
    outcome = SeedResult()
    for raw in items:
        name = _field(raw, "name")
        try:
            item = raw if isinstance(raw, SkillSeed) else SkillSeed.model_validate(raw)
            result = await session.execute(select(Skill).where(Skill.name == item.name))
            skill = result.scalar_one_or_none()

            changed = False
            if skill is None:
                skill = Skill(name=item.name, category=item.category)
                session.add(skill)
                await session.flush()
                outcome.created += 1
                logger.info("skill_created", name=item.name, category=item.category)
            elif skill.category != item.category:
                skill.category = item.category
                changed = True

            translation = await upsert_translation(
                session, skill.translation_key, "skills", item.translations,
            )
            if translation == "updated":
                changed = True
            if changed:
                outcome.synchronized += 1
                logger.info("skill_synchronized", name=item.name, translation=translation)

            await session.commit()
        except Exception as e:
            await session.rollback()
            logger.error("skill_seed_failed", name=name, error=str(e), exc_info=True)
            raise

    logger.info("skill_seed_complete", created=outcome.created, synchronized=outcome.synchronized)
    return outcome


async def seed_translations(session: AsyncSession, items: Iterable[dict | TranslationSeed]) -> int:
    """Upsert translation records by key. Returns the number processed."""
    count = 0
    for raw in items:
        key = _field(raw, "key")
        try:
            item = raw if isinstance(raw, TranslationSeed) else TranslationSeed.model_validate(raw)
            outcome = await upsert_translation(session, item.key, item.list_type, item.translations)
            await session.commit()
        except Exception as e:
            await session.rollback()
            logger.error("translation_seed_failed", key=key, error=str(e), exc_info=True)
            raise
        count += 1
        logger.info("translation_synchronized", key=item.key, outcome=outcome)

    logger.info("translation_seed_complete", count=count)
    return count
