"""Admin translation routes: coverage overview and per-language edits."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ...auth.rbac import PERM_MANAGE_TRANSLATIONS, require_permission
from ...config import BackofficeConfig
from ...dependencies import get_app_config, get_db
from ...models.skill import Skill
from ...models.translation import Translation
from ...models.user import User
from ...utils.logging import get_logger

logger = get_logger("api.translations")

router = APIRouter(prefix="/admin", tags=["admin-translations"])

# List types with a backing table whose rows can be translated
LIST_TYPE_MODELS = {
    "skills": Skill,
}

SOURCE_LANGUAGE = "en"


class TranslationUpdate(BaseModel):
    language: str = Field(..., min_length=2, max_length=5)
    translation: str


def translation_coverage(total: int, docs: list[Translation], languages: list[str]) -> dict:
    """Per-language {total, translated, percentage}; the source language is always complete."""
    status = {}
    for lang in languages:
        if lang == SOURCE_LANGUAGE:
            status[lang] = {"total": total, "translated": total, "percentage": 100}
            continue
        translated = sum(
            1 for doc in docs
            if ((doc.translations or {}).get(lang) or "").strip()
        )
        status[lang] = {
            "total": total,
            "translated": translated,
            "percentage": (translated / total) * 100 if total > 0 else 0,
        }
    return status


@router.get("/translation-overview")
async def get_translation_overview(
    db: AsyncSession = Depends(get_db),
    config: BackofficeConfig = Depends(get_app_config),
    _admin: User = Depends(require_permission(PERM_MANAGE_TRANSLATIONS)),
):
    overview = {}
    for list_type, model in LIST_TYPE_MODELS.items():
        total = await db.scalar(select(func.count(model.id))) or 0
        docs = (await db.execute(
            select(Translation).where(Translation.list_type == list_type)
        )).scalars().all()
        overview[list_type] = translation_coverage(total, list(docs), config.supported_locales)
    return overview


@router.put("/translations/{list_type}/{item_id}")
async def update_translation(
    list_type: str,
    item_id: str,
    body: TranslationUpdate,
    db: AsyncSession = Depends(get_db),
    config: BackofficeConfig = Depends(get_app_config),
    _admin: User = Depends(require_permission(PERM_MANAGE_TRANSLATIONS)),
):
    """Set one language of an item's translation, creating the record if needed."""
    if list_type not in LIST_TYPE_MODELS:
        raise HTTPException(status_code=404, detail=f"Unknown list type: {list_type}")
    if body.language not in config.supported_locales:
        raise HTTPException(status_code=400, detail=f"Unsupported language: {body.language}")

    key = f"{list_type}_{item_id}"
    result = await db.execute(select(Translation).where(Translation.key == key))
    doc = result.scalar_one_or_none()
    if doc is None:
        doc = Translation(key=key, list_type=list_type, translations={})
        db.add(doc)

    # Reassign so the JSON column registers the change
    doc.translations = {**(doc.translations or {}), body.language: body.translation.strip()}
    await db.commit()
    await db.refresh(doc)

    logger.info("translation_updated", key=key, language=body.language)
    return {
        "key": doc.key,
        "listType": doc.list_type,
        "translations": doc.translations,
    }
