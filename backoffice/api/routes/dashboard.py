"""Admin dashboard routes: overview aggregation and layout preferences."""

from datetime import datetime
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ...auth.rbac import PERM_MANAGE_DASHBOARD_LAYOUT, PERM_VIEW_ADMIN_DASHBOARD, require_permission
from ...dashboard.aggregation import build_overview, resolve_window
from ...dashboard.preferences import (
    INVALID_FORMAT,
    PreferenceFormatError,
    is_reset,
    split_kpi_settings,
    validate_preferences,
)
from ...dependencies import get_db, get_overview_cache
from ...models.user import User
from ...utils.cache import TTLCache
from ...utils.logging import get_logger

logger = get_logger("api.dashboard")

router = APIRouter(prefix="/admin", tags=["admin-dashboard"])


def _overview_cache_prefix(user_id: int) -> str:
    return f"overview:{user_id}:"


def overview_cache_key(
    user_id: int,
    timeframe: str,
    start_date: Optional[datetime],
    end_date: Optional[datetime],
) -> str:
    """Key by the requested window; rolling timeframes key by name, not by "now"."""
    if start_date is not None and end_date is not None:
        window = f"{start_date.isoformat()}:{end_date.isoformat()}"
    else:
        window = timeframe
    return _overview_cache_prefix(user_id) + window


@router.get("/dashboard/overview")
async def get_overview(
    timeframe: str = Query("30d"),
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    db: AsyncSession = Depends(get_db),
    cache: TTLCache = Depends(get_overview_cache),
    admin: User = Depends(require_permission(PERM_VIEW_ADMIN_DASHBOARD)),
):
    """KPIs, financial trend, action items and saved layout for a time window."""
    window = resolve_window(timeframe, start_date, end_date)
    if window[0] and window[1] and window[1] < window[0]:
        raise HTTPException(status_code=400, detail="endDate must not be before startDate")

    key = overview_cache_key(admin.id, timeframe, start_date, end_date)
    data = await cache.get_or_compute(key, lambda: build_overview(db, admin, window))
    return {"success": True, "data": data}


@router.patch("/dashboard-preferences")
async def update_dashboard_preferences(
    body: dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
    cache: TTLCache = Depends(get_overview_cache),
    admin: User = Depends(require_permission(PERM_MANAGE_DASHBOARD_LAYOUT)),
):
    """Save the admin's widget layout; ``null`` or ``[]`` resets it."""
    if "preferences" not in body:
        raise HTTPException(status_code=400, detail=INVALID_FORMAT)
    preferences = body["preferences"]

    if is_reset(preferences):
        admin.dashboard_preferences = None
        admin.admin_dashboard_kpi_config = None
        await db.commit()
        cache.invalidate_prefix(_overview_cache_prefix(admin.id))
        logger.info("dashboard_preferences_reset", user_id=admin.id)
        return {"success": True, "message": "Dashboard preferences reset successfully.", "data": None}

    try:
        validate_preferences(preferences)
    except PreferenceFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))

    stored, kpis = split_kpi_settings(preferences)
    admin.dashboard_preferences = stored
    if kpis is not None:
        admin.admin_dashboard_kpi_config = kpis
    await db.commit()
    cache.invalidate_prefix(_overview_cache_prefix(admin.id))

    logger.info("dashboard_preferences_saved", user_id=admin.id, widgets=len(stored))
    return {
        "success": True,
        "message": "Dashboard preferences updated successfully.",
        "data": stored,
    }
