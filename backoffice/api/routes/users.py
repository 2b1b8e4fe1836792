"""Admin user listing routes."""

import math

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy import distinct, select
from sqlalchemy.ext.asyncio import AsyncSession

from ...auth.rbac import PERM_VIEW_USERS, require_permission
from ...config import BackofficeConfig
from ...dependencies import get_app_config, get_db
from ...models.user import User
from ...users.filters import UserFilters
from ...users.query import build_count_query, build_user_query

router = APIRouter(prefix="/admin/users", tags=["admin-users"])


def parse_user_filters(
    request: Request,
    config: BackofficeConfig = Depends(get_app_config),
) -> UserFilters:
    """Read the flat camelCase query string into a UserFilters."""
    params = dict(request.query_params)
    params.setdefault("limit", config.users_default_page_size)
    try:
        filters = UserFilters.model_validate(params)
    except ValidationError as e:
        raise RequestValidationError(e.errors())
    if filters.limit > config.users_max_page_size:
        filters = filters.update(limit=config.users_max_page_size)
    return filters


@router.get("")
async def list_users(
    filters: UserFilters = Depends(parse_user_filters),
    db: AsyncSession = Depends(get_db),
    _admin: User = Depends(require_permission(PERM_VIEW_USERS)),
):
    """Filtered, sorted, paginated user list."""
    total = await db.scalar(build_count_query(filters)) or 0
    rows = (await db.execute(build_user_query(filters))).scalars().all()
    return {
        "users": [user.to_summary() for user in rows],
        "total": total,
        "page": filters.page,
        "limit": filters.limit,
        "totalPages": math.ceil(total / filters.limit) if total else 0,
    }


@router.get("/unique-countries")
async def get_unique_user_countries(
    db: AsyncSession = Depends(get_db),
    _admin: User = Depends(require_permission(PERM_VIEW_USERS)),
):
    """Sorted distinct non-empty country codes across all users."""
    result = await db.execute(
        select(distinct(User.country_code)).where(
            User.country_code.is_not(None), User.country_code != "",
        )
    )
    return sorted(result.scalars().all())


@router.get("/{user_id}")
async def get_user_detail(
    user_id: int,
    db: AsyncSession = Depends(get_db),
    _admin: User = Depends(require_permission(PERM_VIEW_USERS)),
):
    user = await db.get(User, user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user.to_detail()
