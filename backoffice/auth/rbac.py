"""Role-Based Access Control for the admin endpoints."""

from fastapi import Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dependencies import get_current_user, get_db
from ..models.user import User
from ..utils.logging import get_logger

logger = get_logger("auth.rbac")

# Permission constants
PERM_VIEW_ADMIN_DASHBOARD = "view_admin_dashboard"
PERM_MANAGE_DASHBOARD_LAYOUT = "manage_dashboard_layout"
PERM_VIEW_USERS = "view_users"
PERM_MANAGE_TRANSLATIONS = "manage_translations"

ALL_PERMISSIONS = [
    PERM_VIEW_ADMIN_DASHBOARD, PERM_MANAGE_DASHBOARD_LAYOUT,
    PERM_VIEW_USERS, PERM_MANAGE_TRANSLATIONS,
]

DEFAULT_ROLES = {
    "admin": {
        "description": "Full back office access",
        "permissions": ALL_PERMISSIONS,
    },
    "coach": {
        "description": "Marketplace coach, no back office access",
        "permissions": [],
    },
    "client": {
        "description": "Marketplace client, no back office access",
        "permissions": [],
    },
}


def get_role_permissions(role: str | None) -> list[str]:
    role_def = DEFAULT_ROLES.get(role or "", DEFAULT_ROLES["client"])
    return role_def["permissions"]


def require_permission(*required_perms: str):
    """FastAPI dependency factory that checks the caller has the permissions.

    Resolves the token subject to an active user and returns that User row.
    """
    async def _check(
        current_user: dict = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
    ) -> User:
        try:
            user_id = int(current_user["sub"])
        except (KeyError, TypeError, ValueError):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid token subject",
            )

        result = await db.execute(select(User).where(User.id == user_id))
        user = result.scalar_one_or_none()
        if user is None or not user.is_active:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="User not found or inactive",
            )

        # Role comes from the DB row, not the token claims
        user_perms = get_role_permissions(user.role)
        for perm in required_perms:
            if perm not in user_perms:
                logger.warning("permission_denied", user_id=user.id, permission=perm)
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail=f"Permission required: {perm}",
                )
        return user

    return _check
