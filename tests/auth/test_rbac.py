"""Tests for RBAC: role permissions and the require_permission dependency."""

import pytest
from fastapi import HTTPException

from backoffice.auth.rbac import (
    ALL_PERMISSIONS,
    DEFAULT_ROLES,
    PERM_VIEW_USERS,
    get_role_permissions,
    require_permission,
)
from backoffice.models.user import User


async def _add_user(db_session, **fields) -> User:
    user = User(email=fields.pop("email", "someone@example.com"), password_hash="x", **fields)
    db_session.add(user)
    await db_session.commit()
    return user


class TestRolePermissions:
    def test_admin_has_all_permissions(self):
        assert DEFAULT_ROLES["admin"]["permissions"] == ALL_PERMISSIONS

    @pytest.mark.parametrize("role", ["coach", "client"])
    def test_marketplace_roles_have_none(self, role):
        assert get_role_permissions(role) == []

    def test_unknown_role_falls_back_to_client(self):
        assert get_role_permissions("superuser") == []
        assert get_role_permissions(None) == []


class TestRequirePermission:
    @pytest.mark.asyncio
    async def test_admin_passes_and_gets_user_row(self, db_session):
        admin = await _add_user(db_session, role="admin")
        check = require_permission(PERM_VIEW_USERS)
        user = await check(current_user={"sub": str(admin.id)}, db=db_session)
        assert user.id == admin.id

    @pytest.mark.asyncio
    async def test_coach_is_forbidden(self, db_session):
        coach = await _add_user(db_session, role="coach")
        check = require_permission(PERM_VIEW_USERS)
        with pytest.raises(HTTPException) as exc_info:
            await check(current_user={"sub": str(coach.id)}, db=db_session)
        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == f"Permission required: {PERM_VIEW_USERS}"

    @pytest.mark.asyncio
    async def test_inactive_user_is_unauthorized(self, db_session):
        admin = await _add_user(db_session, role="admin", is_active=False)
        check = require_permission(PERM_VIEW_USERS)
        with pytest.raises(HTTPException) as exc_info:
            await check(current_user={"sub": str(admin.id)}, db=db_session)
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"sub": "admin"}, {"sub": None}])
    async def test_bad_subject_is_unauthorized(self, db_session, payload):
        check = require_permission(PERM_VIEW_USERS)
        with pytest.raises(HTTPException) as exc_info:
            await check(current_user=payload, db=db_session)
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_missing_user_is_unauthorized(self, db_session):
        check = require_permission(PERM_VIEW_USERS)
        with pytest.raises(HTTPException) as exc_info:
            await check(current_user={"sub": "4242"}, db=db_session)
        assert exc_info.value.status_code == 401
