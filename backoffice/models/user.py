"""User model: platform accounts listed and inspected by the admin screens."""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base

USER_ROLES = ("client", "coach", "admin")


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    first_name: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), default="client", nullable=False, index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    is_email_verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Coach-only state: pending / active / inactive
    coach_status: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    stripe_account_status: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)

    country_code: Mapped[Optional[str]] = mapped_column(String(2), nullable=True, index=True)
    preferred_language: Mapped[Optional[str]] = mapped_column(String(5), nullable=True)
    trust_score: Mapped[int] = mapped_column(Integer, default=100, nullable=False)
    profile_completeness: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    blocked_by_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    warnings_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    has_active_dispute: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    session_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    enrollment_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Admin dashboard customization; NULL means "use registry defaults"
    dashboard_preferences: Mapped[Optional[list[dict[str, Any]]]] = mapped_column(JSON, nullable=True)
    admin_dashboard_kpi_config: Mapped[Optional[list[Any]]] = mapped_column(JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), nullable=False, index=True
    )
    last_login: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    def to_summary(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "role": self.role,
            "isActive": self.is_active,
            "coachStatus": self.coach_status,
            "countryCode": self.country_code,
            "trustScore": self.trust_score,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "lastLogin": self.last_login.isoformat() if self.last_login else None,
        }

    def to_detail(self) -> dict:
        detail = self.to_summary()
        detail.update({
            "isEmailVerified": self.is_email_verified,
            "stripeAccountStatus": self.stripe_account_status,
            "preferredLanguage": self.preferred_language,
            "profileCompleteness": self.profile_completeness,
            "blockedByCount": self.blocked_by_count,
            "hasActiveDispute": self.has_active_dispute,
            "sessionCount": self.session_count,
            "enrollmentCount": self.enrollment_count,
            "warningCount": self.warnings_count,
        })
        return detail
