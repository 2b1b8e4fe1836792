"""SQL construction for the admin user listing."""

from sqlalchemy import Select, and_, asc, desc, func, or_, select

from ..models.user import User
from .filters import UserFilters

SORTABLE_FIELDS = {
    "createdAt": User.created_at,
    "lastLogin": User.last_login,
    "email": User.email,
    "firstName": User.first_name,
    "lastName": User.last_name,
    "role": User.role,
    "trustScore": User.trust_score,
    "profileCompleteness": User.profile_completeness,
    "sessionCount": User.session_count,
    "enrollmentCount": User.enrollment_count,
}


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_conditions(filters: UserFilters) -> list:
    """Translate filter state into WHERE clauses."""
    conditions = []

    if filters.search:
        pattern = f"%{_escape_like(filters.search.lower())}%"
        conditions.append(or_(
            func.lower(User.first_name).like(pattern, escape="\\"),
            func.lower(User.last_name).like(pattern, escape="\\"),
            func.lower(User.email).like(pattern, escape="\\"),
        ))

    if filters.role:
        conditions.append(User.role == filters.role)

    if filters.country_code:
        conditions.append(User.country_code == filters.country_code)

    if filters.preferred_language:
        conditions.append(User.preferred_language == filters.preferred_language)

    if filters.is_email_verified:
        conditions.append(User.is_email_verified == (filters.is_email_verified == "true"))

    if filters.has_dispute:
        conditions.append(User.has_active_dispute == (filters.has_dispute == "true"))

    # Ranges only constrain when narrower than the full 0..100 scale
    if filters.min_trust > 0 or filters.max_trust < 100:
        conditions.append(User.trust_score.between(filters.min_trust, filters.max_trust))

    if filters.min_profile_completeness > 0 or filters.max_profile_completeness < 100:
        conditions.append(User.profile_completeness.between(
            filters.min_profile_completeness, filters.max_profile_completeness,
        ))

    if filters.min_blocked_by_count:
        conditions.append(User.blocked_by_count >= filters.min_blocked_by_count)

    if filters.start_date and filters.end_date:
        conditions.append(User.created_at.between(filters.start_date, filters.end_date))

    if filters.last_login_start_date and filters.last_login_end_date:
        conditions.append(User.last_login.between(
            filters.last_login_start_date, filters.last_login_end_date,
        ))

    if filters.min_sessions is not None:
        conditions.append(User.session_count >= filters.min_sessions)
    if filters.max_sessions is not None:
        conditions.append(User.session_count <= filters.max_sessions)
    if filters.min_enrollments is not None:
        conditions.append(User.enrollment_count >= filters.min_enrollments)
    if filters.max_enrollments is not None:
        conditions.append(User.enrollment_count <= filters.max_enrollments)

    if filters.stripe_status == "connected":
        conditions.append(and_(User.role == "coach", User.stripe_account_status == "active"))
    elif filters.stripe_status == "not_connected":
        conditions.append(and_(
            User.role == "coach",
            or_(User.stripe_account_status.is_(None), User.stripe_account_status != "active"),
        ))

    if filters.status == "suspended":
        conditions.append(or_(User.is_active.is_(False), User.coach_status == "inactive"))
    elif filters.status == "active":
        conditions.append(User.is_active.is_(True))
        conditions.append(or_(User.coach_status.is_(None), User.coach_status == "active"))
    elif filters.status == "pending":
        conditions.append(and_(User.role == "coach", User.coach_status == "pending"))

    return conditions


def build_user_query(filters: UserFilters) -> Select:
    """Filtered, sorted, paginated SELECT over users."""
    column = SORTABLE_FIELDS.get(filters.sort_field, User.created_at)
    order = asc(column) if filters.sort_order == "asc" else desc(column)
    return (
        select(User)
        .where(*build_conditions(filters))
        .order_by(order, User.id)
        .limit(filters.limit)
        .offset((filters.page - 1) * filters.limit)
    )


def build_count_query(filters: UserFilters) -> Select:
    return select(func.count(User.id)).where(*build_conditions(filters))
