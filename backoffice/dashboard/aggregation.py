"""Overview aggregation: KPIs, daily financial trend and action items.

All timestamps are naive UTC, matching what the models store.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.payment import REVENUE_TYPES, SETTLED_STATUSES, Payment
from ..models.user import User
from ..utils.logging import get_logger
from .preferences import merge_kpi_settings

logger = get_logger("dashboard.aggregation")

# Days before today included by each rolling timeframe; anything unknown uses 30d
TIMEFRAME_DAYS = {"7d": 6, "30d": 29, "90d": 89}
DEFAULT_TIMEFRAME_DAYS = 29

Window = tuple[Optional[datetime], Optional[datetime]]


def _naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def resolve_window(
    timeframe: Optional[str] = None,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    now: Optional[datetime] = None,
) -> Window:
    """Translate request parameters into a [start, end] window.

    An explicit start and end win over ``timeframe``; ``all`` means no window.
    """
    if start_date is not None and end_date is not None:
        return _naive_utc(start_date), _naive_utc(end_date)
    if timeframe == "all":
        return None, None

    now = _naive_utc(now) if now is not None else datetime.now(timezone.utc).replace(tzinfo=None)
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if timeframe == "today":
        return midnight, midnight + timedelta(days=1) - timedelta(microseconds=1000)
    days = TIMEFRAME_DAYS.get(timeframe or "", DEFAULT_TIMEFRAME_DAYS)
    return midnight - timedelta(days=days), now


def _in_window(column, window: Window) -> list:
    start, end = window
    if start is None or end is None:
        return []
    return [column >= start, column <= end]


def _revenue_conditions(window: Window) -> list:
    return [
        Payment.type.in_(REVENUE_TYPES),
        Payment.status.in_(SETTLED_STATUSES),
        *_in_window(Payment.created_at, window),
    ]


async def _settled_total(db: AsyncSession, payment_type: str, window: Window) -> float:
    total = await db.scalar(
        select(func.coalesce(func.sum(Payment.amount_total), 0.0)).where(
            Payment.type == payment_type,
            Payment.status.in_(SETTLED_STATUSES),
            *_in_window(Payment.created_at, window),
        )
    )
    return float(total or 0)


async def compute_kpis(db: AsyncSession, window: Window) -> dict:
    row = (await db.execute(
        select(
            func.coalesce(func.sum(Payment.amount_total), 0.0),
            func.coalesce(func.sum(Payment.platform_fee), 0.0),
            func.coalesce(func.sum(Payment.vat_amount), 0.0),
            func.coalesce(func.sum(Payment.processing_fee), 0.0),
            func.count(Payment.id),
        ).where(*_revenue_conditions(window))
    )).one()
    gmv, gross_revenue, vat, processing_fees, transactions = (
        float(row[0] or 0), float(row[1] or 0), float(row[2] or 0), float(row[3] or 0), int(row[4] or 0),
    )

    signups = await db.scalar(
        select(func.count(User.id)).where(*_in_window(User.created_at, window))
    )
    pending_coaches = await db.scalar(
        select(func.count(User.id)).where(
            User.role == "coach",
            User.coach_status == "pending",
            *_in_window(User.created_at, window),
        )
    )
    disputes = await db.scalar(
        select(func.count(Payment.id)).where(
            Payment.status == "disputed",
            *_in_window(Payment.created_at, window),
        )
    )

    return {
        # Marketplace activity
        "grossMerchandiseVolume": gmv,
        "successfulTransactions": transactions,
        "averageTransactionValue": gmv / transactions if transactions else 0.0,
        # Platform profitability
        "netPlatformRevenue": gross_revenue - processing_fees,
        "grossPlatformRevenue": gross_revenue,
        "paymentProcessingFees": processing_fees,
        "platformVatLiability": vat,
        # Cash flow
        "accruedCoachEarnings": gmv - gross_revenue,
        "totalCoachPayouts": await _settled_total(db, "payout", window),
        "totalCustomerRefunds": await _settled_total(db, "refund", window),
        # Platform health
        "newUserSignups": int(signups or 0),
        "pendingCoachApplications": int(pending_coaches or 0),
        "openPaymentDisputes": int(disputes or 0),
    }


async def compute_financial_trend(db: AsyncSession, window: Window) -> list[dict]:
    """Per-day revenue figures, oldest first."""
    day = func.date(Payment.created_at).label("day")
    rows = (await db.execute(
        select(
            day,
            func.sum(Payment.amount_total),
            func.sum(Payment.platform_fee),
            func.sum(Payment.processing_fee),
        )
        .where(*_revenue_conditions(window))
        .group_by(day)
        .order_by(day)
    )).all()

    trend = []
    for date_value, gtv, gross, fees in rows:
        gtv, gross, fees = float(gtv or 0), float(gross or 0), float(fees or 0)
        trend.append({
            "date": str(date_value),
            "gtv": gtv,
            "grossPlatformRevenue": gross,
            "paymentProcessingFees": fees,
            "accruedCoachEarnings": gtv - gross,
            "netPlatformRevenue": gross - fees,
        })
    return trend


def build_action_center(kpis: dict) -> list[dict]:
    return [
        {
            "type": "coach_application",
            "title": f"Pending Applications: {kpis['pendingCoachApplications']}",
            "link": "/admin/users",
        },
        {
            "type": "dispute",
            "title": f"Open Disputes: {kpis['openPaymentDisputes']}",
            "link": "/admin/financials/disputes",
        },
    ]


async def build_overview(db: AsyncSession, user: User, window: Window) -> dict:
    kpis = await compute_kpis(db, window)
    trend = await compute_financial_trend(db, window)
    logger.debug(
        "overview_computed",
        user_id=user.id,
        start=window[0].isoformat() if window[0] else None,
        end=window[1].isoformat() if window[1] else None,
        trend_days=len(trend),
    )
    return {
        "kpis": kpis,
        "financialTrend": trend,
        "actionCenterItems": build_action_center(kpis),
        "systemHealth": {"api": "online", "database": "connected", "cache": "connected"},
        "dashboardPreferences": merge_kpi_settings(
            user.dashboard_preferences, user.admin_dashboard_kpi_config,
        ),
    }
