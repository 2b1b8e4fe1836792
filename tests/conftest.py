"""Shared test fixtures."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from backoffice.models import Base


@pytest_asyncio.fixture
async def session_factory():
    """Session factory over a fresh in-memory database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def overview_payload():
    """Factory for an overview payload as the server returns it."""
    def _make(preferences=None, **overrides):
        payload = {
            "kpis": {"grossMerchandiseVolume": 1200.0, "newUserSignups": 7},
            "financialTrend": [{"date": "2026-03-14", "gtv": 1200.0}],
            "actionCenterItems": [{"type": "dispute", "title": "Open Disputes: 0"}],
            "systemHealth": {"api": "online"},
            "dashboardPreferences": preferences,
        }
        payload.update(overrides)
        return payload
    return _make
