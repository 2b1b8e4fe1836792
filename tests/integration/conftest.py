"""Integration test fixtures: in-memory app, async client, admin auth."""

import os

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Force test config BEFORE any app imports
os.environ["DEBUG"] = "true"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-for-integration-tests"
os.environ["OVERVIEW_CACHE_TTL"] = "60"

import backoffice.database as db_mod
import backoffice.dependencies as dep_mod

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin-password"
COACH_EMAIL = "coach@example.com"
COACH_PASSWORD = "coach-password"


def _reset_singletons():
    """Reset module-level singletons so each test session starts clean."""
    db_mod._engine = None
    db_mod._session_factory = None
    dep_mod._config_instance = None
    dep_mod._overview_cache = None


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def session_factory_shared():
    """Shared in-memory engine (StaticPool) injected into the database module."""
    _reset_singletons()

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    db_mod._engine = engine
    factory = async_sessionmaker(engine, expire_on_commit=False)
    db_mod._session_factory = factory

    dep_mod.get_app_config()

    from backoffice.models import Base
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    from backoffice.models.user import User
    from backoffice.utils.security import hash_password

    async with factory() as session:
        session.add_all([
            User(email=ADMIN_EMAIL, password_hash=hash_password(ADMIN_PASSWORD), role="admin"),
            User(email=COACH_EMAIL, password_hash=hash_password(COACH_PASSWORD), role="coach",
                 coach_status="pending", country_code="DE"),
        ])
        await session.commit()

    yield factory

    await engine.dispose()
    _reset_singletons()


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def test_app(session_factory_shared):
    from backoffice.main import app
    yield app


@pytest_asyncio.fixture(loop_scope="session")
async def client(test_app):
    """Async HTTP client for testing."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def _login(client, email, password) -> dict:
    resp = await client.post("/api/v1/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, f"Login failed: {resp.text}"
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest_asyncio.fixture(loop_scope="session")
async def admin_headers(client):
    return await _login(client, ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest_asyncio.fixture(loop_scope="session")
async def coach_headers(client):
    return await _login(client, COACH_EMAIL, COACH_PASSWORD)
