"""Coaching Back Office: admin API for the marketplace dashboard.

FastAPI entry point with lifespan management, error handlers and CORS.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import select, text

from .api.router import api_router
from .config import get_config
from .database import close_engine, create_tables, get_session_factory
from .dependencies import get_overview_cache
from .middleware.error_handler import register_error_handlers
from .middleware.request_id import RequestIDMiddleware
from .models.user import User
from .utils.cache import TTLCache
from .utils.logging import get_logger, setup_logging
from .utils.security import hash_password

config = get_config()
setup_logging(
    debug=config.debug,
    log_dir=config.log_dir,
    log_max_bytes=config.log_max_bytes,
    log_backup_count=config.log_backup_count,
    service="server",
)
logger = get_logger("backoffice.main")

APP_VERSION = "1.0.0"

_health_cache = TTLCache(default_ttl=5.0, max_entries=4)


async def _bootstrap_admin(factory) -> None:
    """Create the configured admin account if no admin exists yet."""
    if not config.admin_email or not config.admin_password:
        return
    async with factory() as session:
        existing = await session.execute(select(User.id).where(User.role == "admin").limit(1))
        if existing.scalar_one_or_none() is not None:
            return
        session.add(User(
            email=config.admin_email.strip().lower(),
            password_hash=hash_password(config.admin_password),
            role="admin",
            is_email_verified=True,
        ))
        await session.commit()
    logger.info("bootstrap_admin_created", email=config.admin_email)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("backoffice_starting", host=config.host, port=config.port)

    if config.secret_key == "CHANGE_ME_IN_PRODUCTION":
        if not config.debug:
            raise RuntimeError(
                "INSECURE_SECRET_KEY: default secret_key detected in production mode. "
                "Set a strong, unique SECRET_KEY in .env before deploying."
            )
        logger.warning("insecure_secret_key", hint="set SECRET_KEY in .env")

    await create_tables(config)
    await _bootstrap_admin(get_session_factory(config))

    yield

    get_overview_cache().clear()
    await close_engine()
    logger.info("backoffice_stopped")


app = FastAPI(
    title="Coaching Back Office",
    description="Admin dashboard API for the coaching marketplace",
    version=APP_VERSION,
    lifespan=lifespan,
)

register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in config.cors_origins.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
)

# Added last so it runs first
app.add_middleware(RequestIDMiddleware)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"name": config.app_name, "version": APP_VERSION, "status": "operational"}


@app.get("/health")
async def health():
    """Health check including a database round trip."""

    async def _compute():
        try:
            async with get_session_factory(config)() as session:
                await session.execute(text("SELECT 1"))
            database = "connected"
        except Exception as e:
            logger.warning("health_database_unreachable", error=str(e))
            database = "unreachable"
        return {
            "status": "ok" if database == "connected" else "degraded",
            "database": database,
            "version": APP_VERSION,
        }

    return await _health_cache.get_or_compute("health", _compute)


def main():
    """Run the back office server."""
    uvicorn.run(
        "backoffice.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )


if __name__ == "__main__":
    main()
