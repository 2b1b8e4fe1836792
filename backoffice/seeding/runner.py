"""Run a seed job against the configured database."""

from typing import Awaitable, Callable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from ..config import BackofficeConfig, get_config
from ..database import close_engine, create_tables, get_session_factory
from ..utils.logging import get_logger, setup_logging

logger = get_logger("seeding.runner")

T = TypeVar("T")


async def run_seed(
    job: Callable[[AsyncSession], Awaitable[T]],
    config: BackofficeConfig | None = None,
) -> T:
    """Open a session, run ``job`` in it, and always dispose the engine."""
    config = config or get_config()
    setup_logging(debug=config.debug, log_dir=config.log_dir, log_file="seed.log", service="seed")
    logger.info("seed_started", database=config.database_url.split("://", 1)[0])
    try:
        await create_tables(config)
        async with get_session_factory(config)() as session:
            return await job(session)
    finally:
        await close_engine()
        logger.info("seed_engine_disposed")
