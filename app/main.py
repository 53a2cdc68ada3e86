"""
Process lifecycle for hosts embedding team event type resolution.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from app.config import settings
from app.db.pool import db_pool
from app.infrastructure.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan() -> AsyncGenerator[None, None]:
    """
    Configure logging and hold the database pool open for the duration.

    Usage:
        async with lifespan():
            resolved = await team_event_type_input_service.transform_and_validate_create(...)
    """
    setup_logging(log_level=settings.LOG_LEVEL)
    logger.info("Service starting", environment=settings.environment, debug=settings.debug)

    try:
        await db_pool.initialize()
    except Exception as e:
        logger.error("Failed to initialize database pool", error=str(e))
        raise

    try:
        yield
    finally:
        logger.info("Service shutting down")
        await db_pool.close()
