"""Application lifespan: startup and shutdown.

Wiring of infrastructure only (logging, cache, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from acp.core.config import get_settings
from acp.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, Redis cache (if enabled). Shutdown: cache disconnect,
    SQL engine dispose.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    if settings.redis_enabled:
        from acp.infrastructure.cache.redis_cache import CacheService

        cache = CacheService()
        await cache.connect()
        app.state.cache = cache
    else:
        app.state.cache = None
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    if getattr(app.state, "cache", None) is not None:
        await app.state.cache.disconnect()
        logger.info("Cache disconnected")

    from acp.infrastructure.persistence.database import dispose_engine

    await dispose_engine()
