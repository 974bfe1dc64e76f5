"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

Engine and session factory are created lazily on first use (get_db /
get_db_transactional) so import does not trigger Settings validation.
Schema migrations are managed outside this service; scripts/seed_reference_data.py
can create tables for local development.
"""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from acp.core.config import get_settings

logger = logging.getLogger(__name__)

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: Any = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None

_AFTER_COMMIT = "acp.after_commit"


def _ensure_engine() -> async_sessionmaker[AsyncSession]:
    """Create engine and AsyncSessionLocal on first use."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return AsyncSessionLocal
    settings = get_settings()
    pool_kwargs: dict[str, Any] = {}
    if settings.database_url.startswith("postgresql"):
        pool_kwargs["pool_size"] = (
            settings.db_pool_size if settings.db_pool_size is not None else 20
        )
        pool_kwargs["max_overflow"] = (
            settings.db_max_overflow if settings.db_max_overflow is not None else 30
        )
    engine = create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
        pool_recycle=3600,
        **pool_kwargs,
    )
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )
    logger.info("Database engine created (echo=%s)", settings.database_echo)
    return AsyncSessionLocal


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


async def get_db() -> AsyncIterator[AsyncSession]:
    """Database session dependency for read operations.

    Does not commit; use get_db_transactional for writes.
    """
    session_factory = _ensure_engine()
    async with session_factory() as session:
        yield session


async def get_db_transactional() -> AsyncIterator[AsyncSession]:
    """Database session dependency for write operations.

    Begins a transaction, commits on success, rolls back on exception.
    Callbacks registered through SessionCommitHooks run only after the
    commit. Use for POST, PUT, PATCH, DELETE endpoints.
    """
    session_factory = _ensure_engine()
    async with session_factory() as session:
        async with session.begin():
            yield session
        await run_after_commit(session)


class SessionCommitHooks:
    """ITransactionHooks bound to a get_db_transactional session."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def after_commit(self, callback: Callable[[], Awaitable[Any]]) -> None:
        self._session.info.setdefault(_AFTER_COMMIT, []).append(callback)


async def run_after_commit(session: AsyncSession) -> None:
    """Run and clear the callbacks registered on session, in order."""
    callbacks = session.info.pop(_AFTER_COMMIT, [])
    for callback in callbacks:
        await callback()
    if callbacks:
        logger.debug("Ran %d after-commit callback(s)", len(callbacks))


async def dispose_engine() -> None:
    """Dispose the engine (app shutdown)."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None
