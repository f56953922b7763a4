"""Database Lifecycle Management - Async Version"""

import logging
from typing import Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from core.settings import DatabaseSettings

logger = logging.getLogger(__name__)

_async_engine: Optional[AsyncEngine] = None
_async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def build_engine(settings: DatabaseSettings) -> AsyncEngine:
    """Create an async engine for the configured URL."""
    url = make_url(settings.url)

    connect_args = {}
    if url.drivername.startswith("sqlite"):
        connect_args["check_same_thread"] = False  # Required for SQLite

    return create_async_engine(
        url,
        echo=settings.echo_sql,
        pool_pre_ping=settings.pool_pre_ping,
        connect_args=connect_args,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory shared by every unit of work."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def init_database(settings: Optional[DatabaseSettings] = None) -> None:
    """Initialize async database engine and session factory."""
    global _async_engine, _async_session_factory

    if _async_engine is not None:
        return

    from core.data.models import Base

    settings = settings or DatabaseSettings()

    _async_engine = build_engine(settings)
    _async_session_factory = build_session_factory(_async_engine)

    if settings.create_tables:
        async with _async_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    logger.info(f"Database initialized ({make_url(settings.url).drivername})")


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get async session factory."""
    if _async_session_factory is None:
        raise RuntimeError(
            "Database not initialized. Call init_database() first."
        )
    return _async_session_factory


async def close_database() -> None:
    """Close async database engine."""
    global _async_engine, _async_session_factory

    if _async_engine is not None:
        await _async_engine.dispose()
        logger.info("Database connections closed")

    _async_engine = None
    _async_session_factory = None
