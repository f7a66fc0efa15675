"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from shiki.config import Settings
from shiki.persistence.tables import metadata


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Connecting, waiting for a pooled connection and every statement are all
    bounded by ``database.timeout_seconds``.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    timeout = settings.database.timeout_seconds
    return create_async_engine(
        settings.database.url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        pool_timeout=timeout,
        connect_args={"timeout": timeout, "command_timeout": timeout},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )



async def create_schema(engine: AsyncEngine) -> None:
    """Create any missing tables and indexes. Existing tables are left as is.

    Args:
        engine: Database engine
    """
    async with engine.begin() as connection:
        await connection.run_sync(metadata.create_all)
