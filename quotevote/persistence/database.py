"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from quotevote.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the pooled asyncpg engine.

    The store timeout also bounds pool checkout, connection setup and each
    command on the driver side.
    """
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
        pool_timeout=db.timeout_seconds,
        connect_args={
            "timeout": db.timeout_seconds,
            "command_timeout": db.timeout_seconds,
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Quotes returned after commit are read without a refresh
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
