"""PostgreSQL persistence wiring.

One engine per container, one session per request. The request session
commits once the handler returns and rolls back if it raised.
"""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from quotevote.config import DatabaseSettings, Settings
from quotevote.domain.error import StoreError
from quotevote.domain.repository import QuoteRepository, UserRepository
from quotevote.persistence.database import create_engine, create_session_factory
from quotevote.persistence.repository import (
    PostgresQuoteRepository,
    PostgresUserRepository,
)
from quotevote.util.di.base import ProviderBase
from quotevote.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Quote and user repositories; swapped for in-memory stores in tests."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        try:
            yield engine
        finally:
            await engine.dispose()

    @provide(scope=Scope.APP)
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Yield the request's unit of work.

        Raises:
            StoreError: If the final commit fails
        """
        async with factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Rolling back request session", error=str(e))
                await session.rollback()
                raise

            try:
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                logfire.error("Commit failed", error_type=type(e).__name__)
                raise StoreError("commit", type(e).__name__) from e

    @provide(scope=Scope.REQUEST)
    def quotes(
        self, session: AsyncSession, database_settings: DatabaseSettings
    ) -> QuoteRepository:
        return PostgresQuoteRepository(session, database_settings)

    @provide(scope=Scope.REQUEST)
    def users(
        self, session: AsyncSession, database_settings: DatabaseSettings
    ) -> UserRepository:
        return PostgresUserRepository(session, database_settings)
