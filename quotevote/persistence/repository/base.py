"""Shared plumbing for PostgreSQL repositories."""

import asyncio
from typing import Any

import logfire
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from quotevote.config import DatabaseSettings
from quotevote.domain.error import StoreError, StoreTimeoutError


class PostgresRepository:
    """Base class running statements under the store timeout."""

    def __init__(self, session: AsyncSession, settings: DatabaseSettings) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            settings: Database settings (statement timeout)
        """
        self.session = session
        self.settings = settings

    async def _execute(self, operation: str, stmt: Any) -> Result[Any]:
        """Execute a statement, translating driver failures to StoreError.

        Args:
            operation: Name used in logs and error messages
            stmt: SQLAlchemy statement

        Returns:
            Statement result

        Raises:
            StoreTimeoutError: If the statement exceeds the store timeout
            StoreError: If the driver reports any other failure
        """
        timeout = self.settings.timeout_seconds
        try:
            return await asyncio.wait_for(self.session.execute(stmt), timeout=timeout)
        except asyncio.TimeoutError:
            logfire.error(
                "Store operation timed out", operation=operation, timeout=timeout
            )
            raise StoreTimeoutError(operation, timeout)
        except SQLAlchemyError as e:
            logfire.error(
                "Store operation failed",
                operation=operation,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise StoreError(operation, type(e).__name__)
