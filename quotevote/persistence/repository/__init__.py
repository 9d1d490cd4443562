"""PostgreSQL repository implementations."""

from quotevote.persistence.repository.quote import PostgresQuoteRepository
from quotevote.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresQuoteRepository",
    "PostgresUserRepository",
]
