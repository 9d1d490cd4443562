"""In-memory repository implementations for testing."""

from .quote import InMemoryQuoteRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryQuoteRepository",
    "InMemoryUserRepository",
]
