"""Repository interfaces for Quote Vote domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from quotevote.domain.repository.quote import QuoteRepository
from quotevote.domain.repository.user import UserRepository

__all__ = [
    "QuoteRepository",
    "UserRepository",
]
