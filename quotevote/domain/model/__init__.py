"""Domain model entities for Quote Vote."""

from quotevote.domain.model.quote import Quote
from quotevote.domain.model.user import User

__all__ = [
    "Quote",
    "User",
]
