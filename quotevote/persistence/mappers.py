"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from quotevote.domain.model import Quote, User
from quotevote.domain.value import QuoteId, UserId, Username


def _as_uuid(value: Any) -> UUID:
    return value if isinstance(value, UUID) else UUID(str(value))


def row_to_quote(row: Dict[str, Any]) -> Quote:
    """Convert database row to Quote domain model.

    Args:
        row: Database row as dict

    Returns:
        Quote domain model
    """
    return Quote(
        id=QuoteId(_as_uuid(row["id"])),
        text=row["text"],
        author=row["author"],
        category=row.get("category"),
        created_at=row["created_at"],
        votes=row["votes"],
        voted_by=frozenset(row.get("voted_by") or ()),
    )


def quote_to_dict(quote: Quote) -> Dict[str, Any]:
    """Convert Quote domain model to database dict.

    Args:
        quote: Quote domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": quote.id,
        "text": quote.text,
        "author": quote.author,
        "category": quote.category,
        "created_at": quote.created_at,
        "votes": quote.votes,
        "voted_by": sorted(quote.voted_by),
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_as_uuid(row["id"])),
        username=Username(row["username"]),
        password_hash=row["password_hash"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "username": user.username.root,
        "password_hash": user.password_hash,
        "created_at": user.created_at,
    }
