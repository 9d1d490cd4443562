"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional
from uuid import uuid4

import logfire

from quotevote.domain.model import Quote
from quotevote.domain.value import QuoteId

# Keep spans local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_quote(
    text: str = "Test quote",
    author: str = "anonymous",
    category: Optional[str] = None,
    voters: Iterable[str] = (),
    minutes: int = 0,
) -> Quote:
    """Helper function to build quotes for tests.

    Args:
        text: Quote text
        author: Quote author
        category: Optional category
        voters: Usernames that already voted; the counter follows the set
        minutes: Offset of created_at from BASE_TIME, used to control ordering

    Returns:
        Valid Quote domain model
    """
    voted_by = frozenset(voters)
    return Quote(
        id=QuoteId(uuid4()),
        text=text,
        author=author,
        category=category,
        created_at=BASE_TIME + timedelta(minutes=minutes),
        votes=len(voted_by),
        voted_by=voted_by,
    )
