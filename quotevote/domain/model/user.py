"""User aggregate root.

Users register with a username and password and are identified by the
username in bearer tokens and quote voter sets.
"""

from datetime import datetime

from pydantic import Field

from quotevote.domain.model.common import DomainModel
from quotevote.domain.model.quote import utcnow
from quotevote.domain.value import UserId, Username


class User(DomainModel):
    """User account."""

    id: UserId
    username: Username
    password_hash: str = Field(min_length=1, repr=False)
    created_at: datetime = Field(default_factory=utcnow)
