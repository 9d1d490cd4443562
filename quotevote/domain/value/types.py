"""Domain value objects for Quote Vote.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from quotevote.domain.error import ValidationError
from quotevote.domain.value.common import RootValueObject

ANONYMOUS_AUTHOR = "anonymous"


class VoteAction(str, Enum):
    """Action a user can request against a quote."""

    VOTE = "vote"
    UNVOTE = "unvote"

    @classmethod
    def parse(cls, token: str) -> "VoteAction":
        """Resolve a client-supplied action token.

        Raises:
            ValidationError: If the token is not a known action
        """
        try:
            return cls(token)
        except ValueError:
            raise ValidationError("invalid action")


class VoteState(str, Enum):
    """Vote state of a (quote, user) pair."""

    NOT_VOTED = "not_voted"
    VOTED = "voted"


class SortField(str, Enum):
    """Quote fields a listing can be ordered by.

    Values are the external (camelCase) field names clients send.
    """

    CREATED_AT = "createdAt"
    VOTES = "votes"
    TEXT = "text"
    AUTHOR = "author"
    CATEGORY = "category"


class SortDirection(str, Enum):
    """Sort direction for listings."""

    ASC = "asc"
    DESC = "desc"


class Username(RootValueObject[str]):
    """Account username.

    3-50 characters: letters, digits, dots, hyphens and underscores.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_.-]{3,50}$", v):
            raise ValueError(
                "Username must be 3-50 characters of letters, digits, '.', '-' or '_'"
            )
        return v
