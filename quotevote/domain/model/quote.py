"""Quote aggregate root.

Quotes are short texts users submit, browse and vote on. The vote count is a
projection of the voter set and is never trusted on its own.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, model_validator

from quotevote.domain.model.common import DomainModel
from quotevote.domain.value import (
    ANONYMOUS_AUTHOR,
    QuoteId,
    QuoteMutation,
    TextReplacement,
    VoterSetChange,
    VoteState,
)


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class Quote(DomainModel):
    """Quote aggregate root.

    Business rules:
    - ``votes`` always equals the number of distinct voters
    - text can only change while the quote has no votes
    - id and created_at never change after creation
    """

    id: QuoteId
    text: str = Field(min_length=1)
    author: str = ANONYMOUS_AUTHOR
    category: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    votes: int = Field(default=0, ge=0)
    voted_by: frozenset[str] = frozenset()

    @model_validator(mode="after")
    def validate_vote_count(self) -> "Quote":
        """Validate that the counter matches the voter set."""
        if self.votes != len(self.voted_by):
            raise ValueError(
                f"Vote count {self.votes} does not match "
                f"{len(self.voted_by)} recorded voters"
            )
        return self

    def vote_state(self, username: str) -> VoteState:
        """Vote state of ``username`` on this quote."""
        return VoteState.VOTED if username in self.voted_by else VoteState.NOT_VOTED

    def accepts(self, mutation: QuoteMutation) -> bool:
        """Whether the mutation's precondition holds for this snapshot."""
        if isinstance(mutation, VoterSetChange):
            voted = mutation.username in self.voted_by
            return not voted if mutation.add else voted
        return self.votes == 0

    def apply(self, mutation: QuoteMutation) -> "Quote":
        """Return the quote with the mutation applied.

        The caller is responsible for checking ``accepts`` first.
        """
        if isinstance(mutation, TextReplacement):
            return self.model_copy(update={"text": mutation.text})

        if mutation.add:
            voted_by = self.voted_by | {mutation.username}
        else:
            voted_by = self.voted_by - {mutation.username}
        # Re-validate so the counter/set invariant is checked on the new snapshot
        return Quote(
            id=self.id,
            text=self.text,
            author=self.author,
            category=self.category,
            created_at=self.created_at,
            votes=self.votes + mutation.delta,
            voted_by=voted_by,
        )
