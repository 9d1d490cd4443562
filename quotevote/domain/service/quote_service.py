"""Quote domain service.

Entry points for the quote lifecycle: add, list, get, vote and edit. Each
mutating entry point works against one quote snapshot fetched from the
repository and finishes with a single conditional update.
"""

from typing import Optional
from uuid import uuid4

import logfire

from quotevote.domain.error import NotFoundError, ValidationError
from quotevote.domain.model.quote import Quote, utcnow
from quotevote.domain.repository import QuoteRepository
from quotevote.domain.value import (
    ANONYMOUS_AUTHOR,
    QuoteId,
    QuoteQuery,
    VoteAction,
    format_quote_id,
)

from .base import Service
from .edit_guard import EditGuard
from .vote_service import VoteService


class QuoteService(Service):
    """Domain service orchestrating quote operations."""

    def __init__(
        self,
        quote_repository: QuoteRepository,
        vote_service: VoteService,
        edit_guard: EditGuard,
    ) -> None:
        """Initialize quote service.

        Args:
            quote_repository: Quote repository
            vote_service: Vote state machine
            edit_guard: Edit guard for text changes
        """
        self.quote_repository = quote_repository
        self.vote_service = vote_service
        self.edit_guard = edit_guard

    async def add_quote(
        self,
        text: str,
        author: Optional[str] = None,
        category: Optional[str] = None,
    ) -> Quote:
        """Create a quote with no votes.

        Args:
            text: Quote text (required, non-blank)
            author: Author name, "anonymous" when absent
            category: Optional free-form category

        Returns:
            The stored quote

        Raises:
            ValidationError: If text is empty
        """
        if not text or not text.strip():
            logfire.warn("Rejected quote with empty text")
            raise ValidationError("text is required")

        quote = Quote(
            id=QuoteId(uuid4()),
            text=text,
            author=author or ANONYMOUS_AUTHOR,
            category=category or None,
            created_at=utcnow(),
            votes=0,
            voted_by=frozenset(),
        )

        with logfire.span(
            "quote_service.add_quote",
            quote_id=format_quote_id(quote.id),
            author=quote.author,
            category=quote.category,
        ):
            await self.quote_repository.insert(quote)
            logfire.info("Quote added", quote_id=format_quote_id(quote.id))
            return quote

    async def list_quotes(self, query: QuoteQuery) -> list[Quote]:
        """List quotes for a built query.

        An empty result is a valid answer, not an error.

        Args:
            query: Query plan from the listing query builder

        Returns:
            Matching quotes in the requested order
        """
        with logfire.span(
            "quote_service.list_quotes",
            limit=query.limit,
            offset=query.offset,
            sort_field=query.sort_field.value,
            sort_direction=query.sort_direction.value,
        ):
            quotes = await self.quote_repository.find_all(query)
            logfire.info("Quotes listed", count=len(quotes))
            return quotes

    async def get_quote(self, quote_id: QuoteId) -> Quote:
        """Get a quote by ID.

        Raises:
            NotFoundError: If the quote does not exist
        """
        with logfire.span(
            "quote_service.get_quote", quote_id=format_quote_id(quote_id)
        ):
            quote = await self.quote_repository.find_by_id(quote_id)
            if quote is None:
                logfire.warn("Quote not found", quote_id=format_quote_id(quote_id))
                raise NotFoundError("Quote", format_quote_id(quote_id))
            return quote

    async def cast_vote(self, quote_id: QuoteId, username: str, action: str) -> Quote:
        """Vote or unvote a quote on behalf of a verified user.

        Args:
            quote_id: Quote ID
            username: Verified actor
            action: "vote" or "unvote"

        Returns:
            Updated quote

        Raises:
            ValidationError: If the action is unknown
            NotFoundError: If the quote does not exist
            ConflictError: If the action conflicts with the user's vote state
        """
        vote_action = VoteAction.parse(action)
        return await self.vote_service.apply(quote_id, username, vote_action)

    async def update_quote_text(self, quote_id: QuoteId, new_text: str) -> Quote:
        """Replace the text of an unvoted quote.

        Args:
            quote_id: Quote ID
            new_text: Replacement text (required, non-blank)

        Returns:
            Updated quote

        Raises:
            ValidationError: If the new text is empty
            NotFoundError: If the quote does not exist
            ConflictError: If the quote already has votes
        """
        if not new_text or not new_text.strip():
            logfire.warn(
                "Rejected empty replacement text", quote_id=format_quote_id(quote_id)
            )
            raise ValidationError("text is required")

        return await self.edit_guard.replace_text(quote_id, new_text)
