"""Edit guard for quote text.

A quote's text is frozen as soon as it has received a vote.
"""

import logfire

from quotevote.domain.error import ConflictError, NotFoundError
from quotevote.domain.model.quote import Quote
from quotevote.domain.repository import QuoteRepository
from quotevote.domain.value import QuoteId, TextReplacement, format_quote_id

from .base import Service

VOTED_QUOTE_EDIT = "cannot edit a voted quote"


def can_edit(quote: Quote) -> bool:
    """Whether the quote's text may still change."""
    return quote.votes == 0


class EditGuard(Service):
    """Domain service for guarded text edits."""

    def __init__(self, quote_repository: QuoteRepository) -> None:
        """Initialize edit guard.

        Args:
            quote_repository: Quote repository
        """
        self.quote_repository = quote_repository

    async def replace_text(self, quote_id: QuoteId, text: str) -> Quote:
        """Replace the text of a quote that has no votes.

        Args:
            quote_id: Quote ID
            text: New, already validated text

        Returns:
            Updated quote

        Raises:
            NotFoundError: If the quote does not exist
            ConflictError: If the quote has any votes
        """
        with logfire.span(
            "edit_guard.replace_text",
            quote_id=format_quote_id(quote_id),
            text_length=len(text),
        ):
            quote = await self.quote_repository.find_by_id(quote_id)
            if quote is None:
                logfire.warn(
                    "Edit of non-existent quote", quote_id=format_quote_id(quote_id)
                )
                raise NotFoundError("Quote", format_quote_id(quote_id))

            if not can_edit(quote):
                logfire.warn(
                    "Rejected edit of voted quote",
                    quote_id=format_quote_id(quote_id),
                    votes=quote.votes,
                )
                raise ConflictError(VOTED_QUOTE_EDIT)

            updated = await self.quote_repository.conditional_update(
                quote_id, TextReplacement(text=text)
            )
            if updated is None:
                # A vote (or a delete outside this service) landed after the snapshot
                if await self.quote_repository.find_by_id(quote_id) is None:
                    raise NotFoundError("Quote", format_quote_id(quote_id))
                raise ConflictError(VOTED_QUOTE_EDIT)

            logfire.info("Quote text updated", quote_id=format_quote_id(quote_id))
            return updated
