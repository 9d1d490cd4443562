"""Cast vote use case."""

from typing import Optional

from pydantic import BaseModel

from quotevote.application.usecase.base import BaseUseCase
from quotevote.domain.error import ValidationError
from quotevote.domain.service import QuoteService
from quotevote.domain.value import parse_quote_id

from .view import QuoteView


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    quote_id: str
    username: str  # Verified username from the bearer token
    action: str
    claimed_username: Optional[str] = None  # Username sent in the request body


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    message: str = "Vote updated successfully"
    quote: QuoteView


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for voting on or unvoting a quote."""

    def __init__(self, quote_service: QuoteService) -> None:
        """Initialize cast vote use case.

        Args:
            quote_service: Quote domain service
        """
        self.quote_service = quote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute vote/unvote flow.

        Args:
            request: Target quote, voter and action token

        Returns:
            The updated quote

        Raises:
            ValidationError: If the id or action is malformed, or the body
                names a different user than the token
            NotFoundError: If the quote does not exist
            ConflictError: If the action does not fit the current vote state
        """
        quote_id = parse_quote_id(request.quote_id)

        if request.claimed_username and request.claimed_username != request.username:
            raise ValidationError("username does not match the authenticated user")

        quote = await self.quote_service.cast_vote(
            quote_id, request.username, request.action
        )
        return CastVoteResponse(quote=QuoteView.from_domain(quote))
