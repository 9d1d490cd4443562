"""Vote domain service.

Per (quote, user) pair there are two states, NOT_VOTED and VOTED:

    NOT_VOTED --vote-->   VOTED    (add voter, votes + 1)
    VOTED     --unvote--> NOT_VOTED (remove voter, votes - 1)

Every other combination is rejected without touching the store.
"""

import logfire

from quotevote.domain.error import ConflictError, NotFoundError
from quotevote.domain.model.quote import Quote
from quotevote.domain.repository import QuoteRepository
from quotevote.domain.value import (
    QuoteId,
    VoteAction,
    VoterSetChange,
    VoteState,
    format_quote_id,
)

from .base import Service

ALREADY_VOTED = "already voted"
NOT_VOTED = "not voted"


def plan_transition(quote: Quote, username: str, action: VoteAction) -> VoterSetChange:
    """Resolve the mutation for ``action`` against a quote snapshot.

    Args:
        quote: Current quote snapshot
        username: Verified voter
        action: Requested action

    Returns:
        The voter set change to apply

    Raises:
        ConflictError: If the action is not valid from the current state
    """
    state = quote.vote_state(username)

    if action == VoteAction.VOTE:
        if state == VoteState.VOTED:
            raise ConflictError(ALREADY_VOTED)
        return VoterSetChange(username=username, add=True)

    if state == VoteState.NOT_VOTED:
        raise ConflictError(NOT_VOTED)
    return VoterSetChange(username=username, add=False)


class VoteService(Service):
    """Domain service enforcing one vote per user per quote."""

    def __init__(self, quote_repository: QuoteRepository) -> None:
        """Initialize vote service.

        Args:
            quote_repository: Quote repository
        """
        self.quote_repository = quote_repository

    async def apply(
        self, quote_id: QuoteId, username: str, action: VoteAction
    ) -> Quote:
        """Apply a vote or unvote for a user.

        The state machine is evaluated against the current snapshot and the
        resulting change is written with a conditional update that re-checks
        membership in the store, so two concurrent identical requests can
        never both succeed.

        Args:
            quote_id: Quote ID
            username: Verified voter
            action: Vote or unvote

        Returns:
            Updated quote

        Raises:
            NotFoundError: If the quote does not exist
            ConflictError: If the user already voted (vote) or has not voted (unvote)
        """
        with logfire.span(
            "vote_service.apply",
            quote_id=format_quote_id(quote_id),
            username=username,
            action=action.value,
        ):
            quote = await self.quote_repository.find_by_id(quote_id)
            if quote is None:
                logfire.warn(
                    "Vote on non-existent quote", quote_id=format_quote_id(quote_id)
                )
                raise NotFoundError("Quote", format_quote_id(quote_id))

            try:
                change = plan_transition(quote, username, action)
            except ConflictError as e:
                logfire.warn(
                    "Rejected vote transition",
                    quote_id=format_quote_id(quote_id),
                    username=username,
                    action=action.value,
                    reason=e.message,
                )
                raise

            updated = await self.quote_repository.conditional_update(quote_id, change)
            if updated is None:
                # Snapshot was stale: the quote vanished or a concurrent
                # request already moved this user to the target state.
                current = await self.quote_repository.find_by_id(quote_id)
                if current is None:
                    raise NotFoundError("Quote", format_quote_id(quote_id))
                logfire.warn(
                    "Concurrent vote lost precondition",
                    quote_id=format_quote_id(quote_id),
                    username=username,
                    action=action.value,
                )
                raise ConflictError(ALREADY_VOTED if change.add else NOT_VOTED)

            logfire.info(
                "Vote applied",
                quote_id=format_quote_id(quote_id),
                username=username,
                action=action.value,
                votes=updated.votes,
            )
            return updated
