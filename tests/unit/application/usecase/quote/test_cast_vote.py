"""Unit tests for CastVoteUseCase."""

from uuid import uuid4

import pytest

from quotevote.application.usecase.quote import CastVoteRequest, CastVoteUseCase
from quotevote.domain.error import ConflictError, NotFoundError, ValidationError
from quotevote.domain.repository import QuoteRepository
from tests.conftest import make_quote
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_vote_returns_updated_quote(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        quote_repo = await unit_env.get(QuoteRepository)
        quote = make_quote()
        await quote_repo.insert(quote)

        request = CastVoteRequest(
            quote_id=quote.id.hex, username="alice", action="vote"
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.message == "Vote updated successfully"
        assert response.quote.id == quote.id.hex
        assert response.quote.votes == 1
        assert response.quote.voted_by == ["alice"]

    @pytest.mark.asyncio
    async def test_matching_claimed_username_accepted(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        quote_repo = await unit_env.get(QuoteRepository)
        quote = make_quote()
        await quote_repo.insert(quote)

        response = await use_case.execute(
            CastVoteRequest(
                quote_id=quote.id.hex,
                username="alice",
                action="vote",
                claimed_username="alice",
            )
        )

        assert response.quote.votes == 1

    @pytest.mark.asyncio
    async def test_mismatched_claimed_username_rejected(self, unit_env):
        """A body username different from the token user is rejected."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        quote_repo = await unit_env.get(QuoteRepository)
        quote = make_quote()
        await quote_repo.insert(quote)

        # Act & Assert
        with pytest.raises(ValidationError, match="does not match"):
            await use_case.execute(
                CastVoteRequest(
                    quote_id=quote.id.hex,
                    username="alice",
                    action="vote",
                    claimed_username="mallory",
                )
            )

        assert (await quote_repo.find_by_id(quote.id)).votes == 0

    @pytest.mark.asyncio
    async def test_invalid_id_rejected(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(ValidationError, match="invalid quote id"):
            await use_case.execute(
                CastVoteRequest(quote_id="xyz", username="alice", action="vote")
            )

    @pytest.mark.asyncio
    async def test_unknown_quote_not_found(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CastVoteRequest(quote_id=uuid4().hex, username="alice", action="vote")
            )

    @pytest.mark.asyncio
    async def test_unvote_without_vote_conflicts(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        quote_repo = await unit_env.get(QuoteRepository)
        quote = make_quote()
        await quote_repo.insert(quote)

        with pytest.raises(ConflictError, match="not voted"):
            await use_case.execute(
                CastVoteRequest(
                    quote_id=quote.id.hex, username="alice", action="unvote"
                )
            )
