"""Unit tests for the Quote aggregate."""

from uuid import uuid4

import pytest
from pydantic import ValidationError as PydanticValidationError

from quotevote.domain.model import Quote
from quotevote.domain.value import (
    QuoteId,
    TextReplacement,
    VoterSetChange,
    VoteState,
)
from tests.conftest import make_quote


class TestQuoteInvariant:
    """The vote counter always equals the size of the voter set."""

    def test_new_quote_has_no_votes(self):
        """A quote built with defaults starts unvoted and anonymous."""
        quote = Quote(id=QuoteId(uuid4()), text="Be kind")

        assert quote.votes == 0
        assert quote.voted_by == frozenset()
        assert quote.author == "anonymous"
        assert quote.created_at.tzinfo is not None

    def test_counter_mismatch_is_rejected(self):
        """Constructing a quote whose counter disagrees with its voters fails."""
        with pytest.raises(PydanticValidationError, match="does not match"):
            Quote(
                id=QuoteId(uuid4()),
                text="Be kind",
                votes=2,
                voted_by=frozenset({"alice"}),
            )

    def test_negative_votes_are_rejected(self):
        with pytest.raises(PydanticValidationError):
            Quote(id=QuoteId(uuid4()), text="Be kind", votes=-1)

    def test_empty_text_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            Quote(id=QuoteId(uuid4()), text="")


class TestQuoteMutations:
    """Tests for accepts/apply."""

    def test_vote_state(self):
        quote = make_quote(voters=["alice"])

        assert quote.vote_state("alice") == VoteState.VOTED
        assert quote.vote_state("bob") == VoteState.NOT_VOTED

    def test_add_voter_updates_counter_and_set(self):
        """Adding a voter increments votes and records the username."""
        quote = make_quote()
        change = VoterSetChange(username="alice", add=True)

        assert quote.accepts(change)
        updated = quote.apply(change)

        assert updated.votes == 1
        assert updated.voted_by == frozenset({"alice"})
        assert updated.id == quote.id
        assert updated.created_at == quote.created_at
        # Source snapshot is untouched
        assert quote.votes == 0

    def test_add_existing_voter_not_accepted(self):
        quote = make_quote(voters=["alice"])

        assert not quote.accepts(VoterSetChange(username="alice", add=True))

    def test_remove_voter_requires_membership(self):
        quote = make_quote(voters=["alice"])

        assert not quote.accepts(VoterSetChange(username="bob", add=False))
        assert quote.accepts(VoterSetChange(username="alice", add=False))

        updated = quote.apply(VoterSetChange(username="alice", add=False))
        assert updated.votes == 0
        assert updated.voted_by == frozenset()

    def test_text_replacement_only_accepted_without_votes(self):
        """Text can only change while the quote has no votes."""
        replacement = TextReplacement(text="Be kinder")

        assert make_quote().accepts(replacement)
        assert not make_quote(voters=["alice"]).accepts(replacement)

    def test_text_replacement_keeps_other_fields(self):
        quote = make_quote(text="Be kind", category="ethics", author="Plato")

        updated = quote.apply(TextReplacement(text="Be kinder"))

        assert updated.text == "Be kinder"
        assert updated.category == "ethics"
        assert updated.author == "Plato"
        assert updated.votes == 0
