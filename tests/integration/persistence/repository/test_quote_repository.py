"""Integration tests for PostgresQuoteRepository.

Run against a migrated PostgreSQL database configured through DATABASE__URL
(``python scripts/run_migrations.py`` first). Skipped when it is not set.
"""

import os

import pytest

from quotevote.domain.repository import QuoteRepository
from quotevote.domain.value import (
    CategoryFilter,
    QuoteQuery,
    SortDirection,
    SortField,
    TextPatternFilter,
    TextReplacement,
    VoterSetChange,
)
from tests.conftest import make_quote
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"), reason="DATABASE__URL not configured"
)

integration_env = create_env_fixture(unmock={"persistence"})


class TestPostgresQuoteRepository:
    """Round trips through the guarded UPDATE statements."""

    @pytest.mark.asyncio
    async def test_insert_and_find(self, integration_env):
        repo = await integration_env.get(QuoteRepository)
        quote = make_quote(text="Be kind", category="ethics")

        await repo.insert(quote)
        found = await repo.find_by_id(quote.id)

        assert found.text == "Be kind"
        assert found.category == "ethics"
        assert found.votes == 0
        assert found.voted_by == frozenset()

    @pytest.mark.asyncio
    async def test_voter_set_change_is_guarded(self, integration_env):
        """The second identical vote matches no row."""
        repo = await integration_env.get(QuoteRepository)
        quote = make_quote()
        await repo.insert(quote)
        change = VoterSetChange(username="alice", add=True)

        first = await repo.conditional_update(quote.id, change)
        second = await repo.conditional_update(quote.id, change)

        assert first.votes == 1
        assert first.voted_by == frozenset({"alice"})
        assert second is None

        removed = await repo.conditional_update(
            quote.id, VoterSetChange(username="alice", add=False)
        )
        assert removed.votes == 0
        assert removed.voted_by == frozenset()

    @pytest.mark.asyncio
    async def test_text_replacement_blocked_by_votes(self, integration_env):
        repo = await integration_env.get(QuoteRepository)
        quote = make_quote(text="Be kind", voters=["alice"])
        await repo.insert(quote)

        result = await repo.conditional_update(
            quote.id, TextReplacement(text="Be kinder")
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_regex_search_with_category(self, integration_env):
        repo = await integration_env.get(QuoteRepository)
        marker = make_quote().id.hex
        await repo.insert(make_quote(text=f"LIFE {marker}", category=marker))
        await repo.insert(make_quote(text=f"death {marker}", category=marker))

        result = await repo.find_all(
            QuoteQuery(
                filters=(
                    TextPatternFilter(pattern="^life"),
                    CategoryFilter(category=marker),
                ),
                sort_field=SortField.TEXT,
                sort_direction=SortDirection.ASC,
            )
        )

        assert [q.text for q in result] == [f"LIFE {marker}"]
