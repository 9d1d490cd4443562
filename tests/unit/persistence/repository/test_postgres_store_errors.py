"""Unit tests for how PostgreSQL repositories surface store failures.

The session is replaced by a stand-in, so no database is needed.
"""

import asyncio
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from quotevote.config import DatabaseSettings
from quotevote.domain.error import StoreError, StoreTimeoutError
from quotevote.domain.value import QuoteId, QuoteQuery
from quotevote.persistence.repository import PostgresQuoteRepository


class SlowSession:
    """Session whose statements never finish within the timeout."""

    def __init__(self):
        self.calls = 0

    async def execute(self, stmt):
        self.calls += 1
        await asyncio.sleep(5)


class BrokenSession:
    """Session whose driver reports a lost connection."""

    async def execute(self, stmt):
        raise OperationalError("SELECT 1", {}, ConnectionResetError("reset by peer"))


def repository(session) -> PostgresQuoteRepository:
    return PostgresQuoteRepository(session, DatabaseSettings(timeout_seconds=0.05))


class TestStoreTimeout:
    @pytest.mark.asyncio
    async def test_find_by_id_times_out(self):
        session = SlowSession()

        with pytest.raises(StoreTimeoutError) as exc_info:
            await repository(session).find_by_id(QuoteId(uuid4()))

        assert exc_info.value.timeout_seconds == 0.05
        assert exc_info.value.message == "find quote failed: timed out after 0.05s"
        # Never retried
        assert session.calls == 1

    @pytest.mark.asyncio
    async def test_list_times_out_as_store_error(self):
        with pytest.raises(StoreError, match="list quotes failed: timed out"):
            await repository(SlowSession()).find_all(QuoteQuery())


class TestDriverFailure:
    @pytest.mark.asyncio
    async def test_sqlalchemy_error_becomes_store_error(self):
        with pytest.raises(StoreError) as exc_info:
            await repository(BrokenSession()).find_by_id(QuoteId(uuid4()))

        assert not isinstance(exc_info.value, StoreTimeoutError)
        assert exc_info.value.operation == "find quote"
        assert exc_info.value.message == "find quote failed: OperationalError"
