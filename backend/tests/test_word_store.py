"""
Palindrome API — Word Store Tests
==================================

What:  WordStore against a real SQLite database, plus failure injection
       through a mocked session.

What we test:
    ✅ create assigns ids and returns the stored values
    ✅ list_all returns records in insertion order
    ✅ delete_by_id removes the row; missing ids are a no-op
    ✅ driver errors become StorageError with fixed messages and roll back
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from palindrome_api.exceptions import StorageError
from palindrome_api.services.palindrome import is_palindrome
from palindrome_api.services.word_store import WordStore


def _db_error():
    return OperationalError("SELECT", {}, Exception("connection refused"))


class TestWordStoreCrud:
    """Round trips through a real database."""

    @pytest.mark.asyncio
    async def test_create_assigns_id(self, word_store):
        word = await word_store.create("Level", True)

        assert word.id is not None
        assert word.word == "Level"
        assert word.palindrome is True

    @pytest.mark.asyncio
    async def test_create_then_list_round_trip(self, word_store):
        for text in ("Level", "hello", "Race car"):
            await word_store.create(text, is_palindrome(text))

        words = await word_store.list_all()

        assert [(w.word, w.palindrome) for w in words] == [
            ("Level", True),
            ("hello", False),
            ("Race car", True),
        ]

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, word_store):
        first = await word_store.create("noon", True)
        second = await word_store.create("noon", True)

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_list_all_empty(self, word_store):
        assert await word_store.list_all() == []

    @pytest.mark.asyncio
    async def test_delete_existing(self, word_store):
        kept = await word_store.create("kayak", True)
        removed = await word_store.create("hello", False)

        assert await word_store.delete_by_id(removed.id) is True

        words = await word_store.list_all()
        assert [w.id for w in words] == [kept.id]

    @pytest.mark.asyncio
    async def test_delete_missing_is_noop(self, word_store):
        await word_store.create("kayak", True)

        assert await word_store.delete_by_id(9999) is False
        assert len(await word_store.list_all()) == 1

    @pytest.mark.asyncio
    async def test_ping(self, word_store):
        assert await word_store.ping() is True


class TestWordStoreFailures:
    """Driver errors are translated, rolled back and never leak."""

    @pytest.mark.asyncio
    async def test_create_failure(self, mock_session_factory, mock_db_session):
        mock_db_session.flush = AsyncMock(side_effect=_db_error())
        store = WordStore(mock_session_factory)

        with pytest.raises(StorageError) as exc_info:
            await store.create("Level", True)

        assert exc_info.value.message == "Failed to save the word"
        assert exc_info.value.context["original_error"] == "OperationalError"
        mock_db_session.rollback.assert_awaited_once()
        mock_db_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_list_failure(self, mock_session_factory, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=_db_error())
        store = WordStore(mock_session_factory)

        with pytest.raises(StorageError, match="Failed to fetch words"):
            await store.list_all()

    @pytest.mark.asyncio
    async def test_delete_failure(self, mock_session_factory, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=_db_error())
        store = WordStore(mock_session_factory)

        with pytest.raises(StorageError, match="Failed to delete the word"):
            await store.delete_by_id(1)
        mock_db_session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_connection_refused_is_storage_error(self, mock_session_factory, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=ConnectionRefusedError())
        store = WordStore(mock_session_factory)

        with pytest.raises(StorageError):
            await store.list_all()

    @pytest.mark.asyncio
    async def test_ping_failure_returns_false(self, mock_session_factory, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=_db_error())
        store = WordStore(mock_session_factory)

        assert await store.ping() is False
