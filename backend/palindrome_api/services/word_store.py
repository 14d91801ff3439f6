"""
Palindrome API — Word Store (Persistence Layer)
================================================

What:  Create, list and delete Word records in the `words` table.
How:   Each operation opens its own AsyncSession from the injected factory
       and runs as one transaction: commit on success, rollback on error.
Who:   Constructed once during startup, attached to app.state, and resolved
       by route handlers through the get_word_store dependency.

Error Handling Strategy:
    Driver and SQLAlchemy errors are logged with their cause and re-raised as
    StorageError carrying a fixed, operation-specific message. The cause
    never reaches the client.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, List

from fastapi import Request
from sqlalchemy import delete, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from palindrome_api.exceptions import StorageError
from palindrome_api.models.word import Word

logger = logging.getLogger(__name__)

SAVE_FAILED = "Failed to save the word"
FETCH_FAILED = "Failed to fetch words"
DELETE_FAILED = "Failed to delete the word"


class WordStore:
    """
    Persistence abstraction over the `words` table.

    Operations:
        - create():       insert one record, return it with its new id
        - list_all():     every record, oldest first
        - delete_by_id(): remove one record; a missing id is not an error
        - ping():         connectivity check for GET /health
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @asynccontextmanager
    async def _session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Session scoped to one store operation.

        1. Creates a new session from the factory
        2. Yields it to the operation
        3. On success: commits
        4. On error: rolls back and re-raises
        5. Always: closes the session (returns the connection to the pool)
        """
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create(self, text_value: str, is_palindrome: bool) -> Word:
        """
        Insert a new word.

        Args:
            text_value: The word exactly as submitted
            is_palindrome: Result of the predicate for `text_value`

        Returns:
            The stored Word including its assigned id

        Raises:
            StorageError: the insert could not be performed
        """
        word = Word(word=text_value, palindrome=is_palindrome)
        try:
            async with self._session() as session:
                session.add(word)
                await session.flush()  # assigns the id
        except (SQLAlchemyError, OSError) as e:
            logger.error("Failed to save word %r: %s", text_value, e)
            raise StorageError(
                message=SAVE_FAILED,
                context={"word": text_value, "original_error": type(e).__name__},
            ) from e

        logger.info("Saved word id=%s palindrome=%s", word.id, word.palindrome)
        return word

    async def list_all(self) -> List[Word]:
        """
        Return every stored word ordered by id (insertion order).

        Raises:
            StorageError: the select could not be performed
        """
        try:
            async with self._session() as session:
                result = await session.execute(select(Word).order_by(Word.id))
                words = list(result.scalars().all())
        except (SQLAlchemyError, OSError) as e:
            logger.error("Failed to fetch words: %s", e)
            raise StorageError(
                message=FETCH_FAILED,
                context={"original_error": type(e).__name__},
            ) from e

        logger.debug("Fetched %d words", len(words))
        return words

    async def delete_by_id(self, word_id: int) -> bool:
        """
        Delete the word with the given id.

        Deleting an id that does not exist succeeds as a no-op; the return
        value tells the caller whether a row was actually removed.

        Returns:
            True if a row was deleted, False if none matched

        Raises:
            StorageError: the delete statement could not be executed
        """
        try:
            async with self._session() as session:
                result = await session.execute(
                    delete(Word)
                    .where(Word.id == word_id)
                    .execution_options(synchronize_session=False)
                )
                deleted = result.rowcount > 0
        except (SQLAlchemyError, OSError) as e:
            logger.error("Failed to delete word id=%s: %s", word_id, e)
            raise StorageError(
                message=DELETE_FAILED,
                context={"word_id": word_id, "original_error": type(e).__name__},
            ) from e

        if deleted:
            logger.info("Deleted word id=%s", word_id)
        else:
            logger.info("Delete requested for missing word id=%s", word_id)
        return deleted

    async def ping(self) -> bool:
        """Return True when a trivial query succeeds; never raises."""
        try:
            async with self._session() as session:
                await session.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            logger.warning("Database unreachable: %s", e)
            return False
        return True


# ── Store Dependency ──────────────────────────────────────────────────────
def get_word_store(request: Request) -> WordStore:
    """
    FastAPI dependency returning the store attached to the running app.

    Example usage in a route:
        @router.get("/words")
        async def list_words(store: WordStore = Depends(get_word_store)):
            return await store.list_all()
    """
    return request.app.state.word_store
