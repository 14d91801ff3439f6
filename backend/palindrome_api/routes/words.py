"""
Palindrome API — Stored Words Route Handlers
=============================================

What:  GET /words (list every stored word) and DELETE /words/{id}.
How:   Delegate to the injected WordStore; StorageError propagates to the
       global handler, which answers 500 with the operation's fixed message.
"""

import logging

from fastapi import APIRouter, Depends, Path

from palindrome_api.exceptions import StorageError
from palindrome_api.schemas.word import (
    ErrorResponse,
    MessageResponse,
    WordListResponse,
    WordResponse,
)
from palindrome_api.services.word_store import DELETE_FAILED, WordStore, get_word_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Words"])


@router.get(
    "/words",
    response_model=WordListResponse,
    responses={500: {"description": "Storage failure", "model": ErrorResponse}},
    summary="List every stored word",
)
async def list_words(
    store: WordStore = Depends(get_word_store),
) -> WordListResponse:
    words = await store.list_all()
    return WordListResponse(words=[WordResponse.model_validate(w) for w in words])


@router.delete(
    "/words/{word_id}",
    response_model=MessageResponse,
    responses={
        500: {"description": "Storage failure or non-integer id", "model": ErrorResponse},
    },
    summary="Delete a stored word by id",
    description=(
        "Deleting an id that does not exist also reports success. "
        "An id that is not an integer cannot be deleted and fails with 500."
    ),
)
async def delete_word(
    word_id: str = Path(description="Identifier of the word to delete"),
    store: WordStore = Depends(get_word_store),
) -> MessageResponse:
    try:
        parsed_id = int(word_id)
    except ValueError:
        logger.warning("Delete requested for non-integer id %r", word_id)
        raise StorageError(message=DELETE_FAILED, context={"word_id": word_id})

    await store.delete_by_id(parsed_id)
    return MessageResponse(message="Word deleted successfully")
