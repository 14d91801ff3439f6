"""
Palindrome API — Palindrome Check & Save Route Handlers
========================================================

What:  GET /ispalindrome (stateless check) and POST /savepalindrome
       (check and persist).
How:   Read the `word` query parameter, run the predicate, and for the save
       endpoint hand the result to the injected WordStore.
"""

import logging

from fastapi import APIRouter, Depends, Query

from palindrome_api.exceptions import ValidationError
from palindrome_api.schemas.word import CheckResponse, ErrorResponse, SaveResponse
from palindrome_api.services.palindrome import is_palindrome
from palindrome_api.services.word_store import WordStore, get_word_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Palindrome"])


@router.get(
    "/ispalindrome",
    response_model=CheckResponse,
    summary="Check whether a word is a palindrome",
    description=(
        "Ignores every non-letter character and letter case. A missing `word` "
        "is treated as the empty string, which is a palindrome. Nothing is stored."
    ),
)
async def check_palindrome(
    word: str = Query(default="", description="Text to check"),
) -> CheckResponse:
    return CheckResponse(message=is_palindrome(word))


@router.post(
    "/savepalindrome",
    response_model=SaveResponse,
    responses={
        400: {"description": "Missing word", "model": ErrorResponse},
        500: {"description": "Storage failure", "model": ErrorResponse},
    },
    summary="Check a word and store the result",
)
async def save_palindrome(
    word: str = Query(default="", description="Text to check and store"),
    store: WordStore = Depends(get_word_store),
) -> SaveResponse:
    """
    Check `word` and persist it with its palindrome flag.

    Errors:
        400 when `word` is absent or empty
        500 when the store cannot save the record
    """
    if word == "":
        raise ValidationError(message="Word query parameter is required", field="word")

    saved = await store.create(word, is_palindrome(word))
    return SaveResponse(
        message="Word saved successfully",
        word=saved.word,
        palindrome=saved.palindrome,
    )
