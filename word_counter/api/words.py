"""
Word Counter API Endpoints

POST /api/wordcounter/words           - Count one word
POST /api/wordcounter/words/batch     - Count several words, in order
GET  /api/wordcounter/words/{w}/count - Read the count for a word
GET  /api/wordcounter/stats           - Totals
POST /api/wordcounter/reset           - Forget every count

Invalid words map to 400 with the offending input echoed back exactly as
sent; anything else unexpected maps to 500.

Patterns Applied:
- FastAPI router with Pydantic request/response models
- Dependency injection via get_word_counter() for easy testing
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from word_counter.core.exceptions import InvalidWordError
from word_counter.core.logging import get_logger
from word_counter.counting.counter import WordCounter
from word_counter.factory import build_word_counter

logger = get_logger(__name__)

# =============================================================================
# Constants
# =============================================================================

API_PREFIX = "/api/wordcounter"
WORDS_TAG = "words"

ERROR_EMPTY_BATCH = "Word list cannot be null or empty"
ERROR_INTERNAL = "Internal server error"
ERROR_COUNT = "Error retrieving word count"
ERROR_STATS = "Error retrieving statistics"
ERROR_RESET = "Error resetting counter"
MESSAGE_WORD_ADDED = "Word added successfully"
MESSAGE_RESET = "Word counter reset successfully"


# =============================================================================
# Request/Response Models (Pydantic)
# =============================================================================


class AddWordRequest(BaseModel):
    """Request body for counting one word."""

    word: str | None = Field(
        default=None,
        description="The word to count",
        examples=["flower", "flor", "Blume"],
    )


class AddWordsRequest(BaseModel):
    """Request body for counting several words."""

    words: list[str | None] | None = Field(
        default=None,
        description="Words to count, processed in order",
        examples=[["flor", "blume", "fiore"]],
    )


class AddWordResponse(BaseModel):
    success: bool
    message: str
    word: str | None
    total_words: int


class AddWordsResponse(BaseModel):
    success: bool
    message: str
    words_added: int
    total_words: int


class WordCountResponse(BaseModel):
    success: bool
    word: str
    count: int


class StatsResponse(BaseModel):
    success: bool
    total_words: int
    unique_words: int
    is_empty: bool


class ResetResponse(BaseModel):
    success: bool
    message: str
    total_words: int


# =============================================================================
# Dependency Injection
# =============================================================================


@lru_cache(maxsize=1)
def get_word_counter() -> WordCounter:
    """Dependency provider for the process-wide WordCounter.

    Built lazily from settings on first use. Tests replace it through
    app.dependency_overrides.
    """
    return build_word_counter()


CounterDep = Annotated[WordCounter, Depends(get_word_counter)]


# =============================================================================
# Error Responses
# =============================================================================


def _invalid_word_response(error: InvalidWordError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "error": error.message,
            "invalid_word": error.invalid_word,
        },
    )


def _server_error_response(prefix: str, error: Exception) -> JSONResponse:
    logger.exception("request_failed", detail=prefix)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "error": f"{prefix}: {error}"},
    )


# =============================================================================
# Router Definition
# =============================================================================


words_router = APIRouter(prefix=API_PREFIX, tags=[WORDS_TAG])


@words_router.post(
    "/words",
    response_model=AddWordResponse,
    responses={400: {"description": "Invalid word"}},
)
def add_word(request: AddWordRequest, counter: CounterDep) -> Any:
    """Count one word under its canonical form."""
    try:
        counter.add_word(request.word)
    except InvalidWordError as e:
        return _invalid_word_response(e)
    except Exception as e:
        return _server_error_response(ERROR_INTERNAL, e)

    return AddWordResponse(
        success=True,
        message=MESSAGE_WORD_ADDED,
        word=request.word,
        total_words=counter.get_total_words(),
    )


@words_router.post(
    "/words/batch",
    response_model=AddWordsResponse,
    responses={400: {"description": "Empty list or invalid word"}},
)
def add_words(request: AddWordsRequest, counter: CounterDep) -> Any:
    """Count words in order, stopping at the first invalid one.

    Words before the invalid one remain counted.
    """
    if not request.words:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "error": ERROR_EMPTY_BATCH},
        )

    try:
        counter.add_words(request.words)
    except InvalidWordError as e:
        return _invalid_word_response(e)
    except Exception as e:
        return _server_error_response(ERROR_INTERNAL, e)

    return AddWordsResponse(
        success=True,
        message=f"{len(request.words)} words added successfully",
        words_added=len(request.words),
        total_words=counter.get_total_words(),
    )


@words_router.get("/words/{word}/count", response_model=WordCountResponse)
def get_word_count(word: str, counter: CounterDep) -> Any:
    """Return the count for the canonical form of word."""
    try:
        count = counter.get_count(word)
    except Exception as e:
        return _server_error_response(ERROR_COUNT, e)

    return WordCountResponse(success=True, word=word, count=count)


@words_router.get("/stats", response_model=StatsResponse)
def get_stats(counter: CounterDep) -> Any:
    try:
        return StatsResponse(
            success=True,
            total_words=counter.get_total_words(),
            unique_words=counter.get_unique_word_count(),
            is_empty=counter.is_empty(),
        )
    except Exception as e:
        return _server_error_response(ERROR_STATS, e)


@words_router.post("/reset", response_model=ResetResponse)
def reset(counter: CounterDep) -> Any:
    try:
        counter.reset()
    except Exception as e:
        return _server_error_response(ERROR_RESET, e)

    return ResetResponse(
        success=True,
        message=MESSAGE_RESET,
        total_words=counter.get_total_words(),
    )
