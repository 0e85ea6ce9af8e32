"""HTTP API routers for the word counter service."""

from word_counter.api.health import router as health_router
from word_counter.api.words import get_word_counter, words_router

__all__ = ["get_word_counter", "health_router", "words_router"]
