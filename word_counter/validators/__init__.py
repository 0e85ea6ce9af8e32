"""Validators package for the word counter."""

from word_counter.validators.word_validator import (
    REASON_EMPTY,
    REASON_NON_ALPHABETIC,
    InvalidWord,
    check_word,
    is_valid_word,
    normalize_word,
    validate_word,
)

__all__ = [
    "InvalidWord",
    "REASON_EMPTY",
    "REASON_NON_ALPHABETIC",
    "check_word",
    "is_valid_word",
    "normalize_word",
    "validate_word",
]
