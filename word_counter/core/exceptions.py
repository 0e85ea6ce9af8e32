"""
Word Counter Service - Custom Exceptions

All exception classes end with "Error" and do not shadow built-in
exception names. InvalidWordError is the only error core counting
operations surface to callers; TranslationError never escapes the
resolver.
"""

from __future__ import annotations


class WordCounterError(Exception):
    """Base exception for the word counter service.

    All custom exceptions inherit from this base class.
    """

    pass


class InvalidWordError(WordCounterError):
    """
    Raised when a caller submits a word that cannot be counted.

    Attributes:
        message: Human-readable reason for the rejection.
        invalid_word: The input exactly as the caller sent it, surrounding
            whitespace included. None only when the input itself was None.
    """

    def __init__(self, message: str, invalid_word: str | None) -> None:
        """
        Initialize InvalidWordError.

        Args:
            message: Human-readable description of the problem.
            invalid_word: The offending raw input.
        """
        super().__init__(message)
        self.message = message
        self.invalid_word = invalid_word

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message


class TranslationError(WordCounterError):
    """
    Raised when a translation provider call fails.

    This exception is raised in scenarios such as:
    - Timeout when calling the translation service
    - Non-200 status or network errors
    - Malformed response body

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message


class StaticDictionaryError(WordCounterError):
    """Raised when the static translation seed file cannot be loaded."""

    pass
