"""
Word Counter - validated, translation-aware word counting.

Every word passes through validate -> normalize -> resolve before it is
counted under its canonical form, so translations of one concept share a
single counter:

    counter.add_word("flor")
    counter.add_word("Blume")
    counter.get_count("flower")  # 2

All operations are safe to call from many threads at once.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, cast, runtime_checkable

from word_counter.core.exceptions import InvalidWordError
from word_counter.core.logging import counting_context, get_logger
from word_counter.counting.count_table import DEFAULT_SHARD_COUNT, ShardedCountTable
from word_counter.translation.resolver import ResolverProtocol
from word_counter.validators.word_validator import normalize_word, validate_word

logger = get_logger(__name__)

ERROR_WORD_LIST_NULL = "Word list cannot be null"


# =============================================================================
# Protocol
# =============================================================================


@runtime_checkable
class WordCounterProtocol(Protocol):
    """Protocol for word counter implementations.

    This is the surface consumed by the HTTP layer.
    """

    def add_word(self, word: str | None) -> None:
        """Count one word.

        Raises:
            InvalidWordError: If the word is not a single alphabetic token
        """
        ...

    def add_words(self, words: Iterable[str | None] | None) -> None:
        """Count words in order, stopping at the first invalid one.

        Raises:
            InvalidWordError: For the first invalid word, or if words is None
        """
        ...

    def get_count(self, word: str | None) -> int:
        """Return the count for the word's canonical form."""
        ...

    def reset(self) -> None:
        """Forget every count."""
        ...

    def get_total_words(self) -> int:
        """Return the number of words counted since the last reset."""
        ...


# =============================================================================
# Main Implementation
# =============================================================================


class WordCounter:
    """Counts words by canonical form.

    The resolver is fixed for the counter's lifetime; swap it by building a
    new counter (e.g. with a FakeResolver in tests).

    Example:
        counter = WordCounter(resolver=TieredResolver(OfflineTranslator()))
        counter.add_words(["flor", "blume", "fiore"])
        counter.get_count("flower")  # 3
    """

    __slots__ = ("_resolver", "_counts")

    def __init__(
        self,
        resolver: ResolverProtocol,
        shard_count: int = DEFAULT_SHARD_COUNT,
    ) -> None:
        """Initialize an empty counter.

        Args:
            resolver: Maps normalized words to canonical forms
            shard_count: Number of lock shards in the count table
        """
        self._resolver = resolver
        self._counts = ShardedCountTable(shard_count=shard_count)

    @property
    def resolver(self) -> ResolverProtocol:
        return self._resolver

    def add_word(self, word: str | None) -> None:
        """Validate, resolve and count one word.

        Nothing is counted if validation fails.

        Args:
            word: Raw caller input

        Raises:
            InvalidWordError: If the word is None, blank, or not alphabetic
        """
        validate_word(word)

        normalized = cast(str, normalize_word(word))
        with counting_context(normalized):
            canonical = self._resolver.resolve(normalized)
            count = self._counts.increment(canonical)
            logger.debug("word_added", canonical_form=canonical, count=count)

    def add_words(self, words: Iterable[str | None] | None) -> None:
        """Count words in order.

        Stops at the first invalid word and re-raises its error; words
        before it stay counted.

        Args:
            words: Raw caller inputs

        Raises:
            InvalidWordError: For the first invalid word, or if words is None
        """
        if words is None:
            raise InvalidWordError(ERROR_WORD_LIST_NULL, None)

        # A bare string is one word, not a sequence of letters
        if isinstance(words, str):
            words = [words]

        for word in words:
            self.add_word(word)

    def get_count(self, word: str | None) -> int:
        """Return the count for the canonical form of word.

        May trigger a resolution (and a remote lookup) for uncached words.

        Args:
            word: Raw caller input

        Returns:
            Current count, 0 for unseen words or None
        """
        normalized = normalize_word(word)
        if not normalized:
            return 0

        return self._counts.get(self._resolver.resolve(normalized))

    def reset(self) -> None:
        """Clear every count and the total."""
        self._counts.clear()
        logger.info("counter_reset")

    def get_total_words(self) -> int:
        return self._counts.total()

    def get_unique_word_count(self) -> int:
        """Return the number of distinct canonical forms counted."""
        return len(self._counts)

    def is_empty(self) -> bool:
        return self._counts.total() == 0

    def get_counts(self) -> dict[str, int]:
        """Return a copy of every canonical form and its count."""
        return self._counts.snapshot()
