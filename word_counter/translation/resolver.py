"""
Tiered Resolver - canonicalization engine.

This module turns a normalized word into the canonical key it is counted
under, trying four tiers in order and stopping at the first answer:

1. Cache: previously resolved words, no I/O
2. Remote: translator queried once per candidate source language, first
   confident and plausible English answer wins
3. Static: seed dictionary of known foreign words
4. Identity: the word itself

Every answer, identity included, is cached before it is returned, so a
word costs at most one remote sweep per resolver lifetime.

Pattern: Pipeline / Chain of Responsibility
- Remote failures never escape; the cascade just moves on
- Dependency injection for translator, dictionary and cache
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Any, Final, Protocol, runtime_checkable

from word_counter.core.config import DEFAULT_SOURCE_LANGUAGES
from word_counter.core.exceptions import TranslationError
from word_counter.core.logging import get_logger
from word_counter.core.tracing import (
    record_remote_attempt,
    record_remote_match,
    remote_lookup_span,
)
from word_counter.translation.cache import ResolutionCache
from word_counter.translation.static_dictionary import StaticDictionary
from word_counter.translation.surface_filter import check_candidate
from word_counter.translation.translator import (
    TranslationResult,
    TranslatorProtocol,
)

logger = get_logger(__name__)

# =============================================================================
# Constants
# =============================================================================

CONFIDENCE_THRESHOLD: Final[float] = 0.7
DEFAULT_TARGET_LANGUAGE: Final[str] = "en"
DEFAULT_MAX_WORKERS: Final[int] = 8

# Tier identifiers
TIER_CACHE: Final[str] = "cache"
TIER_REMOTE: Final[str] = "remote"
TIER_STATIC: Final[str] = "static"
TIER_IDENTITY: Final[str] = "identity"

# Remote candidate rejection reasons
REJECT_LOW_CONFIDENCE: Final[str] = "low_confidence"
REJECT_UNCHANGED: Final[str] = "unchanged"


# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of resolving one word.

    Attributes:
        word: The word that was resolved
        canonical_form: The key the word is counted under
        tier: Which tier produced the answer (cache, remote, static, identity)
    """

    word: str
    canonical_form: str
    tier: str


@dataclass(frozen=True, slots=True)
class ResolverStats:
    """Snapshot of resolver state.

    Attributes:
        cache_size: Number of cached resolutions
        static_translations: Number of static dictionary entries
        successful_translations: Cached resolutions that changed the word
    """

    cache_size: int
    static_translations: int
    successful_translations: int


# =============================================================================
# Protocol
# =============================================================================


@runtime_checkable
class ResolverProtocol(Protocol):
    """Protocol for resolver implementations.

    Enables dependency injection and test doubles.
    """

    def resolve(self, word: str) -> str:
        """Resolve a normalized word to its canonical form."""
        ...

    def is_available(self, word: str | None) -> bool:
        """Report whether a non-identity mapping is already known."""
        ...

    def resolve_batch(self, words: Iterable[str]) -> dict[str, str]:
        """Resolve many words, one entry per distinct word."""
        ...

    def add_custom_translation(
        self, foreign_word: str | None, english_word: str | None
    ) -> None:
        """Register a translation ahead of any lookup."""
        ...


# =============================================================================
# Main Implementation
# =============================================================================


class TieredResolver:
    """Resolves words through the cache -> remote -> static -> identity cascade.

    resolve() never raises and never blocks longer than one translator
    timeout per configured source language.

    Example:
        resolver = TieredResolver(
            translator=MyMemoryTranslator(),
            static_dictionary=StaticDictionary.from_yaml(),
        )
        resolver.resolve("blume")  # 'flower'
    """

    __slots__ = (
        "_translator",
        "_static_dictionary",
        "_cache",
        "_source_languages",
        "_target_language",
        "_confidence_threshold",
        "_max_workers",
        "_tracer",
    )

    def __init__(
        self,
        translator: TranslatorProtocol,
        static_dictionary: StaticDictionary | None = None,
        cache: ResolutionCache | None = None,
        *,
        source_languages: Sequence[str] = DEFAULT_SOURCE_LANGUAGES,
        target_language: str = DEFAULT_TARGET_LANGUAGE,
        confidence_threshold: float = CONFIDENCE_THRESHOLD,
        max_workers: int = DEFAULT_MAX_WORKERS,
        tracer: Any = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            translator: Remote translation capability (tier 2)
            static_dictionary: Seed translations (tier 3). Loads the bundled
                seed file if None.
            cache: Resolution cache (tier 1). A fresh cache if None.
            source_languages: Languages tried in order for remote lookups
            target_language: Language canonical forms are expressed in
            confidence_threshold: Remote answers must score above this
            max_workers: Thread pool size for resolve_batch()
            tracer: OpenTelemetry tracer for remote lookup spans. The global
                provider's tracer if None.
        """
        self._translator = translator
        self._static_dictionary = (
            static_dictionary
            if static_dictionary is not None
            else StaticDictionary.from_yaml()
        )
        self._cache = cache if cache is not None else ResolutionCache()
        self._source_languages = tuple(source_languages)
        self._target_language = target_language
        self._confidence_threshold = confidence_threshold
        self._max_workers = max_workers
        self._tracer = tracer

    @property
    def static_dictionary(self) -> StaticDictionary:
        return self._static_dictionary

    @property
    def cache(self) -> ResolutionCache:
        return self._cache

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def resolve(self, word: str) -> str:
        """Resolve a normalized word to its canonical form.

        Args:
            word: Lowercase, trimmed word

        Returns:
            The canonical form. Empty input is returned unchanged.
        """
        return self.resolve_detailed(word).canonical_form

    def resolve_detailed(self, word: str) -> Resolution:
        """Resolve a word and report which tier answered.

        Args:
            word: Lowercase, trimmed word

        Returns:
            Resolution with the canonical form and the tier used
        """
        if not word:
            return Resolution(word=word, canonical_form=word, tier=TIER_IDENTITY)

        # Tier 1: Cache
        cached = self._cache.get(word)
        if cached is not None:
            logger.debug("resolution_cache_hit", word=word, canonical_form=cached)
            return Resolution(word=word, canonical_form=cached, tier=TIER_CACHE)

        # Tier 2: Remote translation
        canonical = self._check_remote(word)
        tier = TIER_REMOTE

        # Tier 3: Static dictionary
        if canonical is None:
            canonical = self._static_dictionary.get(word)
            tier = TIER_STATIC

        # Tier 4: Identity
        if canonical is None:
            canonical = word
            tier = TIER_IDENTITY

        self._cache.put(word, canonical)
        logger.debug("word_resolved", word=word, canonical_form=canonical, tier=tier)
        return Resolution(word=word, canonical_form=canonical, tier=tier)

    def _check_remote(self, word: str) -> str | None:
        """Try each source language until one yields an acceptable answer.

        Returns:
            Lowercased translation, or None to continue the cascade
        """
        with remote_lookup_span(
            word, self._target_language, tracer=self._tracer
        ) as span:
            for attempt, language in enumerate(self._source_languages, start=1):
                record_remote_attempt(span, attempt)
                try:
                    result = self._translator.translate(
                        word, language, self._target_language
                    )
                except TranslationError as e:
                    logger.warning(
                        "translation_failed",
                        word=word,
                        source_language=language,
                        error=str(e),
                    )
                    continue
                except Exception as e:
                    logger.warning(
                        "translation_failed",
                        word=word,
                        source_language=language,
                        error=str(e),
                        exc_info=True,
                    )
                    continue

                candidate = self._accept(word, result)
                if candidate is not None:
                    record_remote_match(span, language, candidate)
                    logger.info(
                        "remote_translation_accepted",
                        word=word,
                        source_language=language,
                        canonical_form=candidate,
                    )
                    return candidate
            return None

    def _accept(self, word: str, result: TranslationResult | None) -> str | None:
        """Apply the confidence and surface checks to one provider answer."""
        if result is None:
            return None

        candidate = result.translated_text.strip()
        reason: str | None = None
        if result.confidence <= self._confidence_threshold:
            reason = REJECT_LOW_CONFIDENCE
        elif candidate.lower() == word.lower():
            reason = REJECT_UNCHANGED
        else:
            rejected = check_candidate(candidate)
            if rejected is not None:
                reason = rejected.rejection_reason

        if reason is not None:
            logger.debug(
                "remote_translation_rejected",
                word=word,
                source_language=result.source_language,
                candidate=candidate,
                reason=reason,
            )
            return None

        return candidate.lower()

    def resolve_batch(self, words: Iterable[str]) -> dict[str, str]:
        """Resolve many words concurrently.

        Duplicates collapse to one entry. Completion order is unspecified.

        Args:
            words: Normalized words

        Returns:
            Dict mapping each distinct word to its canonical form
        """
        unique_words = list(dict.fromkeys(words))
        if not unique_words:
            return {}

        results: dict[str, str] = {}
        workers = min(self._max_workers, len(unique_words))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {executor.submit(self.resolve, word): word for word in unique_words}
            for future in as_completed(futures):
                results[futures[future]] = future.result()
        return results

    # -------------------------------------------------------------------------
    # Inspection and maintenance
    # -------------------------------------------------------------------------

    def is_available(self, word: str | None) -> bool:
        """Report whether a non-identity mapping is already known for word.

        Only the cache and the static dictionary are consulted; the
        translator is never called, so words that only the remote service
        could translate report False until they have been resolved once.
        """
        if word is None:
            return False

        normalized = word.strip().lower()
        cached = self._cache.get(normalized)
        if cached is not None:
            return cached != normalized

        known = self._static_dictionary.get(normalized)
        return known is not None and known != normalized

    def add_custom_translation(
        self, foreign_word: str | None, english_word: str | None
    ) -> None:
        """Register a translation in both the static dictionary and the cache.

        No-op if either argument is None.
        """
        if foreign_word is None or english_word is None:
            return

        foreign = foreign_word.strip().lower()
        english = english_word.strip().lower()
        self._static_dictionary.add(foreign, english)
        self._cache.put(foreign, english)
        logger.info("custom_translation_added", word=foreign, canonical_form=english)

    def clear_cache(self) -> None:
        self._cache.clear()

    def cache_size(self) -> int:
        return len(self._cache)

    def get_stats(self) -> ResolverStats:
        """Return cache and dictionary sizes.

        Returns:
            ResolverStats snapshot
        """
        entries = self._cache.items()
        return ResolverStats(
            cache_size=len(entries),
            static_translations=len(self._static_dictionary),
            successful_translations=sum(
                1 for word, canonical in entries if word != canonical
            ),
        )


# =============================================================================
# Test Double
# =============================================================================


class FakeResolver:
    """Fake resolver for testing.

    Maps words through a fixed dictionary, falling back to identity, and
    records every resolve() call.

    Usage:
        fake = FakeResolver(mapping={"flor": "flower"})
        fake.resolve("flor")  # 'flower'
    """

    def __init__(self, mapping: Mapping[str, str] | None = None) -> None:
        self._mapping: dict[str, str] = dict(mapping) if mapping else {}
        self._lock = threading.Lock()
        self.calls: list[str] = []

    def resolve(self, word: str) -> str:
        with self._lock:
            self.calls.append(word)
        return self._mapping.get(word, word)

    def is_available(self, word: str | None) -> bool:
        if word is None:
            return False
        normalized = word.strip().lower()
        return self._mapping.get(normalized, normalized) != normalized

    def resolve_batch(self, words: Iterable[str]) -> dict[str, str]:
        return {word: self.resolve(word) for word in words}

    def add_custom_translation(
        self, foreign_word: str | None, english_word: str | None
    ) -> None:
        if foreign_word is None or english_word is None:
            return
        self._mapping[foreign_word.strip().lower()] = english_word.strip().lower()
