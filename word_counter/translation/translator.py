"""
Translation capability contract and offline implementations.

A translator answers one question: what is `text` in `target_language`,
assuming it is written in `source_language`? Implementations return None
when they have no answer and raise TranslationError when the call itself
failed. The resolver treats both the same way and moves on.

Implementations:
- MyMemoryTranslator (word_counter.translation.mymemory): live HTTP client
- OfflineTranslator: never translates, for static-only deployments
- FakeTranslator: deterministic test double that records every call
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from word_counter.core.exceptions import TranslationError

# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True, slots=True)
class TranslationResult:
    """A single translation answer from a provider.

    Attributes:
        translated_text: The provider's translation
        confidence: Provider match score (0.0 to 1.0)
        source_language: Language code the text was read as
        target_language: Language code the text was translated into
    """

    translated_text: str
    confidence: float
    source_language: str
    target_language: str


# =============================================================================
# Protocol
# =============================================================================


@runtime_checkable
class TranslatorProtocol(Protocol):
    """Protocol for translation providers.

    Enables dependency injection and test doubles.
    """

    def translate(
        self, text: str, source_language: str, target_language: str
    ) -> TranslationResult | None:
        """Translate text between two languages.

        Args:
            text: Text to translate
            source_language: Language code of text (e.g. "es")
            target_language: Language code to translate into (e.g. "en")

        Returns:
            TranslationResult, or None if the provider has no translation

        Raises:
            TranslationError: If the provider call failed
        """
        ...


# =============================================================================
# Offline Implementation
# =============================================================================


class OfflineTranslator:
    """Translator that never produces a translation.

    Used when remote translation is disabled, so resolution goes straight
    to the static dictionary.
    """

    def translate(
        self, text: str, source_language: str, target_language: str
    ) -> TranslationResult | None:
        return None


# =============================================================================
# Test Double
# =============================================================================


class FakeTranslator:
    """Fake translator for testing.

    Returns pre-configured results keyed by (text, source_language) without
    making HTTP requests, and records every call it receives.

    Usage:
        fake = FakeTranslator(responses={
            ("hund", "de"): TranslationResult("dog", 0.95, "de", "en"),
        })
        fake.translate("hund", "de", "en")
        assert fake.calls == [("hund", "de", "en")]
    """

    def __init__(
        self,
        responses: Mapping[tuple[str, str], TranslationResult] | None = None,
        error: TranslationError | None = None,
        failing_languages: frozenset[str] | set[str] | None = None,
    ) -> None:
        """Initialize with pre-configured responses.

        Args:
            responses: Dict mapping (text, source_language) to results
            error: Optional error to raise on every call
            failing_languages: Source languages whose calls raise TranslationError
        """
        self._responses: dict[tuple[str, str], TranslationResult] = (
            dict(responses) if responses else {}
        )
        self._error = error
        self._failing_languages = frozenset(failing_languages or ())
        self._lock = threading.Lock()
        self.calls: list[tuple[str, str, str]] = []

    def translate(
        self, text: str, source_language: str, target_language: str
    ) -> TranslationResult | None:
        """Return the configured result for (text, source_language).

        Raises:
            TranslationError: If an error or failing language was configured
        """
        with self._lock:
            self.calls.append((text, source_language, target_language))

        if self._error:
            raise self._error

        if source_language in self._failing_languages:
            msg = f"Simulated failure translating '{text}' from {source_language}"
            raise TranslationError(msg)

        return self._responses.get((text, source_language))

    def calls_for(self, text: str) -> list[tuple[str, str, str]]:
        """Return the recorded calls for one text."""
        with self._lock:
            return [call for call in self.calls if call[0] == text]
