"""Builds the translator -> resolver -> counter object graph from Settings."""

from __future__ import annotations

from pathlib import Path

from word_counter.core.config import Settings, get_settings
from word_counter.core.logging import get_logger
from word_counter.counting.counter import WordCounter
from word_counter.translation.mymemory import MyMemoryTranslator
from word_counter.translation.resolver import TieredResolver
from word_counter.translation.static_dictionary import StaticDictionary
from word_counter.translation.translator import OfflineTranslator, TranslatorProtocol

logger = get_logger(__name__)


def build_translator(settings: Settings) -> TranslatorProtocol:
    """Return the live translator, or the offline one if translation is disabled."""
    if not settings.translation_enabled:
        return OfflineTranslator()
    return MyMemoryTranslator(
        base_url=settings.translation_base_url,
        timeout=settings.translation_timeout,
    )


def build_resolver(settings: Settings | None = None) -> TieredResolver:
    """Build a TieredResolver configured from settings.

    Args:
        settings: Application settings. Read from the environment if None.

    Returns:
        TieredResolver with its own cache and static dictionary

    Raises:
        StaticDictionaryError: If the configured seed file cannot be loaded
    """
    settings = settings or get_settings()
    seed_path = (
        Path(settings.static_translations_path)
        if settings.static_translations_path
        else None
    )
    static_dictionary = StaticDictionary.from_yaml(seed_path)

    logger.info(
        "resolver_configured",
        translation_enabled=settings.translation_enabled,
        source_languages=settings.source_languages,
        static_translations=len(static_dictionary),
    )

    return TieredResolver(
        translator=build_translator(settings),
        static_dictionary=static_dictionary,
        source_languages=settings.source_languages,
        target_language=settings.target_language,
        confidence_threshold=settings.confidence_threshold,
        max_workers=settings.batch_max_workers,
    )


def build_word_counter(settings: Settings | None = None) -> WordCounter:
    """Build a WordCounter with a resolver configured from settings."""
    settings = settings or get_settings()
    return WordCounter(
        resolver=build_resolver(settings),
        shard_count=settings.count_shards,
    )
