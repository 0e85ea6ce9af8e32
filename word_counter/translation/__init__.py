"""Translation components for the word resolution pipeline."""
from word_counter.translation.cache import ResolutionCache
from word_counter.translation.mymemory import MyMemoryTranslator
from word_counter.translation.resolver import (
    CONFIDENCE_THRESHOLD,
    TIER_CACHE,
    TIER_IDENTITY,
    TIER_REMOTE,
    TIER_STATIC,
    FakeResolver,
    Resolution,
    ResolverProtocol,
    ResolverStats,
    TieredResolver,
)
from word_counter.translation.static_dictionary import StaticDictionary
from word_counter.translation.surface_filter import (
    SurfaceFilterResult,
    check_candidate,
    is_plausible_english,
)
from word_counter.translation.translator import (
    FakeTranslator,
    OfflineTranslator,
    TranslationResult,
    TranslatorProtocol,
)

__all__ = [
    "CONFIDENCE_THRESHOLD",
    "FakeResolver",
    "FakeTranslator",
    "MyMemoryTranslator",
    "OfflineTranslator",
    "Resolution",
    "ResolutionCache",
    "ResolverProtocol",
    "ResolverStats",
    "StaticDictionary",
    "SurfaceFilterResult",
    "TIER_CACHE",
    "TIER_IDENTITY",
    "TIER_REMOTE",
    "TIER_STATIC",
    "TieredResolver",
    "TranslationResult",
    "TranslatorProtocol",
    "check_candidate",
    "is_plausible_english",
]
