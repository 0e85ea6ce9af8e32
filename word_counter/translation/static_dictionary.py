"""
Static Dictionary - offline seed translations.

This module provides O(1) lookup of known foreign words to their canonical
English form. It is the third tier of the resolution pipeline, consulted
only after the cache and the remote translator have produced nothing.

The seed file is YAML keyed by source language:

    es:
      flor: flower
    de:
      blume: flower

Languages are merged in file order, so a homograph listed under two
languages keeps the last mapping.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Final

import yaml  # type: ignore[import-untyped]

from word_counter.core.exceptions import StaticDictionaryError

# =============================================================================
# Constants
# =============================================================================

DEFAULT_SEED_PATH: Final[Path] = (
    Path(__file__).parent / "data" / "static_translations.yaml"
)


# =============================================================================
# Static Dictionary
# =============================================================================


class StaticDictionary:
    """
    Mapping of foreign words to canonical English words.

    Keys and values are stored trimmed and lowercased. Writes go through
    add(); reads never mutate.

    Example:
        >>> dictionary = StaticDictionary.from_yaml()
        >>> dictionary.get("Blume")
        'flower'
        >>> "flor" in dictionary
        True
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        """
        Initialize from a flat word -> canonical mapping.

        Args:
            entries: Initial translations. Keys and values are normalized.
        """
        self._entries: dict[str, str] = {}
        for foreign, english in (entries or {}).items():
            self.add(foreign, english)

    @classmethod
    def from_yaml(cls, seed_path: Path | None = None) -> StaticDictionary:
        """
        Load the dictionary from a per-language YAML seed file.

        Args:
            seed_path: Path to the seed file. Uses the bundled seed if None.

        Returns:
            Populated StaticDictionary.

        Raises:
            StaticDictionaryError: If the file is missing, is not valid YAML,
                or is not a mapping of language -> {word: translation}.
        """
        path = seed_path or DEFAULT_SEED_PATH
        if not path.exists():
            msg = f"Static translation file not found: {path}"
            raise StaticDictionaryError(msg)

        try:
            with path.open("r", encoding="utf-8") as f:
                raw_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            msg = f"Invalid YAML in static translation file: {e}"
            raise StaticDictionaryError(msg) from e

        if not isinstance(raw_data, dict):
            msg = f"Static translation file must be a mapping of languages: {path}"
            raise StaticDictionaryError(msg)

        dictionary = cls()
        for language, words in raw_data.items():
            if not isinstance(words, dict):
                msg = f"Translations for language '{language}' must be a mapping"
                raise StaticDictionaryError(msg)
            # YAML parses words like "no" or "on" as booleans
            for foreign, english in words.items():
                dictionary.add(str(foreign), str(english))
        return dictionary

    def get(self, word: str) -> str | None:
        """Return the canonical form for word, or None if unknown."""
        return self._entries.get(word.strip().lower())

    def add(self, foreign_word: str, english_word: str) -> None:
        """Insert or overwrite a translation."""
        self._entries[foreign_word.strip().lower()] = english_word.strip().lower()

    def __len__(self) -> int:
        """Return the number of translations."""
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.get(word) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(dict(self._entries))
