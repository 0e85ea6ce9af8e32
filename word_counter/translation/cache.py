"""In-memory word -> canonical form cache for the resolver."""

from __future__ import annotations


class ResolutionCache:
    """Memoized resolutions, keyed by normalized word.

    Lock-free. Each put() is a single dict assignment; concurrent
    resolutions of the same word overwrite each other, last write wins.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}

    def get(self, word: str) -> str | None:
        return self._entries.get(word)

    def put(self, word: str, canonical_form: str) -> None:
        self._entries[word] = canonical_form

    def clear(self) -> None:
        self._entries.clear()

    def items(self) -> list[tuple[str, str]]:
        """Snapshot of the cached pairs."""
        return list(self._entries.copy().items())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return word in self._entries
