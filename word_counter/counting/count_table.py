"""
Sharded Count Table - concurrent canonical form -> count store.

Keys are spread over a fixed number of shards. Each shard owns a lock, a
dict of counts, and its share of the running total. Every mutation of a
shard (increment or clear) happens under that shard's lock, which gives:

- atomic create-if-absent and no lost increments for a key
- the total always equal to the sum of counts once writers are idle,
  even when a reset raced in-flight increments
- reset never holding more than one shard lock at a time
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Final

DEFAULT_SHARD_COUNT: Final[int] = 16


@dataclass(slots=True)
class _Shard:
    lock: threading.Lock = field(default_factory=threading.Lock)
    counts: dict[str, int] = field(default_factory=dict)
    total: int = 0


class ShardedCountTable:
    """Concurrent counter keyed by canonical form.

    Example:
        >>> table = ShardedCountTable()
        >>> table.increment("flower")
        1
        >>> table.get("flower"), table.total()
        (1, 1)
    """

    __slots__ = ("_shards",)

    def __init__(self, shard_count: int = DEFAULT_SHARD_COUNT) -> None:
        """Initialize an empty table.

        Args:
            shard_count: Number of independently locked shards (>= 1)

        Raises:
            ValueError: If shard_count is less than 1
        """
        if shard_count < 1:
            raise ValueError(f"shard_count must be at least 1, got {shard_count}")
        self._shards: tuple[_Shard, ...] = tuple(_Shard() for _ in range(shard_count))

    def _shard_for(self, key: str) -> _Shard:
        return self._shards[hash(key) % len(self._shards)]

    def increment(self, key: str) -> int:
        """Add one to key's count, creating the entry at zero if absent.

        Returns:
            The count for key after the increment
        """
        shard = self._shard_for(key)
        with shard.lock:
            count = shard.counts.get(key, 0) + 1
            shard.counts[key] = count
            shard.total += 1
        return count

    def get(self, key: str) -> int:
        """Return the current count for key, or 0 if absent."""
        shard = self._shard_for(key)
        with shard.lock:
            return shard.counts.get(key, 0)

    def total(self) -> int:
        """Return the sum of all counts."""
        total = 0
        for shard in self._shards:
            with shard.lock:
                total += shard.total
        return total

    def clear(self) -> None:
        """Remove every entry, one shard at a time."""
        for shard in self._shards:
            with shard.lock:
                shard.counts.clear()
                shard.total = 0

    def snapshot(self) -> dict[str, int]:
        """Return a copy of all counts."""
        merged: dict[str, int] = {}
        for shard in self._shards:
            with shard.lock:
                merged.update(shard.counts)
        return merged

    def __len__(self) -> int:
        """Return the number of distinct keys."""
        size = 0
        for shard in self._shards:
            with shard.lock:
                size += len(shard.counts)
        return size
