"""Concurrent word counting by canonical form."""

from word_counter.counting.count_table import DEFAULT_SHARD_COUNT, ShardedCountTable
from word_counter.counting.counter import WordCounter, WordCounterProtocol

__all__ = [
    "DEFAULT_SHARD_COUNT",
    "ShardedCountTable",
    "WordCounter",
    "WordCounterProtocol",
]
