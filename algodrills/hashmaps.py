"""Two integer-keyed hash maps: a fixed array of buckets and a chained, growing table."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class Pair:
    """A key and the value stored under it."""

    key: int
    value: str


class ArrayHashMap:
    """Hash map with one slot per bucket; a key landing in a taken bucket replaces its pair."""

    BUCKET_COUNT = 100

    def __init__(self) -> None:
        self._buckets: list[Pair | None] = [None] * self.BUCKET_COUNT

    def hash_func(self, key: int) -> int:
        """Bucket index for ``key``."""
        return key % self.BUCKET_COUNT

    def get(self, key: int) -> str:
        """Value held in the bucket ``key`` hashes to.

        Raises KeyError when that bucket is empty.
        """
        pair = self._buckets[self.hash_func(key)]
        if pair is None:
            raise KeyError(key)
        return pair.value

    def put(self, key: int, value: str) -> None:
        """Store ``value`` under ``key``, replacing whatever shared its bucket."""
        self._buckets[self.hash_func(key)] = Pair(key, value)

    def remove(self, key: int) -> None:
        """Empty the bucket ``key`` hashes to; an empty bucket is left as it is."""
        self._buckets[self.hash_func(key)] = None

    def _pairs(self) -> Iterator[Pair]:
        return (pair for pair in self._buckets if pair is not None)

    def pair_set(self) -> list[Pair]:
        """Copies of the stored pairs in bucket order."""
        return [Pair(pair.key, pair.value) for pair in self._pairs()]

    def key_set(self) -> list[int]:
        """Stored keys in bucket order."""
        return [pair.key for pair in self._pairs()]

    def value_set(self) -> list[str]:
        """Stored values in bucket order."""
        return [pair.value for pair in self._pairs()]

    def __len__(self) -> int:
        return sum(1 for _ in self._pairs())

    def __str__(self) -> str:
        return "\n".join(f"{pair.key}->{pair.value}" for pair in self._pairs())


class ChainedHashMap:
    """Hash map with a chain per bucket that doubles its capacity when it fills up."""

    INITIAL_CAPACITY = 4
    LOAD_THRESHOLD = 3 / 4
    EXTEND_RATIO = 2

    def __init__(self) -> None:
        self._size = 0
        self._buckets: list[list[Pair]] = [[] for _ in range(self.INITIAL_CAPACITY)]

    @property
    def capacity(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    def hash_func(self, key: int) -> int:
        """Bucket index for ``key``."""
        return key % self.capacity

    def load_factor(self) -> float:
        """Stored pairs per bucket."""
        return self._size / self.capacity

    def get(self, key: int) -> str:
        """Value stored under ``key``; raises KeyError when it is absent."""
        for pair in self._buckets[self.hash_func(key)]:
            if pair.key == key:
                return pair.value
        raise KeyError(key)

    def put(self, key: int, value: str) -> None:
        """Store ``value`` under ``key``, growing the table first if it is over its load threshold."""
        if self.load_factor() > self.LOAD_THRESHOLD:
            self._extend()
        chain = self._buckets[self.hash_func(key)]
        for pair in chain:
            if pair.key == key:
                pair.value = value
                return
        chain.insert(0, Pair(key, value))
        self._size += 1

    def _extend(self) -> None:
        old = self._buckets
        self._buckets = [[] for _ in range(len(old) * self.EXTEND_RATIO)]
        self._size = 0
        for chain in old:
            for pair in chain:
                self.put(pair.key, pair.value)

    def remove(self, key: int) -> None:
        """Drop ``key`` and its value; an absent key is ignored."""
        chain = self._buckets[self.hash_func(key)]
        for position, pair in enumerate(chain):
            if pair.key == key:
                del chain[position]
                self._size -= 1
                return

    def _pairs(self) -> Iterator[Pair]:
        for chain in self._buckets:
            yield from chain

    def pair_set(self) -> list[Pair]:
        """Copies of the stored pairs, bucket by bucket, newest first within a bucket."""
        return [Pair(pair.key, pair.value) for pair in self._pairs()]

    def key_set(self) -> list[int]:
        """Stored keys in the order of :meth:`pair_set`."""
        return [pair.key for pair in self._pairs()]

    def value_set(self) -> list[str]:
        """Stored values in the order of :meth:`pair_set`."""
        return [pair.value for pair in self._pairs()]

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        blocks = []
        for chain in self._buckets:
            if chain:
                lines = "".join(f"  {pair.key} -> {pair.value}\n" for pair in chain)
                blocks.append(f"[\n{lines}]")
        return "\n".join(blocks)