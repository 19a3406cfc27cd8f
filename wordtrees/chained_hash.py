"""Word-count hash table that resolves collisions with separate chaining."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional, TextIO

_DEFAULT_CAPACITY = 500
_LOAD_FACTOR = 0.75


def string_hash(key: str, capacity: int) -> int:
    """Polynomial string hash (seed 7, multiplier 31) reduced modulo ``capacity``."""
    value = 7
    for byte in key.encode("utf-8"):
        value = (value * 31 + byte) % capacity
    return value


@dataclass
class _Entry:
    key: str
    value: int


class ChainedHashTable:
    """Hash table of string keys to integer values, one chain per bucket."""

    def __init__(self, capacity: int = _DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._buckets: list[list[_Entry]] = [[] for _ in range(capacity)]
        self._keys: set[str] = set()
        self._size = 0

    def _bucket(self, key: str) -> list[_Entry]:
        return self._buckets[string_hash(key, self._capacity)]

    def _resize(self) -> None:
        new_capacity = self._capacity * 2
        buckets: list[list[_Entry]] = [[] for _ in range(new_capacity)]
        for chain in self._buckets:
            for entry in chain:
                buckets[string_hash(entry.key, new_capacity)].append(entry)
        self._buckets = buckets
        self._capacity = new_capacity

    def add(self, key: str, value: int) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        if self._size / self._capacity > _LOAD_FACTOR:
            self._resize()
        chain = self._bucket(key)
        for entry in chain:
            if entry.key == key:
                entry.value = value
                return
        chain.append(_Entry(key, value))
        self._keys.add(key)
        self._size += 1

    def insert(self, key: str) -> None:
        """Count one more occurrence of ``key``."""
        current = self.search(key)
        self.add(key, 1 if current is None else current + 1)

    def search(self, key: str) -> Optional[int]:
        """Value stored under ``key``, or None if it is absent."""
        for entry in self._bucket(key):
            if entry.key == key:
                return entry.value
        return None

    def remove(self, key: str) -> None:
        """Drop ``key``; absent keys are ignored."""
        chain = self._bucket(key)
        for position, entry in enumerate(chain):
            if entry.key == key:
                del chain[position]
                self._keys.discard(key)
                self._size -= 1
                return

    def clear(self) -> None:
        """Drop every key, keeping the current capacity."""
        for chain in self._buckets:
            chain.clear()
        self._keys.clear()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def capacity(self) -> int:
        """Number of buckets."""
        return self._capacity

    def items(self) -> Iterator[tuple[str, int]]:
        """Yield ``(key, value)`` pairs in ascending key order."""
        for key in sorted(self._keys):
            value = self.search(key)
            if value is not None:
                yield key, value

    def show(self, stream: TextIO) -> None:
        """Write each key as ``key: [value]`` in ascending order."""
        for key, value in self.items():
            stream.write(f"{key}: [{value}]\n")