"""Word-count hash table using open addressing with linear probing."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional, TextIO

from wordtrees.chained_hash import string_hash

_DEFAULT_CAPACITY = 500


@dataclass
class _Slot:
    key: str
    value: int
    deleted: bool = False


class OpenAddressingHashTable:
    """Hash table of string keys to integer values stored in a flat array.

    Removed entries leave tombstones; the table doubles once it is half full.
    """

    def __init__(self, capacity: int = _DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._slots: list[Optional[_Slot]] = [None] * capacity
        self._keys: set[str] = set()
        self._size = 0

    def _probe(self, key: str) -> Iterator[int]:
        start = string_hash(key, self._capacity)
        for step in range(self._capacity):
            yield (start + step) % self._capacity

    def _locate(self, key: str) -> Optional[int]:
        """Index of the live slot holding ``key``, or None."""
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot.key == key and not slot.deleted:
                return index
        return None

    def _rehash(self) -> None:
        old_slots = self._slots
        self._capacity *= 2
        self._slots = [None] * self._capacity
        self._size = 0
        for slot in old_slots:
            if slot is not None and not slot.deleted:
                self.add(slot.key, slot.value)

    def add(self, key: str, value: int) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        if self._size >= self._capacity // 2:
            self._rehash()
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None or slot.deleted or slot.key == key:
                break
        else:
            raise RuntimeError("hash table is full")
        if slot is None or slot.deleted:
            self._keys.add(key)
            self._size += 1
        self._slots[index] = _Slot(key, value)

    def insert(self, key: str) -> None:
        """Count one more occurrence of ``key``."""
        current = self.search(key)
        self.add(key, 1 if current is None else current + 1)

    def search(self, key: str) -> Optional[int]:
        """Value stored under ``key``, or None if it is absent."""
        index = self._locate(key)
        if index is None:
            return None
        slot = self._slots[index]
        return slot.value if slot is not None else None

    def remove(self, key: str) -> None:
        """Drop ``key``, leaving a tombstone; absent keys are ignored."""
        index = self._locate(key)
        if index is None:
            return
        slot = self._slots[index]
        if slot is not None:
            slot.deleted = True
            self._keys.discard(key)
            self._size -= 1

    def clear(self) -> None:
        """Drop every key, keeping the current capacity."""
        self._slots = [None] * self._capacity
        self._keys.clear()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def capacity(self) -> int:
        """Number of slots."""
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