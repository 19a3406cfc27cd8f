"""Ordered set of integers kept in an AVL tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TextIO

from wordtrees.avltree import AVLDictionary


class IntSet:
    """Set of distinct integers with ordered queries.

    Raises ValueError for queries on an empty set.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._tree = AVLDictionary()
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> bool:
        """Add ``value``; return False if it was already present."""
        if value in self._tree:
            return False
        self._tree.insert(value)
        return True

    def erase(self, value: int) -> None:
        """Remove ``value``; absent values are ignored."""
        self._tree.erase(value)

    def __contains__(self, value: object) -> bool:
        return value in self._tree

    def __len__(self) -> int:
        return len(self._tree)

    def __iter__(self) -> Iterator[int]:
        for value, _ in self._tree.items():
            yield value

    def __repr__(self) -> str:
        return f"IntSet({list(self)!r})"

    def clear(self) -> None:
        """Remove every value."""
        self._tree.clear()

    def swap(self, other: IntSet) -> None:
        """Exchange contents with ``other``."""
        self._tree, other._tree = other._tree, self._tree

    def is_empty(self) -> bool:
        return self._tree.is_empty()

    def minimum(self) -> int:
        """Smallest value."""
        if self._tree.is_empty():
            raise ValueError("set is empty")
        return self._tree.minimum()

    def maximum(self) -> int:
        """Largest value."""
        if self._tree.is_empty():
            raise ValueError("set is empty")
        return self._tree.maximum()

    def successor(self, value: int) -> int:
        """Next larger value.

        Raises KeyError if ``value`` is absent and ValueError if it is the largest.
        """
        return self._tree.successor(value)

    def predecessor(self, value: int) -> int:
        """Next smaller value.

        Raises KeyError if ``value`` is absent and ValueError if it is the smallest.
        """
        return self._tree.predecessor(value)

    def show(self, stream: TextIO) -> None:
        """Write each value on its own line in order, then a blank line."""
        for value in self:
            stream.write(f"{value}\n")
        stream.write("\n")