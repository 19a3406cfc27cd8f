"""Word-count dictionary backed by a self-balancing AVL tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional, TextIO


@dataclass(eq=False)
class _Node:
    key: Any
    count: int = 1
    height: int = 1
    left: Optional[_Node] = field(default=None, repr=False)
    right: Optional[_Node] = field(default=None, repr=False)


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    if pivot is None:
        return node
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    if pivot is None:
        return node
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _leftmost(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: _Node) -> _Node:
    while node.right is not None:
        node = node.right
    return node


class AVLDictionary:
    """Ordered multiset of keys that counts how often each key was inserted."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    # -- insertion ---------------------------------------------------------

    def insert(self, key: Any) -> None:
        """Add ``key``, or bump its count if it is already present."""
        self._root = self._add(self._root, key)

    def _add(self, node: Optional[_Node], key: Any) -> _Node:
        if node is None:
            return _Node(key)
        if key < node.key:
            node.left = self._add(node.left, key)
        elif key > node.key:
            node.right = self._add(node.right, key)
        else:
            node.count += 1
            return node

        _update(node)
        balance = _balance(node)
        if balance > 1 and node.left is not None:
            if key < node.left.key:
                return _rotate_right(node)
            if key > node.left.key:
                node.left = _rotate_left(node.left)
                return _rotate_right(node)
        if balance < -1 and node.right is not None:
            if key > node.right.key:
                return _rotate_left(node)
            if key < node.right.key:
                node.right = _rotate_right(node.right)
                return _rotate_left(node)
        return node

    # -- removal -----------------------------------------------------------

    def erase(self, key: Any) -> None:
        """Remove ``key`` entirely; absent keys are ignored."""
        self._root = self._remove(self._root, key)

    def _remove(self, node: Optional[_Node], key: Any) -> Optional[_Node]:
        if node is None:
            return None
        if key < node.key:
            node.left = self._remove(node.left, key)
        elif key > node.key:
            node.right = self._remove(node.right, key)
        elif node.left is not None and node.right is not None:
            heir = _leftmost(node.right)
            node.key, node.count = heir.key, heir.count
            node.right = self._remove(node.right, heir.key)
        else:
            node = node.left if node.left is not None else node.right

        if node is None:
            return None

        _update(node)
        balance = _balance(node)
        if balance > 1:
            if _balance(node.left) < 0:
                node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1:
            if _balance(node.right) > 0:
                node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    # -- queries -----------------------------------------------------------

    def _find(self, key: Any) -> Optional[_Node]:
        current = self._root
        while current is not None:
            if key == current.key:
                return current
            current = current.left if key < current.key else current.right
        return None

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self._walk())

    def clear(self) -> None:
        """Drop every key."""
        self._root = None

    def is_empty(self) -> bool:
        return self._root is None

    def minimum(self) -> Any:
        """Smallest key; raises ValueError when empty."""
        if self._root is None:
            raise ValueError("dictionary is empty")
        return _leftmost(self._root).key

    def maximum(self) -> Any:
        """Largest key; raises ValueError when empty."""
        if self._root is None:
            raise ValueError("dictionary is empty")
        return _rightmost(self._root).key

    def successor(self, key: Any) -> Any:
        """Next larger key after ``key``.

        Raises KeyError if ``key`` is absent and ValueError if it is the largest.
        """
        node = self._find(key)
        if node is None:
            raise KeyError("Node not found")
        if node.right is not None:
            return _leftmost(node.right).key
        found = None
        ancestor = self._root
        while ancestor is not node:
            if node.key < ancestor.key:
                found = ancestor
                ancestor = ancestor.left
            else:
                ancestor = ancestor.right
        if found is None:
            raise ValueError("Successor does not exist")
        return found.key

    def predecessor(self, key: Any) -> Any:
        """Next smaller key before ``key``.

        Raises KeyError if ``key`` is absent and ValueError if it is the smallest.
        """
        node = self._find(key)
        if node is None:
            raise KeyError("Node not found")
        if node.left is not None:
            return _rightmost(node.left).key
        found = None
        ancestor = self._root
        while ancestor is not node:
            if node.key > ancestor.key:
                found = ancestor
                ancestor = ancestor.right
            else:
                ancestor = ancestor.left
        if found is None:
            raise ValueError("Predecessor does not exist")
        return found.key

    def count(self, key: Any) -> int:
        """How many times ``key`` was inserted; 0 if absent."""
        node = self._find(key)
        return node.count if node is not None else 0

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return _height(self._root)

    # -- traversal ---------------------------------------------------------

    def _walk(self) -> Iterator[_Node]:
        stack: list[_Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right

    def items(self) -> Iterator[tuple[Any, int]]:
        """Yield ``(key, count)`` pairs in ascending key order."""
        for node in self._walk():
            yield node.key, node.count

    def show(self, stream: TextIO) -> None:
        """Write each key as ``key: [count]`` in order, then a blank line."""
        for key, count in self.items():
            stream.write(f"{key}: [{count}]\n")
        stream.write("\n")