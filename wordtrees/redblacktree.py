"""Word-count dictionary backed by a red-black tree."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Any, Optional, TextIO


class Color(Enum):
    """Colour of a red-black tree node."""

    RED = "red"
    BLACK = "black"


class _Node:
    __slots__ = ("key", "count", "color", "parent", "left", "right")

    def __init__(self, key: Any, color: Color, nil: Optional[_Node] = None) -> None:
        self.key = key
        self.count = 1
        self.color = color
        self.parent: _Node = nil if nil is not None else self
        self.left: _Node = nil if nil is not None else self
        self.right: _Node = nil if nil is not None else self


class RedBlackDictionary:
    """Ordered multiset of keys that counts how often each key was inserted."""

    def __init__(self) -> None:
        self._nil = _Node(None, Color.BLACK)
        self._root: _Node = self._nil
        self._size = 0

    # -- rotations ---------------------------------------------------------

    def _rotate_left(self, node: _Node) -> None:
        pivot = node.right
        node.right = pivot.left
        if pivot.left is not self._nil:
            pivot.left.parent = node
        pivot.parent = node.parent
        if node.parent is self._nil:
            self._root = pivot
        elif node is node.parent.left:
            node.parent.left = pivot
        else:
            node.parent.right = pivot
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: _Node) -> None:
        pivot = node.left
        node.left = pivot.right
        if pivot.right is not self._nil:
            pivot.right.parent = node
        pivot.parent = node.parent
        if node.parent is self._nil:
            self._root = pivot
        elif node is node.parent.right:
            node.parent.right = pivot
        else:
            node.parent.left = pivot
        pivot.right = node
        node.parent = pivot

    # -- insertion ---------------------------------------------------------

    def insert(self, key: Any) -> None:
        """Add ``key``, or bump its count if it is already present."""
        parent = self._nil
        current = self._root
        while current is not self._nil:
            parent = current
            if key == current.key:
                current.count += 1
                return
            current = current.left if key < current.key else current.right

        node = _Node(key, Color.RED, self._nil)
        node.parent = parent
        if parent is self._nil:
            self._root = node
        elif key < parent.key:
            parent.left = node
        else:
            parent.right = node
        self._size += 1
        self._fix_insert(node)

    def _fix_insert(self, node: _Node) -> None:
        while node is not self._root and node.parent.color is Color.RED:
            grand = node.parent.parent
            if node.parent is grand.left:
                uncle = grand.right
                if uncle.color is Color.RED:
                    node.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                else:
                    if node is node.parent.right:
                        node = node.parent
                        self._rotate_left(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._rotate_right(node.parent.parent)
            else:
                uncle = grand.left
                if uncle.color is Color.RED:
                    node.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                else:
                    if node is node.parent.left:
                        node = node.parent
                        self._rotate_right(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._rotate_left(node.parent.parent)
        self._root.color = Color.BLACK

    # -- removal -----------------------------------------------------------

    def _transplant(self, old: _Node, new: _Node) -> None:
        if old.parent is self._nil:
            self._root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        new.parent = old.parent

    def _minimum(self, node: _Node) -> _Node:
        while node.left is not self._nil:
            node = node.left
        return node

    def remove(self, key: Any) -> None:
        """Remove ``key`` entirely; raises KeyError if it is absent."""
        target = self._find(key)
        if target is None:
            raise KeyError("Chave inexistente")

        moved = target
        original_color = moved.color
        if target.left is self._nil:
            child = target.right
            self._transplant(target, target.right)
        elif target.right is self._nil:
            child = target.left
            self._transplant(target, target.left)
        else:
            moved = self._minimum(target.right)
            original_color = moved.color
            child = moved.right
            if moved.parent is target:
                child.parent = moved
            else:
                self._transplant(moved, moved.right)
                moved.right = target.right
                moved.right.parent = moved
            self._transplant(target, moved)
            moved.left = target.left
            moved.left.parent = moved
            moved.color = target.color

        self._size -= 1
        if original_color is Color.BLACK:
            self._fix_delete(child)
        self._nil.parent = self._nil

    def _fix_delete(self, node: _Node) -> None:
        while node is not self._root and node.color is Color.BLACK:
            if node is node.parent.left:
                sibling = node.parent.right
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    node.parent.color = Color.RED
                    self._rotate_left(node.parent)
                    sibling = node.parent.right
                if sibling.left.color is Color.BLACK and sibling.right.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = node.parent
                else:
                    if sibling.right.color is Color.BLACK:
                        sibling.left.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_right(sibling)
                        sibling = node.parent.right
                    sibling.color = node.parent.color
                    node.parent.color = Color.BLACK
                    sibling.right.color = Color.BLACK
                    self._rotate_left(node.parent)
                    node = self._root
            else:
                sibling = node.parent.left
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    node.parent.color = Color.RED
                    self._rotate_right(node.parent)
                    sibling = node.parent.left
                if sibling.left.color is Color.BLACK and sibling.right.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = node.parent
                else:
                    if sibling.left.color is Color.BLACK:
                        sibling.right.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_left(sibling)
                        sibling = node.parent.left
                    sibling.color = node.parent.color
                    node.parent.color = Color.BLACK
                    sibling.left.color = Color.BLACK
                    self._rotate_right(node.parent)
                    node = self._root
        node.color = Color.BLACK

    # -- queries -----------------------------------------------------------

    def _find(self, key: Any) -> Optional[_Node]:
        current = self._root
        while current is not self._nil:
            if key == current.key:
                return current
            current = current.left if key < current.key else current.right
        return None

    def search(self, key: Any) -> Optional[tuple[Any, int]]:
        """Return ``(key, count)`` for a stored key, or None if absent."""
        node = self._find(key)
        if node is None:
            return None
        return node.key, node.count

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return self._size

    def clear(self) -> None:
        """Drop every key."""
        self._root = self._nil
        self._size = 0

    def count(self, key: Any) -> int:
        """How many times ``key`` was inserted; 0 if absent."""
        node = self._find(key)
        return node.count if node is not None else 0

    def root_color(self) -> Color:
        """Colour of the root; an empty tree's root is the black sentinel."""
        return self._root.color

    # -- traversal ---------------------------------------------------------

    def _walk(self) -> Iterator[_Node]:
        stack: list[_Node] = []
        current = self._root
        while stack or current is not self._nil:
            while current is not self._nil:
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
        """Write each key as ``key: [count]`` in ascending order."""
        for key, count in self.items():
            stream.write(f"{key}: [{count}]\n")