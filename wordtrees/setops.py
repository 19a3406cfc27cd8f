"""Union, intersection and difference of integer sets."""

from __future__ import annotations

from itertools import chain

from wordtrees.intset import IntSet


def union(first: IntSet, second: IntSet) -> IntSet:
    """New set of values in either set."""
    return IntSet(chain(first, second))


def intersection(first: IntSet, second: IntSet) -> IntSet:
    """New set of values in both sets."""
    return IntSet(value for value in first if value in second)


def difference(first: IntSet, second: IntSet) -> IntSet:
    """New set of values in ``first`` but not in ``second``."""
    return IntSet(value for value in first if value not in second)