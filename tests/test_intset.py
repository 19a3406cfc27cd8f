import io

import pytest

from wordtrees.intset import IntSet

VALUES = [12, 8, 18, 5, 11, 17, 4, 20, 9, 10, 3, 33, 40, 2, 21, 14]


def test_insert_reports_new_and_duplicate():
    s = IntSet()
    assert s.insert(7) is True
    assert s.insert(7) is False
    assert len(s) == 1


def test_iteration_is_sorted_and_distinct():
    s = IntSet(VALUES + VALUES[:5])
    assert list(s) == sorted(set(VALUES))
    assert len(s) == len(set(VALUES))


def test_contains():
    s = IntSet(VALUES)
    assert all(v in s for v in VALUES)
    assert 1000 not in s


def test_erase_every_value_keeps_order():
    s = IntSet(VALUES)
    remaining = sorted(VALUES)
    for v in VALUES:
        s.erase(v)
        remaining.remove(v)
        assert v not in s
        assert list(s) == remaining
    assert s.is_empty()


def test_erase_absent_is_ignored():
    s = IntSet([1, 2])
    s.erase(99)
    assert list(s) == [1, 2]


def test_minimum_and_maximum():
    s = IntSet(VALUES)
    assert s.minimum() == min(VALUES)
    assert s.maximum() == max(VALUES)


def test_minimum_of_empty_raises():
    with pytest.raises(ValueError):
        IntSet().minimum()
    with pytest.raises(ValueError):
        IntSet().maximum()


def test_successor_and_predecessor_follow_order():
    s = IntSet(VALUES)
    ordered = list(s)
    for before, after in zip(ordered, ordered[1:]):
        assert s.successor(before) == after
        assert s.predecessor(after) == before


def test_successor_of_largest_raises():
    s = IntSet(VALUES)
    with pytest.raises(ValueError, match="Successor does not exist"):
        s.successor(max(VALUES))
    with pytest.raises(ValueError, match="Predecessor does not exist"):
        s.predecessor(min(VALUES))


def test_successor_of_absent_raises_key_error():
    s = IntSet(VALUES)
    with pytest.raises(KeyError):
        s.successor(1000)
    with pytest.raises(KeyError):
        s.predecessor(1000)


def test_swap_exchanges_contents():
    a = IntSet([1, 2, 3])
    b = IntSet([10])
    a.swap(b)
    assert list(a) == [10]
    assert list(b) == [1, 2, 3]


def test_clear_and_is_empty():
    s = IntSet(VALUES)
    assert not s.is_empty()
    s.clear()
    assert s.is_empty()
    assert len(s) == 0


def test_show_format():
    out = io.StringIO()
    IntSet([8, 5]).show(out)
    assert out.getvalue() == "5\n8\n\n"