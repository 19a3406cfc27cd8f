import io

import pytest

from wordtrees.open_hash import OpenAddressingHashTable


def test_insert_counts_occurrences():
    table = OpenAddressingHashTable()
    for _ in range(4):
        table.insert("sol")
    table.insert("lua")
    assert table.search("sol") == 4
    assert table.search("lua") == 1
    assert len(table) == 2


def test_search_absent_is_none():
    table = OpenAddressingHashTable()
    assert table.search("nada") is None


def test_add_replaces_value():
    table = OpenAddressingHashTable()
    table.add("k", 3)
    table.add("k", 8)
    assert table.search("k") == 8
    assert len(table) == 1


def test_rehash_when_half_full():
    table = OpenAddressingHashTable(4)
    for word in ["a", "b", "c"]:
        table.insert(word)
    assert table.capacity() > 4
    assert [table.search(w) for w in ["a", "b", "c"]] == [1, 1, 1]


def test_many_keys_survive_rehashing():
    table = OpenAddressingHashTable(2)
    words = [f"palavra{i}" for i in range(60)]
    for word in words:
        table.insert(word)
    for word in words[::2]:
        table.insert(word)
    assert len(table) == len(words)
    assert table.capacity() >= 2 * len(words)
    assert all(table.search(w) == (2 if i % 2 == 0 else 1) for i, w in enumerate(words))


def test_remove_leaves_others_reachable():
    table = OpenAddressingHashTable(8)
    # one slot per bucket keeps these well apart, but probing must still work
    words = ["x", "y", "z"]
    for word in words:
        table.insert(word)
    table.remove("y")
    table.remove("absent")
    assert table.search("y") is None
    assert table.search("x") == 1
    assert table.search("z") == 1
    assert len(table) == 2


def test_reinsert_after_remove():
    table = OpenAddressingHashTable()
    table.insert("a")
    table.insert("a")
    table.remove("a")
    table.insert("a")
    assert table.search("a") == 1
    assert list(table.items()) == [("a", 1)]


def test_clear():
    table = OpenAddressingHashTable(16)
    table.insert("a")
    table.clear()
    assert len(table) == 0
    assert table.search("a") is None
    assert table.capacity() == 16


def test_show_sorted():
    table = OpenAddressingHashTable()
    for word in ["zeta", "alfa", "zeta"]:
        table.insert(word)
    out = io.StringIO()
    table.show(out)
    assert out.getvalue() == "alfa: [1]\nzeta: [2]\n"


def test_invalid_capacity():
    with pytest.raises(ValueError):
        OpenAddressingHashTable(-1)