import io
import random

import pytest

from wordtrees.redblacktree import Color, RedBlackDictionary


def _black_height(tree, node):
    nil = tree._nil
    if node is nil:
        return 1
    if node.color is Color.RED:
        assert node.left.color is Color.BLACK
        assert node.right.color is Color.BLACK
    if node.left is not nil:
        assert node.left.parent is node
        assert node.left.key < node.key
    if node.right is not nil:
        assert node.right.parent is node
        assert node.right.key > node.key
    left = _black_height(tree, node.left)
    right = _black_height(tree, node.right)
    assert left == right
    return left + (1 if node.color is Color.BLACK else 0)


def _check_invariants(tree):
    assert tree.root_color() is Color.BLACK
    _black_height(tree, tree._root)


def test_empty_tree():
    tree = RedBlackDictionary()
    assert len(tree) == 0
    assert list(tree.items()) == []
    assert tree.root_color() is Color.BLACK
    assert "a" not in tree


def test_insert_counts_duplicates():
    tree = RedBlackDictionary()
    for word in ["casa", "bola", "casa", "arvore", "casa"]:
        tree.insert(word)
    assert len(tree) == 3
    assert tree.count("casa") == 3
    assert tree.count("bola") == 1
    assert tree.count("zebra") == 0
    assert list(tree.items()) == [("arvore", 1), ("bola", 1), ("casa", 3)]


def test_search_returns_key_and_count():
    tree = RedBlackDictionary()
    tree.insert("x")
    tree.insert("x")
    assert tree.search("x") == ("x", 2)
    assert tree.search("y") is None


def test_show_format():
    tree = RedBlackDictionary()
    for word in ["b", "a", "b"]:
        tree.insert(word)
    out = io.StringIO()
    tree.show(out)
    assert out.getvalue() == "a: [1]\nb: [2]\n"


def test_remove_deletes_key():
    tree = RedBlackDictionary()
    for word in ["m", "c", "x", "a", "e"]:
        tree.insert(word)
    tree.insert("c")
    tree.remove("c")
    assert "c" not in tree
    assert len(tree) == 4
    assert [k for k, _ in tree.items()] == ["a", "e", "m", "x"]
    _check_invariants(tree)


def test_remove_missing_raises():
    tree = RedBlackDictionary()
    tree.insert("a")
    with pytest.raises(KeyError):
        tree.remove("b")
    assert len(tree) == 1


def test_remove_from_empty_raises():
    with pytest.raises(KeyError):
        RedBlackDictionary().remove("a")


def test_clear():
    tree = RedBlackDictionary()
    for word in "the quick brown fox".split():
        tree.insert(word)
    tree.clear()
    assert len(tree) == 0
    assert list(tree.items()) == []
    tree.insert("again")
    assert list(tree.items()) == [("again", 1)]


def test_sequential_inserts_stay_balanced():
    tree = RedBlackDictionary()
    for value in range(200):
        tree.insert(value)
        _check_invariants(tree)
    assert [k for k, _ in tree.items()] == list(range(200))


def test_random_inserts_and_removals_keep_invariants():
    rng = random.Random(1234)
    tree = RedBlackDictionary()
    reference = {}
    for _ in range(600):
        value = rng.randrange(100)
        if rng.random() < 0.6:
            tree.insert(value)
            reference[value] = reference.get(value, 0) + 1
        elif value in reference:
            tree.remove(value)
            del reference[value]
        else:
            with pytest.raises(KeyError):
                tree.remove(value)
        _check_invariants(tree)
    assert list(tree.items()) == sorted(reference.items())
    assert len(tree) == len(reference)


def test_remove_all_leaves_empty():
    tree = RedBlackDictionary()
    keys = list(range(50))
    for key in keys:
        tree.insert(key)
    random.Random(7).shuffle(keys)
    for key in keys:
        tree.remove(key)
        _check_invariants(tree)
    assert len(tree) == 0
    assert list(tree.items()) == []