# wordtrees

Classic dictionary data structures in plain Python, plus two small command-line tools built on them. There are no third-party dependencies.

The package contains:

- `wordtrees.avltree.AVLDictionary` – an AVL tree that counts how many times each key was inserted. `erase` removes a key entirely and ignores absent keys; `minimum`, `maximum`, `successor`, `predecessor`, `count`, `height`, `items` and `show` query it.
- `wordtrees.redblacktree.RedBlackDictionary` – a red-black tree with the same counting behaviour. `remove` raises `KeyError` for an absent key; `search` returns `(key, count)` or `None`; `root_color` returns a `Color`.
- `wordtrees.chained_hash.ChainedHashTable` – a string-to-integer hash table with separate chaining. It doubles its bucket count once the load factor exceeds 0.75. `string_hash(key, capacity)` is the hash it uses.
- `wordtrees.open_hash.OpenAddressingHashTable` – a string-to-integer hash table with linear probing and tombstones, which doubles its size once it is half full.
- `wordtrees.intset.IntSet` – an AVL-based set of distinct integers, with `wordtrees.setops` providing `union`, `intersection` and `difference`.
- `wordtrees.wordcount` – tokenizing (`tokenize`, `normalize`, `words`), loading a file into any of the four dictionaries (`make_dictionary`, `load_file`, `run_timed`) and the `wordtrees-count` command.
- `wordtrees.setshell` – `SetShell`, the interpreter behind the `wordtrees-sets` command.

Both hash tables list their keys in ascending order through `items()` and `show()`, and their `insert(key)` adds one to the key's count.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Counting words in a file

```
wordtrees-count avl text.txt
```

The first argument picks the structure: `avl`, `rbt`, `hash_ex` or `hash_aberto`. Each line is split on whitespace and punctuation (hyphens are kept), ASCII letters are lower-cased and surrounding punctuation is trimmed; a token made only of punctuation becomes an empty word and is counted as such. The words are then listed in alphabetical order as `word: [count]`, followed by the time spent inserting. A wrong number of arguments or an unknown structure name prints a message to standard error and exits with status 1. If the file cannot be opened, an error is printed to standard error and the empty dictionary is listed.

From Python:

```python
from wordtrees.avltree import AVLDictionary
from wordtrees.wordcount import words

tree = AVLDictionary()
for word in words(["The cat, the hat."]):
    tree.insert(word)

print(list(tree.items()))   # [('cat', 1), ('hat', 1), ('the', 2)]
print(tree.count("the"))    # 2
```

## The integer-set shell

```
wordtrees-sets
```

reads commands from standard input, one per line, until `exit` or the end of input:

```
create
insert 0 12
insert 0 8
show 0
successor 0 8
create
insert 1 8
union 0 1
exit
```

Type `help` for the full list of commands: `create`, `show`, `size`, `max`, `min`, `empty`, `clear`, `insert`, `erase`, `contains`, `successor`, `predecessor`, `union`, `intersection`, `difference` and `swap`. Sets are addressed by their index, starting at 0. Results of `union`, `intersection` and `difference` are stored as new sets at the end of the list.

From Python:

```python
from wordtrees.intset import IntSet
from wordtrees.setops import union, intersection, difference

a = IntSet([1, 2, 3])
b = IntSet([2, 3, 4])
print(list(union(a, b)))         # [1, 2, 3, 4]
print(list(intersection(a, b)))  # [2, 3]
print(list(difference(a, b)))    # [1]
```

## What it does not do

Everything is held in memory: neither the word dictionaries nor the sets are saved anywhere, and the set shell starts with no sets each time it runs.