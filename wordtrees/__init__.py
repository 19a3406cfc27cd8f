"""Search trees, hash tables, word-frequency dictionaries and an integer-set shell."""

__version__ = "0.1.0"

__all__ = [
    "avltree",
    "redblacktree",
    "chained_hash",
    "open_hash",
    "wordcount",
    "intset",
    "setops",
    "setshell",
]