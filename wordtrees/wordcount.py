"""Count the words of a text file with one of several dictionary structures."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Iterable, Iterator
from typing import Optional, TextIO, Union

from wordtrees.avltree import AVLDictionary
from wordtrees.chained_hash import ChainedHashTable
from wordtrees.open_hash import OpenAddressingHashTable
from wordtrees.redblacktree import RedBlackDictionary

Dictionary = Union[AVLDictionary, RedBlackDictionary, ChainedHashTable, OpenAddressingHashTable]

_SEPARATORS = re.compile(r"[ \t\n\r\f.,;:!?()\[\]{}<>\"']+")
_TRIM = "!\"#$%&'()*+,./:;<=>?@[\\]^_`{|}~\u2014"
_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")

_KINDS = {
    "avl": (AVLDictionary, "árvore AVL"),
    "rbt": (RedBlackDictionary, "árvore Rubro-Negra"),
    "hash_ex": (ChainedHashTable, "tabela hash (encadeamento exterior)"),
    "hash_aberto": (OpenAddressingHashTable, "tabela hash (endereçamento aberto)"),
}


def tokenize(line: str) -> list[str]:
    """Split ``line`` on whitespace and punctuation, keeping hyphens inside words."""
    return [token for token in _SEPARATORS.split(line) if token]


def normalize(word: str) -> str:
    """Lower-case ASCII letters and trim surrounding punctuation.

    The result may be empty when the token was punctuation only.
    """
    return word.translate(_ASCII_LOWER).strip(_TRIM)


def words(lines: Iterable[str]) -> Iterator[str]:
    """Yield every normalized word of ``lines`` in reading order."""
    for line in lines:
        for token in tokenize(line):
            yield normalize(token)


def make_dictionary(kind: str) -> Dictionary:
    """New empty dictionary of ``kind``: avl, rbt, hash_ex or hash_aberto."""
    try:
        factory, _ = _KINDS[kind]
    except KeyError:
        raise ValueError(f"unknown dictionary kind: {kind!r}") from None
    return factory()


def load_file(dictionary: Dictionary, path: str) -> None:
    """Insert every word of the file at ``path`` into ``dictionary``."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        for word in words(handle):
            dictionary.insert(word)


def run_timed(dictionary: Dictionary, path: str, label: str, stream: TextIO) -> float:
    """Load ``path``, print the dictionary and the load time; return the time."""
    start = time.perf_counter()
    try:
        load_file(dictionary, path)
    except OSError:
        print("Erro ao abrir o arquivo.", file=sys.stderr)
    elapsed = time.perf_counter() - start
    stream.write(f"Dicionario usando {label}:\n")
    dictionary.show(stream)
    stream.write(f"Tempo de inserção: {elapsed} segundos\n")
    return elapsed


def main(argv: Optional[list[str]] = None) -> int:
    """Command entry point: ``wordcount KIND FILE``."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print(
            "Uso correto: wordcount [avl|rbt|hash_ex|hash_aberto] arquivo.txt",
            file=sys.stderr,
        )
        return 1
    kind, path = args
    if kind not in _KINDS:
        print(
            "Tipo de dicionário não reconhecido. "
            "Use 'avl', 'rbt', 'hash_ex' ou 'hash_aberto'.",
            file=sys.stderr,
        )
        return 1
    dictionary = make_dictionary(kind)
    run_timed(dictionary, path, _KINDS[kind][1], sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())