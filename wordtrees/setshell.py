"""Line-oriented shell for creating and combining integer sets."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterable
from typing import Optional, TextIO

from wordtrees.intset import IntSet
from wordtrees.setops import difference, intersection, union

_INTEGER = re.compile(r"\s*([+-]?\d+)")

_MENU = (
    "Menu\n"
    "0. exit\n"
    "1. help\n"
    "2. create\n"
    "3. show setIndex\n"
    "4. size setIndex\n"
    "5. max setIndex\n"
    "6. min setIndex\n"
    "7. empty setIndex\n"
    "8. clear setIndex\n"
    "9. insert setIndex number\n"
    "10. erase setIndex number\n"
    "11. contains setIndex number\n"
    "12. successor setIndex number\n"
    "13. predecessor setIndex number\n"
    "14. union setIndex1 setIndex2\n"
    "15. intersection setIndex1 setIndex2\n"
    "16. difference setIndex1 setIndex2\n"
    "17. swap setIndex1 setIndex2\n"
)

_INVALID_INPUT = "Invalid input. Indices and values must be integers.\n"


def help_text() -> str:
    """The command menu."""
    return _MENU


def _parse_int(text: str) -> int:
    """Read a leading integer, ignoring anything after it."""
    match = _INTEGER.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


class SetShell:
    """Interpreter holding a growing list of integer sets."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.sets: list[IntSet] = []

    def _write(self, text: str) -> None:
        self.stream.write(text)

    def execute(self, line: str) -> bool:
        """Run one command line; return False when the shell should stop."""
        parts = line.split()
        command = parts[0] if parts else ""
        first = parts[1] if len(parts) > 1 else ""
        second = parts[2] if len(parts) > 2 else ""

        if command == "exit":
            return False
        if command == "help":
            self._write(help_text())
            return True
        if command == "create":
            self.sets.append(IntSet())
            self._write(f"Set created. Total sets: {len(self.sets)}\n")
            return True

        try:
            index = _parse_int(first)
        except ValueError:
            self._write(_INVALID_INPUT)
            return True
        if not 0 <= index < len(self.sets):
            self._write("Invalid first set index.\n")
            return True

        target = self.sets[index]
        unary: dict[str, Callable[[IntSet], None]] = {
            "show": self._show,
            "size": self._size,
            "max": self._maximum,
            "min": self._minimum,
            "clear": self._clear,
            "empty": self._empty,
        }
        valued: dict[str, Callable[[IntSet, int], None]] = {
            "insert": self._insert,
            "erase": self._erase,
            "contains": self._contains,
            "successor": self._successor,
            "predecessor": self._predecessor,
        }
        paired: dict[str, Callable[[IntSet, IntSet], None]] = {
            "swap": self._swap,
            "union": self._combine(union),
            "intersection": self._combine(intersection),
            "difference": self._combine(difference),
        }

        if command in unary:
            unary[command](target)
        elif command in valued or command in paired:
            try:
                number = _parse_int(second)
            except ValueError:
                self._write(_INVALID_INPUT)
                return True
            if command in valued:
                valued[command](target, number)
            elif 0 <= number < len(self.sets):
                paired[command](target, self.sets[number])
            else:
                self._write("Invalid second set index.\n")
        else:
            self._write("Unknown command.\n")
        return True

    def run(self, lines: Iterable[str]) -> None:
        """Execute lines until ``exit`` or the input ends."""
        for line in lines:
            if not self.execute(line):
                break

    # -- command handlers --------------------------------------------------

    def _show(self, target: IntSet) -> None:
        target.show(self.stream)

    def _size(self, target: IntSet) -> None:
        self._write(f"{len(target)}\n")

    def _maximum(self, target: IntSet) -> None:
        try:
            self._write(f"{target.maximum()}\n")
        except ValueError:
            self._write("Set is empty.\n")

    def _minimum(self, target: IntSet) -> None:
        try:
            self._write(f"{target.minimum()}\n")
        except ValueError:
            self._write("Set is empty.\n")

    def _clear(self, target: IntSet) -> None:
        target.clear()

    def _empty(self, target: IntSet) -> None:
        self._write("Sim\n\n" if target.is_empty() else "Nao\n\n")

    def _insert(self, target: IntSet, value: int) -> None:
        if target.insert(value):
            self._write(f"Adding new node: {value}\n")
        else:
            self._write(f"Node {value} already exists\n")

    def _erase(self, target: IntSet, value: int) -> None:
        target.erase(value)

    def _contains(self, target: IntSet, value: int) -> None:
        self._write("Sim\n" if value in target else "Nao\n")

    def _successor(self, target: IntSet, value: int) -> None:
        try:
            self._write(f"{target.successor(value)}\n")
        except (KeyError, ValueError) as error:
            self._write(f"{error.args[0]}\n")

    def _predecessor(self, target: IntSet, value: int) -> None:
        try:
            self._write(f"{target.predecessor(value)}\n")
        except (KeyError, ValueError) as error:
            self._write(f"{error.args[0]}\n")

    def _swap(self, target: IntSet, other: IntSet) -> None:
        target.swap(other)

    def _combine(
        self, operation: Callable[[IntSet, IntSet], IntSet]
    ) -> Callable[[IntSet, IntSet], None]:
        def handler(target: IntSet, other: IntSet) -> None:
            self.sets.append(operation(target, other))

        return handler


def main(argv: Optional[list[str]] = None) -> int:
    """Command entry point: read commands from standard input."""
    SetShell(sys.stdout).run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())