"""Interactive word dictionary kept in a B+ tree."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from discretelabs.bplustree import DEFAULT_ORDER, BPlusTree

PUNCTUATION = frozenset('.,";:!?@#%—')

HELP = (
    "Commands:\n"
    "search <value> to search\n"
    "insert <value> to insert\n"
    "delete <value> to delete\n"
    "display to display\n"
    "read <path> to read words from a file\n"
    "clear to clear tree\n"
    "exit to exit"
)


def normalize_word(word: str) -> str:
    """Drop punctuation and lower the first letter."""
    stripped = "".join(char for char in word if char not in PUNCTUATION)
    return stripped[:1].lower() + stripped[1:]


@contextmanager
def _listening(tree: BPlusTree, out: TextIO | None) -> Iterator[None]:
    previous = tree.listener
    tree.listener = None if out is None else (lambda message: print(message, file=out))
    try:
        yield
    finally:
        tree.listener = previous


def load_words(tree: BPlusTree, path: str | Path) -> int:
    """Insert every word of a text file; return how many were new."""
    added = 0
    with _listening(tree, None), open(path, encoding="utf-8") as handle:
        for line in handle:
            for raw in line.split():
                word = normalize_word(raw)
                if word and tree.insert(word):
                    added += 1
    return added


def execute(tree: BPlusTree, command: str, out: TextIO) -> bool:
    """Run one command against ``tree``; return False when the session should end."""
    parts = command.split()
    if not parts:
        print("Invalid command", file=out)
        return True
    name, argument = parts[0], (parts[1] if len(parts) > 1 else None)

    if name == "exit" and argument is None:
        return False
    if name == "display" and argument is None:
        for line in tree.lines():
            print(line, file=out)
    elif name == "clear" and argument is None:
        tree.clear()
    elif name == "search" and argument is not None:
        if len(tree) == 0:
            print("Tree empty", file=out)
        else:
            print("Found" if argument in tree else "Not found", file=out)
    elif name == "insert" and argument is not None:
        with _listening(tree, out):
            inserted = tree.insert(argument)
        if inserted:
            print(f"Inserted {argument} successfully", file=out)
        else:
            print("This word is already in dictionary", file=out)
    elif name == "delete" and argument is not None:
        if len(tree) == 0:
            print("Tree empty", file=out)
        else:
            try:
                with _listening(tree, out):
                    tree.remove(argument)
            except KeyError:
                print("Not found", file=out)
    elif name == "read" and argument is not None:
        path = command.strip()[len("read"):].strip()
        try:
            added = load_words(tree, path)
        except OSError as error:
            print(f"Cannot read {path}: {error.strerror or error}", file=out)
        else:
            print(f"Read {added} new words", file=out)
    else:
        print("Invalid command", file=out)
    return True


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Keep a dictionary of words in a B+ tree.")
    parser.add_argument("files", nargs="*", type=Path, help="text files to load first")
    parser.add_argument("--order", type=int, default=DEFAULT_ORDER, help="keys per node")
    args = parser.parse_args(argv)

    tree = BPlusTree(args.order)
    for path in args.files:
        try:
            load_words(tree, path)
        except OSError as error:
            print(f"Cannot read {path}: {error.strerror or error}", file=sys.stderr)
            return 1

    print(HELP)
    while True:
        try:
            command = input("Enter command: ")
        except EOFError:
            print()
            return 0
        if not execute(tree, command, sys.stdout):
            return 0


if __name__ == "__main__":
    raise SystemExit(main())