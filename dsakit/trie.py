"""A prefix tree over words made of capital letters A to Z."""

from __future__ import annotations

from dataclasses import dataclass, field

_ALPHABET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


@dataclass
class _TrieNode:
    letter: str
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    terminal: bool = False


def _check(word: str) -> None:
    bad = set(word) - _ALPHABET
    if bad:
        raise ValueError(f"words may only hold capital letters A-Z, got {word!r}")


class Trie:
    """Stores words and answers whether a whole word was stored."""

    def __init__(self) -> None:
        self._root = _TrieNode("")

    def insert(self, word: str) -> None:
        """Add a word; raises ValueError for anything but capital letters."""
        _check(word)
        node = self._root
        for letter in word:
            node = node.children.setdefault(letter, _TrieNode(letter))
        node.terminal = True

    def search(self, word: str) -> bool:
        """Whether ``word`` was inserted as a whole word."""
        _check(word)
        node = self._root
        for letter in word:
            child = node.children.get(letter)
            if child is None:
                return False
            node = child
        return node.terminal

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.isupper() and self.search(word)