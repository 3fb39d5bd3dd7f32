from __future__ import annotations

import logging
from typing import Iterable

from honeycomb.errors import InvalidCharacterError

logger = logging.getLogger("honeycomb")

ALPHABET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Trie:
    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str):
        # Validate up front so a rejected word leaves no dangling nodes behind
        if not word:
            raise InvalidCharacterError(word, "")
        for ch in word:
            if ch not in ALPHABET:
                raise InvalidCharacterError(word, ch)

        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_word:
            self._size += 1
        node.is_word = True

    @staticmethod
    def child(node: TrieNode, letter: str) -> TrieNode | None:
        return node.children.get(letter)

    def _walk(self, prefix: str) -> TrieNode | None:
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def has_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def __contains__(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_word

    def __len__(self) -> int:
        return self._size


def build_from_lines(lines: Iterable[str], min_length: int = 1, strict: bool = True) -> Trie:
    """Build a trie from dictionary lines, one uppercase word per line.

    Only the trailing line terminator is stripped; case is not normalised, so a
    lowercase entry is treated as invalid. In strict mode the first invalid
    entry raises InvalidCharacterError, otherwise invalid entries are skipped.
    """
    trie = Trie()
    skipped = 0
    for line_no, line in enumerate(lines, start=1):
        word = line.rstrip("\r\n")
        if not word or len(word) < min_length:
            continue
        try:
            trie.insert(word)
        except InvalidCharacterError as e:
            if strict:
                raise InvalidCharacterError(e.word, e.char, line_no) from None
            skipped += 1

    if skipped:
        logger.warning("Skipped %d dictionary entries with characters outside A-Z", skipped)
    return trie


def load_trie(path: str, min_length: int = 1, strict: bool = True) -> Trie:
    with open(path, "r", encoding="utf-8") as f:
        trie = build_from_lines(f, min_length, strict)
    logger.info("Loaded %d words from %s", len(trie), path)
    return trie
