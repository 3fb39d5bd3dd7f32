from __future__ import annotations

from honeycomb.grid import HoneycombGrid
from honeycomb.trie import Trie, TrieNode


class WordStore:
    """Distinct words found during one search, in discovery order."""

    __slots__ = ("words", "starts", "_seen")

    def __init__(self):
        self.words: list[str] = []
        self.starts: dict[str, tuple[int, int]] = {}
        self._seen: set[str] = set()

    def add(self, word: str, start: tuple[int, int]) -> bool:
        """Record a word the first time it is seen. Returns False for repeats."""
        if word in self._seen:
            return False
        self._seen.add(word)
        self.words.append(word)
        self.starts[word] = start
        return True

    def sorted(self) -> list[str]:
        return sorted(self.words)

    def __contains__(self, word: str) -> bool:
        return word in self._seen

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self):
        return iter(self.words)


def find_words(grid: HoneycombGrid, trie: Trie) -> WordStore:
    """Find every dictionary word traceable through adjacent cells of the grid.

    Runs a trie-pruned DFS from every cell. The visited set is a bitmask over
    flat cell indices passed down by value, so backtracking needs no undo and
    the grid is never modified. Each word is reported once no matter how many
    traces spell it; the trie is only read.
    """
    store = WordStore()
    cells = list(grid.cells())
    letters = [grid.letter(c, p) for c, p in cells]
    neighbors = [[grid.index(nc, npos) for nc, npos in grid.neighbors(c, p)] for c, p in cells]

    # Recursion depth is bounded by the longest dictionary word
    def search(idx: int, node: TrieNode, path: list[str], visited: int, start: tuple[int, int]):
        letter = letters[idx]
        child = node.children.get(letter)
        if child is None:
            return

        path.append(letter)
        if child.is_word:
            store.add("".join(path), start)

        if child.children:  # nothing further can match below a leaf
            for nidx in neighbors[idx]:
                if not (visited & (1 << nidx)):
                    search(nidx, child, path, visited | (1 << nidx), start)

        path.pop()

    for idx, cell in enumerate(cells):
        search(idx, trie.root, [], 1 << idx, cell)

    return store


def solve(grid: HoneycombGrid, trie: Trie, max_results: int = 0) -> tuple[list[str], dict[str, tuple[int, int]]]:
    """Solve the honeycomb.

    Returns (words, starts): the distinct words in ascending order, capped at
    max_results when it is positive, and the (column, position) cell each word's
    first reported trace started from.
    """
    store = find_words(grid, trie)
    result = store.sorted()
    result = result[:max_results] if max_results > 0 else result
    return result, store.starts
