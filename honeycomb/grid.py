from __future__ import annotations

import logging
from typing import Iterator

from honeycomb.errors import MalformedHoneycombError
from honeycomb.trie import ALPHABET

logger = logging.getLogger("honeycomb")


def half_layer_length(k: int) -> int:
    """Number of letters on one side (left or right) of layer k >= 1."""
    return 2 + 3 * (k - 1)


def expected_letter_count(layers: int) -> int:
    """Letters needed to describe a honeycomb of `layers` concentric layers.

    Closed form of 1 + sum(2 + 2 * half_layer_length(k) for k in 1..layers-1).
    """
    return 3 * layers * (layers - 1) + 1


def _side_columns(halves: list[str]) -> list[str]:
    """Redistribute the half-layer strings of one side into columns.

    Column i (0 = next to the center) has length 2n - i. Its middle holds a
    contiguous slice of half layer i; the slots above and below are boundary
    letters borrowed from every outer layer j > i.
    """
    n = len(halves)
    columns = []
    for i in range(n):
        column = [""] * (2 * n - i)
        column[n - i - 1:n + 1] = halves[i][i:2 * i + 2]
        for j in range(i + 1, n):
            column[n - j - 1] = halves[j][i]
            column[n - i + j] = halves[j][3 * j + 1 - i]
        columns.append("".join(column))
    return columns


class HoneycombGrid:
    """A hexagon of letters flattened into 2L-1 columns.

    The center column sits at index L-1; columns shrink by one cell per step
    away from it on both sides. Cells are addressed as (column, position) and
    two cells are adjacent when both indices differ by at most one.
    """

    __slots__ = ("layers", "columns", "_offsets")

    def __init__(self, layers: int, columns: list[str]):
        self.layers = layers
        self.columns: tuple[str, ...] = tuple(columns)
        # Flat index of the first cell of each column
        self._offsets: list[int] = []
        total = 0
        for column in self.columns:
            self._offsets.append(total)
            total += len(column)

    @classmethod
    def from_letters(cls, layers: int, letters: list[str]) -> HoneycombGrid:
        if layers < 1:
            raise MalformedHoneycombError(f"Layer count must be at least 1, got {layers}")
        expected = expected_letter_count(layers)
        if len(letters) != expected:
            raise MalformedHoneycombError(
                f"A honeycomb with {layers} layers needs {expected} letters, got {len(letters)}"
            )
        for idx, letter in enumerate(letters):
            if letter not in ALPHABET:
                raise MalformedHoneycombError(
                    f"Invalid character {letter!r} at letter {idx + 1}; only A-Z are allowed"
                )

        n = layers - 1
        it = iter(letters)
        center = [""] * (2 * n + 1)
        center[n] = next(it)

        rights: list[str] = []
        lefts: list[str] = []
        for k in range(1, layers):
            half = half_layer_length(k)
            center[n + k] = next(it)
            # Right side is listed in reverse
            right = [next(it) for _ in range(half)]
            rights.append("".join(reversed(right)))
            center[n - k] = next(it)
            lefts.append("".join(next(it) for _ in range(half)))

        left_columns = _side_columns(lefts)
        right_columns = _side_columns(rights)
        columns = list(reversed(left_columns)) + ["".join(center)] + right_columns
        return cls(layers, columns)

    @property
    def number_columns(self) -> int:
        return len(self.columns)

    def column_length(self, column: int) -> int:
        return len(self.columns[column])

    def in_bounds(self, column: int, position: int) -> bool:
        return 0 <= column < len(self.columns) and 0 <= position < len(self.columns[column])

    def letter(self, column: int, position: int) -> str:
        return self.columns[column][position]

    def index(self, column: int, position: int) -> int:
        """Flat index of a cell, stable for the lifetime of the grid."""
        return self._offsets[column] + position

    def cells(self) -> Iterator[tuple[int, int]]:
        for column, letters in enumerate(self.columns):
            for position in range(len(letters)):
                yield column, position

    def neighbors(self, column: int, position: int) -> list[tuple[int, int]]:
        adj = []
        for dc in (-1, 0, 1):
            for dp in (-1, 0, 1):
                if dc == 0 and dp == 0:
                    continue
                nc, npos = column + dc, position + dp
                if self.in_bounds(nc, npos):
                    adj.append((nc, npos))
        return adj

    def format_columns(self) -> str:
        return "\n".join(f"{i:>3}: {' '.join(col)}" for i, col in enumerate(self.columns))

    def __len__(self) -> int:
        return sum(len(column) for column in self.columns)

    def __repr__(self) -> str:
        return f"HoneycombGrid(layers={self.layers}, columns={list(self.columns)!r})"


def parse_honeycomb(text: str) -> HoneycombGrid:
    """Parse a honeycomb description: a layer count followed by its letters.

    Letters are read one per non-whitespace character, so they may be separated
    by any whitespace (or none).
    """
    parts = text.split(None, 1)
    if not parts:
        raise MalformedHoneycombError("Missing layer count")
    head = parts[0]
    rest = parts[1] if len(parts) > 1 else ""
    try:
        layers = int(head)
    except ValueError:
        raise MalformedHoneycombError(f"Layer count must be an integer, got {head!r}") from None

    letters = [ch for ch in rest if not ch.isspace()]
    grid = HoneycombGrid.from_letters(layers, letters)
    logger.info("Parsed honeycomb: layers=%d columns=%d cells=%d", layers, grid.number_columns, len(grid))
    return grid


def load_honeycomb(path: str) -> HoneycombGrid:
    with open(path, "r", encoding="utf-8") as f:
        return parse_honeycomb(f.read())
