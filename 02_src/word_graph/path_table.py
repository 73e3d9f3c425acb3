"""Symmetric table of cached shortest paths addressed by vertex index."""

from typing import List, Optional, Sequence, Tuple

CachedPath = Tuple[str, ...]


class PathTable:
    """N x N table where cell (i, j) is the path from vertex i to vertex j.

    A cell holds ``None`` when the two vertices are disconnected. Writes go
    through ``store`` which fills both cells of a pair, keeping
    ``cell(i, j) == reversed(cell(j, i))``.
    """

    def __init__(self) -> None:
        self._rows: List[List[Optional[CachedPath]]] = []

    def __len__(self) -> int:
        return len(self._rows)

    def grow(self, word: str) -> int:
        """Add a row and column for ``word`` and return its index."""
        for existing in self._rows:
            existing.append(None)
        index = len(self._rows)
        row: List[Optional[CachedPath]] = [None] * (index + 1)
        row[index] = (word,)
        self._rows.append(row)
        return index

    def store(self, first: int, second: int, path: Optional[Sequence[str]]) -> None:
        if first == second:
            raise ValueError("Diagonal cells are fixed at grow time")
        if path is None:
            self._rows[first][second] = None
            self._rows[second][first] = None
            return
        forward = tuple(path)
        self._rows[first][second] = forward
        self._rows[second][first] = forward[::-1]

    def lookup(self, first: int, second: int) -> Optional[List[str]]:
        cell = self._rows[first][second]
        return list(cell) if cell is not None else None

    def reset(self, words: Sequence[str]) -> None:
        """Drop every cached path, keeping one empty row per word."""
        self._rows = []
        for word in words:
            self.grow(word)
