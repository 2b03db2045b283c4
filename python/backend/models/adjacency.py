"""Fixed adjacency table for the 3×3 grid."""

from __future__ import annotations


class AdjacencyGraph:
    """Maps each position to the positions sharing an edge with it.

    Positions are row-major indices.  The table is built once and never
    changes.
    """

    def __init__(self, size: int = 3) -> None:
        if size != 3:
            raise ValueError(f"Only 3×3 boards are supported, got {size}×{size}.")
        self.size = size
        table: list[tuple[int, ...]] = []
        for i in range(size * size):
            r, c = divmod(i, size)
            nb: list[int] = []
            if r > 0:
                nb.append(i - size)
            if c > 0:
                nb.append(i - 1)
            if c < size - 1:
                nb.append(i + 1)
            if r < size - 1:
                nb.append(i + size)
            table.append(tuple(nb))
        self._table = tuple(table)

    def __len__(self) -> int:
        return len(self._table)

    def neighbors(self, pos: int) -> tuple[int, ...]:
        return self._table[pos]

    def are_adjacent(self, a: int, b: int) -> bool:
        return b in self._table[a]


GRID = AdjacencyGraph()
