"""Board model for the eight puzzle."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from backend.errors import BoardInvariantError
from backend.models.adjacency import GRID

SIZE = 3
EMPTY = 0

GOAL: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, EMPTY)
INITIAL: tuple[int, ...] = (1, 3, 2, 4, 7, 5, EMPTY, 8, 6)

_EMPTY_TOKENS = frozenset({"_", ".", "0"})


class Direction(StrEnum):
    """Direction in which a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def arrow(self) -> str:
        return _ARROWS[self]

    @classmethod
    def between(cls, src: int, dst: int) -> Direction:
        """Return the direction of a tile moving from *src* to *dst*."""
        if not GRID.are_adjacent(src, dst):
            raise ValueError(f"Positions {src} and {dst} are not adjacent.")
        return _DELTAS[dst - src]


_ARROWS = {
    Direction.UP: "↑",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
}

_DELTAS = {
    -SIZE: Direction.UP,
    SIZE: Direction.DOWN,
    -1: Direction.LEFT,
    1: Direction.RIGHT,
}


def row_col(pos: int) -> tuple[int, int]:
    return divmod(pos, SIZE)


@dataclass
class Board:
    """Represents the puzzle board.

    Tiles are stored as a flat row-major list of 9 ints. ``EMPTY`` (0)
    represents the blank; ``empty_pos`` caches its index.
    """

    tiles: list[int]
    empty_pos: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Sequence[int | None]) -> Board:
        """Create a board from a flat row-major tile sequence.

        ``None`` is accepted as the blank as well as ``EMPTY``.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        tiles = [EMPTY if v is None else v for v in flat]
        if len(tiles) != SIZE * SIZE:
            raise BoardInvariantError(
                f"Expected {SIZE * SIZE} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(tiles)}."
            )
        if sorted(tiles) != list(range(SIZE * SIZE)):
            raise BoardInvariantError(
                f"Board must hold tiles 1-8 and one blank exactly once, got {tiles}."
            )
        return cls(tiles=tiles, empty_pos=tiles.index(EMPTY))

    @classmethod
    def parse(cls, text: str) -> Board:
        """Parse a board such as ``"1,3,2,4,7,5,_,8,6"``.

        Tokens may be separated by commas and/or whitespace; ``_``, ``.``
        and ``0`` all denote the blank.
        """
        tokens = [t for t in re.split(r"[,\s]+", text.strip()) if t]
        flat: list[int] = []
        for tok in tokens:
            if tok in _EMPTY_TOKENS:
                flat.append(EMPTY)
            elif tok.isdecimal():
                flat.append(int(tok))
            else:
                raise BoardInvariantError(f"Unrecognised tile {tok!r} in {text!r}.")
        return cls.from_flat(flat)

    @classmethod
    def goal(cls) -> Board:
        return cls(tiles=list(GOAL), empty_pos=GOAL.index(EMPTY))

    # -- queries --------------------------------------------------------------

    def get_tile(self, pos: int) -> int:
        return self.tiles[pos]

    def position_of(self, value: int) -> int:
        return self.tiles.index(value)

    def key(self) -> tuple[int, ...]:
        """Canonical hashable key: identical slots give identical keys."""
        return tuple(self.tiles)

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return self.key() == GOAL

    def is_tile_correct(self, pos: int) -> bool:
        """Check if a specific tile is in its goal position."""
        return self.tiles[pos] == GOAL[pos]

    def copy(self) -> Board:
        return Board(tiles=self.tiles[:], empty_pos=self.empty_pos)

    def __str__(self) -> str:
        return ",".join("_" if v == EMPTY else str(v) for v in self.tiles)
