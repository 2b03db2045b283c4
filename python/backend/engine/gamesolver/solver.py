"""Eight-puzzle solver: inversion-parity check and bounded A* search."""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from backend.errors import BoardInvariantError
from backend.models.adjacency import GRID
from backend.models.board import EMPTY, GOAL, SIZE, Board

logger = logging.getLogger(__name__)

DEFAULT_MAX_NODES = 100_000

Key = tuple[int, ...]
BoardLike = Board | Sequence[int | None]

# Manhattan distance between every pair of positions.
_DIST: tuple[tuple[int, ...], ...] = tuple(
    tuple(
        abs(p // SIZE - q // SIZE) + abs(p % SIZE - q % SIZE)
        for q in range(SIZE * SIZE)
    )
    for p in range(SIZE * SIZE)
)


class HintStatus(StrEnum):
    FOUND = "found"
    ALREADY_SOLVED = "already_solved"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class HintResult:
    """Outcome of a hint request.

    ``position`` is the tile to move next and is only set when
    ``status`` is ``FOUND``.  ``expanded`` counts closed search nodes.
    """

    status: HintStatus
    position: int | None = None
    expanded: int = 0

    @property
    def found(self) -> bool:
        return self.status is HintStatus.FOUND


@dataclass(slots=True)
class _Node:
    tiles: Key
    empty: int
    g: int
    h: int
    parent: int  # arena index, -1 for the root
    moved_from: int  # tile position that slid into the parent's blank


# -- helpers ------------------------------------------------------------------


def _key_of(board: BoardLike) -> Key:
    """Return the canonical key of *board*, validating it on the way."""
    if isinstance(board, Board):
        if not 0 <= board.empty_pos < len(board.tiles) or (
            board.tiles[board.empty_pos] != EMPTY
        ):
            raise BoardInvariantError(
                f"Cached blank position {board.empty_pos} does not hold the blank."
            )
        return Board.from_flat(board.tiles).key()
    return Board.from_flat(board).key()


def _goal_positions(goal: Key) -> list[int]:
    """Index ``v`` holds the goal position of tile ``v``."""
    where = [0] * len(goal)
    for pos, v in enumerate(goal):
        where[v] = pos
    return where


def _manhattan(tiles: Key, goal_pos: list[int]) -> int:
    return sum(_DIST[i][goal_pos[v]] for i, v in enumerate(tiles) if v != EMPTY)


class Solver:
    """Stateless solver — all methods are static."""

    # -- solvability ----------------------------------------------------------

    @staticmethod
    def inversions(tiles: Sequence[int | None]) -> int:
        """Count out-of-order pairs among the non-blank tiles."""
        values = [v for v in tiles if v is not None and v != EMPTY]
        return sum(
            1
            for i in range(len(values))
            for j in range(i + 1, len(values))
            if values[i] > values[j]
        )

    @staticmethod
    def is_solvable(board: BoardLike) -> bool:
        """Return True if *board* can reach the goal state.

        On an odd-width grid a legal move never changes the parity of the
        inversion count, and the goal has zero inversions.
        Malformed boards raise ``BoardInvariantError``.
        """
        return Solver.inversions(_key_of(board)) % 2 == 0

    @staticmethod
    def manhattan(board: BoardLike, goal: BoardLike = GOAL) -> int:
        """Sum of every tile's grid distance from its place in *goal*."""
        return _manhattan(_key_of(board), _goal_positions(_key_of(goal)))

    # -- search ---------------------------------------------------------------

    @staticmethod
    def first_move(
        start: BoardLike,
        goal: BoardLike = GOAL,
        max_nodes: int = DEFAULT_MAX_NODES,
    ) -> HintResult:
        """Return the first move of a shortest path from *start* to *goal*.

        The search works on its own copies, so *start* is never modified.
        It gives up with ``NOT_FOUND`` once *max_nodes* nodes have been
        expanded, which bounds the work spent on unsolvable boards.
        """
        if max_nodes < 1:
            raise ValueError(f"max_nodes must be positive, got {max_nodes}.")
        start_key, goal_key = _key_of(start), _key_of(goal)
        if start_key == goal_key:
            return HintResult(HintStatus.ALREADY_SOLVED)

        arena, goal_idx, expanded = Solver._search(start_key, goal_key, max_nodes)
        if goal_idx is None:
            logger.warning(
                "A* found no path (explored %d, limit %d)", expanded, max_nodes
            )
            return HintResult(HintStatus.NOT_FOUND, expanded=expanded)

        # Walk back to the node created directly from the start (index 0).
        idx = goal_idx
        while arena[idx].parent != 0:
            idx = arena[idx].parent
        position = arena[idx].moved_from
        logger.debug(
            "A* reached goal at depth %d after %d expansions; first move %d",
            arena[goal_idx].g,
            expanded,
            position,
        )
        return HintResult(HintStatus.FOUND, position, expanded)

    @staticmethod
    def solve(
        board: BoardLike,
        goal: BoardLike = GOAL,
        max_nodes: int = DEFAULT_MAX_NODES,
    ) -> list[int]:
        """Return the tile positions to move, in order, to reach *goal*.

        Returns ``[]`` if already solved, unsolvable, or out of budget.
        """
        if max_nodes < 1:
            raise ValueError(f"max_nodes must be positive, got {max_nodes}.")
        start_key, goal_key = _key_of(board), _key_of(goal)
        if start_key == goal_key:
            return []

        arena, goal_idx, expanded = Solver._search(start_key, goal_key, max_nodes)
        if goal_idx is None:
            logger.warning(
                "A* found no path (explored %d, limit %d)", expanded, max_nodes
            )
            return []

        path: list[int] = []
        idx = goal_idx
        while arena[idx].parent != -1:
            path.append(arena[idx].moved_from)
            idx = arena[idx].parent
        path.reverse()
        return path

    @staticmethod
    def hint(board: BoardLike) -> int | None:
        """Return the single best tile to move, or ``None`` if solved / not found."""
        return Solver.first_move(board).position

    @staticmethod
    def _search(
        start: Key, goal: Key, max_nodes: int
    ) -> tuple[list[_Node], int | None, int]:
        """Run A* and return ``(arena, goal index or None, expansions)``.

        Nodes live in ``arena`` and refer to their parent by index; ``index``
        maps each canonical key to its arena slot.  Relaxed nodes are pushed
        again and their outdated heap entries are skipped on pop.
        """
        goal_pos = _goal_positions(goal)
        h0 = _manhattan(start, goal_pos)
        arena = [_Node(start, start.index(EMPTY), 0, h0, -1, -1)]
        index: dict[Key, int] = {start: 0}
        closed: set[int] = set()

        counter = itertools.count()
        # (f, h, insertion order, arena index, g at push time)
        frontier = [(h0, h0, next(counter), 0, 0)]
        expanded = 0

        while frontier and expanded < max_nodes:
            _, _, _, idx, g = heapq.heappop(frontier)
            node = arena[idx]
            if idx in closed or g != node.g:
                continue
            if node.tiles == goal:
                return arena, idx, expanded

            closed.add(idx)
            expanded += 1

            e = node.empty
            for n in GRID.neighbors(e):
                tiles = list(node.tiles)
                v = tiles[n]
                tiles[e], tiles[n] = v, EMPTY
                key = tuple(tiles)

                # Only tile v moved, from n to e.
                h = node.h - _DIST[n][goal_pos[v]] + _DIST[e][goal_pos[v]]
                child_g = node.g + 1

                j = index.get(key)
                if j is None:
                    j = len(arena)
                    arena.append(_Node(key, n, child_g, h, idx, n))
                    index[key] = j
                elif j in closed or child_g >= arena[j].g:
                    continue
                else:
                    child = arena[j]
                    child.g, child.parent, child.moved_from = child_g, idx, n

                heapq.heappush(frontier, (child_g + h, h, next(counter), j, child_g))

        return arena, None, expanded
