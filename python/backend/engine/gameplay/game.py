"""Core gameplay logic: moves, shuffles, resets and hints."""

from __future__ import annotations

import logging
import random

from backend.engine.gamegenerator import DEFAULT_SHUFFLE_STEPS, GameGenerator
from backend.engine.gamemoves import MoveExecutor, SlotObserver
from backend.engine.gamesolver import DEFAULT_MAX_NODES, HintResult, HintStatus, Solver
from backend.engine.gamestate import GameState
from backend.models.board import GOAL, INITIAL, SIZE, Board, Direction

logger = logging.getLogger(__name__)

UNSOLVABLE_WARNING = (
    "This board cannot be solved (odd inversion count). "
    "Rearrange the tiles or shuffle."
)

# Offset from the blank to the tile that slides in each direction.
# UP    → tile below the blank moves up
# DOWN  → tile above the blank moves down
# LEFT  → tile right of the blank moves left
# RIGHT → tile left of the blank moves right
_OFFSETS = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


class GamePlay:
    """Orchestrates a single game session.

    The session owns its ``GameState``; nothing here is module-global.  An
    optional *observer* is told about every slot that changes.
    """

    def __init__(
        self,
        board: Board | None = None,
        *,
        observer: SlotObserver | None = None,
        rng: random.Random | None = None,
        max_nodes: int = DEFAULT_MAX_NODES,
    ) -> None:
        if board is None:
            board = Board.from_flat(INITIAL)
        self.state = GameState(board)
        self.observer = observer
        self.rng = rng
        self.max_nodes = max_nodes
        if not self.is_solvable:
            logger.info("Session started on an unsolvable board: %s", board)

    # -- movement -------------------------------------------------------------

    def can_move(self, position: int) -> bool:
        return MoveExecutor.can_move(position, self.state.board.empty_pos)

    def move_tile(self, position: int) -> tuple[int, int] | None:
        """Move the tile at *position* into the adjacent blank.

        Returns ``(from, to)``, the two positions that changed, or ``None``
        if the tile is not next to the blank (nothing happens then).
        """
        if not 0 <= position < SIZE * SIZE or not self.can_move(position):
            return None

        board = self.state.board
        dst = board.empty_pos
        MoveExecutor.apply_move(board, position, dst, self.observer)
        self.state.increment_moves()
        return position, dst

    def move(self, direction: Direction) -> tuple[int, int] | None:
        """Slide a tile in *direction* into the blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        """
        br, bc = divmod(self.state.board.empty_pos, SIZE)
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc

        if not (0 <= tr < SIZE and 0 <= tc < SIZE):
            return None
        return self.move_tile(tr * SIZE + tc)

    # -- session control ------------------------------------------------------

    def start(self) -> None:
        """Start the clock and zero the hint counter."""
        self.state.start_timer()
        self.state.hints_used = 0

    def shuffle(self, steps: int = DEFAULT_SHUFFLE_STEPS) -> None:
        """Scramble the live board; the result becomes the reset layout."""
        GameGenerator.scramble(self.state.board, steps, self.rng, self.observer)
        self.state.save_initial()
        self.state.reset_timer()
        self.state.moves = 0
        logger.debug("Shuffled %d steps: %s", steps, self.state.board)

    def reset(self) -> None:
        """Restore the saved initial layout."""
        restored = Board.from_flat(self.state.initial)
        board = self.state.board
        board.tiles[:] = restored.tiles
        board.empty_pos = restored.empty_pos
        self.state.moves = 0
        if self.observer is not None:
            for pos in range(SIZE * SIZE):
                self.observer.on_slot_changed(pos)
        logger.debug("Reset to %s", board)

    def hint(self) -> HintResult:
        """Search for the next move without touching the live board."""
        if not self.is_solvable:
            return HintResult(HintStatus.NOT_FOUND)

        snapshot = self.state.board.copy()
        result = Solver.first_move(snapshot, GOAL, self.max_nodes)
        if result.found and result.position is not None:
            if not self.can_move(result.position):
                logger.info("Discarding stale hint %d", result.position)
                return HintResult(HintStatus.NOT_FOUND, expanded=result.expanded)
            self.state.increment_hints()
        return result

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    @property
    def is_solvable(self) -> bool:
        return Solver.is_solvable(self.state.board)

    @property
    def hint_available(self) -> bool:
        return self.is_solvable and not self.is_won

    @property
    def warning(self) -> str | None:
        return None if self.is_solvable else UNSOLVABLE_WARNING
