"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time
from collections.abc import Callable

from backend.models.board import Board


class GameState:
    """Holds the live board, its saved starting layout, and session counters.

    The stopwatch only runs once ``start_timer`` is called; until then
    ``elapsed_time`` reads zero.
    """

    def __init__(
        self, board: Board, clock: Callable[[], float] = time.monotonic
    ) -> None:
        self.board = board
        self._clock = clock
        self.initial: tuple[int, ...] = board.key()
        self.moves: int = 0
        self.hints_used: int = 0
        self._start_time: float | None = None
        self._elapsed_banked: float = 0.0
        self._running: bool = False

    # -- time tracking --------------------------------------------------------

    @property
    def started(self) -> bool:
        return self._start_time is not None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def elapsed_time(self) -> float:
        if self._running and self._start_time is not None:
            return self._elapsed_banked + (self._clock() - self._start_time)
        return self._elapsed_banked

    def start_timer(self) -> None:
        if not self._running:
            self._start_time = self._clock()
            self._running = True

    def reset_timer(self) -> None:
        self._start_time = None
        self._elapsed_banked = 0.0
        self._running = False

    def pause(self) -> None:
        if self._running and self._start_time is not None:
            self._elapsed_banked += self._clock() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running and self.started:
            self.start_timer()

    # -- counters -------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    def increment_hints(self) -> None:
        self.hints_used += 1

    def save_initial(self) -> None:
        """Remember the current layout as the one ``reset`` restores."""
        self.initial = self.board.key()

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
