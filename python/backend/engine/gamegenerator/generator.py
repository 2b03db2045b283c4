"""Generates solvable eight-puzzle boards."""

from __future__ import annotations

import random

from backend.engine.gamemoves import MoveExecutor, SlotObserver
from backend.models.adjacency import GRID
from backend.models.board import Board

DEFAULT_SHUFFLE_STEPS = 100


class GameGenerator:
    """Creates solvable puzzles by random walks from the solved state.

    Every step is a legal move, so a walk that starts on a solvable board
    never leaves the solvable half of the state space.
    """

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (tiles in order, blank bottom-right)."""
        return Board.goal()

    @staticmethod
    def scramble(
        board: Board,
        steps: int = DEFAULT_SHUFFLE_STEPS,
        rng: random.Random | None = None,
        observer: SlotObserver | None = None,
    ) -> Board:
        """Scramble *board* in-place with *steps* uniformly random moves."""
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}.")
        choose = rng.choice if rng is not None else random.choice

        for _ in range(steps):
            target = choose(GRID.neighbors(board.empty_pos))
            MoveExecutor.apply_move(board, target, board.empty_pos, observer)
        return board

    @staticmethod
    def generate(
        steps: int = DEFAULT_SHUFFLE_STEPS,
        rng: random.Random | None = None,
    ) -> Board:
        """Return a random *solvable* board."""
        return GameGenerator.scramble(GameGenerator.solved(), steps, rng)
