"""Validates and applies single tile moves."""

from __future__ import annotations

from typing import Protocol

from backend.errors import IllegalMoveError
from backend.models.adjacency import GRID
from backend.models.board import Board


class SlotObserver(Protocol):
    """Receives one notification per board slot whose content changed."""

    def on_slot_changed(self, position: int) -> None: ...


class MoveExecutor:
    """Stateless move rules."""

    @staticmethod
    def can_move(position: int, empty_pos: int) -> bool:
        """Return True if the tile at *position* may slide into *empty_pos*."""
        return position in GRID.neighbors(empty_pos)

    @staticmethod
    def apply_move(
        board: Board,
        src: int,
        dst: int,
        observer: SlotObserver | None = None,
    ) -> int:
        """Slide the tile at *src* into the blank at *dst*.

        Only the two touched slots are reported to *observer*.  Returns the
        new blank position (*src*).  Callers must check ``can_move`` first;
        a violated precondition raises ``IllegalMoveError``.
        """
        if dst != board.empty_pos:
            raise IllegalMoveError(
                f"Target {dst} is not the blank (blank is at {board.empty_pos})."
            )
        if not MoveExecutor.can_move(src, dst):
            raise IllegalMoveError(f"Position {src} is not adjacent to {dst}.")

        tiles = board.tiles
        tiles[src], tiles[dst] = tiles[dst], tiles[src]
        board.empty_pos = src

        if observer is not None:
            observer.on_slot_changed(src)
            observer.on_slot_changed(dst)
        return src
