"""Exception types raised by the puzzle backend."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for all puzzle errors."""


class BoardInvariantError(PuzzleError, ValueError):
    """The board is not a permutation of 1-8 plus a single blank."""


class IllegalMoveError(PuzzleError, ValueError):
    """A move was applied without first passing ``can_move``."""
