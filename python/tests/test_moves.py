"""Move rules: legality, application, observer notifications."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamemoves import MoveExecutor
from backend.errors import IllegalMoveError
from backend.models.adjacency import GRID
from backend.models.board import GOAL, Board

from conftest import Recorder


def _sample_boards() -> list[Board]:
    rng = random.Random(11)
    return [GameGenerator.generate(30, rng) for _ in range(20)]


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize("empty_pos", range(9))
def test_can_move_matches_adjacency(empty_pos: int) -> None:
    for pos in range(9):
        expected = pos in GRID.neighbors(empty_pos)
        assert MoveExecutor.can_move(pos, empty_pos) is expected


def test_apply_move_swaps_and_returns_new_blank() -> None:
    board = Board.goal()
    new_empty = MoveExecutor.apply_move(board, 7, 8)
    assert new_empty == 7
    assert board.empty_pos == 7
    assert board.key() == (1, 2, 3, 4, 5, 6, 7, 0, 8)


def test_move_involution() -> None:
    for board in _sample_boards():
        e = board.empty_pos
        for p in GRID.neighbors(e):
            work = board.copy()
            MoveExecutor.apply_move(work, p, e)
            MoveExecutor.apply_move(work, e, p)
            assert work == board


def test_observer_sees_exactly_the_two_slots(recorder: Recorder) -> None:
    board = Board.goal()
    MoveExecutor.apply_move(board, 5, 8, recorder)
    assert recorder.calls == [5, 8]


def test_rejects_non_blank_target() -> None:
    board = Board.goal()
    with pytest.raises(IllegalMoveError):
        MoveExecutor.apply_move(board, 5, 4)
    assert board.key() == GOAL


def test_rejects_non_adjacent_source(recorder: Recorder) -> None:
    board = Board.goal()
    with pytest.raises(IllegalMoveError):
        MoveExecutor.apply_move(board, 0, 8, recorder)
    assert board.key() == GOAL
    assert recorder.calls == []
