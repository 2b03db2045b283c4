"""Session stopwatch and counters."""

from __future__ import annotations

from backend.engine.gamestate import GameState
from backend.models.board import Board


class _FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def _state() -> tuple[GameState, _FakeClock]:
    clock = _FakeClock()
    return GameState(Board.goal(), clock=clock), clock


def test_clock_idle_until_started() -> None:
    state, clock = _state()
    clock.now += 30
    assert not state.started
    assert state.elapsed_time == 0.0


def test_elapsed_time_runs_after_start() -> None:
    state, clock = _state()
    state.start_timer()
    clock.now += 12.5
    assert state.started
    assert state.elapsed_time == 12.5


def test_pause_and_resume() -> None:
    state, clock = _state()
    state.start_timer()
    clock.now += 5
    state.pause()
    clock.now += 100
    assert state.elapsed_time == 5
    state.resume()
    clock.now += 2
    assert state.elapsed_time == 7


def test_resume_does_not_start_a_fresh_clock() -> None:
    state, _ = _state()
    state.resume()
    assert not state.running


def test_reset_timer() -> None:
    state, clock = _state()
    state.start_timer()
    clock.now += 9
    state.reset_timer()
    assert not state.started
    assert state.elapsed_time == 0.0


def test_start_twice_keeps_original_start() -> None:
    state, clock = _state()
    state.start_timer()
    clock.now += 3
    state.start_timer()
    clock.now += 1
    assert state.elapsed_time == 4


def test_counters_and_snapshot() -> None:
    state, _ = _state()
    state.increment_moves()
    state.increment_hints()
    assert (state.moves, state.hints_used) == (1, 1)
    assert state.is_solved

    state.board.tiles[7], state.board.tiles[8] = 0, 8
    state.board.empty_pos = 7
    state.save_initial()
    assert state.initial == (1, 2, 3, 4, 5, 6, 7, 0, 8)
