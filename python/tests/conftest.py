"""Shared fixtures: a breadth-first map of the solvable state space."""

from __future__ import annotations

from collections import deque

import pytest

from backend.models.adjacency import GRID
from backend.models.board import EMPTY, GOAL


def _bfs_from_goal() -> dict[tuple[int, ...], int]:
    """Return the move distance from the goal for every reachable state."""
    dist = {GOAL: 0}
    queue = deque([GOAL])
    while queue:
        state = queue.popleft()
        e = state.index(EMPTY)
        for n in GRID.neighbors(e):
            nxt = list(state)
            nxt[e], nxt[n] = nxt[n], nxt[e]
            key = tuple(nxt)
            if key not in dist:
                dist[key] = dist[state] + 1
                queue.append(key)
    return dist


@pytest.fixture(scope="session")
def goal_distances() -> dict[tuple[int, ...], int]:
    return _bfs_from_goal()


class Recorder:
    """Slot observer that remembers every notification in order."""

    def __init__(self) -> None:
        self.calls: list[int] = []

    def on_slot_changed(self, position: int) -> None:
        self.calls.append(position)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
