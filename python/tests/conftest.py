"""Shared fixtures — exact 3×3 distances by breadth-first search."""

from __future__ import annotations

from collections import deque

import pytest

from backend.engine.gameplay.moves import successors
from backend.models.board import Board


def bfs_distances(goal: Board) -> dict[Board, int]:
    """Distance from every board in *goal*'s component to *goal*.

    Moves are reversible, so searching outward from the goal gives the
    distance to it.
    """
    dist = {goal: 0}
    queue = deque([goal])
    while queue:
        board = queue.popleft()
        d = dist[board] + 1
        for _, child in successors(board):
            if child not in dist:
                dist[child] = d
                queue.append(child)
    return dist


@pytest.fixture(scope="session")
def distances_3x3() -> dict[Board, int]:
    return bfs_distances(Board.goal(3))


@pytest.fixture
def goal_3x3() -> Board:
    return Board.goal(3)
