"""Heuristic estimates of the number of moves left to reach the goal."""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache

from backend.models.board import Board


class Heuristic(StrEnum):
    MISPLACED = "misplaced"
    MANHATTAN = "manhattan"


@lru_cache(maxsize=16)
def _goal_positions(goal: Board) -> tuple[tuple[int, int], ...]:
    """``positions[v]`` is the (row, col) of tile *v* on *goal*."""
    positions = [(0, 0)] * len(goal.tiles)
    for i, v in enumerate(goal.tiles):
        positions[v] = divmod(i, goal.size)
    return tuple(positions)


def misplaced(board: Board, goal: Board) -> int:
    """Number of tiles (blank excluded) not on their goal cell."""
    return sum(
        1 for v, g in zip(board.tiles, goal.tiles) if v != 0 and v != g
    )


def manhattan(board: Board, goal: Board) -> int:
    """Sum of row + column distances of every tile from its goal cell."""
    targets = _goal_positions(goal)
    n = board.size
    total = 0
    for i, v in enumerate(board.tiles):
        if v == 0:
            continue
        r, c = divmod(i, n)
        gr, gc = targets[v]
        total += abs(r - gr) + abs(c - gc)
    return total


_FUNCTIONS = {
    Heuristic.MISPLACED: misplaced,
    Heuristic.MANHATTAN: manhattan,
}


def heuristic(board: Board, goal: Board, mode: Heuristic) -> int:
    """Estimate moves from *board* to *goal* using *mode*.

    Both modes never overestimate and change by at most one per move, so
    best-first search on ``g + h`` returns optimal solutions.
    """
    return _FUNCTIONS[Heuristic(mode)](board, goal)
