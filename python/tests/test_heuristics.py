"""Heuristic values, admissibility and consistency on the full 3×3 graph."""

from __future__ import annotations

import pytest

from backend.engine.gameplay import successors
from backend.engine.gamesolver import Heuristic, heuristic
from backend.models.board import Board

SAMPLE = Board.from_flat(3, [5, 6, 8, 3, 4, 2, 1, 7, 0])


@pytest.mark.parametrize("mode", list(Heuristic), ids=str)
def test_goal_scores_zero(mode: Heuristic, goal_3x3: Board) -> None:
    assert heuristic(goal_3x3, goal_3x3, mode) == 0


@pytest.mark.parametrize("mode", list(Heuristic), ids=str)
def test_one_move_from_goal_scores_one(mode: Heuristic, goal_3x3: Board) -> None:
    for _, board in successors(goal_3x3):
        assert heuristic(board, goal_3x3, mode) == 1


def test_misplaced_ignores_blank(goal_3x3: Board) -> None:
    assert heuristic(SAMPLE, goal_3x3, Heuristic.MISPLACED) == 8


def test_manhattan_sums_tile_distances(goal_3x3: Board) -> None:
    assert heuristic(SAMPLE, goal_3x3, Heuristic.MANHATTAN) == 16


def test_heuristic_respects_custom_goal() -> None:
    goal = Board.from_flat(3, [0, 1, 2, 3, 4, 5, 6, 7, 8])
    board = Board.from_flat(3, [1, 0, 2, 3, 4, 5, 6, 7, 8])
    assert heuristic(board, goal, Heuristic.MANHATTAN) == 1
    assert heuristic(board, goal, Heuristic.MISPLACED) == 1


def test_mode_accepts_plain_strings(goal_3x3: Board) -> None:
    assert heuristic(SAMPLE, goal_3x3, "manhattan") == 16  # type: ignore[arg-type]


@pytest.mark.timeout(300)
@pytest.mark.parametrize("mode", list(Heuristic), ids=str)
def test_admissible_on_every_reachable_state(
    mode: Heuristic, goal_3x3: Board, distances_3x3: dict[Board, int]
) -> None:
    assert len(distances_3x3) == 181440
    over = [
        b for b, d in distances_3x3.items() if heuristic(b, goal_3x3, mode) > d
    ]
    assert over == []


@pytest.mark.timeout(300)
@pytest.mark.parametrize("mode", list(Heuristic), ids=str)
def test_consistent_across_moves(
    mode: Heuristic, goal_3x3: Board, distances_3x3: dict[Board, int]
) -> None:
    for i, board in enumerate(distances_3x3):
        if i % 25:
            continue
        h = heuristic(board, goal_3x3, mode)
        for _, child in successors(board):
            assert abs(h - heuristic(child, goal_3x3, mode)) <= 1
