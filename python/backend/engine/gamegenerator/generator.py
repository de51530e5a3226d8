"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random

from backend.engine.gameplay.moves import successors
from backend.models.board import Board


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(size)

    @staticmethod
    def scramble(
        board: Board, rng: random.Random | None = None, shuffles: int | None = None
    ) -> Board:
        """Return *board* after *shuffles* random valid moves.

        Never undoes the previous move unless it is the only one available.
        """
        rng = rng or random.Random()
        if shuffles is None:
            shuffles = board.size * board.size * 100
        prev: Board | None = None

        for _ in range(shuffles):
            neighbors = [child for _, child in successors(board)]
            if prev in neighbors and len(neighbors) > 1:
                neighbors.remove(prev)
            prev, board = board, rng.choice(neighbors)
        return board

    @staticmethod
    def generate(
        size: int, rng: random.Random | None = None, shuffles: int | None = None
    ) -> Board:
        """Return a random *solvable*, unsolved board of the given size."""
        rng = rng or random.Random()
        while True:
            board = GameGenerator.scramble(GameGenerator.solved(size), rng, shuffles)
            if not board.is_solved():
                return board
