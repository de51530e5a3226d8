"""Replays move sequences against a board and checks the win condition."""

from __future__ import annotations

from backend.engine.gameplay.moves import apply_move
from backend.models.board import Board, Direction


class GamePlay:
    """Tracks a board while moves are applied to it one at a time."""

    def __init__(self, board: Board, goal: Board | None = None) -> None:
        self.size = board.size
        self.board = board
        self.goal = goal if goal is not None else Board.goal(board.size)
        self.moves: int = 0
        self.history: list[Board] = [board]

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        nxt = apply_move(self.board, direction)
        if nxt is None:
            return False

        self.board = nxt
        self.moves += 1
        self.history.append(nxt)
        return True

    def replay(self, directions: list[Direction]) -> bool:
        """Apply *directions* in order; stop at the first invalid one."""
        return all(self.move(d) for d in directions)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board == self.goal
