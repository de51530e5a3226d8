"""Search node — a board plus its path cost and heuristic estimate."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import Board


@dataclass
class SearchNode:
    """Board with ``g`` (moves from the start) and ``h`` (estimate to goal).

    ``g`` and ``h`` are mutated in place when a cheaper path to the same
    board is found. Callers must take the node out of any ordered
    container before changing them.
    """

    board: Board
    g: int = 0
    h: int = 0

    @property
    def key(self) -> int:
        return self.board.key

    @property
    def f(self) -> int:
        return self.g + self.h

    @property
    def rank(self) -> tuple[int, int]:
        """Total order used by the frontier: ``(f, key)`` ascending."""
        return (self.g + self.h, self.board.key)

    def __lt__(self, other: SearchNode) -> bool:
        return self.rank < other.rank
