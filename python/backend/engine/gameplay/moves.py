"""Move generation — the boards reachable from a board by one slide."""

from __future__ import annotations

from collections.abc import Iterator

from backend.models.board import Board, Direction

# The offset points to the tile that will slide into the blank.
# UP   → tile at (br+1, bc) moves up    → blank shifts down
# DOWN → tile at (br-1, bc) moves down  → blank shifts up
# LEFT → tile at (br, bc+1) moves left  → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right → blank shifts left
OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}

# Expansion order; fixes which equal-cost successor is seen first.
ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


def apply_move(board: Board, direction: Direction) -> Board | None:
    """Slide a tile in *direction* into the blank.

    Returns the resulting board, or ``None`` when no tile sits on that
    side of the blank.
    """
    br, bc = board.blank_pos
    dr, dc = OFFSETS[direction]
    tr, tc = br + dr, bc + dc

    if not (0 <= tr < board.size and 0 <= tc < board.size):
        return None

    return board.swap(br * board.size + bc, tr * board.size + tc)


def successors(board: Board) -> Iterator[tuple[Direction, Board]]:
    """Yield ``(direction, board)`` for every legal move, in ``ORDER``."""
    for direction in ORDER:
        child = apply_move(board, direction)
        if child is not None:
            yield direction, child
