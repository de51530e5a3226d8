"""Line-based input for CLI frontends.

Reads boards, heuristic choices and yes/no answers from stdin.
Boards are validated here; the solver assumes well-formed input.
"""

from __future__ import annotations

from backend.engine.gamesolver import Heuristic
from backend.models.board import Board, InvalidBoardError


# -- parsing ------------------------------------------------------------------

_HEURISTIC_MAP: dict[str, Heuristic] = {
    "0": Heuristic.MISPLACED,
    "1": Heuristic.MANHATTAN,
    "misplaced": Heuristic.MISPLACED,
    "manhattan": Heuristic.MANHATTAN,
}


def parse_board(text: str, size: int) -> Board:
    """Parse whitespace- or comma-separated tiles into a ``Board``.

    Raises ``InvalidBoardError`` for non-integers or a bad permutation.
    """
    parts = text.replace(",", " ").split()
    flat: list[int] = []
    for p in parts:
        try:
            flat.append(int(p))
        except ValueError:
            raise InvalidBoardError(f"Tiles must be integers, got {p!r}.") from None
    return Board.from_flat(size, flat)


def parse_heuristic(text: str, default: Heuristic) -> Heuristic:
    """Map ``0``/``1`` or a heuristic name to a ``Heuristic``."""
    choice = text.strip().lower()
    if not choice:
        return default
    try:
        return _HEURISTIC_MAP[choice]
    except KeyError:
        raise ValueError(f"Unknown heuristic {text.strip()!r}.") from None


# -- prompts ------------------------------------------------------------------


def read_board(size: int, on_error) -> Board:
    """Prompt until a valid board is entered.

    *on_error* receives the message for every rejected line.
    Raises ``EOFError`` when stdin is exhausted.
    """
    while True:
        text = input(f"  Enter the initial board ({size * size} tiles, 0 = blank): ")
        try:
            return parse_board(text, size)
        except InvalidBoardError as exc:
            on_error(str(exc))


def read_heuristic(default: Heuristic, on_error) -> Heuristic:
    while True:
        text = input(
            "  Heuristic: 0 = misplaced tiles, 1 = manhattan distance "
            f"(default {default.value}): "
        )
        try:
            return parse_heuristic(text, default)
        except ValueError as exc:
            on_error(str(exc))


def ask_again() -> bool:
    """Return True if the user wants to solve another board."""
    try:
        return input("  Do you want to play again? (y/n) ").strip().lower() == "y"
    except EOFError:
        return False
