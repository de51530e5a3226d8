"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes) for rendering and line input.
"""

from __future__ import annotations

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Heuristic, SearchResult, Solver
from backend.models.board import Board
from frontend.cli.input_handler import ask_again, read_board, read_heuristic


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, goal: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    width = len(str(board.size * board.size - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * board.size)

    lines: list[str] = [sep]
    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            elif val == goal.get_tile(r, c):
                cells.append(f"{_G} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- screens ------------------------------------------------------------------


def show_error(message: str) -> None:
    print(f"  {_RED}{message}{_R}")


def show_start(board: Board, goal: Board) -> None:
    print(f"\n  {_C}Initial State:{_R}")
    print(_render_board(board, goal))
    print(f"  {_C}Goal State:{_R}")
    print(_render_board(goal, goal))


def show_result(
    board: Board, goal: Board, result: SearchResult, show_path: bool = True
) -> None:
    if not result.solved:
        print(f"\n  {_Y}Can not find a solution!{_R}")
        if result.discovered:
            print(f"  Number of visited nodes: {_BOLD}{result.discovered}{_R}")
        return

    print(f"\n  {_G}Found a solution!{_R}")
    print(f"  Number of steps: {_BOLD}{result.cost}{_R}")
    print(f"  Number of visited nodes: {_BOLD}{result.discovered}{_R}")
    print(f"  Expanded: {result.expanded}  Peak frontier: {result.peak_frontier}")
    print(f"  Moves: {' '.join(m.value.upper() for m in result.moves) or '-'}")
    if not show_path:
        return

    print("\n  Here's the path to get to the goal:")
    game = GamePlay(board, goal)
    print(_render_board(board, goal))
    for direction in result.moves:
        game.move(direction)
        print(f"\n  Move: {_C}{direction.value.upper()}{_R}")
        print(_render_board(game.board, goal))


# -- interactive loop ---------------------------------------------------------


def run(size: int, heuristic: Heuristic = Heuristic.MANHATTAN) -> None:
    """Read boards from stdin and solve them until the user stops."""
    goal = Board.goal(size)
    while True:
        try:
            board = read_board(size, show_error)
            mode = read_heuristic(heuristic, show_error)
        except EOFError:
            print()
            return

        show_start(board, goal)
        show_result(board, goal, Solver.solve(board, mode, goal))

        if not ask_again():
            print("\n  Goodbye!\n")
            return
