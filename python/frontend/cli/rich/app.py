"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Heuristic, SearchResult, Solver
from backend.models.board import Board
from frontend.cli.input_handler import ask_again, read_board, read_heuristic

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, goal: Board, title: str | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        title=title,
        title_style="bold cyan",
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif val == goal.get_tile(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _stats_table(result: SearchResult) -> Table:
    table = Table(box=rich.box.ROUNDED, border_style="dim", show_header=False)
    table.add_column(style="dim")
    table.add_column(justify="right", style="bold yellow")
    table.add_row("Steps", str(result.cost))
    table.add_row("Visited nodes", str(result.discovered))
    table.add_row("Expanded", str(result.expanded))
    table.add_row("Peak frontier", str(result.peak_frontier))
    table.add_row("Peak closed", str(result.peak_closed))
    return table


# -- screens ------------------------------------------------------------------


def show_error(message: str) -> None:
    console.print(Text(f"  {message}", style="red"))


def show_start(board: Board, goal: Board) -> None:
    console.print()
    console.print(
        Columns(
            [
                _render_board(board, goal, "Initial State"),
                _render_board(goal, goal, "Goal State"),
            ],
            padding=(0, 4),
        )
    )


def show_result(
    board: Board, goal: Board, result: SearchResult, show_path: bool = True
) -> None:
    if not result.solved:
        console.print(
            Panel(
                Text("Can not find a solution!", style="bold red"),
                border_style="red",
            )
        )
        if result.discovered:
            console.print(f"  [dim]Visited nodes:[/dim] {result.discovered}")
        return

    moves = Text(" ".join(m.value.upper() for m in result.moves) or "-", style="cyan")
    console.print(
        Panel(
            Group(Align.center(_stats_table(result)), Align.center(moves)),
            title="[bold green]Found a solution![/bold green]",
            border_style="green",
            padding=(1, 2),
        )
    )
    if not show_path:
        return

    game = GamePlay(board, goal)
    boards = [_render_board(board, goal, "Start")]
    for i, direction in enumerate(result.moves, 1):
        game.move(direction)
        boards.append(_render_board(game.board, goal, f"{i}. {direction.value.upper()}"))
    console.print(Columns(boards, padding=(0, 2)))


# -- interactive loop ---------------------------------------------------------


def run(size: int, heuristic: Heuristic = Heuristic.MANHATTAN) -> None:
    """Read boards from stdin and solve them until the user stops."""
    goal = Board.goal(size)
    console.print(
        Panel(
            Align.center(Text(f"{size}×{size}  A*  solver", style="bold")),
            title="[bold]S L I D I N G   P U Z Z L E[/bold]",
            border_style="bright_blue",
        )
    )
    while True:
        try:
            board = read_board(size, show_error)
            mode = read_heuristic(heuristic, show_error)
        except EOFError:
            console.print()
            return

        show_start(board, goal)
        with console.status("Searching…"):
            result = Solver.solve(board, mode, goal)
        show_result(board, goal, result)

        if not ask_again():
            console.print("\n  [dim]Goodbye![/dim]\n")
            return
