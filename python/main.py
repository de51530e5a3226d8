#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py                               # interactive loop
    python main.py play -f vanilla -s 3          # plain terminal, 3×3
    python main.py solve 5 6 8 3 4 2 1 7 0       # solve one board
    python main.py solve -H misplaced 1 2 3 4 5 6 7 0 8
    python main.py random -s 3 --seed 7          # solve a random board
"""

import importlib
import logging
import math
import random as _random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gamesolver import Heuristic, Solver  # noqa: E402
from backend.models.board import Board, InvalidBoardError  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}

MIN_SIZE = 2
MAX_SIZE = 4


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
        force=True,
    )


def _frontend(name: Frontend):
    return importlib.import_module(_RUNNERS[name])


def _solve_and_report(
    board: Board, heuristic: Heuristic, frontend: Frontend,
    show_path: bool, exhaustive: bool,
) -> None:
    mod = _frontend(frontend)
    goal = Board.goal(board.size)
    mod.show_start(board, goal)
    result = Solver.solve(board, heuristic, goal, check_parity=not exhaustive)
    mod.show_result(board, goal, result, show_path=show_path)
    if not result.solved:
        raise typer.Exit(code=1)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=False)

_HEURISTIC_OPT = typer.Option(
    Heuristic.MANHATTAN, "-H", "--heuristic",
    envvar="PUZZLE_HEURISTIC",
    help="Heuristic used to rank boards.",
)
_FRONTEND_OPT = typer.Option(
    Frontend.rich, "-f", "--frontend",
    envvar="PUZZLE_FRONTEND",
    help="Renderer for boards and results.",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Sliding Puzzle Solver."""
    _configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        _frontend(Frontend.rich).run(size=3)


@app.command()
def play(
    frontend: Frontend = _FRONTEND_OPT,
    size: int = typer.Option(
        3, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        envvar="PUZZLE_SIZE",
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    heuristic: Heuristic = _HEURISTIC_OPT,
) -> None:
    """Read boards interactively and solve them."""
    _frontend(frontend).run(size=size, heuristic=heuristic)


@app.command()
def solve(
    tiles: list[int] = typer.Argument(
        ..., help="Tiles in row-major order, 0 for the blank.",
    ),
    size: Optional[int] = typer.Option(
        None, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help="Grid size. Inferred from the number of tiles if omitted.",
    ),
    heuristic: Heuristic = _HEURISTIC_OPT,
    frontend: Frontend = _FRONTEND_OPT,
    no_path: bool = typer.Option(
        False, "--no-path",
        help="Print statistics only, not every board on the path.",
    ),
    exhaustive: bool = typer.Option(
        False, "--exhaustive",
        help="Search even when the parity check says the board is unsolvable.",
    ),
) -> None:
    """Solve a single board given on the command line."""
    if size is None:
        size = math.isqrt(len(tiles))
    if size > MAX_SIZE:
        raise typer.BadParameter(
            f"Boards larger than {MAX_SIZE}×{MAX_SIZE} are not supported.",
            param_hint="TILES",
        )
    try:
        board = Board.from_flat(size, tiles)
    except InvalidBoardError as exc:
        raise typer.BadParameter(str(exc), param_hint="TILES") from exc
    _solve_and_report(board, heuristic, frontend, not no_path, exhaustive)


@app.command("random")
def random_board(
    size: int = typer.Option(
        3, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        envvar="PUZZLE_SIZE",
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
    shuffles: Optional[int] = typer.Option(
        None, "--shuffles", min=1,
        help="Random moves applied to the goal board (default: 100 per cell).",
    ),
    heuristic: Heuristic = _HEURISTIC_OPT,
    frontend: Frontend = _FRONTEND_OPT,
    no_path: bool = typer.Option(False, "--no-path"),
) -> None:
    """Generate a random solvable board and solve it."""
    board = GameGenerator.generate(size, _random.Random(seed), shuffles)
    _solve_and_report(board, heuristic, frontend, not no_path, exhaustive=False)


if __name__ == "__main__":
    app()
