from backend.engine.gamesolver.heuristics import Heuristic, heuristic
from backend.engine.gamesolver.solver import (
    Frontier,
    Membership,
    SearchResult,
    SearchRun,
    SearchStatus,
    Solver,
)

__all__ = [
    "Frontier",
    "Heuristic",
    "Membership",
    "SearchResult",
    "SearchRun",
    "SearchStatus",
    "Solver",
    "heuristic",
]
