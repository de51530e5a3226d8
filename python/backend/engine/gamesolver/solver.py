"""Optimal sliding puzzle solver — best-first search on ``g + h``."""

from __future__ import annotations

import heapq
import itertools
import logging
from bisect import bisect_left, insort
from dataclasses import dataclass, field
from enum import StrEnum

from backend.engine.gameplay.moves import successors
from backend.engine.gamesolver.heuristics import Heuristic, heuristic
from backend.engine.gamestate.state import SearchNode
from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)


class SearchStatus(StrEnum):
    RUNNING = "running"
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"


class Membership(StrEnum):
    UNSEEN = "unseen"
    OPEN = "open"
    CLOSED = "closed"


@dataclass
class SearchResult:
    """Outcome of a search run.

    ``discovered`` counts every generated successor plus the start board,
    duplicates included. ``peak_frontier`` / ``peak_closed`` give the
    largest sizes the open and closed sets reached.
    """

    status: SearchStatus
    moves: list[Direction] = field(default_factory=list)
    discovered: int = 0
    expanded: int = 0
    peak_frontier: int = 0
    peak_closed: int = 0

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    @property
    def cost(self) -> int | None:
        return len(self.moves) if self.solved else None


# -- frontier -----------------------------------------------------------------


class Frontier:
    """Open set ordered by ``(f, key)`` with remove / re-insert.

    Removed nodes leave a dead heap entry behind that ``pop`` skips.
    """

    def __init__(self) -> None:
        self._heap: list[list] = []
        self._entries: dict[int, list] = {}
        self._seq = itertools.count()
        self.peak: int = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: int) -> bool:
        return key in self._entries

    def push(self, node: SearchNode) -> None:
        if node.key in self._entries:
            raise KeyError(f"board {node.key} is already in the frontier")
        f, key = node.rank
        entry = [f, key, next(self._seq), node]
        self._entries[key] = entry
        heapq.heappush(self._heap, entry)
        self.peak = max(self.peak, len(self._entries))

    def remove(self, node: SearchNode) -> None:
        entry = self._entries.pop(node.key)
        entry[-1] = None

    def pop(self) -> SearchNode:
        """Remove and return the node with the lowest ``(f, key)``."""
        while self._heap:
            _, key, _, node = heapq.heappop(self._heap)
            if node is not None:
                del self._entries[key]
                return node
        raise IndexError("pop from an empty frontier")


# -- search run ---------------------------------------------------------------


class SearchRun:
    """All bookkeeping for one search from *initial* to *goal*.

    Create a fresh instance per search; nothing is shared between runs.
    """

    def __init__(
        self,
        initial: Board,
        goal: Board | None = None,
        mode: Heuristic = Heuristic.MANHATTAN,
    ) -> None:
        self.goal = goal if goal is not None else Board.goal(initial.size)
        if self.goal.size != initial.size:
            raise ValueError(
                f"Goal is {self.goal.size}×{self.goal.size} but the board is "
                f"{initial.size}×{initial.size}."
            )
        self.initial = initial
        self.mode = Heuristic(mode)
        self.frontier = Frontier()
        self.nodes: dict[int, SearchNode] = {}
        self.membership: dict[int, Membership] = {}
        self.parent: dict[int, tuple[int, Direction]] = {}
        self.status = SearchStatus.RUNNING
        self.solution: SearchNode | None = None
        self.discovered = 1
        self.expanded = 0
        self.closed = 0
        self.peak_closed = 0

        start = SearchNode(initial, 0, heuristic(initial, self.goal, self.mode))
        self.nodes[start.key] = start
        self.membership[start.key] = Membership.OPEN
        self.frontier.push(start)

    # -- membership -----------------------------------------------------------

    def state_of(self, board: Board) -> Membership:
        return self.membership.get(board.key, Membership.UNSEEN)

    def _close(self, node: SearchNode) -> None:
        self.membership[node.key] = Membership.CLOSED
        self.closed += 1
        self.peak_closed = max(self.peak_closed, self.closed)

    # -- core operations ------------------------------------------------------

    def pop(self) -> SearchNode:
        """Take the lowest-ranked node off the frontier and close it."""
        node = self.frontier.pop()
        self._close(node)
        return node

    def expand(self, node: SearchNode) -> None:
        """Offer every successor of *node* to the search."""
        self.expanded += 1
        for direction, child in successors(node.board):
            self.discovered += 1
            self.offer(node, direction, child)

    def offer(self, parent: SearchNode, direction: Direction, board: Board) -> bool:
        """Record that *board* is reachable from *parent* by *direction*.

        Returns True when the board was inserted, relaxed or re-opened.
        """
        g = parent.g + 1
        key = board.key
        state = self.membership.get(key, Membership.UNSEEN)

        if state is Membership.UNSEEN:
            node = SearchNode(board, g, heuristic(board, self.goal, self.mode))
            self.nodes[key] = node
            self.frontier.push(node)
            self.membership[key] = Membership.OPEN
            self.parent[key] = (parent.key, direction)
            return True

        node = self.nodes[key]
        if g >= node.g:
            return False

        if state is Membership.OPEN:
            self.frontier.remove(node)
            node.g = g
            self.frontier.push(node)
        else:
            logger.debug("Re-opening board %d: g %d -> %d", key, node.g, g)
            node.g = g
            self.frontier.push(node)
            self.membership[key] = Membership.OPEN
            self.closed -= 1
        self.parent[key] = (parent.key, direction)
        return True

    def step(self) -> SearchStatus:
        """Run one iteration of the main loop and return the run status."""
        if self.status is not SearchStatus.RUNNING:
            return self.status

        if not self.frontier:
            self.status = SearchStatus.UNSOLVABLE
            return self.status

        node = self.pop()
        if node.board == self.goal:
            self.solution = node
            self.status = SearchStatus.SOLVED
            return self.status

        self.expand(node)
        return self.status

    def path_to(self, key: int) -> list[Direction]:
        """Directions leading from the start board to the board *key*."""
        moves: list[Direction] = []
        while key in self.parent:
            key, direction = self.parent[key]
            moves.append(direction)
        moves.reverse()
        return moves

    def run(self) -> SearchResult:
        logger.info(
            "Searching %d×%d board %d (heuristic: %s)",
            self.goal.size, self.goal.size,
            self.initial.key, self.mode.value,
        )
        while self.step() is SearchStatus.RUNNING:
            pass

        result = self.result()
        logger.info(
            "Search %s: cost=%s discovered=%d expanded=%d peak_frontier=%d",
            result.status.value, result.cost, result.discovered,
            result.expanded, result.peak_frontier,
        )
        return result

    def result(self) -> SearchResult:
        moves = self.path_to(self.solution.key) if self.solution else []
        return SearchResult(
            status=self.status,
            moves=moves,
            discovered=self.discovered,
            expanded=self.expanded,
            peak_frontier=self.frontier.peak,
            peak_closed=self.peak_closed,
        )


# -- public API ---------------------------------------------------------------


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        board: Board,
        heuristic: Heuristic = Heuristic.MANHATTAN,
        goal: Board | None = None,
        check_parity: bool = True,
    ) -> SearchResult:
        """Find a shortest move sequence from *board* to *goal*.

        With *check_parity* an unsolvable board is reported without
        searching; otherwise the search exhausts the reachable boards.
        """
        goal = goal if goal is not None else Board.goal(board.size)
        if check_parity and not Solver.is_solvable(board, goal):
            logger.info("Board %d has the wrong parity; skipping search", board.key)
            return SearchResult(status=SearchStatus.UNSOLVABLE)
        return SearchRun(board, goal, heuristic).run()

    @staticmethod
    def hint(
        board: Board, heuristic: Heuristic = Heuristic.MANHATTAN
    ) -> Direction | None:
        """Return the first move of a shortest solution, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None
        result = Solver.solve(board, heuristic)
        return result.moves[0] if result.moves else None

    @staticmethod
    def is_solvable(board: Board, goal: Board | None = None) -> bool:
        """Return True if *board* can reach *goal*.

        Every move is one transposition of the goal-relative permutation
        and shifts the blank by one cell, so both parities must agree.
        """
        goal = goal if goal is not None else Board.goal(board.size)
        index = {v: i for i, v in enumerate(goal.tiles)}
        inv = 0
        seen: list[int] = []
        for v in board.tiles:
            p = index[v]
            inv += len(seen) - bisect_left(seen, p)
            insort(seen, p)
        br, bc = board.blank_pos
        gr, gc = goal.blank_pos
        return inv % 2 == (abs(br - gr) + abs(bc - gc)) % 2
