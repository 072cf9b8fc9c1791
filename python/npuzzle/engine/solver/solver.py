"""Sliding puzzle solver — A* with a lockstep twin search.

Two searches run side by side: one from the given board and one from its
twin.  Exactly one of the pair can reach the goal, so whichever search pops
a goal first decides the outcome.
"""

from __future__ import annotations

import heapq
import logging

from npuzzle.errors import InvalidArgumentError
from npuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)

_ROOT = -1


class _Search:
    """One A* frontier plus the arena of every node it has created.

    Nodes are integer handles into parallel lists; each node records its
    parent handle and the blank move that produced it, which is all path
    reconstruction needs.
    """

    __slots__ = ("boards", "parents", "moves", "directions", "heap", "expanded")

    def __init__(self, root: Board) -> None:
        self.boards: list[Board] = []
        self.parents: list[int] = []
        self.moves: list[int] = []
        self.directions: list[Direction | None] = []
        self.heap: list[tuple[int, int]] = []
        self.expanded = 0
        self._push(root, _ROOT, 0, None)

    def _push(
        self, board: Board, parent: int, moves: int, direction: Direction | None
    ) -> None:
        handle = len(self.boards)
        self.boards.append(board)
        self.parents.append(parent)
        self.moves.append(moves)
        self.directions.append(direction)
        heapq.heappush(self.heap, (moves + board.manhattan(), handle))

    def step(self) -> int | None:
        """Pop the best node; return its handle if it is the goal.

        Otherwise expand it, skipping the neighbor that equals its parent's
        board, and return ``None``.
        """
        _, handle = heapq.heappop(self.heap)
        board = self.boards[handle]
        if board.is_goal():
            return handle

        parent = self.parents[handle]
        previous = self.boards[parent] if parent != _ROOT else None
        moves = self.moves[handle] + 1
        for direction, neighbor in board.successors():
            if previous is not None and neighbor == previous:
                continue
            self._push(neighbor, handle, moves, direction)
        self.expanded += 1
        return None

    def path(self, handle: int) -> list[int]:
        """Return the node handles from the root to *handle*, inclusive."""
        path: list[int] = []
        while handle != _ROOT:
            path.append(handle)
            handle = self.parents[handle]
        path.reverse()
        return path


class Solver:
    """Solves a board on construction; query the outcome afterwards."""

    def __init__(self, initial: Board) -> None:
        if initial is None:
            raise InvalidArgumentError("Initial board provided is None.")
        if not isinstance(initial, Board):
            raise InvalidArgumentError(
                f"Expected a Board, got {type(initial).__name__}."
            )

        self._initial = initial
        self._moves = -1
        self._solvable = False
        self._solution: list[Board] | None = None
        self._directions: list[Direction] | None = None
        self._expanded = 0
        self._solve()

    def _solve(self) -> None:
        primary = _Search(self._initial)
        twin = _Search(self._initial.twin())
        logger.debug(
            "Solving %d×%d board (manhattan=%d)",
            self._initial.size, self._initial.size, self._initial.manhattan(),
        )

        while True:
            goal = primary.step()
            if goal is not None:
                self._solvable = True
                self._moves = primary.moves[goal]
                handles = primary.path(goal)
                self._solution = [primary.boards[h] for h in handles]
                self._directions = [primary.directions[h] for h in handles[1:]]
                break

            if twin.step() is not None:
                self._solvable = False
                break

        self._expanded = primary.expanded
        logger.debug(
            "Search finished: solvable=%s moves=%d expanded=%d/%d nodes=%d/%d",
            self._solvable, self._moves,
            primary.expanded, twin.expanded,
            len(primary.boards), len(twin.boards),
        )

    # -- queries --------------------------------------------------------------

    def is_solvable(self) -> bool:
        return self._solvable

    def unsolvable(self) -> bool:
        return not self._solvable

    def moves(self) -> int:
        """Minimum number of moves to reach the goal, or -1 if unsolvable."""
        return self._moves

    def solution(self) -> list[Board] | None:
        """Boards from the initial board to the goal, or ``None`` if unsolvable."""
        if self._solution is None:
            return None
        return list(self._solution)

    def directions(self) -> list[Direction] | None:
        """Blank moves along the solution, or ``None`` if unsolvable."""
        if self._directions is None:
            return None
        return list(self._directions)

    def expanded(self) -> int:
        """Number of nodes the primary search expanded."""
        return self._expanded
