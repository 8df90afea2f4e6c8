"""Sliding puzzle solver.

Two best-first searches run in lockstep: one from the given board and one
from its twin (the same board with two adjacent tiles exchanged).  The
swap flips permutation parity, so exactly one of the two can reach the
goal.  Whichever search gets there first decides solvability, which
avoids computing the parity directly.

Each search orders its frontier by ``sum_distance() + moves``.  There is
no closed set; the only pruning is that a node never re-generates its
parent's board.
"""

from __future__ import annotations

import logging

from fifteen.engine.frontier import MinPQ
from fifteen.engine.gamesolver.node import SearchNode
from fifteen.models.board import Board, Direction, Move

logger = logging.getLogger(__name__)


def tile_direction(before: Board, after: Board) -> Direction:
    """Direction the tile moved, given the boards around one slide.

    The tile travels opposite to the blank: blank right means tile left.
    """
    (br, bc), (ar, ac) = before.blank_pos, after.blank_pos
    if br == ar and bc + 1 == ac:
        return Direction.LEFT
    if br == ar and bc - 1 == ac:
        return Direction.RIGHT
    if bc == ac and br + 1 == ar:
        return Direction.UP
    if bc == ac and br - 1 == ar:
        return Direction.DOWN
    raise ValueError(f"blank moved from {before.blank_pos} to {after.blank_pos}")


class Solver:
    """Solves *initial* on construction; query the result afterwards."""

    def __init__(self, initial: Board) -> None:
        self.initial = initial
        self.expanded = 0
        logger.debug(
            "Solving %d×%d board, heuristic %d",
            initial.size, initial.size, initial.sum_distance(),
        )
        self._solution = self._search()
        logger.debug(
            "Search finished: solvable=%s moves=%d expanded=%d",
            self.is_solvable(), self.move_count(), self.expanded,
        )

    # -- search ---------------------------------------------------------------

    def _search(self) -> SearchNode | None:
        main: MinPQ[SearchNode] = MinPQ()
        twin: MinPQ[SearchNode] = MinPQ()
        main.insert(SearchNode.root(self.initial))
        twin.insert(SearchNode.root(self.initial.twin()))

        while True:
            if (goal := self._step(main)) is not None:
                return goal
            if self._step(twin) is not None:
                return None

    def _step(self, frontier: MinPQ[SearchNode]) -> SearchNode | None:
        """Expand the best node; return it if it is the goal."""
        node = frontier.extract_min()
        self.expanded += 1
        if node.state.is_goal():
            return node

        previous = node.parent.state if node.parent is not None else None
        for neighbor in node.state.neighbors():
            if neighbor == previous:
                continue
            frontier.insert(node.child(neighbor, tile_direction(node.state, neighbor)))
        return None

    # -- results --------------------------------------------------------------

    def is_solvable(self) -> bool:
        return self._solution is not None

    def move_count(self) -> int:
        """Length of the solution, or -1 if the board is unsolvable."""
        if self._solution is None:
            return -1
        return self._solution.moves

    def solution_states(self) -> list[Board] | None:
        if self._solution is None:
            return None
        return [node.state for node in self._solution.path()]

    def solution_moves(self) -> list[Move] | None:
        """Moves from the initial board to the goal, or ``None`` if unsolvable.

        The tile moved at each step is the one now sitting where the blank
        was on the previous board.
        """
        if self._solution is None:
            return None
        moves: list[Move] = []
        for node in self._solution.path()[1:]:
            assert node.parent is not None and node.direction is not None
            tile = node.state.tile_at(*node.parent.state.blank_pos)
            moves.append(Move(tile, node.direction))
        return moves
