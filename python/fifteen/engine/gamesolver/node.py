"""Search-tree node for the solver's frontiers."""

from __future__ import annotations

from dataclasses import dataclass, field

from fifteen.models.board import Board, Direction


@dataclass(frozen=True, eq=False)
class SearchNode:
    """One step of a candidate path.

    ``parent`` is shared by every sibling expanded from the same node, so
    a frontier holds a tree of paths rather than independent copies.
    """

    state: Board
    parent: SearchNode | None = field(repr=False)
    moves: int
    priority: int
    direction: Direction | None = None

    @classmethod
    def root(cls, board: Board) -> SearchNode:
        return cls(state=board, parent=None, moves=0, priority=board.sum_distance())

    def child(self, board: Board, direction: Direction) -> SearchNode:
        moves = self.moves + 1
        return SearchNode(
            state=board,
            parent=self,
            moves=moves,
            priority=board.sum_distance() + moves,
            direction=direction,
        )

    def path(self) -> list[SearchNode]:
        """Nodes from the root down to this one."""
        nodes: list[SearchNode] = []
        node: SearchNode | None = self
        while node is not None:
            nodes.append(node)
            node = node.parent
        nodes.reverse()
        return nodes
