from fifteen.engine.gamesolver.node import SearchNode
from fifteen.engine.gamesolver.solver import Solver, tile_direction

__all__ = ["SearchNode", "Solver", "tile_direction"]
