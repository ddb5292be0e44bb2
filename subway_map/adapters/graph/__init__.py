"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- JsonGraphRepository: Loads the graph from a JSON node document
- BfsRouteSolver: Finds minimum-hop paths using breadth-first search
"""

from .bfs_solver import BfsRouteSolver
from .json_repository import JsonGraphRepository

__all__ = ["JsonGraphRepository", "BfsRouteSolver"]
