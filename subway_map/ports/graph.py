"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for graph operations: loading the
campus network and computing shortest paths on it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

from ..graph.load_graph import Graph

if TYPE_CHECKING:
    from ..domain.models import Node, RouteResult


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/json_repository.py

    The repository is responsible for loading and caching the campus
    graph from persistent storage.
    """

    def load(self) -> Graph:
        """Load the campus graph.

        Returns:
            The immutable graph.
        """
        ...

    def get_node(self, node_id: str) -> Optional[Node]:
        """Get a node by identifier.

        Args:
            node_id: The node identifier to look up.

        Returns:
            The node, or None if not found.
        """
        ...

    def find_node_by_name(self, name: str) -> Optional[Node]:
        """Get the first node with a display name.

        Args:
            name: Display name to look up.

        Returns:
            The node, or None if not found.
        """
        ...

    def list_nodes(self) -> Sequence[Node]:
        """List all nodes in declaration order."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/bfs.py (find_path)
    """

    def solve(
        self,
        graph: Graph,
        start: str,
        end: str,
    ) -> RouteResult:
        """Find a shortest path between two nodes.

        Args:
            graph: The campus graph.
            start: Start node identifier.
            end: End node identifier.

        Returns:
            RouteResult; empty when no path exists.
        """
        ...


__all__ = ["Graph", "GraphRepositoryPort", "RouteSolverPort"]
