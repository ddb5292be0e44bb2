"""JSON Graph Repository adapter.

Loads the node document (``{"nodes": [...]}``) named by the graph
configuration and caches the built graph.
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError, NodeNotFoundError
from ...domain.models import Node
from ...graph.load_graph import Graph, load_graph, parse_nodes


@dataclass
class JsonGraphRepository:
    """Graph repository that loads from a JSON file.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (data directory, file names, scheme)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Graph:
        """Load the campus graph from the node document.

        Returns:
            The immutable graph.

        Raises:
            GraphError: If the file cannot be read or has a bad schema.
        """
        with self._lock:
            if self._graph is not None:
                return self._graph

            nodes_path = self.config.nodes_path
            self._logger.debug("Loading graph", extra={"nodes_path": str(nodes_path)})

            try:
                with nodes_path.open(encoding="utf-8") as f:
                    document = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise GraphError(
                    f"Failed to load graph: {e}",
                    file_path=str(nodes_path),
                    cause=e,
                )

            try:
                nodes = parse_nodes(document, self.config.position_scheme)
            except GraphError as e:
                e.file_path = str(nodes_path)
                raise

            graph = load_graph(nodes)
            self._graph = graph
            self._logger.info(
                "Graph loaded",
                extra={"nodes": len(graph), "scheme": self.config.position_scheme},
            )
            return graph

    def get_node(self, node_id: str) -> Optional[Node]:
        """Get a node by identifier.

        Args:
            node_id: The node identifier to look up.

        Returns:
            The node, or None if not found.
        """
        return self.load().node_by_id(node_id)

    def get_node_or_raise(self, node_id: str) -> Node:
        """Get a node by identifier, raising if not found.

        Raises:
            NodeNotFoundError: If the node is not found.
        """
        node = self.get_node(node_id)
        if node is None:
            raise NodeNotFoundError(f"Node not found: {node_id}", node_id=node_id)
        return node

    def find_node_by_name(self, name: str) -> Optional[Node]:
        return self.load().node_by_name(name)

    def list_nodes(self) -> Sequence[Node]:
        return list(self.load().nodes)

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        with self._lock:
            self._graph = None
        self._logger.debug("Graph cache cleared")
