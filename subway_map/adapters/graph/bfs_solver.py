"""BFS Route Solver adapter.

Wraps the breadth-first search of graph/bfs.py and adds:
- Domain model output (RouteResult)
- Node resolution
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.models import RouteResult
from ...graph.bfs import find_path
from ...graph.load_graph import Graph


@dataclass
class BfsRouteSolver:
    """Route solver using breadth-first search on the unweighted graph.

    This adapter implements RouteSolverPort. Unknown identifiers and
    unreachable pairs produce an empty RouteResult, never an exception.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Graph, start: str, end: str) -> RouteResult:
        """Find a minimum-hop path between two nodes.

        Args:
            graph: The campus graph.
            start: Start node identifier.
            end: End node identifier.

        Returns:
            RouteResult with path and resolved nodes, or an empty result.
        """
        self._logger.debug("Solving route", extra={"start": start, "end": end})

        for role, node_id in (("start", start), ("end", end)):
            if node_id not in graph:
                self._logger.warning(
                    "Unknown node in route request",
                    extra={"role": role, "node_id": node_id},
                )

        path = find_path(graph, start, end)
        if not path:
            self._logger.info("No route found", extra={"start": start, "end": end})
            return RouteResult(path=())

        nodes = tuple(graph.node_by_id(node_id) for node_id in path)
        self._logger.info(
            "Route found",
            extra={"start": start, "end": end, "hops": len(path) - 1},
        )
        return RouteResult(path=path, nodes=nodes)  # type: ignore[arg-type]
