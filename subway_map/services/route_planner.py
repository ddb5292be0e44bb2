"""Route planner service - Main orchestrator.

Every call is an explicit request/response: the caller passes the
start and end selection and gets a value back. No selection state is
kept between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..domain.models import ClassifiedRoute, RouteResult
from ..graph.lines import describe_route, format_route
from ..ports.graph import GraphRepositoryPort, RouteSolverPort
from ..ports.lines import LineClassifierPort
from ..ports.rendering import MapRendererPort

EMPTY_ROUTE = ClassifiedRoute(route=RouteResult(path=()))


@dataclass
class RoutePlannerService:
    """Main service for planning campus routes.

    This service orchestrates:
    1. Graph loading
    2. Shortest-path search
    3. Line classification
    4. Optional map rendering

    Attributes:
        graph_repository: Loads the campus graph
        route_solver: Computes shortest paths
        line_classifier: Tags hops with lines
        map_renderer: Optional map rendering
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort
    line_classifier: LineClassifierPort
    map_renderer: Optional[MapRendererPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def plan(self, start_id: str, end_id: str) -> ClassifiedRoute:
        """Plan a route between two node identifiers.

        Args:
            start_id: Identifier of the start node.
            end_id: Identifier of the end node.

        Returns:
            The classified route; empty if either node is unknown or
            no path connects them.

        Raises:
            GraphError: If the graph data cannot be loaded.
        """
        self._logger.info(
            "Planning route", extra={"start": start_id, "end": end_id}
        )

        graph = self.graph_repository.load()
        route = self.route_solver.solve(graph, start_id, end_id)
        if route.is_empty:
            return EMPTY_ROUTE

        segments = self.line_classifier.annotate(route.nodes)
        classified = ClassifiedRoute(route=route, segments=segments)
        self._logger.info(
            "Route planned",
            extra={
                "hops": route.num_hops,
                "transfers": len(classified.transfers),
                "lines": list(classified.lines_used),
            },
        )
        return classified

    def plan_by_name(self, start_name: str, end_name: str) -> ClassifiedRoute:
        """Plan a route between two display names.

        An unknown name yields an empty route, like an unknown id.
        """
        start = self.graph_repository.find_node_by_name(start_name)
        end = self.graph_repository.find_node_by_name(end_name)
        if start is None or end is None:
            self._logger.info(
                "Unknown node name in route request",
                extra={"start": start_name, "end": end_name},
            )
            return EMPTY_ROUTE
        return self.plan(start.id, end.id)

    def render(self, route: ClassifiedRoute, output_path: Path) -> Optional[Path]:
        """Draw the network with ``route`` highlighted.

        Returns:
            The written file, or None when no renderer is configured.

        Raises:
            RenderingError: If the renderer fails.
        """
        if self.map_renderer is None:
            self._logger.debug("No map renderer configured")
            return None

        graph = self.graph_repository.load()
        path = self.map_renderer.render(graph, route, output_path)
        self._logger.info("Map generated", extra={"path": str(path)})
        return path

    def describe(self, route: ClassifiedRoute) -> List[str]:
        """Turn-by-turn description of ``route``."""
        return describe_route(route)

    def format_result(self, route: ClassifiedRoute, map_path: Optional[Path] = None) -> str:
        """Format a route as a human-readable block of text.

        Args:
            route: The planned route.
            map_path: Optional path to a generated map.

        Returns:
            Summary line followed by the turn-by-turn steps.
        """
        if route.is_empty:
            return format_route(route)

        result = "\n".join([format_route(route), *describe_route(route)])
        if map_path:
            result += f"\nMap saved to: {map_path}"
        return result
