"""Folium map renderer adapter.

Draws the campus network on an OpenStreetMap background with:
- every connection in the base edge colour
- the route hops in their line colours
- start/end markers highlighted, node names as tooltips
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple, cast

from ...config import RenderingConfig, get_config
from ...domain.errors import RenderingError
from ...domain.models import ClassifiedRoute, GeoPosition, Node
from ...graph.load_graph import Graph


def _latlon(node: Node) -> Tuple[float, float]:
    position = cast(GeoPosition, node.position)
    return (position.latitude, position.longitude)


@dataclass
class FoliumMapRenderer:
    """Folium-based interactive map renderer.

    This adapter implements MapRendererPort for graphs whose nodes carry
    geographic positions.
    """

    config: RenderingConfig = field(default_factory=lambda: get_config().rendering)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(
        self,
        graph: Graph,
        route: ClassifiedRoute,
        output_path: Path,
    ) -> Path:
        """Render the network and route and save to an HTML file.

        Args:
            graph: The campus graph.
            route: The route to highlight (may be empty).
            output_path: Where to save the rendered map.

        Returns:
            Path to the generated map file.

        Raises:
            RenderingError: If a node has no geographic position or
                rendering fails.
        """
        unplaced = [
            node.id for node in graph.nodes if not isinstance(node.position, GeoPosition)
        ]
        if unplaced:
            raise RenderingError(
                f"Nodes without geographic position: {unplaced!r}",
                output_path=str(output_path),
                renderer_type="folium",
            )

        self._logger.info(
            "Rendering route map",
            extra={
                "nodes": len(graph),
                "hops": len(route.segments),
                "output_path": str(output_path),
            },
        )

        try:
            import folium

            m = folium.Map(
                location=list(self.config.center),
                zoom_start=self.config.zoom_start,
                tiles=self.config.tiles,
            )

            # Network
            for a, b in graph.edge_pairs():
                folium.PolyLine(
                    [_latlon(graph.node_by_id(a)), _latlon(graph.node_by_id(b))],  # type: ignore[arg-type]
                    color=self.config.edge_color,
                    weight=3,
                    opacity=0.6,
                ).add_to(m)

            # Route, one polyline per hop so each keeps its line colour
            route_nodes = route.route.nodes
            route_coords: List[Tuple[float, float]] = [_latlon(n) for n in route_nodes]
            if route.segments:
                for segment, start, end in zip(
                    route.segments, route_coords, route_coords[1:]
                ):
                    folium.PolyLine(
                        [start, end],
                        color=segment.color,
                        weight=6,
                        opacity=0.9,
                        tooltip=f"{segment.line} line",
                    ).add_to(m)
            elif len(route_coords) >= 2:
                folium.PolyLine(
                    route_coords, color=self.config.route_color, weight=6
                ).add_to(m)

            for segment, node in zip(route.segments, route_nodes):
                if segment.is_transfer:
                    folium.CircleMarker(
                        location=_latlon(node),
                        radius=9,
                        color=segment.color,
                        fill=True,
                        tooltip=f"Transfer to {segment.line} line",
                    ).add_to(m)

            # Markers
            start_id = route.path[0] if route.path else None
            end_id = route.path[-1] if route.path else None
            for node in graph.nodes:
                if node.id == start_id:
                    icon_color = self.config.start_color
                elif node.id == end_id:
                    icon_color = self.config.end_color
                else:
                    icon_color = self.config.marker_color
                folium.Marker(
                    location=_latlon(node),
                    tooltip=node.name,
                    popup=node.name,
                    icon=folium.Icon(color=icon_color),
                ).add_to(m)

            if len(route_coords) >= 2:
                m.fit_bounds(route_coords)

            output_path.parent.mkdir(parents=True, exist_ok=True)
            m.save(str(output_path))

            self._logger.info(
                "Map rendered successfully",
                extra={"output_path": str(output_path)},
            )
            return output_path

        except ImportError as e:
            raise RenderingError(
                "Folium not installed",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )
        except Exception as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                f"Map rendering failed: {e}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )
