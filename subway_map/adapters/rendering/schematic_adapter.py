"""Matplotlib schematic renderer adapter.

For deployments whose nodes are placed by percentage offsets rather
than coordinates: the network is drawn on a 100x100 canvas (y grows
downward) and saved as SVG or PNG depending on the file suffix.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple, cast

from ...config import RenderingConfig, get_config
from ...domain.errors import RenderingError
from ...domain.models import ClassifiedRoute, Node, PercentPosition
from ...graph.load_graph import Graph


def _xy(node: Node) -> Tuple[float, float]:
    position = cast(PercentPosition, node.position)
    return (position.x, position.y)


@dataclass
class SchematicMapRenderer:
    """Static schematic renderer built on Matplotlib.

    This adapter implements MapRendererPort for percentage-positioned
    graphs.
    """

    config: RenderingConfig = field(default_factory=lambda: get_config().rendering)
    figure_size: Tuple[float, float] = (8.0, 8.0)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(
        self,
        graph: Graph,
        route: ClassifiedRoute,
        output_path: Path,
    ) -> Path:
        """Render the network and route and save to an image file.

        Raises:
            RenderingError: If a node has no percentage position or
                rendering fails.
        """
        unplaced = [
            node.id
            for node in graph.nodes
            if not isinstance(node.position, PercentPosition)
        ]
        if unplaced:
            raise RenderingError(
                f"Nodes without percentage position: {unplaced!r}",
                output_path=str(output_path),
                renderer_type="schematic",
            )

        self._logger.info(
            "Rendering schematic map",
            extra={"nodes": len(graph), "output_path": str(output_path)},
        )

        try:
            from matplotlib.figure import Figure

            fig = Figure(figsize=self.figure_size)
            ax = fig.add_subplot()
            ax.set_xlim(0, 100)
            ax.set_ylim(100, 0)
            ax.set_aspect("equal")
            ax.axis("off")

            for a, b in graph.edge_pairs():
                (x1, y1), (x2, y2) = _xy(graph.node_by_id(a)), _xy(graph.node_by_id(b))  # type: ignore[arg-type]
                ax.plot([x1, x2], [y1, y2], "--", color=self.config.edge_color, linewidth=1)

            route_nodes = route.route.nodes
            if route.segments:
                for segment, start, end in zip(
                    route.segments, route_nodes, route_nodes[1:]
                ):
                    (x1, y1), (x2, y2) = _xy(start), _xy(end)
                    ax.plot([x1, x2], [y1, y2], "-", color=segment.color, linewidth=4)
                    if segment.is_transfer:
                        ax.plot(x1, y1, "o", color=segment.color, markersize=14, alpha=0.5)

            start_id = route.path[0] if route.path else None
            end_id = route.path[-1] if route.path else None
            for node in graph.nodes:
                if node.id == start_id:
                    color = self.config.start_color
                elif node.id == end_id:
                    color = self.config.end_color
                else:
                    color = self.config.marker_color
                x, y = _xy(node)
                ax.plot(x, y, "o", color=color, markersize=8)
                ax.annotate(node.name, (x, y), xytext=(5, -5), textcoords="offset points", fontsize=8)

            output_path.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(str(output_path), bbox_inches="tight")

            self._logger.info(
                "Map rendered successfully",
                extra={"output_path": str(output_path)},
            )
            return output_path

        except ImportError as e:
            raise RenderingError(
                "Matplotlib not installed",
                output_path=str(output_path),
                renderer_type="schematic",
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
                renderer_type="schematic",
                cause=e,
            )
