"""Rendering port - Abstraction for map generation.

This protocol defines the contract for map rendering, allowing
different implementations (Folium, Matplotlib) to be used.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import ClassifiedRoute
    from ..graph.load_graph import Graph


class MapRendererPort(Protocol):
    """Port for map rendering.

    Implementations:
    - adapters/rendering/folium_adapter.py (geographic positions)
    - adapters/rendering/schematic_adapter.py (percentage positions)
    """

    def render(
        self,
        graph: Graph,
        route: ClassifiedRoute,
        output_path: Path,
    ) -> Path:
        """Draw the network with a route on top and save to file.

        Args:
            graph: The whole campus graph.
            route: The route to highlight (may be empty).
            output_path: Where to save the rendered map.

        Returns:
            Path to the generated file.
        """
        ...
