"""Rendering adapters - Implementations of MapRendererPort.

Available implementations:
- FoliumMapRenderer: Folium-based interactive map (geographic positions)
- SchematicMapRenderer: Matplotlib schematic (percentage positions)
"""

from .folium_adapter import FoliumMapRenderer
from .schematic_adapter import SchematicMapRenderer

__all__ = ["FoliumMapRenderer", "SchematicMapRenderer"]
