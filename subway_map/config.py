"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- SUBWAY_GRAPH_DATA_DIR=/path/to/data
- SUBWAY_GRAPH_POSITION_SCHEME=percent
- SUBWAY_RENDER_RENDERER=schematic
- SUBWAY_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional, Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Node and line data configuration.

    Environment variables prefixed with SUBWAY_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="SUBWAY_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    nodes_file: str = "nodes.json"
    lines_file: Optional[str] = "lines.json"
    position_scheme: Literal["geo", "percent"] = "geo"

    @property
    def nodes_path(self) -> Path:
        """Full path to the node document."""
        return self.data_dir / self.nodes_file

    @property
    def lines_path(self) -> Optional[Path]:
        """Full path to the line table, or None when lines are disabled."""
        if not self.lines_file:
            return None
        return self.data_dir / self.lines_file


class RenderingConfig(BaseSettings):
    """Map rendering configuration.

    Environment variables prefixed with SUBWAY_RENDER_.
    """

    model_config = SettingsConfigDict(env_prefix="SUBWAY_RENDER_")

    renderer: Literal["folium", "schematic"] = "folium"
    # Ohio State campus
    center: Tuple[float, float] = (39.999246, -83.012685)
    zoom_start: int = 15
    tiles: str = "OpenStreetMap"
    edge_color: str = "green"
    route_color: str = "red"
    start_color: str = "green"
    end_color: str = "red"
    marker_color: str = "blue"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with SUBWAY_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="SUBWAY_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.nodes_path)
        print(config.rendering.renderer)

    Environment variables prefixed with SUBWAY_.
    """

    model_config = SettingsConfigDict(env_prefix="SUBWAY_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    output_dir: Path = Field(default_factory=Path.cwd)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
