"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    NodeNotFoundError,
    RenderingError,
    SubwayMapError,
)
from .models import (
    ClassifiedRoute,
    GeoPosition,
    LineDefinition,
    LineTable,
    Node,
    PercentPosition,
    Position,
    RouteResult,
    Segment,
)

__all__ = [
    # Models
    "GeoPosition",
    "PercentPosition",
    "Position",
    "Node",
    "RouteResult",
    "Segment",
    "LineDefinition",
    "LineTable",
    "ClassifiedRoute",
    # Errors
    "SubwayMapError",
    "GraphError",
    "NodeNotFoundError",
    "ConfigurationError",
    "RenderingError",
]
