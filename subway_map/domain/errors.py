"""Typed domain errors for the campus subway map.

Business conditions (no route, unknown node) are represented as empty
results, not exceptions. The errors below are reserved for broken
data, broken configuration and failed rendering.

All errors inherit from SubwayMapError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class SubwayMapError(Exception):
    """Base error for the subway map domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(SubwayMapError):
    """Graph loading or node data schema error.

    Attributes:
        file_path: Path to the node data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class NodeNotFoundError(SubwayMapError):
    """Node identifier not found in the graph.

    Only raised by explicit ``*_or_raise`` lookups.

    Attributes:
        node_id: The identifier that was not found
    """

    node_id: str = ""


@dataclass
class ConfigurationError(SubwayMapError):
    """Invalid or missing configuration (settings or line table).

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None


@dataclass
class RenderingError(SubwayMapError):
    """Map rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""
