"""Immutable domain models for the campus subway map.

All models are frozen dataclasses with slots. These models have no
external dependencies and represent the core concepts of the
application: nodes, routes, lines and classified segments.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Sequence, Tuple, Union

from .errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class GeoPosition:
    """GPS coordinates of a node shown on a tiled map."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )


@dataclass(frozen=True, slots=True)
class PercentPosition:
    """Position of a node on a schematic canvas, in percent of its size.

    ``x`` grows to the right and ``y`` grows downward, as CSS
    ``left``/``top`` offsets do.
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        for axis, value in (("x", self.x), ("y", self.y)):
            if not 0 <= value <= 100:
                raise ValueError(f"{axis} must be between 0 and 100, got {value}")


Position = Union[GeoPosition, PercentPosition]


@dataclass(frozen=True, slots=True)
class Node:
    """A named location of the campus network.

    Attributes:
        id: Unique, stable identifier
        name: Display name (not guaranteed unique)
        position: Where the node is drawn; opaque to routing
        edges: Neighbour identifiers in declaration order
    """

    id: str
    name: str
    position: Optional[Position] = None
    edges: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-path search.

    Attributes:
        path: Ordered node identifiers from start to end (inclusive)
        nodes: Resolved nodes for each identifier of ``path``
    """

    path: Tuple[str, ...]
    nodes: Tuple[Node, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of nodes on the route."""
        return len(self.path)

    @property
    def num_hops(self) -> int:
        """Return the number of edges travelled."""
        return max(len(self.path) - 1, 0)

    @property
    def names(self) -> Tuple[str, ...]:
        """Display names along the route."""
        return tuple(node.name for node in self.nodes)


@dataclass(frozen=True, slots=True)
class Segment:
    """One hop of a route, tagged with the line it travels on.

    Attributes:
        from_node: Name of the node the hop leaves
        to_node: Name of the node the hop reaches
        line: Line the hop belongs to (default line if unlisted)
        color: Display colour of ``line``
        is_transfer: Whether the traveller changes line entering this hop
    """

    from_node: str
    to_node: str
    line: str
    color: str
    is_transfer: bool = False


@dataclass(frozen=True, slots=True)
class LineDefinition:
    """A named, coloured group of connections."""

    name: str
    color: str
    connections: frozenset = field(default_factory=frozenset)

    def contains(self, a: str, b: str) -> bool:
        """Check whether the unordered pair ``{a, b}`` is on this line."""
        return frozenset((a, b)) in self.connections


def parse_connection(raw: Union[str, Sequence[str]], line: str = "") -> frozenset:
    """Turn ``"A-B"`` or ``["A", "B"]`` into an unordered name pair."""
    if isinstance(raw, str):
        parts = [part.strip() for part in raw.split("-")]
    elif isinstance(raw, (list, tuple)):
        parts = [str(part).strip() for part in raw]
    else:
        parts = []

    if len(parts) != 2 or not all(parts):
        raise ConfigurationError(
            f"Invalid connection {raw!r} on line {line!r}",
            setting_name=f"lines.{line}",
            expected_type='"A-B" or ["A", "B"]',
        )
    return frozenset(parts)


@dataclass(frozen=True, slots=True)
class LineTable:
    """Static line membership table.

    Maps each named line to the set of unordered node-name pairs it
    serves. Connections listed on no line fall back to the default
    line. When a pair is listed on several lines, the first line wins.
    """

    lines: Tuple[LineDefinition, ...] = field(default_factory=tuple)
    default_line: str = "Default"
    default_color: str = "gray"

    @classmethod
    def from_mapping(
        cls,
        connections: Mapping[str, Iterable[Union[str, Sequence[str]]]],
        colors: Optional[Mapping[str, str]] = None,
        default_line: str = "Default",
        default_color: str = "gray",
    ) -> LineTable:
        """Build a table from ``{line: [connection, ...]}``.

        Line colours default to the lower-cased line name, so
        ``"Blue"`` is drawn ``"blue"`` unless ``colors`` says otherwise.
        """
        colors = colors or {}
        lines = tuple(
            LineDefinition(
                name=name,
                color=colors.get(name, name.lower()),
                connections=frozenset(parse_connection(raw, name) for raw in pairs),
            )
            for name, pairs in connections.items()
        )
        return cls(lines=lines, default_line=default_line, default_color=default_color)

    def line_for(self, a: str, b: str) -> Optional[LineDefinition]:
        """Return the line serving ``a``-``b`` in either direction."""
        for line in self.lines:
            if line.contains(a, b):
                return line
        return None

    def color_for(self, line_name: str) -> str:
        """Return the display colour of a line (default colour if unknown)."""
        for line in self.lines:
            if line.name == line_name:
                return line.color
        return self.default_color

    @property
    def line_names(self) -> Tuple[str, ...]:
        return tuple(line.name for line in self.lines)


@dataclass(frozen=True, slots=True)
class ClassifiedRoute:
    """A route together with its line segments.

    Attributes:
        route: The shortest path found
        segments: One segment per consecutive pair of ``route.path``
    """

    route: RouteResult
    segments: Tuple[Segment, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return self.route.is_empty

    @property
    def path(self) -> Tuple[str, ...]:
        return self.route.path

    @property
    def transfers(self) -> Tuple[Segment, ...]:
        """Segments entered by changing line."""
        return tuple(segment for segment in self.segments if segment.is_transfer)

    @property
    def lines_used(self) -> Tuple[str, ...]:
        """Lines travelled, in order, without consecutive repeats."""
        used: list[str] = []
        for segment in self.segments:
            if not used or used[-1] != segment.line:
                used.append(segment.line)
        return tuple(used)
