"""Graph construction from node records.

This module defines the Graph type used throughout the project and
the functions that build it from the raw node document
(``{"nodes": [{"id", "name", "position", "edges"}, ...]}``).
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Literal, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..domain.errors import GraphError
from ..domain.models import GeoPosition, Node, PercentPosition, Position

logger = logging.getLogger(__name__)

PositionScheme = Literal["geo", "percent"]


class Graph:
    """Immutable node set with id-keyed adjacency.

    Edges are followed as declared by each node; symmetry is not
    enforced. Dangling edges have already been dropped by ``load_graph``.
    """

    def __init__(
        self,
        nodes: Mapping[str, Node],
        adjacency: Mapping[str, Tuple[str, ...]],
    ) -> None:
        self._nodes: Mapping[str, Node] = MappingProxyType(dict(nodes))
        self._adjacency: Mapping[str, Tuple[str, ...]] = MappingProxyType(
            {node_id: tuple(adjacency.get(node_id, ())) for node_id in nodes}
        )
        by_name: Dict[str, Node] = {}
        for node in self._nodes.values():
            by_name.setdefault(node.name, node)
        self._by_name: Mapping[str, Node] = MappingProxyType(by_name)

    def neighbors(self, node_id: str) -> Tuple[str, ...]:
        """Neighbour ids in declaration order (empty if ``node_id`` is unknown)."""
        return self._adjacency.get(node_id, ())

    def node_by_id(self, node_id: str) -> Optional[Node]:
        return self._nodes.get(node_id)

    def node_by_name(self, name: str) -> Optional[Node]:
        """First node declared with ``name``, or None."""
        return self._by_name.get(name)

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return tuple(self._nodes.values())

    @property
    def adjacency(self) -> Mapping[str, Tuple[str, ...]]:
        return self._adjacency

    def edge_pairs(self) -> List[Tuple[str, str]]:
        """Each connection once, whichever direction declared it first."""
        seen: set[frozenset] = set()
        pairs: List[Tuple[str, str]] = []
        for node_id, neighbors in self._adjacency.items():
            for neighbor in neighbors:
                key = frozenset((node_id, neighbor))
                if key in seen:
                    continue
                seen.add(key)
                pairs.append((node_id, neighbor))
        return pairs

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self)}, edges={len(self.edge_pairs())})"


def load_graph(nodes: Iterable[Node]) -> Graph:
    """Build a Graph from nodes.

    A repeated identifier keeps the first node. Edges pointing to an
    unknown identifier are skipped, never fatal.
    """
    by_id: Dict[str, Node] = {}
    for node in nodes:
        if node.id in by_id:
            logger.warning(
                "Duplicate node id ignored",
                extra={"node_id": node.id, "node_name": node.name},
            )
            continue
        by_id[node.id] = node

    adjacency: Dict[str, Tuple[str, ...]] = {}
    dangling = 0
    for node_id, node in by_id.items():
        neighbors: List[str] = []
        for neighbor in node.edges:
            if neighbor not in by_id:
                dangling += 1
                logger.warning(
                    "Dangling edge skipped",
                    extra={"node_id": node_id, "neighbor_id": neighbor},
                )
                continue
            neighbors.append(neighbor)
        adjacency[node_id] = tuple(neighbors)

    graph = Graph(by_id, adjacency)
    logger.debug(
        "Graph built",
        extra={"nodes": len(graph), "dangling_edges": dangling},
    )
    return graph


def _numeric_id(value: Any) -> Any:
    # 2 and 2.0 name the same node
    if isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return value


class _NodeRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    position: Any = None
    edges: List[str] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value: Any) -> Any:
        return _numeric_id(value)

    @field_validator("edges", mode="before")
    @classmethod
    def _edges_as_str(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [_numeric_id(item) for item in value]
        return value


class _NodeDocument(BaseModel):
    nodes: List[_NodeRecord]


def _coordinate(value: Any) -> float:
    if isinstance(value, str):
        value = value.strip().rstrip("%").strip()
    return float(value)


def _pick(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in raw:
            return raw[key]
    raise KeyError(keys[0])


def parse_position(raw: Any, scheme: PositionScheme = "geo") -> Optional[Position]:
    """Parse a position payload for the configured scheme.

    Accepts ``[a, b]`` pairs or objects (``lat``/``lon`` for geo,
    ``x``/``y`` or ``left``/``top`` for percent). Percent values may
    carry a trailing ``%``.
    """
    if raw is None:
        return None

    if isinstance(raw, Mapping):
        if scheme == "geo":
            first = _pick(raw, "lat", "latitude")
            second = _pick(raw, "lon", "lng", "longitude")
        else:
            first = _pick(raw, "x", "left")
            second = _pick(raw, "y", "top")
    elif isinstance(raw, (list, tuple)) and len(raw) == 2:
        first, second = raw
    else:
        raise ValueError(f"Unsupported position: {raw!r}")

    if scheme == "geo":
        return GeoPosition(latitude=_coordinate(first), longitude=_coordinate(second))
    return PercentPosition(x=_coordinate(first), y=_coordinate(second))


def parse_nodes(document: Any, scheme: PositionScheme = "geo") -> List[Node]:
    """Validate a raw node document and turn it into Node objects.

    A bare list of node records is accepted as well as the
    ``{"nodes": [...]}`` wrapper. A missing edges list means the node
    has no outgoing edges. Routing never reads positions, so a position
    that does not fit ``scheme`` is logged and left as ``None``; the
    renderers reject unplaced nodes.

    Raises:
        GraphError: If the document does not match the node schema.
    """
    if isinstance(document, list):
        document = {"nodes": document}

    try:
        parsed = _NodeDocument.model_validate(document)
    except ValidationError as e:
        raise GraphError("Invalid node data", cause=e)

    nodes: List[Node] = []
    for record in parsed.nodes:
        try:
            position = parse_position(record.position, scheme)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(
                "Unreadable position, node left unplaced",
                extra={"node_id": record.id, "scheme": scheme, "error": str(e)},
            )
            position = None

        nodes.append(
            Node(
                id=record.id,
                name=record.name,
                position=position,
                edges=tuple(record.edges),
            )
        )
    return nodes
