"""Shared fixtures for the subway map tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List, Optional

import pytest

from subway_map.config import reset_config
from subway_map.domain.models import GeoPosition, LineTable, Node
from subway_map.graph.load_graph import Graph, load_graph

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def build_graph() -> Callable[..., Graph]:
    """Build a graph from ``{id: [neighbour ids]}``; names default to ids."""

    def _build(
        adjacency: Dict[str, List[str]],
        names: Optional[Dict[str, str]] = None,
    ) -> Graph:
        names = names or {}
        return load_graph(
            Node(id=node_id, name=names.get(node_id, node_id), edges=tuple(edges))
            for node_id, edges in adjacency.items()
        )

    return _build


@pytest.fixture
def hudson_graph() -> Graph:
    """Lane <-> Summit <-> East Hudson, plus an isolated Orphan."""
    return load_graph(
        [
            Node("lane", "Lane", GeoPosition(40.0060, -83.0095), ("summit",)),
            Node("summit", "Summit", GeoPosition(40.0046, -83.0035), ("lane", "hudson")),
            Node("hudson", "East Hudson", GeoPosition(40.0130, -83.0000), ("summit",)),
            Node("orphan", "Orphan", GeoPosition(40.0000, -83.0100)),
        ]
    )


@pytest.fixture
def blue_table() -> LineTable:
    return LineTable.from_mapping({"Blue": ["Lane-Summit", "Summit-East Hudson"]})
