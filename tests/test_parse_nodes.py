"""Tests for turning the raw node document into Node objects."""

import json
import logging
from pathlib import Path

import pytest

from subway_map.domain.errors import GraphError
from subway_map.domain.models import GeoPosition, PercentPosition
from subway_map.graph.bfs import find_path
from subway_map.graph.load_graph import load_graph, parse_nodes, parse_position

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def test_parse_nodes_normalises_numeric_ids():
    nodes = parse_nodes(
        {
            "nodes": [
                {"id": 1, "name": "Lane", "position": [40.006, -83.0095], "edges": [2]},
                {"id": 2, "name": "Summit", "position": [40.0046, -83.0035], "edges": [1]},
            ]
        }
    )

    assert [n.id for n in nodes] == ["1", "2"]
    assert nodes[0].edges == ("2",)
    assert nodes[0].position == GeoPosition(latitude=40.006, longitude=-83.0095)


def test_parse_nodes_missing_edges_means_no_neighbours():
    nodes = parse_nodes(
        [
            {"id": "a", "name": "A", "position": [0, 0]},
            {"id": "b", "name": "B", "position": [0, 1], "edges": None},
        ]
    )
    graph = load_graph(nodes)

    assert graph.neighbors("a") == ()
    assert graph.neighbors("b") == ()


def test_parse_nodes_accepts_missing_position():
    nodes = parse_nodes({"nodes": [{"id": "a", "name": "A"}]})
    assert nodes[0].position is None


def test_parse_nodes_ignores_extra_fields():
    nodes = parse_nodes(
        {"nodes": [{"id": "a", "name": "A", "icon": "pin.png", "edges": []}]}
    )
    assert nodes[0].name == "A"


def test_parse_nodes_percent_scheme():
    nodes = parse_nodes(
        {
            "nodes": [
                {"id": "a", "name": "A", "position": {"left": "20%", "top": "35%"}},
                {"id": "b", "name": "B", "position": {"x": 50, "y": 10}},
                {"id": "c", "name": "C", "position": ["5%", "95%"]},
            ]
        },
        scheme="percent",
    )

    assert [n.position for n in nodes] == [
        PercentPosition(x=20.0, y=35.0),
        PercentPosition(x=50.0, y=10.0),
        PercentPosition(x=5.0, y=95.0),
    ]


def test_parse_position_geo_object_keys():
    assert parse_position({"lat": 39.99, "lng": -83.01}) == GeoPosition(39.99, -83.01)
    assert parse_position({"latitude": 39.99, "longitude": -83.01}) == GeoPosition(
        39.99, -83.01
    )


@pytest.mark.parametrize(
    "document",
    [
        {"stations": []},
        {"nodes": [{"id": "a"}]},
        {"nodes": [{"name": "No id"}]},
        {"nodes": [{"id": "a", "name": "A", "edges": "b"}]},
        "not a document",
    ],
)
def test_parse_nodes_rejects_schema_mismatch(document):
    with pytest.raises(GraphError):
        parse_nodes(document)


@pytest.mark.parametrize(
    "position, scheme",
    [
        ([1, 2, 3], "geo"),
        ([120, 0], "geo"),
        ({"x": 10}, "percent"),
        (["abc", "10%"], "percent"),
        ([150, 10], "percent"),
    ],
)
def test_parse_nodes_leaves_bad_positions_unplaced(position, scheme, caplog):
    with caplog.at_level(logging.WARNING, logger="subway_map.graph.load_graph"):
        nodes = parse_nodes(
            {
                "nodes": [
                    {"id": "a", "name": "A", "position": position, "edges": ["b"]},
                    {"id": "b", "name": "B", "edges": ["a"]},
                ]
            },
            scheme,
        )

    assert nodes[0].position is None
    assert find_path(load_graph(nodes), "a", "b") == ("a", "b")
    assert any(getattr(r, "node_id", None) == "a" for r in caplog.records)


def test_parse_nodes_percent_document_under_geo_scheme():
    with (DATA_DIR / "nodes_schematic.json").open(encoding="utf-8") as f:
        nodes = parse_nodes(json.load(f), scheme="geo")

    assert all(node.position is None for node in nodes)
    assert len(load_graph(nodes)) == 10


def test_parse_nodes_integral_float_ids_match():
    nodes = parse_nodes(
        [
            {"id": 1, "name": "Lane", "edges": [2.0]},
            {"id": 2.0, "name": "Summit", "edges": [1]},
            {"id": 3.5, "name": "Annex"},
        ]
    )
    graph = load_graph(nodes)

    assert [n.id for n in nodes] == ["1", "2", "3.5"]
    assert find_path(graph, "1", "2") == ("1", "2")
