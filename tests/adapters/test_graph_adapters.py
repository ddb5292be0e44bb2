"""Tests for the JSON graph repository and the BFS route solver."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from subway_map.adapters.graph import BfsRouteSolver, JsonGraphRepository
from subway_map.config import GraphConfig
from subway_map.domain.errors import GraphError, NodeNotFoundError
from subway_map.domain.models import PercentPosition

DATA_DIR = Path(__file__).resolve().parents[2] / "data"


def _write_nodes(directory: Path, document) -> GraphConfig:
    (directory / "nodes.json").write_text(json.dumps(document), encoding="utf-8")
    return GraphConfig(data_dir=directory, nodes_file="nodes.json")


class TestJsonGraphRepository:
    """Test suite for JsonGraphRepository."""

    @pytest.fixture
    def repository(self):
        return JsonGraphRepository(GraphConfig(data_dir=DATA_DIR))

    def test_load_bundled_graph(self, repository):
        graph = repository.load()

        assert len(graph) == 10
        assert graph.node_by_name("Ohio Union").id == "6"
        assert graph.neighbors("1") == ("2", "4", "6")

    def test_load_is_cached(self, repository):
        assert repository.load() is repository.load()

    def test_clear_cache_reloads(self, repository):
        first = repository.load()
        repository.clear_cache()
        assert repository.load() is not first

    def test_cached_graph_skips_file_access(self, repository):
        repository.load()
        with patch.object(Path, "open", side_effect=AssertionError("re-read")):
            repository.load()

    def test_get_node(self, repository):
        assert repository.get_node("3").name == "East Hudson"
        assert repository.get_node("99") is None

    def test_get_node_or_raise(self, repository):
        assert repository.get_node_or_raise("2").name == "Summit"

        with pytest.raises(NodeNotFoundError) as exc_info:
            repository.get_node_or_raise("99")
        assert exc_info.value.node_id == "99"

    def test_find_node_by_name(self, repository):
        assert repository.find_node_by_name("RPAC").id == "7"
        assert repository.find_node_by_name("Nowhere") is None

    def test_list_nodes_keeps_declaration_order(self, repository):
        names = [node.name for node in repository.list_nodes()]
        assert names[:3] == ["Lane", "Summit", "East Hudson"]

    def test_percent_scheme(self):
        repository = JsonGraphRepository(
            GraphConfig(
                data_dir=DATA_DIR,
                nodes_file="nodes_schematic.json",
                position_scheme="percent",
            )
        )

        node = repository.get_node("1")
        assert node.position == PercentPosition(x=55.0, y=30.0)

    def test_dangling_edges_do_not_abort_load(self, tmp_path):
        config = _write_nodes(
            tmp_path,
            {
                "nodes": [
                    {"id": "a", "name": "A", "edges": ["b", "ghost"]},
                    {"id": "b", "name": "B", "edges": ["a"]},
                ]
            },
        )

        graph = JsonGraphRepository(config).load()
        assert graph.neighbors("a") == ("b",)

    def test_missing_file_raises_graph_error(self, tmp_path):
        repository = JsonGraphRepository(GraphConfig(data_dir=tmp_path))

        with pytest.raises(GraphError) as exc_info:
            repository.load()
        assert exc_info.value.file_path == str(tmp_path / "nodes.json")

    def test_invalid_json_raises_graph_error(self, tmp_path):
        (tmp_path / "nodes.json").write_text("{oops", encoding="utf-8")

        with pytest.raises(GraphError):
            JsonGraphRepository(GraphConfig(data_dir=tmp_path)).load()

    def test_schema_mismatch_reports_file(self, tmp_path):
        config = _write_nodes(tmp_path, {"nodes": [{"id": "a"}]})

        with pytest.raises(GraphError) as exc_info:
            JsonGraphRepository(config).load()
        assert exc_info.value.file_path == str(tmp_path / "nodes.json")


class TestBfsRouteSolver:
    """Test suite for BfsRouteSolver."""

    @pytest.fixture
    def solver(self):
        return BfsRouteSolver()

    def test_solve_resolves_nodes(self, solver, hudson_graph):
        result = solver.solve(hudson_graph, "lane", "hudson")

        assert result.path == ("lane", "summit", "hudson")
        assert result.names == ("Lane", "Summit", "East Hudson")
        assert result.num_stops == 3
        assert result.num_hops == 2
        assert not result.is_empty

    def test_solve_same_node(self, solver, hudson_graph):
        result = solver.solve(hudson_graph, "lane", "lane")

        assert result.path == ("lane",)
        assert result.num_hops == 0

    def test_solve_disconnected_returns_empty(self, solver, hudson_graph):
        result = solver.solve(hudson_graph, "lane", "orphan")

        assert result.is_empty
        assert result.nodes == ()

    def test_solve_unknown_node_returns_empty(self, solver, hudson_graph):
        assert solver.solve(hudson_graph, "lane", "atlantis").is_empty
        assert solver.solve(hudson_graph, "atlantis", "lane").is_empty
