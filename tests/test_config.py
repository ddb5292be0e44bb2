"""Tests for configuration, the DI container and logging setup."""

import logging
from pathlib import Path

import pytest

from subway_map.adapters.graph import BfsRouteSolver, JsonGraphRepository
from subway_map.adapters.rendering import FoliumMapRenderer, SchematicMapRenderer
from subway_map.config import AppConfig, ObservabilityConfig, get_config, reset_config
from subway_map.container import Container, get_container, reset_container
from subway_map.logging_config import LOGGER_NAME, configure_logging
from subway_map.ports.graph import GraphRepositoryPort, RouteSolverPort
from subway_map.ports.rendering import MapRendererPort
from subway_map.services import RoutePlannerService

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def test_defaults_point_to_bundled_data():
    config = get_config()

    assert config.graph.nodes_path == DATA_DIR / "nodes.json"
    assert config.graph.lines_path == DATA_DIR / "lines.json"
    assert config.graph.position_scheme == "geo"
    assert config.rendering.renderer == "folium"


def test_get_config_is_cached():
    assert get_config() is get_config()
    first = get_config()
    reset_config()
    assert get_config() is not first


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SUBWAY_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("SUBWAY_GRAPH_POSITION_SCHEME", "percent")
    monkeypatch.setenv("SUBWAY_RENDER_RENDERER", "schematic")
    monkeypatch.setenv("SUBWAY_LOG_LEVEL", "DEBUG")

    config = AppConfig()

    assert config.graph.nodes_path == tmp_path / "nodes.json"
    assert config.graph.position_scheme == "percent"
    assert config.rendering.renderer == "schematic"
    assert config.observability.level == "DEBUG"


def test_empty_lines_file_disables_lines(monkeypatch):
    monkeypatch.setenv("SUBWAY_GRAPH_LINES_FILE", "")
    assert AppConfig().graph.lines_path is None


class TestContainer:
    """Test suite for Container."""

    def test_create_default_wires_planner(self):
        container = Container.create_default(AppConfig())

        planner = container.resolve(RoutePlannerService)

        assert isinstance(planner.graph_repository, JsonGraphRepository)
        assert isinstance(planner.route_solver, BfsRouteSolver)
        assert isinstance(planner.map_renderer, FoliumMapRenderer)
        assert planner.plan("1", "3").path == ("1", "2", "3")

    def test_schematic_renderer_from_config(self, monkeypatch):
        monkeypatch.setenv("SUBWAY_RENDER_RENDERER", "schematic")
        container = Container.create_default(AppConfig())

        assert isinstance(container.resolve(MapRendererPort), SchematicMapRenderer)

    def test_singletons_are_shared(self):
        container = Container.create_default(AppConfig())

        assert container.resolve(GraphRepositoryPort) is container.resolve(
            GraphRepositoryPort
        )

    def test_register_override_replaces_instance(self):
        container = Container.create_default(AppConfig())
        original = container.resolve(RouteSolverPort)
        replacement = BfsRouteSolver()

        container.register(RouteSolverPort, lambda: replacement)

        assert container.resolve(RouteSolverPort) is replacement
        assert container.resolve(RouteSolverPort) is not original

    def test_transient_registration(self):
        container = Container(config=AppConfig())
        container.register(RouteSolverPort, BfsRouteSolver, singleton=False)

        assert container.resolve(RouteSolverPort) is not container.resolve(
            RouteSolverPort
        )

    def test_unregistered_type_raises(self):
        container = Container(config=AppConfig())

        assert not container.is_registered(RouteSolverPort)
        with pytest.raises(KeyError):
            container.resolve(RouteSolverPort)

    def test_default_container_lifecycle(self):
        reset_container()
        first = get_container()

        assert get_container() is first
        reset_container()
        assert get_container() is not first
        reset_container()


def test_configure_logging_is_idempotent():
    logger = configure_logging(ObservabilityConfig(level="DEBUG"))
    configure_logging(ObservabilityConfig(level="WARNING"))

    owned = [h for h in logger.handlers if getattr(h, "_subway_map", False)]
    assert logger.name == LOGGER_NAME
    assert len(owned) == 1
    assert logger.level == logging.WARNING
    assert owned[0].level == logging.WARNING
