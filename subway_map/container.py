"""Dependency injection container.

Registers the graph repository, route solver, line classifier, map
renderer and route planner service. Adapters are created on first
resolution; registration and resolution are guarded by a lock.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, TypeVar, cast

from .config import AppConfig, get_config

T = TypeVar("T")


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        planner = container.resolve(RoutePlannerService)

        # Testing
        container = Container()
        container.register(RouteSolverPort, lambda: FakeSolver())
        solver = container.resolve(RouteSolverPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``.

        Re-registering a type drops any instance already built for it.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[T]) -> T:
        """Return an instance for ``port_type``.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type not in self._singleton_types:
                return cast(T, self._factories[port_type]())

            if port_type not in self._singletons:
                self._singletons[port_type] = self._factories[port_type]()
            return cast(T, self._singletons[port_type])

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_all(self) -> None:
        """Drop every registration and cached instance."""
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with the production bindings.

        The map renderer follows ``config.rendering.renderer`` and the
        line classifier reads ``config.graph.lines_path``.
        """
        from .adapters.graph import BfsRouteSolver, JsonGraphRepository
        from .adapters.lines import TableLineClassifier
        from .adapters.rendering import FoliumMapRenderer, SchematicMapRenderer
        from .ports.graph import GraphRepositoryPort, RouteSolverPort
        from .ports.lines import LineClassifierPort
        from .ports.rendering import MapRendererPort
        from .services import RoutePlannerService

        config = config or get_config()
        container = cls(config=config)

        # Graph
        container.register(
            GraphRepositoryPort,
            lambda: JsonGraphRepository(config.graph),
        )
        container.register(
            RouteSolverPort,
            lambda: BfsRouteSolver(),
        )

        # Lines
        container.register(
            LineClassifierPort,
            lambda: TableLineClassifier.from_config(config.graph),
        )

        # Rendering based on config
        def create_map_renderer() -> MapRendererPort:
            if config.rendering.renderer == "schematic":
                return SchematicMapRenderer(config.rendering)
            return FoliumMapRenderer(config.rendering)

        container.register(MapRendererPort, create_map_renderer)

        # Main service
        def create_route_planner() -> RoutePlannerService:
            return RoutePlannerService(
                graph_repository=container.resolve(GraphRepositoryPort),
                route_solver=container.resolve(RouteSolverPort),
                line_classifier=container.resolve(LineClassifierPort),
                map_renderer=container.resolve(MapRendererPort),
            )

        container.register(RoutePlannerService, create_route_planner)

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container.

    Returns:
        The default Container instance (creates one if needed).
    """
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container.

    Call this in tests to ensure a fresh container.
    """
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
