"""Dependency injection container.

This module is the composition root of the application: it builds the
repositories, solver, renderer and services once and hands them to the
HTTP layer. Nothing in the routing core looks dependencies up globally.

Design principles:
1. No magic - explicit registration and resolution
2. Testable - easy to swap implementations
3. Lazy loading - adapters instantiated on first use
4. Thread-safe - for the threaded web server
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        routes = container.resolve(RouteService)

        # Testing
        container = Container()
        container.register(GraphRepositoryPort, lambda: FakeRepository(graph))
        repository = container.resolve(GraphRepositoryPort)

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
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons."""
        with self._lock:
            self._singletons.clear()

    def reload_data(self) -> None:
        """Reread graph and room data on next use.

        Memoized routes are dropped as well, since they were computed on
        the previous graph.
        """
        from .ports.graph import GraphRepositoryPort
        from .ports.rooms import RoomDirectoryPort
        from .services import RouteService

        with self._lock:
            self.resolve(GraphRepositoryPort).clear_cache()
            self.resolve(RoomDirectoryPort).clear_cache()
            self.resolve(RouteService).clear_cache()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.cache import InMemoryCache, NullCache
        from .adapters.graph import DijkstraRouteSolver, JSONGraphRepository
        from .adapters.rendering import FoliumFloorPlanRenderer
        from .adapters.rooms import JSONRoomDirectory
        from .ports.cache import CachePort
        from .ports.graph import GraphRepositoryPort, RouteSolverPort
        from .ports.rendering import MapRendererPort
        from .ports.rooms import RoomDirectoryPort
        from .services import RoomService, RouteService

        config = config or get_config()
        container = cls(config=config)

        # Route cache
        def create_cache() -> CachePort[Any]:
            if config.routing.cache_results:
                return InMemoryCache(name="routes", max_size=config.routing.cache_max_size)
            return NullCache()

        container.register(CachePort, create_cache)

        # Static data
        container.register(
            GraphRepositoryPort,
            lambda: JSONGraphRepository(config.graph),
        )
        container.register(
            RoomDirectoryPort,
            lambda: JSONRoomDirectory(config.graph),
        )

        # Routing
        container.register(RouteSolverPort, lambda: DijkstraRouteSolver())

        # Rendering
        container.register(
            MapRendererPort,
            lambda: FoliumFloorPlanRenderer(config.map),
        )

        # Services
        container.register(
            RouteService,
            lambda: RouteService(
                graph_repository=container.resolve(GraphRepositoryPort),
                route_solver=container.resolve(RouteSolverPort),
                cache=container.resolve(CachePort),
            ),
        )
        container.register(
            RoomService,
            lambda: RoomService(
                room_directory=container.resolve(RoomDirectoryPort),
                graph_repository=container.resolve(GraphRepositoryPort),
            ),
        )

        return container
