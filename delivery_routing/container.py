"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It allows registering and resolving dependencies for the application.

Design principles:
1. No magic - explicit registration and resolution
2. Testable - easy to swap implementations
3. Lazy loading - adapters instantiated on first use
4. Thread-safe - for web server contexts
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
        service = container.resolve(PathfindingService)

        # Testing
        container = Container()
        container.register(RoadRepositoryPort, lambda: InMemoryRoadRepository())
        repo = container.resolve(RoadRepositoryPort)

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
        """Clear all cached singletons.

        Call this in tests to ensure fresh instances.
        """
        with self._lock:
            self._singletons.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        The road store backend is chosen from ``config.store.backend``.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.graph import (
            CSVRoadRepository,
            DijkstraRouteSolver,
            InMemoryRoadRepository,
        )
        from .ports.graph import RoadRepositoryPort, RouteSolverPort
        from .services import PathfindingService, RoadService

        config = config or get_config()
        container = cls(config=config)

        # Store
        def create_road_repository() -> RoadRepositoryPort:
            if config.store.backend == "csv":
                return CSVRoadRepository(config.store)
            return InMemoryRoadRepository()

        container.register(RoadRepositoryPort, create_road_repository)

        # Routing
        container.register(
            RouteSolverPort,
            lambda: DijkstraRouteSolver(max_relaxations=config.routing.max_relaxations),
        )

        # Services
        container.register(
            RoadService,
            lambda: RoadService(road_repository=container.resolve(RoadRepositoryPort)),
        )
        container.register(
            PathfindingService,
            lambda: PathfindingService(
                road_repository=container.resolve(RoadRepositoryPort),
                route_solver=container.resolve(RouteSolverPort),
            ),
        )

        return container
