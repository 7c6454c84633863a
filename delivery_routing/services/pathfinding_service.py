"""Pathfinding service - Fastest route between two named cities.

Resolves the raw city names against the store, takes one road snapshot
and hands it to the route solver.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..domain.errors import InvalidRoadError, NodeNotFoundError
from ..domain.models import RouteResult
from ..domain.naming import normalize_city_name
from ..ports.graph import RoadRepositoryPort, RouteSolverPort


@dataclass
class PathfindingService:
    """Main service for fastest delivery path queries.

    Attributes:
        road_repository: Resolves cities and provides the road snapshot
        route_solver: Computes the fastest route over the snapshot
    """

    road_repository: RoadRepositoryPort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def find_fastest_path(self, source_city: str, destination_city: str) -> RouteResult:
        """Find the fastest delivery path between two cities.

        Args:
            source_city: Departure city name, any case and spacing.
            destination_city: Arrival city name, any case and spacing.

        Returns:
            RouteResult with path, roads used and total travel time.

        Raises:
            NodeNotFoundError: If either city is unknown.
            NoRouteFoundError: If no path exists between the cities.
        """
        source = self._resolve(source_city, "Source")
        destination = self._resolve(destination_city, "Destination")

        self._logger.info(
            "Finding fastest path",
            extra={"source": source, "destination": destination},
        )

        roads = self.road_repository.list_roads()
        result = self.route_solver.solve(roads, source, destination)

        self._logger.info(
            "Found path",
            extra={
                "cities": result.num_stops,
                "total_travel_time_minutes": result.total_travel_time_minutes,
            },
        )
        return result

    def _resolve(self, raw_name: str, role: str) -> str:
        try:
            name = normalize_city_name(raw_name, f"{role.lower()}_city")
        except InvalidRoadError as e:
            raise NodeNotFoundError(
                f"{role} city not found: {raw_name!r}",
                city_name=raw_name or "",
                cause=e,
            )

        city = self.road_repository.get_city(name)
        if city is None:
            raise NodeNotFoundError(
                f"{role} city not found: {raw_name}",
                city_name=raw_name,
            )
        return city.name
