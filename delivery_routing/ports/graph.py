"""Graph ports - Abstractions for the road store and routing.

These protocols define the contracts for reading and writing the road
network and for computing fastest routes over a road snapshot.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional, Protocol, Sequence

from ..graph.build_graph import Graph

if TYPE_CHECKING:
    from ..domain.models import City, Road, RouteResult


class RoadRepositoryPort(Protocol):
    """Port for road network storage.

    Implementations:
    - adapters/graph/memory_repository.py (InMemoryRoadRepository)
    - adapters/graph/csv_repository.py (CSVRoadRepository)

    City names passed to the repository are already canonical.
    """

    def get_city(self, name: str) -> Optional[City]:
        """Get a city by canonical name.

        Returns:
            The City, or None if not found.
        """
        ...

    def get_or_create_city(self, name: str) -> City:
        """Get a city, creating it if it does not exist yet."""
        ...

    def list_cities(self) -> Sequence[City]:
        """List all cities."""
        ...

    def list_roads(self) -> Sequence[Road]:
        """Return a consistent snapshot of every road."""
        ...

    def upsert_road(self, from_city: str, to_city: str, travel_time_minutes: int) -> Road:
        """Create the road or replace the travel time of the existing one.

        Both cities are created when missing.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/route.py (compute_fastest_path)
    """

    def solve(
        self,
        roads: Iterable[Road],
        source: str,
        destination: str,
    ) -> RouteResult:
        """Find the fastest route between two cities.

        Args:
            roads: Snapshot of the road network.
            source: Canonical departure city name.
            destination: Canonical arrival city name.

        Returns:
            RouteResult with path, roads and total travel time.
        """
        ...


__all__ = ["Graph", "RoadRepositoryPort", "RouteSolverPort"]
