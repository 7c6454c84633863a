"""Immutable domain models for the delivery path finder.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the core concepts of the road network.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class City:
    """A node of the road network.

    Attributes:
        name: Canonical city name (trimmed, upper-cased)
    """

    name: str


@dataclass(frozen=True, slots=True)
class Road:
    """A directed road between two cities.

    Attributes:
        from_city: Canonical name of the origin city
        to_city: Canonical name of the destination city
        travel_time_minutes: Non-negative travel time, used as edge weight
    """

    from_city: str
    to_city: str
    travel_time_minutes: int


@dataclass(frozen=True, slots=True)
class RoadRequest:
    """A raw request to create or update a road.

    Names are not normalized yet and the travel time may be missing;
    RoadService validates before anything reaches the store.
    """

    from_city: Optional[str]
    to_city: Optional[str]
    travel_time_minutes: Optional[int]


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of route computation between two cities.

    Attributes:
        path: Ordered tuple of city names from source to destination
        roads: Road used between each consecutive pair of cities
        total_travel_time_minutes: Sum of the road travel times
    """

    path: tuple[str, ...]
    roads: tuple[Road, ...] = field(default_factory=tuple)
    total_travel_time_minutes: int = 0

    @property
    def source(self) -> str:
        """Return the first city of the route."""
        return self.path[0]

    @property
    def destination(self) -> str:
        """Return the last city of the route."""
        return self.path[-1]

    @property
    def num_stops(self) -> int:
        """Return the number of cities in the route."""
        return len(self.path)
