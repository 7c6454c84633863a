"""Thread-safe in-memory road repository.

Holds cities and roads in plain dicts guarded by an RLock. Roads are
keyed by their ordered (from, to) pair, so at most one road exists per
direction and writing an existing pair replaces its travel time.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Sequence, Tuple

from ...domain.models import City, Road


@dataclass
class InMemoryRoadRepository:
    """Road repository backed by process memory.

    This adapter implements RoadRepositoryPort. City names handed to it
    must already be canonical.

    Example:
        repo = InMemoryRoadRepository()
        repo.upsert_road("TBILISI", "BATUMI", 360)
        roads = repo.list_roads()
    """

    _cities: Dict[str, City] = field(default_factory=dict, repr=False)
    _roads: Dict[Tuple[str, str], Road] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_roads(cls, roads: Iterable[Road]) -> InMemoryRoadRepository:
        """Create a repository pre-populated with ``roads``."""
        repo = cls()
        for road in roads:
            repo.upsert_road(road.from_city, road.to_city, road.travel_time_minutes)
        return repo

    def get_city(self, name: str) -> Optional[City]:
        with self._lock:
            return self._cities.get(name)

    def get_or_create_city(self, name: str) -> City:
        with self._lock:
            city = self._cities.get(name)
            if city is None:
                city = City(name=name)
                self._cities[name] = city
                self._logger.info("Created new city", extra={"city": name})
            return city

    def list_cities(self) -> Sequence[City]:
        with self._lock:
            return tuple(self._cities.values())

    def list_roads(self) -> Sequence[Road]:
        """Return a snapshot of every road, taken under the lock."""
        with self._lock:
            return tuple(self._roads.values())

    def upsert_road(
        self, from_city: str, to_city: str, travel_time_minutes: int
    ) -> Road:
        with self._lock:
            self.get_or_create_city(from_city)
            self.get_or_create_city(to_city)

            road = Road(
                from_city=from_city,
                to_city=to_city,
                travel_time_minutes=travel_time_minutes,
            )
            self._roads[(from_city, to_city)] = road
            return road

    def clear(self) -> None:
        """Remove every city and road."""
        with self._lock:
            self._cities.clear()
            self._roads.clear()
        self._logger.debug("Road repository cleared")
