"""Road service - Creation and update of roads.

Validates raw road requests, normalizes city names and writes the
roads through the repository port. Missing cities are created by the
repository on the fly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from ..domain.errors import InvalidRoadError
from ..domain.models import Road, RoadRequest
from ..domain.naming import normalize_city_name
from ..ports.graph import RoadRepositoryPort


@dataclass
class RoadService:
    """Service for creating or updating roads in the network.

    Attributes:
        road_repository: Where cities and roads are stored
    """

    road_repository: RoadRepositoryPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def create_or_update_roads(self, requests: Sequence[RoadRequest]) -> List[Road]:
        """Store every requested road, replacing existing ones.

        The whole batch is validated before anything is written, so a
        single invalid request leaves the store untouched.

        Args:
            requests: Raw road requests.

        Returns:
            The stored roads, in request order.

        Raises:
            InvalidRoadError: If a request has a blank city, a missing or
                negative travel time, or connects a city to itself.
        """
        validated = [self._validate(request) for request in requests]
        roads: List[Road] = []

        for from_city, to_city, travel_time in validated:
            road = self.road_repository.upsert_road(from_city, to_city, travel_time)
            roads.append(road)

            self._logger.info(
                "Created/updated road",
                extra={
                    "from_city": from_city,
                    "to_city": to_city,
                    "travel_time_minutes": travel_time,
                },
            )

        return roads

    def _validate(self, request: RoadRequest) -> tuple[str, str, int]:
        from_city = normalize_city_name(request.from_city, "from_city")
        to_city = normalize_city_name(request.to_city, "to_city")

        if request.travel_time_minutes is None or request.travel_time_minutes < 0:
            raise InvalidRoadError(
                "Travel time must be non-negative",
                field_name="travel_time_minutes",
            )

        if from_city == to_city:
            raise InvalidRoadError(
                f"A road cannot connect a city to itself: {from_city}",
                field_name="to_city",
            )

        return from_city, to_city, request.travel_time_minutes
