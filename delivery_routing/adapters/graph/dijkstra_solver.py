"""Dijkstra Route Solver adapter.

This adapter wraps the routing engine and adds:
- The configured relaxation limit
- Logging of every search and its outcome
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from ...domain.errors import NoRouteFoundError
from ...domain.models import Road, RouteResult
from ...graph.route import compute_fastest_path


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort on top of
    graph/route.py (compute_fastest_path).

    Attributes:
        max_relaxations: Optional bound on search effort per query
    """

    max_relaxations: Optional[int] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

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

        Raises:
            NoRouteFoundError: If no path exists.
            RouteSearchLimitError: If the search exceeds its budget.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": source, "destination": destination},
        )

        try:
            result = compute_fastest_path(
                roads, source, destination, max_relaxations=self.max_relaxations
            )
        except NoRouteFoundError:
            self._logger.warning(
                "No route found",
                extra={"source": source, "destination": destination},
            )
            raise

        self._logger.info(
            "Route found",
            extra={
                "source": result.source,
                "destination": result.destination,
                "stops": result.num_stops,
                "total_travel_time_minutes": result.total_travel_time_minutes,
            },
        )
        return result
