"""Route assembly and the engine entry point.

``compute_fastest_path`` is the single function the rest of the
application calls: it builds a fresh graph from the supplied snapshot,
runs the search, rebuilds the path and resolves the road used on every
leg.
"""

from typing import Iterable, List, Optional, Sequence

from ..domain.errors import InvalidRoadError, PredecessorChainBrokenError
from ..domain.models import Road, RouteResult
from .build_graph import Graph, build_graph
from .dijkstra import reconstruct_path, run_dijkstra


def assemble_route(
    path: Sequence[str],
    graph: Graph,
    expected_total: Optional[int] = None,
) -> RouteResult:
    """Resolve the road for each leg of ``path`` and sum the weights.

    When several roads join the same ordered pair, the fastest one is
    used. If ``expected_total`` is given, the summed travel time must
    match it.
    """
    roads: List[Road] = []

    for from_city, to_city in zip(path, path[1:]):
        candidates = [
            road for road in graph.get(from_city, []) if road.to_city == to_city
        ]
        if not candidates:
            raise PredecessorChainBrokenError(
                f"No road from {from_city} to {to_city} on computed path",
                node=from_city,
            )
        roads.append(min(candidates, key=lambda road: road.travel_time_minutes))

    total = sum(road.travel_time_minutes for road in roads)

    if expected_total is not None and total != expected_total:
        raise PredecessorChainBrokenError(
            f"Assembled travel time {total} differs from computed {expected_total}",
            node=path[-1],
        )

    return RouteResult(
        path=tuple(path),
        roads=tuple(roads),
        total_travel_time_minutes=total,
    )


def compute_fastest_path(
    roads: Iterable[Road],
    source: str,
    destination: str,
    max_relaxations: Optional[int] = None,
) -> RouteResult:
    """Find the minimum travel-time route from ``source`` to ``destination``.

    Parameters
    ----------
    roads:
        Snapshot of every directed road, taken once by the caller.
    source, destination:
        Canonical city names.
    max_relaxations:
        Optional bound on the search effort.

    Returns
    -------
    RouteResult
        Path, roads used and total travel time.

    Raises
    ------
    InvalidRoadError
        If a road in the snapshot has a negative travel time.
    NoRouteFoundError
        If ``destination`` cannot be reached from ``source``.
    """
    snapshot = list(roads)
    for road in snapshot:
        if road.travel_time_minutes < 0:
            raise InvalidRoadError(
                f"Travel time must be non-negative: {road.from_city} -> "
                f"{road.to_city} ({road.travel_time_minutes})",
                field_name="travel_time_minutes",
            )

    graph = build_graph(snapshot)
    result = run_dijkstra(graph, source, destination, max_relaxations)
    path = reconstruct_path(result.previous, source, destination)
    return assemble_route(path, graph, expected_total=result.distances[destination])
