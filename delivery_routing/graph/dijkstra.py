"""Shortest-path computation using Dijkstra's algorithm.

The search runs on a binary heap with lazy deletion: a node may sit in
the heap several times, and any popped entry whose distance is larger
than the one currently recorded for that node is stale and skipped.
Edge weights are assumed non-negative, which lets the search stop as
soon as the target is popped with a current entry.
"""

import heapq
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from ..domain.errors import (
    NoRouteFoundError,
    PredecessorChainBrokenError,
    RouteSearchLimitError,
)
from .build_graph import Graph


@dataclass
class DijkstraResult:
    """Distances and predecessor links produced by one search.

    Attributes:
        distances: Best known cumulative weight per reached node
        previous: Node each entry of ``distances`` was last improved from
        relaxations: Number of successful relaxations performed
    """

    distances: Dict[str, int]
    previous: Dict[str, str] = field(default_factory=dict)
    relaxations: int = 0


def run_dijkstra(
    graph: Graph,
    source: str,
    target: str,
    max_relaxations: Optional[int] = None,
) -> DijkstraResult:
    """Compute distances from ``source`` until ``target`` is settled.

    Parameters
    ----------
    graph:
        Adjacency mapping as produced by ``build_graph``.
    source:
        Identifier of the departure node.
    target:
        Identifier of the arrival node.
    max_relaxations:
        Optional upper bound on successful relaxations. ``None`` means
        unbounded.

    Returns
    -------
    DijkstraResult
        ``distances[target]`` is the optimal weight and ``previous``
        holds enough links to rebuild one optimal path.

    Raises
    ------
    NoRouteFoundError
        If the heap empties before the target is settled.
    RouteSearchLimitError
        If more than ``max_relaxations`` relaxations are needed.
    """
    if source == target:
        return DijkstraResult(distances={source: 0})

    distances: Dict[str, int] = {source: 0}
    previous: Dict[str, str] = {}
    relaxations = 0

    heap: List[Tuple[int, str]] = [(0, source)]
    reached = False

    while heap:
        current_distance, u = heapq.heappop(heap)

        if current_distance > distances[u]:
            continue

        if u == target:
            reached = True
            break

        for road in graph.get(u, []):
            v = road.to_city
            new_distance = current_distance + road.travel_time_minutes
            known = distances.get(v)
            if known is None or new_distance < known:
                relaxations += 1
                if max_relaxations is not None and relaxations > max_relaxations:
                    raise RouteSearchLimitError(
                        f"Route search from {source} to {target} exceeded "
                        f"{max_relaxations} relaxations",
                        limit=max_relaxations,
                    )
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    if not reached:
        raise NoRouteFoundError(
            f"No route found between {source} and {target}.",
            departure=source,
            arrival=target,
        )

    return DijkstraResult(
        distances=distances, previous=previous, relaxations=relaxations
    )


def reconstruct_path(
    previous: Dict[str, str], source: str, target: str
) -> List[str]:
    """Walk predecessor links back from ``target`` to ``source``.

    Raises:
        PredecessorChainBrokenError: If the chain loops or ends on a node
            other than ``source``.
    """
    path: List[str] = [target]
    seen: Set[str] = {target}
    current = target

    while current in previous:
        current = previous[current]
        if current in seen:
            raise PredecessorChainBrokenError(
                f"Predecessor chain loops at {current}",
                node=current,
            )
        seen.add(current)
        path.append(current)

    path.reverse()

    if path[0] != source:
        raise PredecessorChainBrokenError(
            f"Predecessor chain for {target} ends at {path[0]}, not {source}",
            node=path[0],
        )
    return path
