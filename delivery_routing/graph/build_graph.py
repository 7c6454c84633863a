"""Adjacency construction from a flat road snapshot.

This module defines the Graph type used by the routing engine and the
function turning a list of roads into that structure.
"""

from typing import Dict, Iterable, List

from ..domain.models import Road

Graph = Dict[str, List[Road]]


def build_graph(roads: Iterable[Road]) -> Graph:
    graph: Graph = {}

    # outgoing roads keep the order in which they were supplied
    for road in roads:
        graph.setdefault(road.from_city, []).append(road)

    return graph
