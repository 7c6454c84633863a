"""Routing engine over the road network.

This subpackage builds an in-memory graph from a road snapshot and runs
the shortest-path search on top of it.
"""

from .build_graph import Graph, build_graph
from .dijkstra import DijkstraResult, reconstruct_path, run_dijkstra
from .route import assemble_route, compute_fastest_path

__all__ = [
    "Graph",
    "build_graph",
    "DijkstraResult",
    "run_dijkstra",
    "reconstruct_path",
    "assemble_route",
    "compute_fastest_path",
]
