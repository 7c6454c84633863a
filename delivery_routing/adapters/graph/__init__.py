"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- InMemoryRoadRepository: Keeps roads in process memory
- CSVRoadRepository: Seeds the road network from a CSV file
- DijkstraRouteSolver: Finds fastest routes using Dijkstra's algorithm
"""

from .csv_repository import CSVRoadRepository
from .dijkstra_solver import DijkstraRouteSolver
from .memory_repository import InMemoryRoadRepository

__all__ = ["CSVRoadRepository", "DijkstraRouteSolver", "InMemoryRoadRepository"]
