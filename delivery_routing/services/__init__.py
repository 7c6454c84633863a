"""Services layer - Application orchestration.

This module contains the application services that orchestrate the
flow of data through adapters to fulfill use cases.

Available services:
- PathfindingService: Fastest route between two named cities
- RoadService: Validated creation and update of roads
"""

from .pathfinding_service import PathfindingService
from .road_service import RoadService

__all__ = ["PathfindingService", "RoadService"]
