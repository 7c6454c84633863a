"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DeliveryPathError,
    GraphError,
    InvalidRoadError,
    NodeNotFoundError,
    NoRouteFoundError,
    PredecessorChainBrokenError,
    RouteSearchLimitError,
)
from .models import City, Road, RoadRequest, RouteResult

__all__ = [
    # Models
    "City",
    "Road",
    "RoadRequest",
    "RouteResult",
    # Errors
    "DeliveryPathError",
    "NodeNotFoundError",
    "NoRouteFoundError",
    "PredecessorChainBrokenError",
    "InvalidRoadError",
    "RouteSearchLimitError",
    "GraphError",
    "ConfigurationError",
]
