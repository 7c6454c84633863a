"""Typed domain errors for the delivery path finder.

Expected, caller-recoverable conditions (unknown city, no route, bad
road data) each have their own error type so the HTTP layer can map
them to distinct responses. Engine defects get a separate type that is
never mapped to a user-facing response.

All errors inherit from DeliveryPathError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class DeliveryPathError(Exception):
    """Base error for the delivery path domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class NodeNotFoundError(DeliveryPathError):
    """City name does not resolve to a known node.

    Attributes:
        city_name: The name as supplied by the caller
    """

    city_name: str = ""


@dataclass
class NoRouteFoundError(DeliveryPathError):
    """No path exists between the requested cities.

    Attributes:
        departure: Source node id
        arrival: Destination node id
    """

    departure: str = ""
    arrival: str = ""


@dataclass
class PredecessorChainBrokenError(DeliveryPathError):
    """Internal inconsistency while rebuilding a path.

    Raised when backtracking stops before the source, loops, or when the
    assembled route disagrees with the computed distance. This is a
    defect, never a user-facing condition.

    Attributes:
        node: Node at which the inconsistency was detected
    """

    node: str = ""


@dataclass
class InvalidRoadError(DeliveryPathError):
    """Road data failed validation.

    Attributes:
        field_name: The offending field
    """

    field_name: str = ""


@dataclass
class RouteSearchLimitError(DeliveryPathError):
    """The search exceeded its configured relaxation budget.

    Attributes:
        limit: The configured maximum number of relaxations
    """

    limit: int = 0


@dataclass
class GraphError(DeliveryPathError):
    """Road data could not be loaded.

    Attributes:
        file_path: Path to the road data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(DeliveryPathError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
