"""City name normalization.

Every name entering the store or the routing engine goes through
``normalize_city_name`` so that "tbilisi", " Tbilisi " and "TBILISI"
refer to the same node.
"""

from __future__ import annotations

from typing import Optional

from .errors import InvalidRoadError


def normalize_city_name(raw: Optional[str], field_name: str = "city") -> str:
    """Return the canonical form of a city name.

    Raises:
        InvalidRoadError: If the name is missing or blank.
    """
    if raw is None or not raw.strip():
        raise InvalidRoadError(
            f"{field_name} cannot be empty",
            field_name=field_name,
        )
    return raw.strip().upper()
