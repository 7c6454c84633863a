"""CSV road repository adapter.

Loads the road network from a CSV file with the columns
``from_city,to_city,travel_time_minutes`` and adds:
- Configuration injection (path from config)
- Caching of the loaded network
- Name normalization of the file contents
- Typed errors for unreadable data

Writes are kept in memory on top of the loaded data; the file itself is
never modified.
"""

from __future__ import annotations

import csv
import logging
import threading
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...config import StoreConfig, get_config
from ...domain.errors import GraphError, InvalidRoadError
from ...domain.models import City, Road
from ...domain.naming import normalize_city_name
from .memory_repository import InMemoryRoadRepository


@dataclass
class CSVRoadRepository:
    """Road repository seeded from a CSV file.

    This adapter implements RoadRepositoryPort. The file is read on first
    access and cached until clear_cache() is called.

    Attributes:
        config: Store configuration (data dir, file name)
    """

    config: StoreConfig = field(default_factory=lambda: get_config().store)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _store: Optional[InMemoryRoadRepository] = field(default=None, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> InMemoryRoadRepository:
        """Load the road network from CSV.

        Returns:
            The in-memory store holding the loaded roads.

        Raises:
            GraphError: If the file cannot be read or holds invalid rows.
        """
        with self._lock:
            if self._store is not None:
                return self._store
            return self._load_locked()

    def _load_locked(self) -> InMemoryRoadRepository:
        self._logger.debug(
            "Loading roads",
            extra={"roads_path": str(self.config.roads_path)},
        )

        try:
            store = self._load_roads_from_csv()
        except (OSError, KeyError, ValueError, InvalidRoadError) as e:
            raise GraphError(
                f"Failed to load roads: {e}",
                file_path=str(self.config.roads_path),
                cause=e,
            )

        self._store = store
        self._logger.info(
            "Roads loaded",
            extra={
                "cities": len(store.list_cities()),
                "roads": len(store.list_roads()),
            },
        )
        return store

    def _load_roads_from_csv(self) -> InMemoryRoadRepository:
        """Internal method to load roads from the CSV file."""
        store = InMemoryRoadRepository()

        with self.config.roads_path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                from_raw = (row.get("from_city") or "").strip()
                to_raw = (row.get("to_city") or "").strip()
                time_str = (row.get("travel_time_minutes") or "").strip()

                if not from_raw or not to_raw or not time_str:
                    continue

                travel_time = int(time_str)
                if travel_time < 0:
                    raise ValueError(
                        f"negative travel time {travel_time} on line {reader.line_num}"
                    )

                from_city = normalize_city_name(from_raw, "from_city")
                to_city = normalize_city_name(to_raw, "to_city")
                if from_city == to_city:
                    raise ValueError(
                        f"road from {from_city} to itself on line {reader.line_num}"
                    )

                store.upsert_road(from_city, to_city, travel_time)

        return store

    def get_city(self, name: str) -> Optional[City]:
        return self.load().get_city(name)

    def get_or_create_city(self, name: str) -> City:
        return self.load().get_or_create_city(name)

    def list_cities(self) -> Sequence[City]:
        return self.load().list_cities()

    def list_roads(self) -> Sequence[Road]:
        return self.load().list_roads()

    def upsert_road(
        self, from_city: str, to_city: str, travel_time_minutes: int
    ) -> Road:
        return self.load().upsert_road(from_city, to_city, travel_time_minutes)

    def clear_cache(self) -> None:
        """Drop the loaded network, including in-memory writes."""
        with self._lock:
            self._store = None
        self._logger.debug("Road cache cleared")
