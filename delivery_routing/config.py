"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
routing limits, the road store backend, the HTTP server and logging.

Configuration can be overridden via environment variables:
- FDP_STORE_BACKEND=csv
- FDP_STORE_DATA_DIR=/path/to/data
- FDP_ROUTING_MAX_RELAXATIONS=100000
- FDP_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RoutingConfig(BaseSettings):
    """Routing engine configuration.

    Environment variables prefixed with FDP_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="FDP_ROUTING_")

    max_relaxations: Optional[int] = Field(default=None, ge=1)


class StoreConfig(BaseSettings):
    """Road store configuration.

    Environment variables prefixed with FDP_STORE_.
    """

    model_config = SettingsConfigDict(env_prefix="FDP_STORE_")

    backend: Literal["memory", "csv"] = "memory"
    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    roads_file: str = "roads.csv"

    @property
    def roads_path(self) -> Path:
        """Full path to roads CSV file."""
        return self.data_dir / self.roads_file


class ApiConfig(BaseSettings):
    """HTTP server configuration.

    Environment variables prefixed with FDP_API_.
    """

    model_config = SettingsConfigDict(env_prefix="FDP_API_")

    host: str = "127.0.0.1"
    port: int = 8080


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with FDP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="FDP_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.store.roads_path)
        print(config.routing.max_relaxations)

    Environment variables prefixed with FDP_.
    """

    model_config = SettingsConfigDict(env_prefix="FDP_")

    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
