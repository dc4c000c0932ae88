"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for data locations, server
settings, routing and map options.

Configuration can be overridden via environment variables:
- WF_GRAPH_DATA_DIR=/path/to/data
- WF_SERVER_PORT=8080
- WF_ROUTING_CACHE_RESULTS=false
- WF_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Static data configuration.

    Environment variables prefixed with WF_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="WF_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    graph_file: str = "graph.json"
    rooms_file: str = "rooms.json"

    @property
    def graph_path(self) -> Path:
        """Full path to the graph JSON file."""
        return self.data_dir / self.graph_file

    @property
    def rooms_path(self) -> Path:
        """Full path to the rooms JSON file."""
        return self.data_dir / self.rooms_file


class ServerConfig(BaseSettings):
    """HTTP server configuration.

    Environment variables prefixed with WF_SERVER_.
    """

    model_config = SettingsConfigDict(env_prefix="WF_SERVER_")

    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False
    cors_origin: str = "*"
    request_timeout_seconds: float = Field(default=10.0, gt=0)
    service_name: str = "College Wayfinder"


class RoutingConfig(BaseSettings):
    """Route computation configuration.

    Environment variables prefixed with WF_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="WF_ROUTING_")

    cache_results: bool = True
    cache_max_size: int = Field(default=1024, gt=0)


class MapConfig(BaseSettings):
    """Floor-plan map configuration.

    Environment variables prefixed with WF_MAP_.
    """

    model_config = SettingsConfigDict(env_prefix="WF_MAP_")

    image_width: int = 2048
    image_height: int = 512
    image_offset_y: int = 500
    floors: List[int] = Field(default_factory=lambda: [1, 2, 3, 4])
    images_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data" / "floors"
    )
    # Relative paths resolve against images_dir; http(s) URLs pass through.
    floor_image_template: str = "floor-{floor}.png"


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with WF_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="WF_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.server.port)
        print(config.graph.graph_path)

    Environment variables prefixed with WF_.
    """

    model_config = SettingsConfigDict(env_prefix="WF_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    map: MapConfig = Field(default_factory=MapConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
