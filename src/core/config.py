"""
Configuration module for structures-toolkit.

Uses pydantic-settings for environment-based configuration. Every setting
can be supplied as an environment variable prefixed with ``STRUCTURES_``
(e.g. ``STRUCTURES_DIJKSTRA_SELECTION=heap``) or through a ``.env`` file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables.

    Graph behaviour switches:
    - dijkstra_selection: how Dijkstra picks the next node to settle
    - log_edge_insertions: log every successful edge insertion at DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="STRUCTURES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ===========================================
    # LOGGING CONFIGURATION
    # ===========================================
    service_name: str = Field(
        default="structures-toolkit",
        description="Service name stamped on every structured log line",
    )
    log_level: str = Field(default="INFO", description="Root log level")
    log_file_path: str | None = Field(
        default=None,
        description="Rotating JSON log file; file logging is off when unset",
    )

    # ===========================================
    # GRAPH CONFIGURATION
    # ===========================================
    dijkstra_selection: Literal["scan", "heap"] = Field(
        default="scan",
        description="Minimum selection strategy: linear scan or binary heap",
    )
    log_edge_insertions: bool = Field(
        default=True,
        description="Log successful edge insertions at DEBUG level",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
