"""⚙️ Settings - Environment-based configuration for the lineage engine."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LineageSettings(BaseSettings):
    """Engine settings, read from ``DPLINEAGE_*`` environment variables.

    Example:
        DPLINEAGE_VALIDATE_GRAPHS=true
        DPLINEAGE_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(env_prefix="DPLINEAGE_", case_sensitive=False)

    cache_maps: bool = Field(
        default=True,
        description="Reuse adjacency maps until the graph changes",
    )
    validate_graphs: bool = Field(
        default=False,
        description="Check graphs for broken invariants when maps are built",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="WARNING")

    @classmethod
    def from_yaml(cls, path: Path | str) -> "LineageSettings":
        """Load settings from a YAML file (top-level or under ``lineage:``)."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data.get("lineage", data))


@lru_cache()
def get_settings() -> LineageSettings:
    """Get cached settings instance."""
    return LineageSettings()
