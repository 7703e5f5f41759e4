"""Lightweight configuration for hexgrid."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from hexgrid.domain.rules_config import PathfindingRules, RulesConfig, VisibilityRules


class Settings(BaseSettings):
    """Environment-driven settings, read from ``HEXGRID_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="HEXGRID_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    step_cost: float = Field(
        default=10.0,
        description="Base A* cost of a single step, added to the destination cell cost",
        gt=0.0,
    )
    include_partially_visible: bool = Field(
        default=False,
        description="Field of view includes cells whose slice is only partly in shadow",
    )
    log_level: str = Field(default="WARNING", description="Level for the hexgrid logger")

    def to_rules(self) -> RulesConfig:
        """Build the algorithm rules described by these settings."""

        return RulesConfig(
            pathfinding=PathfindingRules(step_cost=self.step_cost),
            visibility=VisibilityRules(include_partially_visible=self.include_partially_visible),
        )


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured level to the ``hexgrid`` logger."""

    settings = settings or get_settings()
    logging.getLogger("hexgrid").setLevel(settings.log_level.upper())


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
