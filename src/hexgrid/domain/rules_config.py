"""Declarative constants for the search and visibility algorithms."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PathfindingRules:
    """A* movement costs."""

    step_cost: float = 10.0  # added to the destination cell cost for every step


@dataclass(frozen=True, slots=True)
class VisibilityRules:
    """Shadowcasting parameters."""

    full_circle: float = 360.0
    include_partially_visible: bool = False


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for all algorithms."""

    pathfinding: PathfindingRules = PathfindingRules()
    visibility: VisibilityRules = VisibilityRules()


DEFAULT_RULES = RulesConfig()
