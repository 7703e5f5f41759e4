"""Hexagonal grid geometry, field of view and pathfinding."""

from hexgrid.domain.pathfinding import a_star_path, path_cost
from hexgrid.domain.rules_config import DEFAULT_RULES, RulesConfig
from hexgrid.domain.search import breadth_first_search
from hexgrid.domain.visibility import calculate_field_of_view
from hexgrid.models.coordinates import (
    AxialCoordinates,
    CubeCoordinates,
    CubeFractionalCoordinates,
    InvalidArgumentsError,
)
from hexgrid.models.grid import Cell, HexGrid, hexagon_grid

__all__ = [
    "DEFAULT_RULES",
    "AxialCoordinates",
    "Cell",
    "CubeCoordinates",
    "CubeFractionalCoordinates",
    "HexGrid",
    "InvalidArgumentsError",
    "RulesConfig",
    "a_star_path",
    "breadth_first_search",
    "calculate_field_of_view",
    "hexagon_grid",
    "path_cost",
]
