"""Utility functions for the hexgrid package."""

from hexgrid.utils.hex_math import (
    DIAGONAL_DIRECTIONS,
    DIRECTIONS,
    add,
    diagonal_direction,
    diagonal_neighbor,
    diagonal_neighbors,
    direction,
    distance,
    filled_ring,
    length,
    lerp_cube,
    line,
    neighbor,
    neighbors,
    ring,
    ring_walk,
    rotate_left,
    rotate_right,
    scale,
    subtract,
)

__all__ = [
    "DIAGONAL_DIRECTIONS",
    "DIRECTIONS",
    "add",
    "diagonal_direction",
    "diagonal_neighbor",
    "diagonal_neighbors",
    "direction",
    "distance",
    "filled_ring",
    "length",
    "lerp_cube",
    "line",
    "neighbor",
    "neighbors",
    "ring",
    "ring_walk",
    "rotate_left",
    "rotate_right",
    "scale",
    "subtract",
]
