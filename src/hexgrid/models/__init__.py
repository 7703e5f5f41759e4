"""Value types for hexgrid.

``hexgrid.models.grid`` is imported explicitly; it depends on
``hexgrid.utils.hex_math``, which itself builds on these coordinates.
"""

from hexgrid.models.coordinates import (
    AxialCoordinates,
    CubeCoordinates,
    CubeFractionalCoordinates,
    InvalidArgumentsError,
)

__all__ = [
    "AxialCoordinates",
    "CubeCoordinates",
    "CubeFractionalCoordinates",
    "InvalidArgumentsError",
]
