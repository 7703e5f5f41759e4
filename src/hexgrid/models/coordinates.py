"""
Coordinate value types for hexgrid.

Coordinate Systems:
-------------------
We use two coordinate systems:

1. Cube Coordinates (x, y, z) - for every calculation
   - x, y, z: three coordinates with constraint x + y + z = 0
   - Used in CubeCoordinates dataclass

2. Axial Coordinates (q, r) - for compact storage and representation
   - q: column coordinate
   - r: row coordinate
   - Conversion: x = q, z = r, y = -x - z

A fractional counterpart (CubeFractionalCoordinates) exists only for
interpolation, and is rounded back to CubeCoordinates before leaving the
library.

References:
-----------
Based on the excellent guide at: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

from dataclasses import dataclass

# Tolerance for the sum of fractional cube components
FRACTIONAL_EPSILON = 1e-6


class InvalidArgumentsError(ValueError):
    """Raised for invalid coordinates or out-of-range arguments."""


@dataclass(frozen=True, slots=True)
class CubeCoordinates:
    """
    A hexagonal coordinate using the cube coordinate system.

    Attributes:
        x: First cube axis
        y: Second cube axis
        z: Third cube axis

    Construction validates the invariant x + y + z == 0 and raises
    InvalidArgumentsError otherwise, so an instance is always a valid hex.

    Example:
        >>> CubeCoordinates(x=1, y=-1, z=0)
        CubeCoordinates(x=1, y=-1, z=0)
    """

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        for value in (self.x, self.y, self.z):
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"Coordinate values must be integers, got ({self.x}, {self.y}, {self.z})"
                raise InvalidArgumentsError(msg)
        if self.x + self.y + self.z != 0:
            msg = f"Sum of coordinate values must be zero, got ({self.x}, {self.y}, {self.z})"
            raise InvalidArgumentsError(msg)

    @classmethod
    def from_axial(cls, coord: AxialCoordinates) -> CubeCoordinates:
        """Build cube coordinates from an axial pair."""
        return cls(x=coord.q, y=-coord.q - coord.r, z=coord.r)

    def to_axial(self) -> AxialCoordinates:
        """
        Convert to axial coordinates (q, r).

        The y component is redundant (y = -x - z) and is dropped.
        """
        return AxialCoordinates(q=self.x, r=self.z)

    def as_tuple(self) -> tuple[int, int, int]:
        return self.x, self.y, self.z


@dataclass(frozen=True, slots=True)
class AxialCoordinates:
    """
    A hexagonal coordinate using axial coordinate system.

    Attributes:
        q: Column coordinate (horizontal axis)
        r: Row coordinate (diagonal axis)

    Example:
        >>> AxialCoordinates(q=1, r=2).to_cube()
        CubeCoordinates(x=1, y=-3, z=2)
    """

    q: int
    r: int

    def to_cube(self) -> CubeCoordinates:
        return CubeCoordinates.from_axial(self)


def _round_half_away_from_zero(value: float) -> int:
    # builtin round() uses banker's rounding, which is not symmetric around 0
    magnitude = int(abs(value) + 0.5)
    return magnitude if value >= 0 else -magnitude


@dataclass(frozen=True, slots=True)
class CubeFractionalCoordinates:
    """
    Cube coordinates with real-valued components.

    Only used as interpolation input. The sum of the components must be
    within FRACTIONAL_EPSILON of zero.
    """

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        if abs(self.x + self.y + self.z) > FRACTIONAL_EPSILON:
            msg = (
                "Sum of fractional coordinate values must be zero, "
                f"got ({self.x}, {self.y}, {self.z})"
            )
            raise InvalidArgumentsError(msg)

    @classmethod
    def from_cube(cls, coord: CubeCoordinates) -> CubeFractionalCoordinates:
        return cls(x=float(coord.x), y=float(coord.y), z=float(coord.z))

    def rounded(self) -> CubeCoordinates:
        """
        Round to the nearest hex.

        Each component is rounded half away from zero; the component with the
        largest rounding error is then recomputed from the other two so the
        result satisfies x + y + z == 0.

        Example:
            >>> CubeFractionalCoordinates(x=0.4, y=0.4, z=-0.8).rounded()
            CubeCoordinates(x=0, y=1, z=-1)
        """
        rx = _round_half_away_from_zero(self.x)
        ry = _round_half_away_from_zero(self.y)
        rz = _round_half_away_from_zero(self.z)

        dx = abs(rx - self.x)
        dy = abs(ry - self.y)
        dz = abs(rz - self.z)

        if dx > dy and dx > dz:
            rx = -ry - rz
        elif dy > dz:
            ry = -rx - rz
        else:
            rz = -rx - ry

        return CubeCoordinates(x=rx, y=ry, z=rz)
