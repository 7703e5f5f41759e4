"""
Hexagonal coordinate mathematics for hexgrid.

This module implements the pure coordinate operations the algorithms build on:
- Vector arithmetic (add, subtract, scale) and hex distance
- Neighbor and diagonal lookup with cyclic direction indexing
- 60 degree rotations about the origin
- Linear interpolation and line drawing
- Ring and filled ring (area) enumeration

Every coordinate returned here is built through the CubeCoordinates
constructor, which re-validates the x + y + z == 0 invariant.

References:
-----------
Based on the excellent guide at: https://www.redblobgames.com/grids/hexagons/
"""

from collections.abc import Iterator

from hexgrid.models.coordinates import (
    CubeCoordinates,
    CubeFractionalCoordinates,
    InvalidArgumentsError,
)

# Offset applied to both ends of a line so that sample points never land
# exactly on a hex edge. Components sum to zero.
LINE_NUDGE: tuple[float, float, float] = (1e-6, 1e-6, -2e-6)


def number_in_cycling_range(value: int, upper_bound: int) -> int:
    """
    Map a number into the range [0, upper_bound) cycling in both directions.

    Example:
        >>> number_in_cycling_range(-1, 6)
        5
        >>> number_in_cycling_range(13, 6)
        1
    """
    return value % upper_bound


# --- Coordinate algebra ---------------------------------------------------------


def add(a: CubeCoordinates, b: CubeCoordinates) -> CubeCoordinates:
    """Component-wise sum of two coordinates."""
    return CubeCoordinates(x=a.x + b.x, y=a.y + b.y, z=a.z + b.z)


def subtract(a: CubeCoordinates, b: CubeCoordinates) -> CubeCoordinates:
    """Component-wise difference ``a - b``."""
    return CubeCoordinates(x=a.x - b.x, y=a.y - b.y, z=a.z - b.z)


def scale(a: CubeCoordinates, c: int) -> CubeCoordinates:
    """
    Scale a direction vector by an integer coefficient.

    Only meaningful for direction vectors (see DIRECTIONS and
    DIAGONAL_DIRECTIONS). Scaling an arbitrary coordinate still yields a
    valid hex, but it no longer means "c steps in a direction".

    Args:
        a: Direction vector
        c: Coefficient

    Returns:
        The scaled vector
    """
    return CubeCoordinates(x=a.x * c, y=a.y * c, z=a.z * c)


def length(coord: CubeCoordinates) -> int:
    """
    Hex length of a coordinate, i.e. its distance from the origin.

    Example:
        >>> length(CubeCoordinates(x=2, y=-3, z=1))
        3
    """
    return (abs(coord.x) + abs(coord.y) + abs(coord.z)) // 2


def distance(a: CubeCoordinates, b: CubeCoordinates) -> int:
    """
    Calculate the distance between two hexes.

    The distance is the minimum number of hex steps to move from hex a to
    hex b, computed as the hex length of their difference.

    Args:
        a: First hex coordinate
        b: Second hex coordinate

    Returns:
        The distance between the two hexes (non-negative integer)

    Example:
        >>> origin = CubeCoordinates(x=0, y=0, z=0)
        >>> distance(origin, CubeCoordinates(x=2, y=-3, z=1))
        3
    """
    return length(subtract(a, b))


# --- Directions -----------------------------------------------------------------

# Direction vectors for the 6 neighbors in cube coordinates
DIRECTIONS: tuple[CubeCoordinates, ...] = (
    CubeCoordinates(x=1, y=0, z=-1),
    CubeCoordinates(x=1, y=-1, z=0),
    CubeCoordinates(x=0, y=-1, z=1),
    CubeCoordinates(x=-1, y=0, z=1),
    CubeCoordinates(x=-1, y=1, z=0),
    CubeCoordinates(x=0, y=1, z=-1),
)

# Vectors to the 6 hexes sharing a corner with the second ring
DIAGONAL_DIRECTIONS: tuple[CubeCoordinates, ...] = (
    CubeCoordinates(x=2, y=-1, z=-1),
    CubeCoordinates(x=1, y=1, z=-2),
    CubeCoordinates(x=-1, y=2, z=-1),
    CubeCoordinates(x=-2, y=1, z=1),
    CubeCoordinates(x=-1, y=-1, z=2),
    CubeCoordinates(x=1, y=-2, z=1),
)


def direction(index: int) -> CubeCoordinates:
    """
    Get one of the six neighbor direction vectors.

    The table behaves as a closed loop: index 6 is the same direction as
    index 0, index -1 the same as index 5, index 13 the same as index 1.

    Args:
        index: Any integer direction index

    Returns:
        The unit vector for that direction
    """
    return DIRECTIONS[number_in_cycling_range(index, len(DIRECTIONS))]


def diagonal_direction(index: int) -> CubeCoordinates:
    """Get one of the six diagonal vectors, cycling like direction()."""
    return DIAGONAL_DIRECTIONS[number_in_cycling_range(index, len(DIAGONAL_DIRECTIONS))]


def neighbor(origin: CubeCoordinates, index: int) -> CubeCoordinates:
    """Coordinates of the neighbor of ``origin`` in direction ``index``."""
    return add(origin, direction(index))


def diagonal_neighbor(origin: CubeCoordinates, index: int) -> CubeCoordinates:
    """Coordinates of the diagonal neighbor of ``origin`` at ``index``."""
    return add(origin, diagonal_direction(index))


def neighbors(origin: CubeCoordinates) -> set[CubeCoordinates]:
    """
    Find all 6 adjacent hexes to the given hex.

    Example:
        >>> origin = CubeCoordinates(x=0, y=0, z=0)
        >>> len(neighbors(origin))
        6
    """
    return {neighbor(origin, index) for index in range(6)}


def diagonal_neighbors(origin: CubeCoordinates) -> set[CubeCoordinates]:
    """Find all 6 diagonal hexes of the given hex."""
    return {diagonal_neighbor(origin, index) for index in range(6)}


# --- Rotation -------------------------------------------------------------------


def rotate_left(coord: CubeCoordinates) -> CubeCoordinates:
    """Rotate 60 degrees counter-clockwise about the origin."""
    return CubeCoordinates(x=-coord.y, y=-coord.z, z=-coord.x)


def rotate_right(coord: CubeCoordinates) -> CubeCoordinates:
    """Rotate 60 degrees clockwise about the origin."""
    return CubeCoordinates(x=-coord.z, y=-coord.x, z=-coord.y)


# --- Interpolation and lines ----------------------------------------------------


def lerp_cube(
    a: CubeFractionalCoordinates, b: CubeFractionalCoordinates, f: float
) -> CubeCoordinates:
    """
    Linear interpolation between two fractional hexes, rounded to a hex.

    Args:
        a: Start of the segment
        b: End of the segment
        f: Interpolation parameter, 0.0 gives ``a`` and 1.0 gives ``b``

    Returns:
        The hex containing the interpolated point
    """
    return CubeFractionalCoordinates(
        x=a.x * (1.0 - f) + b.x * f,
        y=a.y * (1.0 - f) + b.y * f,
        z=a.z * (1.0 - f) + b.z * f,
    ).rounded()


def _nudge(coord: CubeCoordinates, nudge: tuple[float, float, float]) -> CubeFractionalCoordinates:
    nx, ny, nz = nudge
    return CubeFractionalCoordinates(x=coord.x + nx, y=coord.y + ny, z=coord.z + nz)


def line(
    a: CubeCoordinates,
    b: CubeCoordinates,
    nudge: tuple[float, float, float] = LINE_NUDGE,
) -> set[CubeCoordinates]:
    """
    Find the hexes on a straight line between two hexes.

    Both endpoints are nudged by a tiny offset so that sample points never
    fall exactly on the boundary between two hexes, which keeps rounding
    consistent. ``distance(a, b) + 1`` evenly spaced points are sampled.
    Sampling happens relative to ``a`` so the nudge survives float
    precision far from the origin.

    Args:
        a: First hex of the line
        b: Last hex of the line
        nudge: Offset applied to both endpoints; must sum to zero

    Returns:
        Set of hexes making up the line, including both endpoints

    Example:
        >>> origin = CubeCoordinates(x=0, y=0, z=0)
        >>> sorted(c.as_tuple() for c in line(origin, CubeCoordinates(x=2, y=-2, z=0)))
        [(0, 0, 0), (1, -1, 0), (2, -2, 0)]
    """
    n = distance(a, b)
    start = _nudge(CubeCoordinates(x=0, y=0, z=0), nudge)
    end = _nudge(subtract(b, a), nudge)
    step = 1.0 / max(n, 1)
    return {add(a, lerp_cube(start, end, step * i)) for i in range(n + 1)}


# --- Rings ----------------------------------------------------------------------


def _check_radius(radius: int) -> None:
    if radius < 0:
        msg = f"Radius can't be less than zero, got {radius}"
        raise InvalidArgumentsError(msg)


def ring_walk(origin: CubeCoordinates, radius: int) -> Iterator[CubeCoordinates]:
    """
    Walk the ring of ``radius`` around ``origin`` in angular order.

    The walk starts at ``origin + direction(4) * radius`` and follows the
    six sides, ``radius`` steps each, so it yields ``6 * radius`` distinct
    hexes. Radius 0 yields only the origin.

    Raises:
        InvalidArgumentsError: If radius is negative
    """
    _check_radius(radius)
    if radius == 0:
        yield origin
        return

    h = add(origin, scale(direction(4), radius))
    for side in range(6):
        for _ in range(radius):
            yield h
            h = neighbor(h, side)


def ring(origin: CubeCoordinates, radius: int) -> set[CubeCoordinates]:
    """
    Find all hexes at exactly ``radius`` steps from ``origin``.

    Args:
        origin: Center of the ring
        radius: Ring radius

    Returns:
        Set of 6 * radius hexes ({origin} for radius 0)

    Raises:
        InvalidArgumentsError: If radius is negative
    """
    return set(ring_walk(origin, radius))


def filled_ring(origin: CubeCoordinates, radius: int) -> set[CubeCoordinates]:
    """
    Find all hexes within ``radius`` of ``origin`` (inclusive).

    The number of hexes follows the formula: 1 + 3 * radius * (radius + 1)

    Args:
        origin: Center hex
        radius: Maximum distance

    Returns:
        Set of hexes within range, origin included

    Raises:
        InvalidArgumentsError: If radius is negative

    Example:
        >>> len(filled_ring(CubeCoordinates(x=0, y=0, z=0), 1))
        7
    """
    _check_radius(radius)
    results = {origin}
    for step in range(1, radius + 1):
        results |= ring(origin, step)
    return results
