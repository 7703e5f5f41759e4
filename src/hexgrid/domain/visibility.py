"""Field of view for hexgrid.

Shadowcasting over rings: every hex on the ring of distance ``step`` owns an
equal angular slice of the circle around the viewer. Opaque hexes cast their
slice as a shadow onto all further rings, and overlapping shadows are merged
so the shadow set always holds disjoint arcs.
"""

import logging
from dataclasses import dataclass

from hexgrid.domain.rules_config import DEFAULT_RULES, RulesConfig
from hexgrid.interfaces.grid import IHexGrid
from hexgrid.models.coordinates import CubeCoordinates, InvalidArgumentsError
from hexgrid.utils.hex_math import ring_walk

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Shadow:
    """An occluded arc of the viewing circle, in degrees."""

    min_angle: float
    max_angle: float

    def overlaps(self, other: "Shadow") -> bool:
        return self.min_angle <= other.max_angle and other.min_angle <= self.max_angle


def normalize_angle(angle: float, full_circle: float = 360.0) -> float:
    """Map an angle into [0, full_circle), cycling in both directions."""
    return angle % full_circle


def is_shaded(
    shadows: set[Shadow],
    min_angle: float,
    center_angle: float,
    max_angle: float,
    include_partially_visible: bool,
    full_circle: float = 360.0,
) -> bool:
    """Whether a hex slice is hidden by any shadow.

    In partial mode the whole slice has to fall inside one shadow; otherwise
    only the slice center is tested.
    """
    for shadow in shadows:
        if include_partially_visible:
            if (
                normalize_angle(min_angle, full_circle) >= shadow.min_angle
                and normalize_angle(max_angle, full_circle) <= shadow.max_angle
            ):
                return True
        else:
            center = normalize_angle(center_angle, full_circle)
            if shadow.min_angle <= center <= shadow.max_angle:
                return True
    return False


def cast_shadow(
    shadows: set[Shadow], min_angle: float, max_angle: float, full_circle: float = 360.0
) -> None:
    """Add the arc [min_angle, max_angle] to ``shadows``, merging overlaps.

    A slice starting below 0 degrees is split at the wraparound into
    ``[full_circle + min_angle, full_circle]`` and ``[0, max_angle]``.
    """
    if min_angle < 0:
        new_shadows = [
            Shadow(full_circle + min_angle, full_circle),
            Shadow(0.0, max_angle),
        ]
    else:
        new_shadows = [Shadow(min_angle, max_angle)]

    for new_shadow in new_shadows:
        low, high = new_shadow.min_angle, new_shadow.max_angle
        for shadow in list(shadows):
            if Shadow(low, high).overlaps(shadow):
                low = min(low, shadow.min_angle)
                high = max(high, shadow.max_angle)
                shadows.discard(shadow)
        shadows.add(Shadow(low, high))


def calculate_field_of_view(
    origin: CubeCoordinates,
    radius: int,
    grid: IHexGrid,
    include_partially_visible: bool | None = None,
    rules: RulesConfig = DEFAULT_RULES,
) -> set[CubeCoordinates]:
    """Find the hexes visible from ``origin`` within ``radius``.

    Args:
        origin: Viewer position (always visible)
        radius: Maximum sight distance
        grid: Grid providing opaque cells and bounds
        include_partially_visible: Include hexes that are at least partly
            visible. Defaults to the rules setting (False), which requires
            the center of a hex to be visible.
        rules: Algorithm constants

    Returns:
        Set of visible coordinates inside the grid

    Raises:
        InvalidArgumentsError: If radius is negative
    """
    if radius < 0:
        msg = f"Radius can't be less than zero, got {radius}"
        raise InvalidArgumentsError(msg)
    if include_partially_visible is None:
        include_partially_visible = rules.visibility.include_partially_visible

    full_circle = rules.visibility.full_circle
    opaque = grid.opaque_cells_coordinates()
    shadows: set[Shadow] = set()
    results: set[CubeCoordinates] = {origin}

    for step in range(1, radius + 1):
        angle_size = full_circle / (6 * step)
        for hex_index, h in enumerate(ring_walk(origin, step), start=1):
            center_angle = (hex_index - 1) * angle_size
            min_angle = center_angle - angle_size / 2
            max_angle = min_angle + angle_size

            shaded = is_shaded(
                shadows, min_angle, center_angle, max_angle, include_partially_visible, full_circle
            )
            if not shaded and grid.is_valid_coordinates(h):
                results.add(h)
            if h in opaque:
                cast_shadow(shadows, min_angle, max_angle, full_circle)

    logger.debug(
        "Field of view from %s (radius %d): %d visible, %d shadow arcs",
        origin,
        radius,
        len(results),
        len(shadows),
    )
    return results
