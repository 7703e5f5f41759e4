"""Flood fill reachability over a hex grid.

Pure function answering "which hexes can be reached in at most N steps",
honoring blocked cells and the grid bounds.
"""

import logging

from hexgrid.interfaces.grid import IHexGrid
from hexgrid.models.coordinates import CubeCoordinates, InvalidArgumentsError
from hexgrid.utils.hex_math import neighbor

logger = logging.getLogger(__name__)


def breadth_first_search(
    origin: CubeCoordinates, steps: int, grid: IHexGrid
) -> set[CubeCoordinates]:
    """Find every hex reachable from ``origin`` within ``steps`` moves.

    The search expands one fringe per step. A neighbor joins the next fringe
    when it is inside the grid, not blocked and not reached before, so hexes
    hidden behind obstacles need the longer way around.

    Args:
        origin: Start of the search (always part of the result)
        steps: Maximum number of single hex moves
        grid: Grid providing bounds and blocked cells

    Returns:
        Set of reachable coordinates, origin included

    Raises:
        InvalidArgumentsError: If steps is negative
    """
    if steps < 0:
        msg = f"Steps can't be less than zero, got {steps}"
        raise InvalidArgumentsError(msg)

    blocked = grid.blocked_cells_coordinates()
    results: set[CubeCoordinates] = {origin}
    fringes: list[set[CubeCoordinates]] = [{origin}]

    for k in range(1, steps + 1):
        fringes.append(set())
        for coord in fringes[k - 1]:
            for index in range(6):
                candidate = neighbor(coord, index)
                if (
                    candidate in blocked
                    or candidate in results
                    or not grid.is_valid_coordinates(candidate)
                ):
                    continue
                results.add(candidate)
                fringes[k].add(candidate)
        if not fringes[k]:
            break

    logger.debug("Flood from %s over %d steps reached %d hexes", origin, steps, len(results))
    return results
