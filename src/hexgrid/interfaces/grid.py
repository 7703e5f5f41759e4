"""Grid Protocol Interface.

This module defines the protocol (interface) the search, visibility and
pathfinding algorithms expect from a grid. The algorithms only query the
grid and never mutate it.
"""

from typing import Protocol

from hexgrid.models.coordinates import CubeCoordinates


class IHexGrid(Protocol):
    """Protocol defining the read-only queries made against a hex grid.

    ``hexgrid.models.grid.HexGrid`` is the bundled implementation; host
    applications may pass any object with these methods.
    """

    def is_valid_coordinates(self, coordinates: CubeCoordinates) -> bool:
        """Whether the coordinates lie within the grid."""
        ...

    def blocked_cells_coordinates(self) -> set[CubeCoordinates]:
        """Coordinates of every cell that cannot be entered."""
        ...

    def opaque_cells_coordinates(self) -> set[CubeCoordinates]:
        """Coordinates of every cell that blocks line of sight."""
        ...

    def neighbors_coordinates(self, coordinates: CubeCoordinates) -> set[CubeCoordinates]:
        """Adjacent coordinates that lie within the grid.

        Args:
            coordinates: The center hex

        Returns:
            At most six valid neighbors
        """
        ...

    def cost_at(self, coordinates: CubeCoordinates) -> float:
        """Movement cost for entering the cell, 0 when absent."""
        ...
