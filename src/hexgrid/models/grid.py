"""In-memory hex grid consumed by the search and visibility algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

from hexgrid.models.coordinates import CubeCoordinates, InvalidArgumentsError
from hexgrid.schemas.grid import CellSchema, GridSchema
from hexgrid.utils.hex_math import filled_ring, neighbors


@dataclass(frozen=True, slots=True)
class Cell:
    """A single hex of the grid.

    Attributes:
        coordinates: Position of the cell
        is_blocked: Whether movement into the cell is impossible
        is_opaque: Whether the cell blocks line of sight
        cost: Extra movement cost for entering the cell
    """

    coordinates: CubeCoordinates
    is_blocked: bool = False
    is_opaque: bool = False
    cost: float = 0.0


class HexGrid:
    """A finite set of cells addressed by cube coordinates.

    Coordinates without a cell are outside the grid.
    """

    def __init__(self, cells: Iterable[Cell] = ()) -> None:
        self._cells: dict[CubeCoordinates, Cell] = {}
        for cell in cells:
            if cell.coordinates in self._cells:
                msg = f"Duplicate cell at {cell.coordinates}"
                raise InvalidArgumentsError(msg)
            self._cells[cell.coordinates] = cell

    def __contains__(self, coordinates: object) -> bool:
        return coordinates in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells.values())

    def cell_at(self, coordinates: CubeCoordinates) -> Cell | None:
        """Return the cell at ``coordinates`` or None outside the grid."""
        return self._cells.get(coordinates)

    def is_valid_coordinates(self, coordinates: CubeCoordinates) -> bool:
        return coordinates in self._cells

    def blocked_cells_coordinates(self) -> set[CubeCoordinates]:
        return {c.coordinates for c in self._cells.values() if c.is_blocked}

    def opaque_cells_coordinates(self) -> set[CubeCoordinates]:
        return {c.coordinates for c in self._cells.values() if c.is_opaque}

    def neighbors_coordinates(self, coordinates: CubeCoordinates) -> set[CubeCoordinates]:
        """Neighbors of ``coordinates`` that lie within the grid."""
        return {n for n in neighbors(coordinates) if n in self._cells}

    def cost_at(self, coordinates: CubeCoordinates) -> float:
        """Movement cost of the cell, 0 when there is no cell."""
        cell = self._cells.get(coordinates)
        return cell.cost if cell is not None else 0.0

    # --- Mutation -------------------------------------------------------------

    def _update(self, coordinates: CubeCoordinates, **changes: object) -> None:
        cell = self._cells.get(coordinates)
        if cell is None:
            msg = f"No cell at {coordinates}"
            raise InvalidArgumentsError(msg)
        self._cells[coordinates] = replace(cell, **changes)

    def set_blocked(self, coordinates: CubeCoordinates, blocked: bool = True) -> None:
        self._update(coordinates, is_blocked=blocked)

    def set_opaque(self, coordinates: CubeCoordinates, opaque: bool = True) -> None:
        self._update(coordinates, is_opaque=opaque)

    def set_cost(self, coordinates: CubeCoordinates, cost: float) -> None:
        if cost < 0:
            msg = f"Cost must be non-negative, got {cost}"
            raise InvalidArgumentsError(msg)
        self._update(coordinates, cost=cost)

    # --- Schema conversion ----------------------------------------------------

    @classmethod
    def from_schema(cls, schema: GridSchema) -> HexGrid:
        """Build a grid from a validated payload."""
        return cls(
            Cell(
                coordinates=CubeCoordinates(x=item.x, y=item.y, z=item.z),
                is_blocked=item.is_blocked,
                is_opaque=item.is_opaque,
                cost=item.cost,
            )
            for item in schema.cells
        )

    def to_schema(self) -> GridSchema:
        return GridSchema(
            cells=[
                CellSchema(
                    x=cell.coordinates.x,
                    y=cell.coordinates.y,
                    z=cell.coordinates.z,
                    is_blocked=cell.is_blocked,
                    is_opaque=cell.is_opaque,
                    cost=cell.cost,
                )
                for cell in self._cells.values()
            ]
        )


def hexagon_grid(radius: int, center: CubeCoordinates | None = None) -> HexGrid:
    """
    Build a hexagon-shaped grid of open cells.

    Args:
        radius: Distance from the center to the edge of the hexagon
        center: Center of the hexagon (defaults to the origin)

    Returns:
        A grid with 1 + 3 * radius * (radius + 1) cells

    Raises:
        InvalidArgumentsError: If radius is negative
    """
    if center is None:
        center = CubeCoordinates(x=0, y=0, z=0)
    return HexGrid(Cell(coordinates=coord) for coord in filled_ring(center, radius))
