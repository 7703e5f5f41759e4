"""A* shortest path search over a hex grid.

Search nodes live in an arena (a plain list) owned by a single search run.
Each node stores the index of its parent, so reconstructing the path is a
walk over indices back to the root node.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from heapq import heappop, heappush

from hexgrid.domain.rules_config import DEFAULT_RULES, RulesConfig
from hexgrid.interfaces.grid import IHexGrid
from hexgrid.models.coordinates import CubeCoordinates
from hexgrid.utils.hex_math import distance

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchNode:
    """A visited position together with how it was reached.

    Attributes:
        coordinates: Position of the node
        parent: Arena index of the previous node, None for the root
        cost_score: Movement cost from the start
        heuristic_score: Estimated remaining cost to the goal
    """

    coordinates: CubeCoordinates
    parent: int | None
    cost_score: float
    heuristic_score: float

    @property
    def total_score(self) -> float:
        return self.cost_score + self.heuristic_score


class Frontier:
    """Priority queue of arena indices ordered by ascending total score.

    Equal scores come out in insertion order.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, int]] = []
        self._counter = 0

    def push(self, handle: int, total_score: float) -> None:
        heappush(self._heap, (total_score, self._counter, handle))
        self._counter += 1

    def pop(self) -> int:
        """Remove and return the handle with the lowest score.

        Raises:
            IndexError: If the frontier is empty
        """
        _, _, handle = heappop(self._heap)
        return handle

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


def backtrack(nodes: Sequence[SearchNode], handle: int) -> list[CubeCoordinates]:
    """Rebuild the path ending at ``nodes[handle]``, root first."""
    path: list[CubeCoordinates] = []
    current: int | None = handle
    while current is not None:
        node = nodes[current]
        path.append(node.coordinates)
        current = node.parent
    path.reverse()
    return path


def a_star_path(
    start: CubeCoordinates,
    goal: CubeCoordinates,
    grid: IHexGrid,
    rules: RulesConfig = DEFAULT_RULES,
) -> list[CubeCoordinates] | None:
    """Find the cheapest path between two hexes using A*.

    Every step costs ``rules.pathfinding.step_cost`` plus the movement cost of
    the entered cell. Hex distance is used as the heuristic; it never
    overestimates, so the first time the goal leaves the frontier its path is
    optimal.

    Args:
        start: Starting hex
        goal: Destination hex
        grid: Grid providing neighbors, blocked cells and costs
        rules: Algorithm constants

    Returns:
        Consecutive coordinates from start to goal (both included), or None
        if no path exists
    """
    step_cost = rules.pathfinding.step_cost
    blocked = grid.blocked_cells_coordinates()

    nodes: list[SearchNode] = [SearchNode(start, None, 0.0, 0.0)]
    frontier = Frontier()
    frontier.push(0, nodes[0].total_score)
    explored: dict[CubeCoordinates, float] = {start: 0.0}
    expanded = 0

    while frontier:
        handle = frontier.pop()
        current = nodes[handle]
        expanded += 1

        if current.coordinates == goal:
            path = backtrack(nodes, handle)
            logger.debug(
                "A* %s -> %s: %d hexes, %d expansions", start, goal, len(path), expanded
            )
            return path

        for next_coords in grid.neighbors_coordinates(current.coordinates) - blocked:
            new_cost = current.cost_score + grid.cost_at(next_coords) + step_cost
            known_cost = explored.get(next_coords)
            if known_cost is not None and new_cost > known_cost:
                continue
            explored[next_coords] = new_cost
            nodes.append(
                SearchNode(
                    coordinates=next_coords,
                    parent=handle,
                    cost_score=new_cost,
                    heuristic_score=float(distance(next_coords, goal)),
                )
            )
            frontier.push(len(nodes) - 1, nodes[-1].total_score)

    logger.info("A* found no path from %s to %s after %d expansions", start, goal, expanded)
    return None


def path_cost(
    path: Sequence[CubeCoordinates], grid: IHexGrid, rules: RulesConfig = DEFAULT_RULES
) -> float:
    """Total movement cost of walking ``path`` with the A* cost formula.

    The first hex is where the walk starts and costs nothing.
    """
    step_cost = rules.pathfinding.step_cost
    return sum(grid.cost_at(coords) + step_cost for coords in path[1:])
