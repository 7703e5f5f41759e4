"""Grid algorithms for hexgrid.

Pure functions over coordinates and a read-only grid:

* Flood fill reachability (see :mod:`search`).
* Shadowcasting field of view (see :mod:`visibility`).
* A* pathfinding (see :mod:`pathfinding`).
* Rule configuration objects (see :mod:`rules_config`).

Each call owns its working state (fringes, shadows, frontier), so calls
never share anything but the immutable direction tables.
"""

from . import pathfinding, rules_config, search, visibility

__all__ = [
    "pathfinding",
    "rules_config",
    "search",
    "visibility",
]
