"""Protocol-based interfaces for hexgrid collaborators.

Any object satisfying these protocols can be passed to the algorithms,
which keeps host applications free to store their maps however they like.
"""

from hexgrid.interfaces.grid import IHexGrid

__all__ = [
    "IHexGrid",
]
