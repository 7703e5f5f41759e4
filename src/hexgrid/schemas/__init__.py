from .grid import CellSchema, GridSchema

__all__ = [
    "CellSchema",
    "GridSchema",
]
