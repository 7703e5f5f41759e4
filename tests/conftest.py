"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`hexgrid` package without requiring an editable install in CI.
"""

import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from hexgrid.models.coordinates import CubeCoordinates  # noqa: E402
from hexgrid.models.grid import hexagon_grid  # noqa: E402


@pytest.fixture
def origin() -> CubeCoordinates:
    return CubeCoordinates(x=0, y=0, z=0)


@pytest.fixture
def open_grid():
    """Hexagon of radius 5 without obstacles."""
    return hexagon_grid(5)
