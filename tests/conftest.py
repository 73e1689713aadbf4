# tests/conftest.py
import os

import pytest

# pygame must never try to open a real display during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from path_grid.core.grid import Grid
from path_grid.pathfinding.session import PathfindingSession


@pytest.fixture
def grid() -> Grid:
    return Grid(5, 4)


@pytest.fixture
def session(grid: Grid) -> PathfindingSession:
    return PathfindingSession(grid, source=(0, 0), target=(4, 3))
