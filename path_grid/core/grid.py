"""Fixed-size grid of traversable cells."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple


Coord = Tuple[int, int]


class OutOfBoundsError(ValueError):
    """Raised when a coordinate lies outside the grid."""

    def __init__(self, coord: Coord, size: Tuple[int, int]) -> None:
        super().__init__(f"Coordinate {coord} outside grid of size {size[0]}x{size[1]}")
        self.coord = coord
        self.size = size


@dataclass
class Cell:
    """State held for a single grid position."""

    cost: int = 1
    is_wall: bool = False
    predecessor: Optional[Coord] = None


class Grid:
    """Row-major container of :class:`Cell` objects.

    Cells are addressed by ``(column, row)`` and stored in a flat list at
    ``row * width + column``.
    """

    def __init__(self, width: int, height: int, cell_cost: int = 1) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        if cell_cost <= 0:
            raise ValueError(f"Cell cost must be positive, got {cell_cost}")
        self.width = width
        self.height = height
        self.default_cost = cell_cost
        self._cells: List[Cell] = []
        self.initialize()

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize(self) -> None:
        """Reset every cell to default cost, no wall and no predecessor."""

        self._cells = [
            Cell(cost=self.default_cost) for _ in range(self.width * self.height)
        ]

    def reset_predecessors(self) -> None:
        for cell in self._cells:
            cell.predecessor = None

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    def in_bounds(self, coord: Coord) -> bool:
        column, row = coord
        return 0 <= column < self.width and 0 <= row < self.height

    def require_in_bounds(self, coord: Coord) -> None:
        """Raise :class:`OutOfBoundsError` unless ``coord`` is on the grid."""

        if not self.in_bounds(coord):
            raise OutOfBoundsError(coord, self.size)

    def cell(self, coord: Coord) -> Cell:
        self.require_in_bounds(coord)
        column, row = coord
        return self._cells[row * self.width + column]

    def is_wall(self, coord: Coord) -> bool:
        return self.cell(coord).is_wall

    def cost(self, coord: Coord) -> int:
        return self.cell(coord).cost

    def coords(self) -> Iterator[Coord]:
        """Yield every coordinate in row-major order."""

        for row in range(self.height):
            for column in range(self.width):
                yield column, row

    def neighbors(self, coord: Coord) -> Iterator[Coord]:
        """Yield in-bounds, non-wall cardinal neighbours of ``coord``."""

        column, row = coord
        for dc, dr in ((0, 1), (0, -1), (1, 0), (-1, 0)):
            nxt = (column + dc, row + dr)
            if self.in_bounds(nxt) and not self.cell(nxt).is_wall:
                yield nxt

    def walls(self) -> List[Coord]:
        return [c for c in self.coords() if self.cell(c).is_wall]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def toggle_wall(self, coord: Coord) -> bool:
        """Flip the wall flag at ``coord`` and return the new value."""

        cell = self.cell(coord)
        cell.is_wall = not cell.is_wall
        return cell.is_wall

    def set_wall(self, coord: Coord, is_wall: bool = True) -> None:
        self.cell(coord).is_wall = is_wall

    def clear_walls(self) -> None:
        for cell in self._cells:
            cell.is_wall = False

    def set_cost(self, coord: Coord, cost: int) -> None:
        if cost <= 0:
            raise ValueError(f"Cell cost must be positive, got {cost}")
        self.cell(coord).cost = cost


__all__ = ["Cell", "Coord", "Grid", "OutOfBoundsError"]
