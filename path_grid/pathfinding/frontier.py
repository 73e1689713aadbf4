"""Priority structures holding cells awaiting finalization."""

from __future__ import annotations

from abc import ABC, abstractmethod
from heapq import heappop, heappush
from typing import Dict, List, Optional, Tuple

from ..core.grid import Coord, Grid


Entry = Tuple[Coord, int]


class Frontier(ABC):
    """Min-priority collection of ``(cell, tentative distance)`` entries."""

    @abstractmethod
    def insert(self, coord: Coord, priority: int) -> None:
        """Add ``coord`` with ``priority``."""
        raise NotImplementedError

    @abstractmethod
    def extract_min(self) -> Optional[Entry]:
        """Remove and return the smallest entry, or ``None`` when empty."""
        raise NotImplementedError

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError


class BinaryHeapFrontier(Frontier):
    """``heapq`` backed frontier.

    Superseded entries are left in place; callers discard an extracted cell
    that has already been finalized.
    """

    def __init__(self, grid: Grid | None = None) -> None:
        # (priority, insertion counter, coord)
        self._heap: List[Tuple[int, int, Coord]] = []
        self._counter = 0

    def insert(self, coord: Coord, priority: int) -> None:
        heappush(self._heap, (priority, self._counter, coord))
        self._counter += 1

    def extract_min(self) -> Optional[Entry]:
        if not self._heap:
            return None
        priority, _, coord = heappop(self._heap)
        return coord, priority

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)


class LinearScanFrontier(Frontier):
    """Distance-table frontier selecting the minimum by sweeping the grid.

    Inserting only updates the table. Extraction walks every cell in
    row-major order, skipping walls, so it costs ``O(width * height)``.
    """

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self._pending: Dict[Coord, int] = {}

    def insert(self, coord: Coord, priority: int) -> None:
        current = self._pending.get(coord)
        if current is None or priority < current:
            self._pending[coord] = priority

    def extract_min(self) -> Optional[Entry]:
        best: Optional[Entry] = None
        for coord in self._grid.coords():
            priority = self._pending.get(coord)
            if priority is None or self._grid.is_wall(coord):
                continue
            if best is None or priority < best[1]:
                best = (coord, priority)
        if best is not None:
            del self._pending[best[0]]
        return best

    def is_empty(self) -> bool:
        return not any(not self._grid.is_wall(c) for c in self._pending)

    def __len__(self) -> int:
        return len(self._pending)


FRONTIERS = {
    "heap": BinaryHeapFrontier,
    "linear": LinearScanFrontier,
}


def make_frontier(name: str, grid: Grid) -> Frontier:
    """Return a new frontier of kind ``name`` bound to ``grid``."""

    try:
        cls = FRONTIERS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown frontier: {name!r} (expected one of {', '.join(sorted(FRONTIERS))})"
        ) from None
    return cls(grid)


__all__ = [
    "BinaryHeapFrontier",
    "Entry",
    "FRONTIERS",
    "Frontier",
    "LinearScanFrontier",
    "make_frontier",
]
