"""Walk predecessor links back from the target."""

from __future__ import annotations

from typing import List

from ..core.grid import Coord, Grid


def reconstruct_path(grid: Grid, source: Coord, target: Coord) -> List[Coord]:
    """Return the cells from ``target`` back to ``source``.

    An empty list means there is no path: either ``target`` was never
    reached or the chain ends somewhere other than ``source``.
    """

    if target == source:
        return [target]

    path: List[Coord] = []
    current = target
    while True:
        path.append(current)
        previous = grid.cell(current).predecessor
        if previous is None:
            break
        current = previous

    if path[-1] != source:
        return []
    return path


__all__ = ["reconstruct_path"]
