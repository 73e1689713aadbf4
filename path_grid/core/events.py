"""Input events consumed by :class:`~path_grid.pathfinding.session.PathfindingSession`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .grid import Coord


@dataclass(slots=True, frozen=True)
class WallToggled:
    """Flip the wall flag of ``cell``."""

    cell: Coord


@dataclass(slots=True, frozen=True)
class SourceMoved:
    """Move the search origin to ``cell``."""

    cell: Coord


@dataclass(slots=True, frozen=True)
class TargetMoved:
    """Move the search destination to ``cell``."""

    cell: Coord


GridEvent = Union[WallToggled, SourceMoved, TargetMoved]


__all__ = ["GridEvent", "SourceMoved", "TargetMoved", "WallToggled"]
