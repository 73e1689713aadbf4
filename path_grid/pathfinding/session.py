"""Grid, endpoints and cached path kept in sync with user input."""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional

from ..core.events import GridEvent, SourceMoved, TargetMoved, WallToggled
from ..core.grid import Coord, Grid, OutOfBoundsError
from ..persistence.event_log import TraceSink
from .engine import DijkstraEngine, SearchResult
from .reconstruct import reconstruct_path

logger = logging.getLogger(__name__)


class PathfindingSession:
    """Owns the grid and recomputes the path once per batch of changes.

    Mutations only mark the session dirty; :meth:`recompute_if_needed`
    runs the engine at most once no matter how many events arrived.
    """

    def __init__(
        self,
        grid: Grid,
        source: Coord = (0, 0),
        target: Optional[Coord] = None,
        engine: DijkstraEngine | None = None,
        trace: TraceSink | None = None,
    ) -> None:
        if target is None:
            target = (grid.width - 1, grid.height - 1)
        grid.require_in_bounds(source)
        grid.require_in_bounds(target)
        self.grid = grid
        self.source: Coord = source
        self.target: Coord = target
        self.engine = engine if engine is not None else DijkstraEngine()
        self.trace = trace
        self.dirty = True
        self.runs = 0
        self._result: SearchResult | None = None
        self._path: List[Coord] = []

    # ------------------------------------------------------------------
    # Input events
    # ------------------------------------------------------------------
    def toggle_wall_at(self, cell: Coord) -> bool:
        return self.handle(WallToggled(cell))

    def set_source_at(self, cell: Coord) -> bool:
        return self.handle(SourceMoved(cell))

    def set_target_at(self, cell: Coord) -> bool:
        return self.handle(TargetMoved(cell))

    def handle(self, event: GridEvent) -> bool:
        """Apply ``event``; return ``False`` if it was rejected."""

        try:
            if isinstance(event, WallToggled):
                self.grid.toggle_wall(event.cell)
            elif isinstance(event, SourceMoved):
                self.grid.require_in_bounds(event.cell)
                self.source = event.cell
            elif isinstance(event, TargetMoved):
                self.grid.require_in_bounds(event.cell)
                self.target = event.cell
            else:
                raise TypeError(f"Unsupported event: {event!r}")
        except OutOfBoundsError as exc:
            logger.warning("Rejected %s: %s", type(event).__name__, exc)
            return False
        self.dirty = True
        return True

    def handle_all(self, events: Iterable[GridEvent]) -> int:
        """Apply ``events`` in order and return how many were accepted."""

        return sum(1 for ev in events if self.handle(ev))

    def invalidate(self) -> None:
        """Force a recompute, e.g. after mutating :attr:`grid` directly."""

        self.dirty = True

    def set_engine(self, engine: DijkstraEngine) -> None:
        self.engine = engine
        self.dirty = True

    # ------------------------------------------------------------------
    # Recompute
    # ------------------------------------------------------------------
    def recompute(self) -> SearchResult:
        """Run the engine now.

        A list trace sink is emptied first so it only holds the latest run.
        """

        if isinstance(self.trace, list):
            self.trace.clear()
        result = self.engine.run(self.grid, self.source, self.target, trace=self.trace)
        self._result = result
        self._path = (
            reconstruct_path(self.grid, self.source, self.target) if result.found else []
        )
        self.dirty = False
        self.runs += 1
        return result

    def recompute_if_needed(self) -> bool:
        """Run the engine if anything changed; return whether it ran."""

        if not self.dirty:
            return False
        self.recompute()
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def result(self) -> SearchResult:
        self.recompute_if_needed()
        assert self._result is not None
        return self._result

    def is_wall(self, cell: Coord) -> bool:
        return self.grid.in_bounds(cell) and self.grid.is_wall(cell)

    def current_path(self) -> List[Coord]:
        """Path from target back to source, empty when unreachable."""

        self.recompute_if_needed()
        return list(self._path)

    def is_reachable(self) -> bool:
        return bool(self.current_path())

    def visited_cells(self) -> List[Coord]:
        """Cells finalized by the last run, in the order they were settled."""

        return list(self.result.visited_order)

    def distance_to_target(self) -> float:
        return self.result.target_distance if self.is_reachable() else math.inf


__all__ = ["PathfindingSession"]
