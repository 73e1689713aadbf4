"""Dijkstra relaxation over a :class:`~path_grid.core.grid.Grid`."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
import math
from typing import Callable, Dict, List, Set

from ..core.grid import Coord, Grid
from ..persistence.event_log import (
    CHECK,
    DEQUEUE,
    FOUND,
    SKIP,
    UPDATE,
    VISIT,
    TraceSink,
    Writer,
    open_trace,
)
from .frontier import FRONTIERS, Frontier, make_frontier

logger = logging.getLogger(__name__)


class EngineState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"


@dataclass
class SearchResult:
    """Run-scoped output of a single :meth:`DijkstraEngine.run`."""

    source: Coord
    target: Coord
    distances: Dict[Coord, float]
    finalized: Set[Coord] = field(default_factory=set)
    visited_order: List[Coord] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.target in self.finalized

    @property
    def target_distance(self) -> float:
        return self.distances[self.target] if self.found else math.inf


class DijkstraEngine:
    """Single-source shortest paths with a pluggable :class:`Frontier`.

    ``frontier`` is either a registered name (``"heap"`` or ``"linear"``) or
    a callable building a fresh frontier for the grid. A new frontier is
    created for every run.
    """

    def __init__(self, frontier: str | Callable[[Grid], Frontier] = "heap") -> None:
        if isinstance(frontier, str):
            name = frontier
            if name.lower() not in FRONTIERS:
                raise ValueError(f"Unknown frontier: {name!r}")
            self._factory: Callable[[Grid], Frontier] = lambda g: make_frontier(name, g)
            self.frontier_name = name.lower()
        else:
            self._factory = frontier
            self.frontier_name = getattr(frontier, "__name__", repr(frontier))
        self.state = EngineState.IDLE

    def run(
        self,
        grid: Grid,
        source: Coord,
        target: Coord,
        trace: TraceSink | None = None,
    ) -> SearchResult:
        """Compute shortest distances from ``source`` until ``target`` is final.

        Predecessors are written to the grid cells. ``trace`` receives one
        event per loop step when given.
        """

        grid.require_in_bounds(source)
        grid.require_in_bounds(target)

        self.state = EngineState.RUNNING
        try:
            with open_trace(trace) as write:
                result = self._search(grid, source, target, write)
        finally:
            self.state = EngineState.DONE

        logger.debug(
            "Dijkstra %s -> %s using %s frontier: %d finalized, %s",
            source,
            target,
            self.frontier_name,
            len(result.finalized),
            f"distance {result.target_distance}" if result.found else "unreachable",
        )
        return result

    def _search(
        self, grid: Grid, source: Coord, target: Coord, write: Writer | None
    ) -> SearchResult:
        step = 0

        def emit(event_type: str, coord: Coord, message: str) -> None:
            nonlocal step
            if write is None:
                return
            data = {"cell": list(coord), "distance": _jsonable(distances[coord]), "message": message}
            write(step, event_type, data)
            step += 1

        distances: Dict[Coord, float] = {c: math.inf for c in grid.coords()}
        grid.reset_predecessors()
        result = SearchResult(source, target, distances)

        frontier = self._factory(grid)
        distances[source] = 0
        frontier.insert(source, 0)

        while not frontier.is_empty():
            entry = frontier.extract_min()
            if entry is None:
                break
            u, priority = entry
            emit(DEQUEUE, u, f"Dequeue {u} with priority {priority}")

            if u in result.finalized or grid.is_wall(u):
                emit(SKIP, u, "Stale or blocked entry, skipping")
                continue

            result.finalized.add(u)
            result.visited_order.append(u)
            emit(VISIT, u, f"Finalize {u} at distance {distances[u]}")

            if u == target:
                emit(FOUND, u, f"Target found, total distance {distances[u]}")
                break

            for v in grid.neighbors(u):
                if v in result.finalized:
                    continue
                candidate = distances[u] + grid.cost(v)
                emit(CHECK, v, f"Check {v}: current {distances[v]}, candidate {candidate}")
                if candidate < distances[v]:
                    distances[v] = candidate
                    grid.cell(v).predecessor = u
                    frontier.insert(v, candidate)
                    emit(UPDATE, v, f"Update {v} to {candidate} and enqueue")

        return result


def _jsonable(value: float) -> float | None:
    return None if value == math.inf else value


__all__ = ["DijkstraEngine", "EngineState", "SearchResult"]
