"""Built-in wall layouts."""

from __future__ import annotations

import logging
from typing import Any, Dict, Type

from ..utils.noise import threshold_mask, white_noise
from .base_scenario import BaseScenario

logger = logging.getLogger(__name__)


class ClearScenario(BaseScenario):
    """Remove every wall."""

    def get_name(self) -> str:
        return "clear"

    def setup(self, session: Any) -> None:
        session.grid.clear_walls()
        session.invalidate()
        logger.info("Cleared all walls")


class RandomWallsScenario(BaseScenario):
    """Scatter walls with probability ``density``, leaving the endpoints open."""

    def __init__(self, density: float = 0.3, seed: int | None = None) -> None:
        if not 0.0 <= density <= 1.0:
            raise ValueError(f"density must be within [0, 1], got {density}")
        self.density = density
        self.seed = seed

    def get_name(self) -> str:
        return "random"

    def setup(self, session: Any) -> None:
        grid = session.grid
        grid.clear_walls()
        mask = threshold_mask(white_noise(grid.width, grid.height, seed=self.seed), self.density)
        for row, flags in enumerate(mask):
            for column, is_wall in enumerate(flags):
                if is_wall and (column, row) not in (session.source, session.target):
                    grid.set_wall((column, row))
        session.invalidate()
        logger.info(
            "Random walls (density %.2f, seed %s): %d walls",
            self.density,
            self.seed,
            len(grid.walls()),
        )


SCENARIOS: Dict[str, Type[BaseScenario]] = {
    "clear": ClearScenario,
    "random": RandomWallsScenario,
}


def get_scenario(name: str, seed: int | None = None) -> BaseScenario:
    """Return the scenario registered as ``name``."""

    key = name.lower()
    if key not in SCENARIOS:
        raise ValueError(f"Unknown scenario: {name}")
    if key == "random":
        return RandomWallsScenario(seed=seed)
    return SCENARIOS[key]()


__all__ = ["ClearScenario", "RandomWallsScenario", "SCENARIOS", "get_scenario"]
