"""Translate ``pygame`` events into session events and hot-key commands."""

from __future__ import annotations

import logging
from typing import Any, Dict

import pygame

from ..scenarios.layouts import ClearScenario, RandomWallsScenario

logger = logging.getLogger(__name__)


def handle_events(session: Any, renderer: Any, state: Dict[str, Any]) -> None:
    """Process pending ``pygame`` events.

    Grid changes are applied to ``session`` which marks itself dirty; the
    caller recomputes once after the whole batch.
    """

    for ev in pygame.event.get():
        if ev.type == pygame.QUIT:
            state["running"] = False
            return

        if ev.type == pygame.MOUSEBUTTONDOWN:
            cell = renderer.screen_to_cell(ev.pos)
            if not session.grid.in_bounds(cell):
                continue
            logger.debug("Mouse button %s at %s -> cell %s", ev.button, ev.pos, cell)
            if ev.button == 1:  # Left click
                session.toggle_wall_at(cell)
            elif ev.button == 3:  # Right click
                if pygame.key.get_mods() & pygame.KMOD_SHIFT:
                    session.set_target_at(cell)
                else:
                    session.set_source_at(cell)

        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_r:
                RandomWallsScenario().setup(session)
            elif ev.key == pygame.K_c:
                ClearScenario().setup(session)
            elif ev.key == pygame.K_ESCAPE:
                state["running"] = False
                return


__all__ = ["handle_events"]
