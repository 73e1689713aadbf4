"""Implementations of development CLI commands."""

from __future__ import annotations

from typing import Any, Dict, Sequence
import logging

from ...pathfinding.engine import DijkstraEngine
from ...scenarios.layouts import get_scenario
from .terminal_view import get_view

logger = logging.getLogger(__name__)


def _parse_cell(args: Sequence[str], usage: str) -> tuple[int, int] | None:
    if len(args) < 2:
        logger.info("Usage: %s", usage)
        return None
    try:
        return int(args[0]), int(args[1])
    except ValueError:
        logger.error("Invalid cell: %s", " ".join(args[:2]))
        return None


def wall(session: Any, args: Sequence[str]) -> None:
    cell = _parse_cell(args, "/wall <column> <row>")
    if cell is not None and session.toggle_wall_at(cell):
        logger.info("Wall at %s is now %s", cell, "on" if session.is_wall(cell) else "off")


def start(session: Any, args: Sequence[str]) -> None:
    cell = _parse_cell(args, "/start <column> <row>")
    if cell is not None and session.set_source_at(cell):
        logger.info("Start moved to %s", cell)


def end(session: Any, args: Sequence[str]) -> None:
    cell = _parse_cell(args, "/end <column> <row>")
    if cell is not None and session.set_target_at(cell):
        logger.info("End moved to %s", cell)


def path(session: Any) -> None:
    cells = session.current_path()
    if not cells:
        logger.info("No path from %s to %s", session.source, session.target)
        return
    ordered = list(reversed(cells))
    logger.info(
        "Path %s -> %s, cost %g: %s",
        session.source,
        session.target,
        session.distance_to_target(),
        " ".join(f"({c},{r})" for c, r in ordered),
    )


def frontier(session: Any, name: str | None) -> None:
    if name is None:
        logger.info("Current frontier: %s. Usage: /frontier heap|linear", session.engine.frontier_name)
        return
    try:
        engine = DijkstraEngine(name)
    except ValueError as e:
        logger.error("%s", e)
        return
    session.set_engine(engine)
    logger.info("Frontier switched to %s", engine.frontier_name)


def scenario(session: Any, name: str | None, seed_str: str | None = None) -> None:
    """Apply a wall layout by name."""

    if name is None:
        logger.info("Usage: /scenario <random|clear> [seed]")
        return
    try:
        seed = int(seed_str) if seed_str is not None else None
        get_scenario(name, seed=seed).setup(session)
    except ValueError as e:
        logger.error("%s", e)


def view(session: Any, state: Dict[str, Any]) -> None:
    tv = get_view()
    state["view"] = tv.toggle()
    if tv.enabled:
        tv.render(session)


def help_command(state: Dict[str, Any]) -> None:
    help_lines = [
        "\nAvailable commands:",
        "  /help                    - Show this help message.",
        "  /wall <col> <row>        - Toggle a wall.",
        "  /start <col> <row>       - Move the start cell.",
        "  /end <col> <row>         - Move the end cell.",
        "  /path                    - Print the current shortest path.",
        "  /frontier [heap|linear]  - Show or switch the priority structure.",
        "  /scenario <name> [seed]  - Apply a layout (random, clear).",
        "  /view                    - Toggle the terminal grid view.",
        "  /quit                    - Exit the application.\n",
    ]
    for line in help_lines:
        logger.info(line)


def execute(command: str, args: list[str], session: Any, state: Dict[str, Any]) -> None:
    if "running" not in state: state["running"] = True
    cmd_lower = command.lower()

    if cmd_lower == "help":
        help_command(state)
    elif cmd_lower == "wall":
        wall(session, args)
    elif cmd_lower == "start":
        start(session, args)
    elif cmd_lower == "end":
        end(session, args)
    elif cmd_lower == "path":
        path(session)
    elif cmd_lower == "frontier":
        frontier(session, args[0] if args else None)
    elif cmd_lower == "scenario":
        scenario(session, args[0] if args else None, args[1] if len(args) > 1 else None)
    elif cmd_lower == "view":
        view(session, state)
    elif cmd_lower == "quit":
        state["running"] = False
        logger.info("Quit command received. Shutting down...")
    else:
        logger.error("Unknown command: /%s. Type /help for available commands.", command)


__all__ = [
    "wall", "start", "end", "path", "frontier", "scenario", "view",
    "help_command", "execute",
]
