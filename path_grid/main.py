"""Session bootstrap and the interactive control loop."""

from __future__ import annotations

from pathlib import Path
import logging
import time

import pygame

from .config import CONFIG, Config, load_config
from .core.grid import Grid
from .pathfinding.engine import DijkstraEngine
from .pathfinding.session import PathfindingSession
from .persistence.event_log import TraceLog
from .gui.renderer import Renderer, window_size
from .gui import input as gui_input
from .utils.cli.command_parser import poll_command, start_cli_thread, stop_cli_thread
from .utils.cli.commands import execute
from .utils.cli.terminal_view import get_view

logger = logging.getLogger(__name__)


def configure_logging(cfg: Config = CONFIG) -> None:
    numeric_level = getattr(logging, cfg.logging.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Apply per-module levels if defined
    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def resolve_config_path(config_path: str | Path) -> Path:
    actual_config_path = Path(config_path)
    if not actual_config_path.is_file():
        project_root_config = Path(__file__).resolve().parents[1] / "config.yaml"
        if project_root_config.is_file(): actual_config_path = project_root_config
    return actual_config_path


def bootstrap(config_path: str | Path = Path("config.yaml")) -> PathfindingSession:
    return session_from_config(load_config(resolve_config_path(config_path)))


def session_from_config(cfg: Config) -> PathfindingSession:
    g = cfg.grid
    grid = Grid(g.width, g.height, cell_cost=g.cell_cost)
    session = PathfindingSession(
        grid,
        source=g.source,
        target=g.resolved_target(),
        engine=DijkstraEngine(g.frontier),
        trace=TraceLog(cfg.trace.path, cfg.trace.log_retention_mb) if cfg.trace.path else None,
    )
    logger.info(
        "[Bootstrap] Grid %dx%d, start %s, end %s, %s frontier",
        g.width, g.height, session.source, session.target, g.frontier,
    )
    if cfg.trace.path:
        logger.info("[Bootstrap] Writing search trace to %s", cfg.trace.path)
    return session


def run_commands(session: PathfindingSession, state: dict) -> None:
    """Drain queued CLI commands into ``session``."""
    cmd = poll_command()
    while cmd is not None:
        execute(cmd.name, cmd.args, session, state)
        if not state["running"]:
            return
        cmd = poll_command()


def main(config_path: str | Path = Path("config.yaml")) -> None:
    cfg = load_config(resolve_config_path(config_path))
    configure_logging(cfg)
    session = session_from_config(cfg)

    renderer: Renderer | None = None
    if cfg.gui.enabled:
        pygame.init()
        renderer = Renderer(cfg.gui.cell_size, grid_size=session.grid.size)
        logger.info("[Main] Window opened at %sx%s", *window_size(session.grid.size, cfg.gui.cell_size))

    cli_input_thread = start_cli_thread()
    view = get_view()
    state = {"running": True}
    clock = pygame.time.Clock() if renderer else None

    logger.info("Application started. CLI is active. Type /help for commands.")

    try:
        while state["running"]:
            if renderer is not None:
                gui_input.handle_events(session, renderer, state)
            if not state["running"]: break

            run_commands(session, state)
            if not state["running"]: break

            # One recompute per frame regardless of how many events arrived.
            if session.recompute_if_needed():
                if view.enabled:
                    view.render(session)

            if renderer is not None and clock is not None:
                renderer.update(session)
                renderer.window.refresh()
                clock.tick(cfg.gui.fps)
            else:
                time.sleep(1.0 / cfg.gui.fps)

    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")
    finally:
        logger.info("Application shutting down...")
        stop_cli_thread()
        if cli_input_thread and cli_input_thread.is_alive():
            cli_input_thread.join(timeout=0.1)
        if pygame.get_init():
            pygame.quit()


if __name__ == "__main__":
    main()
