"""Simple configuration loader for path_grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class GridConfig:
    """Configuration values for the grid section."""

    width: int = 20
    height: int = 15
    cell_cost: int = 1
    source: tuple[int, int] = (0, 0)
    target: Optional[tuple[int, int]] = None
    frontier: str = "heap"

    def resolved_target(self) -> tuple[int, int]:
        if self.target is None:
            return self.width - 1, self.height - 1
        return self.target


@dataclass
class GuiConfig:
    """Configuration for the pygame front end."""

    enabled: bool = True
    cell_size: int = 40
    fps: int = 60


@dataclass
class LoggingConfig:
    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class TraceConfig:
    path: Optional[str] = None
    log_retention_mb: int = 50


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    gui: GuiConfig
    logging: LoggingConfig
    trace: TraceConfig


def _pair(value: Any, name: str) -> Optional[tuple[int, int]]:
    if value is None:
        return None
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{name} must be a [column, row] pair, got {value!r}")
    return int(value[0]), int(value[1])


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid") or {}
    grid = GridConfig(
        width=int(grid_data.get("width", 20)),
        height=int(grid_data.get("height", 15)),
        cell_cost=int(grid_data.get("cell_cost", 1)),
        source=_pair(grid_data.get("source", [0, 0]), "grid.source"),
        target=_pair(grid_data.get("target"), "grid.target"),
        frontier=str(grid_data.get("frontier", "heap")).lower(),
    )

    gui_data = data.get("gui") or {}
    gui = GuiConfig(
        enabled=bool(gui_data.get("enabled", True)),
        cell_size=int(gui_data.get("cell_size", 40)),
        fps=int(gui_data.get("fps", 60)),
    )

    logging_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    trace_data = data.get("trace") or {}
    trace = TraceConfig(
        path=trace_data.get("path"),
        log_retention_mb=int(trace_data.get("log_retention_mb", 50)),
    )

    cfg = Config(grid=grid, gui=gui, logging=logging_cfg, trace=trace)
    _validate(cfg)
    return cfg


def _validate(cfg: Config) -> None:
    g = cfg.grid
    if g.width <= 0 or g.height <= 0:
        raise ValueError(f"grid dimensions must be positive, got {g.width}x{g.height}")
    if g.cell_cost <= 0:
        raise ValueError(f"grid.cell_cost must be positive, got {g.cell_cost}")
    if g.frontier not in ("heap", "linear"):
        raise ValueError(f"grid.frontier must be 'heap' or 'linear', got {g.frontier!r}")
    for name, (column, row) in (("source", g.source), ("target", g.resolved_target())):
        if not (0 <= column < g.width and 0 <= row < g.height):
            raise ValueError(f"grid.{name} {(column, row)} is outside the grid")
    if cfg.gui.cell_size <= 0:
        raise ValueError(f"gui.cell_size must be positive, got {cfg.gui.cell_size}")
    if cfg.gui.fps <= 0:
        raise ValueError(f"gui.fps must be positive, got {cfg.gui.fps}")
    if cfg.trace.log_retention_mb < 0:
        raise ValueError(f"trace.log_retention_mb must not be negative, got {cfg.trace.log_retention_mb}")


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "GridConfig",
    "GuiConfig",
    "LoggingConfig",
    "TraceConfig",
    "load_config",
]
