"""Renderer drawing a :class:`PathfindingSession` to a :class:`Window`."""

from __future__ import annotations

from typing import Any

from .window import Window

# Colours for grid cells
CELL_COLOR_MAP = {
    "open": (200, 200, 200),
    "wall": (0, 0, 0),
    "outline": (80, 80, 80),
    "path": (0, 121, 241),
    "visited": (173, 216, 230),
    "source": (0, 228, 48),
    "target": (230, 41, 55),
}
TEXT_COLOR = (0, 0, 0)
HELP_LINES = (
    "Left click to toggle walls",
    "Right click to move start (Shift+Right click for end)",
)
# Pixels reserved under the grid for the help text
STATUS_BAR_HEIGHT = 48


def window_size(grid_size: tuple[int, int], cell_size: int) -> tuple[int, int]:
    width, height = grid_size
    return width * cell_size, height * cell_size + STATUS_BAR_HEIGHT


class Renderer:
    """Draw cells, walls, endpoints and the current path."""

    def __init__(self, cell_size: int = 40, window: Window | None = None, grid_size: tuple[int, int] = (20, 15)) -> None:
        self.cell_size = cell_size
        self.window = window if window is not None else Window(window_size(grid_size, cell_size))

    def cell_rect(self, cell: tuple[int, int]) -> tuple[int, int, int, int]:
        column, row = cell
        s = self.cell_size
        return column * s, row * s, s, s

    def screen_to_cell(self, screen_pos: tuple[int, int]) -> tuple[int, int]:
        """Convert a pixel position to the ``(column, row)`` underneath it."""
        x, y = screen_pos
        return x // self.cell_size, y // self.cell_size

    def update(self, session: Any) -> None:
        grid = session.grid
        self.window.clear()

        for cell in grid.coords():
            rect = self.cell_rect(cell)
            colour = CELL_COLOR_MAP["wall"] if grid.is_wall(cell) else CELL_COLOR_MAP["open"]
            self.window.draw_rect(colour, rect)
            self.window.draw_rect(CELL_COLOR_MAP["outline"], rect, 1)

        path = session.current_path()
        on_path = set(path)
        for cell in session.visited_cells():
            if cell not in on_path and cell not in (session.source, session.target):
                self.window.draw_rect(CELL_COLOR_MAP["visited"], self.cell_rect(cell))

        self.window.draw_rect(CELL_COLOR_MAP["source"], self.cell_rect(session.source))
        self.window.draw_rect(CELL_COLOR_MAP["target"], self.cell_rect(session.target))

        for cell in path:
            if cell != session.source:
                self.window.draw_rect(CELL_COLOR_MAP["path"], self.cell_rect(cell))

        base_y = grid.height * self.cell_size
        for i, line in enumerate(HELP_LINES):
            self.window.draw_text(line, 10, base_y + 4 + i * 20, TEXT_COLOR)

        if path:
            status = f"Path: {len(path) - 1} steps, cost {session.distance_to_target():g}"
        else:
            status = "No path"
        self.window.draw_text(status, self.window.size[0] - 220, base_y + 4, TEXT_COLOR)


__all__ = ["Renderer", "window_size", "CELL_COLOR_MAP", "STATUS_BAR_HEIGHT"]
