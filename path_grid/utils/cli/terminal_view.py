"""ASCII terminal renderer for the grid and current path."""

from __future__ import annotations

import sys
from typing import Any, TextIO


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "blue": "\x1b[34m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}


class TerminalView:
    """Minimal grid viewer using ANSI colours."""

    def __init__(self, colour: bool = True) -> None:
        self.enabled: bool = False
        self.colour = colour

    def toggle(self) -> bool:
        """Toggle rendering and return the new state."""

        self.enabled = not self.enabled
        return self.enabled

    def lines(self, session: Any) -> list[str]:
        """Return one string per grid row."""

        grid = session.grid
        on_path = set(session.current_path())
        visited = set(session.visited_cells())
        lines: list[str] = []
        for row in range(grid.height):
            chars: list[str] = []
            for column in range(grid.width):
                glyph, colour = _cell_glyph((column, row), session, on_path, visited)
                if self.colour:
                    chars.append(f"{_COLOURS[colour]}{glyph}")
                else:
                    chars.append(glyph)
            if self.colour:
                chars.append(_COLOURS["reset"])
            lines.append("".join(chars))
        return lines

    def render(self, session: Any, out: TextIO | None = None) -> None:
        """Draw the whole grid to ``out`` (``stdout`` by default)."""

        if not self.enabled:
            return
        out = out if out is not None else sys.stdout
        if self.colour:
            out.write("\x1b[H\x1b[2J")  # clear screen
        out.write("\n".join(self.lines(session)) + "\n")
        out.flush()


def _cell_glyph(
    cell: tuple[int, int],
    session: Any,
    on_path: set[tuple[int, int]],
    visited: set[tuple[int, int]],
) -> tuple[str, str]:
    if cell == session.source:
        return "S", "green"
    if cell == session.target:
        return "T", "red"
    if session.is_wall(cell):
        return "#", "black"
    if cell in on_path:
        return "*", "blue"
    if cell in visited:
        return "+", "cyan"
    return ".", "white"


_view = TerminalView()


def get_view() -> TerminalView:
    """Return the singleton :class:`TerminalView` instance."""

    return _view


__all__ = ["TerminalView", "get_view"]
