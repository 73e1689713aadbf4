import io

from path_grid.core.grid import Grid
from path_grid.pathfinding.session import PathfindingSession
from path_grid.utils.cli import commands, terminal_view
from path_grid.utils.cli.terminal_view import TerminalView


def test_lines_show_walls_endpoints_and_path():
    s = PathfindingSession(Grid(3, 2), source=(0, 0), target=(2, 0))
    s.toggle_wall_at((1, 0))
    view = TerminalView(colour=False)
    assert view.lines(s) == [
        "S#T",
        "***",
    ]


def test_render_disabled_writes_nothing():
    s = PathfindingSession(Grid(2, 2))
    out = io.StringIO()
    TerminalView(colour=False).render(s, out)
    assert out.getvalue() == ""


def test_render_colour_clears_screen():
    s = PathfindingSession(Grid(2, 1))
    view = TerminalView()
    view.toggle()
    out = io.StringIO()
    view.render(s, out)
    text = out.getvalue()
    assert text.startswith("\x1b[H\x1b[2J")
    assert "S" in text and "T" in text


def test_view_command_toggles_and_renders(monkeypatch):
    s = PathfindingSession(Grid(3, 3))
    view = terminal_view.get_view()
    view.enabled = False
    calls = []
    monkeypatch.setattr(view, "render", lambda session: calls.append(session))

    state = {}
    commands.execute("view", [], s, state)
    assert state["view"] is True
    assert calls == [s]

    commands.execute("view", [], s, state)
    assert state["view"] is False
    assert calls == [s]


def test_lines_mark_explored_cells():
    s = PathfindingSession(Grid(4, 3), source=(0, 0), target=(2, 0))
    lines = TerminalView(colour=False).lines(s)
    explored = set(s.visited_cells()) - set(s.current_path())
    assert explored
    for column, row in explored:
        assert lines[row][column] == "+"
    assert lines[0][:3] == "S*T"
    assert lines[2][3] == "."
