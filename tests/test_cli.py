import logging

from path_grid.core.grid import Grid
from path_grid.pathfinding.session import PathfindingSession
from path_grid.utils.cli import command_parser
from path_grid.utils.cli.command_parser import parse_command, poll_command, submit_command
from path_grid.utils.cli import commands


def _session() -> PathfindingSession:
    return PathfindingSession(Grid(5, 5))


def test_parse_command_basic():
    cmd = parse_command("/wall 3 4")
    assert cmd is not None
    assert cmd.name == "wall"
    assert cmd.args == ["3", "4"]


def test_parse_command_lowercases_name():
    cmd = parse_command("  /Frontier LINEAR ")
    assert cmd.name == "frontier"
    assert cmd.args == ["LINEAR"]


def test_parse_command_invalid():
    assert parse_command("hello") is None
    assert parse_command("/") is None


def test_submit_and_poll():
    while poll_command() is not None:
        pass
    assert submit_command("/path") is True
    assert submit_command("path") is False
    cmd = poll_command()
    assert cmd.name == "path"
    assert poll_command() is None


def test_wall_start_end_commands():
    s = _session()
    state = {}
    commands.execute("wall", ["2", "2"], s, state)
    commands.execute("start", ["1", "0"], s, state)
    commands.execute("end", ["3", "4"], s, state)
    assert s.is_wall((2, 2))
    assert s.source == (1, 0)
    assert s.target == (3, 4)
    assert state["running"] is True


def test_bad_arguments_leave_session_unchanged(caplog):
    s = _session()
    caplog.set_level(logging.INFO)
    commands.execute("wall", ["x", "1"], s, {})
    commands.execute("start", ["9", "9"], s, {})
    commands.execute("end", ["1"], s, {})
    assert s.grid.walls() == []
    assert s.source == (0, 0)
    assert s.target == (4, 4)
    assert "Invalid cell" in caplog.text
    assert "Usage: /end" in caplog.text


def test_path_command_logs_route(caplog):
    s = PathfindingSession(Grid(3, 1))
    caplog.set_level(logging.INFO)
    commands.execute("path", [], s, {})
    assert "(0,0) (1,0) (2,0)" in caplog.text
    s.toggle_wall_at((1, 0))
    commands.execute("path", [], s, {})
    assert "No path" in caplog.text


def test_frontier_command_switches_engine(caplog):
    s = _session()
    commands.execute("frontier", ["linear"], s, {})
    assert s.engine.frontier_name == "linear"
    caplog.set_level(logging.INFO)
    commands.execute("frontier", ["bogus"], s, {})
    assert s.engine.frontier_name == "linear"
    assert "Unknown frontier" in caplog.text


def test_scenario_command():
    s = PathfindingSession(Grid(10, 10))
    commands.execute("scenario", ["random", "11"], s, {})
    assert s.grid.walls()
    commands.execute("scenario", ["clear"], s, {})
    assert s.grid.walls() == []


def test_unknown_scenario_logged(caplog):
    caplog.set_level(logging.INFO)
    commands.execute("scenario", ["maze"], _session(), {})
    assert "Unknown scenario" in caplog.text


def test_quit_stops_running():
    state = {"running": True}
    commands.execute("quit", [], _session(), state)
    assert state["running"] is False


def test_unknown_command(caplog):
    caplog.set_level(logging.INFO)
    commands.execute("teleport", [], _session(), {})
    assert "Unknown command: /teleport" in caplog.text


def test_help_lists_commands(caplog):
    caplog.set_level(logging.INFO)
    commands.execute("help", [], _session(), {})
    assert "/frontier" in caplog.text


def test_stop_cli_thread_sets_event():
    command_parser.stop_cli_thread()
    assert command_parser._cli_thread_stop_event.is_set()
    command_parser._cli_thread_stop_event.clear()


def test_scenario_without_name_prints_usage(caplog):
    caplog.set_level(logging.INFO)
    commands.execute("scenario", [], _session(), {})
    assert "Usage: /scenario" in caplog.text
    assert "Unknown command" not in caplog.text
