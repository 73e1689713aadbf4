import types

import pygame

from path_grid.core.grid import Grid
from path_grid.gui import input as gui_input
from path_grid.gui.renderer import Renderer
from path_grid.pathfinding.session import PathfindingSession


class _Renderer:
    cell_size = 40
    screen_to_cell = Renderer.screen_to_cell


def _setup(monkeypatch, events, mods=0):
    session = PathfindingSession(Grid(20, 15))
    monkeypatch.setattr(pygame.event, "get", lambda: events)
    monkeypatch.setattr(pygame.key, "get_mods", lambda: mods)
    return session


def test_left_click_toggles_wall(monkeypatch):
    events = [pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(85, 45))]
    session = _setup(monkeypatch, events)
    session.current_path()
    gui_input.handle_events(session, _Renderer(), {})
    assert session.is_wall((2, 1))
    assert session.dirty


def test_right_click_moves_source(monkeypatch):
    events = [pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(120, 80))]
    session = _setup(monkeypatch, events)
    gui_input.handle_events(session, _Renderer(), {})
    assert session.source == (3, 2)


def test_shift_right_click_moves_target(monkeypatch):
    events = [pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(10, 10))]
    session = _setup(monkeypatch, events, mods=pygame.KMOD_LSHIFT)
    gui_input.handle_events(session, _Renderer(), {})
    assert session.target == (0, 0)
    assert session.source == (0, 0)


def test_click_below_grid_ignored(monkeypatch):
    # The status bar sits below the last row.
    events = [pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 15 * 40 + 5))]
    session = _setup(monkeypatch, events)
    session.current_path()
    gui_input.handle_events(session, _Renderer(), {})
    assert session.grid.walls() == []
    assert not session.dirty


def test_hotkeys(monkeypatch):
    calls = []
    monkeypatch.setattr(gui_input.RandomWallsScenario, "setup", lambda self, s: calls.append("r"))
    monkeypatch.setattr(gui_input.ClearScenario, "setup", lambda self, s: calls.append("c"))
    events = [
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_c),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r),
    ]
    session = _setup(monkeypatch, events)
    state = {"running": True}
    gui_input.handle_events(session, _Renderer(), state)
    assert calls == ["r", "c"]
    assert state["running"] is False


def test_quit_event(monkeypatch):
    session = _setup(monkeypatch, [pygame.event.Event(pygame.QUIT)])
    state = {"running": True}
    gui_input.handle_events(session, types.SimpleNamespace(), state)
    assert state["running"] is False
