import pytest

from path_grid.core.grid import Grid
from path_grid.pathfinding.session import PathfindingSession
from path_grid.scenarios.layouts import (
    ClearScenario,
    RandomWallsScenario,
    get_scenario,
)
from path_grid.utils.noise import threshold_mask, white_noise


def _session() -> PathfindingSession:
    return PathfindingSession(Grid(20, 15))


def test_random_walls_deterministic_with_seed():
    s1, s2 = _session(), _session()
    RandomWallsScenario(seed=7).setup(s1)
    RandomWallsScenario(seed=7).setup(s2)
    assert s1.grid.walls() == s2.grid.walls()
    assert s1.grid.walls()


def test_random_walls_keep_endpoints_open():
    s = _session()
    RandomWallsScenario(density=1.0, seed=1).setup(s)
    assert not s.grid.is_wall(s.source)
    assert not s.grid.is_wall(s.target)
    assert len(s.grid.walls()) == 20 * 15 - 2


def test_random_walls_replace_existing_layout():
    s = _session()
    s.toggle_wall_at((5, 5))
    RandomWallsScenario(density=0.0).setup(s)
    assert s.grid.walls() == []


def test_scenario_marks_session_dirty():
    s = _session()
    s.current_path()
    ClearScenario().setup(s)
    assert s.dirty


def test_invalid_density():
    with pytest.raises(ValueError):
        RandomWallsScenario(density=1.5)


def test_get_scenario_by_name():
    assert isinstance(get_scenario("clear"), ClearScenario)
    scenario = get_scenario("Random", seed=3)
    assert isinstance(scenario, RandomWallsScenario)
    assert scenario.seed == 3
    assert scenario.get_name() == "random"
    with pytest.raises(ValueError):
        get_scenario("maze")


def test_noise_helpers():
    data = white_noise(4, 3, seed=5)
    assert len(data) == 3 and all(len(row) == 4 for row in data)
    assert data == white_noise(4, 3, seed=5)
    mask = threshold_mask([[0.1, 0.5], [0.9, 0.2]], 0.3)
    assert mask == [[True, False], [False, True]]
