import pytest

from retrocade.components.appearance import Appearance
from retrocade.components.body import Body
from retrocade.components.grid_position import GridPosition
from retrocade.components.session import SessionState
from retrocade.games.road_dash.components import Frog, TrafficTuning, Vehicle
from retrocade.games.road_dash.factory import clear_traffic
from retrocade.games.road_dash.game import RoadDashGame
from tests.helpers import RecordingHost, start_game


def _quiet_road(host=None):
    game = start_game(RoadDashGame, host=host)
    clear_traffic(game.world)
    return game


def _frog(game):
    return next(pos for _, (_frog, pos) in game.world.get_components(Frog, GridPosition))


def test_frog_starts_on_the_bottom_kerb():
    game = _quiet_road()
    assert _frog(game).as_tuple() == (10, 29)


def test_each_press_is_one_hop():
    game = _quiet_road()
    game.key_down("ArrowUp")
    game.key_down("ArrowUp")
    game.key_down("ArrowLeft")
    game.tick()
    assert _frog(game).as_tuple() == (9, 27)


def test_hops_off_the_board_are_dropped():
    game = _quiet_road()
    game.key_down("ArrowDown")
    game.tick()
    assert _frog(game).as_tuple() == (10, 29)


def test_vehicle_hit_costs_a_life_and_sends_frog_home():
    host = RecordingHost()
    game = _quiet_road(host)
    game.world.create_entity(Vehicle(1), Body(9.5, 28, 3, 1), Appearance((255, 0, 0)))

    game.key_down("ArrowUp")
    game.tick()

    assert host.last("lives") == 2
    assert _frog(game).as_tuple() == (10, 29)


def test_last_life_lost_to_traffic_ends_the_game():
    game = _quiet_road()
    game.session.lives = 1
    game.world.create_entity(Vehicle(1), Body(9.5, 28, 3, 1), Appearance((255, 0, 0)))

    game.key_down("ArrowUp")
    game.tick()

    assert game.session.state == SessionState.GAME_OVER
    assert game.session.lives == 0


def test_reaching_the_far_kerb_completes_the_level():
    host = RecordingHost()
    game = _quiet_road(host)
    _frog(game).y = 1

    game.key_down("ArrowUp")
    game.tick()

    assert host.last("score") == 200
    assert host.last("level") == 2
    assert _frog(game).as_tuple() == (10, 29)
    tuning = next(t for _, t in game.world.get_component(TrafficTuning))
    assert tuning.base_speed == pytest.approx(4.8)
    assert any(True for _ in game.world.get_component(Vehicle))


def test_r_sends_the_frog_home():
    game = _quiet_road()
    frog = _frog(game)
    frog.x, frog.y = 3, 12

    game.key_down("R")
    game.tick()

    assert frog.as_tuple() == (10, 29)


def test_space_pauses_while_crossing():
    game = _quiet_road()
    game.key_down("Space")
    assert game.session.state == SessionState.PAUSED
