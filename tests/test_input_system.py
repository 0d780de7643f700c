from retrocade.components.grid_position import Direction
from retrocade.components.session import SessionState
from retrocade.events.bus import EVENT_NAVIGATE_HOME, EventBus
from retrocade.games.paddle_ball.game import PaddleBallGame
from retrocade.games.wormy.game import WormyGame
from retrocade.systems.input_system import normalize_key
from retrocade.utils.session import lose_life
from retrocade.world import get_latch
from tests.helpers import start_game


def test_normalize_key_aliases():
    assert normalize_key(" ") == "Space"
    assert normalize_key("Spacebar") == "Space"
    assert normalize_key("Esc") == "Escape"
    assert normalize_key("p") == "P"
    assert normalize_key("ArrowLeft") == "ArrowLeft"
    assert normalize_key(None) == ""


def test_space_starts_from_menu_and_arrows_are_not_latched_there():
    game = start_game(WormyGame, start=False)

    game.key_down("ArrowUp")
    assert get_latch(game.world).direction is None

    game.key_down(" ")
    assert game.session.state == SessionState.PLAYING


def test_direction_latch_keeps_latest_request():
    game = start_game(WormyGame)

    game.key_down("ArrowUp")
    game.key_down("ArrowDown")

    assert get_latch(game.world).direction == Direction.DOWN


def test_pause_key_toggles_and_clears_latch():
    game = start_game(WormyGame)
    game.key_down("ArrowUp")

    game.key_down("p")
    assert game.session.state == SessionState.PAUSED
    assert get_latch(game.world).direction is None

    game.key_down("ArrowLeft")
    assert get_latch(game.world).direction is None

    game.key_down("P")
    assert game.session.state == SessionState.PLAYING


def test_touch_hold_lasts_until_release():
    game = start_game(PaddleBallGame)
    latch = get_latch(game.world)

    game.touch_control("W", "down")
    for _ in range(30):
        game.tick()
    assert "left_up" in latch.held

    game.touch_control("W", "up")
    assert "left_up" not in latch.held


def test_touch_click_aliases_to_space_on_menu():
    game = start_game(WormyGame, start=False)
    game.touch_control("click", "touchstart")
    assert game.session.state == SessionState.PLAYING


def test_key_up_releases_held_action():
    game = start_game(PaddleBallGame)
    latch = get_latch(game.world)

    game.key_down("ArrowDown")
    assert "right_down" in latch.held
    game.key_up("ArrowDown")
    assert latch.held == set()


def test_visibility_loss_pauses_only_while_playing():
    menu_game = start_game(WormyGame, start=False)
    menu_game.visibility_changed(False)
    assert menu_game.session.state == SessionState.MENU

    game = start_game(WormyGame)
    game.visibility_changed(False)
    assert game.session.state == SessionState.PAUSED
    game.visibility_changed(True)
    assert game.session.state == SessionState.PAUSED


def test_space_restarts_after_game_over_and_h_requests_home():
    bus = EventBus()
    homes = []
    bus.subscribe(EVENT_NAVIGATE_HOME, lambda sender, **payload: homes.append(payload))
    game = start_game(WormyGame, event_bus=bus)
    game.session.lives = 1
    game.session.score = 40
    lose_life(game.world, game.event_bus)
    assert game.session.state == SessionState.GAME_OVER

    game.key_down("H")
    assert homes == [{"source": "key"}]

    game.key_down("Space")
    assert game.session.state == SessionState.PLAYING
    assert game.session.score == 0
    assert game.session.lives == 3


def test_pointer_press_queued_only_while_playing():
    game = start_game(WormyGame, start=False)
    game.pointer_down(10, 10)
    assert game.session.state == SessionState.PLAYING
    assert not get_latch(game.world).pointer_presses

    game.pointer_down(25, 30)
    assert list(get_latch(game.world).pointer_presses) == [(25.0, 30.0)]
