from retrocade.components.session import GameSession, SessionState
from retrocade.config import get_config
from retrocade.games.chompy.game import ChompyGame
from retrocade.games.road_dash.game import RoadDashGame
from retrocade.rendering.frame import CircleShape, Frame, RectShape, hex_color
from retrocade.rendering.overlay import draw_session_overlay
from tests.helpers import start_game


def test_hex_color():
    assert hex_color("#2121ff") == (0x21, 0x21, 0xFF)
    assert hex_color("#fff") == (255, 255, 255)


def test_frame_collects_shapes_in_order():
    frame = Frame(100, 50)
    frame.rect(0, 0, 10, 10, (255, 0, 0))
    frame.circle(5, 5, 2, (0, 255, 0))
    frame.text("hi", 50, 25, (255, 255, 255))

    assert len(frame) == 3
    assert isinstance(list(frame)[0], RectShape)
    assert frame.of_type(CircleShape)[0].radius == 2
    assert frame.texts() == ["hi"]


def test_overlay_per_state():
    config = get_config("road-dash")
    playing = Frame(400, 600)
    draw_session_overlay(playing, GameSession(state=SessionState.PLAYING), config)
    assert len(playing) == 0

    menu = Frame(400, 600)
    draw_session_overlay(menu, GameSession(state=SessionState.MENU), config, instructions=("Hop!",))
    assert menu.texts() == ["ROAD DASH", "Press SPACE to start", "Hop!"]

    paused = Frame(400, 600)
    draw_session_overlay(paused, GameSession(state=SessionState.PAUSED), config)
    assert "Press P or SPACE to resume" in paused.texts()

    over = Frame(400, 600)
    draw_session_overlay(over, GameSession(state=SessionState.GAME_OVER, score=30, level=2), config)
    assert over.texts()[:3] == ["GAME OVER", "Final Score: 30", "Level: 2"]
    assert "Press H to return home" in over.texts()


def test_rendering_twice_gives_the_same_frame():
    game = start_game(RoadDashGame)
    snapshot = (game.session.score, game.session.lives, game.session.level)

    first = game.render()
    second = game.render()

    assert first is not second
    assert first.shapes == second.shapes
    assert (game.session.score, game.session.lives, game.session.level) == snapshot


def test_maze_frame_layers_board_before_actors():
    game = start_game(ChompyGame)
    frame = game.render()
    kinds = [type(shape).__name__ for shape in frame]
    assert kinds[0] == "RectShape"
    assert kinds.index("CircleShape") > kinds.index("RectShape")
    assert "GAME OVER" not in frame.texts()
