from retrocade.components.body import Body
from retrocade.components.session import SessionState
from retrocade.games.paddle_ball.components import Ball, Paddle
from retrocade.games.paddle_ball.game import PaddleBallGame
from retrocade.games.paddle_ball.systems import match_score
from tests.helpers import RecordingHost, start_game


def _ball(game):
    return next(body for _, (_ball, body) in game.world.get_components(Ball, Body))


def _paddle(game, side):
    return next(body for _, (paddle, body) in game.world.get_components(Paddle, Body) if paddle.side == side)


def test_ball_reflects_off_top_wall_and_stays_inside():
    game = start_game(PaddleBallGame)
    ball = _ball(game)
    ball.x, ball.y = 20.0, 10.0
    ball.dx, ball.dy = 0.1, -0.2

    lowest = ball.y
    for _ in range(55):
        game.tick()
        lowest = min(lowest, ball.y)

    assert lowest >= 0
    assert ball.dy == 0.2


def test_held_key_moves_paddle_until_released():
    game = start_game(PaddleBallGame)
    paddle = _paddle(game, "left")
    start_y = paddle.y

    game.key_down("W")
    game.tick()
    game.tick()
    assert paddle.y == start_y - 1.0

    game.key_up("W")
    game.tick()
    assert paddle.y == start_y - 1.0


def test_paddle_hit_reflects_with_english():
    game = start_game(PaddleBallGame)
    ball = _ball(game)
    paddle = _paddle(game, "left")
    ball.x, ball.y = paddle.right + 0.1, paddle.y + 3.0
    ball.dx, ball.dy = -0.3, 0.0

    game.tick()

    assert ball.dx == 0.3
    assert ball.x == paddle.right
    hit = (ball.y - paddle.y) / paddle.height
    assert abs(ball.dy - (hit - 0.5) * 0.4) < 1e-9


def test_point_scored_updates_display_and_reserves():
    host = RecordingHost()
    game = start_game(PaddleBallGame, host=host)
    ball = _ball(game)
    ball.x, ball.y = 0.2, 2.0
    ball.dx, ball.dy = -0.3, 0.0

    game.tick()

    score = match_score(game.world)
    assert (score.left, score.right) == (0, 1)
    assert host.last("score") == "0 - 1"
    assert game.session.score == 1
    assert (ball.x, ball.y) == (20, 10)


def test_eleventh_point_wins_the_match():
    host = RecordingHost()
    game = start_game(PaddleBallGame, host=host)
    match_score(game.world).left = 10
    ball = _ball(game)
    ball.x, ball.y = 39.8, 2.0
    ball.dx, ball.dy = 0.3, 0.0

    game.tick()

    assert game.session.state == SessionState.GAME_OVER
    assert match_score(game.world).winner == "left"
    assert host.of("show_status")[-1] == ("show_status", "Left player wins 11 - 0!", "success")
    assert game.session.lives == 3


def test_r_resets_the_match_mid_game():
    game = start_game(PaddleBallGame)
    match_score(game.world).left = 4
    game.session.score = 4

    game.key_down("r")

    assert match_score(game.world).left == 0
    assert game.session.score == 0
    assert game.session.state == SessionState.PLAYING
