import pytest

from retrocade.components.body import Body
from retrocade.games.breakout.components import Ball, Brick, BreakoutTuning
from retrocade.games.breakout.game import BubblePopGame, WallBreakerGame
from tests.helpers import RecordingHost, start_game


def _ball(game):
    return next((ball, body) for _, (ball, body) in game.world.get_components(Ball, Body))


def _bricks(game):
    return list(game.world.get_components(Brick, Body))


def test_wall_is_laid_out_in_six_rows():
    game = start_game(WallBreakerGame)
    bricks = _bricks(game)
    assert len(bricks) == 60
    assert {body.y for _, (_brick, body) in bricks} == {2, 4, 6, 8, 10, 12}


def test_brick_hit_scores_and_bounces():
    host = RecordingHost()
    game = start_game(WallBreakerGame, host=host)
    _, ball = _ball(game)
    ball.x, ball.y = 1.0, 3.1
    ball.dx, ball.dy = 0.0, -0.15

    game.tick()

    assert host.last("score") == 10
    assert ball.dy == 0.15
    assert len(_bricks(game)) == 59


def test_paddle_bounce_angle_depends_on_hit_position():
    game = start_game(WallBreakerGame)
    _, ball = _ball(game)
    # paddle spans x 17..23 on row 28
    ball.x, ball.y = 22.0, 26.9
    ball.dx, ball.dy = 0.0, 0.15

    game.tick()

    assert ball.dy < 0
    assert ball.dx > 0


def test_lost_ball_costs_a_life_and_respawns_after_a_second():
    host = RecordingHost()
    game = start_game(WallBreakerGame, host=host)
    ball_state, ball = _ball(game)
    ball.x, ball.y = 10.0, 30.0
    ball.dx, ball.dy = 0.0, 0.15

    game.tick()
    assert host.last("lives") == 2
    assert ball_state.respawn_in == pytest.approx(1.0)

    game.tick(0.5)
    assert ball_state.respawn_in > 0
    game.tick(0.5)
    assert ball_state.respawn_in == 0
    assert (ball.x, ball.y) == (20, 27)
    assert (ball.dx, ball.dy) == (pytest.approx(0.15), pytest.approx(-0.15))


def test_lost_ball_waits_inside_the_field():
    game = start_game(WallBreakerGame)
    ball_state, ball = _ball(game)
    ball.x, ball.y = 10.0, 30.0
    ball.dx, ball.dy = 0.0, 0.15

    game.tick()
    game.tick(0.5)

    assert ball_state.respawn_in > 0
    assert 0 <= ball.y <= 30 - ball.height
    assert 0 <= ball.x <= 40 - ball.width
    assert (ball.dx, ball.dy) == (0.0, 0.0)


def test_clearing_the_wall_advances_level_and_speeds_up():
    host = RecordingHost()
    game = start_game(WallBreakerGame, host=host)
    for ent, _ in list(game.world.get_component(Brick)):
        game.world.delete_entity(ent, immediate=True)

    game.tick()

    assert host.last("level") == 2
    assert ("show_status", "Level 1 Complete!", "success") in host.calls
    assert len(_bricks(game)) == 60
    tuning = next(t for _, t in game.world.get_component(BreakoutTuning))
    assert tuning.speed_factor == pytest.approx(1.15)


def test_new_wall_serves_the_ball_clear_of_the_bricks():
    game = start_game(WallBreakerGame)
    _, ball = _ball(game)
    for ent, _ in list(game.world.get_component(Brick)):
        game.world.delete_entity(ent, immediate=True)
    ball.x, ball.y = 5.0, 2.5

    game.tick()

    assert (ball.x, ball.y) == (20, 27)
    assert ball.dy == pytest.approx(-0.15 * 1.15)
    assert not any(ball.overlaps(brick) for _, (_brick, brick) in _bricks(game))


def test_bubble_pop_is_the_same_game_with_gentler_tuning():
    game = start_game(BubblePopGame)
    tuning = next(t for _, t in game.world.get_component(BreakoutTuning))
    assert tuning.speed_multiplier == pytest.approx(1.1)
    assert game.config.canvas_width == 960
