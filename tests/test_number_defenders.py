import random

import pytest

from retrocade.components.body import Body
from retrocade.components.countdown import Countdown
from retrocade.components.session import SessionState
from retrocade.games.number_defenders.components import AnswerBuffer, DefenseStats, Problem
from retrocade.games.number_defenders.factory import generate_problem
from retrocade.games.number_defenders.game import NumberDefendersGame
from tests.helpers import RecordingEffects, RecordingHost, start_game


def _problem_in_lane(game, lane):
    return next(
        (problem, body)
        for _, (problem, body) in game.world.get_components(Problem, Body)
        if problem.lane == lane
    )


def _buffer(game):
    return next(buffer for _, buffer in game.world.get_component(AnswerBuffer))


def test_subtraction_never_goes_negative():
    rng = random.Random(3)
    for _ in range(200):
        _text, answer = generate_problem(rng, "-")
        assert answer >= 0


def test_unknown_operation_is_rejected():
    with pytest.raises(ValueError):
        generate_problem(random.Random(0), "*")


def test_correct_answer_in_cannon_lane_scores():
    host = RecordingHost()
    game = start_game(NumberDefendersGame, host=host)
    problem, _ = _problem_in_lane(game, 2)
    problem.answer = 17

    game.key_down("1")
    game.key_down("7")
    game.tick()

    assert host.last("score") == 10
    assert _buffer(game).text == ""
    replacement, body = _problem_in_lane(game, 2)
    assert replacement is not problem
    assert body.y == pytest.approx(-2.0 + 0.2)


def test_wrong_answer_stays_in_the_buffer():
    game = start_game(NumberDefendersGame)
    problem, _ = _problem_in_lane(game, 2)
    problem.answer = 5

    game.key_down("4")
    game.tick()

    assert _buffer(game).text == "4"
    game.key_down("Backspace")
    game.tick()
    assert _buffer(game).text == ""


def test_escaping_problem_costs_a_life():
    host = RecordingHost()
    game = start_game(NumberDefendersGame, host=host)
    problem, body = _problem_in_lane(game, 0)
    body.y = 30.5

    game.tick()

    assert host.last("lives") == 2
    assert _problem_in_lane(game, 0)[0] is not problem


def test_tenth_correct_answer_completes_the_level():
    effects = RecordingEffects()
    host = RecordingHost(effects=effects)
    game = start_game(NumberDefendersGame, host=host)
    next(stats for _, stats in game.world.get_component(DefenseStats)).correct = 9
    problem, _ = _problem_in_lane(game, 2)
    problem.answer = 3

    game.key_down("3")
    game.tick()

    assert host.last("level") == 2
    kinds = [kind for kind, _x, _y in effects.celebrations]
    assert kinds == ["rocket", "fireworks"]


def test_timer_running_out_ends_the_game():
    host = RecordingHost()
    game = start_game(NumberDefendersGame, host=host)
    countdown = next(c for _, c in game.world.get_component(Countdown))
    assert countdown.total == 120.0
    countdown.remaining = 0.04

    game.tick()

    assert game.session.state == SessionState.GAME_OVER
    assert host.calls[-1] == ("show_status", "Game Over! Final Score: 0", "error")
