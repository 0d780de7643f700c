from collections import deque
from dataclasses import replace

import pytest

from retrocade.components.session import SessionState
from retrocade.config import get_config
from retrocade.errors import GameLifecycleError
from retrocade.events.bus import EVENT_FRAME_RENDERED, EVENT_KEY_DOWN, EventBus
from retrocade.games.wormy.components import Food, Snake
from retrocade.games.wormy.game import WormyGame
from retrocade.components.grid_position import GridPosition
from tests.helpers import RecordingHost, start_game


def _snake(game):
    return next(snake for _, snake in game.world.get_component(Snake))


def _clear_food(game):
    for ent, _ in list(game.world.get_component(Food)):
        game.world.delete_entity(ent, immediate=True)


def test_init_reports_initial_values_and_stays_in_menu():
    host = RecordingHost()
    game = start_game(WormyGame, host=host, start=False)

    assert game.session.state == SessionState.MENU
    assert host.last("score") == 0
    assert host.last("lives") == 3
    assert host.last("level") == 1
    assert game.scheduler.scheduled == []


def test_start_schedules_one_tick_source():
    game = start_game(WormyGame)

    assert game.session.state == SessionState.PLAYING
    assert len(game.scheduler.scheduled) == 1
    assert game.scheduler.interval == pytest.approx(0.1)

    game.start()
    assert len(game.scheduler.scheduled) == 1


def test_pause_is_idempotent():
    host = RecordingHost()
    game = start_game(WormyGame, host=host)

    game.pause()
    game.pause()

    banners = [call for call in host.of("show_status") if call[1].startswith("Game Paused")]
    assert banners == [("show_status", "Game Paused - Press P to resume", "warning")]
    assert len(game.scheduler.unscheduled) == 1
    assert game.session.state == SessionState.PAUSED


def test_resume_only_from_paused():
    game = start_game(WormyGame, start=False)
    game.resume()
    assert game.session.state == SessionState.MENU

    game.start()
    game.pause()
    game.resume()
    assert game.session.state == SessionState.PLAYING
    assert len(game.scheduler.scheduled) == 2


def test_tick_does_nothing_unless_playing():
    game = start_game(WormyGame)
    head = _snake(game).head
    game.pause()

    game.tick()

    assert _snake(game).head == head
    assert game.session.elapsed == 0


def test_one_frame_per_tick():
    bus = EventBus()
    frames = []
    bus.subscribe(EVENT_FRAME_RENDERED, lambda sender, **payload: frames.append(payload["frame"]))
    game = start_game(WormyGame, event_bus=bus)
    before = len(frames)

    game.tick()

    assert len(frames) == before + 1
    assert frames[-1] is game.frame


def test_last_life_ends_game_in_same_tick():
    config = replace(get_config("wormy").with_options(wrap=False), starting_lives=1)
    host = RecordingHost()
    game = start_game(WormyGame, host=host, config=config)
    snake = _snake(game)
    snake.segments = deque([(19, 10)])
    _clear_food(game)

    game.tick()

    assert game.session.state == SessionState.GAME_OVER
    assert host.last("lives") == 0
    lives_at = host.calls.index(("lives", 0))
    over_at = host.calls.index(("show_status", "Game Over! Final Score: 0", "error"))
    assert lives_at < over_at
    assert game.scheduler.active is None


def test_level_up_reschedules_faster_tick():
    game = start_game(WormyGame)
    snake = _snake(game)
    snake.foods_eaten = 4
    _clear_food(game)
    hx, hy = snake.head
    game.world.create_entity(GridPosition(hx + 1, hy), Food())

    game.tick()

    assert game.session.level == 2
    assert game.scheduler.interval == pytest.approx(0.09)
    assert game.tick_interval == pytest.approx(0.09)


def test_restart_resets_session_and_tick_interval():
    host = RecordingHost()
    game = start_game(WormyGame, host=host)
    game.set_tick_interval(0.05)
    game.session.score = 120
    game.pause()

    game.restart()

    session = game.session
    assert (session.state, session.score, session.lives, session.level) == (SessionState.PLAYING, 0, 3, 1)
    assert game.tick_interval == pytest.approx(0.1)
    assert game.scheduler.interval == pytest.approx(0.1)
    assert len(_snake(game)) == 1
    assert host.last("score") == 0


def test_destroy_stops_ticks_and_receivers():
    bus = EventBus()
    host = RecordingHost()
    game = start_game(WormyGame, host=host, event_bus=bus)

    game.destroy()
    game.destroy()
    recorded = len(host.calls)
    game.tick()
    game.key_down("P")
    bus.emit(EVENT_KEY_DOWN, key="P")

    assert game.destroyed
    assert len(game.scheduler.unscheduled) == 1
    assert len(host.calls) == recorded
    assert all(bus.receiver_count(name) == 0 for name in ("key_down", "score_changed", "session_state_changed"))


def test_lifecycle_calls_after_destroy_raise():
    game = start_game(WormyGame)
    game.destroy()

    with pytest.raises(GameLifecycleError):
        game.init()
    with pytest.raises(GameLifecycleError):
        game.restart()


def test_calls_before_init_raise():
    game = WormyGame(RecordingHost())
    with pytest.raises(GameLifecycleError):
        game.start()
