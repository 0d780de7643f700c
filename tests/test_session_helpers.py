from retrocade.components.session import SessionState
from retrocade.events.bus import (
    EVENT_LEVEL_COMPLETE,
    EVENT_LIVES_CHANGED,
    EVENT_SCORE_CHANGED,
    EVENT_SESSION_STATE_CHANGED,
    EVENT_STATUS_SHOW,
    EventBus,
)
from retrocade.utils.session import (
    award_points,
    complete_level,
    get_session,
    lose_life,
    reset_session,
    set_session_state,
)
from retrocade.world import create_world


def _capture(bus, name):
    seen = []
    bus.subscribe(name, lambda sender, **payload: seen.append(payload))
    return seen


def test_transition_table_refuses_menu_to_paused():
    bus = EventBus()
    world = create_world(bus)
    changes = _capture(bus, EVENT_SESSION_STATE_CHANGED)

    assert not set_session_state(world, bus, SessionState.PAUSED)
    assert get_session(world).state == SessionState.MENU
    assert changes == []

    assert set_session_state(world, bus, SessionState.PLAYING, reason="start")
    assert changes[-1]["previous_state"] == SessionState.MENU
    assert changes[-1]["new_state"] == SessionState.PLAYING


def test_losing_last_life_ends_session_immediately():
    bus = EventBus()
    world = create_world(bus, SessionState.PLAYING, lives=1)
    lives = _capture(bus, EVENT_LIVES_CHANGED)
    changes = _capture(bus, EVENT_SESSION_STATE_CHANGED)

    assert lose_life(world, bus, reason="hit") == 0

    assert lives == [{"lives": 0, "delta": -1, "reason": "hit"}]
    assert get_session(world).state == SessionState.GAME_OVER
    assert changes[-1]["reason"] == "no_lives"


def test_lose_life_never_goes_negative():
    bus = EventBus()
    world = create_world(bus, SessionState.PLAYING, lives=1)
    lose_life(world, bus)
    lose_life(world, bus)
    assert get_session(world).lives == 0


def test_award_points_ignores_negative_awards():
    bus = EventBus()
    world = create_world(bus, SessionState.PLAYING)
    scores = _capture(bus, EVENT_SCORE_CHANGED)

    award_points(world, bus, 10)
    award_points(world, bus, -5)

    assert get_session(world).score == 10
    assert [s["score"] for s in scores] == [10]


def test_reset_session_reports_fresh_values():
    bus = EventBus()
    world = create_world(bus, SessionState.PLAYING)
    award_points(world, bus, 50)
    set_session_state(world, bus, SessionState.GAME_OVER)
    scores = _capture(bus, EVENT_SCORE_CHANGED)
    changes = _capture(bus, EVENT_SESSION_STATE_CHANGED)

    session = reset_session(world, bus, lives=3)

    assert (session.score, session.lives, session.level) == (0, 3, 1)
    assert session.state == SessionState.PLAYING
    assert scores[-1]["score"] == 0
    assert changes[-1]["new_state"] == SessionState.PLAYING


def test_complete_level_awards_bonus_and_announces():
    bus = EventBus()
    world = create_world(bus, SessionState.PLAYING)
    completed = _capture(bus, EVENT_LEVEL_COMPLETE)
    banners = _capture(bus, EVENT_STATUS_SHOW)

    assert complete_level(world, bus, bonus=1000) == 2

    session = get_session(world)
    assert session.score == 1000
    assert completed == [{"level": 1, "bonus": 1000}]
    assert banners[-1]["text"] == "Level 1 Complete!"
    assert banners[-1]["duration"] == 2.0
