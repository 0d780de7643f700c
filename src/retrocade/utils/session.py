from __future__ import annotations

import logging

from esper import World

from retrocade.components.session import GameSession, SessionState
from retrocade.constants import STATUS_BANNER_SECONDS
from retrocade.events.bus import (
    EVENT_LEVEL_CHANGED,
    EVENT_LEVEL_COMPLETE,
    EVENT_LIVES_CHANGED,
    EVENT_SCORE_CHANGED,
    EVENT_SESSION_RESET,
    EVENT_SESSION_STATE_CHANGED,
    EVENT_STATUS_HIDE,
    EVENT_STATUS_SHOW,
    EVENT_SOUND,
    EVENT_CELEBRATE,
    EventBus,
)

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS: dict[SessionState, frozenset[SessionState]] = {
    SessionState.MENU: frozenset({SessionState.PLAYING}),
    SessionState.PLAYING: frozenset({SessionState.PAUSED, SessionState.GAME_OVER}),
    SessionState.PAUSED: frozenset({SessionState.PLAYING}),
    SessionState.GAME_OVER: frozenset({SessionState.PLAYING}),
}


def get_session(world: World) -> GameSession | None:
    for _, session in world.get_component(GameSession):
        return session
    return None


def is_playing(world: World) -> bool:
    session = get_session(world)
    return session is not None and session.state == SessionState.PLAYING


def set_session_state(
    world: World,
    event_bus: EventBus,
    state: SessionState,
    *,
    reason: str = "",
) -> bool:
    """Move the session to ``state`` when the transition table allows it.

    Returns False (and emits nothing) for a disallowed or no-op transition, which
    is what keeps pause and resume idempotent.
    """
    session = get_session(world)
    if session is None:
        return False
    previous = session.state
    if state not in ALLOWED_TRANSITIONS[previous]:
        return False
    session.state = state
    logger.info("session %s -> %s (%s)", previous.name, state.name, reason or "request")
    event_bus.emit(
        EVENT_SESSION_STATE_CHANGED,
        previous_state=previous,
        new_state=state,
        reason=reason,
    )
    return True


def reset_session(
    world: World,
    event_bus: EventBus,
    *,
    lives: int,
    state: SessionState = SessionState.PLAYING,
    reason: str = "restart",
) -> GameSession:
    """Start a fresh session in place, reporting every value to listeners."""
    session = get_session(world)
    if session is None:
        session = GameSession(lives=lives)
        world.create_entity(session)
    previous = session.state
    session.score = 0
    session.lives = lives
    session.level = 1
    session.elapsed = 0.0
    session.state = state
    event_bus.emit(EVENT_SESSION_RESET, score=0, lives=lives, level=1)
    event_bus.emit(EVENT_SCORE_CHANGED, score=0, delta=0, display=None)
    event_bus.emit(EVENT_LIVES_CHANGED, lives=lives, delta=0, reason=reason)
    event_bus.emit(EVENT_LEVEL_CHANGED, level=1)
    if previous != state:
        logger.info("session %s -> %s (%s)", previous.name, state.name, reason)
        event_bus.emit(
            EVENT_SESSION_STATE_CHANGED,
            previous_state=previous,
            new_state=state,
            reason=reason,
        )
    return session


def award_points(
    world: World,
    event_bus: EventBus,
    points: int,
    *,
    display: str | None = None,
) -> int:
    """Add ``points`` to the score; negative awards are ignored."""
    session = get_session(world)
    if session is None:
        return 0
    delta = max(0, int(points))
    if delta == 0 and display is None:
        return session.score
    session.score += delta
    event_bus.emit(EVENT_SCORE_CHANGED, score=session.score, delta=delta, display=display)
    return session.score


def lose_life(world: World, event_bus: EventBus, *, reason: str = "") -> int:
    """Take one life; the last one ends the session in the same call."""
    session = get_session(world)
    if session is None or session.lives <= 0:
        return 0
    session.lives -= 1
    event_bus.emit(EVENT_LIVES_CHANGED, lives=session.lives, delta=-1, reason=reason)
    if session.lives == 0:
        set_session_state(world, event_bus, SessionState.GAME_OVER, reason="no_lives")
    return session.lives


def advance_level(world: World, event_bus: EventBus, *, levels: int = 1) -> int:
    session = get_session(world)
    if session is None:
        return 0
    session.level += max(1, int(levels))
    logger.info("level %d reached", session.level)
    event_bus.emit(EVENT_LEVEL_CHANGED, level=session.level)
    return session.level


def end_session(world: World, event_bus: EventBus, *, reason: str) -> bool:
    return set_session_state(world, event_bus, SessionState.GAME_OVER, reason=reason)


def show_status(
    event_bus: EventBus,
    text: str,
    level: str = "info",
    *,
    duration: float | None = None,
) -> None:
    event_bus.emit(EVENT_STATUS_SHOW, text=text, level=level, duration=duration)


def hide_status(event_bus: EventBus) -> None:
    event_bus.emit(EVENT_STATUS_HIDE)


def play_sound(
    event_bus: EventBus,
    frequency: int,
    duration_ms: int = 100,
    *,
    waveform: str = "square",
    volume: float = 0.1,
) -> None:
    event_bus.emit(
        EVENT_SOUND,
        frequency=frequency,
        duration_ms=duration_ms,
        waveform=waveform,
        volume=volume,
    )


def celebrate(event_bus: EventBus, kind: str = "fireworks", *, x: float | None = None,
              y: float | None = None) -> None:
    event_bus.emit(EVENT_CELEBRATE, kind=kind, x=x, y=y)


def complete_level(
    world: World,
    event_bus: EventBus,
    *,
    bonus: int = 0,
    celebration: str | None = "fireworks",
) -> int:
    """Award the level bonus, bump the level and announce it on a timed banner."""
    session = get_session(world)
    if session is None:
        return 0
    finished = session.level
    if bonus:
        award_points(world, event_bus, bonus)
    new_level = advance_level(world, event_bus)
    event_bus.emit(EVENT_LEVEL_COMPLETE, level=finished, bonus=bonus)
    show_status(event_bus, f"Level {finished} Complete!", "success", duration=STATUS_BANNER_SECONDS)
    if celebration:
        celebrate(event_bus, celebration)
    return new_level
