"""The shared fixed-tick loop every game plugs its processors and renderer into."""
from __future__ import annotations

import logging
import random
from typing import ClassVar, Optional

from esper import World

from retrocade.components.input_latch import InputLatch
from retrocade.components.session import GameSession, SessionState
from retrocade.config import GameConfig, get_config
from retrocade.engine.host import GameHost, NullHost
from retrocade.engine.scheduler import ArcadeScheduler, TickScheduler
from retrocade.errors import GameLifecycleError
from retrocade.events.bus import (
    EVENT_FRAME_RENDERED,
    EVENT_KEY_DOWN,
    EVENT_KEY_UP,
    EVENT_LEVEL_CHANGED,
    EVENT_LIVES_CHANGED,
    EVENT_PAUSE_REQUEST,
    EVENT_POINTER_DOWN,
    EVENT_POINTER_MOVE,
    EVENT_POINTER_UP,
    EVENT_RESTART_REQUEST,
    EVENT_RESUME_REQUEST,
    EVENT_SCORE_CHANGED,
    EVENT_SESSION_STATE_CHANGED,
    EVENT_START_REQUEST,
    EVENT_TICK_INTERVAL_CHANGED,
    EVENT_TOUCH_CONTROL,
    EVENT_VISIBILITY_CHANGED,
    EventBus,
    ScopedEventBus,
)
from retrocade.rendering.frame import Frame
from retrocade.systems.base_processor import PRIORITY_RULES, PRIORITY_STATUS
from retrocade.systems.countdown_system import CountdownSystem
from retrocade.systems.effects_system import EffectsSystem
from retrocade.systems.input_system import InputSystem, KeyBindings, LifecycleKeys
from retrocade.systems.reporter_system import ReporterSystem
from retrocade.systems.status_system import StatusSystem
from retrocade.utils.session import get_session, hide_status, reset_session, set_session_state
from retrocade.world import create_world, get_latch

logger = logging.getLogger(__name__)


class GameLoop:
    """Base class for every game.

    Subclasses provide ``populate`` (create the board and entities for a fresh
    session), ``register_processors`` (the per-tick pipeline) and ``render_frame``
    (a pure world -> Frame function). The loop owns the world, the state machine
    wiring, the tick schedule and the host reporting.
    """

    slug: ClassVar[str] = ""
    bindings: ClassVar[KeyBindings] = KeyBindings()
    reset_keys: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        host: GameHost | None = None,
        *,
        config: GameConfig | None = None,
        scheduler: TickScheduler | None = None,
        rng: random.Random | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config or get_config(self.slug)
        self.host: GameHost = host if host is not None else NullHost()
        self.scheduler: TickScheduler = scheduler or ArcadeScheduler()
        self.rng = rng or random.Random()
        self.event_bus = ScopedEventBus(event_bus or EventBus())
        self.tick_interval = self.config.tick_interval
        self.world: Optional[World] = None
        self.frame = Frame(self.config.canvas_width, self.config.canvas_height)
        self.lifecycle = LifecycleKeys(pause=self.config.pause_keys, reset=self.reset_keys)
        self._scheduled_interval: float | None = None
        self._render_deferred = False
        self._destroyed = False

    # ------------------------------------------------------------------
    # Hooks for subclasses
    # ------------------------------------------------------------------
    def populate(self, world: World) -> None:
        raise NotImplementedError

    def register_processors(self, world: World) -> None:
        raise NotImplementedError

    def render_frame(self, world: World) -> Frame:
        raise NotImplementedError

    def on_restart(self, world: World) -> None:
        """Reset per-game tuning that outlives a single board (speeds, intervals)."""
        self.set_tick_interval(self.config.tick_interval)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def init(self) -> None:
        self._ensure_alive("init")
        if self.world is not None:
            return
        bus = self.event_bus
        world = create_world(bus, lives=self.config.starting_lives, rng=self.rng)
        self.world = world
        ReporterSystem(world, bus, self.host)
        EffectsSystem(world, bus, self.host, self.config.modules)
        InputSystem(world, bus, self.bindings, self.lifecycle)
        world.add_processor(CountdownSystem(bus), priority=PRIORITY_RULES)
        world.add_processor(StatusSystem(world, bus, self.config), priority=PRIORITY_STATUS)
        bus.subscribe(EVENT_SESSION_STATE_CHANGED, self._on_state_changed)
        bus.subscribe(EVENT_START_REQUEST, self._on_start_request)
        bus.subscribe(EVENT_PAUSE_REQUEST, self._on_pause_request)
        bus.subscribe(EVENT_RESUME_REQUEST, self._on_resume_request)
        bus.subscribe(EVENT_RESTART_REQUEST, self._on_restart_request)
        bus.subscribe(EVENT_TICK_INTERVAL_CHANGED, self._on_tick_interval_changed)
        self.register_processors(world)
        self.populate(world)
        session = get_session(world)
        bus.emit(EVENT_SCORE_CHANGED, score=session.score, delta=0, display=None)
        bus.emit(EVENT_LIVES_CHANGED, lives=session.lives, delta=0, reason="init")
        bus.emit(EVENT_LEVEL_CHANGED, level=session.level)
        logger.info("%s initialised", self.config.slug)
        self.render()

    def start(self) -> None:
        self._ensure_ready("start")
        set_session_state(self.world, self.event_bus, SessionState.PLAYING, reason="start")

    def pause(self) -> None:
        self._ensure_ready("pause")
        set_session_state(self.world, self.event_bus, SessionState.PAUSED, reason="pause")

    def resume(self) -> None:
        self._ensure_ready("resume")
        session = get_session(self.world)
        if session.state == SessionState.PAUSED:
            set_session_state(self.world, self.event_bus, SessionState.PLAYING, reason="resume")

    def toggle_pause(self) -> None:
        session = get_session(self.world) if self.world is not None else None
        if session is not None and session.state == SessionState.PAUSED:
            self.resume()
        else:
            self.pause()

    def restart(self) -> None:
        self._ensure_ready("restart")
        world = self.world
        self._render_deferred = True
        try:
            self._clear_game_entities(world)
            self.on_restart(world)
            reset_session(
                world,
                self.event_bus,
                lives=self.config.starting_lives,
                state=SessionState.PLAYING,
            )
            hide_status(self.event_bus)
            self.populate(world)
        finally:
            self._render_deferred = False
        logger.info("%s restarted", self.config.slug)
        self._sync_schedule()
        self.render()

    def destroy(self) -> None:
        if self._destroyed:
            return
        self._unschedule()
        self.event_bus.close()
        if self.world is not None:
            self.world.clear_database()
        self._destroyed = True
        logger.info("%s destroyed", self.config.slug)

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    @property
    def session(self) -> GameSession | None:
        return get_session(self.world) if self.world is not None else None

    # ------------------------------------------------------------------
    # Ticking and rendering
    # ------------------------------------------------------------------
    def tick(self, dt: float | None = None) -> None:
        """Run one fixed step: input resolution, movement, collisions, outcomes, rules."""
        if self._destroyed or self.world is None:
            return
        session = get_session(self.world)
        if session is None or session.state != SessionState.PLAYING:
            return
        step = self.tick_interval if dt is None else dt
        session.elapsed += step
        self._render_deferred = True
        try:
            self.world.process(step)
        finally:
            self._render_deferred = False
        self.render()

    def render(self) -> Frame:
        if self.world is None or self._destroyed:
            return self.frame
        self.frame = self.render_frame(self.world)
        self.event_bus.emit(EVENT_FRAME_RENDERED, frame=self.frame)
        return self.frame

    def set_tick_interval(self, interval: float) -> None:
        self.tick_interval = interval
        if self._scheduled_interval is not None and self._scheduled_interval != interval:
            self._unschedule()
            self._sync_schedule()

    def _scheduled_tick(self, delta_time: float) -> None:
        self.tick()

    def _sync_schedule(self) -> None:
        session = self.session
        playing = session is not None and session.state == SessionState.PLAYING
        if playing and not self._destroyed:
            if self._scheduled_interval is None:
                self.scheduler.schedule(self._scheduled_tick, self.tick_interval)
                self._scheduled_interval = self.tick_interval
        else:
            self._unschedule()

    def _unschedule(self) -> None:
        if self._scheduled_interval is not None:
            self.scheduler.unschedule(self._scheduled_tick)
            self._scheduled_interval = None

    # ------------------------------------------------------------------
    # Host input surface
    # ------------------------------------------------------------------
    def key_down(self, key: str) -> None:
        self.event_bus.emit(EVENT_KEY_DOWN, key=key)

    def key_up(self, key: str) -> None:
        self.event_bus.emit(EVENT_KEY_UP, key=key)

    def touch_control(self, key: str, type: str) -> None:
        self.event_bus.emit(EVENT_TOUCH_CONTROL, key=key, type=type)

    def pointer_down(self, x: float, y: float) -> None:
        self.event_bus.emit(EVENT_POINTER_DOWN, x=x, y=y)

    def pointer_up(self, x: float, y: float) -> None:
        self.event_bus.emit(EVENT_POINTER_UP, x=x, y=y)

    def pointer_move(self, x: float, y: float) -> None:
        self.event_bus.emit(EVENT_POINTER_MOVE, x=x, y=y)

    def visibility_changed(self, visible: bool) -> None:
        self.event_bus.emit(EVENT_VISIBILITY_CHANGED, visible=visible)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def _on_state_changed(self, sender, **payload) -> None:
        self._sync_schedule()
        if not self._render_deferred:
            self.render()

    def _on_start_request(self, sender, **payload) -> None:
        self.start()

    def _on_pause_request(self, sender, **payload) -> None:
        self.pause()

    def _on_resume_request(self, sender, **payload) -> None:
        self.resume()

    def _on_restart_request(self, sender, **payload) -> None:
        self.restart()

    def _on_tick_interval_changed(self, sender, **payload) -> None:
        interval = payload.get("interval")
        if interval:
            self.set_tick_interval(float(interval))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _clear_game_entities(self, world: World) -> None:
        """Delete everything except the session and input latch singletons."""
        session = get_session(world)
        latch = get_latch(world)
        world.clear_database()
        world.create_entity(session or GameSession(lives=self.config.starting_lives))
        if latch is None:
            latch = InputLatch()
        latch.clear()
        world.create_entity(latch)

    def _ensure_alive(self, action: str) -> None:
        if self._destroyed:
            raise GameLifecycleError(f"cannot {action} a destroyed {self.config.slug} game")

    def _ensure_ready(self, action: str) -> None:
        self._ensure_alive(action)
        if self.world is None:
            raise GameLifecycleError(f"{self.config.slug} must be initialised before {action}")
