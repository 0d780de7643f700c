"""Turns raw host input into lifecycle requests or latched player intent."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from esper import World

from retrocade.components.grid_position import Direction
from retrocade.components.input_latch import InputLatch
from retrocade.components.session import SessionState
from retrocade.constants import (
    KEY_CLICK,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_SPACE,
    KEY_UP,
    TOUCH_PRESS_TYPES,
    TOUCH_RELEASE_TYPES,
)
from retrocade.events.bus import (
    EVENT_KEY_DOWN,
    EVENT_KEY_UP,
    EVENT_NAVIGATE_HOME,
    EVENT_PAUSE_REQUEST,
    EVENT_POINTER_DOWN,
    EVENT_POINTER_MOVE,
    EVENT_RESTART_REQUEST,
    EVENT_RESUME_REQUEST,
    EVENT_SESSION_RESET,
    EVENT_SESSION_STATE_CHANGED,
    EVENT_START_REQUEST,
    EVENT_TOUCH_CONTROL,
    EVENT_VISIBILITY_CHANGED,
    EventBus,
)
from retrocade.utils.session import get_session

logger = logging.getLogger(__name__)

ARROW_DIRECTIONS = MappingProxyType({
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
})

_KEY_ALIASES = {
    " ": KEY_SPACE,
    "Spacebar": KEY_SPACE,
    "Esc": "Escape",
    "Return": "Enter",
    "Up": KEY_UP,
    "Down": KEY_DOWN,
    "Left": KEY_LEFT,
    "Right": KEY_RIGHT,
}


def normalize_key(key) -> str:
    """Map host key names onto the logical names bindings are written with."""
    if key is None:
        return ""
    name = str(key)
    name = _KEY_ALIASES.get(name, name)
    if len(name) == 1:
        return name.upper()
    return name


@dataclass(frozen=True)
class KeyBindings:
    """How a game reads keys while playing.

    ``directions`` feed the discrete-direction latch, ``held`` keys feed the
    continuous-hold latch, ``presses`` queue one-shot actions, and any key found
    in ``text_chars`` is queued as a typed character.
    """
    directions: Mapping[str, Direction] = field(default_factory=lambda: ARROW_DIRECTIONS)
    held: Mapping[str, str] = field(default_factory=dict)
    presses: Mapping[str, str] = field(default_factory=dict)
    text_chars: str = ""
    touch_aliases: Mapping[str, str] = field(default_factory=lambda: {KEY_CLICK: KEY_SPACE})


@dataclass(frozen=True)
class LifecycleKeys:
    start: tuple[str, ...] = (KEY_SPACE,)
    pause: tuple[str, ...] = ("P",)
    restart: tuple[str, ...] = (KEY_SPACE,)
    home: tuple[str, ...] = ("H",)
    reset: tuple[str, ...] = ()


class InputSystem:
    """Single receiver for raw host input.

    Lifecycle keys act immediately through request events; everything else is
    latched and left for the next tick to resolve. Nothing is latched unless
    the session is playing.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        bindings: KeyBindings | None = None,
        lifecycle: LifecycleKeys | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.bindings = bindings or KeyBindings()
        self.lifecycle = lifecycle or LifecycleKeys()
        event_bus.subscribe(EVENT_KEY_DOWN, self.on_key_down)
        event_bus.subscribe(EVENT_KEY_UP, self.on_key_up)
        event_bus.subscribe(EVENT_TOUCH_CONTROL, self.on_touch_control)
        event_bus.subscribe(EVENT_POINTER_DOWN, self.on_pointer_down)
        event_bus.subscribe(EVENT_POINTER_MOVE, self.on_pointer_move)
        event_bus.subscribe(EVENT_VISIBILITY_CHANGED, self.on_visibility_changed)
        event_bus.subscribe(EVENT_SESSION_STATE_CHANGED, self.on_state_changed)
        event_bus.subscribe(EVENT_SESSION_RESET, self.on_session_reset)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def on_key_down(self, sender, **payload) -> None:
        self.handle_key_down(normalize_key(payload.get("key")))

    def on_key_up(self, sender, **payload) -> None:
        self.handle_key_up(normalize_key(payload.get("key")))

    def on_touch_control(self, sender, **payload) -> None:
        key = normalize_key(payload.get("key"))
        key = normalize_key(self.bindings.touch_aliases.get(key, key))
        kind = str(payload.get("type") or "").lower()
        if kind in TOUCH_PRESS_TYPES:
            self.handle_key_down(key)
        elif kind in TOUCH_RELEASE_TYPES:
            self.handle_key_up(key)

    def on_pointer_down(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        if x is None or y is None:
            return
        state = self._state()
        if state == SessionState.MENU:
            self._request(EVENT_START_REQUEST, "pointer")
        elif state == SessionState.GAME_OVER:
            self._request(EVENT_RESTART_REQUEST, "pointer")
        elif state == SessionState.PLAYING:
            latch = self._latch()
            if latch is not None:
                latch.pointer_presses.append((float(x), float(y)))

    def on_pointer_move(self, sender, **payload) -> None:
        if self._state() != SessionState.PLAYING:
            return
        latch = self._latch()
        if latch is None:
            return
        x = payload.get("x")
        y = payload.get("y")
        if x is not None:
            latch.pointer_x = float(x)
        if y is not None:
            latch.pointer_y = float(y)

    def on_visibility_changed(self, sender, **payload) -> None:
        if payload.get("visible", True):
            return
        if self._state() == SessionState.PLAYING:
            self._request(EVENT_PAUSE_REQUEST, "visibility")

    def on_state_changed(self, sender, **payload) -> None:
        if payload.get("new_state") != SessionState.PLAYING:
            self._clear_latch()

    def on_session_reset(self, sender, **payload) -> None:
        self._clear_latch()

    # ------------------------------------------------------------------
    # Key routing
    # ------------------------------------------------------------------
    def handle_key_down(self, key: str) -> None:
        if not key:
            return
        state = self._state()
        if state == SessionState.MENU:
            if key in self.lifecycle.start:
                self._request(EVENT_START_REQUEST, "key")
            return
        if state in (SessionState.PLAYING, SessionState.PAUSED) and key in self.lifecycle.reset:
            self._request(EVENT_RESTART_REQUEST, "key")
            return
        if state == SessionState.PAUSED:
            if key in self.lifecycle.pause:
                self._request(EVENT_RESUME_REQUEST, "key")
            return
        if state == SessionState.GAME_OVER:
            if key in self.lifecycle.restart or key in self.lifecycle.reset:
                self._request(EVENT_RESTART_REQUEST, "key")
            elif key in self.lifecycle.home:
                self.event_bus.emit(EVENT_NAVIGATE_HOME, source="key")
            return
        if state != SessionState.PLAYING:
            return
        if key in self.lifecycle.pause:
            self._request(EVENT_PAUSE_REQUEST, "key")
            return
        self._latch_key(key)

    def handle_key_up(self, key: str) -> None:
        action = self.bindings.held.get(key)
        if action is None:
            return
        latch = self._latch()
        if latch is not None:
            latch.held.discard(action)

    def _latch_key(self, key: str) -> None:
        latch = self._latch()
        if latch is None:
            return
        bindings = self.bindings
        direction = bindings.directions.get(key)
        if direction is not None:
            latch.direction = direction
        action = bindings.held.get(key)
        if action is not None:
            latch.held.add(action)
        press = bindings.presses.get(key)
        if press is not None:
            latch.presses.append(press)
        elif len(key) == 1 and key in bindings.text_chars:
            latch.presses.append(key)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _request(self, name: str, source: str) -> None:
        logger.debug("lifecycle request %s from %s", name, source)
        self.event_bus.emit(name, source=source)

    def _state(self) -> SessionState | None:
        session = get_session(self.world)
        return session.state if session else None

    def _latch(self) -> InputLatch | None:
        for _, latch in self.world.get_component(InputLatch):
            return latch
        return None

    def _clear_latch(self) -> None:
        latch = self._latch()
        if latch is not None:
            latch.clear()
