from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from blinker import Signal


@dataclass(frozen=True)
class Subscription:
    """Handle returned by ``subscribe`` so a receiver can be released later."""
    name: str
    fn: Callable[..., Any]


class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn) -> Subscription:
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)
        return Subscription(name, fn)

    def unsubscribe(self, subscription: Subscription) -> None:
        sig = self._signals.get(subscription.name)
        if sig:
            sig.disconnect(subscription.fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)

    def receiver_count(self, name: str) -> int:
        sig = self._signals.get(name)
        return len(sig.receivers) if sig else 0

    def scoped(self) -> "ScopedEventBus":
        return ScopedEventBus(self)


@dataclass
class ScopedEventBus:
    """View onto a shared bus that remembers every subscription made through it.

    A game owns one of these; ``close`` drops all of its receivers at once so a
    destroyed game stops reacting to host events still flowing on the parent bus.
    """
    parent: EventBus
    _subscriptions: List[Subscription] = field(default_factory=list)
    closed: bool = False

    def subscribe(self, name: str, fn) -> Subscription:
        subscription = self.parent.subscribe(name, fn)
        self._subscriptions.append(subscription)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        self.parent.unsubscribe(subscription)
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    def emit(self, name: str, **payload):
        if self.closed:
            return
        self.parent.emit(name, **payload)

    def receiver_count(self, name: str) -> int:
        return self.parent.receiver_count(name)

    def close(self) -> None:
        for subscription in self._subscriptions:
            self.parent.unsubscribe(subscription)
        self._subscriptions.clear()
        self.closed = True


# ============================================================================
# HOST INPUT
# ============================================================================
EVENT_KEY_DOWN = "key_down"                  # payload: key=str
EVENT_KEY_UP = "key_up"                      # payload: key=str
EVENT_TOUCH_CONTROL = "touch_control"        # payload: key=str, type=str ("down"/"up", "keydown"/"keyup", "mousedown"/"mouseup")
EVENT_POINTER_DOWN = "pointer_down"          # payload: x=float, y=float (canvas pixels, top-left origin)
EVENT_POINTER_UP = "pointer_up"              # payload: x=float, y=float
EVENT_POINTER_MOVE = "pointer_move"          # payload: x=float, y=float
EVENT_VISIBILITY_CHANGED = "visibility_changed"  # payload: visible=bool


# ============================================================================
# LIFECYCLE REQUESTS
# ============================================================================
EVENT_START_REQUEST = "start_request"        # payload: source=str
EVENT_PAUSE_REQUEST = "pause_request"        # payload: source=str
EVENT_RESUME_REQUEST = "resume_request"      # payload: source=str
EVENT_RESTART_REQUEST = "restart_request"    # payload: source=str
EVENT_NAVIGATE_HOME = "navigate_home"        # payload: source=str


# ============================================================================
# SESSION
# ============================================================================
EVENT_SESSION_STATE_CHANGED = "session_state_changed"  # payload: previous_state, new_state, reason=str
EVENT_SESSION_RESET = "session_reset"                  # payload: score=int, lives=int, level=int
EVENT_SCORE_CHANGED = "score_changed"                  # payload: score=int, delta=int, display=str|None
EVENT_LIVES_CHANGED = "lives_changed"                  # payload: lives=int, delta=int, reason=str
EVENT_LEVEL_CHANGED = "level_changed"                  # payload: level=int
EVENT_LEVEL_COMPLETE = "level_complete"                # payload: level=int, bonus=int


# ============================================================================
# STATUS & EFFECTS
# ============================================================================
EVENT_STATUS_SHOW = "status_show"            # payload: text=str, level=str, duration=float|None
EVENT_STATUS_HIDE = "status_hide"            # payload: (none)
EVENT_SOUND = "sound"                        # payload: frequency=int, duration_ms=int, waveform=str, volume=float
EVENT_CELEBRATE = "celebrate"                # payload: kind=str, x=float|None, y=float|None


# ============================================================================
# RENDERING
# ============================================================================
EVENT_FRAME_RENDERED = "frame_rendered"      # payload: frame=Frame
EVENT_TICK_INTERVAL_CHANGED = "tick_interval_changed"  # payload: interval=float
