from esper import World

from retrocade.components.session import SessionState
from retrocade.components.status_banner import StatusBanner
from retrocade.config import GameConfig
from retrocade.events.bus import (
    EVENT_SESSION_STATE_CHANGED,
    EVENT_STATUS_HIDE,
    EVENT_STATUS_SHOW,
    EventBus,
)
from retrocade.rendering.overlay import key_label
from retrocade.systems.base_processor import PlayingProcessor
from retrocade.utils.session import get_session, hide_status, show_status


class StatusSystem(PlayingProcessor):
    """Keeps the host status line in step with the session.

    Announces pause and game over, clears the line on resume, and hides timed
    banners (level complete) once their game-time duration runs out.
    """

    def __init__(self, world: World, event_bus: EventBus, config: GameConfig) -> None:
        super().__init__(event_bus)
        self.world = world
        self.config = config
        event_bus.subscribe(EVENT_SESSION_STATE_CHANGED, self._on_state_changed)
        event_bus.subscribe(EVENT_STATUS_SHOW, self._on_status_show)
        event_bus.subscribe(EVENT_STATUS_HIDE, self._on_status_hide)

    def step(self, dt: float) -> None:
        banner = self._banner()
        if banner is None or banner.remaining is None:
            return
        banner.remaining -= dt
        if banner.remaining <= 0:
            hide_status(self.event_bus)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def _on_state_changed(self, sender, **payload) -> None:
        new_state = payload.get("new_state")
        if new_state == SessionState.PAUSED:
            keys = " or ".join(key_label(k) for k in self.config.pause_keys)
            show_status(self.event_bus, f"Game Paused - Press {keys} to resume", "warning")
        elif new_state == SessionState.PLAYING:
            hide_status(self.event_bus)
        elif new_state == SessionState.GAME_OVER:
            session = get_session(self.world)
            score = session.score if session else 0
            show_status(self.event_bus, f"Game Over! Final Score: {score}", "error")

    def _on_status_show(self, sender, **payload) -> None:
        self._clear_banner()
        duration = payload.get("duration")
        self.world.create_entity(
            StatusBanner(
                text=str(payload.get("text", "")),
                level=str(payload.get("level") or "info"),
                remaining=float(duration) if duration is not None else None,
            )
        )

    def _on_status_hide(self, sender, **payload) -> None:
        self._clear_banner()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _banner(self) -> StatusBanner | None:
        for _, banner in self.world.get_component(StatusBanner):
            return banner
        return None

    def _clear_banner(self) -> None:
        for ent, _ in list(self.world.get_component(StatusBanner)):
            self.world.delete_entity(ent, immediate=True)
