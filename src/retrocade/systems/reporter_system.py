import logging

from esper import World

from retrocade.engine.host import GameHost
from retrocade.events.bus import (
    EVENT_LEVEL_CHANGED,
    EVENT_LIVES_CHANGED,
    EVENT_SCORE_CHANGED,
    EVENT_STATUS_HIDE,
    EVENT_STATUS_SHOW,
    EventBus,
)

logger = logging.getLogger(__name__)


class ReporterSystem:
    """Forwards score, lives, level and status changes to the host as they happen."""

    def __init__(self, world: World, event_bus: EventBus, host: GameHost) -> None:
        self.world = world
        self.event_bus = event_bus
        self.host = host
        event_bus.subscribe(EVENT_SCORE_CHANGED, self._on_score_changed)
        event_bus.subscribe(EVENT_LIVES_CHANGED, self._on_lives_changed)
        event_bus.subscribe(EVENT_LEVEL_CHANGED, self._on_level_changed)
        event_bus.subscribe(EVENT_STATUS_SHOW, self._on_status_show)
        event_bus.subscribe(EVENT_STATUS_HIDE, self._on_status_hide)

    def _on_score_changed(self, sender, **payload) -> None:
        display = payload.get("display")
        self.host.update_score(display if display is not None else payload.get("score", 0))

    def _on_lives_changed(self, sender, **payload) -> None:
        self.host.update_lives(int(payload.get("lives", 0)))

    def _on_level_changed(self, sender, **payload) -> None:
        self.host.update_level(int(payload.get("level", 1)))

    def _on_status_show(self, sender, **payload) -> None:
        text = payload.get("text")
        if not text:
            return
        self.host.show_status(str(text), str(payload.get("level") or "info"))

    def _on_status_hide(self, sender, **payload) -> None:
        self.host.hide_status()
