import logging

from esper import World

from retrocade.engine.host import GameHost
from retrocade.events.bus import EVENT_CELEBRATE, EVENT_SOUND, EventBus

logger = logging.getLogger(__name__)


class EffectsSystem:
    """Relays sound and celebration requests to optional host collaborators.

    Missing collaborators are skipped; a collaborator that raises is logged and
    ignored so gameplay never depends on audio or visual effects.
    """

    def __init__(self, world: World, event_bus: EventBus, host: GameHost,
                 modules: tuple[str, ...] = ("audio",)) -> None:
        self.world = world
        self.host = host
        self.modules = modules
        event_bus.subscribe(EVENT_SOUND, self._on_sound)
        event_bus.subscribe(EVENT_CELEBRATE, self._on_celebrate)

    def _on_sound(self, sender, **payload) -> None:
        audio = self.host.audio if "audio" in self.modules else None
        if audio is None:
            return
        try:
            audio.beep(
                int(payload.get("frequency", 440)),
                int(payload.get("duration_ms", 100)),
                str(payload.get("waveform", "square")),
                float(payload.get("volume", 0.1)),
            )
        except Exception:
            logger.warning("audio collaborator failed", exc_info=True)

    def _on_celebrate(self, sender, **payload) -> None:
        kind = payload.get("kind") or "fireworks"
        effects = self.host.effects if kind in self.modules else None
        if effects is None:
            return
        try:
            effects.celebrate(kind, payload.get("x"), payload.get("y"))
        except Exception:
            logger.warning("%s collaborator failed", kind, exc_info=True)
