"""Shared processor plumbing for the fixed-tick pipeline.

Processors run in descending priority inside ``World.process``, so the phase
constants below fix the per-tick order: input, movement, collision, outcomes,
rules, status.
"""
import esper

from retrocade.events.bus import EventBus
from retrocade.utils.session import is_playing

PRIORITY_INPUT = 50
PRIORITY_MOVEMENT = 40
PRIORITY_COLLISION = 30
PRIORITY_OUTCOME = 20
PRIORITY_RULES = 10
PRIORITY_STATUS = 0


class PlayingProcessor(esper.Processor):
    """Processor that steps only while the session is playing.

    A processor earlier in the same tick may end the session; later phases then
    skip their step so nothing moves after game over.
    """

    def __init__(self, event_bus: EventBus) -> None:
        self.event_bus = event_bus

    def process(self, dt: float) -> None:
        if not is_playing(self.world):
            return
        self.step(dt)

    def step(self, dt: float) -> None:
        raise NotImplementedError
