import random

from esper import World

from retrocade.components.input_latch import InputLatch
from retrocade.components.session import GameSession, SessionState
from retrocade.constants import STARTING_LIVES
from retrocade.events.bus import EventBus


def create_world(
    event_bus: EventBus,
    initial_state: SessionState = SessionState.MENU,
    *,
    lives: int = STARTING_LIVES,
    rng: random.Random | None = None,
) -> World:
    """Build an esper world holding the session and input latch singletons."""
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "event_bus", event_bus)

    world.create_entity(GameSession(state=initial_state, lives=lives))
    world.create_entity(InputLatch())
    return world


def get_latch(world: World) -> InputLatch | None:
    for _, latch in world.get_component(InputLatch):
        return latch
    return None
