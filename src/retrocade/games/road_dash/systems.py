"""Per-tick processors for the road-crossing game."""
from __future__ import annotations

from esper import World

from retrocade.components.body import Body
from retrocade.components.grid_position import GridPosition
from retrocade.config import GameConfig
from retrocade.events.bus import EventBus
from retrocade.games.road_dash.components import Frog, Road, TrafficTuning, Vehicle
from retrocade.games.road_dash.factory import clear_traffic, spawn_traffic
from retrocade.systems.base_processor import PlayingProcessor
from retrocade.utils.session import complete_level, get_session, lose_life, play_sound
from retrocade.world import get_latch

HOPS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}


def _frog(world: World) -> tuple[Frog, GridPosition] | None:
    for _, (frog, pos) in world.get_components(Frog, GridPosition):
        return frog, pos
    return None


def _send_home(frog: Frog, pos: GridPosition) -> None:
    pos.x = frog.start_x
    pos.y = frog.start_y


class HopSystem(PlayingProcessor):
    """Each queued arrow press is one hop; hops off the board are dropped."""

    def __init__(self, event_bus: EventBus, road: Road) -> None:
        super().__init__(event_bus)
        self.road = road

    def step(self, dt: float) -> None:
        latch = get_latch(self.world)
        found = _frog(self.world)
        if latch is None or found is None:
            return
        frog, pos = found
        for action in latch.drain_presses():
            if action == "home":
                _send_home(frog, pos)
                continue
            delta = HOPS.get(action)
            if delta is None:
                continue
            nx, ny = pos.x + delta[0], pos.y + delta[1]
            if 0 <= nx < self.road.cols and 0 <= ny < self.road.rows:
                pos.x, pos.y = nx, ny
                play_sound(self.event_bus, 520, 40)


class TrafficSystem(PlayingProcessor):
    """Drives vehicles along their lane and wraps them at the screen edge."""

    def __init__(self, event_bus: EventBus, road: Road) -> None:
        super().__init__(event_bus)
        self.road = road

    def step(self, dt: float) -> None:
        for _, (_vehicle, body) in self.world.get_components(Vehicle, Body):
            body.x += body.dx * dt
            if body.dx > 0 and body.x > self.road.cols:
                body.x = -body.width
            elif body.dx < 0 and body.right < 0:
                body.x = float(self.road.cols)


class RoadCollisionSystem(PlayingProcessor):
    def step(self, dt: float) -> None:
        found = _frog(self.world)
        if found is None:
            return
        frog, pos = found
        cell = Body(pos.x, pos.y, 1, 1)
        for _, (_vehicle, body) in self.world.get_components(Vehicle, Body):
            if cell.overlaps(body):
                play_sound(self.event_bus, 150, 300, waveform="sawtooth")
                remaining = lose_life(self.world, self.event_bus, reason="hit")
                if remaining > 0:
                    _send_home(frog, pos)
                return


class CrossingSystem(PlayingProcessor):
    """Reaching the far kerb finishes the level and rebuilds faster traffic."""

    def __init__(self, event_bus: EventBus, road: Road, config: GameConfig) -> None:
        super().__init__(event_bus)
        self.road = road
        self.bonus = int(config.option("crossing_bonus", 100))

    def step(self, dt: float) -> None:
        found = _frog(self.world)
        if found is None:
            return
        frog, pos = found
        if pos.y != 0:
            return
        session = get_session(self.world)
        complete_level(self.world, self.event_bus, bonus=self.bonus * (session.level + 1))
        for _, tuning in self.world.get_component(TrafficTuning):
            tuning.base_speed *= tuning.speedup
            clear_traffic(self.world)
            spawn_traffic(self.world, self.road, tuning.base_speed)
        _send_home(frog, pos)
