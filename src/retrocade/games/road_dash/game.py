from __future__ import annotations

from esper import World

from retrocade.constants import CELL_SIZE, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP
from retrocade.engine.game_loop import GameLoop
from retrocade.games.road_dash.components import Road, TrafficTuning
from retrocade.games.road_dash.factory import spawn_road
from retrocade.games.road_dash.render_system import RoadDashRenderSystem
from retrocade.games.road_dash.systems import (
    CrossingSystem,
    HopSystem,
    RoadCollisionSystem,
    TrafficSystem,
)
from retrocade.rendering.frame import Frame
from retrocade.systems.base_processor import (
    PRIORITY_COLLISION,
    PRIORITY_INPUT,
    PRIORITY_MOVEMENT,
    PRIORITY_RULES,
)
from retrocade.systems.input_system import KeyBindings


class RoadDashGame(GameLoop):
    """Frog crossing: hop up through the traffic lanes to the far kerb."""

    slug = "road-dash"
    bindings = KeyBindings(
        directions={},
        presses={
            KEY_UP: "up",
            KEY_DOWN: "down",
            KEY_LEFT: "left",
            KEY_RIGHT: "right",
            "R": "home",
        },
        touch_aliases={"click": KEY_UP},
    )

    @property
    def road(self) -> Road:
        return Road(self.config.canvas_width // CELL_SIZE, self.config.canvas_height // CELL_SIZE)

    def register_processors(self, world: World) -> None:
        road = self.road
        world.add_processor(HopSystem(self.event_bus, road), priority=PRIORITY_INPUT)
        world.add_processor(TrafficSystem(self.event_bus, road), priority=PRIORITY_MOVEMENT)
        world.add_processor(RoadCollisionSystem(self.event_bus), priority=PRIORITY_COLLISION)
        world.add_processor(CrossingSystem(self.event_bus, road, self.config), priority=PRIORITY_RULES + 1)
        self._renderer = RoadDashRenderSystem(self.config)

    def populate(self, world: World) -> None:
        spawn_road(
            world,
            self.road,
            TrafficTuning(
                base_speed=float(self.config.option("base_speed", 4.0)),
                speedup=float(self.config.option("speedup", 1.2)),
            ),
        )

    def render_frame(self, world: World) -> Frame:
        return self._renderer.render(world)
