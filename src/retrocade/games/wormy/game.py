from __future__ import annotations

from esper import World

from retrocade.engine.game_loop import GameLoop
from retrocade.games.wormy.components import WormyGrid
from retrocade.games.wormy.factory import spawn_food, spawn_snake
from retrocade.games.wormy.render_system import WormyRenderSystem
from retrocade.games.wormy.systems import FeedingSystem, SlitherSystem, SteerSystem
from retrocade.constants import CELL_SIZE
from retrocade.rendering.frame import Frame
from retrocade.systems.base_processor import (
    PRIORITY_COLLISION,
    PRIORITY_INPUT,
    PRIORITY_MOVEMENT,
)


class WormyGame(GameLoop):
    """Snake: steer with the arrows, eat food, never bite yourself."""

    slug = "wormy"

    @property
    def grid(self) -> WormyGrid:
        return WormyGrid(
            cols=self.config.canvas_width // CELL_SIZE,
            rows=self.config.canvas_height // CELL_SIZE,
            wrap=bool(self.config.option("wrap", True)),
        )

    def register_processors(self, world: World) -> None:
        grid = self.grid
        world.add_processor(SteerSystem(self.event_bus), priority=PRIORITY_INPUT)
        world.add_processor(SlitherSystem(self.event_bus, grid), priority=PRIORITY_MOVEMENT)
        world.add_processor(FeedingSystem(self.event_bus, grid, self.config), priority=PRIORITY_COLLISION)
        self._renderer = WormyRenderSystem(self.config)

    def populate(self, world: World) -> None:
        grid = self.grid
        spawn_snake(world, grid)
        spawn_food(world, grid)

    def render_frame(self, world: World) -> Frame:
        return self._renderer.render(world)
