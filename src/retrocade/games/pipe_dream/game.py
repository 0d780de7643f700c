from __future__ import annotations

from esper import World

from retrocade.engine.game_loop import GameLoop
from retrocade.games.pipe_dream.components import PipeGrid
from retrocade.games.pipe_dream.factory import spawn_board
from retrocade.games.pipe_dream.render_system import PipeDreamRenderSystem
from retrocade.games.pipe_dream.systems import FlowCompleteSystem, PipeRotateSystem, pipe_grid, pipe_map, trace_flow
from retrocade.rendering.frame import Frame
from retrocade.systems.base_processor import PRIORITY_INPUT, PRIORITY_OUTCOME
from retrocade.systems.input_system import KeyBindings


class PipeDreamGame(GameLoop):
    """Rotate pipes until water can run from the source to the drain."""

    slug = "pipe-dream"
    bindings = KeyBindings(directions={})
    reset_keys = ("R",)

    def new_grid(self) -> PipeGrid:
        size = int(self.config.option("grid_size", 8))
        tile = int(self.config.option("tile_size", 40))
        return PipeGrid(
            size=size,
            tile=tile,
            origin_x=(self.config.canvas_width - size * tile) / 2,
            origin_y=(self.config.canvas_height - size * tile) / 2,
        )

    def register_processors(self, world: World) -> None:
        world.add_processor(PipeRotateSystem(self.event_bus), priority=PRIORITY_INPUT)
        world.add_processor(FlowCompleteSystem(self.event_bus, self.config), priority=PRIORITY_OUTCOME)
        self._renderer = PipeDreamRenderSystem(self.config)

    def populate(self, world: World) -> None:
        spawn_board(world, self.new_grid(), float(self.config.option("time_limit", 60.0)))
        grid = pipe_grid(world)
        grid.flow, _ = trace_flow(grid, pipe_map(world))

    def render_frame(self, world: World) -> Frame:
        return self._renderer.render(world)
