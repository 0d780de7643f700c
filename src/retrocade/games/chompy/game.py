from __future__ import annotations

from typing import Sequence

from esper import World

from retrocade.engine.game_loop import GameLoop
from retrocade.games.chompy.factory import spawn_board, spawn_chomper, spawn_ghosts, spawn_pellets
from retrocade.games.chompy.maze import CLASSIC_MAZE, parse_maze
from retrocade.games.chompy.render_system import ChompyRenderSystem
from retrocade.games.chompy.systems import (
    ChompCollisionSystem,
    ChomperMoveSystem,
    GhostMoveSystem,
    MazeClearedSystem,
)
from retrocade.rendering.frame import Frame
from retrocade.systems.base_processor import (
    PRIORITY_COLLISION,
    PRIORITY_INPUT,
    PRIORITY_MOVEMENT,
    PRIORITY_OUTCOME,
)


class ChompyGame(GameLoop):
    """Maze chase: clear every dot while four ghosts hunt you down."""

    slug = "chompy"

    def __init__(self, host=None, *, template: Sequence[str] = CLASSIC_MAZE, **kwargs) -> None:
        super().__init__(host, **kwargs)
        # Parsed eagerly so a bad template fails at construction.
        self.maze = parse_maze(template)

    def register_processors(self, world: World) -> None:
        world.add_processor(ChomperMoveSystem(self.event_bus), priority=PRIORITY_INPUT)
        world.add_processor(GhostMoveSystem(self.event_bus, self.config), priority=PRIORITY_MOVEMENT)
        world.add_processor(ChompCollisionSystem(self.event_bus, self.config), priority=PRIORITY_COLLISION)
        world.add_processor(MazeClearedSystem(self.event_bus, self.config), priority=PRIORITY_OUTCOME)
        self._renderer = ChompyRenderSystem(self.config)

    def populate(self, world: World) -> None:
        config = self.config
        spawn_board(world, self.maze, float(config.option("mode_seconds", 7.0)))
        spawn_pellets(world, self.maze)
        spawn_chomper(world, self.maze, float(config.option("player_step", 0.15)))
        spawn_ghosts(world, self.maze, float(config.option("ghost_step", 0.2)))

    def render_frame(self, world: World) -> Frame:
        return self._renderer.render(world)
