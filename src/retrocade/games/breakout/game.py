from __future__ import annotations

from esper import World

from retrocade.constants import CELL_SIZE, KEY_LEFT, KEY_RIGHT
from retrocade.engine.game_loop import GameLoop
from retrocade.games.breakout.components import BreakoutTuning, Field
from retrocade.games.breakout.factory import spawn_field
from retrocade.games.breakout.render_system import BreakoutRenderSystem
from retrocade.games.breakout.systems import (
    BallCollisionSystem,
    BreakoutMovementSystem,
    PaddleControlSystem,
    WallClearedSystem,
)
from retrocade.rendering.frame import Frame
from retrocade.systems.base_processor import (
    PRIORITY_COLLISION,
    PRIORITY_INPUT,
    PRIORITY_MOVEMENT,
    PRIORITY_RULES,
)
from retrocade.systems.input_system import KeyBindings


class BreakoutGame(GameLoop):
    """Shared brick-breaker; variants differ only in their config options."""

    bindings = KeyBindings(
        directions={},
        held={KEY_LEFT: "left", KEY_RIGHT: "right"},
    )

    @property
    def field(self) -> Field:
        return Field(self.config.canvas_width // CELL_SIZE, self.config.canvas_height // CELL_SIZE)

    def register_processors(self, world: World) -> None:
        field = self.field
        pointer = bool(self.config.option("pointer_paddle", False))
        world.add_processor(PaddleControlSystem(self.event_bus, field, pointer=pointer), priority=PRIORITY_INPUT)
        world.add_processor(BreakoutMovementSystem(self.event_bus, field), priority=PRIORITY_MOVEMENT)
        world.add_processor(BallCollisionSystem(self.event_bus, field), priority=PRIORITY_COLLISION)
        world.add_processor(WallClearedSystem(self.event_bus, field), priority=PRIORITY_RULES + 1)
        self._renderer = BreakoutRenderSystem(self.config)

    def populate(self, world: World) -> None:
        spawn_field(
            world,
            self.field,
            BreakoutTuning(
                speed_multiplier=float(self.config.option("speed_multiplier", 1.15)),
                english=float(self.config.option("english", 0.4)),
            ),
        )

    def render_frame(self, world: World) -> Frame:
        return self._renderer.render(world)


class WallBreakerGame(BreakoutGame):
    slug = "wall-breaker"


class BubblePopGame(BreakoutGame):
    slug = "bubble-pop"
