from __future__ import annotations

from esper import World

from retrocade.constants import CELL_SIZE, KEY_BACKSPACE, KEY_ENTER, KEY_LEFT, KEY_RIGHT
from retrocade.engine.game_loop import GameLoop
from retrocade.games.number_defenders.components import Battlefield
from retrocade.games.number_defenders.factory import spawn_battlefield
from retrocade.games.number_defenders.render_system import NumberDefendersRenderSystem
from retrocade.games.number_defenders.systems import (
    AnswerInputSystem,
    FallingProblemSystem,
    InvasionSystem,
)
from retrocade.rendering.frame import Frame
from retrocade.systems.base_processor import (
    PRIORITY_COLLISION,
    PRIORITY_INPUT,
    PRIORITY_MOVEMENT,
)
from retrocade.systems.input_system import KeyBindings
from retrocade.systems.particle_system import ParticleSystem


class NumberDefendersGame(GameLoop):
    """Type the answer to the problem falling in the cannon's lane before it lands."""

    slug = "number-defenders"
    bindings = KeyBindings(
        directions={},
        presses={
            KEY_LEFT: "left",
            KEY_RIGHT: "right",
            KEY_BACKSPACE: "backspace",
            KEY_ENTER: "clear",
        },
        text_chars="0123456789-",
    )

    @property
    def field(self) -> Battlefield:
        return Battlefield(
            self.config.canvas_width // CELL_SIZE,
            self.config.canvas_height // CELL_SIZE,
            int(self.config.option("lanes", 4)),
        )

    def register_processors(self, world: World) -> None:
        field = self.field
        world.add_processor(AnswerInputSystem(self.event_bus, field, self.config), priority=PRIORITY_INPUT)
        world.add_processor(FallingProblemSystem(self.event_bus, self.config), priority=PRIORITY_MOVEMENT)
        world.add_processor(ParticleSystem(self.event_bus), priority=PRIORITY_MOVEMENT)
        world.add_processor(InvasionSystem(self.event_bus, field, self.config), priority=PRIORITY_COLLISION)
        self._renderer = NumberDefendersRenderSystem(self.config, field)

    def populate(self, world: World) -> None:
        spawn_battlefield(
            world,
            self.field,
            operation=str(self.config.option("operation", "both")),
            time_limit=self.config.option("time_limit"),
            answers_per_level=int(self.config.option("answers_per_level", 10)),
        )

    def render_frame(self, world: World) -> Frame:
        return self._renderer.render(world)
