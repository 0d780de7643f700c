from __future__ import annotations

from esper import World

from retrocade.constants import KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_SPACE, KEY_UP
from retrocade.engine.game_loop import GameLoop
from retrocade.games.block_stack.factory import spawn_playfield, take_next
from retrocade.games.block_stack.render_system import BlockStackRenderSystem
from retrocade.games.block_stack.systems import GravitySystem, PieceControlSystem, SettleSystem, playfield
from retrocade.rendering.frame import Frame
from retrocade.systems.base_processor import (
    PRIORITY_INPUT,
    PRIORITY_MOVEMENT,
    PRIORITY_OUTCOME,
)
from retrocade.systems.input_system import KeyBindings

BLOCK_SIZE = 24


class BlockStackGame(GameLoop):
    """Falling tetrominoes; full rows clear and score, a blocked spawn ends the game."""

    slug = "block-stack"
    bindings = KeyBindings(
        directions={},
        presses={
            KEY_LEFT: "left",
            KEY_RIGHT: "right",
            KEY_DOWN: "soft_drop",
            KEY_UP: "rotate",
            "Z": "rotate",
            KEY_SPACE: "hard_drop",
        },
        touch_aliases={"click": KEY_UP},
    )

    def register_processors(self, world: World) -> None:
        world.add_processor(PieceControlSystem(self.event_bus), priority=PRIORITY_INPUT)
        world.add_processor(GravitySystem(self.event_bus), priority=PRIORITY_MOVEMENT)
        world.add_processor(SettleSystem(self.event_bus, self.config), priority=PRIORITY_OUTCOME)
        self._renderer = BlockStackRenderSystem(self.config, BLOCK_SIZE)

    def populate(self, world: World) -> None:
        spawn_playfield(
            world,
            self.config.canvas_width // BLOCK_SIZE,
            self.config.canvas_height // BLOCK_SIZE,
            float(self.config.option("drop_interval", 1.0)),
        )
        field, _ = playfield(world)
        take_next(world, field)

    def render_frame(self, world: World) -> Frame:
        return self._renderer.render(world)
