from __future__ import annotations

from esper import World

from retrocade.constants import CELL_SIZE, KEY_DOWN, KEY_UP
from retrocade.engine.game_loop import GameLoop
from retrocade.games.paddle_ball.components import Court
from retrocade.games.paddle_ball.factory import spawn_court
from retrocade.games.paddle_ball.render_system import PaddleBallRenderSystem
from retrocade.games.paddle_ball.systems import (
    BallCollisionSystem,
    CourtMovementSystem,
    PaddleControlSystem,
)
from retrocade.rendering.frame import Frame
from retrocade.systems.base_processor import (
    PRIORITY_COLLISION,
    PRIORITY_INPUT,
    PRIORITY_MOVEMENT,
)
from retrocade.systems.input_system import KeyBindings


class PaddleBallGame(GameLoop):
    """Two-player pong: W/S drive the left paddle, the arrows drive the right."""

    slug = "paddle-ball"
    bindings = KeyBindings(
        directions={},
        held={
            "W": "left_up",
            "S": "left_down",
            KEY_UP: "right_up",
            KEY_DOWN: "right_down",
        },
    )
    reset_keys = ("R",)

    @property
    def court(self) -> Court:
        return Court(self.config.canvas_width // CELL_SIZE, self.config.canvas_height // CELL_SIZE)

    def register_processors(self, world: World) -> None:
        court = self.court
        world.add_processor(PaddleControlSystem(self.event_bus), priority=PRIORITY_INPUT)
        world.add_processor(CourtMovementSystem(self.event_bus, court), priority=PRIORITY_MOVEMENT)
        world.add_processor(BallCollisionSystem(self.event_bus, court), priority=PRIORITY_COLLISION)
        self._renderer = PaddleBallRenderSystem(self.config)

    def populate(self, world: World) -> None:
        spawn_court(
            world,
            self.court,
            paddle_speed=float(self.config.option("paddle_speed", 0.5)),
            winning_score=int(self.config.option("winning_score", 11)),
        )

    def render_frame(self, world: World) -> Frame:
        return self._renderer.render(world)
