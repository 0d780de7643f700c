"""Rendering for the math defence game."""
from esper import World

from retrocade.components.appearance import Appearance
from retrocade.components.body import Body
from retrocade.components.countdown import Countdown
from retrocade.components.particle import Particle
from retrocade.config import GameConfig
from retrocade.constants import CELL_SIZE, COLOR_TEXT
from retrocade.games.number_defenders.components import AnswerBuffer, Battlefield, Cannon, Problem
from retrocade.rendering.frame import Frame
from retrocade.rendering.overlay import draw_session_overlay
from retrocade.utils.session import get_session

LANE_COLOR = (60, 60, 60)


class NumberDefendersRenderSystem:
    def __init__(self, config: GameConfig, field: Battlefield, scale: int = CELL_SIZE) -> None:
        self.config = config
        self.field = field
        self.scale = scale

    def render(self, world: World) -> Frame:
        frame = Frame(self.config.canvas_width, self.config.canvas_height)
        s = self.scale
        for lane in range(1, self.field.lanes):
            x = lane * self.field.lane_width * s
            frame.line(x, 0, x, frame.height, LANE_COLOR, 2)

        for _, (_problem, body, look) in world.get_components(Problem, Body, Appearance):
            frame.text(look.label, body.center_x * s, body.center_y * s, look.color, size=18, bold=True)
        for _, particle in world.get_component(Particle):
            alpha = max(0, min(255, int(particle.life * 255)))
            frame.rect(particle.x * s - 2, particle.y * s - 2, 4, 4, (*particle.color, alpha))
        for _, (_cannon, body, look) in world.get_components(Cannon, Body, Appearance):
            frame.rect(body.x * s, body.y * s, body.width * s, body.height * s, look.color)

        for _, buffer in world.get_component(AnswerBuffer):
            frame.text(f"Answer: {buffer.text}", 10, frame.height - 20, COLOR_TEXT, size=16, anchor_x="left")
        for _, countdown in world.get_component(Countdown):
            frame.text(f"Time: {int(countdown.remaining)}", frame.width - 10, 20, COLOR_TEXT,
                       size=16, anchor_x="right")

        session = get_session(world)
        if session is not None:
            draw_session_overlay(
                frame,
                session,
                self.config,
                instructions=("Move to a lane with the arrows", "Type the answer to fire"),
            )
        return frame
