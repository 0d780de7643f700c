"""Rendering for the brick-breaking games."""
from esper import World

from retrocade.components.appearance import Appearance
from retrocade.components.body import Body
from retrocade.config import GameConfig
from retrocade.constants import CELL_SIZE
from retrocade.games.breakout.components import Ball, Brick, Paddle
from retrocade.rendering.frame import Frame
from retrocade.rendering.overlay import draw_session_overlay
from retrocade.utils.session import get_session


class BreakoutRenderSystem:
    def __init__(self, config: GameConfig, scale: int = CELL_SIZE) -> None:
        self.config = config
        self.scale = scale

    def render(self, world: World) -> Frame:
        frame = Frame(self.config.canvas_width, self.config.canvas_height)
        s = self.scale
        for _, (_brick, body, look) in world.get_components(Brick, Body, Appearance):
            frame.rect(body.x * s, body.y * s, body.width * s - 1, body.height * s - 1, look.color)
        for _, (ball, body, look) in world.get_components(Ball, Body, Appearance):
            if ball.respawn_in > 0:
                continue
            radius = body.width * s / 2
            frame.circle(body.x * s + radius, body.y * s + radius, radius, look.color)
        for _, (_paddle, body, look) in world.get_components(Paddle, Body, Appearance):
            frame.rect(body.x * s, body.y * s, body.width * s, body.height * s, look.color)

        session = get_session(world)
        if session is not None:
            hints = ["Left/Right arrows move the paddle"]
            if self.config.option("pointer_paddle"):
                hints.append("Or steer with the mouse")
            draw_session_overlay(frame, session, self.config, instructions=hints)
        return frame
