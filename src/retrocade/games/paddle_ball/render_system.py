"""Rendering for the paddle game."""
from esper import World

from retrocade.components.appearance import Appearance
from retrocade.components.body import Body
from retrocade.config import GameConfig
from retrocade.constants import CELL_SIZE, COLOR_TEXT
from retrocade.games.paddle_ball.components import Ball, Paddle
from retrocade.games.paddle_ball.systems import match_score
from retrocade.rendering.frame import Frame
from retrocade.rendering.overlay import draw_session_overlay
from retrocade.utils.session import get_session

NET_COLOR = (90, 90, 90)


class PaddleBallRenderSystem:
    def __init__(self, config: GameConfig, scale: int = CELL_SIZE) -> None:
        self.config = config
        self.scale = scale

    def render(self, world: World) -> Frame:
        frame = Frame(self.config.canvas_width, self.config.canvas_height)
        s = self.scale
        mid = frame.width / 2
        for y in range(0, frame.height, s):
            frame.line(mid, y, mid, y + s / 2, NET_COLOR, 2)

        for _, (_paddle, body, look) in world.get_components(Paddle, Body, Appearance):
            frame.rect(body.x * s, body.y * s, body.width * s, body.height * s, look.color)
        for _, (_ball, body, look) in world.get_components(Ball, Body, Appearance):
            radius = body.width * s / 2
            frame.circle(body.x * s + radius, body.y * s + radius, radius, look.color)

        score = match_score(world)
        if score is not None:
            frame.text(score.display, mid, 30, COLOR_TEXT, size=24, bold=True)

        session = get_session(world)
        if session is not None:
            final = []
            if score is not None:
                final.append(f"Final Score: {score.display}")
                if score.winner:
                    final.append(f"{score.winner.title()} player wins!")
            draw_session_overlay(
                frame,
                session,
                self.config,
                instructions=("Left: W/S   Right: Up/Down", "First to score wins!"),
                game_over_lines=final,
            )
        return frame
