"""Rendering for the spelling defence game."""
from esper import World

from retrocade.components.appearance import Appearance
from retrocade.components.body import Body
from retrocade.config import GameConfig
from retrocade.constants import COLOR_TEXT
from retrocade.games.word_defenders.components import FallingLetter
from retrocade.games.word_defenders.systems import word_target
from retrocade.rendering.frame import Frame
from retrocade.rendering.overlay import draw_session_overlay
from retrocade.utils.session import get_session

WORD_COLOR = (255, 255, 0)
TYPED_COLOR = (0, 255, 0)


class WordDefendersRenderSystem:
    def __init__(self, config: GameConfig) -> None:
        self.config = config

    def render(self, world: World) -> Frame:
        frame = Frame(self.config.canvas_width, self.config.canvas_height)
        target = word_target(world)
        if target is not None:
            frame.text(target.word, frame.width / 2, 50, WORD_COLOR, size=32, bold=True)
        for _, (_letter, body, look) in world.get_components(FallingLetter, Body, Appearance):
            frame.rect(body.x, body.y, body.width, body.height, look.color, filled=False, border_width=2)
            frame.text(look.label, body.center_x, body.center_y, look.color, size=20, bold=True)
        if target is not None:
            frame.text(f"Typed: {target.typed}", frame.width / 2, frame.height - 50, TYPED_COLOR, size=20)
        frame.text("Type the word before letters reach bottom!", frame.width / 2, frame.height - 20,
                   COLOR_TEXT, size=12)

        session = get_session(world)
        if session is not None:
            draw_session_overlay(
                frame,
                session,
                self.config,
                instructions=("Type the word shown at the top", "SPACE pauses"),
                game_over_lines=(f"Final Score: {session.score}", f"Level Reached: {session.level}"),
            )
        return frame
