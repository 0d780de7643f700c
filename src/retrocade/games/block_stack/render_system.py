"""Rendering for the block stacking game."""
from esper import World

from retrocade.config import GameConfig
from retrocade.constants import COLOR_TEXT
from retrocade.games.block_stack.components import ActivePiece, NextPiece, Playfield
from retrocade.games.block_stack.pieces import PIECES
from retrocade.rendering.frame import Frame
from retrocade.rendering.overlay import draw_session_overlay
from retrocade.utils.session import get_session

GRID_COLOR = (25, 25, 25)
PREVIEW_BORDER = (0, 255, 0)


def _lighten(color, amount: float = 0.3):
    return tuple(min(255, int(c + (255 - c) * amount)) for c in color[:3])


class BlockStackRenderSystem:
    def __init__(self, config: GameConfig, block: int = 24) -> None:
        self.config = config
        self.block = block

    def _block(self, frame: Frame, col: int, row: int, color) -> None:
        b = self.block
        frame.rect(col * b, row * b, b, b, color)
        frame.rect(col * b, row * b, b, 3, _lighten(color))

    def render(self, world: World) -> Frame:
        frame = Frame(self.config.canvas_width, self.config.canvas_height)
        b = self.block
        lines = 0
        for _, field in world.get_component(Playfield):
            lines = field.lines
            for x in range(field.cols + 1):
                frame.line(x * b, 0, x * b, field.rows * b, GRID_COLOR)
            for row, cells in enumerate(field.cells):
                for col, color in enumerate(cells):
                    if color is not None:
                        self._block(frame, col, row, color)
        for _, piece in world.get_component(ActivePiece):
            for col, row in piece.cells():
                self._block(frame, col, row, piece.color)

        for _, upcoming in world.get_component(NextPiece):
            shape, color = PIECES[upcoming.kind]
            mini = b // 2
            left = frame.width - 4 * mini - 6
            frame.rect(left - 3, 3, 4 * mini + 6, 3 * mini + 6, PREVIEW_BORDER, filled=False)
            for r, line in enumerate(shape):
                for c, filled in enumerate(line):
                    if filled:
                        frame.rect(left + c * mini, 6 + r * mini, mini - 1, mini - 1, color)
        frame.text(f"Lines: {lines}", 6, 14, COLOR_TEXT, size=10, anchor_x="left")

        session = get_session(world)
        if session is not None:
            draw_session_overlay(
                frame,
                session,
                self.config,
                instructions=("Left/Right move, Up rotates", "Down drops, SPACE slams"),
                game_over_lines=(f"Final Score: {session.score}", f"Lines Cleared: {lines}"),
            )
        return frame
