"""Rendering for the snake game."""
from esper import World

from retrocade.components.appearance import Appearance
from retrocade.components.grid_position import GridPosition
from retrocade.config import GameConfig
from retrocade.constants import CELL_SIZE
from retrocade.games.wormy.components import Food, Snake
from retrocade.rendering.frame import Frame
from retrocade.rendering.overlay import draw_session_overlay
from retrocade.utils.session import get_session

HEAD_COLOR = (170, 255, 120)
GRID_COLOR = (20, 20, 20)


class WormyRenderSystem:
    def __init__(self, config: GameConfig, cell: int = CELL_SIZE) -> None:
        self.config = config
        self.cell = cell

    def render(self, world: World) -> Frame:
        frame = Frame(self.config.canvas_width, self.config.canvas_height)
        cell = self.cell
        for x in range(0, frame.width + 1, cell):
            frame.line(x, 0, x, frame.height, GRID_COLOR)
        for y in range(0, frame.height + 1, cell):
            frame.line(0, y, frame.width, y, GRID_COLOR)

        for _, (pos, _food, look) in world.get_components(GridPosition, Food, Appearance):
            frame.circle(pos.x * cell + cell / 2, pos.y * cell + cell / 2, cell / 2 - 2, look.color)

        for _, (snake, look) in world.get_components(Snake, Appearance):
            for idx, (x, y) in enumerate(snake.segments):
                color = HEAD_COLOR if idx == 0 else look.color
                frame.rect(x * cell + 1, y * cell + 1, cell - 2, cell - 2, color)

        session = get_session(world)
        if session is not None:
            draw_session_overlay(
                frame,
                session,
                self.config,
                instructions=("Arrow keys to steer", "Eat food, avoid your tail"),
            )
        return frame
