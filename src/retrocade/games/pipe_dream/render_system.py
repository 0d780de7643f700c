"""Rendering for the pipe puzzle."""
from esper import World

from retrocade.components.countdown import Countdown
from retrocade.components.grid_position import GridPosition
from retrocade.config import GameConfig
from retrocade.constants import COLOR_TEXT
from retrocade.games.pipe_dream.components import Pipe, PipeGrid, PipeKind
from retrocade.rendering.frame import Frame, hex_color
from retrocade.rendering.overlay import draw_session_overlay
from retrocade.utils.session import get_session

GRID_COLOR = hex_color("#333333")
PIPE_COLOR = hex_color("#888888")
WATER_COLOR = hex_color("#00aaff")
START_COLOR = hex_color("#00ff00")
END_COLOR = hex_color("#ff0000")
SELECTED_COLOR = hex_color("#ffff00")


class PipeDreamRenderSystem:
    def __init__(self, config: GameConfig) -> None:
        self.config = config

    def render(self, world: World) -> Frame:
        frame = Frame(self.config.canvas_width, self.config.canvas_height)
        grid = None
        for _, grid in world.get_component(PipeGrid):
            break
        if grid is not None:
            self._board(frame, grid)
            for _, (pos, pipe) in world.get_components(GridPosition, Pipe):
                self._pipe(frame, grid, pos, pipe)
            if grid.selected is not None:
                sx, sy = grid.selected
                frame.rect(grid.origin_x + sx * grid.tile, grid.origin_y + sy * grid.tile,
                           grid.tile, grid.tile, SELECTED_COLOR, filled=False, border_width=2)

        for _, countdown in world.get_component(Countdown):
            frame.text(f"Time: {int(countdown.remaining + 0.999)}", 10, 20, COLOR_TEXT,
                       size=16, anchor_x="left")

        session = get_session(world)
        if session is not None:
            frame.text(f"Level: {session.level}", frame.width - 10, 20, COLOR_TEXT,
                       size=16, anchor_x="right")
            draw_session_overlay(
                frame,
                session,
                self.config,
                instructions=("Click a pipe to rotate it", "Connect the green source to the red drain"),
            )
        return frame

    def _board(self, frame: Frame, grid: PipeGrid) -> None:
        span = grid.size * grid.tile
        for i in range(grid.size + 1):
            offset = i * grid.tile
            frame.line(grid.origin_x + offset, grid.origin_y, grid.origin_x + offset, grid.origin_y + span, GRID_COLOR)
            frame.line(grid.origin_x, grid.origin_y + offset, grid.origin_x + span, grid.origin_y + offset, GRID_COLOR)

    def _pipe(self, frame: Frame, grid: PipeGrid, pos: GridPosition, pipe: Pipe) -> None:
        t = grid.tile
        cx = grid.origin_x + pos.x * t + t / 2
        cy = grid.origin_y + pos.y * t + t / 2
        if pipe.kind == PipeKind.START:
            color = START_COLOR
        elif pipe.kind == PipeKind.END:
            color = END_COLOR
        elif pos.as_tuple() in grid.flow:
            color = WATER_COLOR
        else:
            color = PIPE_COLOR
        for side in sorted(pipe.openings, key=lambda d: d.name):
            frame.line(cx, cy, cx + side.dx * t / 2, cy + side.dy * t / 2, color, width=t / 5)
        frame.circle(cx, cy, t / 10, color)
