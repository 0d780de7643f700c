"""Rendering for the maze chase game."""
from esper import World

from retrocade.components.grid_position import GridPosition
from retrocade.config import GameConfig
from retrocade.constants import CELL_SIZE, COLOR_TEXT
from retrocade.games.chompy.components import Chomper, Ghost, GhostMode, MazeBoard, Pellet, PelletKind
from retrocade.rendering.frame import Frame, hex_color
from retrocade.rendering.overlay import draw_session_overlay
from retrocade.utils.session import get_session

WALL_COLOR = hex_color("#2121ff")
DOOR_COLOR = hex_color("#ffb8ff")
DOT_COLOR = hex_color("#ffff00")
PLAYER_COLOR = hex_color("#ffff00")
FRIGHTENED_COLOR = hex_color("#2121de")
FLASH_COLOR = (255, 255, 255)


class ChompyRenderSystem:
    def __init__(self, config: GameConfig, tile: int = CELL_SIZE) -> None:
        self.config = config
        self.tile = tile

    def render(self, world: World) -> Frame:
        frame = Frame(self.config.canvas_width, self.config.canvas_height)
        t = self.tile
        half = t / 2
        fright_left = 0.0
        for _, (maze_board, mode) in world.get_components(MazeBoard, GhostMode):
            maze = maze_board.maze
            fright_left = mode.fright_remaining
            for x, y in sorted(maze.walls, key=lambda tile: (tile[1], tile[0])):
                frame.rect(x * t, y * t, t, t, WALL_COLOR)
            for x, y in sorted(maze.doors):
                frame.rect(x * t, y * t + t / 2 - 2, t, 4, DOOR_COLOR)

        for _, (pos, pellet) in world.get_components(GridPosition, Pellet):
            radius = 6 if pellet.kind == PelletKind.POWER else 2
            frame.circle(pos.x * t + half, pos.y * t + half, radius, DOT_COLOR)

        for _, (pos, ghost) in world.get_components(GridPosition, Ghost):
            color = ghost.color
            if ghost.frightened:
                # Flash during the last two seconds.
                flashing = fright_left < 2.0 and int(fright_left * 4) % 2 == 0
                color = FLASH_COLOR if flashing else FRIGHTENED_COLOR
            frame.circle(pos.x * t + half, pos.y * t + half, half - 1, color)

        for _, (pos, _player) in world.get_components(GridPosition, Chomper):
            frame.circle(pos.x * t + half, pos.y * t + half, half - 1, PLAYER_COLOR)

        session = get_session(world)
        if session is not None:
            frame.text(f"Level {session.level}", 6, frame.height - 10, COLOR_TEXT,
                       size=12, anchor_x="left")
            draw_session_overlay(
                frame,
                session,
                self.config,
                instructions=("Arrow keys to move", "Power pellets turn the ghosts blue"),
            )
        return frame
