"""Rendering for the road-crossing game."""
from esper import World

from retrocade.components.appearance import Appearance
from retrocade.components.body import Body
from retrocade.components.grid_position import GridPosition
from retrocade.config import GameConfig
from retrocade.constants import CELL_SIZE
from retrocade.games.road_dash.components import Frog, Vehicle
from retrocade.rendering.frame import Frame
from retrocade.rendering.overlay import draw_session_overlay
from retrocade.utils.session import get_session

KERB_COLOR = (0, 90, 0)
ROAD_COLOR = (40, 40, 40)
LANE_MARK_COLOR = (90, 90, 90)


class RoadDashRenderSystem:
    def __init__(self, config: GameConfig, scale: int = CELL_SIZE) -> None:
        self.config = config
        self.scale = scale

    def render(self, world: World) -> Frame:
        frame = Frame(self.config.canvas_width, self.config.canvas_height)
        s = self.scale
        rows = frame.height // s
        frame.rect(0, 0, frame.width, s, KERB_COLOR)
        frame.rect(0, s, frame.width, (rows - 2) * s, ROAD_COLOR)
        frame.rect(0, (rows - 1) * s, frame.width, s, KERB_COLOR)
        for lane in range(2, rows - 1):
            frame.line(0, lane * s, frame.width, lane * s, LANE_MARK_COLOR)

        for _, (_vehicle, body, look) in world.get_components(Vehicle, Body, Appearance):
            frame.rect(body.x * s, body.y * s + 2, body.width * s, body.height * s - 4, look.color)
        for _, (_frog, pos, look) in world.get_components(Frog, GridPosition, Appearance):
            frame.rect(pos.x * s + 2, pos.y * s + 2, s - 4, s - 4, look.color)

        session = get_session(world)
        if session is not None:
            draw_session_overlay(
                frame,
                session,
                self.config,
                instructions=("Arrow keys hop", "Reach the top to complete the level"),
                game_over_lines=(f"Final Score: {session.score}", f"Level Reached: {session.level}"),
            )
        return frame
