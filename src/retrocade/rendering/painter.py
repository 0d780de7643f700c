"""Paints a Frame into the active arcade window."""
from __future__ import annotations

from retrocade.rendering.frame import CircleShape, Frame, LineShape, RectShape, TextShape


class ArcadePainter:
    """Draws frame shapes with arcade primitives.

    Frames use a top-left origin; arcade's origin is bottom-left, so every y is
    flipped against ``frame.height``. ``offset_y`` lifts the canvas above a HUD.
    """

    def __init__(self, offset_x: float = 0.0, offset_y: float = 0.0) -> None:
        self.offset_x = offset_x
        self.offset_y = offset_y

    def paint(self, frame: Frame) -> None:
        import arcade

        height = frame.height
        ox, oy = self.offset_x, self.offset_y
        arcade.draw_lrbt_rectangle_filled(ox, ox + frame.width, oy, oy + height, frame.background)
        for shape in frame:
            if isinstance(shape, RectShape):
                left = ox + shape.x
                right = left + shape.width
                top = oy + height - shape.y
                bottom = top - shape.height
                if shape.filled:
                    arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, shape.color)
                else:
                    arcade.draw_lrbt_rectangle_outline(
                        left, right, bottom, top, shape.color, shape.border_width
                    )
            elif isinstance(shape, CircleShape):
                arcade.draw_circle_filled(ox + shape.cx, oy + height - shape.cy, shape.radius, shape.color)
            elif isinstance(shape, LineShape):
                arcade.draw_line(
                    ox + shape.x1,
                    oy + height - shape.y1,
                    ox + shape.x2,
                    oy + height - shape.y2,
                    shape.color,
                    shape.width,
                )
            elif isinstance(shape, TextShape):
                arcade.draw_text(
                    shape.text,
                    ox + shape.x,
                    oy + height - shape.y,
                    shape.color,
                    shape.size,
                    anchor_x=shape.anchor_x,
                    anchor_y=shape.anchor_y,
                    bold=shape.bold,
                )
