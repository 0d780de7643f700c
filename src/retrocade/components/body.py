from dataclasses import dataclass


@dataclass(slots=True)
class Body:
    """Axis-aligned box with a velocity, in the owning game's units.

    ``x``/``y`` is the top-left corner. Velocity is applied by the game's movement
    processor, either per tick or scaled by ``dt`` depending on the game.
    """
    x: float
    y: float
    width: float = 1.0
    height: float = 1.0
    dx: float = 0.0
    dy: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    def overlaps(self, other: "Body") -> bool:
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.bottom
            and self.bottom > other.y
        )
