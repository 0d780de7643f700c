"""Factory helpers for the frog and the traffic lanes."""
from esper import World

from retrocade.components.appearance import Appearance
from retrocade.components.body import Body
from retrocade.components.grid_position import GridPosition
from retrocade.games.road_dash.components import Frog, Road, TrafficTuning, Vehicle

FROG_COLOR = (0, 255, 0)
VEHICLE_COLORS = (
    (255, 0, 0),
    (255, 128, 0),
    (255, 255, 0),
    (0, 255, 255),
    (255, 0, 255),
)


def spawn_frog(world: World, road: Road) -> int:
    x, y = road.cols // 2, road.rows - 1
    return world.create_entity(Frog(x, y), GridPosition(x, y), Appearance(FROG_COLOR))


def spawn_traffic(world: World, road: Road, base_speed: float) -> list[int]:
    """Fill every lane between the kerbs with one to three vehicles."""
    rng = world.random
    created = []
    for lane in range(1, road.rows - 1):
        direction = 1 if rng.random() > 0.5 else -1
        for _ in range(rng.randint(1, 3)):
            width = rng.randint(2, 4)
            speed = (rng.random() * 0.5 + 0.5) * base_speed
            created.append(
                world.create_entity(
                    Vehicle(direction),
                    Body(rng.uniform(0, road.cols), lane, width, 1, dx=speed * direction),
                    Appearance(rng.choice(VEHICLE_COLORS)),
                )
            )
    return created


def clear_traffic(world: World) -> None:
    for ent, _ in list(world.get_component(Vehicle)):
        world.delete_entity(ent, immediate=True)


def spawn_road(world: World, road: Road, tuning: TrafficTuning) -> None:
    world.create_entity(tuning)
    spawn_frog(world, road)
    spawn_traffic(world, road, tuning.base_speed)
