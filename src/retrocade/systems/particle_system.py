from esper import World

from retrocade.components.particle import Particle
from retrocade.systems.base_processor import PlayingProcessor


def burst(world: World, x: float, y: float, *, count: int = 10, spread: float = 10.0,
          color: tuple[int, int, int] = (255, 255, 0)) -> list[int]:
    """Spawn ``count`` particles flying out of (x, y) at up to ``spread`` units per second."""
    rng = world.random
    return [
        world.create_entity(
            Particle(
                x=x,
                y=y,
                dx=(rng.random() - 0.5) * spread,
                dy=(rng.random() - 0.5) * spread,
                color=color,
            )
        )
        for _ in range(count)
    ]


class ParticleSystem(PlayingProcessor):
    """Moves particles and removes them once they have faded out."""

    def step(self, dt: float) -> None:
        for ent, particle in list(self.world.get_component(Particle)):
            particle.x += particle.dx * dt
            particle.y += particle.dy * dt
            particle.life -= particle.fade * dt
            if particle.life <= 0:
                self.world.delete_entity(ent, immediate=True)
