from retrocade.components.countdown import Countdown
from retrocade.systems.base_processor import PlayingProcessor
from retrocade.utils.session import end_session


class CountdownSystem(PlayingProcessor):
    """Runs every Countdown down in game time; the first to expire ends the session."""

    def step(self, dt: float) -> None:
        for _, countdown in self.world.get_component(Countdown):
            if countdown.expired:
                continue
            countdown.remaining = max(0.0, countdown.remaining - dt)
            if countdown.remaining <= 0:
                countdown.expired = True
                end_session(self.world, self.event_bus, reason="time_up")
                return
