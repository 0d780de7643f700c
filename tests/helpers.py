from __future__ import annotations

import random

from retrocade.engine.game_loop import GameLoop


class RecordingAudio:
    def __init__(self) -> None:
        self.beeps: list[tuple] = []

    def beep(self, frequency, duration_ms, waveform, volume) -> None:
        self.beeps.append((frequency, duration_ms, waveform, volume))


class RecordingEffects:
    def __init__(self) -> None:
        self.celebrations: list[tuple] = []

    def celebrate(self, kind, x, y) -> None:
        self.celebrations.append((kind, x, y))


class RecordingHost:
    """Host double that logs every call in order."""

    def __init__(self, *, audio=None, effects=None) -> None:
        self.audio = audio
        self.effects = effects
        self.calls: list[tuple] = []

    def update_score(self, score) -> None:
        self.calls.append(("score", score))

    def update_lives(self, lives) -> None:
        self.calls.append(("lives", lives))

    def update_level(self, level) -> None:
        self.calls.append(("level", level))

    def show_status(self, text, level) -> None:
        self.calls.append(("show_status", text, level))

    def hide_status(self) -> None:
        self.calls.append(("hide_status",))

    def of(self, kind: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == kind]

    def last(self, kind: str):
        matching = self.of(kind)
        return matching[-1][1] if matching else None


class ManualScheduler:
    """Scheduler double; tests drive ticks by hand."""

    def __init__(self) -> None:
        self.scheduled: list[tuple] = []
        self.unscheduled: list = []
        self.active = None

    def schedule(self, callback, interval) -> None:
        self.scheduled.append((callback, interval))
        self.active = (callback, interval)

    def unschedule(self, callback) -> None:
        self.unscheduled.append(callback)
        self.active = None

    @property
    def interval(self):
        return self.active[1] if self.active else None


def start_game(cls: type[GameLoop], *, seed: int = 0, host=None, start: bool = True, **kwargs) -> GameLoop:
    """Build, init and (by default) start a game with test doubles."""
    game = cls(
        host if host is not None else RecordingHost(),
        scheduler=ManualScheduler(),
        rng=random.Random(seed),
        **kwargs,
    )
    game.init()
    if start:
        game.start()
    return game
