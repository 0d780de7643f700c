"""Host collaborator contract: where a game reports score, lives and status."""
from __future__ import annotations

from typing import Optional, Protocol


class AudioSink(Protocol):
    def beep(self, frequency: int, duration_ms: int, waveform: str, volume: float) -> None:
        ...


class CelebrationSink(Protocol):
    def celebrate(self, kind: str, x: float | None, y: float | None) -> None:
        ...


class GameHost(Protocol):
    """Everything a game calls on its surroundings.

    ``audio`` and ``effects`` may be None when the host carries no such module.
    """
    audio: Optional[AudioSink]
    effects: Optional[CelebrationSink]

    def update_score(self, score) -> None:
        ...

    def update_lives(self, lives: int) -> None:
        ...

    def update_level(self, level: int) -> None:
        ...

    def show_status(self, text: str, level: str) -> None:
        ...

    def hide_status(self) -> None:
        ...


class NullHost:
    """Host that keeps the last reported values and draws nothing."""

    def __init__(self) -> None:
        self.audio: Optional[AudioSink] = None
        self.effects: Optional[CelebrationSink] = None
        self.score = 0
        self.lives = 0
        self.level = 1
        self.status: tuple[str, str] | None = None

    def update_score(self, score) -> None:
        self.score = score

    def update_lives(self, lives: int) -> None:
        self.lives = lives

    def update_level(self, level: int) -> None:
        self.level = level

    def show_status(self, text: str, level: str) -> None:
        self.status = (text, level)

    def hide_status(self) -> None:
        self.status = None
