"""Tick sources. The loop only ever holds one live schedule."""
from __future__ import annotations

from typing import Callable, Protocol

TickCallback = Callable[[float], None]


class TickScheduler(Protocol):
    def schedule(self, callback: TickCallback, interval: float) -> None:
        ...

    def unschedule(self, callback: TickCallback) -> None:
        ...


class ArcadeScheduler:
    """Drives ticks from arcade's clock."""

    def schedule(self, callback: TickCallback, interval: float) -> None:
        import arcade

        arcade.schedule(callback, interval)

    def unschedule(self, callback: TickCallback) -> None:
        import arcade

        arcade.unschedule(callback)
