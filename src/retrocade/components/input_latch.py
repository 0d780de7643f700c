"""Latched player intent, overwritten by host input and drained by the tick."""
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional, Set

from retrocade.components.grid_position import Direction


@dataclass(slots=True)
class InputLatch:
    """Input intent for the next tick.

    ``direction`` is the discrete-direction latch (latest request wins), ``held``
    is the continuous-hold latch, ``presses`` are one-shot actions and typed
    characters queued until the next tick drains them.
    """
    direction: Optional[Direction] = None
    held: Set[str] = field(default_factory=set)
    presses: Deque[str] = field(default_factory=deque)
    pointer_presses: Deque[tuple[float, float]] = field(default_factory=deque)
    pointer_x: Optional[float] = None
    pointer_y: Optional[float] = None

    def drain_presses(self) -> list[str]:
        drained = list(self.presses)
        self.presses.clear()
        return drained

    def drain_pointer_presses(self) -> list[tuple[float, float]]:
        drained = list(self.pointer_presses)
        self.pointer_presses.clear()
        return drained

    def clear(self) -> None:
        self.direction = None
        self.held.clear()
        self.presses.clear()
        self.pointer_presses.clear()
        self.pointer_x = None
        self.pointer_y = None
