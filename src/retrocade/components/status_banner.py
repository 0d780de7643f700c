from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class StatusBanner:
    """Host status line currently shown; ``remaining`` counts down in game time."""
    text: str
    level: str = "info"
    remaining: Optional[float] = None
