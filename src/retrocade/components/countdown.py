from dataclasses import dataclass


@dataclass(slots=True)
class Countdown:
    """Game-time timer; ``expired`` flips once ``remaining`` reaches zero."""
    remaining: float
    total: float = 0.0
    expired: bool = False

    def __post_init__(self) -> None:
        if not self.total:
            self.total = self.remaining
