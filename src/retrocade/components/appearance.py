from dataclasses import dataclass


@dataclass(slots=True)
class Appearance:
    color: tuple[int, int, int] = (255, 255, 255)
    label: str = ""
