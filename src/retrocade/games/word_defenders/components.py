"""Components used by the spelling defence game. Units are canvas pixels."""
from dataclasses import dataclass


@dataclass
class FallingLetter:
    char: str
    index: int


@dataclass
class WordTarget:
    word: str = ""
    typed: str = ""
