"""Game state resource describing the active high-level mode."""
from dataclasses import dataclass
from enum import Enum, auto

from memorymatch.constants import DEFAULT_DIFFICULTY


class GameMode(Enum):
    """High-level game modes."""
    PLAYING = auto()
    WON = auto()


@dataclass
class GameState:
    """Singleton component storing the active mode and difficulty slug."""
    mode: GameMode = GameMode.PLAYING
    difficulty: str = DEFAULT_DIFFICULTY
