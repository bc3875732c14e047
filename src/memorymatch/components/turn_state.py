from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class TurnPhase(Enum):
    IDLE = auto()
    ONE_SELECTED = auto()
    RESOLVING = auto()
    WON = auto()


@dataclass(slots=True)
class TurnState:
    """Per-session turn bookkeeping shared by the turn and session systems.

    ``generation`` is bumped on every reset so deferred actions scheduled in an
    earlier session can tell they are stale.
    """

    first_selection: Optional[int] = None
    second_selection: Optional[int] = None
    locked: bool = False
    matched_pairs: int = 0
    move_count: int = 0
    total_pairs: int = 0
    phase: TurnPhase = TurnPhase.IDLE
    generation: int = 0
    started: bool = False
