"""Components for the control bar (difficulty picker and new-game button)."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from memorymatch.constants import CONTROL_BUTTON_HEIGHT, CONTROL_BUTTON_WIDTH


class MenuAction(Enum):
    """Actions that a control button can trigger."""
    NEW_GAME = auto()
    SELECT_DIFFICULTY = auto()


@dataclass
class MenuButton:
    """Interactive button drawn in the control bar; (x, y) is its centre."""
    label: str
    action: MenuAction
    x: float
    y: float
    width: float = CONTROL_BUTTON_WIDTH
    height: float = CONTROL_BUTTON_HEIGHT
    enabled: bool = True
    difficulty: Optional[str] = None

    def contains(self, x: float, y: float) -> bool:
        half_w = self.width / 2
        half_h = self.height / 2
        return (
            self.x - half_w <= x <= self.x + half_w
            and self.y - half_h <= y <= self.y + half_h
        )


@dataclass
class MenuTag:
    """Marker component so control entities can be cleaned up together."""
    pass
