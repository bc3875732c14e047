from dataclasses import dataclass


@dataclass(slots=True)
class Card:
    """Per-card face state.

    symbol: the emoji hidden on the card.
    face_up: True while the symbol is visible.
    matched: True once the card's pair has been found; matched cards stay face up.
    """
    symbol: str
    face_up: bool = False
    matched: bool = False


@dataclass(slots=True)
class CardSlot:
    """Board placement of a card; ``index`` is row-major."""
    index: int
    row: int
    col: int
