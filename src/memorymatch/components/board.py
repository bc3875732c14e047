from dataclasses import dataclass


@dataclass(slots=True)
class Board:
    grid_size: int
    difficulty: str

    @property
    def card_count(self) -> int:
        return self.grid_size * self.grid_size
