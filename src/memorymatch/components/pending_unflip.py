from dataclasses import dataclass


@dataclass(slots=True)
class PendingUnflip:
    """A mismatched pair waiting to be turned face down again."""
    first: int
    second: int
    remaining: float
    generation: int
