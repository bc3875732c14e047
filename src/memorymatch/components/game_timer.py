from dataclasses import dataclass


@dataclass(slots=True)
class GameTimer:
    elapsed_seconds: int = 0
    running: bool = False
    carry: float = 0.0  # fraction of a second accumulated since the last whole-second step
