from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from memorymatch.storage.leaderboard_store import LeaderboardEntry


@dataclass(slots=True)
class Leaderboard:
    """Entries currently shown; may differ from disk after a failed write."""

    entries: List[LeaderboardEntry] = field(default_factory=list)
    persisted: bool = True
