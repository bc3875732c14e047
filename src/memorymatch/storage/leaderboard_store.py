from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Collection, Iterable, List, Mapping

from memorymatch.constants import LEADERBOARD_KEY, MAX_LEADERBOARD_ENTRIES
from memorymatch.errors import ConfigurationError, InvalidInputError, StorageError
from memorymatch.storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LeaderboardEntry:
    moves: int
    time_seconds: int
    timestamp: str
    difficulty: str
    grid_size: int

    def sort_key(self) -> tuple[int, int]:
        return self.moves, self.time_seconds

    def to_dict(self) -> dict[str, Any]:
        return {
            "moves": self.moves,
            "time": self.time_seconds,
            "timestamp": self.timestamp,
            "difficulty": self.difficulty,
            "gridSize": self.grid_size,
        }

    @classmethod
    def from_dict(cls, payload: Any) -> "LeaderboardEntry":
        """Parse one stored object; raises ``InvalidInputError`` when malformed."""
        if not isinstance(payload, Mapping):
            raise InvalidInputError("entry is not an object")
        moves = payload.get("moves")
        time_seconds = payload.get("time")
        if not _is_count(moves):
            raise InvalidInputError(f"invalid moves value {moves!r}")
        if not _is_count(time_seconds):
            raise InvalidInputError(f"invalid time value {time_seconds!r}")
        grid_size = payload.get("gridSize", 0)
        if not _is_count(grid_size):
            grid_size = 0
        return cls(
            moves=int(moves),
            time_seconds=int(time_seconds),
            timestamp=str(payload.get("timestamp") or "Unknown"),
            difficulty=str(payload.get("difficulty") or ""),
            grid_size=int(grid_size),
        )


def _is_count(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return value.is_integer() and value >= 0
    return isinstance(value, int) and value >= 0


@dataclass(slots=True)
class StoreResult:
    """Entries produced by a store operation plus the error it ran into, if any."""

    entries: List[LeaderboardEntry] = field(default_factory=list)
    error: StorageError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def sort_entries(
    entries: Iterable[LeaderboardEntry],
    limit: int = MAX_LEADERBOARD_ENTRIES,
) -> List[LeaderboardEntry]:
    """Best first: fewest moves, then shortest time. Stable for equal scores."""
    ordered = sorted(entries, key=LeaderboardEntry.sort_key)
    return ordered[:limit]


class LeaderboardStore:
    """Persists the top entries as a JSON array under a single key."""

    def __init__(
        self,
        store: KeyValueStore,
        *,
        key: str = LEADERBOARD_KEY,
        max_entries: int = MAX_LEADERBOARD_ENTRIES,
        known_difficulties: Collection[str] | None = None,
        reporter: Callable[[str, Exception], None] | None = None,
    ) -> None:
        self._store = store
        self.key = key
        self.max_entries = max_entries
        self._known_difficulties = known_difficulties
        self._reporter = reporter

    def read(self) -> StoreResult:
        try:
            raw = self._store.get_item(self.key)
        except StorageError as exc:
            return StoreResult(error=exc)
        if not raw:
            return StoreResult()
        try:
            payload = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            return StoreResult(error=self._wrap("Leaderboard data is not valid JSON", exc))
        if not isinstance(payload, list):
            return StoreResult(error=StorageError("Invalid leaderboard data format"))
        entries: List[LeaderboardEntry] = []
        rejected: List[str] = []
        for index, item in enumerate(payload):
            try:
                entries.append(LeaderboardEntry.from_dict(item))
            except InvalidInputError as exc:
                rejected.append(f"#{index + 1}: {exc}")
        error = None
        if rejected:
            error = StorageError("Dropped invalid leaderboard entries (" + "; ".join(rejected) + ")")
        return StoreResult(entries=entries, error=error)

    def load(self) -> List[LeaderboardEntry]:
        """Return the stored entries; corruption is reported, never raised."""
        result = self.read()
        if result.error is not None:
            self._report("Failed to load leaderboard from storage", result.error)
        return result.entries

    def save(self, entry: LeaderboardEntry) -> StoreResult:
        """Insert ``entry`` and persist the best ``max_entries`` results.

        The returned entries are the computed board even when the write
        failed; ``error`` then carries the write failure. A corrupt existing
        value is reported and treated as empty.
        """
        self.validate(entry)
        current = self.read()
        if current.error is not None:
            self._report("Failed to load existing leaderboard", current.error)
        entries = sort_entries([*current.entries, entry], self.max_entries)
        encoded = json.dumps([item.to_dict() for item in entries], ensure_ascii=False)
        try:
            self._store.set_item(self.key, encoded)
        except StorageError as exc:
            self._report("Failed to save leaderboard to storage", exc)
            return StoreResult(entries=entries, error=exc)
        return StoreResult(entries=entries)

    def validate(self, entry: LeaderboardEntry) -> None:
        if not _is_count(entry.moves):
            raise InvalidInputError("Invalid moves value")
        if not _is_count(entry.time_seconds):
            raise InvalidInputError("Invalid time value")
        if self._known_difficulties is not None and entry.difficulty not in self._known_difficulties:
            raise ConfigurationError(f"Invalid difficulty value: {entry.difficulty}")

    @staticmethod
    def _wrap(message: str, exc: Exception) -> StorageError:
        error = StorageError(message)
        error.__cause__ = exc
        return error

    def _report(self, message: str, exc: Exception) -> None:
        logger.warning("%s: %s", message, exc)
        if self._reporter is not None:
            self._reporter(message, exc)
