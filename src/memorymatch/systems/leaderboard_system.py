from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, List

from esper import World

from memorymatch.components.leaderboard import Leaderboard
from memorymatch.errors import MemoryMatchError
from memorymatch.events.bus import EVENT_GAME_WON, EVENT_LEADERBOARD_UPDATED, EventBus
from memorymatch.factories.difficulty import difficulty_slugs, get_difficulty_config
from memorymatch.storage.kv_store import JsonFileStore, KeyValueStore
from memorymatch.storage.leaderboard_store import LeaderboardEntry, LeaderboardStore
from memorymatch.utils.status import report_error

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class LeaderboardSystem:
    """Records finished runs and publishes the resulting top list."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        store: KeyValueStore | None = None,
        save_dir: Path | None = None,
        load_existing: bool = True,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._clock = clock or datetime.now
        backing = store if store is not None else JsonFileStore(save_dir)
        self.store = LeaderboardStore(
            backing,
            known_difficulties=difficulty_slugs(),
            reporter=self._report,
        )
        self.event_bus.subscribe(EVENT_GAME_WON, self._on_game_won)
        if load_existing:
            self.load()

    def _leaderboard(self) -> Leaderboard:
        for _, board in self.world.get_component(Leaderboard):
            return board
        board = Leaderboard()
        self.world.create_entity(board)
        return board

    @property
    def entries(self) -> List[LeaderboardEntry]:
        return list(self._leaderboard().entries)

    def load(self) -> List[LeaderboardEntry]:
        entries = self.store.load()
        self._publish(entries, persisted=True)
        return entries

    def record(self, moves: int, time_seconds: int, difficulty: str) -> List[LeaderboardEntry]:
        """Save a finished run; returns the list now shown to the player."""
        config = get_difficulty_config(difficulty)
        entry = LeaderboardEntry(
            moves=moves,
            time_seconds=time_seconds,
            timestamp=self._clock().strftime(TIMESTAMP_FORMAT),
            difficulty=config.slug,
            grid_size=config.grid_size,
        )
        result = self.store.save(entry)
        logger.info("Recorded %s run: %d moves in %ds", entry.difficulty, entry.moves, entry.time_seconds)
        self._publish(result.entries, persisted=result.ok)
        return result.entries

    def _on_game_won(self, sender, **payload) -> None:
        try:
            self.record(
                payload.get("moves"),
                payload.get("time_seconds"),
                payload.get("difficulty"),
            )
        except MemoryMatchError as exc:
            report_error(self.event_bus, "Failed to save to leaderboard", exc)

    def _publish(self, entries: List[LeaderboardEntry], *, persisted: bool) -> None:
        board = self._leaderboard()
        board.entries = list(entries)
        board.persisted = persisted
        self.event_bus.emit(EVENT_LEADERBOARD_UPDATED, entries=list(entries), persisted=persisted)

    def _report(self, message: str, exc: Exception) -> None:
        report_error(self.event_bus, message, exc)
