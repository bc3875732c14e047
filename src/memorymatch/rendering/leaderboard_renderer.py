from __future__ import annotations

from typing import Iterable, List

from memorymatch.factories.difficulty import difficulty_display_name
from memorymatch.storage.leaderboard_store import LeaderboardEntry

LINE_HEIGHT = 22


def format_leaderboard_entry(position: int, entry: LeaderboardEntry) -> str:
    difficulty = f" ({difficulty_display_name(entry.difficulty)})" if entry.difficulty else ""
    timestamp = entry.timestamp or "Unknown"
    return f"#{position}: {entry.moves} moves in {entry.time_seconds}s{difficulty} ({timestamp})"


def format_leaderboard_lines(entries: Iterable[LeaderboardEntry]) -> List[str]:
    return [format_leaderboard_entry(position, entry) for position, entry in enumerate(entries, start=1)]


class LeaderboardRenderer:
    def render(self, arcade, lines: List[str], left: float, top: float) -> None:
        arcade.draw_text("Leaderboard", left, top, arcade.color.GOLD, 18, bold=True)
        y = top - LINE_HEIGHT * 1.5
        if not lines:
            arcade.draw_text("No games recorded yet", left, y, arcade.color.LIGHT_GRAY, 12)
            return
        for line in lines:
            arcade.draw_text(line, left, y, arcade.color.WHITE, 12)
            y -= LINE_HEIGHT
