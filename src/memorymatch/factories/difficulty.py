from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

from memorymatch.errors import ConfigurationError


@dataclass(frozen=True)
class DifficultyConfig:
    slug: str
    name: str
    grid_size: int
    symbols: Sequence[str]

    @property
    def total_pairs(self) -> int:
        return (self.grid_size * self.grid_size) // 2

    @property
    def card_count(self) -> int:
        return self.grid_size * self.grid_size

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if this preset cannot produce a deck."""
        if isinstance(self.grid_size, bool) or not isinstance(self.grid_size, int):
            raise ConfigurationError(f"{self.slug}: grid size must be an integer")
        if self.grid_size < 2 or self.grid_size % 2:
            raise ConfigurationError(
                f"{self.slug}: grid size must be even and at least 2, got {self.grid_size}"
            )
        if len(set(self.symbols)) != len(self.symbols):
            raise ConfigurationError(f"{self.slug}: symbols must be distinct")
        if self.total_pairs > len(self.symbols):
            raise ConfigurationError(
                f"{self.slug}: {self.total_pairs} pairs needed but only "
                f"{len(self.symbols)} symbols available"
            )


_FRUIT = ("🍎", "🍌", "🍇", "🍒", "🍉", "🍍", "🥝", "🍑")
_MORE_FRUIT = ("🍊", "🍋", "🍐", "🥭", "🍓", "🫐", "🥥", "🍈", "🍏", "🍅")
_PANTRY = (
    "🥕", "🌽", "🥔", "🍠", "🥜", "🌰", "🍯", "🥛",
    "🍼", "🧀", "🥚", "🍳", "🥞", "🥨",
)

_DIFFICULTY_CONFIGS: Mapping[str, DifficultyConfig] = {
    "easy": DifficultyConfig(
        slug="easy",
        name="Easy",
        grid_size=4,
        symbols=_FRUIT,
    ),
    "medium": DifficultyConfig(
        slug="medium",
        name="Medium",
        grid_size=6,
        symbols=_FRUIT + _MORE_FRUIT,
    ),
    "hard": DifficultyConfig(
        slug="hard",
        name="Hard",
        grid_size=8,
        symbols=_FRUIT + _MORE_FRUIT + _PANTRY,
    ),
}


def all_difficulty_configs() -> Iterable[DifficultyConfig]:
    return _DIFFICULTY_CONFIGS.values()


def difficulty_slugs() -> tuple[str, ...]:
    return tuple(_DIFFICULTY_CONFIGS)


def get_difficulty_config(slug: str) -> DifficultyConfig:
    """Look up a preset by slug, raising ``ConfigurationError`` when unknown."""
    try:
        return _DIFFICULTY_CONFIGS[slug]
    except (KeyError, TypeError):
        raise ConfigurationError(f"Invalid difficulty: {slug}") from None


def difficulty_display_name(slug: str) -> str:
    config = _DIFFICULTY_CONFIGS.get(slug)
    return config.name if config is not None else slug
