from __future__ import annotations

import random
from typing import Callable, List, Sequence

from esper import World

from memorymatch.components.card import Card, CardSlot
from memorymatch.factories.difficulty import DifficultyConfig
from memorymatch.utils.shuffle import shuffle

ShuffleFn = Callable[[Sequence[str], random.Random | None], List[str]]


def build_deck(
    config: DifficultyConfig,
    *,
    rng: random.Random | None = None,
    shuffle_fn: ShuffleFn = shuffle,
) -> List[str]:
    """Return ``grid_size**2`` symbols where each chosen symbol appears twice.

    Raises ``ConfigurationError`` when the preset cannot fill the grid.
    """
    config.validate()
    chosen = list(config.symbols[: config.total_pairs])
    return list(shuffle_fn(chosen + chosen, rng))


def spawn_cards(world: World, deck: Sequence[str], grid_size: int) -> List[int]:
    """Create one face-down card entity per symbol, laid out row-major."""
    entities: List[int] = []
    for index, symbol in enumerate(deck):
        row, col = divmod(index, grid_size)
        entities.append(world.create_entity(Card(symbol=symbol), CardSlot(index=index, row=row, col=col)))
    return entities
