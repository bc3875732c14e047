from __future__ import annotations

from typing import Sequence

from esper import World

from memorymatch.components.board import Board
from memorymatch.events.bus import EVENT_TICK, EventBus
from memorymatch.factories.deck import spawn_cards
from memorymatch.utils.game_state import get_or_create_turn_state


def identity_shuffle(items, rng=None):
    """Shuffle stand-in that keeps deck order so tests can address cards by index."""
    return list(items)


def drive_ticks(bus: EventBus, n: int = 1, dt: float = 0.25) -> None:
    for _ in range(n):
        bus.emit(EVENT_TICK, dt=dt)


def setup_board(world: World, deck: Sequence[str], difficulty: str = "easy") -> list[int]:
    """Lay ``deck`` out on a square board without going through the session system."""
    grid_size = int(len(deck) ** 0.5)
    assert grid_size * grid_size == len(deck), "deck must fill a square grid"
    world.create_entity(Board(grid_size=grid_size, difficulty=difficulty))
    state = get_or_create_turn_state(world)
    state.total_pairs = len(deck) // 2
    return spawn_cards(world, deck, grid_size)
