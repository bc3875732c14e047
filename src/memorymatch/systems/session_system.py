from __future__ import annotations

import logging
import random
from typing import List

from esper import World

from memorymatch.components.board import Board
from memorymatch.components.card import Card
from memorymatch.components.game_state import GameMode
from memorymatch.components.pending_unflip import PendingUnflip
from memorymatch.components.status_message import StatusLevel
from memorymatch.components.turn_state import TurnPhase
from memorymatch.errors import ConfigurationError
from memorymatch.events.bus import (
    EVENT_DIFFICULTY_SELECTED,
    EVENT_GAME_WON,
    EVENT_MOVES_CHANGED,
    EVENT_NEW_GAME_REQUEST,
    EVENT_SESSION_STARTED,
    EVENT_TIMER_RESET,
    EventBus,
)
from memorymatch.factories.deck import ShuffleFn, build_deck, spawn_cards
from memorymatch.factories.difficulty import get_difficulty_config
from memorymatch.utils.entities import delete_entities, entities_with
from memorymatch.utils.game_state import get_game_state, get_or_create_turn_state, set_game_mode
from memorymatch.utils.shuffle import shuffle
from memorymatch.utils.status import report_error, show_status

logger = logging.getLogger(__name__)


class GameSessionSystem:
    """Owns the session lifecycle: deck build, reset and difficulty changes."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        rng: random.Random | None = None,
        shuffle_fn: ShuffleFn = shuffle,
        start_immediately: bool = True,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or getattr(world, "random", None)
        self._shuffle_fn = shuffle_fn
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self._on_new_game_request)
        self.event_bus.subscribe(EVENT_DIFFICULTY_SELECTED, self._on_difficulty_selected)
        self.event_bus.subscribe(EVENT_GAME_WON, self._on_game_won)
        if start_immediately:
            self.new_game()

    @property
    def difficulty(self) -> str:
        return get_game_state(self.world).difficulty

    def card_entities(self) -> List[int]:
        return entities_with(self.world, Card)

    def new_game(self) -> bool:
        """Start a fresh session at the current difficulty.

        Returns False (and leaves the running session untouched) when the
        difficulty preset cannot produce a deck.
        """
        game_state = get_game_state(self.world)
        try:
            config = get_difficulty_config(game_state.difficulty)
            deck = build_deck(config, rng=self._rng, shuffle_fn=self._shuffle_fn)
        except ConfigurationError as exc:
            report_error(self.event_bus, "Failed to start a new game", exc)
            return False

        state = get_or_create_turn_state(self.world)
        state.generation += 1
        state.first_selection = None
        state.second_selection = None
        state.locked = False
        state.matched_pairs = 0
        state.move_count = 0
        state.total_pairs = config.total_pairs
        state.phase = TurnPhase.IDLE
        state.started = False

        delete_entities(self.world, entities_with(self.world, PendingUnflip))
        delete_entities(self.world, entities_with(self.world, Card))
        delete_entities(self.world, entities_with(self.world, Board))
        self.event_bus.emit(EVENT_TIMER_RESET)

        self.world.create_entity(Board(grid_size=config.grid_size, difficulty=config.slug))
        cards = spawn_cards(self.world, deck, config.grid_size)
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        show_status(self.event_bus, "", StatusLevel.INFO)
        logger.info("Started %s game (generation %d)", config.slug, state.generation)
        self.event_bus.emit(
            EVENT_SESSION_STARTED,
            difficulty=config.slug,
            grid_size=config.grid_size,
            generation=state.generation,
            cards=cards,
        )
        self.event_bus.emit(EVENT_MOVES_CHANGED, moves=0)
        return True

    def select_difficulty(self, slug: str) -> bool:
        """Switch presets and restart; unknown slugs are rejected and reported."""
        try:
            config = get_difficulty_config(slug)
        except ConfigurationError as exc:
            report_error(self.event_bus, "Failed to change difficulty", exc)
            return False
        game_state = get_game_state(self.world)
        if config.slug == game_state.difficulty:
            return False
        previous = game_state.difficulty
        game_state.difficulty = config.slug
        if not self.new_game():
            game_state.difficulty = previous
            return False
        show_status(self.event_bus, f"Switched to {config.name} difficulty", StatusLevel.INFO)
        return True

    # Event handlers -----------------------------------------------------

    def _on_new_game_request(self, sender, **payload) -> None:
        self.new_game()

    def _on_difficulty_selected(self, sender, **payload) -> None:
        self.select_difficulty(payload.get("difficulty"))

    def _on_game_won(self, sender, **payload) -> None:
        set_game_mode(self.world, self.event_bus, GameMode.WON)
        moves = payload.get("moves", 0)
        seconds = payload.get("time_seconds", 0)
        show_status(self.event_bus, f"🎉 You won in {moves} moves and {seconds} seconds!", StatusLevel.SUCCESS)
